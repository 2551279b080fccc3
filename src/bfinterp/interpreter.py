from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from .errors import (
    INSTRUCTIONS,
    make_invalid_instruction_error,
    make_pointer_range_error,
    make_unbalanced_loop_error,
)
from .sinks import ConsoleSink, OutputSink
from .state import MachineState, utf16_units

DEFAULT_MEMORY_WORDS = 30000

# one UTF-16 code unit, as String.fromCharCode
CHAR_RANGE = 0x10000

CompleteCallback = Callable[[str], None]


def is_code_char(ch: str) -> bool:
    return ch in INSTRUCTIONS


def strip_code(source: str) -> str:
    """Drop every character that is not one of the eight instructions."""
    return "".join(c for c in source if is_code_char(c))


def _check_memory_words(memory_words: int) -> None:
    if isinstance(memory_words, bool) or not isinstance(memory_words, int):
        raise ValueError(f"memory_words must be an int, got {memory_words!r}")
    if memory_words < 1:
        raise ValueError(f"memory_words must be positive, got {memory_words}")


@dataclass(frozen=True)
class InterpreterOptions:
    """
    memory_words:      size of the tape
    stdin:             input consumed by ','
    output_sink:       where output is rendered; None renders to the console
    quiet:             suppress rendering to any sink
    complete_callback: called with the output once rendering is done
    """
    memory_words: int = DEFAULT_MEMORY_WORDS
    stdin: str = ""
    output_sink: Optional[OutputSink] = None
    quiet: bool = False
    complete_callback: Optional[CompleteCallback] = None

    def __post_init__(self) -> None:
        _check_memory_words(self.memory_words)


def _move(state: MachineState, step: int, position: int) -> None:
    pointer = state.pointer + step
    if pointer < 0 or pointer >= state.memory_words:
        raise make_pointer_range_error(
            pointer=pointer,
            position=position,
            stdin_pointer=state.stdin_pointer,
            memory_words=state.memory_words,
        )
    state.pointer = pointer


def _read(state: MachineState, stdin: List[int]) -> None:
    if state.stdin_pointer < len(stdin):
        state.cell = stdin[state.stdin_pointer]
    else:
        state.cell = 0
    state.stdin_pointer += 1


def run(code: str, stdin: str = "", memory_words: int = DEFAULT_MEMORY_WORDS) -> MachineState:
    """Execute ``code`` on a fresh tape and return the final machine state."""
    _check_memory_words(memory_words)
    state = MachineState.fresh(memory_words)
    units = utf16_units(stdin)
    length = len(code)
    i = 0
    while i < length:
        cmd = code[i]

        if cmd == '>':
            _move(state, 1, i)
        elif cmd == '<':
            _move(state, -1, i)
        elif cmd == '+':
            state.cell += 1
        elif cmd == '-':
            state.cell -= 1
        elif cmd == '.':
            state.output.append(chr(state.cell % CHAR_RANGE))
        elif cmd == ',':
            _read(state, units)
        elif cmd == '[':
            state.loop_starts.append(i)
        elif cmd == ']':
            if not state.loop_starts:
                raise make_unbalanced_loop_error(source=code, position=i)
            if state.cell == 0:
                state.loop_starts.pop()
            else:
                # resume just after the matching '['
                i = state.loop_starts[-1]
        else:
            raise make_invalid_instruction_error(source=code, position=i)
        i += 1

    return state


def interpret(code: str, stdin: str = "", memory_words: int = DEFAULT_MEMORY_WORDS) -> str:
    return run(code, stdin, memory_words).stdout()


class Interpreter:
    def __init__(self, code: str, options: Optional[InterpreterOptions] = None):
        self.code = code
        self.options = options if options is not None else InterpreterOptions()

    def execute(self) -> MachineState:
        """Run the script without rendering or callbacks."""
        return run(self.code, self.options.stdin, self.options.memory_words)

    def interpret(self) -> str:
        """Run the script, render the output, fire the callback and return the output."""
        stdout = self.execute().stdout()
        self._write_output(stdout)
        self._on_complete(stdout)
        return stdout

    def _write_output(self, stdout: str) -> None:
        if self.options.quiet:
            return
        sink = self.options.output_sink
        if sink is None:
            sink = ConsoleSink()
        sink.render(stdout)

    def _on_complete(self, stdout: str) -> None:
        if self.options.complete_callback is not None:
            self.options.complete_callback(stdout)
