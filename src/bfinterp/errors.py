from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

INSTRUCTIONS = '><+-.,[]'


def _locate(source: str, position: int) -> Tuple[int, int]:
    """Return the 1-based (line, column) of ``position`` in ``source``."""
    before = source[:position]
    line = before.count('\n') + 1
    column = position - (before.rfind('\n') + 1) + 1
    return line, column


def _build_context(source: str, position: int) -> str:
    lines = source.split('\n')
    line, column = _locate(source, position)
    text = lines[line - 1] if line - 1 < len(lines) else ''
    return f"> {line:4d} | {text}\n       {' ' * (column - 1)}^"


def _hint_for(kind: str, char: str = '') -> Optional[str]:
    if kind == 'instruction':
        if char in ' \t\r\n':
            return 'Whitespace is not an instruction. Strip it first (bfi --strip).'
        if char.isalnum() or char in '#/;':
            return 'Comments are not allowed inline. Strip them first (bfi --strip).'
        return f"Only the instructions {' '.join(INSTRUCTIONS)} are allowed."
    if kind == 'pointer':
        return 'Check the balance of > and < inside loops, or raise --memory-words.'
    if kind == 'loop':
        return 'Every ] needs an earlier matching [.'
    return None


@dataclass
class BFError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class InvalidInstructionError(BFError):
    char: str
    position: int
    line: int
    column: int
    context: str


@dataclass
class PointerRangeError(BFError):
    pointer: int
    position: int
    stdin_pointer: int
    memory_words: int


@dataclass
class UnbalancedLoopError(BFError):
    position: int
    context: str


def _with_hint(text: str, hint: Optional[str]) -> str:
    return f"{text}\nHint: {hint}" if hint else text


def make_invalid_instruction_error(*, source: str, position: int) -> InvalidInstructionError:
    char = source[position]
    line, column = _locate(source, position)
    ctx = _build_context(source, position)
    return InvalidInstructionError(
        message=_with_hint(
            f"InvalidInstruction: {char!r} at position {position} (line {line}, column {column})\n{ctx}",
            _hint_for('instruction', char),
        ),
        char=char,
        position=position,
        line=line,
        column=column,
        context=ctx,
    )


def make_pointer_range_error(*, pointer: int, position: int, stdin_pointer: int,
                             memory_words: int) -> PointerRangeError:
    if pointer < 0:
        head = "Memory pointer cannot be less than 0."
    else:
        head = f"Memory pointer cannot be greater than {memory_words - 1}."
    body = (
        f"PointerRange: {head}\n"
        f"memoryPointer: {pointer}\n"
        f"instruction: {position}\n"
        f"stdInPointer: {stdin_pointer}\n"
        f"Memory Words: {memory_words}"
    )
    return PointerRangeError(
        message=_with_hint(body, _hint_for('pointer')),
        pointer=pointer,
        position=position,
        stdin_pointer=stdin_pointer,
        memory_words=memory_words,
    )


def make_unbalanced_loop_error(*, source: str, position: int) -> UnbalancedLoopError:
    ctx = _build_context(source, position)
    return UnbalancedLoopError(
        message=_with_hint(
            f"UnbalancedLoop: ']' at position {position} has no matching '['\n{ctx}",
            _hint_for('loop'),
        ),
        position=position,
        context=ctx,
    )
