from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from .interpreter import Interpreter, InterpreterOptions, strip_code


@dataclass(frozen=True)
class RunResult:
    output: str
    memory: Tuple[int, ...]
    pointer: int
    stdin_pointer: int
    loop_starts: Tuple[int, ...]


def run_string(code: str, *, options: Optional[InterpreterOptions] = None) -> RunResult:
    state = Interpreter(code, options).execute()
    return RunResult(
        output=state.stdout(),
        memory=tuple(state.memory),
        pointer=state.pointer,
        stdin_pointer=state.stdin_pointer,
        loop_starts=tuple(state.loop_starts),
    )


def run_file(path: str | Path, *, options: Optional[InterpreterOptions] = None, encoding: str = "utf-8",
             strip: bool = False) -> RunResult:
    p = Path(path)
    code = p.read_text(encoding=encoding)
    if strip:
        code = strip_code(code)
    return run_string(code, options=options)
