from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Sequence

from .errors import BFError
from .interpreter import DEFAULT_MEMORY_WORDS, Interpreter, InterpreterOptions, strip_code
from .sinks import ConsoleSink


def format_memory(memory: Sequence[int], count: int, per_row: int = 8) -> str:
    cells = list(memory[:count])
    rows = [" ".join(str(c) for c in cells[i:i + per_row]) for i in range(0, len(cells), per_row)]
    return "\n".join(rows)


def _read_text(path: str) -> Optional[str]:
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        print(f"Error: file not found: {path}", file=sys.stderr)
        return None
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read {path}: {e}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfi",
        description="Run a Brainfuck script.",
    )
    parser.add_argument("script", help="Path to the script")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--input", default="", help="Text consumed by ','")
    source.add_argument("--input-file", help="Read the text consumed by ',' from a file")
    parser.add_argument("--memory-words", type=int, default=DEFAULT_MEMORY_WORDS,
                        help=f"Tape length (default {DEFAULT_MEMORY_WORDS})")
    parser.add_argument("--strip", action="store_true", help="Remove non-instruction characters first")
    parser.add_argument("--quiet", action="store_true", help="Do not print the program output")
    parser.add_argument("--timing", action="store_true", help="Print how long the run took")
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="Print the first N tape cells")
    args = parser.parse_args(argv)

    if args.memory_words < 1:
        parser.error("--memory-words must be positive")

    code = _read_text(args.script)
    if code is None:
        return 1

    stdin = args.input
    if args.input_file:
        stdin = _read_text(args.input_file)
        if stdin is None:
            return 1

    if args.strip:
        code = strip_code(code)

    interpreter = Interpreter(code, InterpreterOptions(memory_words=args.memory_words, stdin=stdin))

    start = time.time()
    try:
        state = interpreter.execute()
    except BFError as e:
        print(e, file=sys.stderr)
        return 1
    end = time.time()

    if not args.quiet:
        ConsoleSink().render(state.stdout())

    if args.timing:
        print(f"Execution took {(end - start) * 1000:.2f} ms")

    if args.dump > 0:
        print("================")
        print(format_memory(state.memory, args.dump))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
