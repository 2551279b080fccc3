from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

UTF16 = "utf-16-le"


def utf16_units(text: str) -> List[int]:
    """Split ``text`` into UTF-16 code units; astral characters become surrogate pairs."""
    data = text.encode(UTF16, "surrogatepass")
    return [int.from_bytes(data[i:i + 2], "little") for i in range(0, len(data), 2)]


@dataclass
class MachineState:
    memory: List[int]
    pointer: int = 0
    stdin_pointer: int = 0
    loop_starts: List[int] = field(default_factory=list)
    output: List[str] = field(default_factory=list)

    @classmethod
    def fresh(cls, memory_words: int) -> "MachineState":
        return cls(memory=[0] * memory_words)

    @property
    def memory_words(self) -> int:
        return len(self.memory)

    @property
    def cell(self) -> int:
        return self.memory[self.pointer]

    @cell.setter
    def cell(self, value: int) -> None:
        self.memory[self.pointer] = value

    def stdout(self) -> str:
        # pairs of surrogate units become one character; lone ones are kept
        return "".join(self.output).encode(UTF16, "surrogatepass").decode(UTF16, "surrogatepass")
