from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Tuple


@dataclass(frozen=True)
class InstructionBlock:
    comment: str
    body: Tuple[str, ...]

    @property
    def lines(self) -> List[str]:
        return [f"// {self.comment}", *self.body]


class BlockWriter:
    """Collects the instructions of one block; build() freezes them."""

    def __init__(self, comment: str) -> None:
        self.comment = comment
        self._body: List[str] = []

    def add(self, *instrs: str) -> None:
        self._body.extend(instrs)

    def at(self, symbol: str) -> None:
        self._body.append(f"@{symbol}")

    def build(self) -> InstructionBlock:
        return InstructionBlock(comment=self.comment, body=tuple(self._body))


@dataclass
class AsmProgram:
    blocks: List[InstructionBlock] = field(default_factory=list)

    def append(self, block: InstructionBlock) -> None:
        self.blocks.append(block)

    @property
    def lines(self) -> List[str]:
        out: List[str] = []
        for b in self.blocks:
            out.extend(b.lines)
        return out

    def is_empty(self) -> bool:
        return not self.blocks

    def text(self) -> str:
        lines = self.lines
        return "\n".join(lines) + "\n" if lines else ""

    def save(self, path: str) -> None:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(self.text())
