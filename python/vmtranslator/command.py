from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Operation(Enum):
    ADD = "add"
    SUB = "sub"
    PUSH = "push"
    POP = "pop"

    @property
    def is_memory_access(self) -> bool:
        return self in (Operation.PUSH, Operation.POP)


class Segment(Enum):
    LOCAL = "local"
    ARGUMENT = "argument"
    THIS = "this"
    THAT = "that"
    TEMP = "temp"
    CONSTANT = "constant"
    POINTER = "pointer"
    STATIC = "static"


@dataclass(frozen=True)
class Command:
    operation: Operation
    segment: Optional[Segment] = None
    index: Optional[int] = None

    def __post_init__(self) -> None:
        if self.operation.is_memory_access:
            if self.segment is None or self.index is None:
                raise ValueError(f"{self.operation.value} needs a segment and an index")
            if self.index < 0:
                raise ValueError(f"negative index: {self.index}")
        elif self.segment is not None or self.index is not None:
            raise ValueError(f"{self.operation.value} takes no operands")

    def __str__(self) -> str:
        if self.operation.is_memory_access:
            return f"{self.operation.value} {self.segment.value} {self.index}"
        return self.operation.value
