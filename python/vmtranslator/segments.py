from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict

from .command import Segment
from .errors import NotImplementedCommand, UnsupportedSegment
from .options import StaticPolicy

# fixed cells of the target machine
SP = "SP"
SCRATCH = "R13"  # holds the effective address during an indirect pop

TEMP_BASE = 5
TEMP_SIZE = 8  # R5..R12

BASE_POINTERS: Dict[Segment, str] = {
    Segment.LOCAL: "LCL",
    Segment.ARGUMENT: "ARG",
    Segment.THIS: "THIS",
    Segment.THAT: "THAT",
}

POINTER_CELLS = ("THIS", "THAT")

# cells a consumer of the generated code must not reuse for its own symbols
RESERVED_SYMBOLS = (SP, *BASE_POINTERS.values(), SCRATCH)


class AddressMode(Enum):
    INDIRECT = auto()  # symbol holds a base address, add offset
    DIRECT = auto()    # symbol is the cell itself
    LITERAL = auto()   # symbol is the value, there is no cell


@dataclass(frozen=True)
class SegmentAddress:
    mode: AddressMode
    symbol: str
    offset: int = 0


def static_symbol(script_name: str, index: int) -> str:
    return f"{script_name}.{index}"


def resolve(
    segment: Segment,
    index: int,
    script_name: str,
    static_policy: StaticPolicy = StaticPolicy.SYMBOLS,
) -> SegmentAddress:
    """
    Map (segment, index) to the way its cell is reached.

      local/argument/this/that -> INDIRECT via LCL/ARG/THIS/THAT + index
      temp i                   -> DIRECT cell 5+i
      pointer 0/1              -> DIRECT cell THIS/THAT
      static i                 -> DIRECT symbol <script>.i
      constant v               -> LITERAL v
    """
    if segment in BASE_POINTERS:
        return SegmentAddress(AddressMode.INDIRECT, BASE_POINTERS[segment], index)

    if segment is Segment.TEMP:
        if index >= TEMP_SIZE:
            raise UnsupportedSegment(f"temp index {index} is out of range 0..{TEMP_SIZE - 1}")
        return SegmentAddress(AddressMode.DIRECT, str(TEMP_BASE + index))

    if segment is Segment.POINTER:
        if index >= len(POINTER_CELLS):
            raise UnsupportedSegment(f"pointer index must be 0 or 1, got {index}")
        return SegmentAddress(AddressMode.DIRECT, POINTER_CELLS[index])

    if segment is Segment.CONSTANT:
        return SegmentAddress(AddressMode.LITERAL, str(index))

    if segment is Segment.STATIC:
        if static_policy is StaticPolicy.REJECT:
            raise NotImplementedCommand("static segment is disabled (static policy 'reject')")
        return SegmentAddress(AddressMode.DIRECT, static_symbol(script_name, index))

    raise UnsupportedSegment(f"no addressing rule for segment {segment!r}")
