from __future__ import annotations
from typing import Dict

from .command import Command, Operation
from .emit_asm import BlockWriter, InstructionBlock
from .errors import UnsupportedSegment
from .segments import SP

# D holds x (left operand), M addresses y (right operand)
_COMBINE: Dict[Operation, str] = {
    Operation.ADD: "D=D+M",
    Operation.SUB: "D=D-M",
}


def generate_arithmetic(op: Operation) -> InstructionBlock:
    """
    x y -> (x op y)

    SP is decremented first, then x (slot SP-1) is read, combined with
    y (slot SP) and written back over x. Only SP and the two operand
    slots are touched.
    """
    combine = _COMBINE.get(op)
    if combine is None:
        raise UnsupportedSegment(f"{op.value} is not an arithmetic command")

    b = BlockWriter("Performing general sub or add")
    b.at(SP)
    b.add(
        "M=M-1",
        "A=M-1",   # x
        "D=M",
        "A=A+1",   # y
        combine,
        "A=A-1",
        "M=D",
    )
    return b.build()


def generate_arithmetic_command(cmd: Command) -> InstructionBlock:
    return generate_arithmetic(cmd.operation)
