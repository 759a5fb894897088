from __future__ import annotations

from .command import Command, Operation, Segment
from .emit_asm import BlockWriter, InstructionBlock
from .errors import UnsupportedSegment
from .options import TranslatorOptions
from .segments import SCRATCH, SP, AddressMode, SegmentAddress, resolve

# block comment per (operation, segment); indirect segments share "general"
_PUSH_COMMENTS = {
    Segment.TEMP: "Performing temp push",
    Segment.CONSTANT: "Performing constant push",
    Segment.POINTER: "Performing pointer push",
    Segment.STATIC: "Performing static push",
}
_POP_COMMENTS = {
    Segment.TEMP: "Performing temp pop",
    Segment.POINTER: "Performing pointer pop",
    Segment.STATIC: "Performing static pop",
}

# ----------------- helpers -----------------

def emit_push_d(b: BlockWriter) -> None:
    """*SP = D; SP++"""
    b.at(SP)
    b.add("M=M+1", "A=M-1", "M=D")


def emit_pop_to_d(b: BlockWriter) -> None:
    """SP--; D = *SP"""
    b.at(SP)
    b.add("AM=M-1", "D=M")


def emit_load_d(b: BlockWriter, addr: SegmentAddress) -> None:
    if addr.mode is AddressMode.LITERAL:
        b.at(addr.symbol)
        b.add("D=A")
    elif addr.mode is AddressMode.DIRECT:
        b.at(addr.symbol)
        b.add("D=M")
    else:
        b.at(addr.symbol)
        b.add("D=M")
        b.at(str(addr.offset))
        b.add("A=A+D", "D=M")

# ----------------- push / pop -----------------

def generate_push(addr: SegmentAddress, segment: Segment) -> InstructionBlock:
    b = BlockWriter(_PUSH_COMMENTS.get(segment, "Performing general push"))
    emit_load_d(b, addr)
    emit_push_d(b)
    return b.build()


def generate_pop(addr: SegmentAddress, segment: Segment) -> InstructionBlock:
    if addr.mode is AddressMode.LITERAL:
        raise UnsupportedSegment(f"cannot pop into segment {segment.value}")

    b = BlockWriter(_POP_COMMENTS.get(segment, "Performing general pop"))
    if addr.mode is AddressMode.DIRECT:
        emit_pop_to_d(b)
        b.at(addr.symbol)
        b.add("M=D")
        return b.build()

    # indirect: A is needed for SP, so park base+offset in the scratch cell
    b.at(addr.symbol)
    b.add("D=M")
    b.at(str(addr.offset))
    b.add("D=A+D")
    b.at(SCRATCH)
    b.add("M=D")
    emit_pop_to_d(b)
    b.at(SCRATCH)
    b.add("A=M", "M=D")
    return b.build()


def generate_memory_access(
    cmd: Command,
    script_name: str,
    options: TranslatorOptions = TranslatorOptions(),
) -> InstructionBlock:
    if not cmd.operation.is_memory_access:
        raise UnsupportedSegment(f"{cmd.operation.value} is not a push/pop command")

    # pop constant is rejected before any addressing is attempted
    if cmd.operation is Operation.POP and cmd.segment is Segment.CONSTANT:
        raise UnsupportedSegment("cannot pop into segment constant")

    addr = resolve(cmd.segment, cmd.index, script_name, options.static_policy)
    if cmd.operation is Operation.PUSH:
        return generate_push(addr, cmd.segment)
    return generate_pop(addr, cmd.segment)
