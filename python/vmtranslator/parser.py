from __future__ import annotations

from typing import Optional
from lark import Lark, Transformer, exceptions

from .command import Command, Operation, Segment
from .errors import MalformedCommand

# largest value an A-instruction can load; every index ends up in one
MAX_INDEX = 32767


class CommandBuilder(Transformer):
    def start(self, items):
        return items[0]

    def arith_cmd(self, items):
        return Command(operation=Operation(str(items[0])))

    def memory_cmd(self, items):
        op, seg, idx = items
        return Command(
            operation=Operation(str(op)),
            segment=Segment(str(seg)),
            index=int(str(idx)),
        )


def make_parser() -> Lark:
    with open(__file__.replace("parser.py", "vm_line.lark"), "r", encoding="utf-8") as f:
        grammar = f.read()
    return Lark(grammar, start="start", parser="lalr")


_PARSER: Optional[Lark] = None


def _describe(line: str, err: exceptions.UnexpectedInput) -> str:
    """Short human message for a rejected line (lark's own text is multi-line)."""
    parts = line.split()
    ops = {o.value for o in Operation}
    segs = {s.value for s in Segment}
    if not parts:
        return "empty command"
    if parts[0] not in ops:
        return f"unknown operation {parts[0]!r}"
    if parts[0] in (Operation.ADD.value, Operation.SUB.value):
        return f"{parts[0]} takes no operands"
    if len(parts) < 3:
        return f"{parts[0]} needs a segment and an index"
    if parts[1] not in segs:
        return f"unknown segment {parts[1]!r}"
    if len(parts) > 3:
        return f"unexpected trailing input {' '.join(parts[3:])!r}"
    if isinstance(err, exceptions.UnexpectedEOF):
        return "incomplete command"
    return f"index must be a non-negative integer, got {parts[2]!r}"


def parse_line(line: str) -> Command:
    """
    Parse one VM instruction into a Command.

    Raises MalformedCommand for anything the grammar rejects and for
    indices that do not fit into an A-instruction.
    """
    global _PARSER
    if _PARSER is None:
        _PARSER = make_parser()
    try:
        tree = _PARSER.parse(line)
    except exceptions.UnexpectedInput as e:
        raise MalformedCommand(_describe(line, e)) from e

    cmd = CommandBuilder().transform(tree)
    if cmd.operation.is_memory_access and cmd.index > MAX_INDEX:
        raise MalformedCommand(f"index {cmd.index} is out of range 0..{MAX_INDEX}")
    return cmd
