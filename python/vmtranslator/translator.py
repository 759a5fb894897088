from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .codegen_arith import generate_arithmetic_command
from .codegen_memory import generate_memory_access
from .command import Command
from .emit_asm import AsmProgram, InstructionBlock
from .errors import TranslationError
from .options import TranslatorOptions
from .parser import parse_line

COMMENT = "//"


@dataclass
class TranslationResult:
    program: Optional[AsmProgram]
    errors: List[TranslationError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def lines(self) -> List[str]:
        if self.program is None:
            return []
        return self.program.lines

    def raise_first(self) -> None:
        if self.errors:
            raise self.errors[0]


def clean_line(raw: str) -> str:
    """Drop a trailing // comment and surrounding whitespace ("" means skip)."""
    return raw.split(COMMENT, 1)[0].strip()


def generate_block(cmd: Command, script_name: str, options: TranslatorOptions) -> InstructionBlock:
    if cmd.operation.is_memory_access:
        return generate_memory_access(cmd, script_name, options)
    return generate_arithmetic_command(cmd)


def translate(
    script_name: str,
    lines: Iterable[str],
    options: Optional[TranslatorOptions] = None,
    on_line: Optional[Callable[[int, str], None]] = None,
) -> TranslationResult:
    """
    Translate VM lines into one AsmProgram, a block per command, in order.

    Every failing line is collected; if there is at least one the result
    carries no program at all.
    """
    if options is None:
        options = TranslatorOptions()

    program = AsmProgram()
    errors: List[TranslationError] = []

    for line_no, raw in enumerate(lines, start=1):
        text = clean_line(raw)
        if not text:
            continue
        if on_line is not None:
            on_line(line_no, text)
        try:
            cmd = parse_line(text)
            program.append(generate_block(cmd, script_name, options))
        except TranslationError as e:
            errors.append(e.at(line_no, text))

    if errors:
        return TranslationResult(program=None, errors=errors)
    return TranslationResult(program=program, errors=[])


def translate_text(
    script_name: str,
    text: str,
    options: Optional[TranslatorOptions] = None,
) -> TranslationResult:
    return translate(script_name, text.splitlines(), options)
