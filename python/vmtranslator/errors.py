from __future__ import annotations
from typing import Optional


class TranslationError(Exception):
    """Base for everything that stops a .vm file from being translated."""

    def __init__(self, message: str, line_no: Optional[int] = None, text: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no
        self.text = text

    def at(self, line_no: int, text: str) -> "TranslationError":
        # attach source position once the dispatcher knows it
        self.line_no = line_no
        self.text = text
        return self

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no} ({self.text!r}): {self.message}"


class MalformedCommand(TranslationError):
    pass


class UnsupportedSegment(TranslationError):
    pass


class NotImplementedCommand(TranslationError, NotImplementedError):
    """Raised for behaviour that is switched off, e.g. static with StaticPolicy.REJECT."""
