"""Exceptions raised while reformatting Go import blocks."""

from typing import Optional


class ImportFormatError(ValueError):
    """Base class for errors that abort the formatting of a whole file."""


class UnrecognizedImportLineError(ImportFormatError):
    """A non-blank line inside an import block is neither a declaration nor a comment."""

    def __init__(self, line: str, lineno: Optional[int] = None) -> None:
        self.line = line
        self.lineno = lineno
        where = f" at line {lineno}" if lineno is not None else ""
        super().__init__(f"unrecognized import line{where}: {line.strip()!r}")


class UnclosedImportBlockError(ImportFormatError):
    """Input ended while an import block was still open."""

    def __init__(self, lineno: Optional[int] = None) -> None:
        self.lineno = lineno
        where = f" opened at line {lineno}" if lineno is not None else ""
        super().__init__(f"unclosed import block{where}")
