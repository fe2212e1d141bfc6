"""Parser module for go-import-fixer.

This module recognizes the lines found inside a parenthesized Go import block:
import declarations (an optional alias followed by a quoted package path) and
whole-line ``//`` comments.
"""

import re
from typing import NamedTuple
from typing import Optional
from typing import Union

from go_import_fixer.exceptions import UnrecognizedImportLineError


IMPORT_DECL_RE = re.compile(r'^\s*(?:(\w+|\.)\s+)?"([^"\s]+)"')
COMMENT_RE = re.compile(r"^\s*//(.*)$")
OPENING_LINE_RE = re.compile(r"^\s*import \((.*)$")
CLOSING_LINE_RE = re.compile(r"^\s*\)\s*$")


class ImportDecl(NamedTuple):
    """A single import declaration, e.g. ``f "fmt"``."""

    path: str
    alias: str = ""


class ImportComment(NamedTuple):
    """A whole-line comment; ``text`` excludes the leading ``//``."""

    text: str


ImportEntry = Union[ImportDecl, ImportComment]


def is_import_opening_line(line: str) -> bool:
    return OPENING_LINE_RE.match(line) is not None


def opening_line_remainder(line: str) -> Optional[str]:
    """Return the text following ``import (``, or None if line does not open a block."""
    match = OPENING_LINE_RE.match(line)
    if match is None:
        return None
    return match.group(1)


def is_import_closing_line(line: str) -> bool:
    return CLOSING_LINE_RE.match(line) is not None


def parse_import_decl(line: str) -> Optional[ImportDecl]:
    """Return the declaration on ``line`` or None if it is not one."""
    match = IMPORT_DECL_RE.match(line)
    if match is None:
        return None
    return ImportDecl(path=match.group(2), alias=match.group(1) or "")


def parse_comment(line: str) -> Optional[ImportComment]:
    """Return the comment on ``line`` or None if it is not one."""
    match = COMMENT_RE.match(line)
    if match is None:
        return None
    return ImportComment(text=match.group(1))


def parse_import_line(line: str, lineno: Optional[int] = None) -> ImportEntry:
    """Parse one non-blank line from inside an import block.

    Args:
        line: The line without its line terminator.
        lineno: 1-based line number, used only for error reporting.

    Returns:
        An ImportDecl, or an ImportComment when the line is not a declaration.

    Raises:
        UnrecognizedImportLineError: If the line is neither.
    """
    entry: Optional[ImportEntry] = parse_import_decl(line)
    if entry is None:
        entry = parse_comment(line)
    if entry is None:
        raise UnrecognizedImportLineError(line, lineno)
    return entry
