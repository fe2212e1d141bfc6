"""Top-level package for go-import-fixer.

This package exposes the core API for grouping and sorting Go import blocks.
"""

from go_import_fixer.core import is_excluded
from go_import_fixer.core import iter_go_files
from go_import_fixer.core import process_file
from go_import_fixer.core import process_path
from go_import_fixer.exceptions import ImportFormatError
from go_import_fixer.exceptions import UnclosedImportBlockError
from go_import_fixer.exceptions import UnrecognizedImportLineError
from go_import_fixer.formatter import format_imports
from go_import_fixer.formatter import ImportFormatter
from go_import_fixer.parser import ImportComment
from go_import_fixer.parser import ImportDecl
from go_import_fixer.parser import parse_import_line
from go_import_fixer.rules import classify_import
from go_import_fixer.rules import group_and_sort
from go_import_fixer.rules import Group


__all__ = [
    "ImportFormatter",
    "format_imports",
    "ImportDecl",
    "ImportComment",
    "parse_import_line",
    "Group",
    "classify_import",
    "group_and_sort",
    "ImportFormatError",
    "UnrecognizedImportLineError",
    "UnclosedImportBlockError",
    "process_file",
    "process_path",
    "iter_go_files",
    "is_excluded",
]
