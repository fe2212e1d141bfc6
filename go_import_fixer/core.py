#!/usr/bin/env python3
"""Core utilities for go-import-fixer. This module walks a directory tree,
selects the Go source files to process, and rewrites their import blocks in
place with an all-or-nothing file replacement.
"""
from __future__ import annotations
from fnmatch import fnmatch
import logging
import os
from pathlib import Path
import stat
import tempfile
from typing import Iterable
from typing import Iterator
from typing import Optional

from go_import_fixer.exceptions import ImportFormatError
from go_import_fixer.formatter import ImportFormatter

LOG = logging.getLogger(__name__)


def is_excluded(path: Path, root: Path, patterns: Iterable[str]) -> bool:
    """Return True if path, or one of its parents below root, matches a pattern."""
    try:
        relative = path.relative_to(root)
    except ValueError:
        relative = path
    candidates = [relative.as_posix()] + [p.as_posix() for p in relative.parents if str(p) != "."]
    return any(fnmatch(candidate, pattern) for pattern in patterns if pattern for candidate in candidates)


def iter_go_files(root: str, exclude: Optional[Iterable[str]] = None) -> Iterator[Path]:
    """Yield Go files under the given root directory, excluding specified patterns."""
    patterns = list(exclude or [])
    root_path = Path(root)

    if root_path.is_file():
        if not is_excluded(root_path, root_path.parent, patterns):
            yield root_path
        return

    for dirpath, dirnames, filenames in os.walk(root_path):
        current = Path(dirpath)
        dirnames[:] = sorted(d for d in dirnames if not is_excluded(current / d, root_path, patterns))
        for name in sorted(filenames):
            path = current / name
            if path.suffix == ".go" and not is_excluded(path, root_path, patterns):
                yield path


def replace_file(path: Path, content: str) -> None:
    """Write content to a temporary file next to path, then swap it in."""
    mode = stat.S_IMODE(path.stat().st_mode)
    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as temp:
            temp.write(content)
            temp.flush()
            os.fsync(temp.fileno())
        os.chmod(temp_name, mode)
        os.replace(temp_name, path)
    except BaseException:
        if os.path.exists(temp_name):
            os.unlink(temp_name)
        raise


def process_file(file_path: str, org_prefix: str, apply: bool = False) -> bool:
    """Process a single Go file and rewrite its import blocks if needed.

    Returns True if the file's imports are not in canonical form (and, with
    apply=True, have been rewritten). Errors propagate and leave the file
    untouched.
    """
    path_obj = Path(file_path)
    with open(path_obj, "r", encoding="utf-8", newline="") as f:
        source = f.read()

    formatted = ImportFormatter(org_prefix).format_string(source)
    if formatted == source:
        return False

    if apply:
        replace_file(path_obj, formatted)
    return True


def process_path(path: str, org_prefix: str, exclude: Optional[Iterable[str]] = None, apply: bool = False) -> int:
    """Process every selected Go file below path.

    Returns:
        0 if no changes, 1 if changes were made or required, 2 if an error occurred.
    """
    exit_code = 0
    total = 0
    changed = 0

    for file_path in iter_go_files(path, exclude):
        total += 1
        try:
            modified = process_file(str(file_path), org_prefix, apply=apply)
        except (ImportFormatError, OSError, UnicodeDecodeError) as exc:
            LOG.error("[%s] ERROR: %s", file_path, exc)
            exit_code = max(exit_code, 2)
            continue

        if modified:
            changed += 1
            msg = "file updated." if apply else "imports would be reformatted."
            LOG.info("[%s] %s", file_path, msg)
            exit_code = max(exit_code, 1)
        else:
            LOG.debug("[%s] already formatted.", file_path)

    LOG.debug("Processed %d files, %d %s", total, changed, "updated" if apply else "to update")
    return exit_code
