"""Rules module for go-import-fixer.

Declarations are classified into three groups, emitted in this order:

* standard library packages (no ``.`` in the path),
* packages of the configured organization (path contains the prefix),
* every other third-party package.

Comments are not classified; they are emitted ahead of all declarations.
"""

import enum
from typing import Dict
from typing import Iterable
from typing import List
from typing import Tuple

from go_import_fixer.parser import ImportComment
from go_import_fixer.parser import ImportDecl
from go_import_fixer.parser import ImportEntry


class Group(enum.IntEnum):
    STDLIB = 0
    ORGANIZATION = 1
    THIRD_PARTY = 2


def classify_import(path: str, org_prefix: str) -> Group:
    """Classify a package path.

    The organization check is a plain substring test, so a prefix appearing
    anywhere in the path qualifies. An empty prefix never matches.
    """
    if org_prefix and org_prefix in path:
        return Group.ORGANIZATION
    if "." in path:
        return Group.THIRD_PARTY
    return Group.STDLIB


def group_and_sort(
    org_prefix: str, entries: Iterable[ImportEntry]
) -> Tuple[List[ImportComment], List[List[ImportDecl]]]:
    """Split entries into comments and sorted, non-empty declaration groups.

    Returns:
        A tuple (comments, groups). Comments keep their original relative
        order. Groups are ordered stdlib, organization, third party; empty
        ones are left out and each is sorted by package path (stable, so
        declarations sharing a path keep their input order).
    """
    comments: List[ImportComment] = []
    buckets: Dict[Group, List[ImportDecl]] = {group: [] for group in Group}

    for entry in entries:
        if isinstance(entry, ImportComment):
            comments.append(entry)
        else:
            buckets[classify_import(entry.path, org_prefix)].append(entry)

    groups = [
        sorted(buckets[group], key=lambda decl: decl.path)
        for group in Group
        if buckets[group]
    ]
    return comments, groups


def render_import_line(entry: ImportEntry) -> str:
    """Render one entry as an indented line without a line terminator."""
    if isinstance(entry, ImportComment):
        return f"\t//{entry.text}"
    if entry.alias:
        return f'\t{entry.alias} "{entry.path}"'
    return f'\t"{entry.path}"'


def render_import_block(org_prefix: str, entries: Iterable[ImportEntry]) -> List[str]:
    """Return the canonical lines of an import block, markers included."""
    comments, groups = group_and_sort(org_prefix, entries)

    lines = ["import ("]
    lines.extend(render_import_line(comment) for comment in comments)
    for i, group in enumerate(groups):
        if i:
            # Blank line between groups
            lines.append("")
        lines.extend(render_import_line(decl) for decl in group)
    lines.append(")")
    return lines
