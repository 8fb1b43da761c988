"""Render a :class:`~docsync.reconciler.ChangeLog` as plain-text lines.

Categories appear in a fixed order and are omitted when empty, so a quiet run
reads as a single ``No changes detected.`` line.

Example
-------
>>> from docsync.reconciler import ChangeLog
>>> format_change_log(ChangeLog(added=["Intro -> guide/intro"]))
['  Added entries:', '    - Intro -> guide/intro']
>>> format_change_log(ChangeLog())
['  No changes detected.']
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from .reconciler import ChangeLog

NO_CHANGES_LINE = "  No changes detected."


def _category_lines(title: str, values: list[str]) -> list[str]:
    if not values:
        return []
    return [f"  {title}:", *(f"    - {value}" for value in values)]


def format_change_log(log: ChangeLog) -> list[str]:
    """Return the report lines for ``log`` without trailing newlines."""
    mismatches = [
        f"{item.existing} != {item.incoming} ({item.to})"
        for item in log.label_mismatches
    ]
    categories = [
        ("Added entries", log.added),
        ("Label/title mismatches (unchanged)", mismatches),
        ("Removed (skip:true)", log.removed),
        ("Skipped (skip:true) files", log.skipped),
        ("Missing frontmatter title", log.missing_frontmatter),
        ("Unmatched routes (manual placement required)", log.unmatched),
        ("Config entries missing source file", log.missing_files),
    ]
    lines: list[str] = []
    for title, values in categories:
        lines.extend(_category_lines(title, values))
    return lines or [NO_CHANGES_LINE]


__all__ = ["NO_CHANGES_LINE", "format_change_log"]
