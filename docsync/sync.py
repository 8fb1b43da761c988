"""Discover docs roots and synchronize each navigation config in turn.

A docs root is any directory directly below the documentation directory that
contains a ``config.json``. Roots are processed one after another; a failure
aborts the run but leaves configs of already-processed roots written.

Example
-------
>>> from pathlib import Path
>>> from docsync.sync import sync_docs
>>> logs = sync_docs(Path("docs"))  # doctest: +SKIP

which prints a report per root such as::

    Syncing app/config.json
      Added entries:
        - Introduction -> guide/intro
"""

from __future__ import annotations

import logging
import sys
import typing as typ

from ._constants import CONFIG_FILENAME
from .frontmatter import FrontmatterReader
from .reconciler import reconcile_docs_root
from .report import format_change_log

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .reconciler import ChangeLog

logger = logging.getLogger(__name__)

NO_ROOTS_MESSAGE = "No docs/config.json folders found."


def find_docs_roots(docs_root: Path) -> list[Path]:
    """Return the direct subdirectories of ``docs_root`` holding a config.

    Parameters
    ----------
    docs_root : Path
        Documentation directory to scan (one level deep only).

    Returns
    -------
    list[Path]
        Qualifying directories sorted by name.
    """
    return sorted(
        child
        for child in docs_root.iterdir()
        if child.is_dir() and (child / CONFIG_FILENAME).is_file()
    )


def _relative_label(root: Path, docs_root: Path) -> str:
    try:
        label = root.relative_to(docs_root).as_posix()
    except ValueError:  # pragma: no cover - roots always come from docs_root
        label = root.as_posix()
    return label or "."


def sync_docs(
    docs_root: Path,
    *,
    reader: FrontmatterReader | None = None,
    dry_run: bool = False,
    out: typ.TextIO | None = None,
) -> dict[Path, ChangeLog]:
    """Synchronize every docs root below ``docs_root`` and print reports.

    Parameters
    ----------
    docs_root : Path
        Directory whose immediate children are docs roots.
    reader : FrontmatterReader, optional
        Frontmatter reader shared by all roots of this run. A fresh reader
        (and therefore a fresh cache) is created when omitted.
    dry_run : bool, optional
        Reconcile and report without writing configs back. Defaults to
        ``False``.
    out : TextIO, optional
        Stream receiving the report. Defaults to ``sys.stdout``.

    Returns
    -------
    dict[Path, ChangeLog]
        Change log of each processed root, in processing order.

    Raises
    ------
    FileNotFoundError
        If ``docs_root`` does not exist.
    DocsConfigError
        If any root's config cannot be parsed; later roots are not processed.
    """
    stream = out or sys.stdout
    reader = reader or FrontmatterReader()
    roots = find_docs_roots(docs_root)
    if not roots:
        print(NO_ROOTS_MESSAGE, file=stream)
        return {}

    results: dict[Path, ChangeLog] = {}
    for root in roots:
        label = _relative_label(root, docs_root)
        print(f"\nSyncing {label}/{CONFIG_FILENAME}", file=stream)
        log = reconcile_docs_root(root, reader=reader, write=not dry_run)
        if dry_run:
            logger.debug("dry run: left %s untouched", root / CONFIG_FILENAME)
        for line in format_change_log(log):
            print(line, file=stream)
        results[root] = log
    return results


__all__ = ["NO_ROOTS_MESSAGE", "find_docs_roots", "sync_docs"]
