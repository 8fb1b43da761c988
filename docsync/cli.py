"""Cyclopts CLI entrypoint for synchronizing docs navigation configs.

The ``docs-sync`` console script defined here scans ``docs/`` for product
directories holding a ``config.json``, adds nav entries for new Markdown
pages, prunes pages marked ``skip``, writes each config back, and prints a
categorised report. It takes no arguments in the common case; the options
below exist for CI and for repositories with a different layout.

Examples
--------
Synchronize every docs root under ``./docs``:

>>> from docsync.cli import main
>>> main()  # doctest: +SKIP

Preview the changes for another docs tree without writing anything:

>>> from docsync.cli import app
>>> app(["--docs-root", "site/docs", "--dry-run"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DOCS_DIRNAME
from .config import DocsSyncError
from .frontmatter import FrontmatterReader
from .sync import sync_docs

DEFAULT_DOCS_ROOT = Path(DOCS_DIRNAME)

app = App(name="docs-sync", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@app.default
def sync(
    *,
    docs_root: typ.Annotated[
        Path,
        Parameter(help="Directory holding one folder per docs product"),
    ] = DEFAULT_DOCS_ROOT,
    repo_root: typ.Annotated[
        Path | None,
        Parameter(help="Directory that 'docs/...' refs resolve against"),
    ] = None,
    dry_run: typ.Annotated[
        bool,
        Parameter(help="Report changes without writing config files"),
    ] = False,
    verbose: typ.Annotated[
        bool,
        Parameter(help="Log file classification and ref resolution"),
    ] = False,
) -> None:
    """Synchronize navigation configs with the content files on disk.

    Parameters
    ----------
    docs_root : Path, optional
        Documentation directory whose immediate children are docs roots;
        defaults to ``docs`` (``INPUT_DOCS_ROOT``).
    repo_root : Path or None, optional
        Base for ``docs/``-prefixed frontmatter refs; defaults to the current
        working directory (``INPUT_REPO_ROOT``).
    dry_run : bool, optional
        Reconcile and print the report without persisting configs
        (``INPUT_DRY_RUN``).
    verbose : bool, optional
        Emit debug logging on stderr (``INPUT_VERBOSE``).

    Returns
    -------
    None
        Writes configs and prints the report to stdout.

    Raises
    ------
    SystemExit
        With status 1 when a config cannot be read or parsed. Roots processed
        before the failure keep their written configs.
    """
    _configure_logging(verbose=verbose)
    reader = FrontmatterReader(repo_root=repo_root)
    try:
        sync_docs(docs_root, reader=reader, dry_run=dry_run)
    except (DocsSyncError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc


def main() -> None:
    """Invoke the Cyclopts application behind the ``docs-sync`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
