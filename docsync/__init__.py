"""Keep documentation navigation configs in step with the files on disk.

This package backs the ``docs-sync`` console script. It reads Markdown
frontmatter (``title``, ``skip``, ``ref``), places new pages into the matching
section of each product's ``config.json``, prunes skipped pages, and reports
anything that needs a human decision.

Exports
-------
- ``app``: Cyclopts application for the ``docs-sync`` command.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``sync_docs``: Library entry point that synchronizes every docs root.

Examples
--------
>>> from docsync import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .sync import sync_docs

__all__ = ["app", "main", "sync_docs"]
