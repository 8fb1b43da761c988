"""Load, validate, and persist docsync navigation configs.

Each docs product directory holds a ``config.json`` describing its sidebar as
a list of sections, each with ordered ``children`` links and optional
framework groups. :func:`load_docs_config` decodes the file with msgspec and
checks its layout; :func:`write_docs_config` writes it back atomically with the
same key order.

Examples
--------
>>> from pathlib import Path
>>> from docsync.config import load_docs_config, write_docs_config
>>> config = load_docs_config(Path("docs/app/config.json"))  # doctest: +SKIP
>>> config.sections[0]["children"].append({"label": "New", "to": "guide/new"})  # doctest: +SKIP
>>> write_docs_config(config)  # doctest: +SKIP
"""

from .loader import encode_docs_config, load_docs_config, write_docs_config
from .models import (
    Container,
    DocsConfig,
    DocsConfigError,
    DocsSyncError,
    NavEntry,
)

__all__ = [
    "Container",
    "DocsConfig",
    "DocsConfigError",
    "DocsSyncError",
    "NavEntry",
    "encode_docs_config",
    "load_docs_config",
    "write_docs_config",
]
