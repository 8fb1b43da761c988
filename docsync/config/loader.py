"""Read and persist navigation ``config.json`` documents."""

from __future__ import annotations

import logging
import os
import shutil
import tempfile
import typing as typ

import msgspec

from .models import DocsConfig, DocsConfigError, DocsConfigShape

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

_JSON_INDENT = 2


def load_docs_config(path: Path) -> DocsConfig:
    """Load and validate the navigation config stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to a ``config.json`` file.

    Returns
    -------
    DocsConfig
        The decoded document, with key order and unknown fields preserved.

    Raises
    ------
    FileNotFoundError
        If no file exists at ``path``.
    DocsConfigError
        If the file is not valid JSON or its ``sections`` do not match the
        expected navigation shape.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_docs_config(Path("docs/app/config.json"))  # doctest: +SKIP
    >>> [section["label"] for section in config.sections]  # doctest: +SKIP
    ['Getting Started', 'Guides']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    raw = path.read_bytes()
    try:
        document = msgspec.json.decode(raw)
    except msgspec.DecodeError as exc:
        msg = f"Configuration file '{path}' is not valid JSON: {exc}"
        raise DocsConfigError(msg) from exc
    if not isinstance(document, dict):
        msg = f"Configuration file '{path}' must contain a JSON object."
        raise DocsConfigError(msg)

    try:
        msgspec.convert(document, type=DocsConfigShape)
    except msgspec.ValidationError as exc:
        msg = f"Configuration file '{path}' has an invalid layout: {exc}"
        raise DocsConfigError(msg) from exc

    return DocsConfig(path=path, document=document)


def encode_docs_config(config: DocsConfig) -> bytes:
    """Serialize ``config`` as two-space indented JSON with a trailing newline."""
    payload = msgspec.json.format(msgspec.json.encode(config.document), indent=_JSON_INDENT)
    return payload + b"\n"


def write_docs_config(config: DocsConfig) -> None:
    """Atomically replace the file at ``config.path`` with the current document.

    The payload is written to a temporary file next to the target and then
    renamed over it, so readers never observe a partially written config. An
    existing config keeps its permission bits.
    """
    payload = encode_docs_config(config)
    target = config.path
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}-", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        if target.exists():
            shutil.copymode(target, tmp_name)
        os.replace(tmp_name, target)
    except BaseException:
        os.unlink(tmp_name)
        raise
    logger.debug("wrote %s (%d bytes)", target, len(payload))


__all__ = ["encode_docs_config", "load_docs_config", "write_docs_config"]
