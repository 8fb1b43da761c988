"""Shared fixtures for building throwaway docs trees."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import msgspec
import pytest


class DocsTree:
    """Write configs and Markdown files below a temporary docs root."""

    def __init__(self, docs_dir: Path, name: str = "app") -> None:
        self.docs_dir = docs_dir
        self.root = docs_dir / name
        self.root.mkdir(parents=True, exist_ok=True)

    @property
    def config_path(self) -> Path:
        return self.root / "config.json"

    def write_config(
        self, sections: list[dict[str, typ.Any]], **extra: typ.Any
    ) -> Path:
        document: dict[str, typ.Any] = {"docSearch": {"indexName": "app"}}
        document["sections"] = sections
        document.update(extra)
        self.config_path.write_bytes(msgspec.json.encode(document))
        return self.config_path

    def write_doc(self, relative: str, header: str | None, body: str = "Body\n") -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        text = body if header is None else f"---\n{header.strip()}\n---\n{body}"
        path.write_text(text, encoding="utf-8")
        return path

    def load_config(self) -> dict[str, typ.Any]:
        return msgspec.json.decode(self.config_path.read_bytes())

    def children(self, section: int = 0) -> list[dict[str, typ.Any]]:
        return self.load_config()["sections"][section]["children"]


@pytest.fixture
def docs_tree(tmp_path: Path) -> DocsTree:
    """Return a helper rooted at ``<tmp>/docs/app``."""
    return DocsTree(tmp_path / "docs")
