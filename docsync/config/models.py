"""Typed structures describing the navigation ``config.json`` document."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

NavEntry = dict[str, typ.Any]
Container = list[NavEntry]


class DocsSyncError(RuntimeError):
    """Base class for errors raised while synchronizing navigation."""


class DocsConfigError(DocsSyncError, ValueError):
    """Raised when a navigation config cannot be parsed or has the wrong shape."""


class NavEntryShape(msgspec.Struct):
    """A single sidebar link such as ``{"label": "Intro", "to": "guide/intro"}``."""

    label: str
    to: str
    badge: str | None = None


class FrameworkGroupShape(msgspec.Struct):
    """Framework-specific variant of a section (for example React or Solid)."""

    label: str
    children: list[NavEntryShape]


class SectionShape(msgspec.Struct):
    """Top-level navigation branch with optional framework groups."""

    label: str
    children: list[NavEntryShape]
    frameworks: list[FrameworkGroupShape] | None = None


class DocsConfigShape(msgspec.Struct):
    """Fields of ``config.json`` that docsync reads.

    Unknown keys such as ``docSearch`` and ``users`` are ignored during
    validation and left untouched in the stored document.
    """

    sections: list[SectionShape]


@dc.dataclass(slots=True)
class DocsConfig:
    """A decoded ``config.json`` document bound to its path on disk.

    Attributes
    ----------
    path : Path
        Location the document was read from and will be written back to.
    document : dict[str, Any]
        Decoded JSON mapping. Only the ``children`` lists inside sections and
        framework groups are mutated; everything else round-trips as loaded.
    """

    path: Path
    document: dict[str, typ.Any]

    @property
    def sections(self) -> list[dict[str, typ.Any]]:
        """Return the raw section mappings in document order."""
        return self.document["sections"]

    def iter_containers(
        self,
    ) -> cabc.Iterator[tuple[dict[str, typ.Any], dict[str, typ.Any] | None, Container]]:
        """Yield ``(section, framework, children)`` for every nav container.

        Section children come first, followed by each framework group's
        children; ``framework`` is ``None`` for the section's own list.
        """
        for section in self.sections:
            yield section, None, section["children"]
            for framework in section.get("frameworks") or []:
                yield section, framework, framework["children"]


__all__ = [
    "Container",
    "DocsConfig",
    "DocsConfigError",
    "DocsConfigShape",
    "DocsSyncError",
    "FrameworkGroupShape",
    "NavEntry",
    "NavEntryShape",
    "SectionShape",
]
