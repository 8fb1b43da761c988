"""Find the nav container a route belongs to.

Authors only declare nav entries at the granularity they want readers to see.
The placement index lets a new file such as ``guide/advanced/caching`` land in
whichever container already holds ``guide/advanced`` or ``guide``, after which
the file has its own durable entry.

Example
-------
>>> from pathlib import Path
>>> from docsync.config import DocsConfig
>>> config = DocsConfig(
...     path=Path("config.json"),
...     document={"sections": [{"label": "Guide", "children": [{"label": "A", "to": "guide/a"}]}]},
... )
>>> index = PlacementIndex.build(config)
>>> index.find("guide/a/deep").section["label"]
'Guide'
>>> index.find("api/b") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from .routes import iter_route_chain

if typ.TYPE_CHECKING:
    from .config import Container, DocsConfig


def _slugify(label: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", label.lower()).strip("-")


@dc.dataclass(slots=True, eq=False)
class Placement:
    """The container a route's nav entry lives in (or would be added to).

    Attributes
    ----------
    section : dict[str, Any]
        Top-level section mapping that owns the container.
    container : list[dict[str, Any]]
        The mutable ``children`` list itself.
    framework : dict[str, Any] or None
        Framework group mapping when the container belongs to one.
    """

    section: dict[str, typ.Any]
    container: Container
    framework: dict[str, typ.Any] | None = None


@dc.dataclass(slots=True)
class PlacementIndex:
    """Exact-route and nearest-ancestor lookups over a navigation config."""

    by_route: dict[str, Placement] = dc.field(default_factory=dict)
    by_dir: dict[str, Placement] = dc.field(default_factory=dict)

    @classmethod
    def build(cls, config: DocsConfig) -> PlacementIndex:
        """Index every section and framework container of ``config``.

        Each entry's route maps to its container in ``by_route``. The route
        and all of its ancestors are claimed in ``by_dir`` by the first entry
        that reaches them; later entries never take over a claim. A container
        with no entries yet claims the slug of its own label (``"Getting
        Started"`` becomes ``getting-started``) once all entries are indexed,
        so a fresh section can receive its first pages.
        """
        index = cls()
        empty: list[Placement] = []
        for section, framework, children in config.iter_containers():
            placement = Placement(section=section, container=children, framework=framework)
            for entry in children:
                index._register(entry["to"], placement)
            if not children:
                empty.append(placement)
        for placement in empty:
            owner = placement.framework or placement.section
            slug = _slugify(owner["label"])
            if slug:
                index.by_dir.setdefault(slug, placement)
        return index

    def _register(self, route: str, placement: Placement) -> None:
        self.by_route[route] = placement
        for ancestor in iter_route_chain(route):
            self.by_dir.setdefault(ancestor, placement)

    def find(self, route: str) -> Placement | None:
        """Return the placement for ``route`` or its nearest indexed ancestor."""
        for candidate in iter_route_chain(route):
            placement = self.by_route.get(candidate) or self.by_dir.get(candidate)
            if placement is not None:
                return placement
        return None


__all__ = ["Placement", "PlacementIndex"]
