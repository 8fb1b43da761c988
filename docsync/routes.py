"""Derive navigation routes from content file locations.

A route is the slash-separated path of a content file relative to its docs
root, without the ``.md``/``.mdx`` suffix. Routes are the identity key for nav
entries, so they are always built with ``/`` regardless of the platform
separator.

Examples
--------
>>> from pathlib import PurePosixPath
>>> route_from_file(PurePosixPath("/docs/app"), PurePosixPath("/docs/app/guide/intro.md"))
'guide/intro'
>>> parent_route("guide/advanced/caching")
'guide/advanced'
>>> list(iter_route_chain("guide/advanced/caching"))
['guide/advanced/caching', 'guide/advanced', 'guide']
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import PurePath

_SUFFIX_PATTERN = re.compile(r"\.(md|mdx)$", re.IGNORECASE)


def route_from_file(root: PurePath, path: PurePath) -> str:
    """Return the route for ``path`` relative to ``root``.

    Parameters
    ----------
    root : PurePath
        Docs root that routes are relative to.
    path : PurePath
        Content file located somewhere below ``root``.

    Returns
    -------
    str
        Slash-separated route with the Markdown suffix removed.
    """
    relative = path.relative_to(root).as_posix()
    return _SUFFIX_PATTERN.sub("", relative)


def parent_route(route: str) -> str:
    """Return ``route`` up to its final ``/``, or ``""`` for top-level routes."""
    idx = route.rfind("/")
    return "" if idx == -1 else route[:idx]


def iter_route_chain(route: str) -> cabc.Iterator[str]:
    """Yield ``route`` followed by each ancestor route, nearest first."""
    current = route
    while current:
        yield current
        parent = parent_route(current)
        if parent == current:  # pragma: no cover - guard against odd input
            break
        current = parent


__all__ = ["iter_route_chain", "parent_route", "route_from_file"]
