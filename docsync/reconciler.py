"""Reconcile a docs root's content files against its navigation config.

The reconciler walks every Markdown file below a docs root, reads its
frontmatter, and makes sure each publishable page has an entry in the right
nav container. Pages flagged ``skip`` (plus index and draft files) are pruned
from the nav. Entries whose file has disappeared are reported but kept.

The pass is two-phase over the in-memory config: first every file is placed
(append-only), then skip-eligible entries are removed. Nothing is written
until the whole pass has finished.

Example
-------
>>> from pathlib import Path
>>> log = reconcile_docs_root(Path("docs/app"))  # doctest: +SKIP
>>> log.added  # doctest: +SKIP
['Introduction -> guide/intro']
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import typing as typ
from pathlib import Path

from ._constants import CONFIG_FILENAME, CONTENT_SUFFIXES, DRAFT_PATTERN, README_PATTERN
from .config import load_docs_config, write_docs_config
from .frontmatter import FrontmatterReader
from .placement import PlacementIndex
from .routes import route_from_file

if typ.TYPE_CHECKING:
    from .config import Container, DocsConfig, NavEntry

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True, frozen=True)
class LabelMismatch:
    """An existing nav label that differs from the file's current title."""

    to: str
    existing: str
    incoming: str


@dc.dataclass(slots=True)
class ChangeLog:
    """Categorised outcome of reconciling one docs root.

    Attributes
    ----------
    added : list[str]
        ``"<label> -> <route>"`` for each entry appended to the nav.
    label_mismatches : list[LabelMismatch]
        Entries whose stored label differs from the title; left unchanged.
    removed : list[str]
        Routes pruned from the nav because their file is skip-eligible.
    skipped : list[str]
        Routes of files with ``skip: true`` (directly or through ``ref``).
    missing_frontmatter : list[str]
        Root-relative paths of files without a usable title.
    unmatched : list[str]
        Routes with no nav container for them or any of their ancestors.
    missing_files : list[str]
        Nav routes that no scanned file backs.
    """

    added: list[str] = dc.field(default_factory=list)
    label_mismatches: list[LabelMismatch] = dc.field(default_factory=list)
    removed: list[str] = dc.field(default_factory=list)
    skipped: list[str] = dc.field(default_factory=list)
    missing_frontmatter: list[str] = dc.field(default_factory=list)
    unmatched: list[str] = dc.field(default_factory=list)
    missing_files: list[str] = dc.field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no category recorded anything."""
        return not any(getattr(self, field.name) for field in dc.fields(self))


@dc.dataclass(slots=True, frozen=True)
class ContentFile:
    """A Markdown file found below a docs root.

    Only location-derived facts live here. The title and skip flag come from
    :meth:`FrontmatterReader.read_info` when the file is placed.
    """

    path: Path
    route: str

    @property
    def is_index(self) -> bool:
        """Return ``True`` for ``readme.md``/``readme.mdx`` index pages."""
        return bool(README_PATTERN.match(self.path.name))

    @property
    def is_draft(self) -> bool:
        """Return ``True`` for ``*.draft.md``/``*.draft.mdx`` drafts."""
        return bool(DRAFT_PATTERN.search(self.path.name))


def _append_unique(values: list[str], value: str) -> None:
    if value not in values:
        values.append(value)


def list_content_files(root: Path) -> list[Path]:
    """Return every ``.md``/``.mdx`` file below ``root`` in sorted order.

    Directories are walked with an explicit work list; directory symlinks are
    not followed. Paths are sorted by their string form so the order (and
    therefore the order entries are appended in) is stable across platforms.
    """
    stack = [root]
    files: list[Path] = []
    while stack:
        current = stack.pop()
        with os.scandir(current) as entries:
            for entry in entries:
                if entry.is_dir(follow_symlinks=False):
                    stack.append(Path(entry.path))
                elif entry.is_file() and entry.name.endswith(CONTENT_SUFFIXES):
                    files.append(Path(entry.path))
    files.sort(key=str)
    return files


def ensure_nav_item(container: Container, item: NavEntry, log: ChangeLog) -> None:
    """Append ``item`` to ``container`` unless its route is already present.

    An existing entry with a different label is reported in
    ``log.label_mismatches``; its stored label is never overwritten.
    """
    existing = next((entry for entry in container if entry["to"] == item["to"]), None)
    if existing is not None:
        if existing["label"] != item["label"]:
            log.label_mismatches.append(
                LabelMismatch(
                    to=item["to"], existing=existing["label"], incoming=item["label"]
                )
            )
        return
    container.append(item)
    log.added.append(f"{item['label']} -> {item['to']}")


def remove_skipped(container: Container, skip_routes: set[str], log: ChangeLog) -> None:
    """Drop every entry of ``container`` whose route is skip-eligible.

    The container is walked from the end, so removals are logged last entry
    first.
    """
    for idx in range(len(container) - 1, -1, -1):
        if container[idx]["to"] in skip_routes:
            log.removed.append(container.pop(idx)["to"])


class Reconciler:
    """Apply one docs root's content files to its navigation config.

    Parameters
    ----------
    reader : FrontmatterReader
        Shared frontmatter reader; its cache spans every root of a run.
    """

    def __init__(self, reader: FrontmatterReader) -> None:
        self.reader = reader

    def reconcile(self, config: DocsConfig, root: Path) -> ChangeLog:
        """Mutate ``config`` in memory so it matches the files under ``root``.

        Parameters
        ----------
        config : DocsConfig
            Navigation config of ``root``; its ``children`` lists are edited
            in place.
        root : Path
            Docs root whose content files are scanned.

        Returns
        -------
        ChangeLog
            Everything that was added, removed, or needs human attention.
        """
        index = PlacementIndex.build(config)
        log = ChangeLog()
        skip_routes: set[str] = set()
        seen_routes: set[str] = set()

        for path in list_content_files(root):
            if path == config.path:
                continue
            content = ContentFile(path=path, route=route_from_file(root, path))
            seen_routes.add(content.route)
            self._place(content, root, index, log, skip_routes)

        for _section, _framework, children in config.iter_containers():
            remove_skipped(children, skip_routes, log)

        for _section, _framework, children in config.iter_containers():
            for entry in children:
                route = entry["to"]
                if route not in seen_routes and route not in skip_routes:
                    _append_unique(log.missing_files, route)

        return log

    def _place(
        self,
        content: ContentFile,
        root: Path,
        index: PlacementIndex,
        log: ChangeLog,
        skip_routes: set[str],
    ) -> None:
        route = content.route
        if content.is_index or content.is_draft:
            logger.debug("Ignoring index/draft file %s", content.path)
            skip_routes.add(route)
            return

        info = self.reader.read_info(content.path, root)
        if info is None or not info.title:
            _append_unique(
                log.missing_frontmatter, content.path.relative_to(root).as_posix()
            )
            return

        if info.skip:
            skip_routes.add(route)
            _append_unique(log.skipped, route)
            return

        placement = index.find(route)
        if placement is None:
            _append_unique(log.unmatched, route)
            return

        ensure_nav_item(placement.container, {"label": info.title.strip(), "to": route}, log)


def reconcile_docs_root(
    root: Path, *, reader: FrontmatterReader | None = None, write: bool = True
) -> ChangeLog:
    """Reconcile ``root/config.json`` against the files under ``root``.

    Parameters
    ----------
    root : Path
        Docs product directory containing ``config.json``.
    reader : FrontmatterReader, optional
        Reader whose cache should be reused; a fresh one is created if omitted.
    write : bool, optional
        Persist the config once reconciliation completes. Defaults to ``True``.

    Returns
    -------
    ChangeLog
        Categorised result of the pass.

    Raises
    ------
    FileNotFoundError
        If ``root`` has no config file.
    DocsConfigError
        If the config cannot be parsed.
    """
    config = load_docs_config(root / CONFIG_FILENAME)
    log = Reconciler(reader or FrontmatterReader()).reconcile(config, root)
    if write:
        write_docs_config(config)
    return log


__all__ = [
    "ChangeLog",
    "ContentFile",
    "LabelMismatch",
    "Reconciler",
    "ensure_nav_item",
    "list_content_files",
    "reconcile_docs_root",
    "remove_skipped",
]
