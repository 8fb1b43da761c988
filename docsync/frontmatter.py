r"""Read the restricted frontmatter header of Markdown content files.

Only three keys matter to navigation sync: ``title`` (the sidebar label),
``skip`` (keep the page out of the nav), and ``ref`` (borrow ``title`` and
``skip`` from another file). Everything else in the header is ignored.

Example
-------
>>> info = parse_frontmatter("---\ntitle: 'Intro' # sidebar label\nskip: yes\n---\nBody")
>>> info.title, info.skip
('Intro', True)
>>> parse_frontmatter("# No header") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import os
import re
from pathlib import Path

from ._constants import DOCS_REF_PREFIX

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(r"\A---\s*\n(.*?)\n---\s*", re.DOTALL)
_INLINE_COMMENT_PATTERN = re.compile(r"\s+#")
_REF_TERMINATOR_PATTERN = re.compile(r"[\s#]")
_TRUTHY_VALUES = frozenset({"true", "yes", "1"})


@dc.dataclass(slots=True)
class FrontmatterInfo:
    """Navigation-relevant fields extracted from a content file header.

    Attributes
    ----------
    title : str or None
        Sidebar label, either declared directly or inherited through ``ref``.
    skip : bool
        ``True`` when the page must be kept out of the navigation.
    ref : str or None
        Raw reference to another content file, as written in the header.
    """

    title: str | None = None
    skip: bool = False
    ref: str | None = None


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        return value[1:-1]
    return value


def parse_frontmatter(text: str) -> FrontmatterInfo | None:
    """Parse the leading ``---`` block of ``text``.

    Parameters
    ----------
    text : str
        Full content of a Markdown file.

    Returns
    -------
    FrontmatterInfo or None
        The recognised fields, or ``None`` when the text does not open with a
        delimited header block.
    """
    header = FRONTMATTER_PATTERN.match(text)
    if not header:
        return None

    info = FrontmatterInfo()
    for line in header.group(1).splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        key, sep, value = stripped.partition(":")
        key = key.strip()
        value = value.strip()
        if not sep or not key or not value:
            continue
        value = _INLINE_COMMENT_PATTERN.split(value, maxsplit=1)[0]

        match key:
            case "title":
                info.title = _strip_quotes(value).strip()
            case "skip":
                info.skip = value.lower() in _TRUTHY_VALUES
            case "ref":
                info.ref = _strip_quotes(value)
            case _:
                continue
    return info


def resolve_ref_path(
    source: Path, ref: str, root: Path, repo_root: Path
) -> Path | None:
    """Return the file a ``ref`` value points at, or ``None`` for empty refs.

    Anything after the first whitespace or ``#`` (an anchor fragment) is
    dropped. Refs starting with ``.`` are relative to ``source``'s directory,
    refs starting with ``docs/`` are relative to ``repo_root``, and all other
    refs are relative to ``root``.
    """
    clean = _REF_TERMINATOR_PATTERN.split(ref, maxsplit=1)[0]
    if not clean:
        return None
    if clean.startswith("."):
        base = source.parent
    elif clean.startswith(DOCS_REF_PREFIX):
        base = repo_root
    else:
        base = root
    return _normalize(base / clean)


def _normalize(path: Path) -> Path:
    return Path(os.path.normpath(os.path.abspath(path)))


class FrontmatterReader:
    """Resolve frontmatter for content files, following ``ref`` chains.

    Each reader owns a memo cache keyed by absolute path, so one instance
    should live for exactly one synchronization run. Unreadable files and files
    without a header both resolve to ``None`` and are cached that way too.

    Examples
    --------
    >>> reader = FrontmatterReader(repo_root=Path("."))
    >>> info = reader.read_info(Path("docs/app/guide/intro.md"), Path("docs/app"))  # doctest: +SKIP
    >>> info.title  # doctest: +SKIP
    'Introduction'
    """

    def __init__(self, *, repo_root: Path | None = None) -> None:
        """Initialise the reader.

        Parameters
        ----------
        repo_root : Path, optional
            Directory that ``docs/``-prefixed refs resolve against. Defaults to
            the current working directory.
        """
        self.repo_root = _normalize(repo_root or Path.cwd())
        self._cache: dict[Path, FrontmatterInfo | None] = {}

    def read_info(self, path: Path, root: Path) -> FrontmatterInfo | None:
        """Return the resolved frontmatter of ``path``.

        Parameters
        ----------
        path : Path
            Content file to inspect.
        root : Path
            Docs root that bare refs resolve against.

        Returns
        -------
        FrontmatterInfo or None
            Header fields with ``title`` and ``skip`` inherited from the ref
            chain where the file has no title of its own; ``None`` when the
            file is unreadable or has no header.
        """
        return self._read(_normalize(path), root, set())

    def cache_clear(self) -> None:
        """Forget every memoised result."""
        self._cache.clear()

    def _read(
        self, key: Path, root: Path, in_progress: set[Path]
    ) -> FrontmatterInfo | None:
        if key in self._cache:
            return self._cache[key]

        try:
            text = key.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Unable to read %s: %s", key, exc)
            self._cache[key] = None
            return None

        info = parse_frontmatter(text)
        if info is None:
            logger.debug("No frontmatter block in %s", key)
            self._cache[key] = None
            return None

        if not info.title and info.ref:
            in_progress.add(key)
            self._inherit(info, key, root, in_progress)
            in_progress.discard(key)

        self._cache[key] = info
        return info

    def _inherit(
        self,
        info: FrontmatterInfo,
        source: Path,
        root: Path,
        in_progress: set[Path],
    ) -> None:
        target = resolve_ref_path(source, info.ref or "", root, self.repo_root)
        if target is None:
            return
        if target in in_progress:
            logger.debug("Ref cycle at %s -> %s; not following", source, target)
            return
        logger.debug("Following ref %s -> %s", source, target)
        referenced = self._read(target, root, in_progress)
        if referenced is None:
            return
        if referenced.title:
            info.title = referenced.title
        if referenced.skip:
            info.skip = True


__all__ = [
    "FRONTMATTER_PATTERN",
    "FrontmatterInfo",
    "FrontmatterReader",
    "parse_frontmatter",
    "resolve_ref_path",
]
