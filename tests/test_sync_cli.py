"""Tests for root discovery, report rendering, and the ``docs-sync`` command."""

from __future__ import annotations

import io
import typing as typ

import msgspec
import pytest

from docsync.cli import app, sync
from docsync.reconciler import ChangeLog, LabelMismatch
from docsync.report import format_change_log
from docsync.sync import NO_ROOTS_MESSAGE, find_docs_roots, sync_docs

if typ.TYPE_CHECKING:
    from pathlib import Path

    from conftest import DocsTree


def _write_root(docs_dir: Path, name: str, payload: str) -> Path:
    root = docs_dir / name
    root.mkdir(parents=True)
    (root / "config.json").write_text(payload, encoding="utf-8")
    return root


def test_find_docs_roots_only_checks_direct_children(tmp_path: Path) -> None:
    """Only immediate subdirectories holding config.json qualify."""
    docs_dir = tmp_path / "docs"
    beta = _write_root(docs_dir, "beta", "{}")
    alpha = _write_root(docs_dir, "alpha", "{}")
    (docs_dir / "plain").mkdir()
    _write_root(docs_dir / "plain", "nested", "{}")
    (docs_dir / "config.json").write_text("{}", encoding="utf-8")

    assert find_docs_roots(docs_dir) == [alpha, beta]


def test_format_change_log_orders_categories() -> None:
    """Categories print in fixed order and empty ones are omitted."""
    log = ChangeLog(
        added=["Intro -> guide/intro"],
        label_mismatches=[LabelMismatch(to="guide/a", existing="A", incoming="Alpha")],
        missing_files=["guide/old"],
    )

    assert format_change_log(log) == [
        "  Added entries:",
        "    - Intro -> guide/intro",
        "  Label/title mismatches (unchanged):",
        "    - A != Alpha (guide/a)",
        "  Config entries missing source file:",
        "    - guide/old",
    ]


def test_format_change_log_reports_no_changes() -> None:
    """An empty log renders a single line."""
    assert format_change_log(ChangeLog()) == ["  No changes detected."]


def test_sync_docs_prints_header_and_report(docs_tree: DocsTree) -> None:
    """Each root gets a ``Syncing`` header followed by its categories."""
    docs_tree.write_config([{"label": "Guide", "children": []}])
    docs_tree.write_doc("guide/intro.md", "title: Introduction")
    out = io.StringIO()

    logs = sync_docs(docs_tree.docs_dir, out=out)

    assert out.getvalue() == (
        "\nSyncing app/config.json\n"
        "  Added entries:\n"
        "    - Introduction -> guide/intro\n"
    )
    assert list(logs) == [docs_tree.root]


def test_sync_docs_without_roots(tmp_path: Path) -> None:
    """An empty docs directory prints a hint instead of failing."""
    docs_dir = tmp_path / "docs"
    docs_dir.mkdir()
    out = io.StringIO()

    assert sync_docs(docs_dir, out=out) == {}
    assert out.getvalue() == f"{NO_ROOTS_MESSAGE}\n"


def test_dry_run_reports_without_writing(docs_tree: DocsTree) -> None:
    """Dry runs leave configs byte-for-byte untouched."""
    docs_tree.write_config([{"label": "Guide", "children": []}])
    docs_tree.write_doc("guide/intro.md", "title: Introduction")
    before = docs_tree.config_path.read_bytes()

    logs = sync_docs(docs_tree.docs_dir, dry_run=True, out=io.StringIO())

    assert logs[docs_tree.root].added == ["Introduction -> guide/intro"]
    assert docs_tree.config_path.read_bytes() == before


def test_cli_failure_exits_non_zero_and_keeps_earlier_roots(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A broken config aborts the run after earlier roots were written."""
    docs_dir = tmp_path / "docs"
    good = _write_root(
        docs_dir,
        "a-good",
        '{"sections": [{"label": "Guide", "children": []}]}',
    )
    (good / "guide").mkdir()
    (good / "guide" / "intro.md").write_text("---\ntitle: Intro\n---\n", encoding="utf-8")
    bad = _write_root(docs_dir, "b-bad", "[oops")
    untouched = _write_root(docs_dir, "c-later", '{"sections": []}')

    with pytest.raises(SystemExit) as excinfo:
        sync(docs_root=docs_dir, repo_root=tmp_path)

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.err.startswith("error: "), f"unexpected stderr {captured.err!r}"
    assert str(bad / "config.json") in captured.err
    assert "Syncing a-good/config.json" in captured.out
    stored = msgspec.json.decode((good / "config.json").read_bytes())
    assert stored["sections"][0]["children"] == [{"label": "Intro", "to": "guide/intro"}]
    assert (untouched / "config.json").read_text(encoding="utf-8") == '{"sections": []}'


def test_cli_missing_docs_root_exits_non_zero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A missing docs directory is reported on stderr."""
    with pytest.raises(SystemExit) as excinfo:
        sync(docs_root=tmp_path / "absent")

    assert excinfo.value.code == 1
    assert "error:" in capsys.readouterr().err


def test_cli_reads_docs_root_from_environment(
    docs_tree: DocsTree,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    """``INPUT_DOCS_ROOT`` configures the command like ``--docs-root``."""
    docs_tree.write_config([{"label": "Guide", "children": []}])
    docs_tree.write_doc("guide/intro.md", "title: Introduction")
    monkeypatch.setenv("INPUT_DOCS_ROOT", str(docs_tree.docs_dir))
    monkeypatch.chdir(docs_tree.docs_dir.parent)

    try:
        app([])
    except SystemExit as exc:  # newer cyclopts exits with the command result
        assert not exc.code, f"unexpected exit code {exc.code!r}"

    assert "Introduction -> guide/intro" in capsys.readouterr().out
    assert docs_tree.children() == [{"label": "Introduction", "to": "guide/intro"}]
