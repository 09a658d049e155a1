"""Tests for the docs-hub command-line interface."""

import io
from pathlib import Path

import pytest

from docs_hub.cli import main
from docs_hub.content import ContentRepository


def _run(root: Path, *args: str) -> int:
    return main(["--content-root", str(root), *args])


def test_validate_clean_tree(seeded_root: Path, capsys):
    assert _run(seeded_root, "validate") == 0
    out = capsys.readouterr().out
    assert "0 error(s), 0 warning(s)" in out
    assert "docs: 2" in out


def test_validate_fails_build_on_errors(seeded_root: Path, write, capsys):
    write("docs", "bad.mdx", "title: Only title")
    assert _run(seeded_root, "validate") == 1
    out = capsys.readouterr().out
    assert "error: docs/bad.mdx [description]" in out
    assert "1 error(s)" in out


def test_validate_errors_only_hides_warnings(seeded_root: Path, write, capsys):
    write(
        "staging",
        "extra.mdx",
        "title: Extra\ndescription: d\nsourceFile: 2026-03-02-architecture-call\nextractedDate: 2026-03-03\ntags: []",
    )
    assert _run(seeded_root, "validate", "--errors-only") == 0
    assert "warning:" not in capsys.readouterr().out


def test_capture_from_file(content_root: Path, tmp_path: Path, capsys):
    body = tmp_path / "note.txt"
    body.write_text("Remember the retro.", encoding="utf-8")
    code = _run(
        content_root,
        "capture",
        "Retro prep",
        "--body",
        str(body),
        "--source",
        "transcript",
        "--date",
        "2026-05-01",
        "--tag",
        "retro",
    )
    assert code == 0
    assert capsys.readouterr().out.strip() == "brain-dumps/2026-05-01-retro-prep.mdx"
    entry = ContentRepository(content_root, cache_ttl=0).require("brain-dumps", "2026-05-01-retro-prep")
    assert entry.body == "Remember the retro."
    assert entry.data.tags == ["retro"]


def test_capture_from_stdin(content_root: Path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Piped in."))
    assert _run(content_root, "capture", "Piped", "--date", "2026-05-02") == 0
    entry = ContentRepository(content_root, cache_ttl=0).require("brain-dumps", "2026-05-02-piped")
    assert entry.body == "Piped in."


def test_extract_review_integrate(seeded_root: Path, tmp_path: Path, capsys):
    items = tmp_path / "items.yaml"
    items.write_text(
        "- title: Tenant cache\n"
        "  description: Partition the cache by tenant\n"
        "  body: Prefix keys with the tenant id.\n"
        "  target_category: architecture\n"
        "  tags: [caching]\n",
        encoding="utf-8",
    )
    assert _run(seeded_root, "extract", "2026-03-05-shower-thoughts", "--items", str(items)) == 0
    assert capsys.readouterr().out.strip() == "staging/tenant-cache.mdx"

    assert _run(seeded_root, "review") == 0
    queue = capsys.readouterr().out
    assert "tenant-cache.mdx" in queue
    assert "queue-retries.mdx" in queue

    assert _run(seeded_root, "review", "tenant-cache", "--status", "ready", "--notes", "ok") == 0
    assert capsys.readouterr().out.strip() == "staging/tenant-cache.mdx: ready"

    assert _run(seeded_root, "integrate", "tenant-cache", "--order", "3") == 0
    assert capsys.readouterr().out.strip() == "docs/architecture/tenant-cache.mdx"
    doc = ContentRepository(seeded_root, cache_ttl=0).require("docs", "architecture/tenant-cache")
    assert doc.data.order == 3
    assert isinstance(doc.data.order, int)

    assert _run(seeded_root, "validate") == 0


def test_review_backward_move_fails(seeded_root: Path, capsys):
    assert _run(seeded_root, "review", "deploy-checklist", "--status", "reviewed") == 1
    assert "Cannot move deploy-checklist.mdx" in capsys.readouterr().err


def test_review_entry_requires_status(seeded_root: Path):
    with pytest.raises(SystemExit):
        _run(seeded_root, "review", "queue-retries")


def test_integrate_not_ready_fails(seeded_root: Path, capsys):
    assert _run(seeded_root, "integrate", "queue-retries") == 1
    assert "only ready entries" in capsys.readouterr().err


def test_extract_bad_items_fails(seeded_root: Path, tmp_path: Path, capsys):
    items = tmp_path / "items.yaml"
    items.write_text("- title: Missing description\n", encoding="utf-8")
    assert _run(seeded_root, "extract", "2026-03-05-shower-thoughts", "--items", str(items)) == 1
    assert "description" in capsys.readouterr().err


def test_list_published_docs(seeded_root: Path, capsys):
    assert _run(seeded_root, "list", "docs") == 0
    assert "guides/unfinished.mdx" in capsys.readouterr().out
    assert _run(seeded_root, "list", "docs", "--published") == 0
    out = capsys.readouterr().out
    assert "guides/getting-started.mdx" in out
    assert "guides/unfinished.mdx" not in out


def test_review_status_requires_entry(seeded_root: Path):
    with pytest.raises(SystemExit):
        _run(seeded_root, "review", "--status", "ready")
