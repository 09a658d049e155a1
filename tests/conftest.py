"""Shared test fixtures: temporary content roots and an API client."""

import logging
from pathlib import Path
from textwrap import dedent

import pytest
from fastapi.testclient import TestClient

from docs_hub.app import app
from docs_hub.content import ContentRepository
from docs_hub.dependencies import get_repository


def write_doc(root: Path, collection: str, entry_id: str, frontmatter: str, body: str = "Body text.") -> Path:
    """Write a raw document under ``root/<collection>/<entry_id>``."""
    path = root / collection / entry_id
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(f"---\n{dedent(frontmatter).strip()}\n---\n\n{body}\n", encoding="utf-8")
    return path


@pytest.fixture
def content_root(tmp_path: Path) -> Path:
    root = tmp_path / "content"
    root.mkdir()
    return root


@pytest.fixture
def write(content_root: Path):
    """Write raw documents into the temporary content root."""

    def _write(collection: str, entry_id: str, frontmatter: str, body: str = "Body text.") -> Path:
        return write_doc(content_root, collection, entry_id, frontmatter, body)

    return _write


@pytest.fixture
def repo(content_root: Path) -> ContentRepository:
    """Repository with caching disabled so raw file edits are always seen."""
    return ContentRepository(content_root, cache_ttl=0)


@pytest.fixture
def seeded_root(content_root: Path) -> Path:
    """A consistent tree: one processed brain dump, two staging entries, two docs."""
    write_doc(
        content_root,
        "brain-dumps",
        "2026-03-02-architecture-call.mdx",
        """
        title: Architecture call
        date: 2026-03-02
        source: conversation
        duration: 45 min
        processed: true
        stagedItems:
          - queue-retries.mdx
          - deploy-checklist.mdx
        """,
        "We talked about retries and the deploy checklist.",
    )
    write_doc(
        content_root,
        "brain-dumps",
        "2026-03-05-shower-thoughts.mdx",
        """
        title: Shower thoughts
        date: 2026-03-05
        source: audio
        """,
        "Maybe the cache should be per tenant.",
    )
    write_doc(
        content_root,
        "staging",
        "queue-retries.mdx",
        """
        title: Queue retries
        description: How the worker queue retries failed jobs
        sourceFile: 2026-03-02-architecture-call.mdx
        extractedDate: 2026-03-03
        targetCategory: architecture
        status: new
        tags: [queues, reliability]
        """,
        "Retries use exponential backoff.",
    )
    write_doc(
        content_root,
        "staging",
        "deploy-checklist.mdx",
        """
        title: Deploy checklist
        description: Steps before every production deploy
        sourceFile: brain-dumps/2026-03-02-architecture-call.mdx
        extractedDate: 2026-03-03
        targetCategory: Operations
        status: ready
        tags: [deploys]
        """,
        "1. Check the migration plan.\n2. Announce in the channel.",
    )
    write_doc(
        content_root,
        "docs",
        "guides/getting-started.mdx",
        """
        title: Getting started
        description: First steps for new engineers
        order: 1
        category: guides
        tags: [onboarding]
        """,
    )
    write_doc(
        content_root,
        "docs",
        "guides/unfinished.mdx",
        """
        title: Unfinished page
        description: Not ready yet
        draft: true
        category: guides
        """,
    )
    return content_root


@pytest.fixture
def seeded_repo(seeded_root: Path) -> ContentRepository:
    return ContentRepository(seeded_root, cache_ttl=0)


@pytest.fixture
def client(seeded_repo: ContentRepository):
    """TestClient whose repository points at the seeded tree."""
    app.dependency_overrides[get_repository] = lambda: seeded_repo
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging so they never outlive capsys streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
