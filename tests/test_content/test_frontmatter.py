"""Tests for the YAML frontmatter codec."""

from datetime import date

import pytest

from docs_hub.content.frontmatter import frontmatter_from_model, parse_document, render_document
from docs_hub.errors import FrontmatterError
from docs_hub.models import BrainDump, DocPage, StagingEntry, StagingStatus


def test_parse_document_splits_metadata_and_body():
    text = "---\ntitle: Hello\ndate: 2026-04-01\n---\n\n# Heading\n\nBody.\n"
    metadata, body = parse_document(text)
    assert metadata == {"title": "Hello", "date": date(2026, 4, 1)}
    assert body == "# Heading\n\nBody."


def test_parse_document_without_frontmatter():
    metadata, body = parse_document("Just a body.\n")
    assert metadata == {}
    assert body == "Just a body."


def test_parse_document_invalid_yaml():
    with pytest.raises(FrontmatterError, match="Invalid YAML"):
        parse_document("---\ntitle: [unclosed\n---\n\nBody\n")


def test_parse_document_non_mapping_frontmatter():
    with pytest.raises(FrontmatterError, match="mapping"):
        parse_document("---\n- a\n- b\n---\n\nBody\n")


def test_render_writes_dates_unquoted_and_keeps_key_order():
    text = render_document({"title": "T", "date": date(2026, 4, 1), "processed": False}, "Body")
    assert text.startswith("---\ntitle: T\ndate: 2026-04-01\nprocessed: false\n---\n")
    assert text.endswith("Body\n")


def test_render_flattens_enums():
    text = render_document({"status": StagingStatus.READY}, "")
    assert "status: ready" in text


def test_frontmatter_from_model_uses_aliases_and_drops_none():
    entry = StagingEntry(
        title="Queue retries",
        description="How failed jobs are retried",
        source_file="2026-01-05-standup.mdx",
        extracted_date=date(2026, 1, 6),
        status=StagingStatus.REVIEWED,
        tags=[],
    )
    assert frontmatter_from_model(entry) == {
        "title": "Queue retries",
        "description": "How failed jobs are retried",
        "sourceFile": "2026-01-05-standup.mdx",
        "extractedDate": date(2026, 1, 6),
        "status": "reviewed",
        "tags": [],
    }


@pytest.mark.parametrize(
    "model",
    [
        BrainDump(
            title="Architecture call",
            date=date(2026, 3, 2),
            source="conversation",
            duration="45 min",
            tags=["architecture"],
            processed=True,
            staged_items=["queue-retries.mdx", "deploy-checklist.mdx"],
        ),
        StagingEntry(
            title="Deploy checklist: the long version",
            description="Steps before every deploy, including 'quotes' and #hashes",
            source_file="2026-03-02-architecture-call.mdx",
            extracted_date=date(2026, 3, 3),
            target_category="operations",
            status="ready",
            tags=["deploys", "checklists"],
            related_topics=["rollbacks"],
            integration_notes="Needs a rollback section",
        ),
        DocPage(
            title="Getting started",
            description="First steps",
            date=date(2026, 1, 1),
            draft=True,
            order=2,
            category="guides",
            tags=["onboarding"],
            sidebar=False,
        ),
    ],
    ids=["brain-dump", "staging", "doc"],
)
def test_round_trip_yields_identical_object(model):
    """Serialize frontmatter to YAML, reparse, and compare both dict and model."""
    metadata = frontmatter_from_model(model)
    reparsed, body = parse_document(render_document(metadata, "Body line.\n\nSecond paragraph."))
    assert reparsed == metadata
    assert type(model).model_validate(reparsed) == model
    assert body == "Body line.\n\nSecond paragraph."
