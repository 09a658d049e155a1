"""Pure query helpers over loaded collection entries."""

from docs_hub.content.collections import ContentEntry
from docs_hub.models import StagingStatus


def published_docs(entries: list[ContentEntry]) -> list[ContentEntry]:
    """Docs that are not drafts, ordered by ``order`` (unset last) then title."""
    published = [e for e in entries if not e.data.draft]
    return sorted(
        published,
        key=lambda e: (e.data.order is None, e.data.order or 0, e.data.title.lower()),
    )


def filter_by_category(entries: list[ContentEntry], category: str) -> list[ContentEntry]:
    """Entries whose ``category`` matches, case-insensitively."""
    wanted = category.lower()
    return [e for e in entries if (getattr(e.data, "category", None) or "").lower() == wanted]


def filter_by_tag(entries: list[ContentEntry], tag: str) -> list[ContentEntry]:
    """Entries carrying ``tag`` in their tag list."""
    return [e for e in entries if tag in (e.data.tags or [])]


def staging_by_status(entries: list[ContentEntry], status: StagingStatus | str) -> list[ContentEntry]:
    status = StagingStatus(status)
    return [e for e in entries if e.data.status == status]


def unprocessed_brain_dumps(entries: list[ContentEntry]) -> list[ContentEntry]:
    """Brain dumps still waiting for extraction, oldest first."""
    pending = [e for e in entries if not e.data.processed]
    return sorted(pending, key=lambda e: (e.data.date, e.id))
