"""Staging extraction: split a brain dump into reviewable topics.

Each extracted item becomes a staging entry pointing back at its brain
dump; the brain dump is then marked processed and lists every entry it
produced, so both directions of the reference stay intact.
"""

import logging
from datetime import date

from pydantic import BaseModel

from docs_hub.content.collections import BRAIN_DUMPS, STAGING, ContentEntry, ContentRepository, slugify
from docs_hub.errors import DuplicateEntryError
from docs_hub.models import StagingEntry, StagingStatus, updated
from docs_hub.models.base import NonEmptyStr

logger = logging.getLogger(__name__)


class ExtractedItem(BaseModel):
    """One topic pulled out of a brain dump."""

    title: NonEmptyStr
    description: NonEmptyStr
    body: str = ""
    target_category: str | None = None
    tags: list[str] = []
    related_topics: list[str] | None = None
    slug: str | None = None  # Defaults to the slugified title


def extract_items(
    repo: ContentRepository,
    brain_dump_ref: str,
    items: list[ExtractedItem],
    *,
    extracted_on: date | None = None,
) -> list[ContentEntry]:
    """Create staging entries for ``items`` and mark the brain dump processed.

    All target ids are checked before anything is written, so a collision
    leaves the content tree untouched.

    Raises:
        ValueError: if ``items`` is empty.
        EntryNotFoundError: if the brain dump does not exist.
        DuplicateEntryError: if an item's staging id is taken or repeated.
    """
    if not items:
        raise ValueError("Extraction needs at least one item")

    dump = repo.require(BRAIN_DUMPS.name, brain_dump_ref)
    extracted_on = extracted_on or date.today()

    planned: list[tuple[str, ExtractedItem]] = []
    seen: set[str] = set()
    for item in items:
        entry_id = slugify(item.slug or item.title)
        if entry_id in seen or repo.exists(STAGING.name, entry_id):
            raise DuplicateEntryError(STAGING.name, entry_id)
        seen.add(entry_id)
        planned.append((entry_id, item))

    created: list[ContentEntry] = []
    for entry_id, item in planned:
        staging = StagingEntry(
            title=item.title,
            description=item.description,
            source_file=dump.id,
            extracted_date=extracted_on,
            target_category=item.target_category,
            status=StagingStatus.NEW,
            tags=item.tags,
            related_topics=item.related_topics,
        )
        created.append(repo.write(STAGING.name, entry_id, staging, item.body, overwrite=False))

    staged_items = list(dump.data.staged_items or [])
    for entry in created:
        if entry.id not in staged_items:
            staged_items.append(entry.id)
    processed = updated(dump.data, processed=True, staged_items=staged_items)
    repo.write(BRAIN_DUMPS.name, dump.id, processed, dump.body)

    logger.info(
        "Extracted staging entries",
        extra={"brain_dump": dump.id, "staged": [e.id for e in created]},
    )
    return created
