"""Staging review: move entries forward through new -> reviewed -> ready."""

import logging

from docs_hub.content.collections import STAGING, ContentEntry, ContentRepository
from docs_hub.errors import InvalidTransitionError
from docs_hub.models import StagingStatus, updated

logger = logging.getLogger(__name__)


def advance_status(
    repo: ContentRepository,
    staging_ref: str,
    target: StagingStatus | str,
    *,
    notes: str | None = None,
) -> ContentEntry:
    """Advance a staging entry to ``target``, optionally recording notes.

    Skipping a step (new -> ready) is allowed; moving backward or to the
    current status is not. ``integrated`` is only set by integration.

    Raises:
        EntryNotFoundError: if the staging entry does not exist.
        InvalidTransitionError: for backward, same-state, or integrated moves.
    """
    target = StagingStatus(target)
    entry = repo.require(STAGING.name, staging_ref)
    current = entry.data.status

    if target == StagingStatus.INTEGRATED:
        raise InvalidTransitionError(
            entry.id, current.value, target.value, reason="use integrate to publish an entry"
        )
    if not current.can_advance_to(target):
        raise InvalidTransitionError(entry.id, current.value, target.value)

    changes: dict = {"status": target}
    if notes:
        changes["integration_notes"] = notes
    data = updated(entry.data, **changes)
    result = repo.write(STAGING.name, entry.id, data, entry.body)

    logger.info(
        "Staging status advanced",
        extra={"entry_id": entry.id, "from": current.value, "to": target.value},
    )
    return result


def review_queue(repo: ContentRepository) -> list[ContentEntry]:
    """Entries awaiting review (new or reviewed), oldest extraction first."""
    pending = [
        e
        for e in repo.scan(STAGING.name).entries
        if e.data.status in (StagingStatus.NEW, StagingStatus.REVIEWED)
    ]
    return sorted(pending, key=lambda e: (e.data.extracted_date, e.id))
