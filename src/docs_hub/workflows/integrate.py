"""Production integration: publish a ready staging entry as a doc page."""

import logging
from datetime import date
from pathlib import PurePosixPath

from docs_hub.content.collections import DOCS, STAGING, ContentEntry, ContentRepository, slugify
from docs_hub.errors import InvalidTransitionError
from docs_hub.models import DocPage, StagingStatus, updated

logger = logging.getLogger(__name__)


def integrate_entry(
    repo: ContentRepository,
    staging_ref: str,
    *,
    doc_id: str | None = None,
    category: str | None = None,
    order: int | float | None = None,
    draft: bool = False,
    notes: str | None = None,
    published_on: date | None = None,
) -> ContentEntry:
    """Copy a ready staging entry into the docs collection.

    The doc lands at ``<category>/<slug>`` (category from the argument or
    the entry's ``targetCategory``) unless ``doc_id`` is given. The staging
    entry is kept, marked integrated, with notes pointing at the new doc.

    Raises:
        EntryNotFoundError: if the staging entry does not exist.
        InvalidTransitionError: if the entry is not ``ready``.
        DuplicateEntryError: if the doc page already exists.
    """
    entry = repo.require(STAGING.name, staging_ref)
    staging = entry.data
    if staging.status != StagingStatus.READY:
        raise InvalidTransitionError(
            entry.id,
            staging.status.value,
            StagingStatus.INTEGRATED.value,
            reason="only ready entries can be integrated",
        )

    category = category or staging.target_category
    if doc_id is None:
        name = PurePosixPath(entry.slug).name
        doc_id = f"{slugify(category)}/{name}" if category else name

    page = DocPage(
        title=staging.title,
        description=staging.description,
        date=published_on or date.today(),
        draft=draft,
        order=order,
        category=category,
        tags=staging.tags or None,
    )
    doc = repo.write(DOCS.name, doc_id, page, entry.body, overwrite=False)

    record = f"Integrated into docs/{doc.id}"
    if notes:
        record = f"{record}. {notes}"
    if staging.integration_notes:
        record = f"{staging.integration_notes}\n{record}"
    repo.write(
        STAGING.name,
        entry.id,
        updated(staging, status=StagingStatus.INTEGRATED, integration_notes=record),
        entry.body,
    )

    logger.info(
        "Integrated staging entry",
        extra={"entry_id": entry.id, "doc_id": doc.id, "draft": draft},
    )
    return doc
