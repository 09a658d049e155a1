"""Brain dump capture: the first tier of the pipeline."""

import logging
from datetime import date

from docs_hub.content.collections import BRAIN_DUMPS, ContentEntry, ContentRepository, slugify
from docs_hub.models import BrainDump, BrainDumpSource

logger = logging.getLogger(__name__)


def capture_brain_dump(
    repo: ContentRepository,
    title: str,
    body: str,
    source: BrainDumpSource | str = BrainDumpSource.TEXT,
    *,
    captured_on: date | None = None,
    duration: str | None = None,
    tags: list[str] | None = None,
    slug: str | None = None,
) -> ContentEntry:
    """Write a new, unprocessed brain dump as ``<date>-<slug>``.

    Raises:
        pydantic.ValidationError: for an empty title or unknown source.
        DuplicateEntryError: if a brain dump with the same id exists.
    """
    captured_on = captured_on or date.today()
    dump = BrainDump(
        title=title,
        date=captured_on,
        source=source,
        duration=duration,
        tags=tags or None,
    )
    entry_id = f"{captured_on.isoformat()}-{slugify(slug or title)}"
    entry = repo.write(BRAIN_DUMPS.name, entry_id, dump, body, overwrite=False)

    logger.info(
        "Captured brain dump",
        extra={"entry_id": entry.id, "source": dump.source.value, "chars": len(entry.body)},
    )
    return entry
