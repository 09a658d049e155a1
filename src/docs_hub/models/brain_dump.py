"""Brain dump schema: raw captured notes awaiting extraction."""

import datetime as dt
from enum import Enum

from pydantic import model_validator

from docs_hub.models.base import FrontmatterModel, NonEmptyStr


class BrainDumpSource(str, Enum):
    """How the brain dump was captured."""

    AUDIO = "audio"
    TEXT = "text"
    TRANSCRIPT = "transcript"
    CONVERSATION = "conversation"


class BrainDump(FrontmatterModel):
    """Frontmatter of a file in the ``brain-dumps`` collection.

    Archival: a brain dump is never deleted. Extraction flips ``processed``
    and records the staging entry ids it produced in ``staged_items``.
    """

    title: NonEmptyStr
    date: dt.date
    source: BrainDumpSource
    duration: str | None = None  # Free text, e.g. "12 min"
    tags: list[str] | None = None
    processed: bool = False
    staged_items: list[str] | None = None

    @model_validator(mode="after")
    def _processed_needs_items(self) -> "BrainDump":
        if self.processed and not self.staged_items:
            raise ValueError("processed brain dumps must list at least one staged item")
        return self
