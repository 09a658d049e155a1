"""Staging entry schema: one extracted topic in the landing zone."""

import datetime as dt
from enum import Enum

from docs_hub.models.base import FrontmatterModel, NonEmptyStr


class StagingStatus(str, Enum):
    """Review status of a staging entry, in workflow order."""

    NEW = "new"
    REVIEWED = "reviewed"
    READY = "ready"
    INTEGRATED = "integrated"

    @property
    def rank(self) -> int:
        """Position in the workflow, NEW is 0."""
        return list(StagingStatus).index(self)

    def can_advance_to(self, target: "StagingStatus") -> bool:
        """True when ``target`` is strictly later in the workflow."""
        return target.rank > self.rank


class StagingEntry(FrontmatterModel):
    """Frontmatter of a file in the ``staging`` collection."""

    title: NonEmptyStr
    description: NonEmptyStr
    source_file: NonEmptyStr  # Reference to a brain-dumps entry
    extracted_date: dt.date
    target_category: str | None = None
    status: StagingStatus = StagingStatus.NEW
    tags: list[str]
    related_topics: list[str] | None = None
    integration_notes: str | None = None
