"""Content schemas for the three collections of the pipeline."""

from docs_hub.models.base import FrontmatterModel, updated
from docs_hub.models.brain_dump import BrainDump, BrainDumpSource
from docs_hub.models.docs import DocPage
from docs_hub.models.staging import StagingEntry, StagingStatus

__all__ = [
    "BrainDump",
    "BrainDumpSource",
    "DocPage",
    "FrontmatterModel",
    "StagingEntry",
    "StagingStatus",
    "updated",
]
