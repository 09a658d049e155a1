"""Pipeline workflows: capture, extract, review, integrate.

Each workflow is a single-actor, file-at-a-time edit through a
ContentRepository and raises a DocsHubError subclass on refusal.
"""

from docs_hub.workflows.capture import capture_brain_dump
from docs_hub.workflows.extract import ExtractedItem, extract_items
from docs_hub.workflows.integrate import integrate_entry
from docs_hub.workflows.review import advance_status, review_queue

__all__ = [
    "advance_status",
    "capture_brain_dump",
    "extract_items",
    "ExtractedItem",
    "integrate_entry",
    "review_queue",
]
