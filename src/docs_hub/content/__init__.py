"""Content layer: frontmatter codec, collection registry, and queries.

Public API:
    ContentRepository(root)
        Loads, validates, and writes entries of the docs, brain-dumps, and
        staging collections.
    published_docs(entries) -> list[ContentEntry]
        The "published" filter: drafts are never included.
"""

from docs_hub.content.collections import (
    BRAIN_DUMPS,
    COLLECTIONS,
    DOCS,
    STAGING,
    Collection,
    ContentEntry,
    ContentRepository,
    ScanResult,
    get_collection,
    match_reference,
    resolve_reference,
    slugify,
)
from docs_hub.content.frontmatter import frontmatter_from_model, parse_document, render_document
from docs_hub.content.queries import (
    filter_by_category,
    filter_by_tag,
    published_docs,
    staging_by_status,
    unprocessed_brain_dumps,
)

__all__ = [
    "BRAIN_DUMPS",
    "COLLECTIONS",
    "DOCS",
    "STAGING",
    "Collection",
    "ContentEntry",
    "ContentRepository",
    "ScanResult",
    "filter_by_category",
    "filter_by_tag",
    "frontmatter_from_model",
    "get_collection",
    "match_reference",
    "parse_document",
    "published_docs",
    "render_document",
    "resolve_reference",
    "slugify",
    "staging_by_status",
    "unprocessed_brain_dumps",
]
