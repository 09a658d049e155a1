"""Doc page schema: canonical published content."""

import datetime as dt

from docs_hub.models.base import FrontmatterModel, NonEmptyStr


class DocPage(FrontmatterModel):
    """Frontmatter of a file in the ``docs`` collection."""

    title: NonEmptyStr
    description: NonEmptyStr
    date: dt.date | None = None
    draft: bool = False
    order: int | float | None = None
    category: str | None = None
    tags: list[str] | None = None
    sidebar: bool = True
