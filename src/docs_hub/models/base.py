"""Shared configuration for frontmatter schemas.

Frontmatter keys are camelCase on disk (``stagedItems``, ``sourceFile``);
models expose snake_case attributes and accept either spelling on input.
Unknown keys are ignored.
"""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must not be empty")
    return value


NonEmptyStr = Annotated[str, AfterValidator(_require_text)]


class FrontmatterModel(BaseModel):
    """Base class for all collection schemas."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


def updated(model: FrontmatterModel, **changes) -> FrontmatterModel:
    """Return a revalidated copy of ``model`` with ``changes`` applied.

    Unlike ``model_copy(update=...)`` this runs field and model validators,
    so a workflow cannot write frontmatter its own schema would reject.
    """
    data = model.model_dump()
    data.update(changes)
    return type(model).model_validate(data)
