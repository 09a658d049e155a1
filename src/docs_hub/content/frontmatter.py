"""YAML frontmatter codec for markdown/MDX documents.

Parsing and rendering go through python-frontmatter so files written here
read back exactly as the site framework sees them: dates stay YAML dates
(unquoted), enums are written as their string values, and key order
follows the schema's field order.
"""

from enum import Enum

import frontmatter
import yaml

from docs_hub.errors import FrontmatterError
from docs_hub.models.base import FrontmatterModel


def parse_document(text: str) -> tuple[dict, str]:
    """Split a document into its frontmatter mapping and body.

    A document without a frontmatter block yields an empty mapping. The body
    is returned with surrounding whitespace stripped.

    Raises:
        FrontmatterError: if the frontmatter block is not valid YAML or is
            not a mapping.
    """
    try:
        post = frontmatter.loads(text)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"Invalid YAML frontmatter: {exc}") from exc

    # python-frontmatter silently drops non-mapping blocks; treat them as errors
    if not post.metadata and _has_nonempty_block(text):
        raise FrontmatterError("Frontmatter must be a YAML mapping")

    return dict(post.metadata), post.content.strip()


def _has_nonempty_block(text: str) -> bool:
    handler = frontmatter.YAMLHandler()
    text = text.strip()
    if not handler.detect(text):
        return False
    try:
        block, _ = handler.split(text)
    except ValueError:
        # Unterminated block: python-frontmatter treats the whole text as body
        return False
    return yaml.safe_load(block) not in (None, {})


def _plain(value):
    """Flatten enums (recursively) so SafeDumper can represent the value."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    return value


def frontmatter_from_model(model: FrontmatterModel) -> dict:
    """Return the on-disk frontmatter mapping for a schema instance.

    Keys use their camelCase aliases, ``None`` values are omitted.
    """
    return _plain(model.model_dump(by_alias=True, exclude_none=True))


def render_document(metadata: dict, body: str) -> str:
    """Render a frontmatter mapping and a markdown body as a document."""
    post = frontmatter.Post(body.strip())
    post.metadata.update(_plain(metadata))
    return frontmatter.dumps(post, sort_keys=False) + "\n"
