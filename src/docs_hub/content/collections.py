"""Content collections: registry, entry loading, reference resolution.

Each collection is a directory under the content root whose markdown/MDX
files carry frontmatter validated by one schema. Files and directories
starting with ``_`` are not part of a collection.
"""

import logging
import os
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from cachetools import TTLCache
from pydantic import ValidationError

from docs_hub.content.frontmatter import frontmatter_from_model, parse_document, render_document
from docs_hub.errors import (
    ContentValidationError,
    DuplicateEntryError,
    EntryNotFoundError,
    FrontmatterError,
    UnknownCollectionError,
)
from docs_hub.models import BrainDump, DocPage, FrontmatterModel, StagingEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Collection:
    """A named, schema-validated directory of content files."""

    name: str
    directory: str
    schema: type[FrontmatterModel]
    extensions: tuple[str, ...] = (".md", ".mdx")


DOCS = Collection("docs", "docs", DocPage)
BRAIN_DUMPS = Collection("brain-dumps", "brain-dumps", BrainDump)
STAGING = Collection("staging", "staging", StagingEntry)

COLLECTIONS: dict[str, Collection] = {c.name: c for c in (DOCS, BRAIN_DUMPS, STAGING)}


def get_collection(name: str) -> Collection:
    """Look up a registered collection by name."""
    try:
        return COLLECTIONS[name]
    except KeyError:
        raise UnknownCollectionError(name) from None


@dataclass(frozen=True)
class ContentEntry:
    """One validated file of a collection."""

    id: str  # Path relative to the collection directory, POSIX, with extension
    collection: str
    path: Path
    data: FrontmatterModel
    body: str = ""

    @property
    def slug(self) -> str:
        """Entry id without its file extension."""
        return str(PurePosixPath(self.id).with_suffix(""))

    def to_dict(self, include_body: bool = False) -> dict:
        """JSON-ready representation for the HTTP layer."""
        payload = {
            "id": self.id,
            "slug": self.slug,
            "collection": self.collection,
            "data": self.data.model_dump(mode="json", by_alias=True, exclude_none=True),
        }
        if include_body:
            payload["body"] = self.body
        return payload


_SLUG_STRIP = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """Lowercase ASCII slug: runs of anything else collapse to one hyphen."""
    slug = _SLUG_STRIP.sub("-", text.lower()).strip("-")
    return slug or "untitled"


def resolve_reference(ref: str, collection: Collection, strip_directory: bool = True) -> str:
    """Normalize a reference string to a collection-relative slug.

    Accepts ``name``, ``name.mdx``, ``<directory>/name.mdx`` and
    ``src/content/<directory>/name.mdx``; backslashes are treated as
    separators. With ``strip_directory=False`` a leading ``<directory>/``
    is kept, so ``docs/foo`` names the nested entry ``docs/docs/foo.mdx``.

    >>> resolve_reference("src/content/brain-dumps/2024-05-01-standup.mdx", BRAIN_DUMPS)
    '2024-05-01-standup'
    """
    parts = [p for p in ref.strip().replace("\\", "/").split("/") if p not in ("", ".")]

    # Drop everything up to and including "<...>/content/<directory>"
    for i in range(len(parts) - 1):
        if parts[i] == "content" and parts[i + 1] == collection.directory:
            parts = parts[i + 2 :]
            break
    else:
        if strip_directory and len(parts) > 1 and parts[0] == collection.directory:
            parts = parts[1:]

    if not parts:
        return ""
    path = PurePosixPath(*parts)
    if path.suffix in collection.extensions:
        path = path.with_suffix("")
    return str(path)


def match_reference(ref: str, collection: Collection, slugs) -> str | None:
    """Return the slug among ``slugs`` that ``ref`` names, or None.

    The prefix-stripped form wins; the literal form is the fallback for
    entries nested under a directory named like the collection.
    """
    slugs = set(slugs)
    for strip in (True, False):
        key = resolve_reference(ref, collection, strip_directory=strip)
        if key and key in slugs:
            return key
    return None


@dataclass
class ScanResult:
    """Entries that validated plus the errors for the files that did not."""

    entries: list[ContentEntry] = field(default_factory=list)
    errors: list[ContentValidationError] = field(default_factory=list)


class ContentRepository:
    """Read/write access to the collections under one content root.

    Loaded collections are cached with a TTL; every write through the
    repository invalidates the affected collection. The cache is guarded by
    a lock because the HTTP app serves requests from a threadpool.
    """

    def __init__(self, root: Path, cache_ttl: int = 30, default_extension: str = ".mdx") -> None:
        self.root = Path(root)
        self.default_extension = default_extension
        self._cache: TTLCache = TTLCache(maxsize=len(COLLECTIONS), ttl=max(cache_ttl, 0))
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "ContentRepository":
        return cls(
            settings.content_root,
            cache_ttl=settings.collection_cache_ttl,
            default_extension=settings.default_extension,
        )

    # -- Paths --

    def _files(self, collection: Collection) -> list[Path]:
        base = self.root / collection.directory
        if not base.is_dir():
            return []
        files = []
        for path in base.rglob("*"):
            rel = path.relative_to(base)
            if any(part.startswith("_") for part in rel.parts):
                continue
            if path.is_file() and path.suffix in collection.extensions:
                files.append(path)
        return sorted(files)

    def _entry_path(self, collection: Collection, entry_id: str) -> tuple[str, Path]:
        rel = PurePosixPath(entry_id)
        if rel.suffix not in collection.extensions:
            rel = rel.with_name(rel.name + self.default_extension)
        return str(rel), self.root / collection.directory / Path(*rel.parts)

    # -- Reading --

    def _load_file(self, collection: Collection, path: Path) -> ContentEntry:
        entry_id = path.relative_to(self.root / collection.directory).as_posix()
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise ContentValidationError(
                collection.name, entry_id, [("", f"File is not valid UTF-8: {exc}")]
            ) from exc
        except OSError as exc:
            raise ContentValidationError(
                collection.name, entry_id, [("", f"File could not be read: {exc}")]
            ) from exc

        try:
            metadata, body = parse_document(text)
        except FrontmatterError as exc:
            raise ContentValidationError(collection.name, entry_id, [("", str(exc))]) from exc

        try:
            data = collection.schema.model_validate(metadata)
        except ValidationError as exc:
            errors = [
                (".".join(str(loc) for loc in err["loc"]), err["msg"])
                for err in exc.errors()
            ]
            raise ContentValidationError(collection.name, entry_id, errors) from exc

        return ContentEntry(id=entry_id, collection=collection.name, path=path, data=data, body=body)

    def scan(self, name: str) -> ScanResult:
        """Load every file of a collection without raising on bad files."""
        with self._lock:
            cached = self._cache.get(name)
        if cached is not None:
            return cached

        collection = get_collection(name)
        result = ScanResult()
        for path in self._files(collection):
            try:
                result.entries.append(self._load_file(collection, path))
            except ContentValidationError as exc:
                logger.warning("Invalid content file: %s", exc)
                result.errors.append(exc)

        with self._lock:
            self._cache[name] = result
        return result

    def entries(self, name: str) -> list[ContentEntry]:
        """Return every entry of a collection.

        Raises:
            ContentValidationError: for the first file that fails its schema.
        """
        result = self.scan(name)
        if result.errors:
            raise result.errors[0]
        return list(result.entries)

    def get(self, name: str, ref: str) -> ContentEntry | None:
        """Resolve a reference to a valid entry, or None."""
        entries = self.scan(name).entries
        key = match_reference(ref, get_collection(name), (e.slug for e in entries))
        if key is None:
            return None
        return next(e for e in entries if e.slug == key)

    def require(self, name: str, ref: str) -> ContentEntry:
        """Like ``get`` but raises EntryNotFoundError."""
        entry = self.get(name, ref)
        if entry is None:
            raise EntryNotFoundError(name, ref)
        return entry

    def exists(self, name: str, ref: str) -> bool:
        """True if any file (valid or not) of the collection matches ``ref``."""
        collection = get_collection(name)
        base = self.root / collection.directory
        slugs = (path.relative_to(base).with_suffix("").as_posix() for path in self._files(collection))
        return match_reference(ref, collection, slugs) is not None

    # -- Writing --

    def _taken(self, collection: Collection, rel_id: str) -> bool:
        slug = str(PurePosixPath(rel_id).with_suffix(""))
        base = self.root / collection.directory
        return any(path.relative_to(base).with_suffix("").as_posix() == slug for path in self._files(collection))

    def write(
        self,
        name: str,
        entry_id: str,
        data: FrontmatterModel,
        body: str = "",
        *,
        overwrite: bool = True,
    ) -> ContentEntry:
        """Serialize and atomically write one entry.

        ``entry_id`` without an extension gets the default extension.

        Raises:
            TypeError: if ``data`` is not the collection's schema.
            DuplicateEntryError: if ``overwrite`` is False and the entry exists.
        """
        collection = get_collection(name)
        if not isinstance(data, collection.schema):
            raise TypeError(
                f"{name} entries must be {collection.schema.__name__}, got {type(data).__name__}"
            )

        rel_id, path = self._entry_path(collection, entry_id)
        if not overwrite and self._taken(collection, rel_id):
            raise DuplicateEntryError(name, rel_id)

        text = render_document(frontmatter_from_model(data), body)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(f".{path.name}.tmp")
        tmp.write_text(text, encoding="utf-8")
        os.replace(tmp, path)

        self.invalidate(name)
        logger.info("Wrote %s entry %s", name, rel_id)
        return ContentEntry(id=rel_id, collection=name, path=path, data=data, body=body.strip())

    def invalidate(self, name: str | None = None) -> None:
        """Drop cached scans for one collection, or all of them."""
        with self._lock:
            if name is None:
                self._cache.clear()
            else:
                self._cache.pop(name, None)
