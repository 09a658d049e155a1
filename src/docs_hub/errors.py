"""Exception hierarchy for the content pipeline."""


class DocsHubError(Exception):
    """Base class for all docs-hub errors."""


class UnknownCollectionError(DocsHubError):
    """Raised when a collection name is not registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown collection: {name!r}")


class FrontmatterError(DocsHubError):
    """Raised when a document's frontmatter block cannot be parsed as YAML."""


class ContentValidationError(DocsHubError):
    """Raised when a document's frontmatter does not match its collection schema.

    ``errors`` holds ``(field, message)`` pairs, field is "" for
    document-level problems.
    """

    def __init__(self, collection: str, entry_id: str, errors: list[tuple[str, str]]) -> None:
        self.collection = collection
        self.entry_id = entry_id
        self.errors = errors
        detail = "; ".join(f"{field}: {msg}" if field else msg for field, msg in errors)
        super().__init__(f"{collection}/{entry_id}: {detail}")


class ContentBuildError(DocsHubError):
    """Raised by the build check when the content tree has errors."""

    def __init__(self, report) -> None:
        self.report = report
        super().__init__(f"Content build failed with {len(report.errors)} error(s)")


class EntryNotFoundError(DocsHubError):
    """Raised when a reference does not resolve to an entry."""

    def __init__(self, collection: str, ref: str) -> None:
        self.collection = collection
        self.ref = ref
        super().__init__(f"No {collection} entry matches {ref!r}")


class DuplicateEntryError(DocsHubError):
    """Raised when a workflow would overwrite an existing entry."""

    def __init__(self, collection: str, entry_id: str) -> None:
        self.collection = collection
        self.entry_id = entry_id
        super().__init__(f"{collection}/{entry_id} already exists")


class InvalidTransitionError(DocsHubError):
    """Raised when a staging entry's status would move backward or sideways."""

    def __init__(self, entry_id: str, current: str, target: str, reason: str = "") -> None:
        self.entry_id = entry_id
        self.current = current
        self.target = target
        message = f"Cannot move {entry_id} from {current!r} to {target!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
