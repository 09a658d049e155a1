"""Build-time content checks.

Schema validation of every file, then the cross-collection reference rules:

- every staging entry's ``sourceFile`` resolves to a brain dump (error)
- every brain dump ``stagedItems`` entry resolves to a staging entry (error)
- a staging entry is listed by its source brain dump (warning)
- a brain dump listing staged items is marked processed (warning)
- an integrated staging entry records integration notes (warning)
"""

import logging
from collections import Counter

from docs_hub.content.collections import (
    BRAIN_DUMPS,
    COLLECTIONS,
    STAGING,
    ContentRepository,
    match_reference,
)
from docs_hub.errors import ContentBuildError
from docs_hub.models import StagingStatus
from docs_hub.validation.report import Severity, ValidationIssue, ValidationReport

logger = logging.getLogger(__name__)


def _schema_issues(repo: ContentRepository, name: str) -> list[ValidationIssue]:
    result = repo.scan(name)
    issues = [
        ValidationIssue(collection=name, entry_id=err.entry_id, field=field or None, message=msg)
        for err in result.errors
        for field, msg in err.errors
    ]

    slugs = Counter(entry.slug for entry in result.entries)
    for slug, count in slugs.items():
        if count > 1:
            issues.append(
                ValidationIssue(
                    collection=name,
                    entry_id=slug,
                    message=f"{count} files share this slug (e.g. .md and .mdx)",
                )
            )
    return issues


def _reference_issues(repo: ContentRepository) -> list[ValidationIssue]:
    dumps = {e.slug: e for e in repo.scan(BRAIN_DUMPS.name).entries}
    staged = {e.slug: e for e in repo.scan(STAGING.name).entries}
    issues: list[ValidationIssue] = []

    for entry in staged.values():
        source = dumps.get(match_reference(entry.data.source_file, BRAIN_DUMPS, dumps))
        if source is None:
            issues.append(
                ValidationIssue(
                    collection=STAGING.name,
                    entry_id=entry.id,
                    field="sourceFile",
                    message=f"Source brain dump {entry.data.source_file!r} does not exist",
                )
            )
        else:
            listed = {match_reference(r, STAGING, staged) for r in source.data.staged_items or []}
            if entry.slug not in listed:
                issues.append(
                    ValidationIssue(
                        collection=STAGING.name,
                        entry_id=entry.id,
                        field="sourceFile",
                        message=f"Not listed in stagedItems of {source.id}",
                        severity=Severity.WARNING,
                    )
                )

        if entry.data.status == StagingStatus.INTEGRATED and not entry.data.integration_notes:
            issues.append(
                ValidationIssue(
                    collection=STAGING.name,
                    entry_id=entry.id,
                    field="integrationNotes",
                    message="Integrated entry has no integration notes",
                    severity=Severity.WARNING,
                )
            )

    for entry in dumps.values():
        items = entry.data.staged_items or []
        for ref in items:
            if match_reference(ref, STAGING, staged) is None:
                issues.append(
                    ValidationIssue(
                        collection=BRAIN_DUMPS.name,
                        entry_id=entry.id,
                        field="stagedItems",
                        message=f"Staged item {ref!r} does not exist",
                    )
                )
        if items and not entry.data.processed:
            issues.append(
                ValidationIssue(
                    collection=BRAIN_DUMPS.name,
                    entry_id=entry.id,
                    field="processed",
                    message="Has staged items but is not marked processed",
                    severity=Severity.WARNING,
                )
            )

    return issues


def validate_content(repo: ContentRepository) -> ValidationReport:
    """Run every schema and reference check over the content root."""
    issues: list[ValidationIssue] = []
    counts: dict[str, int] = {}
    for name in COLLECTIONS:
        issues.extend(_schema_issues(repo, name))
        counts[name] = len(repo.scan(name).entries)
    issues.extend(_reference_issues(repo))

    report = ValidationReport(issues=issues, counts=counts)
    logger.info(
        "Content validated",
        extra={
            "errors": len(report.errors),
            "warnings": len(report.warnings),
            "counts": counts,
        },
    )
    return report


def build_check(repo: ContentRepository) -> ValidationReport:
    """Validate and fail like a site build would.

    Raises:
        ContentBuildError: if the report contains any error.
    """
    report = validate_content(repo)
    if not report.ok:
        for issue in report.errors:
            logger.error(str(issue))
        raise ContentBuildError(report)
    return report
