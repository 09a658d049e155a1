"""Command-line entry point: ``docs-hub <command>``.

Commands mirror the pipeline tiers:

    validate    schema + reference checks, exit 1 on errors (the build gate)
    capture     write a new brain dump (body from a file or stdin)
    extract     stage items from a brain dump (items from a YAML file)
    review      advance a staging entry's status
    integrate   publish a ready staging entry as a doc page
    list        list a collection's entries
"""

import argparse
import logging
import sys
from datetime import date
from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from docs_hub.config import get_settings
from docs_hub.content import COLLECTIONS, DOCS, ContentRepository, published_docs
from docs_hub.errors import DocsHubError
from docs_hub.logging_config import configure_logging
from docs_hub.models import BrainDumpSource, StagingStatus
from docs_hub.validation import Severity, validate_content
from docs_hub.workflows import (
    ExtractedItem,
    advance_status,
    capture_brain_dump,
    extract_items,
    integrate_entry,
    review_queue,
)

logger = logging.getLogger(__name__)

_ITEMS_ADAPTER = TypeAdapter(list[ExtractedItem])


def _number(value: str) -> int | float:
    number = float(value)
    return int(number) if number.is_integer() else number


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _cmd_validate(repo: ContentRepository, args: argparse.Namespace) -> int:
    report = validate_content(repo)
    for issue in report.issues:
        if issue.severity == Severity.ERROR or not args.errors_only:
            print(issue)
    counts = ", ".join(f"{name}: {count}" for name, count in report.counts.items())
    print(f"{len(report.errors)} error(s), {len(report.warnings)} warning(s) ({counts})")
    return 0 if report.ok else 1


def _cmd_capture(repo: ContentRepository, args: argparse.Namespace) -> int:
    entry = capture_brain_dump(
        repo,
        args.title,
        _read_text(args.body),
        args.source,
        captured_on=args.date,
        duration=args.duration,
        tags=args.tag or None,
    )
    print(f"brain-dumps/{entry.id}")
    return 0


def _cmd_extract(repo: ContentRepository, args: argparse.Namespace) -> int:
    raw = yaml.safe_load(_read_text(args.items)) or []
    items = _ITEMS_ADAPTER.validate_python(raw)
    for entry in extract_items(repo, args.brain_dump, items, extracted_on=args.date):
        print(f"staging/{entry.id}")
    return 0


def _cmd_review(repo: ContentRepository, args: argparse.Namespace) -> int:
    if args.entry is None:
        for entry in review_queue(repo):
            print(f"{entry.data.status.value:<9} {entry.id}  {entry.data.title}")
        return 0
    entry = advance_status(repo, args.entry, args.status, notes=args.notes)
    print(f"staging/{entry.id}: {entry.data.status.value}")
    return 0


def _cmd_integrate(repo: ContentRepository, args: argparse.Namespace) -> int:
    doc = integrate_entry(
        repo,
        args.entry,
        doc_id=args.doc_id,
        category=args.category,
        order=args.order,
        draft=args.draft,
        notes=args.notes,
    )
    print(f"docs/{doc.id}")
    return 0


def _cmd_list(repo: ContentRepository, args: argparse.Namespace) -> int:
    entries = repo.scan(args.collection).entries
    if args.collection == DOCS.name and args.published:
        entries = published_docs(entries)
    for entry in entries:
        print(f"{entry.id}  {entry.data.title}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="docs-hub", description="Brain dump -> staging -> docs pipeline")
    parser.add_argument("--content-root", type=Path, help="Override CONTENT_ROOT")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("validate", help="Check schemas and references")
    p.add_argument("--errors-only", action="store_true")
    p.set_defaults(func=_cmd_validate)

    p = sub.add_parser("capture", help="Capture a brain dump")
    p.add_argument("title")
    p.add_argument("--body", default="-", help="Body file, '-' for stdin")
    p.add_argument("--source", choices=[s.value for s in BrainDumpSource], default=BrainDumpSource.TEXT.value)
    p.add_argument("--date", type=date.fromisoformat)
    p.add_argument("--duration")
    p.add_argument("--tag", action="append")
    p.set_defaults(func=_cmd_capture)

    p = sub.add_parser("extract", help="Stage items from a brain dump")
    p.add_argument("brain_dump")
    p.add_argument("--items", default="-", help="YAML list of items, '-' for stdin")
    p.add_argument("--date", type=date.fromisoformat)
    p.set_defaults(func=_cmd_extract)

    p = sub.add_parser("review", help="Show the review queue or advance an entry")
    p.add_argument("entry", nargs="?")
    p.add_argument("--status", choices=[StagingStatus.REVIEWED.value, StagingStatus.READY.value])
    p.add_argument("--notes")
    p.set_defaults(func=_cmd_review)

    p = sub.add_parser("integrate", help="Publish a ready staging entry")
    p.add_argument("entry")
    p.add_argument("--doc-id")
    p.add_argument("--category")
    p.add_argument("--order", type=_number)
    p.add_argument("--draft", action="store_true")
    p.add_argument("--notes")
    p.set_defaults(func=_cmd_integrate)

    p = sub.add_parser("list", help="List a collection")
    p.add_argument("collection", choices=list(COLLECTIONS))
    p.add_argument("--published", action="store_true", help="docs only: drop drafts")
    p.set_defaults(func=_cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "review" and args.entry and not args.status:
        parser.error("review: --status is required when an entry is given")
    if args.command == "review" and args.status and not args.entry:
        parser.error("review: --status needs an entry")

    settings = get_settings()
    configure_logging(settings.log_level, stream="ext://sys.stderr")
    repo = ContentRepository(
        args.content_root or settings.content_root,
        cache_ttl=settings.collection_cache_ttl,
        default_extension=settings.default_extension,
    )

    try:
        return args.func(repo, args)
    except (DocsHubError, ValidationError, ValueError, OSError, yaml.YAMLError) as exc:
        logger.error("Command failed", extra={"command": args.command, "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
