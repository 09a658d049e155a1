"""FastAPI application: read-only content API plus brain dump capture."""

import datetime as dt
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from docs_hub import __version__
from docs_hub.config import get_settings
from docs_hub.content import (
    DOCS,
    ContentRepository,
    filter_by_category,
    filter_by_tag,
    published_docs,
)
from docs_hub.dependencies import get_repository, verify_capture
from docs_hub.errors import DuplicateEntryError, UnknownCollectionError
from docs_hub.logging_config import configure_logging
from docs_hub.models import BrainDumpSource
from docs_hub.validation import validate_content
from docs_hub.workflows import capture_brain_dump


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield


app = FastAPI(
    title="Docs Hub",
    lifespan=lifespan,
    # /docs is the published-docs endpoint, not Swagger UI
    docs_url=None,
    redoc_url=None,
)


@app.exception_handler(UnknownCollectionError)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(DuplicateEntryError)
async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def schema_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Invalid frontmatter",
            "errors": [
                {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
                for err in exc.errors()
            ],
        },
    )


class CaptureRequest(BaseModel):
    """Body of POST /brain-dumps."""

    title: str = Field(min_length=1)
    body: str
    source: BrainDumpSource = BrainDumpSource.TEXT
    date: dt.date | None = None
    duration: str | None = None
    tags: list[str] | None = None


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "docs-hub",
        "version": __version__,
    }


@app.get("/collections/{name}")
def list_collection(name: str, repo: ContentRepository = Depends(get_repository)):
    """Every valid entry of a collection, frontmatter only."""
    entries = repo.scan(name).entries
    return {"collection": name, "entries": [e.to_dict() for e in entries]}


@app.get("/docs")
def list_docs(
    category: str | None = None,
    tag: str | None = None,
    repo: ContentRepository = Depends(get_repository),
):
    """Published docs (drafts excluded), optionally filtered."""
    entries = published_docs(repo.scan(DOCS.name).entries)
    if category:
        entries = filter_by_category(entries, category)
    if tag:
        entries = filter_by_tag(entries, tag)
    return {"entries": [e.to_dict() for e in entries]}


@app.get("/docs/{slug:path}")
def get_doc(slug: str, repo: ContentRepository = Depends(get_repository)):
    """One published doc with its body. Drafts are reported as missing."""
    entry = repo.get(DOCS.name, slug)
    if entry is None or entry.data.draft:
        raise HTTPException(status_code=404, detail=f"No published doc {slug!r}")
    return entry.to_dict(include_body=True)


@app.get("/validate")
def validate(repo: ContentRepository = Depends(get_repository)):
    """Run the content checks and return the report."""
    repo.invalidate()
    report = validate_content(repo)
    return {
        "ok": report.ok,
        "counts": report.counts,
        "issues": [issue.model_dump(mode="json") for issue in report.issues],
    }


@app.post("/brain-dumps", status_code=201)
def capture(
    payload: CaptureRequest,
    repo: ContentRepository = Depends(get_repository),
    _: None = Depends(verify_capture),
):
    """Capture a new brain dump into the first tier of the pipeline."""
    entry = capture_brain_dump(
        repo,
        payload.title,
        payload.body,
        payload.source,
        captured_on=payload.date,
        duration=payload.duration,
        tags=payload.tags,
    )
    return entry.to_dict()
