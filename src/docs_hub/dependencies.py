"""FastAPI dependencies shared by the routers."""

from functools import lru_cache

from fastapi import HTTPException, Request

from docs_hub.config import get_settings
from docs_hub.content import ContentRepository


@lru_cache
def get_repository() -> ContentRepository:
    """Return the process-wide repository for the configured content root."""
    return ContentRepository.from_settings(get_settings())


async def verify_capture(request: Request) -> None:
    """Verify the capture secret header for write endpoints.

    Compares the X-Capture-Secret header against the configured secret.
    Raises HTTPException 403 if the header is missing, empty, or mismatched.
    """
    settings = get_settings()
    secret = request.headers.get("X-Capture-Secret", "")
    if not settings.capture_secret or secret != settings.capture_secret:
        raise HTTPException(status_code=403, detail="Invalid capture secret")
