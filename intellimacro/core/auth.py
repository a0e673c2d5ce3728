"""
Internal API authentication dependency.

The AI endpoints are internal. They should only be callable by the site's
backend, never directly from a browser or the public internet.

How it works:
  - Caller sends header: X-Internal-Secret: <INTERNAL_API_SECRET>
  - Service checks it matches the env var
  - Returns 403 if missing or wrong

Setup:
  - Add INTERNAL_API_SECRET=<random-long-string> to the .env file
  - Generate one with: python -c "import secrets; print(secrets.token_hex(32))"
"""
from typing import Annotated

from fastapi import Header, HTTPException

from intellimacro.core.config import settings


def verify_internal_secret(x_internal_secret: Annotated[str, Header()] = "") -> None:
    """FastAPI dependency: validates the shared internal secret header."""
    if not settings.INTERNAL_API_SECRET:
        # If the env var is not set, block all requests to prevent accidental exposure
        raise HTTPException(
            status_code=503,
            detail="Service not configured (INTERNAL_API_SECRET not set)"
        )
    if x_internal_secret != settings.INTERNAL_API_SECRET:
        raise HTTPException(
            status_code=403,
            detail="Forbidden: invalid or missing internal secret"
        )
