# backend/economy/core/security.py
import json
import logging
import secrets
from typing import Optional

from fastapi import Header, HTTPException, Query, Request, status

from ..core.config import settings

logger = logging.getLogger(__name__)


def pass_key_matches(candidate: str) -> bool:
    return secrets.compare_digest(candidate.encode("utf-8"), settings.AUTH_PASS_KEY.encode("utf-8"))


async def _pass_key_from_body(request: Request) -> Optional[str]:
    # Starlette caches the body, so the route can still parse it afterwards.
    body = await request.body()
    if not body:
        return None
    try:
        payload = json.loads(body)
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("passKey"), str):
        return payload["passKey"]
    return None


async def verify_pass_key(
    request: Request,
    pass_key_query: Optional[str] = Query(None, alias="passKey"),
    pass_key_header: Optional[str] = Header(None, alias="X-Pass-Key"),
) -> None:
    """
    Router-level dependency: rejects the request unless it carries the shared pass key
    in the query string, the JSON body or the X-Pass-Key header.
    """
    pass_key = pass_key_query or pass_key_header or await _pass_key_from_body(request)
    if not pass_key:
        logger.info(f"Rejected {request.method} {request.url.path}: no passKey supplied")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed: no passKey param supplied",
        )
    if not pass_key_matches(pass_key):
        logger.warning(f"Rejected {request.method} {request.url.path}: invalid passKey")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication failed: passKey is not valid",
        )
