"""
Database Routes
===============

HTTP access to the PositronicDB placeholder operations.
Request bodies are passed through without validation: JSON bodies are decoded,
anything else is forwarded as text and an empty body becomes ``None``.
"""

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from positronic.client.positronic_db import PositronicDB, get_positronic_db
from positronic.config.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["Database"])


def is_json_media_type(content_type: str) -> bool:
    """Return True for application/json and +json media types."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_payload(request: Request) -> Any:
    """Decode a JSON request body, forwarding any other body as text."""
    body = await request.body()
    if not body:
        return None

    if not is_json_media_type(request.headers.get("content-type", "")):
        return body.decode("utf-8", errors="replace")

    try:
        return json.loads(body)
    except ValueError:
        logger.debug("Request body is not JSON, forwarding as text", content_length=len(body))
        return body.decode("utf-8", errors="replace")


@router.post("/connections/test", status_code=status.HTTP_204_NO_CONTENT)
async def test_connection(
    config: Any = Depends(read_payload),
    db: PositronicDB = Depends(get_positronic_db),
) -> Response:
    """Forward a connection test request."""
    db.test_connection(config)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/queries/execute", status_code=status.HTTP_204_NO_CONTENT)
async def execute_query(
    payload: Any = Depends(read_payload),
    db: PositronicDB = Depends(get_positronic_db),
) -> Response:
    """Forward a query execution request.

    A JSON object supplies ``query`` and ``connection`` members; any other
    body is taken as the query itself.
    """
    if isinstance(payload, dict):
        db.execute_query(payload.get("query"), payload.get("connection"))
    else:
        db.execute_query(payload, None)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
