"""
Per-route CORS

Every route answers its own OPTIONS preflight and sends the CORS headers on
its JSON body.
"""

from typing import Any, Optional

from fastapi import status
from fastapi.responses import ORJSONResponse

from src.platform.http.cors_headers import get_cors_headers
from src.platform.serialization.json_safe import to_json_safe


def cors_json(
    content: Any, *, origin: Optional[str], status_code: int = status.HTTP_200_OK
) -> ORJSONResponse:
    return ORJSONResponse(
        content=to_json_safe(content),
        status_code=status_code,
        headers=get_cors_headers(origin),
    )


def preflight(origin: Optional[str]) -> ORJSONResponse:
    return ORJSONResponse(content={}, headers=get_cors_headers(origin))
