"""
CORS response headers

The dashboard and storefront call the API with credentials, so an allowed
origin is mirrored back explicitly instead of using '*'. Error responses get
the same headers so the browser lets the caller read ``{error}``.
"""

from typing import Dict, Optional

from src.platform.config.core_setting import settings


ALLOW_METHODS = 'GET, POST, PUT, PATCH, DELETE, OPTIONS'
ALLOW_HEADERS = 'Content-Type, Authorization, Accept'


def get_cors_headers(origin: Optional[str]) -> Dict[str, str]:
    """An origin outside the allow list gets an empty Allow-Origin, which browsers reject."""
    allowed_origin = origin if origin and origin in settings.ALLOWED_ORIGINS else ''
    return {
        'Access-Control-Allow-Origin': allowed_origin,
        'Access-Control-Allow-Credentials': 'true',
        'Access-Control-Allow-Methods': ALLOW_METHODS,
        'Access-Control-Allow-Headers': ALLOW_HEADERS,
    }
