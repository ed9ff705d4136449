"""API dependencies for authentication and request parsing."""
from typing import Optional

from fastapi import Header, HTTPException, Query

from neekihub.constants import HTTP_FORBIDDEN, HTTP_SERVER_ERROR
from neekihub.core.settings import settings as core_settings
from neekihub.domain.value_objects.language import Language


async def verify_admin_key(x_admin_key: Optional[str] = Header(None, alias="X-Admin-Key")):
    """Verify admin key for protected endpoints.

    Args:
        x_admin_key: Admin key from X-Admin-Key header

    Raises:
        HTTPException: 403 if admin key is missing or invalid

    Returns:
        bool: True if key is valid
    """
    expected_key = core_settings.ADMIN_KEY

    if not expected_key:
        raise HTTPException(
            status_code=HTTP_SERVER_ERROR,
            detail="Admin key not configured on server"
        )

    if x_admin_key != expected_key:
        raise HTTPException(
            status_code=HTTP_FORBIDDEN,
            detail="Invalid admin key"
        )

    return True


async def optional_language(lang: Optional[str] = Query(None)) -> Optional[Language]:
    """Parse the optional ?lang= query; unknown codes raise UnsupportedLanguageError."""
    if lang is None:
        return None
    return Language.from_code(lang)
