"""Domain exceptions.

Each exception carries the HTTP status the API layer maps it to, so routes
stay free of translation logic.
"""
from typing import Optional

from neekihub.constants import (
    HTTP_BAD_REQUEST,
    HTTP_NOT_FOUND,
    HTTP_SERVER_ERROR,
    HTTP_SERVICE_UNAVAILABLE,
)


class NeekiHubError(Exception):
    """Base class for all application errors."""

    status_code = HTTP_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidCoordinateError(NeekiHubError, ValueError):
    """Latitude/longitude missing, non-numeric or out of range."""

    status_code = HTTP_BAD_REQUEST

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class UnsupportedLanguageError(NeekiHubError, ValueError):
    """Language code outside the supported set."""

    status_code = HTTP_BAD_REQUEST

    def __init__(self, code: str):
        super().__init__(f"Unsupported language code: {code!r}")
        self.code = code


class ContentNotFoundError(NeekiHubError):
    """Requested surah, verse, dua or hadith does not exist."""

    status_code = HTTP_NOT_FOUND


class QuestionValidationError(NeekiHubError, ValueError):
    """AI question is blank or too long."""

    status_code = HTTP_BAD_REQUEST


class PrayerQueryError(NeekiHubError, ValueError):
    """Prayer-time request has neither coordinates nor city and country."""

    status_code = HTTP_BAD_REQUEST


class UpstreamUnavailableError(NeekiHubError):
    """Third-party API failed and no fallback is available."""

    def __init__(self, message: str, status_code: int = HTTP_SERVICE_UNAVAILABLE):
        super().__init__(message)
        self.status_code = status_code
