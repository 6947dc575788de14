"""OMDb client error taxonomy.

Every failure raised by a query execution is one of the classes below,
so callers can catch ``OMDbError`` or a specific variant.
"""

from http import HTTPStatus

import httpx


class OMDbError(Exception):
    """Base exception for OMDb client errors."""

    pass


class OMDbTransportError(OMDbError):
    """Raised when the underlying HTTP transport fails.

    Attributes:
        cause: Original lower-level exception.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause) or type(cause).__name__)
        self.cause = cause


class OMDbStatusError(OMDbError):
    """Raised when the API answers with a non-success HTTP status.

    Attributes:
        status_code: HTTP status code returned by the API.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(_reason_phrase(status_code))
        self.status_code = status_code


class OMDbDecodeError(OMDbError):
    """Raised when the response body cannot be decoded.

    Attributes:
        cause: Original decoding exception.
    """

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Invalid OMDb response: {cause}")
        self.cause = cause


class OMDbApiError(OMDbError):
    """Raised when the API reports a failed lookup.

    Attributes:
        message: Upstream ``Error`` text, or ``"undefined"``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class OMDbOtherError(OMDbError):
    """Raised for request construction failures (e.g. bad endpoint URL)."""

    def __init__(self, description: str) -> None:
        super().__init__(description)
        self.description = description


def _reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown status"


def map_transport_error(exc: Exception) -> OMDbError:
    """Classify a lower-level transport exception.

    Args:
        exc: Exception raised while performing the request.

    Returns:
        Matching taxonomy error (not raised).
    """
    if isinstance(exc, OMDbError):
        return exc
    if isinstance(exc, (httpx.InvalidURL, httpx.UnsupportedProtocol)):
        return OMDbOtherError(f"Invalid OMDb endpoint: {exc}")
    return OMDbTransportError(exc)
