from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .transport import Response


class DirectoryClientError(Exception):
    """Base client error."""


class ConfigurationError(DirectoryClientError):
    """Client cannot be used with the given configuration."""


class ParseError(DirectoryClientError, ValueError):
    """Malformed URL or URL reference."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"parse {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ValidationError(DirectoryClientError, ValueError):
    """Invalid argument detected before anything is sent."""


class EncodingError(DirectoryClientError):
    """Request body could not be serialized to JSON."""


class DecodingError(DirectoryClientError):
    def __init__(self, message: str, response: Response | None = None):
        super().__init__(message)
        self.response = response


class TransportError(DirectoryClientError):
    """Transport/network layer error."""

    def __init__(self, message: str, cause: BaseException | None = None):
        super().__init__(message)
        self.cause = cause


class RequestCancelled(TransportError):
    """The call context was cancelled or its deadline passed."""


class ApiError(DirectoryClientError):
    def __init__(
            self,
            response: Response,
            code: int = 0,
            message: str = "",
            details: Any | None = None,
    ):
        super().__init__(message or _summary(response))
        self.response = response
        self.code = code
        self.message = message
        self.details = details

    @property
    def status_code(self) -> int:
        return self.response.status_code


class AuthError(ApiError):
    """Auth-related API error."""


def _summary(response: Response) -> str:
    try:
        request = response.http_response.request
    except RuntimeError:
        return f"request failed with {response.status_code}"
    return f"{request.method} {request.url} failed with {response.status_code}"
