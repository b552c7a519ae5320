from .client import DirectoryClient, new_client
from .config_types import ClientConfig, set_base_url, set_http_client, set_timeout, set_user_agent
from .context import CallContext
from .errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodingError,
    DirectoryClientError,
    EncodingError,
    ParseError,
    RequestCancelled,
    TransportError,
    ValidationError,
)
from .logging_ import setup_logging
from .options import QueryOptions, add_options
from .transport import Response, check_response
from .users import User, UsersOptions, UsersService

__all__ = [
    "DirectoryClient",
    "new_client",
    "ClientConfig",
    "set_base_url",
    "set_http_client",
    "set_timeout",
    "set_user_agent",
    "CallContext",
    "ApiError",
    "AuthError",
    "ConfigurationError",
    "DecodingError",
    "DirectoryClientError",
    "EncodingError",
    "ParseError",
    "RequestCancelled",
    "TransportError",
    "ValidationError",
    "setup_logging",
    "QueryOptions",
    "add_options",
    "Response",
    "check_response",
    "User",
    "UsersOptions",
    "UsersService",
]
