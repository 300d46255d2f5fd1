"""bbserver - Bitbucket Server client for pull request automation."""

from bbserver.async_client import AsyncBitbucketServerClient
from bbserver.async_transport import AsyncHTTPTransport
from bbserver.client import BitbucketServerClient
from bbserver.comments import MAX_COMMENT_LENGTH, split_comment
from bbserver.envelope import decode
from bbserver.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BitbucketServerError,
    ConfigurationError,
    ConflictError,
    DecodeError,
    DerivationError,
    HTTPStatusError,
    NotFoundError,
    SchemaError,
    ServerError,
    TransportError,
    UnsupportedOperationError,
)
from bbserver.logging import configure_logging, get_logger
from bbserver.pagination import collect_changed_paths
from bbserver.project import get_project_key
from bbserver.status import to_bitbucket_state
from bbserver.transport import HTTPTransport

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "BitbucketServerClient",
    "AsyncBitbucketServerClient",
    # Exceptions
    "BitbucketServerError",
    "ConfigurationError",
    "TransportError",
    "HTTPStatusError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "ServerError",
    "DecodeError",
    "SchemaError",
    "DerivationError",
    "UnsupportedOperationError",
    # Protocol helpers
    "decode",
    "collect_changed_paths",
    "split_comment",
    "MAX_COMMENT_LENGTH",
    "to_bitbucket_state",
    "get_project_key",
    # Transport
    "HTTPTransport",
    "AsyncHTTPTransport",
    # Logging
    "configure_logging",
    "get_logger",
]
