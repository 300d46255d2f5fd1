"""bbserver exception classes."""


class BitbucketServerError(Exception):
    """Base exception for all bbserver errors."""

    def __init__(self, code: str, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class ConfigurationError(BitbucketServerError):
    """Raised when client configuration is invalid or missing."""

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class TransportError(BitbucketServerError):
    """Raised when a request could not be built or sent."""

    def __init__(self, method: str, path: str, message: str) -> None:
        super().__init__("TRANSPORT_ERROR", f"{method} {path}: {message}")
        self.method = method
        self.path = path


class HTTPStatusError(BitbucketServerError):
    """Raised when the server answers with a status other than 200, 201 or 204."""

    def __init__(self, method: str, path: str, status_code: int, body: str) -> None:
        super().__init__(
            "HTTP_STATUS_ERROR",
            f"making request '{method} {path}' unexpected status code: "
            f"{status_code}, body: {body}",
        )
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body


class AuthenticationError(HTTPStatusError):
    """Raised when the token is rejected (401)."""

    pass


class AuthorizationError(HTTPStatusError):
    """Raised when access is denied (403)."""

    pass


class NotFoundError(HTTPStatusError):
    """Raised when a resource is not found (404)."""

    pass


class ConflictError(HTTPStatusError):
    """Raised on conflicts such as a stale pull request version (409)."""

    pass


class ServerError(HTTPStatusError):
    """Raised on server errors (5xx)."""

    pass


class DecodeError(BitbucketServerError):
    """Raised when a response body is not well-formed for the expected shape."""

    def __init__(self, message: str, body: str) -> None:
        super().__init__("DECODE_ERROR", f"could not parse response {body!r}: {message}")
        self.body = body


class SchemaError(BitbucketServerError):
    """Raised when a decoded response is missing required fields."""

    def __init__(self, missing: list[str], body: str) -> None:
        super().__init__(
            "SCHEMA_ERROR",
            f"API response {body!r} was missing fields: {', '.join(missing)}",
        )
        self.missing = missing
        self.body = body


class DerivationError(BitbucketServerError):
    """Raised when the project key cannot be extracted from a clone URL."""

    def __init__(self, message: str) -> None:
        super().__init__("DERIVATION_ERROR", message)


class UnsupportedOperationError(BitbucketServerError):
    """Raised by operations Bitbucket Server integration does not implement."""

    def __init__(self, operation: str) -> None:
        super().__init__("UNSUPPORTED_OPERATION", f"{operation} is not implemented")
        self.operation = operation


def error_for_status(method: str, path: str, status_code: int, body: str) -> HTTPStatusError:
    """Pick the HTTPStatusError subclass matching a status code."""
    if status_code == 401:
        return AuthenticationError(method, path, status_code, body)
    elif status_code == 403:
        return AuthorizationError(method, path, status_code, body)
    elif status_code == 404:
        return NotFoundError(method, path, status_code, body)
    elif status_code == 409:
        return ConflictError(method, path, status_code, body)
    elif status_code >= 500:
        return ServerError(method, path, status_code, body)
    else:
        return HTTPStatusError(method, path, status_code, body)
