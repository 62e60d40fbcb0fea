"""Exception classes for the AGiXT client.

Exception Hierarchy:
    - AGiXTError (base)
        - ConfigError: Client could not be configured (bad header value)
        - InvalidRequestError: Call arguments cannot form a request body
        - TransportError: Network failure or non-2xx response
            - AuthenticationError: 401/403 response
        - DecodeError: Response body is not the expected JSON shape
"""


class AGiXTError(Exception):
    """Base exception for AGiXT client errors."""

    pass


class ConfigError(AGiXTError):
    """Raised when the client is constructed with an unusable setting.

    Attributes:
        setting: Name of the offending setting (e.g. "api_key")
    """

    def __init__(self, reason: str, setting: str | None = None):
        self.reason = reason
        self.setting = setting
        message = f"Invalid client configuration: {reason}"
        if setting:
            message += f" (setting: {setting})"
        super().__init__(message)


class InvalidRequestError(AGiXTError):
    """Raised when call arguments cannot be turned into a request body.

    Nothing is sent to the server when this is raised.

    Attributes:
        field: Name of the offending body field (e.g. "limit", "settings")
    """

    def __init__(self, reason: str, field: str | None = None):
        self.reason = reason
        self.field = field
        message = f"Invalid request: {reason}"
        if field:
            message += f" (field: {field})"
        super().__init__(message)


class TransportError(AGiXTError):
    """Raised when a request fails at the HTTP layer.

    Covers connection failures, timeouts, TLS errors and any response whose
    status code is not 2xx.

    Attributes:
        status_code: HTTP status code, or None if no response was received
        body: Raw response body text, if any
        url: The request URL
    """

    def __init__(
        self,
        reason: str,
        status_code: int | None = None,
        body: str | None = None,
        url: str | None = None,
    ):
        self.reason = reason
        self.status_code = status_code
        self.body = body
        self.url = url
        message = reason
        if status_code is not None:
            message = f"HTTP {status_code}: {reason}"
        if url:
            message += f" ({url})"
        super().__init__(message)


class AuthenticationError(TransportError):
    """Raised when the server rejects the credentials (401 or 403)."""

    pass


class DecodeError(AGiXTError):
    """Raised when a response body cannot be decoded into the expected envelope.

    Attributes:
        field: Name of the missing or malformed envelope field, or None when
            the body is not valid JSON at all
        body: Raw response body text for diagnostics
    """

    def __init__(self, reason: str, field: str | None = None, body: str | None = None):
        self.reason = reason
        self.field = field
        self.body = body
        message = f"Could not decode response: {reason}"
        if field:
            message += f" (field: {field})"
        super().__init__(message)
