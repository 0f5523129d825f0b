"""Exception hierarchy for the auth0kit SDK.

Everything the SDK raises on purpose derives from :class:`Auth0KitError`.
Transport failures from ``requests`` (timeouts, DNS, TLS) are not wrapped.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import requests

    from .rate_limiter import RateLimit


class Auth0KitError(Exception):
    """Base exception for auth0kit.

    ``str(error)`` is the message followed by whatever context the subclass
    reports, e.g. ``Payload invalid | Status: 400 | Endpoint: /users``.
    """

    def __init__(self, message: str, details: str | None = None):
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _context(self) -> list[tuple[str, Any]]:
        return []

    def _format_message(self) -> str:
        context = [(label, value) for label, value in self._context() if value]
        if not context:
            return f"{self.message}: {self.details}" if self.details else self.message

        if self.details:
            context.append(("Details", self.details))
        return " | ".join(
            [self.message, *(f"{label}: {value}" for label, value in context)]
        )


class AuthConfigError(Auth0KitError):
    """Missing or malformed credentials, or a token that could not be obtained."""


class ValidationError(Auth0KitError):
    """Invalid arguments, detected before any request is sent.

    Attributes:
        field: Name of the offending argument
        value: Its value, when useful in the message
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: str | None = None,
        details: str | None = None,
    ):
        self.field = field
        self.value = value
        super().__init__(message, details)

    def _context(self) -> list[tuple[str, Any]]:
        return [("Field", self.field), ("Value", self.value)]


class APIError(Auth0KitError):
    """Error answer from the Auth0 Authentication or Management API.

    The remote error is kept verbatim: ``error`` and ``error_code`` hold the
    machine readable codes Auth0 sent and ``body`` the parsed JSON body.

    Attributes:
        status_code: HTTP status of the response
        error_code: Management API ``errorCode`` (e.g. ``inexistent_user``)
        error: ``error`` value (e.g. ``invalid_grant`` or ``Not Found``)
        endpoint: Path that was requested
        body: Parsed response body (dict, list or text)
        rate_limit: Rate limit headers of the failing response
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: str | None = None,
        error: str | None = None,
        endpoint: str | None = None,
        body: Any = None,
        rate_limit: "RateLimit | None" = None,
        details: str | None = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.error = error
        self.endpoint = endpoint
        self.body = body
        self.rate_limit = rate_limit
        super().__init__(message, details)

    def _context(self) -> list[tuple[str, Any]]:
        return [
            ("Status", self.status_code),
            ("Error", self.error_code or self.error),
            ("Endpoint", self.endpoint),
        ]

    @classmethod
    def from_response(
        cls,
        response: "requests.Response",
        endpoint: str | None = None,
        rate_limit: "RateLimit | None" = None,
    ) -> "APIError":
        """Build an APIError from a failed HTTP response.

        Understands the Management API body (``statusCode``, ``error``,
        ``message``, ``errorCode``), the OAuth body (``error``,
        ``error_description``) and the legacy body (``code``,
        ``description``/``name``).
        """
        status_code = response.status_code
        body: Any
        try:
            body = response.json()
        except ValueError:
            body = response.text or None

        message, error, error_code = _parse_error_body(body)
        if not message:
            message = str(body) if body else _default_message(status_code, response)

        return cls(
            message=message,
            status_code=status_code,
            error_code=error_code,
            error=error,
            endpoint=endpoint,
            body=body,
            rate_limit=rate_limit,
        )


class RateLimitError(APIError):
    """HTTP 429 that persisted through every configured retry.

    ``retry_after`` is the number of seconds until the window resets, when
    Auth0 reported it.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: float | None = None,
        endpoint: str | None = None,
        body: Any = None,
        rate_limit: "RateLimit | None" = None,
        details: str | None = None,
    ):
        self.retry_after = retry_after
        super().__init__(
            message=message,
            status_code=429,
            error="too_many_requests",
            endpoint=endpoint,
            body=body,
            rate_limit=rate_limit,
            details=details,
        )

    def _context(self) -> list[tuple[str, Any]]:
        context = super()._context()
        if self.retry_after:
            context.append(("Retry after", f"{self.retry_after:.0f}s"))
        return context


def _parse_error_body(body: Any) -> tuple[str | None, str | None, str | None]:
    """Extract (message, error, error_code) from an Auth0 error body."""
    if isinstance(body, dict):
        error_code = body.get("errorCode")
        error = body.get("error") or body.get("code")
        message = (
            body.get("message")
            or body.get("error_description")
            or body.get("description")
            or body.get("name")
        )
        if isinstance(error, dict):
            # Some endpoints nest the error object
            nested_message, nested_error, nested_code = _parse_error_body(error)
            return nested_message or message, nested_error, nested_code or error_code
        if message is not None and not isinstance(message, str):
            message = str(message)
        if not message and isinstance(error, str):
            message = error
        return message, error if isinstance(error, str) else None, error_code

    if isinstance(body, list) and body:
        return ", ".join(str(item) for item in body), None, None

    if isinstance(body, str) and body.strip():
        return body.strip(), None, None

    return None, None, None


def _default_message(status_code: int, response: "requests.Response") -> str:
    reason = getattr(response, "reason", None)
    if isinstance(reason, str) and reason:
        return reason
    if status_code >= 500:
        return f"Server error ({status_code})"
    return f"Request failed with status {status_code}"
