"""HTTP transport shared by the Authentication and Management API clients."""

import base64
import json
import platform
import time
from enum import Enum
from typing import Any

import requests

from ..utils.logging_utils import get_logger
from ..utils.url_utils import build_url, clean_params
from .config import SDK_NAME, SDK_VERSION, ClientOptions
from .exceptions import APIError, RateLimitError
from .rate_limiter import AdaptiveRateLimiter, RateLimit

# Module logger
logger = get_logger(__name__)


def _upload_positions(files: dict[str, Any] | None) -> list[tuple[Any, int]]:
    """Current offsets of the seekable streams in a ``files=`` mapping."""
    positions = []
    for value in (files or {}).values():
        handle = value[1] if isinstance(value, tuple) and len(value) > 1 else value
        if hasattr(handle, "seek") and hasattr(handle, "tell"):
            positions.append((handle, handle.tell()))
    return positions


class HttpMethod(Enum):
    """HTTP methods used by the Auth0 APIs."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"


def build_telemetry_header() -> str:
    """Encode the ``Auth0-Client`` telemetry header value."""
    payload = {
        "name": SDK_NAME,
        "version": SDK_VERSION,
        "env": {"python": platform.python_version()},
    }
    raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
    return base64.urlsafe_b64encode(raw).decode("ascii")


class RestClient:
    """Sends requests to one Auth0 base URL and translates the answers.

    Successful responses are returned as parsed JSON (or text when the body
    is not JSON, or ``None`` for empty bodies). 429 responses are retried
    with backoff; any other error status raises :class:`APIError`.
    """

    USER_AGENT = f"Python/{platform.python_version()}"

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        options: ClientOptions | None = None,
        rate_limiter: AdaptiveRateLimiter | None = None,
    ) -> None:
        """Initialize the REST client.

        Args:
            base_url: Base URL every path is appended to
            token: Bearer token sent with each request, if any
            options: Transport options (timeout, retries, telemetry, throttle)
            rate_limiter: Limiter computing backoff and throttle delays
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.options = options or ClientOptions()
        self.rate_limiter = rate_limiter or AdaptiveRateLimiter()
        self.last_rate_limit: RateLimit | None = None
        self._telemetry = build_telemetry_header() if self.options.telemetry else None

    def _build_headers(
        self,
        extra_headers: dict[str, str] | None = None,
        token: str | None = None,
        json_body: bool = True,
    ) -> dict[str, str]:
        """Build request headers.

        Args:
            extra_headers: Additional headers to include
            token: Bearer token overriding the client token for this call
            json_body: Whether the body is JSON (False for multipart uploads)

        Returns:
            Dict[str, str]: Request headers
        """
        headers = {
            "User-Agent": self.USER_AGENT,
            "Accept": "application/json",
        }
        if json_body:
            headers["Content-Type"] = "application/json"

        bearer = token or self.token
        if bearer:
            headers["Authorization"] = f"Bearer {bearer}"

        if self._telemetry:
            headers["Auth0-Client"] = self._telemetry

        if extra_headers:
            headers.update(extra_headers)

        return headers

    def get_last_api_info(self) -> RateLimit | None:
        """Rate limit headers of the most recent response."""
        return self.last_rate_limit

    def request(
        self,
        method: HttpMethod | str,
        path: str,
        params: dict[str, Any] | None = None,
        json_data: Any = None,
        data: Any = None,
        files: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        token: str | None = None,
    ) -> Any:
        """Send a request and return the decoded response body.

        Args:
            method: HTTP method
            path: Path relative to ``base_url``
            params: Query parameters; ``None`` values are dropped
            json_data: JSON body
            data: Form fields (used with ``files`` for multipart uploads)
            files: Files for multipart uploads
            headers: Extra headers for this call
            token: Bearer token for this call only

        Returns:
            Any: Parsed JSON, text, or None for empty bodies

        Raises:
            RateLimitError: If the API keeps answering 429 after all retries
            APIError: For any other error status
            requests.RequestException: Transport failures pass through
        """
        method_name = method.value if isinstance(method, HttpMethod) else method.upper()
        url = build_url(self.base_url, path)
        query = clean_params(params) or None
        request_headers = self._build_headers(headers, token, json_body=files is None)
        # requests consumes upload streams; a retry must send them again
        uploads = _upload_positions(files)

        attempt = 0
        while True:
            start_time = time.monotonic()
            response = requests.request(
                method=method_name,
                url=url,
                headers=request_headers,
                params=query,
                json=json_data,
                data=data,
                files=files,
                timeout=self.options.timeout,
            )
            duration = time.monotonic() - start_time

            rate_limit = RateLimit.from_headers(response.headers)
            self.last_rate_limit = rate_limit

            logger.debug(
                f"{method_name} {path} -> {response.status_code}",
                extra={
                    "method": method_name,
                    "endpoint": path,
                    "status_code": response.status_code,
                    "duration": duration,
                    "attempt": attempt,
                },
            )

            if response.status_code != 429:
                break

            if attempt >= self.options.retries:
                error = APIError.from_response(response, path, rate_limit)
                retry_after = None
                if rate_limit.reset is not None:
                    retry_after = max(rate_limit.reset - time.time(), 0.0)
                raise RateLimitError(
                    message=error.message,
                    retry_after=retry_after,
                    endpoint=path,
                    body=error.body,
                    rate_limit=rate_limit,
                    details=f"Gave up after {attempt} retries",
                )

            delay = self.rate_limiter.backoff_delay(rate_limit)
            attempt += 1
            logger.warning(
                f"Rate limited on {method_name} {path}, retrying in {delay:.2f}s "
                f"(attempt {attempt}/{self.options.retries})",
                extra={
                    "method": method_name,
                    "endpoint": path,
                    "status_code": 429,
                    "attempt": attempt,
                },
            )
            time.sleep(delay)
            for handle, offset in uploads:
                handle.seek(offset)

        self.rate_limiter.record_success()

        if response.status_code >= 400:
            raise APIError.from_response(response, path, rate_limit)

        result = self._parse_body(response)

        if self.options.throttle:
            time.sleep(self.rate_limiter.throttle_delay(rate_limit))

        return result

    @staticmethod
    def _parse_body(response: requests.Response) -> Any:
        """Decode a successful response body.

        JSON is parsed only when the response says it is JSON; anything else
        (XML metadata, plain text messages) is returned as text.
        """
        if response.status_code == 204:
            return None

        text = response.text
        if not text or not text.strip():
            return None

        content_type = response.headers.get("Content-Type") or ""
        if "json" not in content_type.lower():
            return text

        try:
            return response.json()
        except ValueError:
            return text

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Make a GET request."""
        return self.request(HttpMethod.GET, path, params=params, **kwargs)

    def post(
        self,
        path: str,
        json_data: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Make a POST request."""
        return self.request(HttpMethod.POST, path, json_data=json_data, **kwargs)

    def patch(
        self,
        path: str,
        json_data: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Make a PATCH request."""
        return self.request(HttpMethod.PATCH, path, json_data=json_data, **kwargs)

    def put(
        self,
        path: str,
        json_data: Any = None,
        **kwargs: Any,
    ) -> Any:
        """Make a PUT request."""
        return self.request(HttpMethod.PUT, path, json_data=json_data, **kwargs)

    def delete(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> Any:
        """Make a DELETE request."""
        return self.request(HttpMethod.DELETE, path, params=params, **kwargs)
