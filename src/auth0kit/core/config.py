"""Client options and environment based tenant configuration."""

import os
from dataclasses import dataclass
from typing import Any, cast
from urllib.parse import urlparse

import dotenv

from auth0kit.core.exceptions import AuthConfigError

# Transport defaults
API_TIMEOUT = 30  # request timeout in seconds
AUTH0_TOKEN_TIMEOUT = 5  # token request timeout in seconds
DEFAULT_RETRIES = 3  # retries on 429 Too Many Requests
MAX_RETRIES = 10

SDK_NAME = "auth0kit"
SDK_VERSION = "1.0.0"

TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class ClientOptions:
    """Transport options shared by the Authentication and Management clients.

    Attributes:
        timeout: Request timeout in seconds, passed straight to requests
        retries: How many times a 429 response is retried (0..MAX_RETRIES)
        telemetry: Whether to send the ``Auth0-Client`` telemetry header
        throttle: Sleep between calls based on the remaining rate limit
    """

    timeout: float = API_TIMEOUT
    retries: int = DEFAULT_RETRIES
    telemetry: bool = True
    throttle: bool = False

    def __post_init__(self) -> None:
        """Clamp retries into the supported range."""
        self.retries = max(0, min(int(self.retries), MAX_RETRIES))

    @classmethod
    def from_env(cls) -> "ClientOptions":
        """Create options from ``AUTH0KIT_*`` environment variables.

        Environment variables:
            AUTH0KIT_TIMEOUT: Request timeout in seconds (default: 30)
            AUTH0KIT_RETRIES: Retries on rate limiting (default: 3)
            AUTH0KIT_TELEMETRY: Send telemetry header (default: true)
            AUTH0KIT_THROTTLE: Adaptive throttling between calls (default: false)

        Raises:
            AuthConfigError: If a numeric variable cannot be parsed
        """
        check_env_file()
        try:
            timeout = float(os.getenv("AUTH0KIT_TIMEOUT", str(API_TIMEOUT)))
            retries = int(os.getenv("AUTH0KIT_RETRIES", str(DEFAULT_RETRIES)))
        except ValueError as e:
            raise AuthConfigError(f"Invalid auth0kit client option: {e}") from e

        telemetry = os.getenv("AUTH0KIT_TELEMETRY", "true").lower() in TRUE_VALUES
        throttle = os.getenv("AUTH0KIT_THROTTLE", "false").lower() in TRUE_VALUES
        return cls(
            timeout=timeout, retries=retries, telemetry=telemetry, throttle=throttle
        )


def check_env_file(path: str = ".env") -> None:
    """Load ``path`` into the environment when it exists."""
    if os.path.exists(path):
        dotenv.load_dotenv(path)


def validate_env_var(name: str, value: str | None) -> str:
    """Return ``value`` stripped, or raise AuthConfigError naming ``name``."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise AuthConfigError(f"{name} is required but not set or empty")
    return cleaned


def normalize_domain(domain: str) -> str:
    """Turn a tenant domain into a base URL.

    Accepts ``tenant.auth0.com``, ``https://tenant.auth0.com/`` or a custom
    domain.

    Args:
        domain: Auth0 tenant or custom domain

    Returns:
        str: ``https://<host>`` without trailing slash

    Raises:
        AuthConfigError: If the domain is empty or has no host
    """
    if not domain or not domain.strip():
        raise AuthConfigError("Auth0 domain is required")

    candidate = domain.strip()
    if "://" not in candidate:
        candidate = f"https://{candidate}"

    parsed = urlparse(candidate)
    if not parsed.netloc:
        raise AuthConfigError(f"Invalid Auth0 domain format: {domain}")

    scheme = parsed.scheme or "https"
    return f"{scheme}://{parsed.netloc}"


def env_prefix(env: str) -> str:
    """Variable prefix for ``env``: ``DEV_`` for dev, none for anything else."""
    return "DEV_" if env == "dev" else ""


def get_env_config(env: str = "dev") -> dict[str, Any]:
    """Read tenant credentials for ``env`` from the environment.

    ``AUTH0_DOMAIN``, ``AUTH0_CLIENT_ID`` and ``AUTH0_CLIENT_SECRET`` are
    required. ``AUTH0_AUDIENCE`` defaults to the tenant's Management API.

    Raises:
        AuthConfigError: If a required variable is missing or the domain is invalid
    """
    check_env_file()
    prefix = env_prefix(env)

    required = {}
    for key in ("AUTH0_DOMAIN", "AUTH0_CLIENT_ID", "AUTH0_CLIENT_SECRET"):
        name = prefix + key
        required[key] = validate_env_var(name, os.getenv(name))

    base_url = normalize_domain(required["AUTH0_DOMAIN"])
    return {
        "domain": urlparse(base_url).netloc,
        "client_id": required["AUTH0_CLIENT_ID"],
        "client_secret": required["AUTH0_CLIENT_SECRET"],
        "audience": os.getenv(f"{prefix}AUTH0_AUDIENCE") or f"{base_url}/api/v2/",
        "environment": env,
        "base_url": base_url,
    }


def get_base_url(env: str = "dev") -> str:
    """Tenant base URL (``https://<domain>``) for ``env``."""
    return cast(str, get_env_config(env)["base_url"])
