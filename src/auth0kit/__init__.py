"""auth0kit - Python client for the Auth0 Authentication and Management APIs."""

import logging

from .authentication import AuthenticationApiClient
from .core.config import SDK_VERSION, ClientOptions
from .core.exceptions import (
    APIError,
    Auth0KitError,
    AuthConfigError,
    RateLimitError,
    ValidationError,
)
from .core.rate_limiter import RateLimit
from .management import ManagementApiClient

__version__ = SDK_VERSION

# Applications decide where log output goes
logging.getLogger("auth0kit").addHandler(logging.NullHandler())

__all__ = [
    "APIError",
    "Auth0KitError",
    "AuthConfigError",
    "AuthenticationApiClient",
    "ClientOptions",
    "ManagementApiClient",
    "RateLimit",
    "RateLimitError",
    "ValidationError",
    "__version__",
]
