"""Core transport, configuration and error types."""

from .config import ClientOptions
from .exceptions import (
    APIError,
    Auth0KitError,
    AuthConfigError,
    RateLimitError,
    ValidationError,
)
from .rate_limiter import AdaptiveRateLimiter, RateLimit

__all__ = [
    "APIError",
    "AdaptiveRateLimiter",
    "Auth0KitError",
    "AuthConfigError",
    "ClientOptions",
    "RateLimit",
    "RateLimitError",
    "ValidationError",
]
