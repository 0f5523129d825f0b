"""Auth0 Management API v2 client and resource groups."""

from .client import ManagementApiClient

__all__ = ["ManagementApiClient"]
