"""Auth0 Authentication API client."""

from .client import AuthenticationApiClient
from .pkce import create_code_challenge, generate_code_verifier

__all__ = [
    "AuthenticationApiClient",
    "create_code_challenge",
    "generate_code_verifier",
]
