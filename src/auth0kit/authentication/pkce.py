"""PKCE (RFC 7636) helpers for the Authorization Code flow."""

import base64
import hashlib
import secrets

from ..core.exceptions import ValidationError

MIN_VERIFIER_LENGTH = 43
MAX_VERIFIER_LENGTH = 128


def _b64url(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def generate_code_verifier(length: int = 64) -> str:
    """Generate a random code verifier of ``length`` characters.

    Raises:
        ValidationError: If length is outside 43..128
    """
    if not MIN_VERIFIER_LENGTH <= length <= MAX_VERIFIER_LENGTH:
        raise ValidationError(
            f"code verifier length must be between {MIN_VERIFIER_LENGTH} "
            f"and {MAX_VERIFIER_LENGTH}",
            field="length",
            value=str(length),
        )
    # token_urlsafe yields ~1.3 chars per byte; trim to the exact length
    return secrets.token_urlsafe(length)[:length]


def create_code_challenge(code_verifier: str) -> str:
    """Derive the S256 code challenge for a verifier."""
    if not code_verifier:
        raise ValidationError("code verifier cannot be empty", field="code_verifier")
    digest = hashlib.sha256(code_verifier.encode("ascii")).digest()
    return _b64url(digest)
