"""URL encoding utilities for Auth0 API paths and query strings."""

from typing import Any
from urllib.parse import quote, urlencode

from ..core.exceptions import ValidationError


def encode_path_segment(value: str, field: str = "id") -> str:
    """URL encode a single path segment.

    Args:
        value: Raw segment value (e.g. ``auth0|12345``)
        field: Field name used in the validation error

    Returns:
        str: Encoded segment

    Raises:
        ValidationError: If value is empty

    Example:
        >>> encode_path_segment("auth0|12345", "user_id")
        'auth0%7C12345'
    """
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} cannot be empty", field=field)
    return quote(str(value), safe="")


def build_path(template: str, **segments: str) -> str:
    """Fill a path template with encoded segments.

    Args:
        template: Path such as ``/users/{id}/roles``
        **segments: Raw segment values by placeholder name

    Returns:
        str: Path with every placeholder URL-encoded
    """
    encoded = {
        name: encode_path_segment(value, name) for name, value in segments.items()
    }
    return template.format(**encoded)


def clean_params(params: dict[str, Any] | None) -> dict[str, str]:
    """Drop ``None`` values and render query parameters as strings.

    Booleans become ``true``/``false`` and lists are comma separated, the way
    the Auth0 API expects ``fields`` and similar parameters.
    """
    if not params:
        return {}

    cleaned: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, list | tuple | set):
            cleaned[key] = ",".join(str(item) for item in value)
        else:
            cleaned[key] = str(value)
    return cleaned


def build_url(base_url: str, path: str, params: dict[str, Any] | None = None) -> str:
    """Join a base URL, a path and an optional query string."""
    url = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    query = clean_params(params)
    if query:
        url = f"{url}?{urlencode(query)}"
    return url
