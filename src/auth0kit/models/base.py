"""Base class and field helpers for Auth0 data models."""

from dataclasses import MISSING, dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, TypeVar

ModelT = TypeVar("ModelT", bound="Auth0Model")


def api_field(
    key: str | None = None,
    *,
    timestamp: bool = False,
    model: type["Auth0Model"] | None = None,
    default: Any = None,
    default_factory: Any = MISSING,
) -> Any:
    """Declare a model field and how it maps to the JSON payload.

    Args:
        key: JSON key when it differs from the attribute name
        timestamp: Parse ISO-8601 strings into ``datetime``
        model: Nested model class (applied to dicts and lists of dicts)
        default: Default value
        default_factory: Default factory (takes precedence over default)
    """
    metadata: dict[str, Any] = {}
    if key:
        metadata["key"] = key
    if timestamp:
        metadata["timestamp"] = True
    if model is not None:
        metadata["model"] = model

    if default_factory is not MISSING:
        return field(default_factory=default_factory, metadata=metadata)
    return field(default=default, metadata=metadata)


def parse_datetime(value: Any) -> datetime | None:
    """Parse an Auth0 ISO-8601 timestamp (``Z`` suffix accepted).

    Returns:
        datetime or None: Parsed value, or None when missing or malformed
    """
    if isinstance(value, datetime):
        return value
    if not value or not isinstance(value, str):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def _serialize(value: Any) -> Any:
    if isinstance(value, Auth0Model):
        return value.to_dict()
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, list | tuple):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


@dataclass(kw_only=True)
class Auth0Model:
    """Base for request and response models.

    ``from_dict`` keeps keys it does not know in ``extra`` so custom claims and
    newly added API fields are not dropped. ``to_dict`` omits unset fields.
    """

    extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def _json_key(cls, f: Any) -> str:
        return str(f.metadata.get("key", f.name))

    @classmethod
    def from_dict(cls: type[ModelT], data: dict[str, Any]) -> ModelT:
        """Create a model instance from an API payload.

        Args:
            data: Decoded JSON object

        Returns:
            Model instance
        """
        by_key = {cls._json_key(f): f for f in fields(cls) if f.name != "extra"}
        values: dict[str, Any] = {}
        extra: dict[str, Any] = {}

        for key, value in (data or {}).items():
            model_field = by_key.get(key)
            if model_field is None:
                extra[key] = value
                continue
            values[model_field.name] = cls._convert(model_field, value)

        return cls(**values, extra=extra)

    @staticmethod
    def _convert(model_field: Any, value: Any) -> Any:
        if value is None:
            return None
        if model_field.metadata.get("timestamp"):
            return parse_datetime(value)
        nested = model_field.metadata.get("model")
        if nested is not None:
            if isinstance(value, list):
                return [
                    nested.from_dict(item) if isinstance(item, dict) else item
                    for item in value
                ]
            if isinstance(value, dict):
                return nested.from_dict(value)
        return value

    def to_dict(self) -> dict[str, Any]:
        """Serialize to an API payload, dropping ``None`` fields."""
        payload: dict[str, Any] = {}
        for model_field in fields(self):
            if model_field.name == "extra":
                continue
            value = getattr(self, model_field.name)
            if value is None:
                continue
            payload[self._json_key(model_field)] = _serialize(value)

        payload.update(_serialize(self.extra))
        return payload


def to_payload(body: Auth0Model | dict[str, Any] | None) -> dict[str, Any] | None:
    """Accept either a model or a plain dict as a request body."""
    if body is None:
        return None
    if isinstance(body, Auth0Model):
        return body.to_dict()
    return dict(body)
