"""Jobs endpoints of the Management API."""

import json
from pathlib import Path
from typing import IO, Any

from ..core.exceptions import ValidationError
from ..models.management import Job, JobError
from .base import ManagementResource


class Jobs(ManagementResource):
    path = "/jobs"

    def get(self, job_id: str) -> Job:
        return self._get(self._item_path(id=job_id), Job.from_dict)

    def get_errors(self, job_id: str) -> list[JobError]:
        """Failed records of a user import job (empty when there are none)."""
        payload = self.rest.get(self._item_path("{id}/errors", id=job_id))
        if not isinstance(payload, list):
            return []
        return [JobError.from_dict(item) for item in payload]

    def send_verification_email(
        self,
        user_id: str,
        client_id: str | None = None,
        identity: dict[str, str] | None = None,
    ) -> Job:
        if not user_id:
            raise ValidationError("user_id cannot be empty", field="user_id")
        body: dict[str, Any] = {"user_id": user_id}
        if client_id:
            body["client_id"] = client_id
        if identity:
            body["identity"] = identity
        return self._post(f"{self.path}/verification-email", Job.from_dict, body)

    def import_users(
        self,
        connection_id: str,
        users: str | Path | IO[bytes] | list[dict[str, Any]],
        upsert: bool = False,
        send_completion_email: bool = True,
        external_id: str | None = None,
    ) -> Job:
        """Start a bulk user import from a JSON file, stream or list of users.

        The users file is read into memory once and sent as
        ``multipart/form-data`` in the ``users`` part, so a rate limited
        upload can be retried with the same content.
        """
        if not connection_id:
            raise ValidationError(
                "connection_id cannot be empty", field="connection_id"
            )

        form: dict[str, str] = {
            "connection_id": connection_id,
            "upsert": "true" if upsert else "false",
            "send_completion_email": "true" if send_completion_email else "false",
        }
        if external_id:
            form["external_id"] = external_id

        filename = "users.json"
        if isinstance(users, list):
            content = json.dumps(users).encode("utf-8")
        elif isinstance(users, str | Path):
            path = Path(users)
            filename = path.name
            content = path.read_bytes()
        else:
            content = users.read()
            if isinstance(content, str):
                content = content.encode("utf-8")

        payload = self.rest.post(
            f"{self.path}/users-imports",
            data=form,
            files={"users": (filename, content, "application/json")},
        )
        return Job.from_dict(payload or {})

    def export_users(
        self,
        connection_id: str | None = None,
        format: str = "json",
        fields: list[dict[str, str]] | None = None,
        limit: int | None = None,
    ) -> Job:
        body: dict[str, Any] = {"format": format}
        if connection_id:
            body["connection_id"] = connection_id
        if fields:
            body["fields"] = fields
        if limit is not None:
            body["limit"] = limit
        return self._post(f"{self.path}/users-exports", Job.from_dict, body)
