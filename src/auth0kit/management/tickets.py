"""Tickets endpoints of the Management API."""

from typing import Any

from ..models.base import to_payload
from ..models.management import (
    EmailVerificationTicketRequest,
    PasswordChangeTicketRequest,
    Ticket,
)
from .base import ManagementResource


class Tickets(ManagementResource):
    path = "/tickets"

    def create_email_verification(
        self, request: EmailVerificationTicketRequest | dict[str, Any]
    ) -> Ticket:
        return self._post(
            f"{self.path}/email-verification", Ticket.from_dict, to_payload(request)
        )

    def create_password_change(
        self, request: PasswordChangeTicketRequest | dict[str, Any]
    ) -> Ticket:
        return self._post(
            f"{self.path}/password-change", Ticket.from_dict, to_payload(request)
        )
