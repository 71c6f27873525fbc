"""Domain services."""

from .admin_invitation_service import AdminInvitationDomainService
from .base import Service
from .email_port import EmailMessage, EmailResult, SendEmailPort

__all__ = [
    "AdminInvitationDomainService",
    "EmailMessage",
    "EmailResult",
    "SendEmailPort",
    "Service",
]
