"""Resend email transport."""

from .client import MockEmailSender, ResendEmailSender, ResendError

__all__ = [
    "MockEmailSender",
    "ResendEmailSender",
    "ResendError",
]
