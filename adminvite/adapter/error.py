"""Adapter layer errors.

These never cross into the application layer: adapters turn them into
results or domain errors at their boundary.
"""


class AdapterError(Exception):
    """Base error for outbound adapters."""


class EmailTransportError(AdapterError):
    """The email provider rejected a message or answered with garbage."""
