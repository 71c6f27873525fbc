"""Base service class for domain services."""


class Service:
    """Base class for domain services.

    Services here hold no repositories or clients: they take entities and
    values as arguments and return new ones, so one instance can be shared
    application-wide.
    """
