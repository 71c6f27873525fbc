"""Infrastructure providers."""

# Import bases
from .email import EmailProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .email import MockEmailProvider, ProdEmailProvider  # noqa: F401
from .persistence import MockPersistenceProvider, ProdPersistenceProvider  # noqa: F401

__all__ = [
    "EmailProvider",
    "MockEmailProvider",
    "MockPersistenceProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
