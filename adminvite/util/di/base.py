"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with an in-process fake that can replace the real implementation
Component = Literal["persistence", "email"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A mockable component is declared as a base class naming the component,
    with one production subclass and one mock subclass.

    Attributes:
        __mock_component__: Component name (None for concrete providers)
        __is_mock__: Whether this is the mock implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementations(cls) -> list[type["ProviderBase"]]:
        """Production and mock subclasses; empty for concrete providers."""
        return cls.__subclasses__()

    @classmethod
    def is_mockable(cls) -> bool:
        return bool(cls.implementations())
