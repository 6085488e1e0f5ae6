"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests swap for in-memory or recording fakes
Component = Literal["persistence", "email"]


class ProviderBase(Provider):
    """Common base for every provider in PROVIDERS.

    Attributes:
        __mock_component__: Set on the base class of a swappable component,
            None for providers that are always used as-is
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
