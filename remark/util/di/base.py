"""Provider base shared by every remark DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests can swap out; only the object store today
Component = Literal["storage"]


class ProviderBase(Provider):
    """dishka provider carrying swap metadata.

    A provider with subclasses is a swappable component: its subclasses are
    the real and the in-memory implementations, told apart by ``__is_mock__``.
    A provider without subclasses (config, services, use cases, the
    repository) is used as-is in every container.

    Attributes:
        __mock_component__: Component name for swappable providers, else None
        __is_mock__: True on the in-memory (test) implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
