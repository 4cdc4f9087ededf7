"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to pick implementations.

    A provider class that has subclasses is a swappable component: the
    subclasses are its implementations, told apart by ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def implementations(cls) -> list[type["ProviderBase"]]:
        return cls.__subclasses__()

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())
