from abc import ABC
from typing import Any, Callable, Generic, Type, TypeVar

T = TypeVar("T")
C = TypeVar("C", bound=Type)


class BaseFactory(ABC, Generic[T]):
    """Name -> class registry; subclasses decide how to instantiate."""

    def __init__(self) -> None:
        self._blueprints: dict[str, Type[T]] = {}

    def register(self, name: str, item_blueprint: Type[T]) -> None:
        if name in self._blueprints:
            raise ValueError(f"Blueprint '{name}' is already registered")
        self._blueprints[name] = item_blueprint

    def get_blueprint(self, name: str) -> Type[T]:
        if name not in self._blueprints:
            raise ValueError(f"Blueprint '{name}' not registered")
        return self._blueprints[name]

    def get_available_products(self) -> list[str]:
        return list(self._blueprints)

    def create(self, name: str, **kwargs: Any) -> T:
        key = str(name)
        blueprint = self.get_blueprint(key)
        return blueprint(**kwargs)


def register_in(
    registry: Type[BaseFactory], name: str
) -> Callable[[C], C]:
    def decorator(cls: C) -> C:
        registry().register(str(name), cls)
        return cls

    return decorator
