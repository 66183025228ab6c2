from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Union


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ._tokens import InjectionToken

    Token = type | InjectionToken[Any]
    Recipe = Union["Provider", type]


@dataclass(frozen=True)
class ValueProvider:
    provide: Token
    use_value: Any


@dataclass(frozen=True)
class ClassProvider:
    provide: Token
    use_class: type

    def __post_init__(self) -> None:
        if not inspect.isclass(self.use_class):
            msg = f"`use_class` must be a class, got {self.use_class!r}"
            raise TypeError(msg)


@dataclass(frozen=True)
class FactoryProvider:
    """Produce a value by calling `use_factory()` inside a fresh child injector.

    `deps` are recipes registered into that child injector, so they are visible
    only while the factory runs.
    """

    provide: Token
    use_factory: Callable[[], Any]
    deps: tuple[Recipe, ...] = ()

    def __post_init__(self) -> None:
        if not callable(self.use_factory):
            msg = f"`use_factory` must be callable, got {self.use_factory!r}"
            raise TypeError(msg)
        # normalise eagerly so a bad dependency recipe fails at declaration
        object.__setattr__(self, "deps", normalize_recipes(self.deps))


@dataclass(frozen=True)
class ExistingProvider:
    provide: Token
    use_existing: Token


Provider = Union[ValueProvider, ClassProvider, FactoryProvider, ExistingProvider]

_PROVIDER_TYPES = (ValueProvider, ClassProvider, FactoryProvider, ExistingProvider)


def normalize_recipe(recipe: Recipe) -> Provider:
    """Turn a recipe into a provider; a bare class is shorthand for `ClassProvider(cls, cls)`."""
    if isinstance(recipe, _PROVIDER_TYPES):
        return recipe

    if inspect.isclass(recipe):
        return ClassProvider(recipe, recipe)

    msg = f"Expected a provider or a class, got {recipe!r}"
    raise TypeError(msg)


def normalize_recipes(recipes: Iterable[Recipe] | None) -> tuple[Provider, ...]:
    return tuple(normalize_recipe(recipe) for recipe in recipes or ())
