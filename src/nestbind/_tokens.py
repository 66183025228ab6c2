from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from ._injector import root_injector
from ._providers import FactoryProvider


if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ._providers import Recipe

T = TypeVar("T")


class ProvidedIn(str, Enum):
    ROOT = "root"


class InjectionToken(Generic[T]):
    """An explicit identity to request a dependency by.

    The name only shows up in diagnostics: tokens are equal by identity, so
    two tokens named alike never share a registration.

    With `provided_in=ProvidedIn.ROOT` the token registers `factory` (run with
    `deps` visible) into the root injector as soon as it is created.
    """

    def __init__(
        self,
        name: str,
        *,
        provided_in: ProvidedIn | str | None = None,
        factory: Callable[[], T] | None = None,
        deps: Iterable[Recipe] = (),
    ) -> None:
        self.name = name
        self.provided_in = ProvidedIn(provided_in) if provided_in is not None else None
        self.factory = factory
        self.deps = tuple(deps)

        if self.provided_in is ProvidedIn.ROOT:
            if factory is None:
                msg = f"Token {name!r} is provided in root but has no factory."
                raise ValueError(msg)
            root_injector().provide(FactoryProvider(self, factory, self.deps))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
