from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ._context import get_current_injector, injection_context
from ._injector import Injector, root_injector
from ._providers import ClassProvider, FactoryProvider, ValueProvider, normalize_recipes
from ._tokens import InjectionToken, ProvidedIn


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from ._providers import Recipe

C = TypeVar("C", bound=type)

#: Resolves to the instance that owns the enclosing scope.
CURRENT_SCOPE: InjectionToken[Any] = InjectionToken("CURRENT_SCOPE")

_UNSET = object()


def register_injectable(
    cls: type,
    provided_in: ProvidedIn | str | None = None,
    *,
    factory: Callable[[], Any] | None = None,
    deps: Iterable[Recipe] = (),
    value: Any = _UNSET,
) -> None:
    """Register `cls` into the root injector when `provided_in` is root.

    Uses `value` if given, else `factory` (with `deps` visible while it runs),
    else the class itself. Without `provided_in` nothing is registered.
    """
    if value is not _UNSET and factory is not None:
        msg = "Provide either `value` or `factory`, not both."
        raise ValueError(msg)

    if provided_in is None or ProvidedIn(provided_in) is not ProvidedIn.ROOT:
        return

    if value is not _UNSET:
        root_injector().provide(ValueProvider(cls, value))
    elif factory is not None:
        root_injector().provide(FactoryProvider(cls, factory, tuple(deps)))
    else:
        root_injector().provide(ClassProvider(cls, cls))


def injectable(
    provided_in: ProvidedIn | str | None = None,
    *,
    factory: Callable[[], Any] | None = None,
    deps: Iterable[Recipe] = (),
    value: Any = _UNSET,
) -> Callable[[C], C]:
    """Class decorator form of `register_injectable`.

    Example:
      @injectable(ProvidedIn.ROOT)
      class Clock: ...

      @injectable(ProvidedIn.ROOT, value=default_theme)
      class Theme: ...

    """

    def decorator(cls: C) -> C:
        register_injectable(cls, provided_in, factory=factory, deps=deps, value=value)
        return cls

    return decorator


def scoped(providers: Iterable[Recipe] = ()) -> Callable[[C], C]:
    """Give every instance of the decorated class its own child injector.

    The injector is parented to whatever injector is ambient at construction
    time, seeded with `providers`, and ambient only while `__init__` runs.
    Once built, the instance is registered into it under its class and under
    `CURRENT_SCOPE`.
    """
    recipes = normalize_recipes(providers)

    def decorator(cls: C) -> C:
        original_init = cls.__init__

        @functools.wraps(original_init)
        def __init__(self: Any, *args: Any, **kwargs: Any) -> None:
            injector = Injector(get_current_injector(), recipes)
            logger.debug("Entering scope of %s with %r", cls.__qualname__, injector)

            with injection_context(injector):
                original_init(self, *args, **kwargs)

                injector.provide(ValueProvider(cls, self))
                if type(self) is not cls:
                    injector.provide(ValueProvider(type(self), self))
                injector.provide(ValueProvider(CURRENT_SCOPE, self))

        cls.__init__ = __init__  # type: ignore[misc]
        return cls

    return decorator
