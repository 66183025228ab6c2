"""Ambient injection context.

The injector currently in effect lives in a `ContextVar`, so every thread
starts out with an empty context. An empty context reads as the root injector.
Scopes are entered with `injection_context`, which always restores the exact
previous value on exit, errors included.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._errors import InjectionOutsideContextError
from ._injector import Injector, root_injector


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from ._injector import InjectOptions
    from ._providers import Token
    from ._tokens import InjectionToken

    T = TypeVar("T")


_current_injector: ContextVar[Injector | None] = ContextVar("nestbind_current_injector", default=None)


def set_current_injector(injector: Injector | None) -> None:
    """Replace the ambient injector; `None` clears it back to the root default."""
    _current_injector.set(injector)


def get_current_injector() -> Injector:
    injector = _current_injector.get()
    return injector if injector is not None else root_injector()


def assert_in_injection_context(operation: str | Callable[..., Any]) -> None:
    if _current_injector.get() is None:
        name = operation if isinstance(operation, str) else getattr(operation, "__name__", repr(operation))
        raise InjectionOutsideContextError(name)


@contextmanager
def injection_context(injector: Injector | None) -> Iterator[Injector]:
    """Make `injector` the ambient injector for the duration of the block."""
    reset_token = _current_injector.set(injector)
    logger.debug("Entered injection context %r", injector)
    try:
        yield get_current_injector()
    finally:
        _current_injector.reset(reset_token)
        logger.debug("Left injection context %r", injector)


@overload
def inject(token: type[T], options: InjectOptions | None = ..., /, **flags: bool) -> T: ...


@overload
def inject(token: InjectionToken[T], options: InjectOptions | None = ..., /, **flags: bool) -> T: ...


def inject(token: Token, options: InjectOptions | None = None, /, **flags: bool) -> Any:
    """Resolve `token` from the ambient injector.

    Example:
      class Checkout:
          def __init__(self) -> None:
              self.cart = inject(Cart)
              self.coupon = inject(COUPON, optional=True)

    """
    return get_current_injector().get(token, options, **flags)
