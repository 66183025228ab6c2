from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from ._context import assert_in_injection_context, inject, injection_context
from ._injector import Injector


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Sequence

    T = TypeVar("T")


def dynamic_instantiate(
    cls: type[T],
    args: Sequence[Any] = (),
    injector: Injector | None = None,
    **kwargs: Any,
) -> T:
    """Construct `cls(*args, **kwargs)` with `injector` as the ambient injector.

    Without an explicit injector this must run inside an injection context, and
    the injector of the enclosing scope is used. The instance is not registered
    anywhere; a scoped class still gets its own child injector.
    """
    if injector is None:
        assert_in_injection_context(dynamic_instantiate)
        injector = inject(Injector)

    logger.debug("Instantiating %s with %r", cls.__qualname__, injector)
    with injection_context(injector):
        return cls(*args, **kwargs)
