from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, TypeVar, overload

from ._errors import TokenNotRegisteredError, token_name
from ._providers import ClassProvider, ExistingProvider, FactoryProvider, ValueProvider, normalize_recipe


logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ._providers import Provider, Recipe, Token
    from ._tokens import InjectionToken

    T = TypeVar("T")


@dataclass(frozen=True)
class InjectOptions:
    """Lookup modifiers for `Injector.get` and `inject`.

    - `optional`: return `None` instead of raising when nothing is found.
    - `self_only`: only consult the injector `get` is called on.
    - `skip_self`: ignore the injector `get` is called on, start at its parent.
    - `host`: on delegation, the parent is consulted with `self_only`, so the
      search stops one hop up.
    """

    optional: bool = False
    self_only: bool = False
    skip_self: bool = False
    host: bool = False

    def __post_init__(self) -> None:
        if self.self_only and self.skip_self:
            msg = "`self_only` and `skip_self` are mutually exclusive."
            raise ValueError(msg)


_DEFAULT_OPTIONS = InjectOptions()


@dataclass
class _Unresolved:
    provider: Provider


@dataclass
class _Resolved:
    value: object


def _check_token(token: object) -> None:
    from ._tokens import InjectionToken

    # Registries are keyed by identity, labels such as strings are never tokens.
    if not (inspect.isclass(token) or isinstance(token, InjectionToken)):
        msg = f"Tokens must be classes or InjectionToken instances, got {token!r}"
        raise TypeError(msg)


def _as_options(options: InjectOptions | None, flags: dict[str, bool]) -> InjectOptions:
    if options is None:
        return InjectOptions(**flags) if flags else _DEFAULT_OPTIONS

    if flags:
        msg = "Pass either an InjectOptions instance or keyword flags, not both."
        raise TypeError(msg)

    return options


class Injector:
    """Registry of recipes that resolves and caches values, delegating to a parent on miss.

    - `provide` registers (or replaces) a recipe.
    - `get` resolves a token; a value is cached at the injector holding the recipe.
    - every injector resolves itself under the `Injector` token.
    """

    def __init__(self, parent: Injector | None = None, providers: Iterable[Recipe] = ()) -> None:
        self._parent = parent
        self._records: dict[Any, _Unresolved | _Resolved] = {}

        for recipe in providers:
            self.provide(recipe)

        self._records[Injector] = _Resolved(self)

    @property
    def parent(self) -> Injector | None:
        return self._parent

    def __repr__(self) -> str:
        parent = f"{id(self._parent):#x}" if self._parent is not None else None
        return f"<{type(self).__name__} at {id(self):#x} tokens={len(self._records)} parent={parent}>"

    def provide(self, recipe: Recipe) -> None:
        """Register a recipe for its token, replacing whatever this injector held for it.

        Example:
          injector.provide(Cart)
          injector.provide(ValueProvider(TITLE, "Shop"))
          injector.provide(ExistingProvider(BASKET, Cart))

        """
        provider = normalize_recipe(recipe)
        token = provider.provide
        _check_token(token)

        self._records[token] = _Unresolved(provider)

        logger.debug("Registered %s for %s on %r", type(provider).__name__, token_name(token), self)

    @overload
    def get(self, token: type[T], options: InjectOptions | None = ..., /, **flags: bool) -> T: ...

    @overload
    def get(self, token: InjectionToken[T], options: InjectOptions | None = ..., /, **flags: bool) -> T: ...

    def get(self, token: Token, options: InjectOptions | None = None, /, **flags: bool) -> Any:
        """Resolve `token`, walking up the parent chain on a local miss.

        Lookup modifiers come either as an `InjectOptions` or as keyword flags
        (`optional`, `self_only`, `skip_self`, `host`). Returns `None` for an
        optional token that is not found; otherwise raises `TokenNotRegisteredError`.
        """
        _check_token(token)
        options = _as_options(options, flags)

        if not options.skip_self:
            record = self._records.get(token)
            if record is not None:
                return self._resolve_record(token, record, options)

        if not options.self_only and self._parent is not None:
            # `host` bounds the parent's own lookup to itself
            return self._parent.get(token, InjectOptions(optional=options.optional, self_only=options.host))

        if options.optional:
            logger.debug("Optional token %s not found from %r", token_name(token), self)
            return None

        raise TokenNotRegisteredError(token)

    def _resolve_record(self, token: Token, record: _Unresolved | _Resolved, options: InjectOptions) -> Any:
        if isinstance(record, _Resolved):
            return record.value

        provider = record.provider
        if isinstance(provider, ExistingProvider):
            # aliases are transparent: the target's record does the caching
            return self.get(provider.use_existing, options)

        value = self._instantiate(provider)

        # a recipe replaced during construction wins over this result
        if self._records.get(token) is record:
            self._records[token] = _Resolved(value)

        logger.debug("Resolved %s on %r", token_name(token), self)
        return value

    def _instantiate(self, provider: Provider) -> Any:
        from ._context import get_current_injector, injection_context

        if isinstance(provider, ValueProvider):
            return provider.use_value

        if isinstance(provider, ClassProvider):
            with injection_context(self):
                return provider.use_class()

        if isinstance(provider, FactoryProvider):
            child = Injector(get_current_injector(), provider.deps)
            with injection_context(child):
                return provider.use_factory()

        msg = f"Unsupported provider {provider!r}"
        raise TypeError(msg)


class RootInjector(Injector):
    """The parentless injector at the top of every resolution chain."""

    def __init__(self, providers: Iterable[Recipe] = ()) -> None:
        super().__init__(None, providers)


_ROOT_INJECTOR = RootInjector()


def root_injector() -> RootInjector:
    return _ROOT_INJECTOR
