"""Hierarchical dependency injection with an ambient injection context.

This package provides a tree of injectors that lazily build and cache values
for tokens, and lets code under construction pull its dependencies from the
injector currently in effect instead of having them passed in.

Exports:
- `Injector`: Registry of recipes resolving tokens, falling back to a parent.
- `RootInjector` / `root_injector`: The process-wide injector ending every chain.
- `InjectOptions`: Lookup modifiers (`optional`, `self_only`, `skip_self`, `host`).
- `InjectionToken`: Explicit identity for a dependency, optionally auto-registered in root.
- `ValueProvider`, `ClassProvider`, `FactoryProvider`, `ExistingProvider`: Recipes.
- `inject`: Resolve from the ambient injector.
- `injection_context`, `get_current_injector`, `set_current_injector`,
  `assert_in_injection_context`: Ambient context primitives.
- `scoped`: Class decorator giving each instance its own child injector.
- `injectable` / `register_injectable`: Root registration hook.
- `dynamic_instantiate`: Build an instance against an explicit or ambient injector.
"""

from ._context import (
    assert_in_injection_context,
    get_current_injector,
    inject,
    injection_context,
    set_current_injector,
)
from ._dynamic import dynamic_instantiate
from ._errors import InjectionError, InjectionOutsideContextError, TokenNotRegisteredError
from ._injector import InjectOptions, Injector, RootInjector, root_injector
from ._providers import ClassProvider, ExistingProvider, FactoryProvider, Provider, ValueProvider
from ._scope import CURRENT_SCOPE, injectable, register_injectable, scoped
from ._tokens import InjectionToken, ProvidedIn


__all__ = [
    "CURRENT_SCOPE",
    "ClassProvider",
    "ExistingProvider",
    "FactoryProvider",
    "InjectOptions",
    "InjectionError",
    "InjectionOutsideContextError",
    "InjectionToken",
    "Injector",
    "ProvidedIn",
    "Provider",
    "RootInjector",
    "TokenNotRegisteredError",
    "ValueProvider",
    "assert_in_injection_context",
    "dynamic_instantiate",
    "get_current_injector",
    "inject",
    "injectable",
    "injection_context",
    "register_injectable",
    "root_injector",
    "scoped",
    "set_current_injector",
]
