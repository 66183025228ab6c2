from __future__ import annotations

from typing import Any


def token_name(token: Any) -> str:
    return getattr(token, "__qualname__", None) or repr(token)


class InjectionError(RuntimeError):
    pass


class TokenNotRegisteredError(InjectionError):
    """Raised when a token cannot be resolved along the whole injector chain."""

    def __init__(self, token: Any) -> None:
        self.token = token
        super().__init__(f"No provider registered for token: {token_name(token)}")


class InjectionOutsideContextError(InjectionError):
    """Raised when an operation that needs an ambient injector runs outside of any scope."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation}() must be called in an injection context")
