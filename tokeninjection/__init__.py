# Public API
from .binding import Binding, BindingBuilder, bind
from .exceptions import (
    CyclicDependencyError,
    DuplicateBindingError,
    TokenInjectionError,
    UnboundTokenError,
)
from .injector import Injector
from .lazy_handle import LazyHandle
from .provider import Provider
from .provider_kind import ProviderKind
from .token import LazyToken, Token, create_token

__all__ = [
    "Injector",
    "LazyHandle",
    # Tokens
    "Token",
    "LazyToken",
    "create_token",
    # Bindings
    "Binding",
    "BindingBuilder",
    "bind",
    "Provider",
    "ProviderKind",
    # Exceptions
    "TokenInjectionError",
    "DuplicateBindingError",
    "UnboundTokenError",
    "CyclicDependencyError",
]

__version__ = '0.1.0'
