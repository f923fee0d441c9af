"""
Binding

This module pairs tokens with providers.

A Binding is the unit an Injector is built from. Bindings can be created
directly from a Provider, or with the ``bind()`` builder::

    bindings = [
        bind(A).to_value(1),
        bind(B).to_value(3),
        bind(SUM).to_factory(lambda a, b: a + b, A, B),
    ]

    injector = Injector(bindings)
    assert await injector.get(SUM) == 4
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, Type, TypeVar

from .provider import Dependency, Provider
from .token import LazyToken, Token

T = TypeVar('T')


@dataclass(frozen=True)
class Binding(Generic[T]):
    """Pairs one token with one provider"""
    token: Token[T]
    provider: Provider[T]

    def __post_init__(self):
        if isinstance(self.token, LazyToken):
            raise ValueError(
                f"Only plain tokens can be bound, got {self.token!r}. "
                f"Lazy tokens are resolved through the token they wrap."
            )
        if not isinstance(self.token, Token):
            raise TypeError(
                f"Bindings must target a token, got {self.token!r}. "
                f"Create tokens with create_token()."
            )


class BindingBuilder(Generic[T]):
    """Builder for the bindings of a single token.

    Each ``to_*`` method takes the dependency tokens as positional
    arguments, in the order they are passed to the factory or constructor.

    Note:
        This class is not used directly. Use ``bind(token)`` instead.
    """

    def __init__(self, token: Token[T]):
        self.token = token

    def to_value(self, value: T) -> Binding[T]:
        return Binding(self.token, Provider.value(value))

    def to_factory(self, factory: Callable[..., T], *dependencies: Dependency) -> Binding[T]:
        return Binding(self.token, Provider.factory(factory, dependencies))

    def to_async_factory(
        self,
        factory: Callable[..., Awaitable[T]],
        *dependencies: Dependency
    ) -> Binding[T]:
        return Binding(self.token, Provider.async_factory(factory, dependencies))

    def to_class(self, klass: Type[T], *dependencies: Dependency) -> Binding[T]:
        return Binding(self.token, Provider.class_(klass, dependencies))

    def to_async_class(
        self,
        loader: Callable[[], Awaitable[Type[T]]],
        *dependencies: Dependency
    ) -> Binding[T]:
        return Binding(self.token, Provider.async_class(loader, dependencies))


def bind(token: Token[T]) -> BindingBuilder[T]:
    """Start a binding for ``token``.

    Args:
        token: The token to bind

    Returns:
        A BindingBuilder whose ``to_*`` methods produce the Binding

    Example::

        bind(REPOSITORY).to_class(UserRepository, DATABASE, CACHE)
    """
    return BindingBuilder(token)
