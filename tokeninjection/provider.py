"""
Provider

Data class describing how to produce the value of a token.

A provider is a tagged record: ``kind`` selects the variant and ``target``
holds its payload (the constant, the factory, the class or the class
loader). The Injector dispatches on ``kind``; there are no provider
subclasses.
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, Iterable, Tuple, Type, TypeVar, Union

from .provider_kind import ProviderKind
from .token import LazyToken, Token

T = TypeVar('T')

# A dependency is either a token (resolved eagerly) or a lazy token
# (passed as a LazyHandle)
Dependency = Union[Token, LazyToken]


@dataclass(frozen=True)
class Provider(Generic[T]):
    """Recipe for a token's value"""
    kind: ProviderKind
    target: Any
    dependencies: Tuple[Dependency, ...] = ()

    def __post_init__(self):
        if not isinstance(self.kind, ProviderKind):
            raise TypeError(f"Provider kind must be a ProviderKind, got {self.kind!r}")
        dependencies = _freeze(self.dependencies)
        if self.kind is ProviderKind.VALUE and dependencies:
            raise ValueError("A VALUE provider cannot declare dependencies")
        object.__setattr__(self, 'dependencies', dependencies)

    @classmethod
    def value(cls, value: T) -> 'Provider[T]':
        """Provide a constant."""
        return cls(ProviderKind.VALUE, value)

    @classmethod
    def factory(
        cls,
        factory: Callable[..., T],
        dependencies: Iterable[Dependency] = ()
    ) -> 'Provider[T]':
        """Provide the return value of ``factory(*dependency_values)``."""
        return cls(ProviderKind.FACTORY, factory, dependencies)

    @classmethod
    def async_factory(
        cls,
        factory: Callable[..., Awaitable[T]],
        dependencies: Iterable[Dependency] = ()
    ) -> 'Provider[T]':
        """Provide the awaited result of ``factory(*dependency_values)``."""
        return cls(ProviderKind.ASYNC_FACTORY, factory, dependencies)

    @classmethod
    def class_(
        cls,
        klass: Type[T],
        dependencies: Iterable[Dependency] = ()
    ) -> 'Provider[T]':
        """Provide a new ``klass(*dependency_values)`` instance."""
        return cls(ProviderKind.CLASS, klass, dependencies)

    @classmethod
    def async_class(
        cls,
        loader: Callable[[], Awaitable[Type[T]]],
        dependencies: Iterable[Dependency] = ()
    ) -> 'Provider[T]':
        """Provide a new instance of the class returned by ``await loader()``.

        The loader is called once the dependencies are resolved, which
        makes it suitable for importing heavy modules on demand.
        """
        return cls(ProviderKind.ASYNC_CLASS, loader, dependencies)


def _freeze(dependencies: Iterable[Dependency]) -> Tuple[Dependency, ...]:
    frozen = tuple(dependencies)
    for dependency in frozen:
        if not isinstance(dependency, (Token, LazyToken)):
            raise TypeError(
                f"Dependencies must be tokens, got {dependency!r}. "
                f"Create tokens with create_token()."
            )
    return frozen
