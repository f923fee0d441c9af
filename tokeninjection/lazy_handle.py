"""
LazyHandle

Deferred access to a dependency, used to break dependency cycles.

When a provider declares a dependency on ``token.lazy``, the Injector does
not resolve ``token`` while building the provider's arguments. It passes a
LazyHandle instead, and the consumer awaits ``handle.get()`` later, once
the construction that created the handle has completed.
"""

from typing import TYPE_CHECKING, Generic, TypeVar

from .resolution_chain import ResolutionChain
from .token import Token

if TYPE_CHECKING:
    from .injector import Injector

T = TypeVar('T')


class LazyHandle(Generic[T]):
    """On-demand resolver for one token of one injector.

    Handles are cheap and stateless: they hold only the injector and the
    token, and a fresh handle is created for every lazy dependency supplied.

    Example::

        class ServiceB:
            def __init__(self, a: LazyHandle[ServiceA]):
                self._a = a

            async def peer(self) -> ServiceA:
                return await self._a.get()
    """

    __slots__ = ('_injector', '_token')

    def __init__(self, injector: 'Injector', token: Token[T]):
        self._injector = injector
        self._token = token

    @property
    def token(self) -> Token[T]:
        return self._token

    async def get(self) -> T:
        """Resolve the token on demand.

        Resolution starts a new chain: the chain that was active when the
        handle was created is not consulted, so the lazy edge is exempt
        from cycle detection.

        Returns:
            The resolved (and cached) value of the token

        Raises:
            UnboundTokenError: When the token has no binding
            CyclicDependencyError: When a cycle is found from this token
        """
        return await self._injector._resolve(self._token, ResolutionChain())

    def __repr__(self) -> str:
        return f"LazyHandle({self._token!r})"
