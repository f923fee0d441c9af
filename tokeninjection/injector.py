"""
Injector

This module provides the resolution engine of TokenInjection. It is
responsible for:

- Storing an immutable set of bindings
- Resolving tokens and their declared dependencies concurrently
- Caching every result (value or failure) for the injector's lifetime
- Detecting dependency cycles, across parent injectors as well
- Supplying LazyHandles for lazy dependencies
- Falling back to a parent injector for tokens bound there

Example::

    A, B, SUM = create_token("a"), create_token("b"), create_token("sum")

    injector = Injector([
        bind(A).to_value(1),
        bind(B).to_value(3),
        bind(SUM).to_factory(lambda a, b: a + b, A, B),
    ])

    assert await injector.get(SUM) == 4
"""

import asyncio
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, TypeVar, Union, overload

from .binding import Binding
from .exceptions import CyclicDependencyError, DuplicateBindingError, UnboundTokenError
from .lazy_handle import LazyHandle
from .provider import Provider
from .provider_kind import ProviderKind
from .resolution_chain import ResolutionChain
from .token import LazyToken, Token

logger = logging.getLogger(__name__)

T = TypeVar('T')


class Injector:
    """Dependency resolution engine.

    Each token bound in an injector is constructed at most once: the first
    request schedules a task that resolves the dependencies and invokes the
    provider, and that task is cached and shared by every later request.
    A failed construction is cached too and never retried; build a new
    injector to try again.

    Attributes:
        _bindings: Read-only mapping of tokens to their Binding
        _parent: Injector consulted for tokens not bound here
        _cache: Tasks (pending or settled) keyed by token

    Note:
        The cache holds asyncio futures, so an injector must be used from
        a single event loop.
    """

    def __init__(
        self,
        bindings: Iterable[Binding] = (),
        parent: Optional['Injector'] = None
    ):
        """Initialize an injector.

        Args:
            bindings: Bindings of this injector, in any order
            parent: Injector to fall back to for unbound tokens (optional).
                The parent is never modified by the child.

        Raises:
            DuplicateBindingError: When two bindings share a token

        Example::

            app = Injector([bind(DATABASE).to_class(Database)])
            request = Injector([bind(USER).to_value(user)], parent=app)
        """
        registry: Dict[Token, Binding] = {}
        for binding in bindings:
            if binding.token in registry:
                raise DuplicateBindingError(
                    f"{binding.token!r} is bound more than once",
                    token=binding.token
                )
            registry[binding.token] = binding

        self._bindings: Mapping[Token, Binding] = MappingProxyType(registry)
        self._parent = parent
        self._cache: Dict[Token, 'asyncio.Future[Any]'] = {}
        logger.debug("Injector created with %d bindings", len(registry))

    @property
    def parent(self) -> Optional['Injector']:
        return self._parent

    def create_child(self, bindings: Iterable[Binding] = ()) -> 'Injector':
        """Create an injector that falls back to this one.

        Tokens bound in the child shadow the same tokens in this injector.
        Results for tokens bound here are still cached here.

        Args:
            bindings: Bindings of the child injector

        Returns:
            A new Injector whose parent is this injector
        """
        return Injector(bindings, parent=self)

    def is_bound(self, token: Union[Token, LazyToken]) -> bool:
        """Check whether a token is bound here or on an ancestor.

        A lazy token counts as bound when the token it wraps is.
        """
        if isinstance(token, LazyToken):
            token = token.target
        injector: Optional[Injector] = self
        while injector is not None:
            if token in injector._bindings:
                return True
            injector = injector._parent
        return False

    def __contains__(self, token: object) -> bool:
        return isinstance(token, (Token, LazyToken)) and self.is_bound(token)

    @overload
    async def get(self, token: LazyToken[T]) -> LazyHandle[T]: ...

    @overload
    async def get(self, token: Token[T]) -> T: ...

    async def get(self, token):
        """Resolve a token.

        Args:
            token: The token to resolve. A lazy token yields a LazyHandle
                bound to this injector without resolving anything.

        Returns:
            The constructed or cached value of the token

        Raises:
            UnboundTokenError: When the token, or a dependency it requires,
                has no binding on this injector or its ancestors
            CyclicDependencyError: When a dependency cycle is detected
            Exception: Whatever the provider (or a provider it depends on)
                raised, unchanged

        Example::

            repository = await injector.get(REPOSITORY)
        """
        if isinstance(token, LazyToken):
            return LazyHandle(self, token.target)
        return await self._resolve(token, ResolutionChain())

    def _resolve(self, token: Token[T], chain: ResolutionChain) -> 'asyncio.Future[T]':
        """Start (or join) the resolution of a token.

        The walk over dependencies that are not cached yet runs without
        suspending, so the whole uncached subtree is explored along one
        continuous chain before any provider runs. Engine errors found
        during the walk are returned as failed futures.

        The walk keeps an explicit stack of pending frames, one per token
        whose dependencies are still being walked. The active chain is
        ``chain`` followed by the tokens of those frames, and a token's task
        is created and cached once all of its dependency futures exist.

        Must be called with a running event loop.

        Args:
            token: The token to resolve
            chain: Tokens in progress on the current path

        Returns:
            A future shielded from cancellation by the caller
        """
        path: List[_Frame] = []
        active = set(chain)

        entered = self._enter(token, chain, path, active)
        if not isinstance(entered, _Frame):
            return entered
        path.append(entered)
        active.add(token)

        while True:
            frame = path[-1]
            dependencies = frame.provider.dependencies
            if len(frame.arguments) < len(dependencies):
                dependency = dependencies[len(frame.arguments)]
                if isinstance(dependency, LazyToken):
                    frame.arguments.append(_resolved(LazyHandle(frame.injector, dependency.target)))
                    continue
                entered = frame.injector._enter(dependency, chain, path, active)
                if isinstance(entered, _Frame):
                    path.append(entered)
                    active.add(dependency)
                else:
                    frame.arguments.append(entered)
                continue

            path.pop()
            active.discard(frame.token)
            future = frame.injector._schedule(frame)
            if not path:
                return future
            path[-1].arguments.append(future)

    def _enter(
        self,
        token: Token,
        chain: ResolutionChain,
        path: List['_Frame'],
        active: Set[Token]
    ) -> Union['_Frame', 'asyncio.Future[Any]']:
        """Look a token up for the walk.

        Returns the cached future, a failed future for an engine error, or
        a new frame on the injector that owns the binding.
        """
        injector = self
        while True:
            cached = injector._cache.get(token)
            if cached is not None:
                return asyncio.shield(cached)

            if token in active:
                in_progress = ResolutionChain(chain.tokens + tuple(frame.token for frame in path))
                return _failed(CyclicDependencyError(
                    f"Cyclic dependency detected: {in_progress.describe(token)}",
                    token=token,
                    chain=in_progress.tokens + (token,)
                ))

            binding = injector._bindings.get(token)
            if binding is not None:
                return _Frame(injector, token, binding.provider)

            if injector._parent is not None and injector._parent.is_bound(token):
                logger.debug("Delegating %r to parent injector", token)
                injector = injector._parent
                continue
            return _failed(injector._unbound(token))

    def _schedule(self, frame: '_Frame') -> 'asyncio.Future[Any]':
        """Create and cache the task constructing a frame's token."""
        task = asyncio.ensure_future(self._construct(frame.token, frame.provider, frame.arguments))
        self._cache[frame.token] = task
        return asyncio.shield(task)

    async def _construct(
        self,
        token: Token[T],
        provider: Provider[T],
        arguments: List['asyncio.Future[Any]']
    ) -> T:
        """Await all dependencies jointly, then invoke the provider.

        ``arguments[i]`` resolves to the value of the provider's i-th
        dependency whatever order they settle in.
        """
        values = await asyncio.gather(*arguments)
        logger.debug("Invoking %s provider for %r", provider.kind.value, token)

        kind = provider.kind
        if kind is ProviderKind.VALUE:
            return provider.target
        if kind is ProviderKind.FACTORY:
            return provider.target(*values)
        if kind is ProviderKind.ASYNC_FACTORY:
            return await provider.target(*values)
        if kind is ProviderKind.CLASS:
            return provider.target(*values)
        klass = await provider.target()
        return klass(*values)

    def _unbound(self, token: Token) -> UnboundTokenError:
        bound: List[Token] = []
        injector: Optional[Injector] = self
        while injector is not None:
            bound.extend(t for t in injector._bindings if t not in bound)
            injector = injector._parent

        bound_tokens = ", ".join(repr(t) for t in bound) or "None"
        return UnboundTokenError(
            f"{token!r} is not bound.\n"
            f"Bound tokens: {bound_tokens}\n"
            f"Hint: bind({token!r}).to_value(...)",
            token=token
        )


def _failed(error: Exception) -> 'asyncio.Future[Any]':
    future = asyncio.get_running_loop().create_future()
    future.set_exception(error)
    return future


def _resolved(value: Any) -> 'asyncio.Future[Any]':
    future = asyncio.get_running_loop().create_future()
    future.set_result(value)
    return future


class _Frame:
    """A token whose dependencies are still being walked"""

    __slots__ = ('injector', 'token', 'provider', 'arguments')

    def __init__(self, injector: Injector, token: Token, provider: Provider):
        self.injector = injector
        self.token = token
        self.provider = provider
        self.arguments: List['asyncio.Future[Any]'] = []
