"""
ResolutionChain

This module provides the cycle-tracking state of dependency resolution.

A ResolutionChain is the ordered sequence of tokens whose resolution is in
progress along one continuous path. It is passed explicitly into every
resolution instead of relying on the call stack, because resolution
suspends at asynchronous boundaries.

While the Injector walks dependencies, the active chain is the chain it
started from followed by the tokens of its pending frames. Each sibling
dependency is walked after the previous sibling's frame has been popped,
so a diamond (A -> B, A -> C, B -> C) is not mistaken for a cycle.

Example (internal usage)::

    chain = ResolutionChain((A, B))

    A in chain               # True
    chain.describe(A)        # "Token('a') -> Token('b') -> Token('a')"
"""

from typing import Iterator, Tuple

from .token import Token


class ResolutionChain:
    """Immutable ordered set of tokens currently being resolved.

    Attributes:
        tokens: Tokens on the chain, outermost first

    Note:
        This class is used internally by Injector.
        Users should not need to interact with it directly.
    """

    __slots__ = ('tokens',)

    def __init__(self, tokens: Tuple[Token, ...] = ()):
        self.tokens = tokens

    def describe(self, token: Token) -> str:
        """Render the chain closed by ``token`` for error messages."""
        return " -> ".join(repr(t) for t in self.tokens + (token,))

    def __contains__(self, token: object) -> bool:
        return token in self.tokens

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)

    def __repr__(self) -> str:
        return f"ResolutionChain({list(self.tokens)!r})"
