"""
Token

Opaque identities for dependency slots.

A Token is compared by identity only: two tokens created with the same
label are distinct. The type parameter exists for static type checkers
and is never inspected at runtime.

Example::

    DATABASE: Token[Database] = create_token("database")

    DATABASE.lazy          # paired LazyToken, created once
    DATABASE.lazy.target   # DATABASE
"""

from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Token(Generic[T]):
    """Unique identity for a dependency slot.

    Attributes:
        label: Optional human-readable name, used only in diagnostics
    """

    __slots__ = ('label', '_lazy')

    def __init__(self, label: Optional[str] = None):
        self.label = label
        self._lazy: Optional['LazyToken[T]'] = None

    @property
    def lazy(self) -> 'LazyToken[T]':
        """The lazy variant of this token.

        Declaring a dependency on ``token.lazy`` makes the engine pass a
        LazyHandle instead of the resolved value.
        """
        if self._lazy is None:
            self._lazy = LazyToken(self)
        return self._lazy

    def __repr__(self) -> str:
        if self.label is not None:
            return f"Token({self.label!r})"
        return f"Token(<anonymous 0x{id(self):x}>)"


class LazyToken(Generic[T]):
    """Identity of "the lazy wrapper for T" rather than T itself."""

    __slots__ = ('_target',)

    def __init__(self, target: Token[T]):
        self._target = target

    @property
    def target(self) -> Token[T]:
        return self._target

    @property
    def label(self) -> Optional[str]:
        return self._target.label

    def __repr__(self) -> str:
        return f"LazyToken({self._target!r})"


def create_token(label: Optional[str] = None) -> Token:
    """Create a fresh token.

    Args:
        label: Optional debug label

    Returns:
        A new Token, distinct from every other token
    """
    return Token(label)
