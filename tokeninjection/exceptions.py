"""
TokenInjection Exceptions

Custom exception hierarchy for the TokenInjection resolution engine.

Exceptions raised by providers themselves (factories, constructors, class
loaders) are never wrapped in these classes; they reach the caller of
``Injector.get()`` unchanged.
"""

from typing import Any, Optional, Tuple


class TokenInjectionError(Exception):
    """
    Base exception for all TokenInjection engine errors.

    All engine-specific exceptions inherit from this class.
    You can catch this to handle any engine error generically.

    Example:
        >>> try:
        ...     service = await injector.get(SERVICE)
        ... except TokenInjectionError as e:
        ...     print(f"DI error: {e}")
    """

    pass


class DuplicateBindingError(TokenInjectionError):
    """
    Raised when two bindings target the same token in one Injector.

    This error occurs while constructing an ``Injector``. There is no
    last-wins policy: an ambiguous binding set is rejected outright.

    Common causes:
        - Binding the same token twice in one list
        - Concatenating two binding lists that both bind a token

    Solution:
        Keep one binding per token, or move the override into a child
        injector::

            parent = Injector([bind(DATABASE).to_value(prod_db)])
            child = parent.create_child([bind(DATABASE).to_value(test_db)])
    """

    def __init__(self, message: str, token: Any = None):
        super().__init__(message)
        self.token = token


class UnboundTokenError(TokenInjectionError):
    """
    Raised when a requested token has no binding.

    The token was looked up in the injector and then in every ancestor
    of its parent chain without finding a binding. Dependencies are not
    validated at construction time, so this error can also surface for a
    token that is only required transitively.

    Common causes:
        - Forgetting to bind the token
        - Binding the token on a child injector but requesting it from
          the parent
        - Declaring a dependency on a token that only exists in another
          injector tree

    Note:
        The error message lists the tokens bound on the injector chain
        to help identify available dependencies.
    """

    def __init__(self, message: str, token: Any = None):
        super().__init__(message)
        self.token = token


class CyclicDependencyError(TokenInjectionError):
    """
    Raised when a token is reached again while its resolution is in progress.

    This error occurs when token A depends on token B, and token B
    (directly or indirectly) depends on token A through eager edges.
    The cycle is detected across parent injectors as well.

    Attributes:
        token: The token that closed the cycle
        chain: Tokens on the resolution chain, ending with ``token``

    Solution:
        Declare one edge of the cycle through the lazy token, and resolve
        it on demand after construction::

            bind(A).to_class(ServiceA, B)
            bind(B).to_class(ServiceB, A.lazy)  # ServiceB receives a LazyHandle
    """

    def __init__(
        self,
        message: str,
        token: Any = None,
        chain: Optional[Tuple[Any, ...]] = None
    ):
        super().__init__(message)
        self.token = token
        self.chain = chain or ()
