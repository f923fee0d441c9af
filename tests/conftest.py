"""
Test Configuration and Utilities

Common base classes and helper functions for TokenInjection tests
"""

import asyncio
import unittest
from typing import Any, Callable, List

from tokeninjection import Injector, bind, create_token


class TokenInjectionTestCase(unittest.IsolatedAsyncioTestCase):
    """
    Base test case class for TokenInjection tests.

    Creates a fresh set of tokens before each test so that no test
    shares identities with another.
    """

    def setUp(self):
        """Create fresh tokens before each test"""
        self.A = create_token("a")
        self.B = create_token("b")
        self.C = create_token("c")
        self.D = create_token("d")


class CallCounter:
    """
    Callable wrapper that records every invocation.

    Example:
        >>> factory = CallCounter(lambda: Database())
        >>> factory()
        >>> factory.calls
        1
    """

    def __init__(self, func: Callable[..., Any]):
        self.func = func
        self.calls = 0
        self.arguments: List[tuple] = []

    def __call__(self, *args):
        self.calls += 1
        self.arguments.append(args)
        return self.func(*args)


def delayed(value: Any, delay: float) -> Callable[..., Any]:
    """
    Create an async factory returning ``value`` after ``delay`` seconds.

    Args:
        value: The value to return
        delay: Seconds to sleep before returning

    Returns:
        An async factory usable with ``to_async_factory``
    """

    async def factory(*_):
        await asyncio.sleep(delay)
        return value

    return factory


def create_value_injector(**values: Any) -> tuple:
    """
    Create an injector binding one fresh token per keyword argument.

    Returns:
        A tuple ``(injector, tokens)`` where ``tokens`` maps each keyword
        to its token

    Example:
        >>> injector, tokens = create_value_injector(a=1, b=3)
        >>> await injector.get(tokens["a"])
        1
    """
    tokens = {name: create_token(name) for name in values}
    injector = Injector([bind(tokens[name]).to_value(value) for name, value in values.items()])
    return injector, tokens
