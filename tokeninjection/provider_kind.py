"""
ProviderKind Enum

Defines how a provider produces its value
"""

from enum import Enum


class ProviderKind(Enum):
    """Variant tag of a provider"""
    VALUE = "VALUE"
    FACTORY = "FACTORY"
    ASYNC_FACTORY = "ASYNC_FACTORY"
    CLASS = "CLASS"
    ASYNC_CLASS = "ASYNC_CLASS"
