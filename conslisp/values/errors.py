"""
Errors raised by the value model.
"""

from typing import Any


class ValueModelError(ValueError):
    """Base class for value model errors."""


class NotAListError(ValueModelError):
    """
    Raised when a proper list is required but a dotted pair or atom was given.
    """

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"not a proper list: {value}")
