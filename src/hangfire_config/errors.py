"""Errors raised for malformed call arguments."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """Raised when a required argument is missing, empty or malformed.

    ``argument`` holds the name of the offending parameter.
    """

    def __init__(self, argument: str, message: str) -> None:
        super().__init__(f"{message} (Parameter '{argument}')")
        self.argument = argument
