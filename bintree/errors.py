"""Exceptions raised by the tree classes."""

from __future__ import annotations


class TreeError(Exception):
    """Base class for all errors raised by a tree."""


class NotFoundError(TreeError, LookupError):
    """Raised when a requested entry is not in the tree."""

    def __init__(self, message: str = "") -> None:
        super().__init__(f"Not Found Exception: {message}")


class PreconditionViolatedError(TreeError):
    """Raised when an operation's precondition does not hold."""

    def __init__(self, message: str = "") -> None:
        super().__init__(f"Precondition Violated Exception: {message}")