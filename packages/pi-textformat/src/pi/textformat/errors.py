"""Exceptions raised by the text formatter."""

from __future__ import annotations


class InvalidArgumentError(ValueError):
    """A sizing or formatting argument is out of range."""


class InvalidStateError(RuntimeError):
    """The formatter was read before it was fully configured."""
