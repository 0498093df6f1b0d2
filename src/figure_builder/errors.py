"""Typed errors raised while assembling figures."""

from __future__ import annotations

from typing import Any


class FigureBuildError(Exception):
    """Base error for builder and director failures."""


class InvalidArgument(FigureBuildError, ValueError):
    """A build step received a value it cannot accept."""

    def __init__(self, message: str, *, argument: str = "", value: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.argument = argument
        self.value = value


class InvalidState(FigureBuildError, RuntimeError):
    """An operation was invoked before its collaborators were configured."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
