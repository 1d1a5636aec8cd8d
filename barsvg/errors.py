"""Exceptions raised while serialising a scene."""

from __future__ import annotations

from enum import IntEnum


class ErrorCode(IntEnum):
    """Error numbers shared with the upstream layout engine."""

    TOO_LONG = 5
    INVALID_DATA = 6
    INVALID_CHECK = 7
    INVALID_OPTION = 8
    ENCODING_PROBLEM = 9
    FILE_ACCESS = 10
    MEMORY = 11
    FILE_WRITE = 12


class BarSvgError(Exception):
    """Base class for serialisation errors."""

    code: ErrorCode = ErrorCode.ENCODING_PROBLEM

    def __init__(self, message: str, code: ErrorCode | None = None):
        super().__init__(message)
        if code is not None:
            self.code = code


class MissingGeometryError(BarSvgError):
    """The scene has no vector geometry; the layout stage did not run."""

    code = ErrorCode.INVALID_DATA

    def __init__(self, message: str = "681: Vector header NULL"):
        super().__init__(message)
