"""Errors that cross the conversion boundary."""

from __future__ import annotations


class SlnxError(Exception):
    def __init__(self, message: str, code: str = "UNKNOWN"):
        self.message = message
        self.code = code
        super().__init__(message)


class InputUnreadable(SlnxError):
    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot read solution file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="INPUT_UNREADABLE")
        self.path = path


class InputNotFound(SlnxError):
    def __init__(self, message: str):
        super().__init__(message, code="INPUT_NOT_FOUND")


class OutputUnwritable(SlnxError):
    def __init__(self, path: str, reason: str = ""):
        message = f"Cannot write .slnx file: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message, code="OUTPUT_UNWRITABLE")
        self.path = path
