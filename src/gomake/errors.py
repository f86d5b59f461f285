from __future__ import annotations

from typing import Any


class GomakeError(RuntimeError):
    """Fatal startup error with structured context.

    Keyword fields are rendered as ``key='value'`` after the message, and a
    chained cause (``raise ... from exc``) is appended last.
    """

    def __init__(self, message: str, **fields: Any):
        super().__init__(message)
        self.message = message
        self.fields: dict[str, Any] = fields

    def __str__(self) -> str:
        text = self.message
        if self.fields:
            context = " ".join(f"{key}={value!r}" for key, value in self.fields.items())
            text = f"{text} [{context}]"
        if self.__cause__ is not None:
            text = f"{text}: {self.__cause__}"
        return text


class MissingArgumentValueError(GomakeError):
    pass


class InvalidLogLevelError(GomakeError):
    pass
