"""Exceptions raised while loading and analyzing dfx.json."""

from __future__ import annotations

import os


class CounterError(Exception):
    """Base class for every failure the counter reports."""


class IoError(CounterError):
    """The project file could not be opened or read."""

    def __init__(self, path: str | os.PathLike, reason: str) -> None:
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"could not read {self.path}: {reason}")


class ParseError(CounterError):
    """The project file is not valid JSON."""

    def __init__(
        self,
        path: str | os.PathLike,
        message: str,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.path = os.fspath(path)
        self.message = message
        self.line = line
        self.column = column
        where = self.path
        if line is not None:
            where += f":{line}"
            if column is not None:
                where += f":{column}"
        super().__init__(f"failed to parse {where}: {message}")


class SchemaError(CounterError):
    """The document parsed but has the wrong shape at *key_path*."""

    def __init__(self, key_path: str, message: str) -> None:
        self.key_path = key_path
        self.message = message
        super().__init__(f"{key_path}: {message}")
