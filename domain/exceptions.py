# domain/exceptions.py
from __future__ import annotations

from typing import Optional


class ScriptParseError(Exception):
    pass


class MalformedStatementError(ScriptParseError):
    """A recognized statement is missing a token it needs."""

    def __init__(self, message: str, line_no: Optional[int] = None, line: str = "") -> None:
        self.line_no = line_no
        self.line = line
        if line_no is not None:
            message = f"line {line_no}: {message}: {line!r}"
        super().__init__(message)
