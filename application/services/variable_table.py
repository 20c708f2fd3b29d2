# application/services/variable_table.py
from __future__ import annotations

from typing import Dict, Optional


class VariableTable:
    """
    Variables defined with `def`, kept for the whole file.

    substitute() replaces every literal occurrence of a name, so a name that
    is part of a longer word is replaced too.
    """

    def __init__(self) -> None:
        self._values: Dict[str, str] = {}

    def define(self, name: str, value: str) -> None:
        self._values[name] = value

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def substitute(self, line: str) -> str:
        out = line
        for name, value in self._values.items():
            out = out.replace(name, value)
        return out

