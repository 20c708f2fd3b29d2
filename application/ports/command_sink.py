# application/ports/command_sink.py
from __future__ import annotations

from pathlib import Path
from typing import List, Protocol


class CommandSinkPort(Protocol):
    def output_path(self, source: Path) -> Path:
        ...

    def write(self, source: Path, commands: List[str]) -> Path:
        ...
