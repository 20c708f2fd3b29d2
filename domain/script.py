# domain/script.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class ScriptLine:
    index: int
    text: str

    @property
    def line_no(self) -> int:
        return self.index + 1


def split_script(content: str) -> List[ScriptLine]:
    """Split raw feature text into trimmed lines, keeping their position."""
    return [ScriptLine(index=i, text=raw.strip()) for i, raw in enumerate(content.split("\n"))]
