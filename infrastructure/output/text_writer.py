# infrastructure/output/text_writer.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List


def format_commands(commands: List[str]) -> str:
    return "".join(f"{command}\n\n" for command in commands)


@dataclass(frozen=True)
class CommandTextWriter:
    """
    Write commands to `<out_dir>/<source stem><suffix>`, each followed by a
    blank line.
    """

    out_dir: Path
    suffix: str = ".txt"

    def output_path(self, source: Path) -> Path:
        return self.out_dir / (source.stem + self.suffix)

    def write(self, source: Path, commands: List[str]) -> Path:
        target = self.output_path(source)
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(format_commands(commands))
        return target
