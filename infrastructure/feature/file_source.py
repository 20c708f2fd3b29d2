"""Find and read feature files under a base directory."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional


class FeatureSourceError(Exception):
    pass


@dataclass(frozen=True)
class FeatureFileSource:
    """Feature files matching `pattern` directly inside `base_dir`."""

    base_dir: Path
    pattern: str = "*.feature"

    def __str__(self) -> str:
        return str(self.base_dir)

    def exists(self) -> bool:
        return self.base_dir.is_dir()

    def list_files(self) -> List[Path]:
        if not self.exists():
            return []
        return sorted(p for p in self.base_dir.glob(self.pattern) if p.is_file())

    def find_by_id(self, feature_id: str) -> Optional[Path]:
        """
        Find a feature file by its stem.

        Args:
            feature_id: File name without extension (e.g., "widgets")

        Returns:
            The Path if found, otherwise None.
        """
        for path in self.list_files():
            if path.stem == feature_id:
                return path
        return None

    def read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise FeatureSourceError(f"Unable to read feature file {path}: {exc}") from exc
