# application/ports/feature_source.py
from __future__ import annotations

from pathlib import Path
from typing import List, Protocol


class FeatureSourcePort(Protocol):
    def exists(self) -> bool:
        ...

    def list_files(self) -> List[Path]:
        ...

    def read(self, path: Path) -> str:
        ...
