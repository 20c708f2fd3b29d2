from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional


@dataclass(frozen=True)
class FileOutcome:
    source: Path
    ok: bool
    output: Optional[Path] = None
    command_count: int = 0
    error_message: Optional[str] = None


@dataclass(frozen=True)
class ConversionReport:
    outcomes: List[FileOutcome] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return all(o.ok for o in self.outcomes)

    @property
    def failed(self) -> List[FileOutcome]:
        return [o for o in self.outcomes if not o.ok]

    @property
    def command_count(self) -> int:
        return sum(o.command_count for o in self.outcomes)
