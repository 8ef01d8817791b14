"""Record of one system link that was re-pointed."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class RelinkRecord:
    library: str
    source: Path
    resolved: Path
    target: Path
    replaced: bool
    previous: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "library": self.library,
            "source": str(self.source),
            "resolved": str(self.resolved),
            "target": str(self.target),
            "replaced": self.replaced,
            "previous": self.previous,
        }
