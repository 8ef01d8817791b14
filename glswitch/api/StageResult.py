"""Outcome of a ``cmd_*`` function, filled in while its work runs."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field

Progress = Iterator[tuple[float, str]]


@dataclass
class StageResult:
    """What a command announces, how it reports progress, and what it produced.

    ``progress_callback`` does the work: it yields ``(fraction, message)``
    pairs and sets ``result``, ``output`` and ``success`` before returning.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Progress]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    def progress(self) -> Progress:
        return self.progress_callback(self)

    def drain(self) -> "StageResult":
        """Run the work without reporting progress."""
        for _ in self.progress():
            pass
        return self

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1
