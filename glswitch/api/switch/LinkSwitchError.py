"""Hard failure while switching links."""

from pathlib import Path
from typing import Literal

Stage = Literal["resolve", "remove", "link"]


class LinkSwitchError(Exception):
    """A filesystem call failed and the run must stop.

    Attributes:
        stage: Which step failed: resolving the vendor source, removing the
            old system entry, or creating the new link.
        path: Path named in the diagnostic.
        error: The underlying OSError.
    """

    _TEMPLATES = {
        "resolve": "Cannot read link {path}: {reason}",
        "remove": "Unable to remove {path}: {reason}",
        "link": "Unable to link {path}: {reason}",
    }

    def __init__(self, stage: Stage, path: Path, error: OSError):
        self.stage = stage
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(self._TEMPLATES[stage].format(path=path, reason=reason))
