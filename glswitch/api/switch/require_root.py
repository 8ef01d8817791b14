"""Privilege check for commands that mutate system links."""

import os


def require_root() -> None:
    """Raise PermissionError unless running with effective uid 0."""
    if os.geteuid() != 0:
        raise PermissionError("You must be root to use this utility")
