"""Utility to discover the glswitch home directory."""

import os
from pathlib import Path


def get_home_dir() -> Path:
    """Get glswitch home directory based on GLSWITCH_HOME or default to ~/.glswitch."""
    home_env = os.environ.get("GLSWITCH_HOME")
    if home_env:
        return Path(home_env).expanduser().absolute()
    return Path.home() / ".glswitch"
