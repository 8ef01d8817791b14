import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir


def configure_logging(home: Path | None = None, level: int = logging.INFO) -> None:
    """Configure glswitch logging.

    Attaches a rotating file handler writing ``glswitch.log`` under the
    glswitch home directory. Calling it again is a no-op. If the log file
    cannot be opened a NullHandler is attached instead, so logging never
    stops a link switch.

    Args:
        home: Directory for the log file. If None, derived from environment.
        level: Level for the ``glswitch`` logger.
    """
    root_logger = logging.getLogger("glswitch")
    if root_logger.handlers:
        return

    if home is None:
        home = get_home_dir()

    root_logger.setLevel(level)

    try:
        home.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            home / "glswitch.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=3,  # 5MB * 3
        )
    except OSError:
        root_logger.addHandler(logging.NullHandler())
        return

    file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root_logger.addHandler(file_handler)
