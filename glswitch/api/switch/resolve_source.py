"""Resolve a vendor library to its canonical real path."""

import errno
import os
from pathlib import Path

from .LibraryDescriptor import LibraryDescriptor
from .LinkSwitchError import LinkSwitchError
from .SwitchConfig import SwitchConfig


def resolve_source(config: SwitchConfig, driver_name: str, descriptor: LibraryDescriptor) -> Path:
    """Follow every symlink under the vendor path and return the real file.

    Every component must exist, so a missing vendor directory, a missing
    library or a dangling chain all fail here.

    Raises:
        LinkSwitchError: stage ``resolve``.
    """
    source = config.source_path(driver_name, descriptor)
    try:
        return source.resolve(strict=True)
    except OSError as e:
        raise LinkSwitchError("resolve", source, e) from e
    except RuntimeError as e:
        # Symlink loops surface as RuntimeError on older interpreters
        loop = OSError(errno.ELOOP, os.strerror(errno.ELOOP), str(source))
        raise LinkSwitchError("resolve", source, loop) from e
