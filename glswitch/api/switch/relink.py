"""Replace one system link."""

import os
from pathlib import Path

from .LinkSwitchError import LinkSwitchError
from .RelinkRecord import RelinkRecord


def relink(library: str, source: Path, resolved: Path, target: Path) -> RelinkRecord:
    """Point ``target`` at ``resolved``, removing whatever is there first.

    Removal is type-agnostic: regular files and symlinks (dangling ones
    included) are unlinked, an empty directory is removed, a non-empty
    directory makes the removal fail.

    Raises:
        LinkSwitchError: stage ``remove`` or ``link``.
    """
    replaced = False
    previous = None
    if os.path.lexists(target):
        replaced = True
        try:
            if target.is_symlink():
                previous = os.readlink(target)
                target.unlink()
            elif target.is_dir():
                target.rmdir()
            else:
                target.unlink()
        except OSError as e:
            raise LinkSwitchError("remove", target, e) from e

    try:
        target.symlink_to(resolved)
    except OSError as e:
        raise LinkSwitchError("link", resolved, e) from e

    return RelinkRecord(
        library=library,
        source=source,
        resolved=resolved,
        target=target,
        replaced=replaced,
        previous=previous,
    )
