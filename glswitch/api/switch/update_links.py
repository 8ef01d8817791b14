"""Swap the GL links over to a vendor's driver directory."""

from collections.abc import Iterable, Iterator
from pathlib import Path

from ...utils.get_logger import get_logger
from .LIBRARY_DESCRIPTORS import LIBRARY_DESCRIPTORS
from .LibraryDescriptor import LibraryDescriptor
from .LinkSwitchError import LinkSwitchError
from .RelinkRecord import RelinkRecord
from .relink import relink
from .resolve_source import resolve_source
from .SwitchConfig import SwitchConfig


def update_links(
    driver_name: str,
    config: SwitchConfig | None = None,
    staged: bool = False,
) -> Iterator[RelinkRecord]:
    """Re-point every system GL link at the files of ``driver_name``.

    Libraries are processed in LIBRARY_DESCRIPTORS order and a record is
    yielded as soon as each link is in place. The first failure raises and
    nothing after it is attempted; links already switched stay switched.

    With ``staged`` every vendor source is resolved before any system link
    is touched, so a missing vendor file leaves the system unchanged.
    Removal and link failures are still fail-fast.

    This is a generator: nothing happens until it is iterated. Use
    switch_links() to run it to completion and get the records as a list.

    Args:
        driver_name: Vendor directory name under the vendor root, e.g. ``nvidia``.
        config: Directory layout, defaults to SwitchConfig.load().
        staged: Resolve all sources up front.

    Raises:
        LinkSwitchError: On the first resolve, remove or link failure.
    """
    logger = get_logger("switch")
    if config is None:
        config = SwitchConfig.load()

    resolutions: Iterable[tuple[LibraryDescriptor, Path]] = (
        (descriptor, resolve_source(config, driver_name, descriptor)) for descriptor in LIBRARY_DESCRIPTORS
    )

    try:
        if staged:
            resolutions = list(resolutions)
            logger.info("Resolved %d libraries for %s", len(resolutions), driver_name)

        for descriptor, resolved in resolutions:
            record = relink(
                descriptor.source_name,
                config.source_path(driver_name, descriptor),
                resolved,
                config.target_path(descriptor),
            )
            if record.replaced:
                logger.debug("Removed previous entry at %s (was %s)", record.target, record.previous)
            logger.info("Linked %s -> %s", record.target, record.resolved)
            yield record
    except LinkSwitchError as e:
        logger.error("%s", e)
        raise
