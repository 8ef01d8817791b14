"""Run update_links to completion."""

from .RelinkRecord import RelinkRecord
from .SwitchConfig import SwitchConfig
from .update_links import update_links


def switch_links(driver_name: str, config: SwitchConfig | None = None, staged: bool = False) -> list[RelinkRecord]:
    """Switch every GL link to ``driver_name`` and return the records.

    Raises:
        LinkSwitchError: On the first failure, as update_links does.
    """
    return list(update_links(driver_name, config, staged=staged))
