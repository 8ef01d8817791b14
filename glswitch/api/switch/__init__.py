"""GL driver link switching."""

from .LIBRARY_DESCRIPTORS import LIBRARY_DESCRIPTORS
from .LibraryDescriptor import LibraryDescriptor
from .LinkSwitchError import LinkSwitchError
from .RelinkRecord import RelinkRecord
from .SUPPORTED_DRIVERS import SUPPORTED_DRIVERS
from .SwitchConfig import SwitchConfig
from .switch_links import switch_links
from .update_links import update_links

__all__ = [
    "LIBRARY_DESCRIPTORS",
    "SUPPORTED_DRIVERS",
    "LibraryDescriptor",
    "LinkSwitchError",
    "RelinkRecord",
    "SwitchConfig",
    "switch_links",
    "update_links",
]
