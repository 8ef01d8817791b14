"""Description of one GL-family library managed by the switcher."""

from dataclasses import dataclass
from typing import Literal

TargetDirKind = Literal["default", "extension"]


@dataclass(frozen=True)
class LibraryDescriptor:
    """Where a vendor library is read from and where it is linked to.

    ``source_name`` is the file name under the vendor directory,
    ``target_name`` the name of the system link, and ``target_dir_kind``
    selects which system directory holds that link.
    """

    source_name: str
    target_name: str
    target_dir_kind: TargetDirKind = "default"
