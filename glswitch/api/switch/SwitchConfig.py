"""Filesystem locations used by the switcher."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .LibraryDescriptor import LibraryDescriptor, TargetDirKind

VENDOR_ROOT = Path("/usr/lib/glx-provider")
DEFAULT_TARGET_DIR = Path("/usr/lib")
EXTENSION_TARGET_DIR = Path("/usr/lib/xorg/modules/extensions")


class SwitchConfig(BaseModel):
    """Fixed directory layout for vendor drivers and system links."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    vendor_root: Path = Field(VENDOR_ROOT, description="Directory holding one subdirectory per vendor")
    default_target_dir: Path = Field(DEFAULT_TARGET_DIR, description="Install location for the GL libraries")
    extension_target_dir: Path = Field(EXTENSION_TARGET_DIR, description="Install location for the GLX module")

    @classmethod
    def load(cls) -> "SwitchConfig":
        """Return the built-in layout. Nothing is read from disk or the environment."""
        return cls()

    def vendor_dir(self, driver_name: str) -> Path:
        return self.vendor_root / driver_name

    def target_dir(self, kind: TargetDirKind) -> Path:
        if kind == "extension":
            return self.extension_target_dir
        return self.default_target_dir

    def source_path(self, driver_name: str, descriptor: LibraryDescriptor) -> Path:
        """Vendor-side path for ``descriptor`` (not resolved)."""
        return self.vendor_dir(driver_name) / descriptor.source_name

    def target_path(self, descriptor: LibraryDescriptor) -> Path:
        """System link path for ``descriptor``."""
        return self.target_dir(descriptor.target_dir_kind) / descriptor.target_name
