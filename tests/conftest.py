"""Shared pytest configuration and fixtures for all tests."""

import logging
import os
from pathlib import Path

import pytest

from glswitch.api.switch.LIBRARY_DESCRIPTORS import LIBRARY_DESCRIPTORS
from glswitch.api.switch.SwitchConfig import SwitchConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of single API functions")
    config.addinivalue_line("markers", "integration: tests driving the CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Command Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with its work done."""
    return cmd_func(*args, **kwargs).drain()


# =============================================================================
# Filesystem Helpers
# =============================================================================


def make_system_config(root: Path) -> SwitchConfig:
    """Build a SwitchConfig whose directories all live under ``root``.

    Target directories are created; the vendor root is not.
    """
    config = SwitchConfig(
        vendor_root=root / "usr/lib/glx-provider",
        default_target_dir=root / "usr/lib",
        extension_target_dir=root / "usr/lib/xorg/modules/extensions",
    )
    config.default_target_dir.mkdir(parents=True, exist_ok=True)
    config.extension_target_dir.mkdir(parents=True, exist_ok=True)
    return config


def populate_vendor(config: SwitchConfig, driver: str = "nvidia", version: str = "525.89", count: int | None = None):
    """Install a fake driver: real files plus vendor-directory symlinks to them.

    Only the first ``count`` libraries (in processing order) get a vendor
    entry; all of them by default.

    Returns:
        List of real file paths, one per installed vendor entry.
    """
    descriptors = LIBRARY_DESCRIPTORS if count is None else LIBRARY_DESCRIPTORS[:count]
    real_dir = config.vendor_root.parent / f"{driver}-{version}"
    real_dir.mkdir(parents=True, exist_ok=True)
    vendor_dir = config.vendor_dir(driver)
    vendor_dir.mkdir(parents=True, exist_ok=True)

    real_files = []
    for descriptor in descriptors:
        real = real_dir / f"{descriptor.source_name}.{version}"
        real.write_text(f"{driver} {descriptor.source_name}\n")
        link = vendor_dir / descriptor.source_name
        if os.path.lexists(link):
            link.unlink()
        link.symlink_to(real)
        real_files.append(real.resolve())
    return real_files


def install_previous_links(config: SwitchConfig, name: str = "mesa") -> dict[Path, Path]:
    """Point every system link at files of a previously active driver.

    Returns:
        Mapping of system link path to the file it points at.
    """
    old_dir = config.vendor_root.parent / name
    old_dir.mkdir(parents=True, exist_ok=True)
    links = {}
    for descriptor in LIBRARY_DESCRIPTORS:
        old = old_dir / descriptor.source_name
        old.write_text(f"{name}\n")
        target = config.target_path(descriptor)
        target.symlink_to(old)
        links[target] = old.resolve()
    return links


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def glswitch_home(tmp_path_factory, monkeypatch) -> Path:
    """Keep log files out of the real home directory."""
    home = tmp_path_factory.mktemp("glswitch_home")
    monkeypatch.setenv("GLSWITCH_HOME", str(home))
    return home


@pytest.fixture
def system_config(tmp_path) -> SwitchConfig:
    """A SwitchConfig rooted in tmp_path with empty target directories."""
    return make_system_config(tmp_path)


@pytest.fixture
def patched_config(system_config, monkeypatch) -> SwitchConfig:
    """Patch SwitchConfig.load so commands use the temporary layout."""
    monkeypatch.setattr(SwitchConfig, "load", classmethod(lambda cls: system_config))
    return system_config


@pytest.fixture
def as_root(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 0)


@pytest.fixture
def as_user(monkeypatch):
    monkeypatch.setattr(os, "geteuid", lambda: 1000)


@pytest.fixture
def fresh_logging(monkeypatch):
    """Detach handlers from the glswitch logger so the next get_logger configures again."""
    monkeypatch.setattr(logging.getLogger("glswitch"), "handlers", [])
