"""Unit tests for glswitch.api.switch.cmd_set_link."""

import pytest

from glswitch.api.switch import cmd_set_link as cmd_set_link_module
from glswitch.api.switch.cmd_set_link import cmd_set_link
from glswitch.api.switch.LIBRARY_DESCRIPTORS import LIBRARY_DESCRIPTORS
from tests.conftest import install_previous_links, populate_vendor, run_cmd


class TestCmdSetLink:
    def test_success(self, patched_config, as_root):
        populate_vendor(patched_config)

        result = run_cmd(cmd_set_link, "nvidia")

        assert result.success is True
        assert result.output["errors"] == []
        assert result.output["driver"] == "nvidia"
        assert result.output["vendor_dir"] == str(patched_config.vendor_dir("nvidia"))
        assert result.output["staged"] is False
        assert len(result.output["links"]) == len(LIBRARY_DESCRIPTORS)
        assert "Switched 5 GL links to 'nvidia'" == result.result

    def test_announce_names_driver(self):
        result = cmd_set_link("nvidia")
        assert "nvidia" in result.announce
        assert result.success is False

    def test_progress_reports_each_link(self, patched_config, as_root):
        populate_vendor(patched_config)

        result = cmd_set_link("nvidia")
        progress = list(result.progress_callback(result))

        assert progress[-1][0] == pytest.approx(1.0)
        assert len(progress) == 2 + len(LIBRARY_DESCRIPTORS)

    def test_requires_root(self, patched_config, as_user, monkeypatch):
        populate_vendor(patched_config)
        called = []
        monkeypatch.setattr(cmd_set_link_module, "update_links", lambda *a, **k: called.append(a) or iter(()))

        result = run_cmd(cmd_set_link, "nvidia")

        assert result.success is False
        assert result.output["errors"] == ["You must be root to use this utility"]
        assert result.result == "You must be root to use this utility"
        assert called == []
        assert list(patched_config.extension_target_dir.iterdir()) == []

    def test_unsupported_driver(self, patched_config, as_root):
        populate_vendor(patched_config, driver="amd")

        result = run_cmd(cmd_set_link, "amd")

        assert result.success is False
        assert result.output["errors"] == ["Unsupported driver: amd"]
        assert result.output["links"] == []
        assert list(patched_config.extension_target_dir.iterdir()) == []

    def test_partial_failure_reports_completed_links(self, patched_config, as_root):
        install_previous_links(patched_config)
        populate_vendor(patched_config, count=2)

        result = run_cmd(cmd_set_link, "nvidia")

        assert result.success is False
        assert len(result.output["errors"]) == 1
        assert result.output["errors"][0].startswith("Cannot read link ")
        assert "libGLESv1_CM.so.1" in result.output["errors"][0]
        assert [entry["library"] for entry in result.output["links"]] == ["libGL.so.1", "libEGL.so.1"]

    def test_staged_failure_reports_no_links(self, patched_config, as_root):
        install_previous_links(patched_config)
        populate_vendor(patched_config, count=2)

        result = run_cmd(cmd_set_link, "nvidia", staged=True)

        assert result.success is False
        assert result.output["staged"] is True
        assert result.output["links"] == []

    def test_warns_when_replacing_regular_file(self, patched_config, as_root):
        populate_vendor(patched_config)
        (patched_config.default_target_dir / "libGL.so.1").write_text("copy")

        result = run_cmd(cmd_set_link, "nvidia")

        assert result.success is True
        assert result.output["warnings"] == [
            f"Replaced non-symlink entry at {patched_config.default_target_dir / 'libGL.so.1'}"
        ]

    def test_missing_vendor_dir(self, patched_config, as_root):
        result = run_cmd(cmd_set_link, "nvidia")

        assert result.success is False
        assert result.output["links"] == []
        assert "No such file or directory" in result.output["errors"][0]
