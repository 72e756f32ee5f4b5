"""
Tests for the demo command.
"""

import yaml
from click.testing import CliRunner

from service_locator.presentation.cli.demo_command import main


class TestDemoCommand:
    """Test suite for the service-locator-demo command."""

    def test_demo_walkthrough(self):
        """Test that the demo resolves, disposes and removes the object."""
        result = CliRunner().invoke(main, ["--param", "Param123"])

        assert result.exit_code == 0, result.output
        assert "Created a new instance of ParamGreeter." in result.output
        assert "Check the param of the resolved object: Param123" in result.output
        assert "Object disposed." in result.output
        assert "Check if still registered: False" in result.output

    def test_demo_with_debug_log(self):
        """Test that --debug prints the registry debug log."""
        result = CliRunner().invoke(main, ["--debug"])

        assert result.exit_code == 0, result.output
        assert "[Registry Logger]" in result.output
        assert "Remove instance of type Greeter." in result.output

    def test_demo_with_config_dir(self, tmp_path):
        """Test that a configuration directory is accepted."""
        (tmp_path / "base.yaml").write_text(yaml.safe_dump({"logging": {"level": "ERROR"}}))

        result = CliRunner().invoke(main, ["--config-dir", str(tmp_path), "--param", "from-config"])

        assert result.exit_code == 0, result.output
        assert "from-config" in result.output

    def test_demo_rejects_missing_config_dir(self, tmp_path):
        """Test that click validates the configuration directory."""
        result = CliRunner().invoke(main, ["--config-dir", str(tmp_path / "missing")])

        assert result.exit_code != 0
