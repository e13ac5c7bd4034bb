"""Tests for environment-driven configuration and the CLI."""

import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from playwright_dom_mcp.cli.runner import cli
from playwright_dom_mcp.core.config import BrowserConfig, Config, DOMConfig


class TestConfig:
    def test_dom_defaults(self, monkeypatch):
        for name in ("DOM_ID_ATTRIBUTE", "DOM_STRICT_PRUNING", "DOM_OUTPUT_FORMAT",
                     "DOM_MAX_OUTPUT_CHARS", "DOM_DUMP_PATH"):
            monkeypatch.delenv(name, raising=False)

        config = DOMConfig.from_env()

        assert config.id_attribute == "_id"
        assert config.strict_pruning is True
        assert config.output_format == "json"
        assert config.indent == "  "
        assert config.max_output_chars == 100_000
        assert config.dump_path is None

    def test_dom_from_env(self, monkeypatch):
        monkeypatch.setenv("DOM_STRICT_PRUNING", "false")
        monkeypatch.setenv("DOM_OUTPUT_FORMAT", "MARKUP")
        monkeypatch.setenv("DOM_MAX_OUTPUT_CHARS", "500")
        monkeypatch.setenv("DOM_DUMP_PATH", "/tmp/dom")

        config = DOMConfig.from_env()

        assert config.strict_pruning is False
        assert config.output_format == "markup"
        assert config.max_output_chars == 500
        assert config.dump_path == "/tmp/dom"

    def test_unknown_output_format_rejected_at_load(self, monkeypatch):
        monkeypatch.setenv("DOM_OUTPUT_FORMAT", "yaml")
        with pytest.raises(ValidationError, match="output_format"):
            DOMConfig.from_env()

    def test_browser_from_env(self, monkeypatch):
        monkeypatch.setenv("BROWSER_HEADLESS", "true")
        monkeypatch.setenv("BROWSER_TIMEOUT", "5000")
        monkeypatch.setenv("BROWSER_EXECUTABLE_PATH", "/opt/chromium")

        config = BrowserConfig.from_env()

        assert config.headless is True
        assert config.timeout == 5000
        assert config.executable_path == "/opt/chromium"

    def test_logging_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("LOG_JSON", "true")

        config = Config.from_env()

        assert config.log_level == "DEBUG"
        assert config.json_logs is True

    def test_ensure_directories(self, tmp_path):
        config = Config(
            browser=BrowserConfig(),
            dom=DOMConfig(dump_path=str(tmp_path / "dumps" / "dom")),
            log_file=str(tmp_path / "logs" / "server.log"),
        )
        config.ensure_directories()
        assert (tmp_path / "dumps").is_dir()
        assert (tmp_path / "logs").is_dir()


class TestCli:
    def test_info(self, monkeypatch):
        monkeypatch.setenv("DOM_OUTPUT_FORMAT", "markup")
        result = CliRunner().invoke(cli, ["info"])
        assert result.exit_code == 0
        assert "Output Format" in result.output
        assert "markup" in result.output

    def test_extract_rejects_unknown_format(self):
        result = CliRunner().invoke(cli, ["extract", "https://example.com", "--format", "yaml"])
        assert result.exit_code != 0
        assert "yaml" in result.output
