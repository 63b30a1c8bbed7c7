"""
Tests for configuration loading
"""

import pytest
from pydantic import ValidationError

from mcp_server_harvest.config import HARVEST_API_BASE_URL, HarvestConfig, load_config
from mcp_server_harvest.errors import ConfigurationError

REQUIRED = {"HARVEST_ACCESS_TOKEN": "token", "HARVEST_ACCOUNT_ID": "123456"}


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults(self):
        config = load_config(REQUIRED)

        assert config.access_token == "token"
        assert config.account_id == "123456"
        assert config.api_url == HARVEST_API_BASE_URL
        assert config.timeout == 30.0
        assert config.max_retries == 3
        assert config.validate_responses is True
        assert config.report_default_days == 30
        assert config.log_level == "info"
        assert config.transport == "stdio"
        assert config.port == 8080

    def test_overrides(self):
        config = load_config(
            {
                **REQUIRED,
                "HARVEST_API_BASE_URL": "http://localhost:9000/v2/",
                "HARVEST_TIMEOUT": "7.5",
                "HARVEST_VALIDATE_RESPONSES": "false",
                "HARVEST_REPORT_DEFAULT_DAYS": "0",
                "LOG_LEVEL": "DEBUG",
                "MCP_TRANSPORT": " Http ",
                "MCP_HOST": "0.0.0.0",
                "MCP_PORT": "9000",
            }
        )

        assert config.api_url == "http://localhost:9000/v2"
        assert config.timeout == 7.5
        assert config.validate_responses is False
        assert config.report_default_days == 0
        assert config.log_level == "debug"
        assert config.transport == "http"
        assert config.host == "0.0.0.0"
        assert config.port == 9000

    def test_blank_values_are_ignored(self):
        config = load_config({**REQUIRED, "HARVEST_TIMEOUT": "  ", "LOG_LEVEL": ""})

        assert config.timeout == 30.0
        assert config.log_level == "info"

    def test_missing_required(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"HARVEST_ACCOUNT_ID": "123456"})

        message = exc_info.value.message
        assert message.startswith("Environment validation failed:\n")
        assert "HARVEST_ACCESS_TOKEN: Field required" in message
        assert "HARVEST_ACCOUNT_ID" not in message

    def test_all_problems_are_reported(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"HARVEST_API_BASE_URL": "ftp://example.com", "MCP_TRANSPORT": "sse"})

        message = exc_info.value.message
        for name in ("HARVEST_ACCESS_TOKEN", "HARVEST_ACCOUNT_ID", "HARVEST_API_BASE_URL", "MCP_TRANSPORT"):
            assert f"{name}: " in message
        assert "must be an http(s) URL" in message

    @pytest.mark.parametrize("name,value", [("HARVEST_TIMEOUT", "0"), ("MCP_PORT", "70000"), ("HARVEST_MAX_RETRIES", "11")])
    def test_out_of_range(self, name, value):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({**REQUIRED, name: value})

        assert f"{name}: " in exc_info.value.message

    def test_dotenv_does_not_override_environment(self, tmp_path, monkeypatch):
        (tmp_path / ".env").write_text("HARVEST_ACCESS_TOKEN=from-file\nHARVEST_ACCOUNT_ID=999\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HARVEST_ACCESS_TOKEN", "from-env")
        # registered so the value loaded from .env is removed afterwards
        monkeypatch.setenv("HARVEST_ACCOUNT_ID", "placeholder")
        monkeypatch.delenv("HARVEST_ACCOUNT_ID")

        config = load_config()

        assert config.access_token == "from-env"
        assert config.account_id == "999"


class TestHarvestConfig:
    def test_is_frozen(self):
        config = HarvestConfig(access_token="token", account_id="1")

        with pytest.raises(ValidationError):
            config.timeout = 5

    def test_token_is_required(self):
        with pytest.raises(ValidationError):
            HarvestConfig(access_token="", account_id="1")
