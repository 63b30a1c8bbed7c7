"""Configuration for the Harvest MCP server, read from the environment."""

import os
import platform
from typing import Literal, Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mcp_server_harvest import __version__
from mcp_server_harvest.errors import ConfigurationError

HARVEST_API_BASE_URL = "https://api.harvestapp.com/v2"
USER_AGENT = f"harvest-mcp-server/{__version__} (Python {platform.python_version()})"

# env variable -> config field
ENV_FIELDS = {
    "HARVEST_ACCESS_TOKEN": "access_token",
    "HARVEST_ACCOUNT_ID": "account_id",
    "HARVEST_API_BASE_URL": "api_url",
    "HARVEST_TIMEOUT": "timeout",
    "HARVEST_MAX_RETRIES": "max_retries",
    "HARVEST_VALIDATE_RESPONSES": "validate_responses",
    "HARVEST_REPORT_DEFAULT_DAYS": "report_default_days",
    "LOG_LEVEL": "log_level",
    "MCP_TRANSPORT": "transport",
    "MCP_HOST": "host",
    "MCP_PORT": "port",
}


class HarvestConfig(BaseModel):
    """Configuration for the Harvest connection and the MCP transport."""

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(..., min_length=1, description="Harvest personal access token")
    account_id: str = Field(..., min_length=1, description="Harvest account ID")
    api_url: str = Field(HARVEST_API_BASE_URL, description="Harvest API base URL (with version)")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_retries: int = Field(3, ge=0, le=10, description="Declared for compatibility; requests are never retried")
    validate_responses: bool = Field(True, description="Validate upstream bodies against the record schemas")
    report_default_days: int = Field(
        30, ge=0, description="Trailing window used when a report omits from/to; 0 requires an explicit range"
    )
    log_level: Literal["error", "warn", "warning", "info", "debug"] = "info"
    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = Field(8080, ge=1, le=65535)
    user_agent: str = USER_AGENT

    @field_validator("api_url")
    @classmethod
    def _check_api_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("must be an http(s) URL")
        return value.rstrip("/")

    @field_validator("log_level", "transport", mode="before")
    @classmethod
    def _lowercase(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


def load_config(environ: Optional[Mapping[str, str]] = None, *, use_dotenv: bool = True) -> HarvestConfig:
    """Build the configuration from environment variables.

    A ``.env`` file is loaded first (without overriding variables that are
    already set) unless ``use_dotenv`` is false or an explicit ``environ``
    mapping is given.
    """
    if environ is None:
        if use_dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values = {}
    for env_name, field_name in ENV_FIELDS.items():
        raw = environ.get(env_name)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()

    try:
        return HarvestConfig.model_validate(values)
    except ValidationError as e:
        field_to_env = {field: env for env, field in ENV_FIELDS.items()}
        problems = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else ""
            problems.append(f"{field_to_env.get(field, field)}: {error['msg']}")
        raise ConfigurationError(
            "Environment validation failed:\n"
            + "\n".join(problems)
            + "\n\nPlease check your .env file or environment variables."
        ) from e
