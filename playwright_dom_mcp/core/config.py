"""Configuration management for the browser DOM server."""

import os
from pathlib import Path
from typing import Literal, Optional
from pydantic import BaseModel, Field
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class BrowserConfig(BaseModel):
    """Browser-specific configuration."""

    headless: bool = Field(
        default=False,
        description="Run browser in headless mode"
    )
    timeout: int = Field(
        default=30000,
        description="Default timeout in milliseconds"
    )
    viewport_width: int = Field(
        default=1280,
        description="Browser viewport width"
    )
    viewport_height: int = Field(
        default=720,
        description="Browser viewport height"
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="Custom user agent string"
    )
    ignore_https_errors: bool = Field(
        default=True,
        description="Ignore HTTPS certificate errors"
    )
    slow_mo: int = Field(
        default=0,
        description="Slow down operations by specified milliseconds"
    )
    executable_path: Optional[str] = Field(
        default=None,
        description="Path to a custom Chromium executable"
    )

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """Create config from environment variables."""
        return cls(
            headless=_env_flag("BROWSER_HEADLESS", "false"),
            timeout=int(os.getenv("BROWSER_TIMEOUT", "30000")),
            viewport_width=int(os.getenv("BROWSER_VIEWPORT_WIDTH", "1280")),
            viewport_height=int(os.getenv("BROWSER_VIEWPORT_HEIGHT", "720")),
            user_agent=os.getenv("BROWSER_USER_AGENT"),
            ignore_https_errors=_env_flag("BROWSER_IGNORE_HTTPS_ERRORS", "true"),
            slow_mo=int(os.getenv("BROWSER_SLOW_MO", "0")),
            executable_path=os.getenv("BROWSER_EXECUTABLE_PATH"),
        )


class DOMConfig(BaseModel):
    """DOM extraction and serialization configuration."""

    id_attribute: str = Field(
        default="_id",
        description="Name of the synthetic attribute carrying node identifiers"
    )
    strict_pruning: bool = Field(
        default=True,
        description="Also prune FONT and BR elements"
    )
    output_format: Literal["json", "markup"] = Field(
        default="json",
        description="Default output format (json or markup)"
    )
    indent: str = Field(
        default="  ",
        description="Indent unit for markup output"
    )
    max_output_chars: int = Field(
        default=100_000,
        description="Payload size above which a warning is logged"
    )
    dump_path: Optional[str] = Field(
        default=None,
        description="File to write every extracted payload to"
    )

    @classmethod
    def from_env(cls) -> "DOMConfig":
        """Create config from environment variables."""
        return cls(
            id_attribute=os.getenv("DOM_ID_ATTRIBUTE", "_id"),
            strict_pruning=_env_flag("DOM_STRICT_PRUNING", "true"),
            output_format=os.getenv("DOM_OUTPUT_FORMAT", "json").lower(),
            max_output_chars=int(os.getenv("DOM_MAX_OUTPUT_CHARS", "100000")),
            dump_path=os.getenv("DOM_DUMP_PATH"),
        )


class ServerConfig(BaseModel):
    """MCP server configuration."""

    name: str = Field(
        default="playwright-dom-mcp",
        description="Server name advertised to clients"
    )
    version: str = Field(
        default="0.1.0",
        description="Server version advertised to clients"
    )

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Create config from environment variables."""
        return cls(
            name=os.getenv("MCP_SERVER_NAME", "playwright-dom-mcp"),
        )


class Config(BaseModel):
    """Main configuration container."""

    browser: BrowserConfig = Field(default_factory=BrowserConfig.from_env)
    dom: DOMConfig = Field(default_factory=DOMConfig.from_env)
    server: ServerConfig = Field(default_factory=ServerConfig.from_env)

    log_level: str = Field(
        default="INFO",
        description="Logging level"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path"
    )
    json_logs: bool = Field(
        default=False,
        description="Emit JSON formatted logs"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Create complete config from environment variables."""
        return cls(
            browser=BrowserConfig.from_env(),
            dom=DOMConfig.from_env(),
            server=ServerConfig.from_env(),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE"),
            json_logs=_env_flag("LOG_JSON", "false"),
        )

    def ensure_directories(self) -> None:
        """Ensure required directories exist."""
        if self.log_file:
            Path(self.log_file).parent.mkdir(parents=True, exist_ok=True)
        if self.dom.dump_path:
            Path(self.dom.dump_path).parent.mkdir(parents=True, exist_ok=True)
