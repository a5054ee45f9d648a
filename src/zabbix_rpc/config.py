"""Centralized application configuration."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_DATA_DIR = Path.home() / ".local" / "zabbix-rpc"


class Config(BaseModel):
    """Application-wide configuration."""

    model_config = ConfigDict(frozen=True)

    data_dir: Path = Field(description="Base directory for all application data")
    url: str = Field(default="", description="JSON-RPC endpoint, e.g. https://zabbix.example.com/api_jsonrpc.php")
    user: str = Field(default="", description="Login name")
    password: str = Field(default="", repr=False, description="Login password")
    timeout: float = Field(default=10.0, gt=0, description="Per-call network timeout in seconds")

    @computed_field(description="Optional TOML configuration file")
    @property
    def config_path(self) -> Path:
        """Optional TOML configuration file."""
        return self.data_dir / "config.toml"

    @computed_field(description="Log file")
    @property
    def log_path(self) -> Path:
        """Log file."""
        return self.data_dir / "zabbix-rpc.log"

    @staticmethod
    def build(data_dir: Path | None = None, **overrides: str | float | None) -> "Config":
        """Build a Config from defaults, optional config.toml, and non-None overrides."""
        resolved_dir = data_dir if data_dir is not None else DEFAULT_DATA_DIR
        config_path = resolved_dir / "config.toml"

        kwargs: dict[str, Any] = {"data_dir": resolved_dir}
        if config_path.is_file():
            with config_path.open("rb") as f:
                toml_data = tomllib.load(f)
            for key in ("url", "user", "password"):
                if isinstance(toml_data.get(key), str):
                    kwargs[key] = toml_data[key]
            timeout = toml_data.get("timeout")
            if isinstance(timeout, int | float) and not isinstance(timeout, bool):
                kwargs["timeout"] = timeout

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return Config(**kwargs)
