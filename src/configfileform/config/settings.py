"""Configuration management for configfileform.

Loads settings from an optional YAML configuration file with environment
variable overrides (``CONFIGFILEFORM_`` prefix). Supports .env files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("configfileform.yaml")


class FormConfig(BaseModel):
    input_type: str = Field(default="input", description="type attribute of generated inputs")
    line_break: str = Field(default="<br />", description="Markup for empty comment lines")
    label_separator: str = Field(default="&nbsp;", description="Markup between label and input")


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING")
    format: str = Field(default="%(name)s: %(message)s")
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for configfileform.

    Loads from YAML file and supports environment variable overrides.
    Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "CONFIGFILEFORM_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    form: FormConfig = Field(default_factory=FormConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from YAML + .env + environment variables.

    Priority: init values (YAML) > env vars > .env file > defaults
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    yaml_data = {}
    if path.exists():
        with open(path) as f:
            yaml_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.debug("Config file %s not found, using defaults + env vars", path)

    return Settings(**yaml_data)
