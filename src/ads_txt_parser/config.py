"""Configuration management for ads-txt-parser settings."""

import logging
import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from ads_txt_parser import __version__
from ads_txt_parser.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ParserSettings(BaseModel):
    """Settings for fetching and reporting ads.txt files."""

    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")
    user_agent: str = Field(default=f"ads-txt-parser/{__version__}")
    check_content_type: bool = Field(default=True, description="Require text/plain responses")
    default_scheme: Literal["http", "https"] = "https"
    default_format: Literal["rich", "plain", "json"] | None = None


class ConfigManager:
    """Manages settings stored in YAML format."""

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("ADS_TXT_PARSER_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.ads-txt-parser
                config_dir = Path.home() / ".ads-txt-parser"

        self.config_dir = config_dir
        self.config_file = config_dir / "config.yaml"

    def _load_raw(self) -> dict[str, Any]:
        """Load the YAML mapping, empty when missing or unreadable."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not a mapping", self.config_file)
            return {}
        return data

    def load(self) -> ParserSettings:
        """Load settings, falling back to defaults for missing keys."""
        try:
            return ParserSettings(**self._load_raw())
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {self.config_file}: {e}") from e

    def save(self, settings: ParserSettings) -> None:
        """Write settings to the YAML file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            yaml.safe_dump(settings.model_dump(), f)
