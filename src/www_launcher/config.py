"""Configuration management for www-launcher."""

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from .environment import LEGACY_OPENSSL_ENV
from .runner import TaskCommand

logger = logging.getLogger(__name__)


class LauncherConfig(BaseSettings):
    """Launcher configuration.
    
    Defaults start ``npm run start`` in ``www`` with the legacy OpenSSL
    provider enabled.
    """
    
    # Explicit install directory, replaces self-location when set
    base_dir: Path | None = None
    
    # Application directory, relative to the base directory
    target_dir: str = "www"
    
    command: TaskCommand = Field(default_factory=TaskCommand)
    strategy: Literal["spawn", "exec"] = "spawn"
    
    legacy_openssl: bool = True
    
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    
    class Config:
        env_prefix = "WWW_LAUNCHER_"
        env_nested_delimiter = "__"
    
    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
    
    def overlay(self) -> dict[str, str]:
        """Environment variables to set on top of the inherited environment."""
        if not self.legacy_openssl:
            return {}
        return dict(LEGACY_OPENSSL_ENV)


class ConfigManager:
    """Loads launcher configuration from the install directory."""
    
    CONFIG_NAME = "launcher.json"
    
    def __init__(self):
        self._config: LauncherConfig | None = None
        self._config_path: Path | None = None
    
    @property
    def config_path(self) -> Path | None:
        return self._config_path
    
    def load_config(self, base_dir: Path) -> LauncherConfig:
        """Load ``launcher.json`` from ``base_dir``, or defaults if there is none."""
        if self._config is not None:
            return self._config
        
        config_file = base_dir / self.CONFIG_NAME
        self._config_path = config_file
        
        if config_file.exists():
            try:
                with open(config_file, "r", encoding="utf-8") as f:
                    data = json.load(f)
                self._config = LauncherConfig(**data)
                logger.debug(f"Loaded configuration from {config_file}")
                return self._config
            except (OSError, ValueError, TypeError, ValidationError) as e:
                logger.warning(f"Ignoring invalid config file {config_file}: {e}")
        
        self._config = LauncherConfig()
        return self._config
    
    def save_config(self, config: LauncherConfig, path: Path | None = None) -> None:
        """Save configuration to file."""
        self._config = config
        target_path = path or self._config_path
        if target_path is None:
            raise ValueError("No configuration path to save to")
        self._config_path = target_path
        target_path.parent.mkdir(parents=True, exist_ok=True)
        
        with open(target_path, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(mode="json", exclude={"base_dir"}), f, indent=2, ensure_ascii=False)
