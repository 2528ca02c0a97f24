"""Configuration persistence manager for the Pixify application.

This module handles loading and saving of user defaults to/from JSON files.
"""

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Optional, Tuple

from models import CONFIG_FILE, AppConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Handles loading and saving of application defaults."""

    def __init__(self, config_path: Path = CONFIG_FILE):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file (defaults to ~/.pixify_config.json)
        """
        self.config_path = Path(config_path)

    def load(self) -> AppConfig:
        """Load configuration from file, returning defaults if not found.

        Unknown keys are ignored and missing keys keep their defaults.

        Returns:
            AppConfig with loaded or default values
        """
        config = AppConfig()

        if not self.config_path.exists():
            return config

        try:
            with open(self.config_path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not load config file: %s", e)
            return config

        if not isinstance(data, dict):
            logger.warning("Ignoring config file %s: not a JSON object", self.config_path)
            return config

        for item in fields(AppConfig):
            if item.name in data:
                setattr(config, item.name, data[item.name])
        logger.info("Loaded configuration from %s", self.config_path)

        return config

    def save(self, config: AppConfig) -> Tuple[bool, Optional[str]]:
        """Save configuration to file.

        Args:
            config: AppConfig to save

        Returns:
            Tuple of (success: bool, error_message: Optional[str])
        """
        try:
            with open(self.config_path, "w") as f:
                json.dump(asdict(config), f, indent=2)
        except OSError as e:
            logger.error("Could not save config file: %s", e)
            return False, str(e)
        logger.debug("Saved configuration to %s", self.config_path)
        return True, None
