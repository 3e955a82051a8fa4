"""Configuration management for the file inspector."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator


class ConfigManager:
    """Manages configuration loading and validation for file inspection.

    There are no default config locations: a file is read only when a path
    is given explicitly.
    """

    DEFAULTS = {
        'display': {
            'units': 'long',
            'show_name': True,
            'show_symlink': True,
            'follow_symlinks': False,
            'output': 'text',
            'platform_attributes': False
        },
        'logging': {
            'level': 'WARNING',
            'file': None
        }
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to a YAML config file.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file, falling back to defaults.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If the given config file does not exist.
            ValueError: If config file is invalid.
        """
        self.config_data = {}

        if self.config_path:
            if not os.path.exists(self.config_path):
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self.config_data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in config file {self.config_path}: {e}")
            except OSError as e:
                raise ValueError(f"Error reading config file {self.config_path}: {e}")

            self.validator.validate(self.config_data)

        self._set_defaults()

        return self.config_data

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        for section, section_defaults in self.DEFAULTS.items():
            if not self.config_data.get(section):
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if self.config_data[section].get(key) is None:
                    self.config_data[section][key] = value

    def get_display_config(self) -> Dict[str, Any]:
        """Get display configuration.

        Returns:
            Display configuration dictionary.
        """
        return self.config_data.get('display', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})
