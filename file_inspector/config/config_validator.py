"""Configuration validation for file inspector."""

from typing import Dict, Any


class ConfigValidator:
    """Validates file inspector configuration."""

    ALLOWED_KEYS = {
        'display': {
            'units': str,
            'show_name': bool,
            'show_symlink': bool,
            'follow_symlinks': bool,
            'output': str,
            'platform_attributes': bool,
        },
        'logging': {
            'level': str,
            'file': str,
        },
    }
    UNIT_STYLES = ['long', 'short']
    OUTPUT_FORMATS = ['text', 'json']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        unknown_sections = [section for section in config if section not in self.ALLOWED_KEYS]
        if unknown_sections:
            raise ValueError(f"Unknown configuration sections: {unknown_sections}")

        for section, values in config.items():
            self._validate_section(section, values)

        display = config.get('display') or {}
        if 'units' in display and display['units'] not in self.UNIT_STYLES:
            raise ValueError(f"Invalid display.units: {display['units']} (expected one of {self.UNIT_STYLES})")
        if 'output' in display and display['output'] not in self.OUTPUT_FORMATS:
            raise ValueError(f"Invalid display.output: {display['output']} (expected one of {self.OUTPUT_FORMATS})")

        logging_config = config.get('logging') or {}
        level = logging_config.get('level')
        if level is not None and level.upper() not in self.LOG_LEVELS:
            raise ValueError(f"Invalid logging.level: {level}")

    def _validate_section(self, section: str, values: Any) -> None:
        """Validate key names and value types of one section.

        Raises:
            ValueError: If the section is not a mapping or has bad keys.
        """
        if values is None:
            return
        if not isinstance(values, dict):
            raise ValueError(f"Configuration section '{section}' must be a dictionary")

        allowed = self.ALLOWED_KEYS[section]
        unknown_keys = [key for key in values if key not in allowed]
        if unknown_keys:
            raise ValueError(f"Unknown keys in '{section}': {unknown_keys}")

        for key, value in values.items():
            # null leaves the default in place
            if value is None:
                continue
            if not isinstance(value, allowed[key]):
                raise ValueError(
                    f"Configuration value {section}.{key} must be of type {allowed[key].__name__}"
                )
