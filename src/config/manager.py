"""
Configuration Manager for the convolution benchmark.

Loads YAML settings and merges them over built-in defaults.
"""

import copy
import logging
import os

import yaml

logger = logging.getLogger(__name__)

DEFAULTS = {
    "filter": {
        "kernel": [[-1, -1, 1], [-1, 14, -1], [1, -1, -1]],
        "divisor": 4,
    },
    "engine": {
        "num_threads": None,
    },
    "sampler": {
        "window": 20,
    },
    "stream": {
        "image": None,
        "resolution": [640, 480],
        "frames": 120,
        "target_fps": 60,
        "mode": "threaded",
    },
    "logging": {
        "level": "INFO",
        "log_every": 30,
    },
}


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


class ConfigManager:
    """Manages application configuration."""

    def __init__(self, config_dir=None):
        """Initialize the configuration manager.

        Args:
            config_dir (str, optional): Directory containing config files.
                                       If None, uses the configs directory of the project.
        """
        if config_dir is None:
            self.config_dir = os.path.join(
                os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
                "configs",
            )
        else:
            self.config_dir = config_dir

        self.config = copy.deepcopy(DEFAULTS)

    def load_config(self, name="default", path=None):
        """Load a configuration file over the defaults.

        Args:
            name (str): Name of the config file inside config_dir, without extension.
            path (str, optional): Explicit file path, overrides name.

        Returns:
            dict: Merged configuration.
        """
        config_path = path or os.path.join(self.config_dir, f"{name}.yaml")

        if not os.path.exists(config_path):
            if path is not None:
                raise ConfigError(f"Configuration file not found: {config_path}")
            logger.warning(f"Configuration file not found: {config_path}, using defaults")
            return self.config

        try:
            with open(config_path, "r") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Error parsing {config_path}: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigError(f"{config_path} must contain a mapping of sections")

        for section, values in loaded.items():
            if section not in self.config:
                raise ConfigError(f"Unknown configuration section: {section}")
            if not isinstance(values, dict):
                raise ConfigError(f"Section {section} must be a mapping")
            self.config[section].update(values)

        logger.info(f"Loaded configuration from {config_path}")
        return self.config

    def get_config(self, section, key=None, default=None):
        """Get configuration value.

        Args:
            section (str): Section name within the config
            key (str, optional): Key within the section
            default: Default value if not found

        Returns:
            The configuration value or default if not found
        """
        section_data = self.config.get(section, {})

        if key is None:
            return section_data

        return section_data.get(key, default)

    def override(self, section, key, value):
        """Replace a value when it is not None, as command line flags do."""
        if value is not None:
            self.config[section][key] = value
