"""
Configuration management for Abeebus
"""

import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any

import yaml

from abeebus.core.exceptions import ConfigurationError, ValidationError
from abeebus.utils.validation import Validator

class Config:
    """Configuration management for Abeebus"""

    def __init__(self, config_file: Optional[Path] = None, debug: bool = False):
        """
        Initialize configuration with optional config file

        Args:
            config_file: Path to configuration file (YAML)
            debug: Enable debug mode
        """
        self.debug = debug

        # Default settings
        self._initialize_defaults()

        # Load configuration file if provided
        if config_file:
            self._load_config_file(config_file)

        # Load environment variables
        self._load_environment()

        # Validate configuration
        self._validate_configuration()

    def _initialize_defaults(self):
        """Initialize default configuration values"""
        # General settings
        self.monochrome = False

        # Lookup service
        self.api_base_url = "https://ipinfo.io"
        self.ipinfo_token = None
        self.request_timeout = 100

        # File scanning
        self.chunk_size = 16384
        self.spinner_interval = 0.1

        # Paths and directories
        self.config_dir = Path.home() / ".abeebus"
        self.log_file = self.config_dir / "abeebus_debug.log"

    def _load_config_file(self, config_file: Path):
        """
        Load configuration from YAML file

        Args:
            config_file: Path to configuration file

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        try:
            if not config_file.exists():
                raise ConfigurationError(f"Configuration file not found: {config_file}")

            with open(config_file, 'r') as f:
                config_data = yaml.safe_load(f)

            if not isinstance(config_data, dict):
                raise ConfigurationError("Configuration file must contain a YAML dictionary")

            self._update_from_dict(config_data)

        except ConfigurationError:
            raise
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading configuration file: {e}")

    def _load_environment(self):
        """Load configuration from environment variables"""
        self.ipinfo_token = os.environ.get("ABEEBUS_IPINFO_TOKEN", self.ipinfo_token)
        self.api_base_url = os.environ.get("ABEEBUS_API_URL", self.api_base_url)

        # Boolean settings
        if os.environ.get("ABEEBUS_DEBUG") in ("1", "true", "yes"):
            self.debug = True
        if os.environ.get("ABEEBUS_MONOCHROME") in ("1", "true", "yes"):
            self.monochrome = True

    def ensure_directories(self):
        """Ensure the directory holding the debug log exists"""
        try:
            self.log_file.parent.mkdir(exist_ok=True, parents=True)
        except OSError as e:
            logging.warning(f"Could not create directory: {e}")

    def _validate_configuration(self):
        """
        Validate configuration values

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            Validator.validate_url(self.api_base_url)
            Validator.validate_integer_range(self.chunk_size, "chunk_size", 64, 16 * 1024 * 1024)
            Validator.validate_positive_number(self.request_timeout, "request_timeout")
            Validator.validate_positive_number(self.spinner_interval, "spinner_interval")
        except ValidationError as e:
            raise ConfigurationError(str(e))

        self.api_base_url = self.api_base_url.rstrip("/")
        self.chunk_size = int(self.chunk_size)
        self.config_dir = Path(self.config_dir)
        self.log_file = Path(self.log_file)

    def _update_from_dict(self, config_data: Dict[str, Any]):
        """
        Update configuration from dictionary

        Args:
            config_data: Dictionary containing configuration values
        """
        for key, value in config_data.items():
            if hasattr(self, key) and not key.startswith('_'):
                setattr(self, key, value)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary

        Returns:
            Dictionary representation of configuration
        """
        result = {}
        for key, value in self.__dict__.items():
            if not key.startswith('_'):
                result[key] = str(value) if isinstance(value, Path) else value
        return result

    def save(self, config_file: Optional[Path] = None):
        """
        Save configuration to file

        Args:
            config_file: Path to save configuration to (default: ~/.abeebus/config.yaml)

        Raises:
            ConfigurationError: If the file cannot be written
        """
        if config_file is None:
            config_file = self.config_dir / "config.yaml"

        try:
            config_file.parent.mkdir(exist_ok=True, parents=True)

            with open(config_file, 'w') as f:
                yaml.dump(self.to_dict(), f, default_flow_style=False)

        except OSError as e:
            raise ConfigurationError(f"Error saving configuration: {e}")
