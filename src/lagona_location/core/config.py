"""
Configuration module for the LAGONA location utilities.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # Data store
        if os.getenv("SUPABASE_URL"):
            self.config.setdefault("store", {})["url"] = os.getenv("SUPABASE_URL")

        if os.getenv("SUPABASE_KEY"):
            self.config.setdefault("store", {})["api_key"] = os.getenv("SUPABASE_KEY")

        # Logging
        if os.getenv("LOG_LEVEL"):
            self.config.setdefault("logging", {})["level"] = os.getenv("LOG_LEVEL")

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate required keys and location defaults."""
        required_config = {
            "store": ["url", "api_key"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if not self.config[section].get(key):
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        if self.default_radius_km <= 0:
            raise ValueError(
                f"location.default_radius_km must be positive, got {self.default_radius_km}"
            )

        if self.default_radius_km > self.max_radius_km:
            raise ValueError(
                f"location.default_radius_km ({self.default_radius_km}) exceeds "
                f"location.max_radius_km ({self.max_radius_km})"
            )

        # Raises ValueError for unknown zones
        DateUtils.parse_timezone(self.timezone)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'store.url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def store_url(self) -> str:
        """Get data store (PostgREST) base URL."""
        return self.get("store.url", "")

    @property
    def store_api_key(self) -> str:
        """Get data store API key."""
        return self.get("store.api_key", "")

    @property
    def store_timeout(self) -> int:
        """Get store request timeout in seconds."""
        return self.get("store.timeout", 30)

    @property
    def store_max_retries(self) -> int:
        """Get maximum store retry attempts."""
        return self.get("store.max_retries", 3)

    @property
    def store_schema(self) -> str:
        """Get database schema exposed by the store."""
        return self.get("store.schema", "public")

    @property
    def default_radius_km(self) -> float:
        """Get default territory radius."""
        return float(self.get("location.default_radius_km", constants.DEFAULT_TERRITORY_RADIUS_KM))

    @property
    def max_radius_km(self) -> float:
        """Get maximum territory radius."""
        return float(self.get("location.max_radius_km", constants.MAX_TERRITORY_RADIUS_KM))

    @property
    def default_accuracy_meters(self) -> float:
        """Get default location accuracy."""
        return float(self.get("location.default_accuracy_meters", constants.DEFAULT_ACCURACY_METERS))

    @property
    def high_accuracy_threshold_m(self) -> float:
        """Get accuracy threshold for the 'high' tier."""
        return float(
            self.get("location.high_accuracy_threshold_m", constants.HIGH_ACCURACY_THRESHOLD_METERS)
        )

    @property
    def timezone(self) -> str:
        """Get display timezone."""
        return self.get("processing.timezone", "Asia/Manila")

    @property
    def log_level(self) -> str:
        """Get logging level."""
        return self.get("logging.level", "INFO")

    @property
    def log_file(self) -> Optional[str]:
        """Get log file path."""
        return self.get("logging.file")

    def __repr__(self) -> str:
        return f"Config(file={self.config_file}, env={self.get('environment')})"
