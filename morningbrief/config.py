"""
Configuration management for Morning Brief.

This module handles loading and accessing configuration values from config.yaml.
It provides a centralized way to manage Notion, database and logging settings
without changing code.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
import logging


class ConfigManager:
    """
    Manages configuration loading and access for Morning Brief.
    """

    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            if not self.config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

            with open(self.config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}

            logging.info(f"Configuration loaded from {self.config_path}")

        except (OSError, yaml.YAMLError) as e:
            logging.error(f"Failed to load configuration: {e}")
            # Fall back to default configuration
            self._config = self._get_default_config()

    def _get_default_config(self) -> Dict[str, Any]:
        """Get default configuration values as fallback."""
        return {
            "notion": {
                "api_base": "https://api.notion.com/v1",
                "version": "2022-06-28",
                "api_key_env": "NOTION_API_KEY",
                "root_page_id": "75b22e80-f388-41e8-a02c-2a88d879df5b",
                "timeout": 30.0,
                "page_size": 100
            },
            "database": {
                "filename": "morningbrief.db"
            },
            "paths": {
                "log_file": "morningbrief.log"
            },
            "logging": {
                "level": "INFO",
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to the configuration value (e.g., "notion.version")
            default: Default value if key is not found

        Returns:
            The configuration value

        Examples:
            config.get("notion.root_page_id")
            config.get("database.filename")  # Returns "morningbrief.db"
        """
        keys = key_path.split('.')
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def get_section(self, section: str) -> Dict[str, Any]:
        """
        Get an entire configuration section.

        Args:
            section: Name of the configuration section

        Returns:
            Dictionary containing the section configuration
        """
        return self._config.get(section, {})

    def reload(self) -> None:
        """Reload configuration from file."""
        self._load_config()

    # Convenience properties for commonly used values

    @property
    def notion_api_base(self) -> str:
        """Get the Notion REST API base URL."""
        return self.get("notion.api_base", "https://api.notion.com/v1")

    @property
    def notion_version(self) -> str:
        """Get the Notion-Version header value."""
        return self.get("notion.version", "2022-06-28")

    @property
    def notion_api_key_env(self) -> str:
        """Get the name of the environment variable holding the API key."""
        return self.get("notion.api_key_env", "NOTION_API_KEY")

    @property
    def notion_root_page_id(self) -> Optional[str]:
        """Get the id of the page that holds the monthly pages."""
        return self.get("notion.root_page_id")

    @property
    def notion_timeout(self) -> float:
        """Get Notion request timeout."""
        return self.get("notion.timeout", 30.0)

    @property
    def notion_page_size(self) -> int:
        """Get page size used when listing children."""
        return self.get("notion.page_size", 100)

    @property
    def database_filename(self) -> str:
        """Get database filename."""
        return self.get("database.filename", "morningbrief.db")

    @property
    def log_filename(self) -> str:
        """Get log file name."""
        return self.get("paths.log_file", "morningbrief.log")


# Global configuration instance
config = ConfigManager()


def get_config() -> ConfigManager:
    """
    Get the global configuration instance.

    Returns:
        The global ConfigManager instance
    """
    return config
