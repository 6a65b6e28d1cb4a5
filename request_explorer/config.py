"""
Application configuration.

Handles loading and merging configuration from JSON files,
providing defaults and validation for the request explorer settings.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .logging_config import get_logger

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


DEFAULT_TIMEOUT_MS = 30000
DEFAULT_MAX_HISTORY_ITEMS = 50


@dataclass
class AppConfig:
    """Settings for request execution, history and export."""

    # Request execution
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    # History
    max_history_items: int = DEFAULT_MAX_HISTORY_ITEMS
    history_file: Optional[str] = None

    # Environments
    environment_file: Optional[str] = None
    active_environment: Optional[str] = None

    # Code export
    default_language: str = "curl"

    log_level: str = "WARNING"

    # Anything the loader does not recognise
    custom: Dict[str, Any] = field(default_factory=dict)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(AppConfig())

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> AppConfig:
        """
        Build the effective configuration.

        Args:
            custom_config: Overrides applied last
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)
        base_config["custom"] = {}

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        """Convert dictionary to AppConfig instance."""
        known_fields = {f.name for f in AppConfig.__dataclass_fields__.values()}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return AppConfig(**config_args)

    def save_config(self, config: AppConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}") from e

        logger.info("Saved configuration to %s", path)

    def validate_config(self, config: AppConfig) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation warnings
        """
        from .codegen import is_language_supported

        warnings = []

        if not isinstance(config.timeout_ms, int) or config.timeout_ms <= 0:
            warnings.append(f"Invalid timeout_ms: {config.timeout_ms}")

        if not isinstance(config.max_history_items, int) or config.max_history_items < 0:
            warnings.append(f"Invalid max_history_items: {config.max_history_items}")

        if not is_language_supported(config.default_language):
            warnings.append(f"Unsupported default_language: {config.default_language}")

        if config.log_level.upper() not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            warnings.append(f"Invalid log_level: {config.log_level}")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> AppConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)


EXAMPLE_CONFIG = {
    "timeout_ms": 10000,
    "max_history_items": 100,
    "history_file": "history.json",
    "environment_file": "environments.json",
    "active_environment": "staging",
    "default_language": "python",
}
