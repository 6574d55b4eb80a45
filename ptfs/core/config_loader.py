"""
ptfs Configuration Loader

Configuration management for ptfs backends:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any, Optional, get_args
import threading

from ptfs.exceptions import ConfigurationError, ConfigValidationError
from ptfs.logger import Logger, LogLevel


@dataclass
class MemFSConfig:
    """In-memory filesystem settings."""
    temp_dir: str = "/tmp"
    max_symlink_depth: int = 40
    rename_overwrite: bool = True
    support_ownership: bool = True
    default_uid: int = 0
    default_gid: int = 0
    default_file_mode: int = 0o644
    default_dir_mode: int = 0o755


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings. Sections are plain dataclasses, so a
    backend can take its section by value and be unaffected by later
    runtime changes.
    """
    memfs: MemFSConfig = field(default_factory=MemFSConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _check_types(section_name: str, section: Any) -> None:
    """Check every field of a section against its annotation."""
    for f in fields(section):
        value = getattr(section, f.name)
        args = get_args(f.type)
        if value is None and type(None) in args:
            continue
        expected = next((a for a in args if a is not type(None)), f.type)
        # bool is an int subclass
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            key = f"{section_name}.{f.name}"
            raise ConfigValidationError(
                f"{key} must be {expected.__name__}, got {type(value).__name__}",
                key=key
            )


def validate_config(config: Config) -> None:
    """
    Check value types and ranges.

    Raises:
        ConfigValidationError: If any value has the wrong type or is out of range
    """
    for f in fields(config):
        _check_types(f.name, getattr(config, f.name))

    memfs = config.memfs
    if not memfs.temp_dir.startswith("/"):
        raise ConfigValidationError(
            "temp_dir must be an absolute path", key="memfs.temp_dir"
        )
    if memfs.max_symlink_depth < 1:
        raise ConfigValidationError(
            "max_symlink_depth must be positive", key="memfs.max_symlink_depth"
        )
    for key in ('default_file_mode', 'default_dir_mode'):
        if not 0 <= getattr(memfs, key) <= 0o7777:
            raise ConfigValidationError(
                f"{key} must be a permission mode", key=f"memfs.{key}"
            )
    level = config.logging.level.upper()
    if level not in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        raise ConfigValidationError(
            f"Unknown log level: {config.logging.level}", key="logging.level"
        )


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('ptfs.json')
        >>> print(config.memfs.temp_dir)
        /tmp
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
            ConfigValidationError: If a value is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                source=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                source=config_path
            ) from e
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                source=config_path
            ) from e

        config = self.parse(data)
        self._config = config
        self._loaded = True
        return config

    @staticmethod
    def parse(data: dict[str, Any]) -> Config:
        """Parse configuration data into a validated Config object."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = Config()

        for section_name, section_data in data.items():
            if not hasattr(config, section_name):
                raise ConfigValidationError(
                    f"Unknown configuration section: {section_name}",
                    key=section_name
                )
            if not isinstance(section_data, dict):
                raise ConfigValidationError(
                    f"Section {section_name} must be an object",
                    key=section_name
                )
            section = getattr(config, section_name)
            known = {f.name for f in fields(section)}
            unknown = set(section_data) - known
            if unknown:
                key = f"{section_name}.{sorted(unknown)[0]}"
                raise ConfigValidationError(
                    f"Invalid configuration key: {key}", key=key
                )
            setattr(config, section_name, replace(section, **section_data))

        validate_config(config)
        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'memfs.temp_dir')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'memfs.max_symlink_depth')
            value: Value to set

        Note:
            Backends already constructed keep the settings they were
            built with. Changes are not persisted to disk.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, final_key) or len(parts) < 2:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            validate_config(self._config)
        except Exception:
            setattr(obj, final_key, previous)
            raise

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def reset(self) -> None:
        """Restore the built-in defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def configure_logging(config: Optional[Config] = None) -> None:
    """Install log handlers as described by the logging section."""
    settings = (config or get_config()).logging
    Logger.initialize(
        level=LogLevel.from_name(settings.level),
        log_file=settings.log_file,
        use_colors=settings.use_colors,
        console_output=settings.console_output,
    )


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
