"""Configuration management for gostrap.

Loads configuration from:
1. gostrap.toml (current or parent directory), else ~/.config/gostrap/config.toml
2. Environment variables (overrides)

The loaded Config is built once per process and handed to the catalog
components; nothing below reads global state.
"""

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

APP_NAME = "gostrap"
CONFIG_FILE_NAME = "gostrap.toml"
DEFAULT_REPO_URL = "https://github.com/itpey/figo-templates"


def get_app_dir(name: str = "") -> Path:
    """Get a per-user application directory.

    Returns:
        %APPDATA%/gostrap/<name> on Windows, ~/.config/gostrap/<name> elsewhere
    """
    if sys.platform == "win32" and os.getenv("APPDATA"):
        base = Path(os.environ["APPDATA"]) / APP_NAME
    else:
        base = Path.home() / ".config" / APP_NAME
    return base / name if name else base


@dataclass
class TemplatesConfig:
    """Template store and catalog source configuration."""

    # Local template store (default: ~/.config/gostrap/templates)
    templates_dir: str = ""

    # Repository cloned on first run or when no --url is given
    default_repo_url: str = DEFAULT_REPO_URL

    # Optional descriptor at a template root
    metadata_file: str = "gostrap.json"

    # A directory is a template iff this file sits directly inside it
    marker_file: str = "go.mod"

    # Joins the repository name and a child directory name
    name_separator: str = "-"

    excluded_dirs: list[str] = field(default_factory=lambda: [".git", ".github"])
    excluded_files: list[str] = field(default_factory=list)

    @property
    def store_path(self) -> Path:
        """Resolved template store directory."""
        if self.templates_dir:
            return Path(self.templates_dir).expanduser()
        return get_app_dir("templates")


@dataclass
class ProjectConfig:
    """New project creation configuration."""

    init_git: bool = True

    # Run in the new project directory, in order, after the copy
    post_create_commands: list[list[str]] = field(
        default_factory=lambda: [["go", "get"], ["go", "mod", "tidy"]]
    )


@dataclass
class LoggingConfig:
    """Diagnostic logging configuration."""

    level: str = "WARNING"


@dataclass
class Config:
    """Main configuration container."""

    templates: TemplatesConfig = field(default_factory=TemplatesConfig)
    project: ProjectConfig = field(default_factory=ProjectConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create Config from dictionary."""
        templates_data = data.get("templates", {})
        project_data = data.get("project", {})
        logging_data = data.get("logging", {})

        return cls(
            templates=TemplatesConfig(**templates_data),
            project=ProjectConfig(**project_data),
            logging=LoggingConfig(**logging_data),
        )


def find_config_file() -> Path | None:
    """Find the config file.

    Looks for gostrap.toml in the current and parent directories, then for
    the per-user config.toml.

    Returns:
        Path to the config file or None if not found.
    """
    current = Path.cwd()

    for directory in [current, *current.parents]:
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

    user_config = get_app_dir() / "config.toml"
    if user_config.exists():
        return user_config

    return None


def load_config(config_path: Path | str | None = None) -> Config:
    """Load configuration from file and environment.

    Args:
        config_path: Optional explicit path to a config file

    Returns:
        Config object with merged settings.
    """
    # Start with defaults
    config_data: dict[str, Any] = {}

    # Load from file if available
    if config_path is None:
        config_path = find_config_file()

    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            with open(path, "rb") as f:
                config_data = tomllib.load(f)

    # Apply environment variable overrides
    env_overrides = {
        "templates": {
            "templates_dir": os.getenv("GOSTRAP_TEMPLATES_DIR"),
            "default_repo_url": os.getenv("GOSTRAP_REPO_URL"),
        },
        "logging": {
            "level": os.getenv("GOSTRAP_LOG_LEVEL"),
        },
    }

    # Merge env overrides (only non-None values)
    for section, values in env_overrides.items():
        if section not in config_data:
            config_data[section] = {}
        for key, value in values.items():
            if value is not None:
                config_data[section][key] = value

    return Config.from_dict(config_data)


DEFAULT_CONFIG_TOML = '''# gostrap configuration
# Auto-generated by 'gostrap config init'

[templates]
# Empty = ~/.config/gostrap/templates
templates_dir = ""
default_repo_url = "https://github.com/itpey/figo-templates"
metadata_file = "gostrap.json"
marker_file = "go.mod"
name_separator = "-"
excluded_dirs = [".git", ".github"]
excluded_files = []

[project]
init_git = true
post_create_commands = [["go", "get"], ["go", "mod", "tidy"]]

[logging]
level = "WARNING"
'''


# Global config instance (lazy loaded)
_config: Config | None = None


def get_config() -> Config:
    """Get the process-wide configuration instance.

    Returns:
        Config object (loaded once, cached).
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Force reload of configuration.

    Returns:
        Fresh Config object.
    """
    global _config
    _config = load_config()
    return _config
