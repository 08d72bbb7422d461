#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration file discovery and loading for the highlightwords CLI.

Configuration files are looked up in priority order: the ``--config`` flag,
the ``HIGHLIGHTWORDS_CONFIG`` environment variable, then auto-discovery from
the current directory upward and finally the home directory.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from highlightwords.constants import CONFIG_FILENAMES, PYPROJECT_TOOL_SECTION
from highlightwords.exceptions import ConfigurationError


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.highlightwords]`` section from a pyproject.toml file.

    Returns an empty dict when the section is absent.

    Raises
    ------
    ConfigurationError
        If pyproject.toml cannot be parsed or the section is not a table

    """
    try:
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(
            f"Invalid TOML in pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading pyproject.toml {pyproject_path}: {e}", config_path=str(pyproject_path), original_error=e
        ) from e

    config = data.get("tool", {}).get(PYPROJECT_TOOL_SECTION)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"[tool.{PYPROJECT_TOOL_SECTION}] section in {pyproject_path} must be a table, "
            f"got {type(config).__name__}",
            config_path=str(pyproject_path),
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir``.

    Each directory is checked for the dedicated config files first and then
    for a pyproject.toml carrying a ``[tool.highlightwords]`` section.

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory, defaults to the current working directory

    Returns
    -------
    Path or None
        First configuration file found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except ConfigurationError:
                # Unrelated broken pyproject.toml; keep searching
                pass

        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def discover_config_file() -> Optional[Path]:
    """Discover a configuration file in the parent directories or the home directory."""
    config_in_parents = find_config_in_parents()
    if config_in_parents:
        return config_in_parents

    home = Path.home()
    for filename in CONFIG_FILENAMES:
        config_path = home / filename
        if config_path.is_file():
            return config_path

    return None


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    ConfigurationError
        If the file is missing, unreadable, malformed, or of an unknown format

    Examples
    --------
    >>> config = load_config_file(".highlightwords.toml")
    >>> print(config.get("case_sensitive"))
    True

    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigurationError(f"Configuration file does not exist: {config_path}", config_path=str(config_path))
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration path is not a file: {config_path}", config_path=str(config_path))

    filename = config_path.name.lower()
    ext = config_path.suffix.lower()

    if filename == "pyproject.toml":
        return _load_pyproject_section(config_path)

    try:
        if ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f)
        elif ext == ".json":
            with open(config_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise ConfigurationError(
                f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml", config_path=str(config_path)
            )
    except (tomllib.TOMLDecodeError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Invalid config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Error reading config file {config_path}: {e}", config_path=str(config_path), original_error=e
        ) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {config_path} must contain a mapping at the top level, got {type(config).__name__}",
            config_path=str(config_path),
        )
    return config


def load_config_with_priority(
    explicit_path: Optional[str] = None, env_var_path: Optional[str] = None
) -> Dict[str, Any]:
    """Load configuration with priority handling.

    Priority order (highest to lowest):
    1. Explicit config file path (--config flag)
    2. Environment variable config path (HIGHLIGHTWORDS_CONFIG)
    3. Auto-discovered config file

    Returns an empty dict when no configuration file is found.

    """
    if explicit_path:
        return load_config_file(explicit_path)

    if env_var_path:
        return load_config_file(env_var_path)

    discovered_path = discover_config_file()
    if discovered_path:
        return load_config_file(discovered_path)

    return {}


__all__ = [
    "find_config_in_parents",
    "discover_config_file",
    "load_config_file",
    "load_config_with_priority",
]
