"""Configuration loading and management for codetally.

Configuration sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.codetally.toml)
    3. Project config (./codetally.toml)
    4. Explicit config file
    5. Environment variables (CODETALLY_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(enhanced=False)
    >>> config.enhanced
    False
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

_VERBOSITY_LEVELS = ("quiet", "normal", "verbose")


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for one analysis run.

    Attributes:
        Source handling:
            language: Registered language whose syntax drives the scanners
            encoding: Text encoding used when reading files (errors are replaced)

        Line counting:
            enhanced: Also compute the enhanced count (block comments stripped)
            exclude_accessors: Drop trivial getters/setters from the enhanced count

        File discovery:
            exclude_patterns: Glob patterns of files to leave out
            follow_symlinks: Descend into symlinked directories
            allow_hidden_files: Include dot-files and dot-directories

        Output control:
            verbosity: Logging verbosity level
    """

    # Source handling
    language: str = "java"
    encoding: str = "utf-8"

    # Line counting
    enhanced: bool = True
    exclude_accessors: bool = True

    # File discovery
    exclude_patterns: list[str] = field(default_factory=list)
    follow_symlinks: bool = False
    allow_hidden_files: bool = True

    # Output control
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.language:
            raise InvalidConfigError("language", self.language, "must not be empty")
        if not self.encoding:
            raise InvalidConfigError("encoding", self.encoding, "must not be empty")
        if self.verbosity not in _VERBOSITY_LEVELS:
            raise InvalidConfigError(
                "verbosity", self.verbosity, f"must be one of {', '.join(_VERBOSITY_LEVELS)}"
            )
        if not isinstance(self.exclude_patterns, list):
            raise InvalidConfigError(
                "exclude_patterns", self.exclude_patterns, "must be a list of glob patterns"
            )


default_config = AnalysisConfig()


def load_config(config_file: Optional[Path] = None, **overrides) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``verbose``
            and ``quiet`` booleans are folded into ``verbosity``; ``None``
            values are ignored.

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unparsable
        InvalidConfigError: If a value fails validation
    """
    merged: dict = {}

    global_config = Path.home() / ".codetally.toml"
    if global_config.exists():
        merged.update(_load_toml_checked(global_config, "global config"))

    project_config = Path.cwd() / "codetally.toml"
    if project_config.exists():
        merged.update(_load_toml_checked(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_load_toml_checked(config_file, "config file"))

    merged.update(_load_env_vars())

    if overrides.pop("verbose", False):
        overrides["verbosity"] = "verbose"
    if overrides.pop("quiet", False):
        overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_toml_checked(path: Path, label: str) -> dict:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from CODETALLY_* environment variables.

    Supported environment variables:
        CODETALLY_LANGUAGE: str
        CODETALLY_ENCODING: str
        CODETALLY_ENHANCED: bool (true/false/1/0)
        CODETALLY_EXCLUDE_ACCESSORS: bool
        CODETALLY_FOLLOW_SYMLINKS: bool
        CODETALLY_ALLOW_HIDDEN_FILES: bool
        CODETALLY_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any CODETALLY_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"CODETALLY_{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(field_name, env_value, f"{env_key}: {e}")
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Returns None for types that cannot be expressed as a single string
    (lists).

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Skip list types (like exclude_patterns) - too complex for env vars
    if origin is list or type_hint is list:
        return None

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is int:
        return int(value)

    # String (including Literal types like Verbosity)
    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    A ``[codetally]`` table is honoured when present so the settings can
    live inside a larger file; otherwise the top level is used.
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore

    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.get("codetally")
    if isinstance(section, dict):
        return section
    return data
