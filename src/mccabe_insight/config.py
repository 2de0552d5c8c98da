"""Configuration loading and management for McCabe Insight.

This module provides configuration discovery and validation. Configuration
sources are merged in priority order:
    1. Defaults (defined in AnalysisConfig)
    2. Global config (~/.mccabe-insight.toml)
    3. Project config (./mccabe-insight.toml)
    4. Explicit config file
    5. Environment variables (MCCABE_* prefix)
    6. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(language="cpp", report_declarations=False)
    >>> config.language
    'cpp'
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

SUPPORTED_LANGUAGES = ("c", "cpp")
ENV_PREFIX = "MCCABE_"
GLOBAL_CONFIG_NAME = ".mccabe-insight.toml"
PROJECT_CONFIG_NAME = "mccabe-insight.toml"


@dataclass(frozen=True)
class AnalysisConfig:
    """Configuration for a complexity run.

    Attributes:
        language: Grammar used to parse input ("c" or "cpp")
        output_path: Sink file, truncated at the start of every run
        report_declarations: Report bodyless prototypes (complexity 1)
        strict_syntax: Treat any syntax error in the tree as a parse failure
        encoding: Encoding used to decode input bytes
        workers: Parallel workers for multi-file runs (None = auto-detect)
        verbosity: Logging verbosity level
    """

    language: str = "c"
    output_path: str = "output.cy"
    report_declarations: bool = True
    strict_syntax: bool = False
    encoding: str = "utf-8"
    workers: Optional[int] = None
    verbosity: Verbosity = "normal"

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.language not in SUPPORTED_LANGUAGES:
            raise InvalidConfigError(
                "language", self.language, f"must be one of {', '.join(SUPPORTED_LANGUAGES)}"
            )
        if not self.output_path:
            raise InvalidConfigError("output_path", self.output_path, "must not be empty")
        if self.workers is not None and self.workers < 1:
            raise InvalidConfigError("workers", self.workers, "must be at least 1")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise InvalidConfigError(
                "verbosity", self.verbosity, "must be quiet, normal or verbose"
            )
        try:
            "".encode(self.encoding)
        except LookupError:
            raise InvalidConfigError("encoding", self.encoding, "unknown codec")


def load_config(config_file: Optional[Path] = None, **overrides: Any) -> AnalysisConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags)

    Returns:
        Validated AnalysisConfig instance

    Raises:
        ConfigurationError: If a config file is unreadable or has unknown keys
        InvalidConfigError: If a value fails validation
    """
    merged: dict[str, Any] = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())

    # Convert verbosity boolean flags to string
    if "verbose" in overrides:
        if overrides.pop("verbose"):
            overrides["verbosity"] = "verbose"
    if "quiet" in overrides:
        if overrides.pop("quiet"):
            overrides["verbosity"] = "quiet"

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return AnalysisConfig(**merged)
    except TypeError as e:
        # Unknown field in config
        raise ConfigurationError(f"Invalid configuration: {e}")


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        return _load_toml_file(path)
    except ConfigurationError:
        raise
    except (OSError, ValueError) as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from MCCABE_* environment variables.

    Supported environment variables:
        MCCABE_LANGUAGE: c/cpp
        MCCABE_OUTPUT_PATH: str
        MCCABE_REPORT_DECLARATIONS: bool (true/false/1/0)
        MCCABE_STRICT_SYNTAX: bool
        MCCABE_ENCODING: str
        MCCABE_WORKERS: int
        MCCABE_VERBOSITY: quiet/normal/verbose

    Returns:
        Dict of field_name -> parsed_value for any MCCABE_* vars found.
    """
    type_hints = get_type_hints(AnalysisConfig)

    result: dict[str, Any] = {}

    for field_name in AnalysisConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)

        if env_value is None:
            continue

        type_hint = type_hints.get(field_name)
        if type_hint is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hint)
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the correct type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    origin = getattr(type_hint, "__origin__", None)

    # Handle Optional[X] which is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]
            origin = getattr(type_hint, "__origin__", None)

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


def _load_toml_file(path: Path) -> dict[str, Any]:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
    """
    try:
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
