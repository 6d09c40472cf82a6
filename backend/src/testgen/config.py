# backend/src/testgen/config.py
"""Configuration system for testgen.

This module handles loading settings from environment variables and an INI
file in the workspace, providing sensible defaults, and computing the paths
used to place generated tests.
"""

from configparser import ConfigParser
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any
import os

from testgen.constants import (
    DEFAULT_NAMING_PATTERN,
    JAVA_EXTENSION,
    METHOD_PLACEHOLDER,
    SUFFIX_PLACEHOLDER,
)


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# Schema: section -> key -> (type, default, description)
CONFIG_SCHEMA: dict[str, dict[str, tuple[type, Any, str]]] = {
    "generation": {
        "naming_pattern": (
            str,
            DEFAULT_NAMING_PATTERN,
            "Test method name template with {method} and {suffix}",
        ),
        "generate_failure_tests": (bool, True, "Emit one test per declared throw"),
        "add_guidance_comments": (bool, True, "Mark placeholder calls with TODO comments"),
    },
    "paths": {
        "test_root": (str, "src/test/java", "Test source root, relative to project"),
        "main_root": (str, "src/main/java", "Main source root, relative to project"),
        "file_extension": (str, JAVA_EXTENSION, "Extension of test files"),
    },
}


@dataclass(frozen=True)
class NamingConfig:
    """Naming and formatting options consumed by the synthesizer."""

    naming_pattern: str = DEFAULT_NAMING_PATTERN
    generate_failure_tests: bool = True
    add_guidance_comments: bool = True

    def __post_init__(self):
        """Reject patterns that cannot produce distinct test names."""
        for placeholder in (METHOD_PLACEHOLDER, SUFFIX_PLACEHOLDER):
            if placeholder not in self.naming_pattern:
                raise ConfigError(
                    f"Naming pattern {self.naming_pattern!r} must contain {placeholder}"
                )

    def test_name(self, method: str, suffix: str) -> str:
        """Substitute an operation name and suffix into the pattern."""
        return self.naming_pattern.replace(METHOD_PLACEHOLDER, method).replace(
            SUFFIX_PLACEHOLDER, suffix
        )


@dataclass(frozen=True)
class PathsConfig:
    """Source layout configuration."""

    test_root: str = "src/test/java"
    main_root: str = "src/main/java"
    file_extension: str = JAVA_EXTENSION


def _load_section(
    parser: ConfigParser, section: str, schema: dict[str, tuple[type, Any, str]]
) -> dict[str, Any]:
    """Load and validate a configuration section.

    Args:
        parser: ConfigParser instance with loaded config
        section: Section name to load
        schema: Schema definition for the section

    Returns:
        Dictionary of validated configuration values

    Raises:
        ConfigError: If validation fails
    """
    result = {}

    for key, (typ, default, _) in schema.items():
        if parser.has_option(section, key):
            raw_value = parser.get(section, key)
            value: bool | str
            try:
                if typ is bool:
                    lowered = raw_value.strip().lower()
                    if lowered in ("true", "1", "yes", "on"):
                        value = True
                    elif lowered in ("false", "0", "no", "off"):
                        value = False
                    else:
                        raise ValueError(raw_value)
                else:
                    value = raw_value.strip()
            except ValueError as e:
                raise ConfigError(
                    f"Invalid value for [{section}].{key}: {raw_value!r} (expected {typ.__name__})"
                ) from e
        else:
            value = default

        result[key] = value

    return result


def _load_config(config_path: Path | None = None) -> "Config":
    """Load configuration from an INI file (internal use only).

    Returns a Config with a placeholder workspace_path that load_settings()
    replaces with the workspace from the TESTGEN_WORKSPACE variable.

    Args:
        config_path: Path to config file. If None, uses defaults from schema.

    Returns:
        Config object with all sections populated

    Raises:
        ConfigError: If validation fails
    """
    parser = ConfigParser()

    if config_path and config_path.exists():
        parser.read(config_path)

    generation = NamingConfig(**_load_section(parser, "generation", CONFIG_SCHEMA["generation"]))
    paths = PathsConfig(**_load_section(parser, "paths", CONFIG_SCHEMA["paths"]))

    return Config(workspace_path=Path("."), generation=generation, paths=paths)


@dataclass(frozen=True)
class Config:
    """Complete application configuration."""

    workspace_path: Path
    generation: NamingConfig = NamingConfig()
    paths: PathsConfig = PathsConfig()

    @property
    def config_file(self) -> Path:
        """Path to the workspace's config.ini."""
        return self.workspace_path / "config.ini"

    @property
    def test_root_path(self) -> Path:
        """Configured test source root inside the workspace."""
        return self.workspace_path / self.paths.test_root


@lru_cache(maxsize=1)
def load_settings() -> Config:
    """Load settings from environment variables and config file.

    Settings are cached for the lifetime of the application.
    Use load_settings.cache_clear() to reload settings.

    Returns:
        Config object populated from environment variables and config file.

    Raises:
        ValueError: If TESTGEN_WORKSPACE is not set.
        ConfigError: If the config file or an override is invalid.
    """
    workspace_path_str = os.getenv("TESTGEN_WORKSPACE")
    if not workspace_path_str:
        raise ValueError("TESTGEN_WORKSPACE environment variable must be set")

    workspace_path = Path(workspace_path_str)

    config_file = workspace_path / "config.ini"
    try:
        config_exists = config_file.exists()
    except PermissionError:
        config_exists = False
    base_config = _load_config(config_file if config_exists else None)

    generation = base_config.generation
    pattern_override = os.getenv("TESTGEN_NAMING_PATTERN")
    if pattern_override:
        generation = replace(generation, naming_pattern=pattern_override)

    return Config(
        workspace_path=workspace_path,
        generation=generation,
        paths=base_config.paths,
    )
