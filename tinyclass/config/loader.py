# tinyclass/config/loader.py
"""
Loading class schemas from YAML.

Usage:
    from tinyclass.config import build_registry, load_schema

    schema = load_schema("classes.yaml")
    registry = build_registry(schema)
    registry.linearize("Employee")
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from tinyclass.config.schema import SchemaConfig
from tinyclass.core.declaration import declare
from tinyclass.core.registry import AttributeRegistry
from tinyclass.logging import get_logger
from tinyclass.logging_tags import CONFIG

logger = get_logger(__name__)


# =============================================================================
# Errors
# =============================================================================


class ConfigError(Exception):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match the schema."""

    pass


# =============================================================================
# Loading
# =============================================================================


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML file and return it as a dictionary.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or the root isn't a mapping
        ConfigError: If the path is a directory
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    logger.debug(f"{CONFIG} Loaded config from {p}")
    return data


def load_schema(path: Union[str, Path]) -> SchemaConfig:
    """
    Load and validate a class schema file.

    Raises:
        ConfigValidationError: If the file doesn't match SchemaConfig
    """
    data = load_yaml(path)
    try:
        return SchemaConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Config validation failed: {e}", path=Path(path)) from e


def build_registry(schema: SchemaConfig, registry: Optional[AttributeRegistry] = None) -> AttributeRegistry:
    """
    Declare every class of ``schema`` (string handles) in file order.

    Parents may be declared later in the file; the graph is only checked when
    a class is first linearized.

    Raises:
        InvalidNameError: If an attribute name is not an identifier
    """
    if registry is None:
        registry = AttributeRegistry()

    for name, decl in schema.classes.items():
        declare(name, decl.parents, decl.attributes, registry=registry)

    logger.info(f"{CONFIG} Declared {len(schema.classes)} class(es)")
    return registry
