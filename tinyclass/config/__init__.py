# tinyclass/config/__init__.py
"""
Configuration for tinyclass: YAML class-schema files.

Usage:
    from tinyclass.config import load_schema, build_registry

    registry = build_registry(load_schema("classes.yaml"))
"""

from tinyclass.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    build_registry,
    load_schema,
    load_yaml,
)
from tinyclass.config.schema import ClassDeclaration, LoggingConfig, SchemaConfig

__all__ = [
    "load_yaml",
    "load_schema",
    "build_registry",
    "SchemaConfig",
    "ClassDeclaration",
    "LoggingConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
]
