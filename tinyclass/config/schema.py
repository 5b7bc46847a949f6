# tinyclass/config/schema.py
"""
Pydantic models for YAML class-schema files.

Example file:

    logging:
      level: DEBUG
    classes:
      Person:
        attributes: [name]
      Employee:
        parents: [Person]
        attributes: [ssn]

Attribute names are checked by the registry (InvalidNameError), not here.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tinyclass.logging import resolve_level


# =============================================================================
# Class Declarations
# =============================================================================


class ClassDeclaration(BaseModel):
    """One class: its ordered parents and directly declared attributes."""

    parents: list[str] = Field(default_factory=list, description="Direct parents, in order")
    attributes: list[str] = Field(default_factory=list, description="Directly declared attributes")

    model_config = ConfigDict(extra="forbid")


# =============================================================================
# Logging
# =============================================================================


class LoggingConfig(BaseModel):
    level: str = "INFO"

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def known_level(cls, v: str) -> str:
        resolve_level(v)
        return v.upper()

    @property
    def level_number(self) -> int:
        return resolve_level(self.level)


# =============================================================================
# Schema File
# =============================================================================


class SchemaConfig(BaseModel):
    """A whole schema file. Classes are declared in file order."""

    classes: dict[str, ClassDeclaration] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")
