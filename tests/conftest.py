# tests/conftest.py
"""
Shared fixtures.

Test Tiers:
- tier1: pure logic, no I/O          Run: pytest -m tier1
- tier2: config files and the CLI    Run: pytest -m "tier1 or tier2"
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest
import yaml

from tinyclass import AttributeRegistry


@pytest.fixture
def registry() -> AttributeRegistry:
    """A fresh registry with the sentinel ROOT as implicit root."""
    return AttributeRegistry()


@pytest.fixture
def call_log() -> List[str]:
    """Shared list hooks append to, to check call order."""
    return []


@pytest.fixture
def write_schema(tmp_path: Path):
    """Write a schema dict to a YAML file and return its path."""

    def _write(data, name: str = "classes.yaml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def employee_schema(write_schema) -> Path:
    return write_schema(
        {
            "classes": {
                "Person": {"attributes": ["name"]},
                "Employee": {"parents": ["Person"], "attributes": ["ssn"]},
            }
        }
    )
