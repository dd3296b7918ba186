"""Tests for the package metadata."""

import tomllib
from pathlib import Path

PYPROJECT = Path(__file__).parent.parent / "pyproject.toml"


def test_python_floor_has_typeis() -> None:
    """Test that the minimum Python declared ships `typing.TypeIs` (3.13+)."""
    config = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))
    assert config["project"]["requires-python"] == ">=3.13"
    assert config["tool"]["ruff"]["target-version"] == "py313"
