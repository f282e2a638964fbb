"""
Shared pytest fixtures for board and element tests.

This module provides:
- A board with a known pixel scale (50 px per unit on both axes)
- Settings isolation for tests that change environment variables
- Helpers for inspecting vector field output
"""

import math

import pytest
from pydantic import BaseModel, ValidationError

from fieldplot import Board
from fieldplot.core.config import get_settings


@pytest.fixture
def board() -> Board:
    """500x500 px board over [-5, 5] x [-5, 5]: unit_x == unit_y == 50."""
    return Board(bounding_box=(-5, 5, 5, -5), width=500, height=500)


@pytest.fixture
def fresh_settings():
    """Clear cached settings before and after the test."""
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def glyphs():
    """Split an element's output into per-grid-point glyphs (break markers removed)."""
    def _glyphs(element):
        result = []
        current = []
        for x, y in zip(element.data_x, element.data_y):
            if math.isnan(x) and math.isnan(y):
                result.append(current)
                current = []
            else:
                current.append((x, y))
        assert current == [], "output must end with a break marker"
        return result
    return _glyphs


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a Pydantic model rejects data for a given field."""
    def _assert_validation(model_class: type[BaseModel], data: dict, expected_field: str | None = None):
        with pytest.raises(ValidationError) as exc_info:
            model_class(**data)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"
        return error

    return _assert_validation
