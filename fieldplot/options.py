"""
Element attributes and their defaults.

Every element type has a Pydantic options model holding its visual
properties. A Board keeps one default instance per element type; user
attributes are merged over those defaults by copy_attributes() and the
merged result becomes the element's ``vis_prop``.

Attribute names are case-insensitive (``arrowHead`` and ``arrowhead``
are the same key). Numeric and boolean options may be given as
zero-argument callables, resolved with ``evaluate()`` at update time.
Styling keys without a field (e.g. ``fillcolor``) are kept untouched.

Usage:
    options = default_options()
    options['vectorfield'].arrowhead.size = 8
    vis_prop = copy_attributes({'scale': 0.5}, options, 'vectorfield')
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.errors import InvalidAttributeError, UnknownElementTypeError

LazyFloat = Union[float, Callable[[], float]]
LazyBool = Union[bool, Callable[[], bool]]


class ArrowHeadOptions(BaseModel):
    """Arrow head glyph drawn at the tip of each sampled vector."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    enabled: LazyBool = True
    size: LazyFloat = Field(default=5, description="Leg length in pixels")
    angle: LazyFloat = Field(default=math.pi * 0.125, description="Half opening angle in radians")


class CurveOptions(BaseModel):
    """Visual properties shared by all polyline elements."""

    model_config = ConfigDict(extra="allow", validate_assignment=True)

    name: str = ""
    visible: LazyBool = True
    strokecolor: str = "#0072B2"
    strokewidth: LazyFloat = 1
    strokeopacity: LazyFloat = 1
    highlightstrokecolor: str = "#C3D9FF"
    highlightstrokewidth: LazyFloat = 2
    highlightstrokeopacity: LazyFloat = 1
    dash: int = Field(default=0, ge=0)


class VectorFieldOptions(CurveOptions):
    """Visual properties of a vector field."""

    strokewidth: LazyFloat = 0.5
    highlightstrokewidth: LazyFloat = 0.5
    highlightstrokecolor: str = "#0072B2"
    highlightstrokeopacity: LazyFloat = 0.8

    scale: LazyFloat = Field(default=1, description="Multiplier applied to every sampled vector")
    arrowhead: ArrowHeadOptions = Field(default_factory=ArrowHeadOptions)


ELEMENT_OPTIONS: Dict[str, type[CurveOptions]] = {
    'curve': CurveOptions,
    'vectorfield': VectorFieldOptions,
}


def default_options() -> Dict[str, CurveOptions]:
    """Return a fresh set of per-element-type defaults."""
    return {name: model() for name, model in ELEMENT_OPTIONS.items()}


def lower_keys(attributes: Mapping[str, Any]) -> Dict[str, Any]:
    """Lower-case mapping keys recursively."""
    result: Dict[str, Any] = {}
    for key, value in attributes.items():
        if isinstance(value, BaseModel):
            value = value.model_dump()
        if isinstance(value, Mapping):
            value = lower_keys(value)
        result[str(key).lower()] = value
    return result


def merge_attributes(base: Dict[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two attribute dictionaries.

    Nested mappings are merged key by key so that a partial override
    such as ``{'arrowhead': {'size': 8}}`` keeps the remaining defaults.
    """
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = merge_attributes(merged[key], value)
        else:
            merged[key] = value
    return merged


def copy_attributes(
    attributes: Optional[Mapping[str, Any]],
    options: Mapping[str, CurveOptions],
    *keys: str,
) -> CurveOptions:
    """
    Merge user attributes over the defaults of an element type.

    Args:
        attributes: User attributes (any key case), may be None
        options: Per-element-type defaults, usually ``board.options``
        *keys: Element type, optionally followed by a sub-object path
            (e.g. ``'vectorfield', 'arrowhead'``)

    Returns:
        Validated options model for the element

    Raises:
        UnknownElementTypeError: If no defaults exist for the type
        InvalidAttributeError: If a merged value fails validation
    """
    if not keys:
        raise UnknownElementTypeError('')
    element_type = keys[0].lower()
    if element_type not in options:
        raise UnknownElementTypeError(element_type)

    defaults: BaseModel = options[element_type]
    for key in keys[1:]:
        defaults = getattr(defaults, key.lower())

    merged = merge_attributes(defaults.model_dump(), lower_keys(attributes or {}))

    try:
        return type(defaults).model_validate(merged)
    except ValidationError as e:
        raise InvalidAttributeError(element_type, str(e)) from e


__all__ = [
    'ArrowHeadOptions',
    'CurveOptions',
    'VectorFieldOptions',
    'ELEMENT_OPTIONS',
    'LazyFloat',
    'LazyBool',
    'default_options',
    'lower_keys',
    'merge_attributes',
    'copy_attributes',
]
