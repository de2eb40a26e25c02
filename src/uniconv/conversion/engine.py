"""Numeric conversion between catalog units."""
from __future__ import annotations

import math

from .units import UnitCategory, UnitDefinition, UNITS

__all__ = ["convert", "convert_linear", "convert_temperature", "is_convertible"]

_KELVIN = UNITS["kelvin"]
_CELSIUS = UNITS["celsius"]
_FAHRENHEIT = UNITS["fahrenheit"]


def is_convertible(source: UnitDefinition, target: UnitDefinition) -> bool:
    """Return ``True`` when both units measure the same known quantity."""

    if source.category is not target.category:
        return False
    return source.category is not UnitCategory.UNRECOGNIZED


def convert_linear(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    return value * source.multiplier / target.multiplier


def _to_kelvin(value: float, source: UnitDefinition) -> float:
    if source is _CELSIUS:
        return value + 273.15
    if source is _FAHRENHEIT:
        return (value + 459.67) * 5 / 9
    if source is _KELVIN:
        return value
    return math.nan


def _to_celsius(value: float, source: UnitDefinition) -> float:
    if source is _KELVIN:
        return value - 273.15
    if source is _FAHRENHEIT:
        return (value - 32) * 5 / 9
    if source is _CELSIUS:
        return value
    return math.nan


def _to_fahrenheit(value: float, source: UnitDefinition) -> float:
    if source is _CELSIUS:
        return value * 9 / 5 + 32
    if source is _KELVIN:
        return value * 9 / 5 - 459.67
    if source is _FAHRENHEIT:
        return value
    return math.nan


_TEMPERATURE_TARGETS = {
    _KELVIN.id: _to_kelvin,
    _CELSIUS.id: _to_celsius,
    _FAHRENHEIT.id: _to_fahrenheit,
}


def convert_temperature(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    """Convert between temperature scales using the formula for the exact pair."""

    handler = _TEMPERATURE_TARGETS.get(target.id)
    if handler is None:
        return math.nan
    return handler(value, source)


def convert(value: float, source: UnitDefinition, target: UnitDefinition) -> float:
    """Convert ``value`` from ``source`` to ``target``.

    The algorithm is selected by the category of ``source``; callers are
    expected to check :func:`is_convertible` first. Returns ``nan`` when the
    conversion cannot be computed.
    """

    if source.category.is_linear:
        return convert_linear(value, source, target)
    if source.category is UnitCategory.TEMPERATURE:
        return convert_temperature(value, source, target)
    return math.nan
