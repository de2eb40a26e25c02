"""Catalog of the measurement units understood by the converter."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

__all__ = [
    "UnitCategory",
    "UnitDefinition",
    "UNITS",
    "UNRECOGNIZED",
    "aliases_for",
    "iter_units",
    "lookup_unit",
    "pluralize",
]


class UnitCategory(Enum):
    """Physical quantity a unit measures."""

    LENGTH = "Length"
    WEIGHT = "Weight"
    TEMPERATURE = "Temperature"
    UNRECOGNIZED = "Unrecognized"

    def __str__(self) -> str:
        return self.value

    @property
    def is_linear(self) -> bool:
        return self in (UnitCategory.LENGTH, UnitCategory.WEIGHT)


@dataclass(frozen=True)
class UnitDefinition:
    """Immutable description of a single unit.

    ``multiplier`` expresses the unit size in the base unit of its category
    (meter for length, gram for weight). Temperatures are affine and carry
    ``0.0``.
    """

    id: str
    code: str
    singular: str
    plural: str
    multiplier: float
    category: UnitCategory


def _unit(id: str, code: str, singular: str, plural: str, multiplier: float, category: UnitCategory) -> UnitDefinition:
    return UnitDefinition(id=id, code=code, singular=singular, plural=plural, multiplier=multiplier, category=category)


_LENGTH = UnitCategory.LENGTH
_WEIGHT = UnitCategory.WEIGHT
_TEMPERATURE = UnitCategory.TEMPERATURE

_DEFINITIONS = (
    _unit("meter", "m", "meter", "meters", 1.0, _LENGTH),
    _unit("kilometer", "km", "kilometer", "kilometers", 1000.0, _LENGTH),
    _unit("centimeter", "cm", "centimeter", "centimeters", 0.01, _LENGTH),
    _unit("millimeter", "mm", "millimeter", "millimeters", 0.001, _LENGTH),
    _unit("mile", "mi", "mile", "miles", 1609.35, _LENGTH),
    _unit("yard", "yd", "yard", "yards", 0.9144, _LENGTH),
    _unit("foot", "ft", "foot", "feet", 0.3048, _LENGTH),
    _unit("inch", "in", "inch", "inches", 0.0254, _LENGTH),
    _unit("gram", "g", "gram", "grams", 1.0, _WEIGHT),
    _unit("kilogram", "kg", "kilogram", "kilograms", 1000.0, _WEIGHT),
    _unit("milligram", "mg", "milligram", "milligrams", 0.001, _WEIGHT),
    _unit("pound", "lb", "pound", "pounds", 453.592, _WEIGHT),
    _unit("ounce", "oz", "ounce", "ounces", 28.3495, _WEIGHT),
    _unit("kelvin", "k", "kelvin", "kelvins", 0.0, _TEMPERATURE),
    _unit("fahrenheit", "f", "degree Fahrenheit", "degrees Fahrenheit", 0.0, _TEMPERATURE),
    _unit("celsius", "c", "degree Celsius", "degrees Celsius", 0.0, _TEMPERATURE),
)

UNRECOGNIZED = _unit("unrecognized", "???", "???", "???", 0.0, UnitCategory.UNRECOGNIZED)

UNITS: Mapping[str, UnitDefinition] = MappingProxyType({unit.id: unit for unit in _DEFINITIONS})

_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "meter": ("m", "meter", "meters"),
        "kilometer": ("km", "kilometer", "kilometers"),
        "centimeter": ("cm", "centimeter", "centimeters"),
        "millimeter": ("mm", "millimeter", "millimeters"),
        "mile": ("mi", "mile", "miles"),
        "yard": ("yd", "yard", "yards"),
        "foot": ("ft", "foot", "feet"),
        "inch": ("in", "inch", "inches"),
        "gram": ("g", "gram", "grams"),
        "kilogram": ("kg", "kilogram", "kilograms"),
        "milligram": ("mg", "milligram", "milligrams"),
        "pound": ("lb", "pound", "pounds"),
        "ounce": ("oz", "ounce", "ounces"),
        "kelvin": ("k", "kelvin", "kelvins"),
        "celsius": ("c", "dc", "celsius", "degree celsius", "degrees celsius"),
        "fahrenheit": ("f", "df", "fahrenheit", "degree fahrenheit", "degrees fahrenheit"),
    }
)


def _build_alias_index() -> Dict[str, UnitDefinition]:
    index: Dict[str, UnitDefinition] = {}
    for unit_id, aliases in _ALIASES.items():
        for alias in aliases:
            index[alias] = UNITS[unit_id]
    return index


_ALIAS_INDEX: Mapping[str, UnitDefinition] = MappingProxyType(_build_alias_index())


def lookup_unit(token: Optional[str]) -> UnitDefinition:
    """Resolve ``token`` to a catalog entry, falling back to :data:`UNRECOGNIZED`."""

    if not token:
        return UNRECOGNIZED
    return _ALIAS_INDEX.get(token.lower(), UNRECOGNIZED)


def pluralize(definition: UnitDefinition, value: float) -> str:
    """Return the singular name only when ``value`` is exactly ``1.0``."""

    return definition.singular if value == 1.0 else definition.plural


def aliases_for(definition: UnitDefinition) -> Tuple[str, ...]:
    return _ALIASES.get(definition.id, ())


def iter_units(category: Optional[UnitCategory] = None) -> Iterator[UnitDefinition]:
    """Yield catalog entries in declaration order, optionally for one category."""

    for unit in UNITS.values():
        if category is None or unit.category is category:
            yield unit
