import pytest

from uniconv.conversion.units import (
    UNITS,
    UNRECOGNIZED,
    UnitCategory,
    aliases_for,
    iter_units,
    lookup_unit,
    pluralize,
)


@pytest.mark.parametrize(
    "token, expected",
    [
        ("m", "meter"),
        ("Meters", "meter"),
        ("km", "kilometer"),
        ("KILOMETERS", "kilometer"),
        ("cm", "centimeter"),
        ("mm", "millimeter"),
        ("mi", "mile"),
        ("miles", "mile"),
        ("yd", "yard"),
        ("feet", "foot"),
        ("in", "inch"),
        ("inches", "inch"),
        ("g", "gram"),
        ("kg", "kilogram"),
        ("kilogram", "kilogram"),
        ("KILOGRAMS", "kilogram"),
        ("mg", "milligram"),
        ("lb", "pound"),
        ("oz", "ounce"),
        ("k", "kelvin"),
        ("Kelvins", "kelvin"),
        ("c", "celsius"),
        ("dc", "celsius"),
        ("degree celsius", "celsius"),
        ("Degrees Celsius", "celsius"),
        ("f", "fahrenheit"),
        ("df", "fahrenheit"),
        ("degrees fahrenheit", "fahrenheit"),
    ],
)
def test_lookup_unit_aliases(token: str, expected: str) -> None:
    assert lookup_unit(token) is UNITS[expected]


@pytest.mark.parametrize("token", ["banana", "", None, "degrees", "kilometre", "lbs"])
def test_lookup_unit_falls_back_to_sentinel(token) -> None:
    assert lookup_unit(token) is UNRECOGNIZED
    assert UNRECOGNIZED.category is UnitCategory.UNRECOGNIZED


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        UNITS["parsec"] = UNRECOGNIZED  # type: ignore[index]


def test_every_unit_has_aliases_and_a_real_category() -> None:
    for unit in iter_units():
        assert unit.category is not UnitCategory.UNRECOGNIZED
        assert unit.code in aliases_for(unit)
    assert UNRECOGNIZED not in list(iter_units())


def test_iter_units_filters_by_category() -> None:
    temperatures = [unit.id for unit in iter_units(UnitCategory.TEMPERATURE)]
    assert temperatures == ["kelvin", "fahrenheit", "celsius"]
    assert all(unit.multiplier > 0 for unit in iter_units(UnitCategory.WEIGHT))


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.0, "kilogram"),
        (1, "kilogram"),
        (2.0, "kilograms"),
        (0.0, "kilograms"),
        (-1.0, "kilograms"),
        (1.0000001, "kilograms"),
    ],
)
def test_pluralize_uses_exact_equality(value: float, expected: str) -> None:
    assert pluralize(UNITS["kilogram"], value) == expected


def test_category_labels() -> None:
    assert str(UnitCategory.LENGTH) == "Length"
    assert str(UnitCategory.WEIGHT) == "Weight"
    assert UnitCategory.WEIGHT.is_linear
    assert not UnitCategory.TEMPERATURE.is_linear
