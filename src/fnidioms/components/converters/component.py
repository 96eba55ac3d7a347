"""
Converters component - currying via partial application.

Every unit conversion here is value * factor + baseline. Fixing factor
and baseline up front with functools.partial leaves a one-argument
function that can be named, stored and composed.
"""

from __future__ import annotations

from functools import partial

from fnidioms.functional import pipe

from .models import Converter, ConverterSpec, UnknownConverterError


def convert(factor: float, baseline: float, value: float) -> float:
    return value * factor + baseline


def curried_converter(factor: float, baseline: float = 0.0) -> Converter:
    """Fix `factor` and `baseline`, leaving the value to convert."""
    return partial(convert, factor, baseline)


# --- Predefined Converters ---

CONVERTER_SPECS: tuple[ConverterSpec, ...] = (
    ConverterSpec("c2f", 9 / 5, 32.0, "Celsius to Fahrenheit"),
    ConverterSpec("f2c", 5 / 9, -160 / 9, "Fahrenheit to Celsius"),
    ConverterSpec("km2mi", 0.621371, description="Kilometres to miles"),
    ConverterSpec("mi2km", 1.609344, description="Miles to kilometres"),
    ConverterSpec("kg2lb", 2.20462, description="Kilograms to pounds"),
)

CONVERTERS: dict[str, Converter] = {
    spec.name: curried_converter(spec.factor, spec.baseline) for spec in CONVERTER_SPECS
}

celsius_to_fahrenheit = CONVERTERS["c2f"]
fahrenheit_to_celsius = CONVERTERS["f2c"]
km_to_miles = CONVERTERS["km2mi"]
miles_to_km = CONVERTERS["mi2km"]
kg_to_pounds = CONVERTERS["kg2lb"]


def get_converter(name: str) -> Converter:
    """
    Look up a predefined converter.

    Raises:
        UnknownConverterError: If `name` is not registered
    """
    try:
        return CONVERTERS[name]
    except KeyError:
        raise UnknownConverterError(name, tuple(CONVERTERS)) from None


def chain_converters(*names: str) -> Converter:
    """Compose registered converters left to right, e.g. ("mi2km", "km2mi")."""
    converter: Converter = pipe(*(get_converter(name) for name in names))
    return converter
