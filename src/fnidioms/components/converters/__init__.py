"""
Converters component - curried linear unit converters.
"""

from .component import (
    CONVERTER_SPECS,
    CONVERTERS,
    celsius_to_fahrenheit,
    chain_converters,
    convert,
    curried_converter,
    fahrenheit_to_celsius,
    get_converter,
    kg_to_pounds,
    km_to_miles,
    miles_to_km,
)
from .models import (
    Converter,
    ConverterError,
    ConverterSpec,
    UnknownConverterError,
)

__all__ = [
    # Pure functions
    "convert",
    "curried_converter",
    "get_converter",
    "chain_converters",
    # Predefined
    "CONVERTERS",
    "CONVERTER_SPECS",
    "celsius_to_fahrenheit",
    "fahrenheit_to_celsius",
    "km_to_miles",
    "miles_to_km",
    "kg_to_pounds",
    # Models
    "Converter",
    "ConverterSpec",
    # Errors
    "ConverterError",
    "UnknownConverterError",
]
