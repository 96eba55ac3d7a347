"""
Colors component - colour filters composed with plain functions.
"""

from .component import (
    FILTER_NAMES,
    Camera,
    brighten,
    darken,
    filter_chain,
    grayscale,
    negate,
)
from .models import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    Color,
    ColorError,
    ColorFilter,
    ColorValueError,
    FilterName,
)

__all__ = [
    # Pure functions
    "brighten",
    "darken",
    "negate",
    "grayscale",
    "filter_chain",
    # Composition
    "Camera",
    # Constants
    "FILTER_NAMES",
    "CHANNEL_MIN",
    "CHANNEL_MAX",
    # Models
    "Color",
    "ColorFilter",
    "FilterName",
    # Errors
    "ColorError",
    "ColorValueError",
]
