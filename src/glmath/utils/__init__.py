"""Common utilities."""

from .conversion import (
    to_numpy_array,
    to_vector3,
)
from .projection_2d import project_points_to_screen
from .validation import (
    validate_points,
    validate_viewport,
)
from .debug import (
    is_debug_enabled,
    debug_print,
    debug_matrix_info,
)

__all__ = [
    # Conversion
    "to_numpy_array",
    "to_vector3",

    # Projection
    "project_points_to_screen",

    # Validation
    "validate_points",
    "validate_viewport",

    # Debug
    "is_debug_enabled",
    "debug_print",
    "debug_matrix_info",
]
