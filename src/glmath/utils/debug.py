"""Debug utilities."""

from __future__ import annotations
import os

DEBUG_ENV_VAR = "GLMATH_DEBUG"


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled via environment variable."""
    return os.environ.get(DEBUG_ENV_VAR, "0").lower() not in ("0", "", "false")


def debug_print(*args, **kwargs):
    """Print debug message if debug mode is enabled."""
    if is_debug_enabled():
        print(*args, **kwargs)


def debug_matrix_info(name: str, matrix):
    """Print the logical rows of a Matrix4 (or any 4x4 array) in debug mode."""
    if is_debug_enabled():
        rows = matrix.rows() if hasattr(matrix, "rows") else matrix
        print(f"[{name}]")
        for row in rows:
            print("  " + " ".join(f"{float(v):10.4f}" for v in row))
