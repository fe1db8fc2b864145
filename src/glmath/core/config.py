"""Numeric constants shared by the math core."""

import numpy as np


# Internal storage precision for matrices and vectors
STORAGE_DTYPE = np.float64

# Precision of exported arrays (matches a GL float uniform)
UPLOAD_DTYPE = np.float32

IDENTITY_ROW_MAJOR = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)

DEFAULT_HTML_PRECISION = 2
DEFAULT_TOLERANCE = 1e-6
