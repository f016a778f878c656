"""
linalg3 - Generic 3D vector and 3x3 matrix algebra.

Core modules:
- linalg3.core: Vector, Matrix, rotations, element type capabilities
- linalg3.logging_config: opt-in logging setup
"""

from linalg3.core import (
    Vector,
    Matrix,
    Numeric,
    FloatConvertible,
    NumericTypeError,
    rotation_matrix,
    rotation_matrix_degree,
    rotate_vector,
    rotate_vector_degree,
)
from linalg3.logging_config import setup_logging

__version__ = "1.0.0"
__all__ = [
    "Vector", "Matrix", "Numeric", "FloatConvertible", "NumericTypeError",
    "rotation_matrix", "rotation_matrix_degree", "rotate_vector", "rotate_vector_degree",
    "setup_logging",
]
