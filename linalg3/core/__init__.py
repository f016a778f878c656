"""
linalg3 Core - Fixed-size value types over a generic numeric element type.
"""

from linalg3.core.numeric import Numeric, FloatConvertible, NumericTypeError
from linalg3.core.vector import Vector
from linalg3.core.matrix import Matrix
from linalg3.core.rotation import (
    rotation_matrix,
    rotation_matrix_degree,
    rotate_vector,
    rotate_vector_degree,
)

__all__ = [
    "Numeric", "FloatConvertible", "NumericTypeError", "Vector", "Matrix",
    "rotation_matrix", "rotation_matrix_degree", "rotate_vector", "rotate_vector_degree",
]
