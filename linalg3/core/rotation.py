"""
rotation.py - Axis-Angle Rotations (Rodrigues).

R(θ, k) = cos θ I + sin θ [k]ₓ + (1 - cos θ) k kᵀ

The axis k is used exactly as given. A non-unit axis yields a scaled /
sheared map, not an error; normalize() it first for a true rotation.
Positive angles turn counter-clockwise looking down the axis:
R(π/2, z_axis) @ x_axis = y_axis.
"""
import logging
from typing import Type

import numpy as np

from .matrix import Matrix
from .numeric import from_float, promote, to_float
from .vector import Vector

logger = logging.getLogger(__name__)

# |k|² further than this from 1 is logged as a non-unit axis.
UNIT_TOLERANCE = 1e-6


def rotation_matrix(radians: float, axis: Vector, dtype: Type = None) -> Matrix:
    """
    Build the rotation matrix for angle (radians) around axis.

    Cells are computed in float and converted to dtype, by default the
    axis element type promoted across its components.
    """
    x, y, z = (to_float(c) for c in axis)
    if abs(x * x + y * y + z * z - 1.0) > UNIT_TOLERANCE:
        logger.debug("Rotation axis %r is not a unit vector", axis)

    c, s = float(np.cos(radians)), float(np.sin(radians))
    t = 1.0 - c

    cells = (
        t * x * x + c,     t * x * y - s * z, t * x * z + s * y,
        t * x * y + s * z, t * y * y + c,     t * y * z - s * x,
        t * x * z - s * y, t * y * z + s * x, t * z * z + c,
    )
    if dtype is None:
        dtype = axis.dtype
    return Matrix(*(from_float(dtype, v) for v in cells))


def rotation_matrix_degree(degrees: float, axis: Vector, dtype: Type = None) -> Matrix:
    return rotation_matrix(degrees * np.pi / 180.0, axis, dtype)


def rotate_vector(vector: Vector, radians: float, axis: Vector) -> Vector:
    # Matrix cells take the type common to vector and axis.
    dtype = promote((*vector, *axis))
    return rotation_matrix(radians, axis, dtype) @ vector


def rotate_vector_degree(vector: Vector, degrees: float, axis: Vector) -> Vector:
    return rotate_vector(vector, degrees * np.pi / 180.0, axis)
