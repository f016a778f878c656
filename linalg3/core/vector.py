from dataclasses import dataclass
from typing import Generic, Type

import numpy as np

from .base import Compound
from .numeric import T, from_float, to_float


@dataclass
class Vector(Compound, Generic[T]):
    """
    3D Vector / Point: (x, y, z) over a numeric element type T.

    Value semantics: operators return new vectors, augmented
    assignment (+=, -=, *=, /=) overwrites the receiver.
    Equality is exact and componentwise; use allclose() for floats.
    """
    x: T
    y: T
    z: T

    @classmethod
    def scalar(cls, value: T) -> 'Vector[T]':
        return cls(value, value, value)

    @classmethod
    def default(cls, dtype: Type = float) -> 'Vector':
        zero = dtype()
        return cls(zero, zero, zero)

    @classmethod
    def x_axis(cls, dtype: Type = float) -> 'Vector':
        return cls(from_float(dtype, 1.0), from_float(dtype, 0.0), from_float(dtype, 0.0))

    @classmethod
    def y_axis(cls, dtype: Type = float) -> 'Vector':
        return cls(from_float(dtype, 0.0), from_float(dtype, 1.0), from_float(dtype, 0.0))

    @classmethod
    def z_axis(cls, dtype: Type = float) -> 'Vector':
        return cls(from_float(dtype, 0.0), from_float(dtype, 0.0), from_float(dtype, 1.0))

    @classmethod
    def from_array(cls, array) -> 'Vector':
        """Build from a (3,) array-like. Components keep the array's scalar type."""
        arr = np.asarray(array)
        if arr.shape != (3,):
            raise ValueError(f"Vector needs shape (3,), got {arr.shape}")
        return cls(*arr)

    def to_array(self, dtype=None) -> np.ndarray:
        return np.array(self.components(), dtype=dtype)

    # === Products ===

    def dot(self, other: 'Vector[T]') -> T:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: 'Vector[T]') -> 'Vector[T]':
        """Right-handed cross product: x_axis × y_axis = z_axis."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # === Metric (float capability) ===

    def magnitude_squared(self) -> T:
        """Exact in T, no float round trip."""
        return self.dot(self)

    def magnitude(self) -> float:
        return float(np.sqrt(to_float(self.magnitude_squared())))

    def normalize(self) -> 'Vector[T]':
        """
        Unit vector with the same direction.

        The zero vector has no direction: the division by zero is left to
        the element type (float raises ZeroDivisionError, numpy floats
        give nan with a RuntimeWarning). Callers must guard.
        """
        return self / from_float(self.dtype, self.magnitude())

    def angle(self, other: 'Vector[T]') -> float:
        """
        Angle between self and other in radians, in [0, π].

        θ = acos(a·b / (|a| |b|)), cosine clipped to [-1, 1] against rounding.
        Undefined for zero vectors (ZeroDivisionError on float magnitudes).
        """
        cosine = to_float(self.dot(other)) / (self.magnitude() * other.magnitude())
        return float(np.arccos(np.clip(cosine, -1.0, 1.0)))

    # === Rotation (see rotation.py) ===

    def rotate_around(self, radians: float, axis: 'Vector') -> 'Vector':
        """Rotate self by radians around axis (axis is used as given, not normalized)."""
        from .rotation import rotate_vector
        return rotate_vector(self, radians, axis)

    def rotate_degree_around(self, degrees: float, axis: 'Vector') -> 'Vector':
        from .rotation import rotate_vector_degree
        return rotate_vector_degree(self, degrees, axis)
