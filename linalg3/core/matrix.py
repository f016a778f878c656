import logging
from dataclasses import dataclass
from typing import Generic, Optional, Tuple, Type

import numpy as np

from .base import Compound
from .numeric import T, from_float, to_float
from .vector import Vector

logger = logging.getLogger(__name__)


@dataclass
class Matrix(Compound, Generic[T]):
    """
    3x3 Linear Map over a numeric element type T.
    Cells are row-major: m11 m12 m13 / m21 m22 m23 / m31 m32 m33.

    Products: M @ N (also M * N) and M @ v (also M * v).
    * and / with a scalar act on every cell.
    """
    m11: T
    m12: T
    m13: T
    m21: T
    m22: T
    m23: T
    m31: T
    m32: T
    m33: T

    @classmethod
    def scalar(cls, value: T) -> 'Matrix[T]':
        return cls(*(value,) * 9)

    @classmethod
    def default(cls, dtype: Type = float) -> 'Matrix':
        return cls.scalar(dtype())

    @classmethod
    def unity(cls, dtype: Type = float) -> 'Matrix':
        one, zero = from_float(dtype, 1.0), from_float(dtype, 0.0)
        return cls(one, zero, zero,
                   zero, one, zero,
                   zero, zero, one)

    @classmethod
    def from_rows(cls, r1: Vector, r2: Vector, r3: Vector) -> 'Matrix':
        return cls(*r1, *r2, *r3)

    @classmethod
    def from_array(cls, array) -> 'Matrix':
        """Build from a (3, 3) array-like, rows first."""
        arr = np.asarray(array)
        if arr.shape != (3, 3):
            raise ValueError(f"Matrix needs shape (3, 3), got {arr.shape}")
        return cls(*arr.reshape(-1))

    @classmethod
    def rotation(cls, radians: float, axis: Vector) -> 'Matrix':
        from .rotation import rotation_matrix
        return rotation_matrix(radians, axis)

    @classmethod
    def rotation_degree(cls, degrees: float, axis: Vector) -> 'Matrix':
        from .rotation import rotation_matrix_degree
        return rotation_matrix_degree(degrees, axis)

    def to_array(self, dtype=None) -> np.ndarray:
        return np.array(self.components(), dtype=dtype).reshape(3, 3)

    # === Structure ===

    def rows(self) -> Tuple[Vector, Vector, Vector]:
        return (Vector(self.m11, self.m12, self.m13),
                Vector(self.m21, self.m22, self.m23),
                Vector(self.m31, self.m32, self.m33))

    def columns(self) -> Tuple[Vector, Vector, Vector]:
        return self.transpose().rows()

    def row(self, i: int) -> Vector:
        return self.rows()[i]

    def column(self, i: int) -> Vector:
        return self.columns()[i]

    def transpose(self) -> 'Matrix[T]':
        return Matrix(self.m11, self.m21, self.m31,
                      self.m12, self.m22, self.m32,
                      self.m13, self.m23, self.m33)

    # === Algebra ===

    def determinant(self) -> T:
        """Cofactor expansion along the first row, exact in T."""
        return (self.m11 * (self.m22 * self.m33 - self.m23 * self.m32)
                - self.m12 * (self.m21 * self.m33 - self.m23 * self.m31)
                + self.m13 * (self.m21 * self.m32 - self.m22 * self.m31))

    @property
    def is_invertible(self) -> bool:
        """True if det ≠ 0 (exact comparison in T, no tolerance)."""
        return not self.determinant() == self.dtype()

    def inverse(self) -> Optional['Matrix[T]']:
        """
        M⁻¹ = adj(M) / det(M), or None when det(M) == 0.

        The zero test is exact, so a nearly singular float matrix still
        inverts (to huge cells). 1/det goes through float and back to T.
        """
        det = self.determinant()
        if det == self.dtype():
            logger.debug("Singular matrix, no inverse: %r", self)
            return None
        inv_det = from_float(self.dtype, 1.0 / to_float(det))
        # Columns of adj(M) are the cross products of row pairs.
        r1, r2, r3 = self.rows()
        adjugate = Matrix.from_rows(r2.cross(r3), r3.cross(r1), r1.cross(r2)).transpose()
        return adjugate * inv_det

    def _matmul(self, other: 'Matrix[T]') -> 'Matrix[T]':
        cols = other.columns()
        return Matrix(*(r.dot(c) for r in self.rows() for c in cols))

    def _apply(self, v: Vector) -> Vector:
        return Vector(*(r.dot(v) for r in self.rows()))

    def __matmul__(self, other):
        if isinstance(other, Matrix):
            return self._matmul(other)
        if isinstance(other, Vector):
            return self._apply(other)
        return NotImplemented

    def __imatmul__(self, other):
        if isinstance(other, Vector):
            # The product is a Vector; it cannot be stored in place.
            raise TypeError("in-place product of Matrix with Vector is undefined; use m @ v")
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._assign(self._matmul(other))

    def __mul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.__matmul__(other)
        return super().__mul__(other)

    def __imul__(self, other):
        if isinstance(other, (Matrix, Vector)):
            return self.__imatmul__(other)
        return super().__imul__(other)
