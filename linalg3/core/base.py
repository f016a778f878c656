#!/usr/bin/env python3
"""
base.py - Common Base for Fixed-Size Value Types.
Shared componentwise machinery for Vector and Matrix.
"""
import operator
from dataclasses import fields
from typing import Any, Callable, Tuple, Type

import numpy as np

from .numeric import NumericTypeError, is_numeric, promote


class Compound:
    """
    Fixed-size grid of numeric components, stored as dataclass fields.

    Subclasses are dataclasses; field order is the component order.
    """
    EPSILON = 1e-6  # Default absolute tolerance for allclose()

    # numpy binary ops defer to our reflected operators (np.float32(2) * v).
    __array_ufunc__ = None

    def __post_init__(self):
        for value in self.components():
            if isinstance(value, Compound) or not is_numeric(value):
                raise NumericTypeError(
                    f"{type(self).__name__} component {value!r} "
                    f"({type(value).__name__}) is not a numeric element type"
                )

    # === Components ===

    def components(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def __iter__(self):
        return iter(self.components())

    @property
    def dtype(self) -> Type:
        """Element type promoted across all components: Vector(0, 0.3, 0.4).dtype is float."""
        return promote(self.components())

    def copy(self):
        return type(self)(*self.components())

    def _assign(self, other: 'Compound') -> 'Compound':
        """Overwrite every component of self in place."""
        for f, value in zip(fields(self), other.components()):
            setattr(self, f.name, value)
        return self

    # === Componentwise Combination ===

    def _combine(self, other: 'Compound', op: Callable[[Any, Any], Any]):
        return type(self)(*map(op, self.components(), other.components()))

    def _broadcast(self, scalar: Any, op: Callable[[Any, Any], Any]):
        return type(self)(*(op(c, scalar) for c in self.components()))

    def _accepts(self, other: Any) -> bool:
        return type(other) is type(self)

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return not isinstance(value, Compound) and is_numeric(value)

    def __add__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self._combine(other, operator.add)

    def __sub__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self._combine(other, operator.sub)

    def __iadd__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self._assign(self._combine(other, operator.add))

    def __isub__(self, other):
        if not self._accepts(other):
            return NotImplemented
        return self._assign(self._combine(other, operator.sub))

    def __neg__(self):
        zero = self.dtype()
        return type(self)(*(zero - c for c in self.components()))

    # Scalar ops. Division by zero is left to the element type.

    def _scale(self, scalar):
        return self._broadcast(scalar, operator.mul)

    def __mul__(self, other):
        if not self._is_scalar(other):
            return NotImplemented
        return self._scale(other)

    def __rmul__(self, other):
        if not self._is_scalar(other):
            return NotImplemented
        return type(self)(*(other * c for c in self.components()))

    def __truediv__(self, other):
        if not self._is_scalar(other):
            return NotImplemented
        return self._broadcast(other, operator.truediv)

    def __imul__(self, other):
        if not self._is_scalar(other):
            return NotImplemented
        return self._assign(self._scale(other))

    def __itruediv__(self, other):
        if not self._is_scalar(other):
            return NotImplemented
        return self._assign(self._broadcast(other, operator.truediv))

    # === Comparison ===

    def allclose(self, other: 'Compound', atol: float = None) -> bool:
        """Approximate componentwise equality (exact equality is ==)."""
        if atol is None:
            atol = self.EPSILON
        a = np.array(self.components(), dtype=float)
        b = np.array(other.components(), dtype=float)
        return bool(np.allclose(a, b, rtol=0.0, atol=atol))
