"""
numeric.py - Element Type Capabilities.

Two independent capability sets:
- Numeric: closed + - * /, equality, zero via T() (int, float, Fraction, Decimal, numpy scalars)
- FloatConvertible: float(v) and T(f) round trip (possibly lossy)

Only operations needing sqrt/acos/cos/sin require the second one.
"""
import operator
from functools import reduce
from typing import Any, Iterable, Protocol, Type, TypeVar, runtime_checkable

import numpy as np


class NumericTypeError(TypeError):
    """Raised when a value does not satisfy an element type capability."""
    pass


@runtime_checkable
class Numeric(Protocol):
    """Capabilities every vector/matrix component must provide."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __eq__(self, other: object) -> bool: ...


@runtime_checkable
class FloatConvertible(Protocol):
    """Narrower capability: one-step conversion to a Python float."""

    def __float__(self) -> float: ...


T = TypeVar('T', bound=Numeric)


def is_numeric(value: Any) -> bool:
    """True if value can serve as a scalar component."""
    # bool passes the protocol (int subclass) but is not a component type.
    if isinstance(value, (bool, np.bool_, np.ndarray)):
        return False
    return isinstance(value, Numeric)


def require_float_convertible(value: Any) -> None:
    if not isinstance(value, FloatConvertible):
        raise NumericTypeError(
            f"{type(value).__name__} cannot be converted to float"
        )


def zero(dtype: Type[T]) -> T:
    """Default (zero) value of an element type: T()."""
    return dtype()


def to_float(value: Any) -> float:
    require_float_convertible(value)
    return float(value)


def from_float(dtype: Type[T], value: float) -> T:
    """
    Convert a Python float back to the element type.

    Lossy for integral types: int(0.7) == 0.
    """
    require_float_convertible(dtype())
    return dtype(value)


def promote(values: Iterable[Any]) -> Type:
    """
    Common element type of values: the type of their sum.

    (0, 0.3, 0.4) -> float, (1, Fraction(1, 2)) -> Fraction, ints stay int.
    """
    return type(reduce(operator.add, values))
