"""
.. module:: vector3
    :synopsis: The ``Vector3`` value type: coercion of scalars and vector-shaped
               values, arithmetic operators and the textual representation.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping, Sequence
from logging import getLogger
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable, Iterator, List

import numpy as np
from numpy import ndarray

from vec3py.logging import (LOGGER_ID, InvalidOperandCombination,
                            Vec3ValueError, create_warning)

if TYPE_CHECKING:
    from vec3py.types import Scalar, Vec3Like

module_logger = getLogger(f"{LOGGER_ID}.vector3")

COMPONENT_NAMES = ("x", "y", "z")
# positional and named keys of a vector-shaped value, mapped to their slot
KEY_SLOTS = {0: 0, 1: 1, 2: 2, "x": 0, "y": 1, "z": 2}


def is_scalar(value: Any) -> bool:
    """
    Checks whether the value is a plain real number (NumPy scalars included).
    """
    return isinstance(value, Real)


def _is_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    if isinstance(value, ndarray):
        return value.ndim == 1
    return isinstance(value, Sequence)


def _is_aggregate(value: Any) -> bool:
    return isinstance(value, (Vector3, Mapping)) or _is_sequence(value)


def _is_operand(value: Any) -> bool:
    return is_scalar(value) or _is_aggregate(value)


def _slot_of(key: Any) -> int | None:
    try:
        return KEY_SLOTS.get(key)
    except TypeError:  # unhashable key
        return None


def _check_component(value: Any, name: str) -> Scalar:
    if not is_scalar(value):
        raise Vec3ValueError(
            f"Vector3 component '{name}' has to be a number, got '{type(value).__name__}'."
        )
    return value


def _components_of(value: Any) -> List[Any]:
    if value is None:
        return [0, 0, 0]
    if is_scalar(value):
        return [value, value, value]
    if isinstance(value, Vector3):
        return [value.x, value.y, value.z]
    if isinstance(value, Mapping):
        return [
            value[i] if i in value else value.get(name, 0)
            for i, name in enumerate(COMPONENT_NAMES)
        ]
    if _is_sequence(value):
        items = [value[i] for i in range(min(len(value), 3))]
        return items + [0] * (3 - len(items))
    raise Vec3ValueError(
        f"Cannot create a Vector3 from a value of type '{type(value).__name__}'."
    )


def is_vector3(value: Any) -> bool:
    """
    Checks whether the given value is shaped like a vector, i.e. whether it is a
    :class:`Vector3`, a sequence of at most three elements, or a mapping which only
    has the keys ``0``, ``1``, ``2``, ``'x'``, ``'y'`` and ``'z'``.

    Args:
        value: The value to check. Can be of any type.

    Returns:
        True if the value is vector-shaped. ``None``, numbers, strings and any
        other objects are not vectors.
    """
    if value is None:
        return False
    if isinstance(value, Vector3):
        return True
    if isinstance(value, Mapping):
        return all(_slot_of(key) is not None for key in value)
    if _is_sequence(value):
        return len(value) <= 3
    return False


def to_str(value: Any) -> str:
    """
    Converts a vector-shaped value to the string representation
    ``{ [1]: <x>, [2]: <y>, [3]: <z>, }``. Any other value is converted with ``str``.

    Args:
        value: The value to convert.

    Returns:
        The string representation.
    """
    if not is_vector3(value):
        return str(value)
    vec = value if isinstance(value, Vector3) else Vector3(value)
    entries = "".join(f"[{i}]: {c}, " for i, c in enumerate(vec, start=1))
    return "{ " + entries + "}"


def _elementwise(op: Callable[[Any, Any], Any], lh: Any, rh: Any) -> Vector3:
    a = Vector3(lh)
    b = Vector3(rh)
    return Vector3(op(a.x, b.x), op(a.y, b.y), op(a.z, b.z))


def _real_pow(base: Any, exponent: Any) -> Any:
    result = operator.pow(base, exponent)
    # negative base with a fractional exponent
    if isinstance(result, complex):
        return float("nan")
    return result


def _describe(value: Any) -> str:
    try:
        return to_str(value)
    except Vec3ValueError:
        return str(value)


def _scalar_op(op: Callable[[Any, Any], Any], verb: str, lh: Any, rh: Any) -> Vector3 | None:
    if not (_is_operand(lh) and _is_operand(rh)):
        return NotImplemented
    if not is_scalar(lh) and not is_scalar(rh):
        msg = (
            f"Tried to {verb} a Vector3 with a non-numeric type: "
            f"lh = {_describe(lh)}, of type '{type(lh).__name__}'; "
            f"rh = {_describe(rh)}, of type '{type(rh).__name__}'."
        )
        # the warning filters may drop repeats, the log record is written every time
        module_logger.warning(msg)
        create_warning(msg, InvalidOperandCombination)
        return None
    return _elementwise(op, lh, rh)


class Vector3:
    """
    A vector in :math:`R^3` with the components ``x``, ``y`` and ``z``, which can also be
    accessed by position (``v[0]``, ``v[1]``, ``v[2]``).

    The constructor doubles as the coercion function:

        - ``Vector3()`` is the zero vector,
        - ``Vector3(s)`` repeats the number ``s`` in all three components,
        - ``Vector3(v)`` copies another vector,
        - ``Vector3(values)`` takes up to three values from a sequence, or the keys ``0``/``x``,
          ``1``/``y`` and ``2``/``z`` from a mapping. Missing values default to zero,
          everything else is ignored.
        - ``Vector3(x, y, z)`` sets the components directly, ``z`` is optional.

    Arithmetic operators always return a new vector. Addition, subtraction and power broadcast
    numbers to vectors. Multiplication and division need at least one number; multiplying or
    dividing two vectors issues an :class:`InvalidOperandCombination <vec3py.logging.InvalidOperandCombination>`
    warning and returns ``None``. Adding a string concatenates it with the string representation.

    Args:
        x: The x-coordinate, or a value to coerce when it is the only argument.
        y (optional): The y-coordinate.
        z (optional): The z-coordinate.
    """

    __slots__ = COMPONENT_NAMES
    # makes NumPy arrays defer to the operators of this class
    __array_ufunc__ = None

    def __init__(self, x: Vec3Like | Scalar | None = None, y: Scalar | None = None, z: Scalar | None = None):
        if y is None and z is None:
            components = _components_of(x)
        else:
            components = [x, 0 if y is None else y, 0 if z is None else z]
        for name, value in zip(COMPONENT_NAMES, components):
            object.__setattr__(self, name, _check_component(value, name))

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in COMPONENT_NAMES:
            module_logger.debug(f"Ignoring assignment to unknown Vector3 attribute '{name}'.")
            return
        object.__setattr__(self, name, _check_component(value, name))

    def __getitem__(self, n: int | str) -> Any:
        """
        Returns the n-th element of the vector, starting by zero. The names ``'x'``,
        ``'y'`` and ``'z'`` are accepted as well.

        Args:
            n: The index or the name of the element to return.

        Returns:
            The vector element at n-th index.
        """
        if isinstance(n, str):
            if n not in COMPONENT_NAMES:
                raise KeyError(n)
            return getattr(self, n)
        return (self.x, self.y, self.z)[n]

    def __setitem__(self, key: int | str, value: Scalar) -> None:
        slot = _slot_of(key)
        if slot is None:
            module_logger.debug(f"Ignoring assignment to unknown Vector3 key {key!r}.")
            return
        setattr(self, COMPONENT_NAMES[slot], value)

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[Any]:
        return iter((self.x, self.y, self.z))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return (self.x, self.y, self.z) == (other.x, other.y, other.z)

    # components can be reassigned
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"

    def __str__(self) -> str:
        return to_str(self)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vector3:
        return Vector3(self)

    def __abs__(self) -> Vector3:
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def __add__(self, b: Any) -> Vector3 | str:
        """
        Vector addition, or concatenation when ``b`` is a string.

        Args:
            b: A vector, a number broadcast to a vector, or a string.

        Returns:
            The sum of the two vectors, or the concatenated string.
        """
        if isinstance(b, str):
            return to_str(self) + b
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(operator.add, self, b)

    def __radd__(self, b: Any) -> Vector3 | str:
        if isinstance(b, str):
            return b + to_str(self)
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(operator.add, b, self)

    def __sub__(self, b: Any) -> Vector3:
        """
        Vector subtraction.

        Args:
            b: A vector, or a number broadcast to a vector.

        Returns:
            The difference of the two vectors.
        """
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(operator.sub, self, b)

    def __rsub__(self, b: Any) -> Vector3:
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(operator.sub, b, self)

    def __mul__(self, b: Any) -> Vector3 | None:
        """
        Scalar multiplication.

        Args:
            b: A given scalar value to be multiplied to this vector (from either left or right).

        Returns:
            This vector multiplied by the given scalar value, or ``None`` if ``b`` is a vector.
        """
        return _scalar_op(operator.mul, "multiply", self, b)

    def __rmul__(self, b: Any) -> Vector3 | None:
        return _scalar_op(operator.mul, "multiply", b, self)

    def __truediv__(self, b: Any) -> Vector3 | None:
        """
        Scalar division. Division by a zero component raises ``ZeroDivisionError``.

        Args:
            b: A given scalar value by which to divide this vector.

        Returns:
            This vector divided by the given scalar value, or ``None`` if ``b`` is a vector.
        """
        return _scalar_op(operator.truediv, "divide", self, b)

    def __rtruediv__(self, b: Any) -> Vector3 | None:
        return _scalar_op(operator.truediv, "divide", b, self)

    def __pow__(self, b: Any) -> Vector3:
        """
        Elementwise power. Unlike multiplication, the exponent can be another vector.
        A negative component raised to a fractional exponent has no real result
        and becomes ``nan``.

        Args:
            b: The exponent, a number or a vector.

        Returns:
            The vector of each component raised to the corresponding exponent.
        """
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(_real_pow, self, b)

    def __rpow__(self, b: Any) -> Vector3:
        if not _is_operand(b):
            return NotImplemented
        return _elementwise(_real_pow, b, self)

    def to_numpy(self) -> ndarray:
        """
        Returns:
            The components as a ``NumPy`` array of floats.
        """
        return np.array([self.x, self.y, self.z], dtype=float)
