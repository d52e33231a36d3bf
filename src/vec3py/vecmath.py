"""
.. module:: vecmath
    :synopsis: Stateless utility functions operating on vectors. Every function
               accepts anything :class:`Vector3 <vec3py.vector3.Vector3>` can be
               created from.
"""

from __future__ import annotations

import builtins
import math
from logging import getLogger
from typing import TYPE_CHECKING

from vec3py.logging import LOGGER_ID, Vec3ValueError
from vec3py.vector3 import Vector3, is_vector3, to_str

if TYPE_CHECKING:
    from vec3py.types import Vec3Like

module_logger = getLogger(f"{LOGGER_ID}.vecmath")

__all__ = [
    "magnitude",
    "mag",
    "unit",
    "dot",
    "scalar_prod",
    "cross",
    "vector_prod",
    "angle_between",
    "distance_sq",
    "distance",
    "is_vector3",
    "to_str",
]


def magnitude(vec: Vec3Like) -> float:
    """
    The length (magnitude) of the vector. [ ie :math:`length := |vector|` ]

    Args:
        vec: The vector.

    Returns:
        The length of the vector (a scalar value).
    """
    vec = Vector3(vec)
    # no underflow or overflow for tiny or huge components
    return math.hypot(vec.x, vec.y, vec.z)


mag = magnitude


def unit(vec: Vec3Like) -> Vector3:
    """
    Returns the unit vector pointing in the direction of the given vector.

    Args:
        vec: The vector.

    Returns:
        The vector divided by its own magnitude.

    Raises:
        Vec3ValueError: If the vector has zero length.
    """
    vec = Vector3(vec)
    length = magnitude(vec)
    if length == 0.0:
        raise Vec3ValueError(f"Cannot normalize zero-length vector {vec}.")
    return vec / length


def abs(vec: Vec3Like) -> Vector3:
    """
    Returns a vector where each element is the absolute value of the corresponding element in ``vec``.
    """
    return builtins.abs(Vector3(vec))


def dot(a: Vec3Like, b: Vec3Like) -> float:
    """
    The dot product (scalar product) of two vectors.

    Args:
        a: The first vector.
        b: The second vector.

    Returns:
        The dot product between the two vectors (a scalar value).
    """
    a = Vector3(a)
    b = Vector3(b)
    return a.x * b.x + a.y * b.y + a.z * b.z


scalar_prod = dot


def cross(a: Vec3Like, b: Vec3Like) -> Vector3:
    """
    The cross product (vector product) of two vectors.

    Args:
        a: The first vector.
        b: The second vector.

    Returns:
        The cross product between the two vectors (a vector value).
    """
    a = Vector3(a)
    b = Vector3(b)
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


vector_prod = cross


def angle_between(a: Vec3Like, b: Vec3Like) -> float:
    """
    The angle between two vectors, in radians.

    This is a comparatively expensive operation: it takes a dot product, two
    magnitudes and an arccosine.

    Args:
        a: The first vector.
        b: The second vector.

    Returns:
        The angle in the range :math:`[0, \\pi]`.

    Raises:
        Vec3ValueError: If one of the vectors has zero length.
    """
    if magnitude(a) == 0.0 or magnitude(b) == 0.0:
        raise Vec3ValueError(
            f"Angle is undefined for zero-length vectors {to_str(a)} and {to_str(b)}."
        )
    # dot(a, b) / (|a| * |b|) on the unit vectors, which cannot underflow
    cos_angle = dot(unit(a), unit(b))
    if builtins.abs(cos_angle) > 1.0:
        module_logger.debug(f"Clamping cosine {cos_angle} to the domain of acos.")
        cos_angle = max(-1.0, min(1.0, cos_angle))
    return math.acos(cos_angle)


def distance_sq(a: Vec3Like, b: Vec3Like) -> float:
    """
    The squared Euclidean distance between two vectors.

    Args:
        a: The first vector.
        b: The second vector.

    Returns:
        The squared distance between the two vectors (a scalar value).
    """
    a = Vector3(a)
    b = Vector3(b)
    dx = b.x - a.x
    dy = b.y - a.y
    dz = b.z - a.z
    return dx * dx + dy * dy + dz * dz


def distance(a: Vec3Like, b: Vec3Like) -> float:
    """
    The :math:`L^2` (Euclidean) distance between two vectors. AKA the distance formula.
    """
    return math.sqrt(distance_sq(a, b))
