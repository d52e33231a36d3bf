from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

if TYPE_CHECKING:
    from vec3py.vector3 import Vector3

# these empty comments are because of the autodocumentation

Scalar = Union[int, float]
""
Vec3Like = Union["Vector3", Sequence[Scalar], Mapping[Any, Scalar]]
"""
Anything that can be coerced into a :class:`Vector3 <vec3py.vector3.Vector3>`:

    - another ``Vector3``,
    - a sequence (list, tuple, one-dimensional ``NumPy`` array) of at most three numbers,
    - a mapping whose keys are among ``0``, ``1``, ``2``, ``'x'``, ``'y'`` and ``'z'``.
"""
