import os

from vec3py import vecmath
from vec3py.logging import (InvalidOperandCombination, Vec3Error,
                            Vec3ValueError, config_logging,
                            set_up_simple_logging)
from vec3py.vecmath import (angle_between, cross, distance, distance_sq, dot,
                            mag, magnitude, scalar_prod, unit, vector_prod)
from vec3py.vector3 import Vector3, is_vector3, to_str


def read(fil):
    fil = os.path.join(os.path.dirname(__file__), fil)
    with open(fil, encoding="utf-8") as f:
        return f.read()


__version__ = read("version.txt")
