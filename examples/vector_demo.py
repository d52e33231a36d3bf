"""
.. module:: vector_demo

    :synopsis: Example code printing the results of the vector operators and
               utilities for two sample vectors and a number.

"""

from vec3py import Vector3, set_up_simple_logging, vecmath


def main():
    set_up_simple_logging()

    # define vectors v1 and v2, and a number n
    v1 = Vector3([1, 5, 2])
    v2 = Vector3([10, -2, -6])
    n = 5

    print("v1: " + v1)
    print("v2: " + v2)
    print("n: " + str(n))
    print("---\n")

    print("v1 + v2 = " + (v1 + v2))
    print("v2 + v1 = " + (v2 + v1))
    print("v1 + n = " + (v1 + n))
    print("n + v2 = " + (n + v2))
    print("---\n")

    print("v1 - v2 = " + (v1 - v2))
    print("v2 - v1 = " + (v2 - v1))
    print("v1 - n = " + (v1 - n))
    print("n - v2 = " + (n - v2))
    print("---\n")

    print("v1 * n = " + (v1 * n))
    print("n * v2 = " + (n * v2))
    print("error on v1 * v2: " + str(v1 * v2))
    print("---\n")

    print("v1 / n = " + (v1 / n))
    print("n / v2 = " + (n / v2))
    print("error on v1 / v2: " + str(v1 / v2))
    print("---\n")

    print("v1 ^ n = " + (v1**n))
    print("n ^ v2 = " + (n**v2))
    print("---\n")

    print("v1 * v2 (dot) = " + str(vecmath.dot(v1, v2)))
    print("v1 x v2 (cross) = " + vecmath.cross(v1, v2))
    print("angle between v1 and v2 = " + str(vecmath.angle_between(v1, v2)))


if __name__ == "__main__":
    main()
