# ptgen_tools/PentAngle.py
"""
The five line-family angles of the pentagrid, 72 degrees apart.

Directions use the (sin, cos) -> (x, y) convention throughout, so angle 0
points along +y and angles advance clockwise.
"""
import math
import numpy as np
from ptgen_tools.precision import make_precise


class PentAngle:
    __slots__ = ('angle_index', 'degrees', 'radians', 'sin', 'cos')

    def __init__(self, angle_index):
        self.angle_index = angle_index
        self.degrees = 72 * angle_index
        self.radians = math.pi * 2 * self.degrees / 360

        self.sin = make_precise(math.sin(self.radians))
        self.cos = make_precise(math.cos(self.radians))

    def unit(self):
        """A unit vector in the direction of this angle."""
        return complex(self.sin, self.cos)

    def sin_to(self, other):
        """sin of the angle from this pentangle to another one."""
        return math.sin(other.radians - self.radians)

    def __repr__(self):
        return f"PentAngle({self.angle_index})"


PENTANGLES = tuple(PentAngle(i) for i in range(5))

# Projection rows used to turn a 5-component lattice coordinate into a point
COS = np.array([p.cos for p in PENTANGLES])
SIN = np.array([p.sin for p in PENTANGLES])


def unit(index):
    return PENTANGLES[index].unit()


def angular_sin(i, j):
    """sin(angle_j - angle_i). Its sign gives the relative winding of two families."""
    if i == j:
        return 0.0
    return PENTANGLES[i].sin_to(PENTANGLES[j])
