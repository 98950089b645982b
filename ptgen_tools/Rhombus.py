# ptgen_tools/Rhombus.py
"""
A single rhombus at the crossing of two strips.

The lattice coordinate is the 5-integer dual-lattice position of the crossing;
it only feeds the vertex computation and is not part of a rhombus' identity.
"""
import math
import numpy as np
from shapely.geometry import Polygon
from ptgen_tools.BoundingBox import BoundingBox
from ptgen_tools.PentAngle import COS, SIN
from ptgen_tools.errors import DegenerateGeometryError, InvariantViolation
from ptgen_tools.precision import make_precise

THIN = 0
THICK = 1

# This order walks the vertices around the rhombus
VERTEX_OFFSETS = ((0, 0), (0, -1), (-1, -1), (-1, 0))


def lattice_point(lattice_coords):
    """Project a 5-component lattice coordinate into the plane."""
    coords = np.asarray(lattice_coords, dtype=float)
    return make_precise(complex(float(coords @ COS), -float(coords @ SIN)))


def rhombus_type(angle1, angle2):
    diff = abs(angle1 - angle2) % 5
    if diff in (1, 4):
        return THICK
    if diff in (2, 3):
        return THIN
    raise DegenerateGeometryError("Parallel lines cannot intersect")


class Rhombus:
    THIN = THIN
    THICK = THICK

    def __init__(self, strip1, strip2, lattice_coords):
        if strip1.angle == strip2.angle:
            raise DegenerateGeometryError(
                f"A rhombus needs strips from two families, got {strip1} and {strip2}")
        self.strip1 = strip1
        self.strip2 = strip2
        self.lattice_coords = tuple(lattice_coords)
        self._vertices = None
        self._polygon = None

    def rhombus_type(self):
        return rhombus_type(self.strip1.angle, self.strip2.angle)

    @property
    def is_thick(self):
        return self.rhombus_type() == THICK

    def vertices(self):
        """The 4 vertices, in order around the rhombus."""
        if self._vertices is None:
            vertices = []
            for offset1, offset2 in VERTEX_OFFSETS:
                coords = list(self.lattice_coords)
                coords[self.strip1.angle] += offset1
                coords[self.strip2.angle] += offset2
                vertices.append(lattice_point(coords))
            self._vertices = vertices
        return list(self._vertices)

    @property
    def polygon(self):
        if self._polygon is None:
            self._polygon = Polygon([(v.real, v.imag) for v in self.vertices()])
        return self._polygon

    @property
    def centroid(self):
        vertices = self.vertices()
        return sum(vertices) / len(vertices)

    def edges(self):
        """Edges as (start, end) pairs, closing back to the first vertex."""
        vertices = self.vertices()
        return [(vertices[i - 1], vertices[i]) for i in range(len(vertices))]

    def containing_bounding_box(self, grid_origin, grid_size):
        """
        Given a grid, get the box of that grid holding the largest part of
        this rhombus. Equal areas go to the lower box (lower x, then lower y).
        """
        possible_xs = set()
        possible_ys = set()
        for vertex in self.vertices():
            normalized = vertex - grid_origin
            possible_xs.add(math.floor(normalized.real / grid_size.real))
            possible_ys.add(math.floor(normalized.imag / grid_size.imag))

        max_box = None
        max_area = 0
        for x in sorted(possible_xs):
            for y in sorted(possible_ys):
                box = BoundingBox(grid_origin, grid_size, x, y)
                area = box.overlap_area(self.polygon)
                if area <= 0:
                    continue
                if area > max_area or (area == max_area and box < max_box):
                    max_area = area
                    max_box = box

        if max_box is None:
            raise InvariantViolation(f"{self} does not overlap any box of its grid")
        return max_box

    def lower_strip(self):
        """The strip with the lower family index."""
        if self.strip1.angle < self.strip2.angle:
            return self.strip1
        return self.strip2

    def upper_strip(self):
        if self.strip1.angle < self.strip2.angle:
            return self.strip2
        return self.strip1

    def __eq__(self, other):
        if not isinstance(other, Rhombus):
            return False
        return (self.lower_strip() == other.lower_strip() and
                self.upper_strip() == other.upper_strip())

    def __hash__(self):
        return hash((self.lower_strip(), self.upper_strip()))

    def __repr__(self):
        return f"Rhombus({self.strip1}, {self.strip2})"
