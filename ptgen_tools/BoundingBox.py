# ptgen_tools/BoundingBox.py
import functools
from shapely.geometry import box as rectangle
from ptgen_tools.precision import make_precise


@functools.total_ordering
class BoundingBox:
    """
    The (x_multiple, y_multiple)th box of a grid.

    grid_origin is the lower left corner of box (0, 0) and grid_size holds the
    width and height of each box, both as complex points. Boxes order by their
    origin (x first, then y); the order only serves as a deterministic
    tie-break.
    """

    def __init__(self, grid_origin, grid_size, x_multiple, y_multiple):
        self.grid_origin = complex(grid_origin)
        self.grid_size = complex(grid_size)
        self.x_multiple = x_multiple
        self.y_multiple = y_multiple

        self.origin = self.grid_origin + complex(
            self.grid_size.real * x_multiple, self.grid_size.imag * y_multiple)
        self.extent = self.origin + self.grid_size

        self.polygon = rectangle(self.origin.real, self.origin.imag,
                                 self.extent.real, self.extent.imag)

    @property
    def width(self):
        return self.grid_size.real

    @property
    def height(self):
        return self.grid_size.imag

    def corners(self):
        return [
            self.origin,
            complex(self.origin.real, self.extent.imag),
            self.extent,
            complex(self.extent.real, self.origin.imag),
        ]

    def overlap_area(self, polygon):
        """Area shared with polygon, quantized so equal overlaps compare equal."""
        if not self.polygon.intersects(polygon):
            return 0.0
        return make_precise(abs(self.polygon.intersection(polygon).area))

    def _key(self):
        return (self.grid_origin, self.grid_size, self.x_multiple, self.y_multiple)

    def __eq__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, BoundingBox):
            return NotImplemented
        return (self.origin.real, self.origin.imag) < (other.origin.real, other.origin.imag)

    def __repr__(self):
        return (f"BoundingBox(origin=({self.origin.real:g}, {self.origin.imag:g}), "
                f"multiple=({self.x_multiple}, {self.y_multiple}))")
