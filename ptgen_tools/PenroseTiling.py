# ptgen_tools/PenroseTiling.py
"""
Penrose rhombus tiling via de Bruijn's pentagrid.

The tiling owns the 5 strip families. Rhombi are enumerated per bounding box:
the box is mapped back into pentagrid space, every strip crossing that region
is walked across it, and each rhombus overlapping the box is handed to a
visitor.

Coordinate spaces:
- pentagrid space: where the strip lines live
- tiling space: where rhombus vertices (and bounding boxes) live
A crossing at pentagrid point p yields a rhombus centred near
2.5 * p - shift_offset, where shift_offset = sum(offset_i * offset_direction_i).
"""
import logging
import math
import random
import numpy as np
from ptgen_tools.StripFamily import StripFamily
from ptgen_tools.errors import DegenerateGeometryError

# How far a rhombus can reach from 2.5 * p - shift_offset. The exact bound is
# the golden ratio (1.618...); keep some slack for quantization.
MAX_PROTRUSION = 2.0

# Offsets summing this close to an integer are treated as degenerate
GENERICITY_TOLERANCE = 1e-9


class RhombusVisitor:
    """Receives every rhombus emitted for a bounding box."""

    def visit_rhombus(self, rhombus):
        raise NotImplementedError


class PenroseTiling:
    """
    A single Penrose tiling, fixed by the 5 strip family offsets.

    Offsets are drawn from rng as uniform(-1.0, 1.0), one per angle index in
    order 0..4, so a given seed always reproduces the same tiling.
    """

    def __init__(self, rng=None, offsets=None):
        self.logger = logging.getLogger('PenroseTiling')

        if offsets is None:
            if rng is None:
                rng = random.Random()
            offsets = [rng.uniform(-1.0, 1.0) for _ in range(5)]

        offsets = [float(o) for o in offsets]
        if len(offsets) != 5:
            raise ValueError(f"Expected 5 strip family offsets, got {len(offsets)}")

        total = sum(offsets)
        if abs(total - round(total)) < GENERICITY_TOLERANCE:
            raise DegenerateGeometryError(
                f"Strip family offsets sum to an integer ({total}); "
                f"the pentagrid is not in generic position")

        self.offsets = tuple(offsets)
        self.strip_families = tuple(StripFamily(self, i, offsets[i]) for i in range(5))
        self.shift_offset = sum(f.offset_direction() * f.offset for f in self.strip_families)

        self.logger.debug(f"Strip family offsets: {', '.join(f'{o:.6f}' for o in offsets)}")

    @classmethod
    def from_seed(cls, seed):
        return cls(rng=random.Random(seed))

    @classmethod
    def from_offsets(cls, offsets):
        return cls(offsets=offsets)

    def get_strip_family(self, angle):
        return self.strip_families[angle]

    # -------------------------------------------------------------------------
    # Space conversion
    # -------------------------------------------------------------------------

    def to_pentagrid(self, point):
        """Approximate pentagrid position of a tiling-space point."""
        return (point + self.shift_offset) / 2.5

    def to_tiling(self, point):
        return 2.5 * point - self.shift_offset

    def _pentagrid_region(self, box):
        """Pentagrid-space rectangle (min_x, min_y, max_x, max_y) whose crossings can reach box."""
        lower = self.to_pentagrid(box.origin - complex(MAX_PROTRUSION, MAX_PROTRUSION))
        upper = self.to_pentagrid(box.extent + complex(MAX_PROTRUSION, MAX_PROTRUSION))
        return lower.real, lower.imag, upper.real, upper.imag

    # -------------------------------------------------------------------------
    # Strip selection
    # -------------------------------------------------------------------------

    def strips_crossing(self, region):
        """All strips whose center line passes through the pentagrid region."""
        min_x, min_y, max_x, max_y = region
        corners = np.array([[min_x, min_y], [min_x, max_y], [max_x, max_y], [max_x, min_y]])

        strips = []
        for family in self.strip_families:
            normal = family.offset_direction()
            positions = corners @ np.array([normal.real, normal.imag]) - family.offset
            for multiple in range(math.ceil(positions.min()), math.floor(positions.max()) + 1):
                strips.append(family.get_strip(multiple))
        return strips

    @staticmethod
    def clip_strip(strip, region):
        """The (start, end) distances of strip inside the region, or None."""
        min_x, min_y, max_x, max_y = region
        point = strip.point()
        direction = strip.direction()

        start, end = -math.inf, math.inf
        for p, d, low, high in ((point.real, direction.real, min_x, max_x),
                                (point.imag, direction.imag, min_y, max_y)):
            if abs(d) < 1e-12:
                if p < low or p > high:
                    return None
                continue
            a, b = (low - p) / d, (high - p) / d
            if a > b:
                a, b = b, a
            start, end = max(start, a), min(end, b)

        if start > end:
            return None
        return start, end

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def rhombii_in(self, box, partition=False):
        """Generator of the distinct rhombi overlapping box."""
        region = self._pentagrid_region(box)
        strips = self.strips_crossing(region)

        seen = set()
        walked = 0
        for strip in strips:
            span = self.clip_strip(strip, region)
            if span is None:
                continue
            start, end = span
            walked += 1

            walk = strip.rhombi_sequence(start, forward=True)
            for rhombus in walk:
                if walk.position > end:
                    break
                if rhombus in seen:
                    continue
                seen.add(rhombus)

                if box.overlap_area(rhombus.polygon) <= 0:
                    continue
                if partition and rhombus.containing_bounding_box(box.grid_origin, box.grid_size) != box:
                    continue
                yield rhombus

        self.logger.debug(f"{box}: walked {walked} of {len(strips)} candidate strips, "
                          f"{len(seen)} rhombi tested")

    def visit_rhombii(self, box, visitor, partition=False):
        """
        Call visitor.visit_rhombus once for every rhombus overlapping box.

        A rhombus straddling several boxes is visited for each of them, unless
        partition is set, in which case it only goes to the box returned by
        its containing_bounding_box().
        """
        count = 0
        for rhombus in self.rhombii_in(box, partition=partition):
            visitor.visit_rhombus(rhombus)
            count += 1
        self.logger.debug(f"{box}: visited {count} rhombi")
        return count
