# ptgen_tools/TilingGenerator.py
"""
Generates a grid of bounding boxes of one Penrose tiling and drives an output
through them.
"""
import logging
import time
from ptgen_tools.BoundingBox import BoundingBox
from ptgen_tools.PenroseTiling import PenroseTiling
from ptgen_tools.precision import make_precise


class TilingGenerator:
    """
    seed fixes the tiling (unless explicit offsets are given). min_x/min_y is
    the lower left corner of the grid in tiling coordinates, width/height the
    size of one box and count_x/count_y the number of boxes along each axis.
    """

    def __init__(self, seed=0, min_x=0.0, min_y=0.0, width=10.0, height=10.0,
                 count_x=1, count_y=1, partition=False, offsets=None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid boxes need a positive size, got {width}x{height}")
        if count_x < 1 or count_y < 1:
            raise ValueError(f"Grid needs at least one box, got {count_x}x{count_y}")

        self.logger = logging.getLogger('TilingGenerator')
        self.seed = seed
        self.min_x = min_x
        self.min_y = min_y
        self.width = width
        self.height = height
        self.count_x = count_x
        self.count_y = count_y
        self.partition = partition
        self.offsets = offsets

        self.grid_origin = make_precise(complex(min_x, min_y))
        self.grid_size = make_precise(complex(width, height))

    def create_tiling(self):
        if self.offsets is not None:
            return PenroseTiling.from_offsets(self.offsets)
        return PenroseTiling.from_seed(self.seed)

    def bounding_boxes(self):
        for x in range(self.count_x):
            for y in range(self.count_y):
                yield BoundingBox(self.grid_origin, self.grid_size, x, y)

    def visit_rhombii(self, output):
        """Generate the tiling, calling the output's callbacks as generation proceeds."""
        tiling = self.create_tiling()
        t0 = time.perf_counter()

        output.start(self)
        total = 0
        for bounding_box in self.bounding_boxes():
            output.start_box(bounding_box)
            total += tiling.visit_rhombii(bounding_box, output, partition=self.partition)
            output.end_box(bounding_box)
        output.end()

        self.logger.info(
            f"Generated {total} rhombi in {self.count_x}x{self.count_y} boxes "
            f"in {(time.perf_counter() - t0) * 1000:.1f}ms"
        )
        return total
