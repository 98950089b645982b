# ptgen_tools/RhombusOutput.py
import math
from ptgen_tools.PenroseTiling import RhombusVisitor

# How far a single rhombus can stick out past the box holding it: half of the
# long axis of a thin rhombus.
MAX_BOX_PROTRUSION = math.sin(math.radians(72))


class RhombusOutput(RhombusVisitor):
    """
    Callbacks for a whole generation run, in this order:
    start() once, then start_box(), visit_rhombus()*, end_box() per grid box,
    then end() once. style() returns any stylesheet the output needs.
    """

    def start(self, generator):
        pass

    def style(self):
        return ''

    def start_box(self, bounding_box):
        pass

    def visit_rhombus(self, rhombus):
        pass

    def end_box(self, bounding_box):
        pass

    def end(self):
        pass


def view_box(generator, grid_spacing):
    """(min_x, min_y, width, height) covering every box of the grid plus spacing."""
    x_size = (generator.width * generator.count_x + (generator.count_x - 1) * grid_spacing
              + MAX_BOX_PROTRUSION * 2)
    y_size = (generator.height * generator.count_y + (generator.count_y - 1) * grid_spacing
              + MAX_BOX_PROTRUSION * 2)
    return (generator.min_x - MAX_BOX_PROTRUSION, generator.min_y - MAX_BOX_PROTRUSION,
            x_size, y_size)


def spaced(point, bounding_box, grid_spacing):
    """Shift a point of a box so neighbouring boxes are drawn grid_spacing apart."""
    return point + complex(bounding_box.x_multiple * grid_spacing,
                           bounding_box.y_multiple * grid_spacing)
