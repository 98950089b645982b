# ptgen_tools/SvgOutput.py
"""
SVG output with every rhombus drawn as its own filled path, for display.
"""
import logging
from ptgen_tools.Rhombus import THIN
from ptgen_tools.RhombusOutput import RhombusOutput, view_box, spaced
from ptgen_tools.SvgDocument import SvgDocument

RHOMBUS_STYLE = """path.thinRhombus {
    fill: #333333;
    stroke: #000000;
    stroke-width: .01;
}
path.thickRhombus {
    fill: #aaaaaa;
    stroke: #000000;
    stroke-width: .01;
}"""


class SvgOutput(RhombusOutput):

    def __init__(self, stream=None, grid_spacing=2.5, show_grid=False):
        self.logger = logging.getLogger('SvgOutput')
        self.document = SvgDocument(stream)
        self.grid_spacing = grid_spacing
        # Not a strict bound: rhombi on the edge of a box stick out past it
        self.show_grid = show_grid
        self.current_box = None
        self.rhombus_count = 0

    def style(self):
        return RHOMBUS_STYLE

    def start(self, generator):
        self.document.open(view_box(generator, self.grid_spacing), self.style())

    def start_box(self, bounding_box):
        self.current_box = bounding_box

    def visit_rhombus(self, rhombus):
        assert self.current_box is not None, "visit_rhombus called outside of a box"

        css_class = 'thinRhombus' if rhombus.rhombus_type() == THIN else 'thickRhombus'
        element_id = (f"rhombus_{rhombus.strip1.angle}-{rhombus.strip1.multiple}_"
                      f"{rhombus.strip2.angle}-{rhombus.strip2.multiple}")
        points = [spaced(v, self.current_box, self.grid_spacing) for v in rhombus.vertices()]
        self.document.path(points, css_class, element_id, closed=True,
                           desc=f"{rhombus.lower_strip()}, {rhombus.upper_strip()}")
        self.rhombus_count += 1

    def end_box(self, bounding_box):
        if self.show_grid:
            self.document.rect(spaced(bounding_box.origin, bounding_box, self.grid_spacing),
                               bounding_box.grid_size, 'boundingBox')
        self.current_box = None

    def end(self):
        self.document.close()
        self.logger.info(f"Wrote {self.rhombus_count} rhombi")
