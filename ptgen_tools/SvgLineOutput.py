# ptgen_tools/SvgLineOutput.py
"""
SVG output containing only the rhombus edges, as lines.

Edges shared by two rhombi of the same box are written once, which is what a
CNC mill or engraver wants: each line is cut a single time.
"""
import logging
from ptgen_tools.RhombusOutput import RhombusOutput, view_box, spaced
from ptgen_tools.SvgDocument import SvgDocument

EDGE_STYLE = """path.rhombusEdge {
    stroke: #000000;
    stroke-width: .01;
}"""


def normalized_edge(vertex1, vertex2):
    """Direction-independent edge key."""
    if (vertex1.real, vertex1.imag) < (vertex2.real, vertex2.imag):
        return (vertex1, vertex2)
    return (vertex2, vertex1)


class SvgLineOutput(RhombusOutput):

    def __init__(self, stream=None, grid_spacing=2.5, show_grid=False):
        self.logger = logging.getLogger('SvgLineOutput')
        self.document = SvgDocument(stream)
        self.grid_spacing = grid_spacing
        self.show_grid = show_grid
        self.current_box = None
        self.current_box_edges = set()
        self.edge_count = 0

    def style(self):
        return EDGE_STYLE

    def start(self, generator):
        self.document.open(view_box(generator, self.grid_spacing), self.style())

    def start_box(self, bounding_box):
        self.current_box = bounding_box
        self.current_box_edges = set()

    def visit_rhombus(self, rhombus):
        assert self.current_box is not None, "visit_rhombus called outside of a box"

        for start, end in rhombus.edges():
            edge = normalized_edge(start, end)
            if edge in self.current_box_edges:
                continue

            points = [spaced(start, self.current_box, self.grid_spacing),
                      spaced(end, self.current_box, self.grid_spacing)]
            element_id = f"edge{self.edge_count + len(self.current_box_edges)}"
            self.document.path(points, 'rhombusEdge', element_id)
            self.current_box_edges.add(edge)

    def end_box(self, bounding_box):
        if self.show_grid:
            self.document.rect(spaced(bounding_box.origin, bounding_box, self.grid_spacing),
                               bounding_box.grid_size, 'boundingBox')
        self.edge_count += len(self.current_box_edges)
        self.logger.debug(f"{bounding_box}: {len(self.current_box_edges)} distinct edges")
        self.current_box = None

    def end(self):
        self.document.close()
        self.logger.info(f"Wrote {self.edge_count} edges")
