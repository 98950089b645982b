# ptgen_tools/PngOutput.py
"""
Raster preview of the tiling, drawn with Pillow.
"""
import logging
import numpy as np
from PIL import Image, ImageDraw
from ptgen_tools.RhombusOutput import RhombusOutput, view_box, spaced


class PngOutput(RhombusOutput):

    def __init__(self, path, scale=40, color1=(205, 255, 255), color2=(0, 0, 255),
                 grid_spacing=2.5, show_grid=False, background=(0, 0, 0)):
        self.logger = logging.getLogger('PngOutput')
        self.path = path
        self.scale = scale
        self.thick_color = self.clamp_color(color1)
        self.thin_color = self.clamp_color(color2)
        self.grid_spacing = grid_spacing
        self.show_grid = show_grid
        self.background = self.clamp_color(background)

        self.image = None
        self.draw = None
        self.view_origin = None
        self.current_box = None
        self.rhombus_count = 0

    @staticmethod
    def clamp_color(color):
        """Ensure all color values are within the legal RGB range."""
        return tuple(max(0, min(255, int(c))) for c in color)

    def start(self, generator):
        min_x, min_y, width, height = view_box(generator, self.grid_spacing)
        self.view_origin = complex(min_x, min_y)
        size = (max(1, int(round(width * self.scale))), max(1, int(round(height * self.scale))))
        self.image = Image.new('RGB', size, self.background)
        self.draw = ImageDraw.Draw(self.image)
        self.logger.debug(f"Canvas {size[0]}x{size[1]} at {self.scale} px/unit")

    def to_canvas(self, points):
        coords = np.array([[p.real, p.imag] for p in points])
        coords -= [self.view_origin.real, self.view_origin.imag]
        coords *= self.scale
        return [tuple(c) for c in coords.tolist()]

    def start_box(self, bounding_box):
        self.current_box = bounding_box

    def visit_rhombus(self, rhombus):
        assert self.current_box is not None, "visit_rhombus called outside of a box"
        points = [spaced(v, self.current_box, self.grid_spacing) for v in rhombus.vertices()]
        color = self.thick_color if rhombus.is_thick else self.thin_color
        self.draw.polygon(self.to_canvas(points), fill=color, outline=(0, 0, 0))
        self.rhombus_count += 1

    def end_box(self, bounding_box):
        if self.show_grid:
            corners = [spaced(c, bounding_box, self.grid_spacing) for c in bounding_box.corners()]
            self.draw.polygon(self.to_canvas(corners), outline=(0, 0, 255))
        self.current_box = None

    def end(self):
        self.image.save(self.path, format='PNG')
        self.logger.info(f"Wrote {self.rhombus_count} rhombi to {self.path}")
