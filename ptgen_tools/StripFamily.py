# ptgen_tools/StripFamily.py
from ptgen_tools.PentAngle import PENTANGLES
from ptgen_tools.Strip import Strip


class StripFamily:
    """
    One of the 5 pencils of parallel, equally spaced lines of the pentagrid.
    Lines sit at offset + k along offset_direction() for every integer k.
    """
    __slots__ = ('tiling', 'angle', 'offset')

    def __init__(self, tiling, angle, offset):
        self.tiling = tiling
        self.angle = angle
        self.offset = offset

    def get_strip(self, multiple):
        return Strip(self, multiple)

    def pentangle(self):
        return PENTANGLES[self.angle]

    def direction(self):
        return PENTANGLES[self.angle].unit()

    def offset_direction(self):
        # direction rotated a quarter turn clockwise
        return self.direction() * -1j

    def __eq__(self, other):
        if not isinstance(other, StripFamily):
            return False
        return self.angle == other.angle and self.offset == other.offset

    def __hash__(self):
        return hash((self.angle, self.offset))

    def __repr__(self):
        return f"StripFamily(angle={self.angle}, offset={self.offset})"
