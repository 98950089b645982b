from .errors import DegenerateGeometryError, InvariantViolation
from .precision import PRECISION, make_precise
from .PentAngle import PentAngle, PENTANGLES, angular_sin, unit
from .BoundingBox import BoundingBox
from .Rhombus import Rhombus, THIN, THICK
from .Strip import Strip, RhombusWalk
from .StripFamily import StripFamily
from .PenroseTiling import PenroseTiling, RhombusVisitor
from .TilingGenerator import TilingGenerator
from .RhombusOutput import RhombusOutput
from .SvgOutput import SvgOutput
from .SvgLineOutput import SvgLineOutput
from .PngOutput import PngOutput

__all__ = ['DegenerateGeometryError', 'InvariantViolation', 'PRECISION', 'make_precise',
           'PentAngle', 'PENTANGLES', 'angular_sin', 'unit', 'BoundingBox', 'Rhombus',
           'THIN', 'THICK', 'Strip', 'RhombusWalk', 'StripFamily', 'PenroseTiling',
           'RhombusVisitor', 'TilingGenerator', 'RhombusOutput', 'SvgOutput',
           'SvgLineOutput', 'PngOutput']
