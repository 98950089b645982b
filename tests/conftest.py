import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ptgen_tools.BoundingBox import BoundingBox
from ptgen_tools.PenroseTiling import PenroseTiling


@pytest.fixture
def tiling():
    return PenroseTiling.from_seed(0)


@pytest.fixture
def box():
    return BoundingBox(complex(-3.0, -3.0), complex(6.0, 6.0), 0, 0)


class RecordingVisitor:
    def __init__(self):
        self.rhombi = []

    def visit_rhombus(self, rhombus):
        self.rhombi.append(rhombus)


@pytest.fixture
def recording_visitor():
    return RecordingVisitor()
