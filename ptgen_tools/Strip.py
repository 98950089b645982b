# ptgen_tools/Strip.py
"""
A single strip (one line of one family) in de Bruijn's pentagrid.

Walking a strip visits, in order, every line of the other four families that
crosses it. Each crossing is one rhombus of the tiling, so a walk is a lazy,
infinite sequence of rhombi.
"""
import math
from collections import namedtuple
from ptgen_tools.PentAngle import angular_sin
from ptgen_tools.Rhombus import Rhombus
from ptgen_tools.errors import DegenerateGeometryError

# Per-walk traversal state. families holds the 4 other angle indices; the
# distances/multiples at the same position are that family's next crossing.
WalkState = namedtuple('WalkState', ['families', 'distances', 'multiples', 'forward'])


def _cross(a, b):
    return a.real * b.imag - a.imag * b.real


class Strip:
    __slots__ = ('strip_family', 'multiple')

    def __init__(self, strip_family, multiple):
        self.strip_family = strip_family
        self.multiple = multiple

    @property
    def angle(self):
        return self.strip_family.angle

    # -------------------------------------------------------------------------
    # Line geometry
    # -------------------------------------------------------------------------

    def point(self):
        """An arbitrary point on the strip's center line."""
        return self.strip_family.offset_direction() * (self.strip_family.offset + self.multiple)

    def direction(self):
        return self.strip_family.direction()

    def intersection_point(self, other):
        return self.point() + self.direction() * self.signed_distance_along(other)

    def signed_distance_along(self, other):
        """
        Position of the crossing with other, measured along this strip's
        direction from point(). This is the ordering key of a walk.
        """
        if other.angle == self.angle:
            raise DegenerateGeometryError(
                f"{self} and {other} are parallel and do not intersect")

        direction = self.direction()
        other_direction = other.direction()
        denominator = _cross(direction, other_direction)
        if denominator == 0:
            raise DegenerateGeometryError(
                f"{self} and {other} are parallel and do not intersect")

        return _cross(other.point() - self.point(), other_direction) / denominator

    # -------------------------------------------------------------------------
    # Rhombus walks
    # -------------------------------------------------------------------------

    def rhombus_at(self, distance):
        """The first rhombus at or after the given distance along the strip."""
        return next(self.rhombi_sequence(distance, forward=True))

    def rhombi_sequence(self, anchor, forward=True):
        """
        Walk the rhombi of this strip starting at anchor, which is either a
        crossing Strip or a distance along this strip. The walk is infinite
        and can only be consumed once.
        """
        return RhombusWalk(self, self.initial_state(anchor, forward))

    def initial_state(self, anchor, forward):
        start = anchor if isinstance(anchor, Strip) else None
        target = self.signed_distance_along(start) if start is not None else float(anchor)
        tiling = self.strip_family.tiling

        families = []
        distances = []
        multiples = []
        for i in range(5):
            if i == self.angle:
                continue

            families.append(i)
            if start is not None and i == start.angle:
                distances.append(target)
                multiples.append(start.multiple)
                continue

            other = tiling.get_strip_family(i)
            delta = self.signed_distance_along(other.get_strip(0)) - target
            interval = 1 / angular_sin(i, self.angle)

            # first crossing at/after (forward) or at/before the target
            if forward == (interval < 0):
                multiple = -math.ceil(delta / interval)
            else:
                multiple = -math.floor(delta / interval)

            multiples.append(multiple)
            distances.append(self.signed_distance_along(other.get_strip(multiple)))

        return WalkState(tuple(families), tuple(distances), tuple(multiples), forward)

    def advance(self, state):
        """
        One step of a walk. Returns (rhombus, position, next_state); state is
        never modified.
        """
        forward = state.forward

        closest = None
        for index, distance in enumerate(state.distances):
            if closest is None:
                closest = index
            elif forward and distance < state.distances[closest]:
                closest = index
            elif not forward and distance > state.distances[closest]:
                closest = index

        lattice_coords = [0] * 5
        lattice_coords[self.angle] = self.multiple
        for index, family in enumerate(state.families):
            multiple = state.multiples[index]
            if index != closest:
                # which side of that family's line the crossing lies on
                sin = angular_sin(self.angle, family)
                if (forward and sin < 0) or (not forward and sin > 0):
                    multiple -= 1
            lattice_coords[family] = multiple

        closest_family = self.strip_family.tiling.get_strip_family(state.families[closest])
        crossed = closest_family.get_strip(state.multiples[closest])

        sin = angular_sin(closest_family.angle, self.angle)
        if (forward and sin < 0) or (not forward and sin > 0):
            next_multiple = crossed.multiple - 1
        else:
            next_multiple = crossed.multiple + 1

        distances = list(state.distances)
        multiples = list(state.multiples)
        multiples[closest] = next_multiple
        distances[closest] = self.signed_distance_along(closest_family.get_strip(next_multiple))

        rhombus = Rhombus(self, crossed, tuple(lattice_coords))
        next_state = WalkState(state.families, tuple(distances), tuple(multiples), forward)
        return rhombus, state.distances[closest], next_state

    def __eq__(self, other):
        if not isinstance(other, Strip):
            return False
        return self.multiple == other.multiple and self.strip_family == other.strip_family

    def __hash__(self):
        return hash((self.strip_family.angle, self.multiple))

    def __repr__(self):
        return f"Strip({self.strip_family.angle}:{self.multiple})"


class RhombusWalk:
    """
    Iterator over the rhombi of one strip in one direction.

    Single pass and not restartable: re-walking from the same anchor needs a
    new walk. position is the distance of the rhombus last returned.
    """

    def __init__(self, strip, state):
        self.strip = strip
        self.state = state
        self.position = None

    @property
    def forward(self):
        return self.state.forward

    def __iter__(self):
        return self

    def __next__(self):
        rhombus, self.position, self.state = self.strip.advance(self.state)
        return rhombus
