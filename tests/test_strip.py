import itertools

import pytest

from ptgen_tools.Strip import RhombusWalk
from ptgen_tools.errors import DegenerateGeometryError


def take_between(walk, start, end):
    """Rhombi of a walk until its position leaves [start, end]."""
    rhombi = []
    for rhombus in walk:
        if walk.position < start or walk.position > end:
            break
        rhombi.append(rhombus)
    return rhombi


def test_strip_equality_uses_family_and_multiple(tiling):
    family = tiling.get_strip_family(2)
    assert family.get_strip(3) == family.get_strip(3)
    assert hash(family.get_strip(3)) == hash(family.get_strip(3))
    assert family.get_strip(3) != family.get_strip(4)
    assert family.get_strip(3) != tiling.get_strip_family(1).get_strip(3)


def test_point_lies_on_offset_line(tiling):
    family = tiling.get_strip_family(1)
    strip = family.get_strip(2)
    normal = family.offset_direction()
    position = strip.point().real * normal.real + strip.point().imag * normal.imag
    assert position == pytest.approx(family.offset + 2, abs=1e-6)


def test_parallel_strips_do_not_intersect(tiling):
    family = tiling.get_strip_family(0)
    with pytest.raises(DegenerateGeometryError):
        family.get_strip(0).intersection_point(family.get_strip(1))
    with pytest.raises(DegenerateGeometryError):
        family.get_strip(0).signed_distance_along(family.get_strip(1))


def test_intersection_point_is_symmetric(tiling):
    for a, b in itertools.combinations(range(5), 2):
        strip_a = tiling.get_strip_family(a).get_strip(1)
        strip_b = tiling.get_strip_family(b).get_strip(-2)
        p = strip_a.intersection_point(strip_b)
        q = strip_b.intersection_point(strip_a)
        assert abs(p - q) < 1e-9


def test_signed_distance_is_measured_from_point(tiling):
    strip = tiling.get_strip_family(3).get_strip(0)
    other = tiling.get_strip_family(0).get_strip(5)
    distance = strip.signed_distance_along(other)
    expected = strip.point() + strip.direction() * distance
    assert abs(strip.intersection_point(other) - expected) < 1e-12


def test_walk_anchored_at_crossing_strip_starts_at_that_rhombus(tiling):
    initial_strip = tiling.get_strip_family(0).get_strip(4)
    initial_rhombus = initial_strip.rhombus_at(4)

    walk = initial_strip.rhombi_sequence(initial_rhombus.strip2, forward=True)

    assert next(walk) == initial_rhombus


def test_rhombus_at_is_first_crossing_after_distance(tiling):
    strip = tiling.get_strip_family(0).get_strip(4)
    rhombus = strip.rhombus_at(4)
    assert rhombus.strip1 == strip
    assert strip.signed_distance_along(rhombus.strip2) >= 4


@pytest.mark.parametrize("forward", [True, False])
def test_walk_positions_are_monotonic(tiling, forward):
    walk = tiling.get_strip_family(2).get_strip(-1).rhombi_sequence(0.0, forward=forward)
    positions = []
    for rhombus in itertools.islice(walk, 40):
        positions.append(walk.position)
        assert walk.strip.signed_distance_along(rhombus.strip2) == pytest.approx(walk.position)

    if forward:
        assert positions == sorted(positions)
        assert positions[0] >= 0.0
    else:
        assert positions == sorted(positions, reverse=True)
        assert positions[0] <= 0.0


def test_walk_crosses_every_other_family(tiling):
    walk = tiling.get_strip_family(4).get_strip(0).rhombi_sequence(-5.0)
    crossed = {rhombus.strip2.angle for rhombus in itertools.islice(walk, 40)}
    assert crossed == {0, 1, 2, 3}


def test_forward_and_backward_walks_agree(tiling):
    strip = tiling.get_strip_family(1).get_strip(3)
    forward = take_between(strip.rhombi_sequence(-6.0, forward=True), -6.0, 6.0)
    backward = take_between(strip.rhombi_sequence(6.0, forward=False), -6.0, 6.0)

    assert forward == list(reversed(backward))
    for a, b in zip(forward, reversed(backward)):
        assert a.lattice_coords == b.lattice_coords
        assert a.vertices() == b.vertices()


def test_consecutive_rhombi_share_an_edge(tiling):
    walk = tiling.get_strip_family(0).get_strip(0).rhombi_sequence(-4.0)
    rhombi = list(itertools.islice(walk, 20))
    for a, b in zip(rhombi, rhombi[1:]):
        assert len(set(a.vertices()) & set(b.vertices())) == 2


def test_rhombus_found_from_either_strip_has_same_vertices(tiling):
    strip = tiling.get_strip_family(3).get_strip(-2)
    for rhombus in itertools.islice(strip.rhombi_sequence(-3.0), 10):
        other_side = next(rhombus.strip2.rhombi_sequence(strip, forward=True))
        assert other_side == rhombus
        assert set(other_side.vertices()) == set(rhombus.vertices())


def test_walk_is_single_pass(tiling):
    walk = tiling.get_strip_family(0).get_strip(0).rhombi_sequence(0.0)
    assert isinstance(walk, RhombusWalk)
    assert iter(walk) is walk
    first = next(walk)
    assert next(walk) != first


def test_advance_does_not_modify_state(tiling):
    strip = tiling.get_strip_family(2).get_strip(1)
    state = strip.initial_state(0.0, True)
    first, _, _ = strip.advance(state)
    again, _, _ = strip.advance(state)
    assert first == again
