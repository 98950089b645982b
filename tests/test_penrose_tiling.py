import random
from collections import Counter

import pytest

from ptgen_tools.BoundingBox import BoundingBox
from ptgen_tools.PenroseTiling import PenroseTiling
from ptgen_tools.errors import DegenerateGeometryError


def test_same_seed_gives_same_families():
    a = PenroseTiling.from_seed(42)
    b = PenroseTiling.from_seed(42)
    assert a.offsets == b.offsets
    assert a.strip_families == b.strip_families
    assert PenroseTiling.from_seed(43).offsets != a.offsets


def test_offsets_are_drawn_in_angle_order():
    rng = random.Random(7)
    expected = [rng.uniform(-1.0, 1.0) for _ in range(5)]
    tiling = PenroseTiling.from_seed(7)
    assert list(tiling.offsets) == expected
    assert [f.angle for f in tiling.strip_families] == [0, 1, 2, 3, 4]


def test_explicit_offsets():
    tiling = PenroseTiling.from_offsets([1.0, 0.7, 0.5, 0.3, 0.1])
    assert tiling.get_strip_family(3).offset == 0.3


def test_integer_offset_sum_is_rejected():
    with pytest.raises(DegenerateGeometryError):
        PenroseTiling.from_offsets([0.2, 0.2, 0.2, 0.2, 0.2])
    with pytest.raises(DegenerateGeometryError):
        PenroseTiling.from_offsets([0.0, 0.0, 0.0, 0.0, 0.0])


def test_wrong_offset_count_is_rejected():
    with pytest.raises(ValueError):
        PenroseTiling.from_offsets([0.1, 0.2, 0.3])


def test_space_conversion_round_trips(tiling):
    p = complex(1.25, -3.5)
    assert tiling.to_pentagrid(tiling.to_tiling(p)) == pytest.approx(p)


def test_visit_is_deterministic(box):
    first = set(PenroseTiling.from_seed(3).rhombii_in(box))
    second = set(PenroseTiling.from_seed(3).rhombii_in(box))
    assert first
    assert first == second


def test_visit_emits_each_rhombus_once(tiling, box, recording_visitor):
    count = tiling.visit_rhombii(box, recording_visitor)
    assert count == len(recording_visitor.rhombi)
    assert max(Counter(recording_visitor.rhombi).values()) == 1


def test_visited_rhombi_overlap_box(tiling, box, recording_visitor):
    tiling.visit_rhombii(box, recording_visitor)
    for rhombus in recording_visitor.rhombi:
        assert box.polygon.intersection(rhombus.polygon).area > 0


def test_visited_rhombi_tile_the_box(tiling, box, recording_visitor):
    tiling.visit_rhombii(box, recording_visitor)
    covered = sum(box.polygon.intersection(r.polygon).area for r in recording_visitor.rhombi)
    assert covered == pytest.approx(box.polygon.area, abs=1e-5)


def test_visit_finds_everything_a_larger_box_finds(tiling, box):
    larger = BoundingBox(complex(-8.0, -8.0), complex(16.0, 16.0), 0, 0)
    expected = {r for r in tiling.rhombii_in(larger) if box.overlap_area(r.polygon) > 0}
    assert set(tiling.rhombii_in(box)) == expected


def test_straddling_rhombi_are_visited_for_every_box(tiling):
    grid_origin, grid_size = complex(-4.0, -4.0), complex(4.0, 4.0)
    left = set(tiling.rhombii_in(BoundingBox(grid_origin, grid_size, 0, 0)))
    right = set(tiling.rhombii_in(BoundingBox(grid_origin, grid_size, 1, 0)))
    assert left & right


def test_partition_assigns_each_rhombus_to_one_box(tiling):
    grid_origin, grid_size = complex(-4.0, -4.0), complex(4.0, 4.0)
    boxes = [BoundingBox(grid_origin, grid_size, x, y) for x in range(2) for y in range(2)]

    owners = Counter()
    for box in boxes:
        for rhombus in tiling.rhombii_in(box, partition=True):
            assert rhombus.containing_bounding_box(grid_origin, grid_size) == box
            owners[rhombus] += 1
    assert max(owners.values()) == 1

    inner = BoundingBox(grid_origin, grid_size, 0, 0)
    everything = set(tiling.rhombii_in(inner))
    partitioned = set(tiling.rhombii_in(inner, partition=True))
    assert partitioned < everything


def test_strips_crossing_covers_every_family(tiling, box):
    region = tiling._pentagrid_region(box)
    strips = tiling.strips_crossing(region)
    assert {s.angle for s in strips} == {0, 1, 2, 3, 4}
    for strip in strips:
        assert tiling.clip_strip(strip, region) is not None
