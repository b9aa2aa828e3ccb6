import pytest

from rubiks.orientation import AxisOrientation, PlanarOrientation, SpatialOrientation, RotateDirection
from rubiks.accessor import AxisAccessor, PlanarAccessor


def test_opposites_are_involutions() -> None:
    for enum_cls in (AxisOrientation, PlanarOrientation, SpatialOrientation):
        for o in enum_cls:
            assert o.opposite != o
            assert o.opposite.opposite == o


def test_direction_inverse() -> None:
    assert RotateDirection.CLOCKWISE.inverse == RotateDirection.COUNTER_CLOCKWISE
    assert RotateDirection.COUNTER_CLOCKWISE.inverse == RotateDirection.CLOCKWISE
    assert RotateDirection.DOUBLE.inverse == RotateDirection.DOUBLE
    for d in RotateDirection:
        assert d.inverse.inverse == d


def test_planar_rotate_forward_clockwise_cycle() -> None:
    cycle = [PlanarOrientation.TOP, PlanarOrientation.RIGHT, PlanarOrientation.BOTTOM, PlanarOrientation.LEFT]
    for i, p in enumerate(cycle):
        assert p.rotate_forward(RotateDirection.CLOCKWISE) == cycle[(i + 1) % 4]
        assert p.rotate_forward(RotateDirection.COUNTER_CLOCKWISE) == cycle[(i - 1) % 4]
        assert p.rotate_forward(RotateDirection.DOUBLE) == p.opposite


@pytest.mark.parametrize("direction", list(RotateDirection))
def test_planar_rotate_backward_undoes_forward(direction: RotateDirection) -> None:
    for p in PlanarOrientation:
        assert p.rotate_forward(direction).rotate_backward(direction) == p


def test_planar_back_projection() -> None:
    assert PlanarOrientation.LEFT.at(AxisOrientation.LEFT) == PlanarOrientation.TOP
    assert PlanarOrientation.LEFT.at(AxisOrientation.RIGHT) == PlanarOrientation.BOTTOM
    assert PlanarOrientation.TOP.at(AxisOrientation.LEFT) == PlanarOrientation.RIGHT
    for p in PlanarOrientation:
        for a in AxisOrientation:
            assert p.back_project(a).opposite == p.back_project(a.opposite)
            assert p.back_project(a) not in (p, p.opposite)


def test_spatial_back_projection_is_consistent_with_opposite() -> None:
    for s in SpatialOrientation:
        for p in PlanarOrientation:
            assert s.back_project(p).opposite == s.back_project(p.opposite)


def test_spatial_projection_visits_the_four_adjacent_faces() -> None:
    for s in SpatialOrientation:
        ring = {s.at(p) for p in PlanarOrientation}
        assert ring == set(SpatialOrientation) - {s, s.opposite}


def test_front_projection() -> None:
    front = SpatialOrientation.FRONT
    assert front.at(PlanarOrientation.TOP) == SpatialOrientation.UP
    assert front.at(PlanarOrientation.LEFT) == SpatialOrientation.LEFT
    assert front.opposite == SpatialOrientation.BACK


def test_determine_adjacent_planar_orientation() -> None:
    assert SpatialOrientation.LEFT.determine_adjacent_planar_orientation(PlanarOrientation.RIGHT) == PlanarOrientation.LEFT
    assert SpatialOrientation.UP.determine_adjacent_planar_orientation(PlanarOrientation.BOTTOM) == PlanarOrientation.TOP
    assert SpatialOrientation.FRONT.determine_adjacent_planar_orientation(PlanarOrientation.TOP) == PlanarOrientation.BOTTOM

    for s in SpatialOrientation:
        for p in PlanarOrientation:
            q = s.determine_adjacent_planar_orientation(p)
            assert s.at(p).at(q) == s


def test_direction_vectors_match_opposites() -> None:
    for s in SpatialOrientation:
        assert tuple(-c for c in s.direction) == s.opposite.direction


def test_projections_are_accessors() -> None:
    assert PlanarOrientation.LEFT.project() == AxisAccessor(PlanarOrientation.TOP, PlanarOrientation.BOTTOM)
    assert SpatialOrientation.UP.project() == PlanarAccessor(
        SpatialOrientation.LEFT, SpatialOrientation.RIGHT, SpatialOrientation.BACK, SpatialOrientation.FRONT
    )
    for s in SpatialOrientation:
        assert s.project() == PlanarAccessor.of(s.at)
        for p in PlanarOrientation:
            assert p.project() == AxisAccessor.of(p.at)
