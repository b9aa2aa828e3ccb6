import pytest

from rubiks.orientation import SpatialOrientation, RotateDirection
from rubiks.rotation import Rotation, invert


def test_there_are_18_distinct_rotations() -> None:
    assert len(Rotation) == 18
    assert {(r.orientation, r.direction) for r in Rotation} == {(o, d) for o in SpatialOrientation for d in RotateDirection}


@pytest.mark.parametrize("rotation", list(Rotation))
def test_inverse_keeps_orientation_and_inverts_direction(rotation: Rotation) -> None:
    inverse = rotation.inverse
    assert inverse.orientation == rotation.orientation
    assert inverse.direction == rotation.direction.inverse
    assert inverse.inverse == rotation


def test_double_rotations_are_their_own_inverse() -> None:
    assert Rotation.R2.inverse == Rotation.R2
    assert Rotation.U.inverse == Rotation.Ur
    assert Rotation.Fr.inverse == Rotation.F


def test_of() -> None:
    assert Rotation.of(SpatialOrientation.BACK, RotateDirection.COUNTER_CLOCKWISE) == Rotation.Br


def test_notation() -> None:
    assert [str(r) for r in (Rotation.R, Rotation.R2, Rotation.Rr)] == ["R", "R2", "R'"]
    assert Rotation.parse("R U R' U'") == [Rotation.R, Rotation.U, Rotation.Rr, Rotation.Ur]
    assert Rotation.parse("  F2  B2' ") == [Rotation.F2, Rotation.B2]
    assert Rotation.parse("") == []


@pytest.mark.parametrize("text", ["X", "r", "Rr", "R3", "U''", "F'2"])
def test_unknown_notation_is_rejected(text: str) -> None:
    with pytest.raises(ValueError):
        Rotation.parse(text)


def test_invert_reverses_and_inverts() -> None:
    assert invert([Rotation.R, Rotation.U2, Rotation.Fr]) == [Rotation.F, Rotation.U2, Rotation.Rr]
    assert invert([]) == []
