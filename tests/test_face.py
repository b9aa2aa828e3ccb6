import threading

from rubiks.accessor import PlanarAccessor
from rubiks.face import Color, Facelet, Face
from rubiks.memo import memoized
from rubiks.orientation import SpatialOrientation

D, U, F, B, R, L = Facelet.D, Facelet.U, Facelet.F, Facelet.B, Facelet.R, Facelet.L

FACE = Face(
    U, D, F,
    B, R, L,
    L, F, B
)


def test_facelet_homes() -> None:
    for s in SpatialOrientation:
        assert Facelet.of(s).home == s
    assert Facelet.U.letter == "U"
    assert len({f.color for f in Facelet}) == len(Color)


def test_pure_face_is_solved() -> None:
    face = Face.pure(F)
    assert face.is_solved
    assert face.center_facelet == F
    assert face.facelets == (F,) * 9


def test_face_with_one_odd_facelet_is_not_solved() -> None:
    assert not Face(F, F, F, F, F, F, F, F, U).is_solved
    assert not Face(F, F, F, F, U, F, F, F, F).is_solved


def test_rows_and_columns() -> None:
    assert FACE.rows == ((U, D, F), (B, R, L), (L, F, B))
    assert FACE.columns == ((U, B, L), (D, R, F), (F, L, B))


def test_sides_read_clockwise() -> None:
    assert FACE.sides == PlanarAccessor((L, B, U), (F, L, B), (U, D, F), (B, F, L))


def test_derived_views_are_computed_once() -> None:
    face = Face(U, D, F, B, R, L, L, F, B)
    assert face.rows is face.rows
    assert face.columns is face.columns
    assert face.sides is face.sides
    assert face.sides == FACE.sides


def test_faces_are_values() -> None:
    assert Face(U, D, F, B, R, L, L, F, B) == FACE
    assert hash(Face(U, D, F, B, R, L, L, F, B)) == hash(FACE)
    FACE.rows
    assert Face(U, D, F, B, R, L, L, F, B) == FACE
    assert str(FACE) == "UDFBRLLFB"


def test_memoized_runs_once_under_concurrent_access() -> None:
    calls = []
    barrier = threading.Barrier(8)

    class Holder:
        @memoized
        def value(self):
            calls.append(1)
            return object()

    holder = Holder()
    results = []

    def read():
        barrier.wait()
        results.append(holder.value)

    threads = [threading.Thread(target=read) for _ in range(8)]
    for t in threads: t.start()
    for t in threads: t.join()

    assert len(calls) == 1
    assert all(r is results[0] for r in results)


def test_memoized_caches_none() -> None:
    calls = []

    class Holder:
        @memoized
        def value(self):
            calls.append(1)
            return None

    holder = Holder()
    assert holder.value is None
    assert holder.value is None
    assert len(calls) == 1
