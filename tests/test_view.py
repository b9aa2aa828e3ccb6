import threading
import pytest

pyglet = pytest.importorskip("pyglet")
pyglet.options["shadow_window"] = False
view = pytest.importorskip("view", exc_type=ImportError)

from pyglet.math import Vec3, Mat4
from rubiks.cube import SOLVED_CUBE
from rubiks.orientation import SpatialOrientation
from rubiks.rotation import Rotation

YELLOW = [1, 213 / 255, 0, 1]
GREEN = [0, 155 / 255, 72 / 255, 1]
RED = [185 / 255, 0, 0, 1]
WHITE = [1, 1, 1, 1]
HIDDEN = [0, 0, 0, 0]


class RecordingCubelet:
    def __init__(self, x, y, z):
        self.x, self.y, self.z = x, y, z
        self.updates = []

    def update_state(self, state):
        self.updates.append((state, threading.current_thread()))


def make_cube():
    cube = view.Cube.__new__(view.Cube)
    cube.cube_mat = Mat4()
    cube._lock = threading.Lock()
    cube._new_state = cube._new_move = None
    cube._cur_move = cube._cur_move_angle = cube._cur_move_end_state = None
    cube.cubelets = [[[RecordingCubelet(x, y, z) for z in range(3)] for y in range(3)] for x in range(3)]
    return cube


def face_colors(colors, face):
    i = view.CUBE_VERT_FACES.index(face)
    return colors[i * 24:i * 24 + 4]


def test_state_from_another_thread_is_applied_on_update() -> None:
    cube = make_cube()
    state = SOLVED_CUBE.rotate(Rotation.parse("R U"))

    t = threading.Thread(target=cube.update_state, args=(state, None))
    t.start()
    t.join()
    assert all(not c.updates for c in cube)

    cube.update(0)
    assert all(c.updates == [(state, threading.current_thread())] for c in cube)


def test_move_is_animated_then_applied() -> None:
    cube = make_cube()
    state = SOLVED_CUBE.rotate(Rotation.R)

    cube.update_state(state, Rotation.R)
    cube.update(0)
    assert cube._cur_move == Rotation.R
    assert all(not c.updates for c in cube)

    cube.update(1)
    assert cube._cur_move is None
    assert all(c.updates == [(state, threading.current_thread())] for c in cube)


def test_reset_cancels_running_animation() -> None:
    cube = make_cube()
    cube.update_state(SOLVED_CUBE.rotate(Rotation.F), Rotation.F)
    cube.update(0)

    cube.update_state(SOLVED_CUBE, None)
    cube.update(0)
    assert cube._cur_move is None
    assert all([s for s, _ in c.updates] == [SOLVED_CUBE] for c in cube)


def test_cubelet_colors_of_solved_cube() -> None:
    colors = view.cubelet_colors(SOLVED_CUBE, 1, 2, 1)
    assert len(colors) == len(view.CUBE_VERTS) // 3 * 4
    assert face_colors(colors, SpatialOrientation.UP) == YELLOW
    for face in SpatialOrientation:
        if face != SpatialOrientation.UP: assert face_colors(colors, face) == HIDDEN


def test_cubelet_colors_follow_rotation() -> None:
    colors = view.cubelet_colors(SOLVED_CUBE.rotate(Rotation.R), 2, 2, 2)
    assert face_colors(colors, SpatialOrientation.UP) == RED
    assert face_colors(colors, SpatialOrientation.FRONT) == WHITE
    assert face_colors(colors, SpatialOrientation.RIGHT) == GREEN
    assert face_colors(colors, SpatialOrientation.LEFT) == HIDDEN


def test_default_orientation_only_centers_the_cube() -> None:
    assert view.orientation_mat(SpatialOrientation.UP) == Mat4.from_translation(-Vec3(3, 3, 3) / 2)
