import typing, enum

class AdjacencyError(LookupError):
    pass

class RotateDirection(enum.Enum):
    CLOCKWISE = 0
    COUNTER_CLOCKWISE = 1
    DOUBLE = 2

    @property
    def inverse(self) -> "RotateDirection": return {
        RotateDirection.CLOCKWISE: RotateDirection.COUNTER_CLOCKWISE,
        RotateDirection.COUNTER_CLOCKWISE: RotateDirection.CLOCKWISE,
        RotateDirection.DOUBLE: RotateDirection.DOUBLE
    }[self]

    @property
    def quarter_turns(self) -> int: return {
        RotateDirection.CLOCKWISE: 1,
        RotateDirection.COUNTER_CLOCKWISE: -1,
        RotateDirection.DOUBLE: 2
    }[self]

class AxisOrientation(enum.Enum):
    LEFT = 0
    RIGHT = 1

    @property
    def opposite(self) -> "AxisOrientation": return AxisOrientation.RIGHT if self == AxisOrientation.LEFT else AxisOrientation.LEFT

class PlanarOrientation(enum.Enum):
    LEFT = 0
    RIGHT = 1
    TOP = 2
    BOTTOM = 3

    @property
    def opposite(self) -> "PlanarOrientation": return {
        PlanarOrientation.LEFT: PlanarOrientation.RIGHT,
        PlanarOrientation.RIGHT: PlanarOrientation.LEFT,
        PlanarOrientation.TOP: PlanarOrientation.BOTTOM,
        PlanarOrientation.BOTTOM: PlanarOrientation.TOP
    }[self]

    def project(self) -> "AxisAccessor[PlanarOrientation]":
        from .accessor import AxisAccessor
        return AxisAccessor(*self._projection())

    def _projection(self) -> typing.Tuple["PlanarOrientation", "PlanarOrientation"]:
        #(axis LEFT, axis RIGHT) as seen when standing on this side, facing the center
        return {
            PlanarOrientation.LEFT: (PlanarOrientation.TOP, PlanarOrientation.BOTTOM),
            PlanarOrientation.RIGHT: (PlanarOrientation.BOTTOM, PlanarOrientation.TOP),
            PlanarOrientation.TOP: (PlanarOrientation.RIGHT, PlanarOrientation.LEFT),
            PlanarOrientation.BOTTOM: (PlanarOrientation.LEFT, PlanarOrientation.RIGHT)
        }[self]

    def back_project(self, axis: AxisOrientation) -> "PlanarOrientation": return self._projection()[axis.value]
    def at(self, axis: AxisOrientation) -> "PlanarOrientation": return self.back_project(axis)

    def rotate_forward(self, direction: RotateDirection) -> "PlanarOrientation":
        if direction == RotateDirection.DOUBLE: return self.opposite

        #TOP -> RIGHT -> BOTTOM -> LEFT -> TOP
        ring = [PlanarOrientation.TOP, PlanarOrientation.RIGHT, PlanarOrientation.BOTTOM, PlanarOrientation.LEFT]
        return ring[(ring.index(self) + direction.quarter_turns) % len(ring)]

    def rotate_backward(self, direction: RotateDirection) -> "PlanarOrientation": return self.rotate_forward(direction.inverse)

class SpatialOrientation(enum.Enum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    FRONT = 4
    BACK = 5

    @property
    def opposite(self) -> "SpatialOrientation": return {
        SpatialOrientation.UP: SpatialOrientation.DOWN,
        SpatialOrientation.DOWN: SpatialOrientation.UP,
        SpatialOrientation.LEFT: SpatialOrientation.RIGHT,
        SpatialOrientation.RIGHT: SpatialOrientation.LEFT,
        SpatialOrientation.FRONT: SpatialOrientation.BACK,
        SpatialOrientation.BACK: SpatialOrientation.FRONT
    }[self]

    @property
    def direction(self) -> typing.Tuple[int, int, int]: return {
        SpatialOrientation.LEFT: (-1,  0,  0),
        SpatialOrientation.RIGHT: (+1,  0,  0),
        SpatialOrientation.UP: ( 0, +1,  0),
        SpatialOrientation.DOWN: ( 0, -1,  0),
        SpatialOrientation.FRONT: ( 0,  0, +1),
        SpatialOrientation.BACK: ( 0,  0, -1)
    }[self]

    def project(self) -> "PlanarAccessor[SpatialOrientation]":
        from .accessor import PlanarAccessor
        return PlanarAccessor(*self._projection())

    def _projection(self) -> typing.Tuple["SpatialOrientation", "SpatialOrientation", "SpatialOrientation", "SpatialOrientation"]:
        #Neighbouring faces in planar order (left, right, top, bottom), looking at this face from outside
        return {
            SpatialOrientation.UP: (SpatialOrientation.LEFT, SpatialOrientation.RIGHT, SpatialOrientation.BACK, SpatialOrientation.FRONT),
            SpatialOrientation.DOWN: (SpatialOrientation.LEFT, SpatialOrientation.RIGHT, SpatialOrientation.FRONT, SpatialOrientation.BACK),
            SpatialOrientation.LEFT: (SpatialOrientation.BACK, SpatialOrientation.FRONT, SpatialOrientation.UP, SpatialOrientation.DOWN),
            SpatialOrientation.RIGHT: (SpatialOrientation.FRONT, SpatialOrientation.BACK, SpatialOrientation.UP, SpatialOrientation.DOWN),
            SpatialOrientation.FRONT: (SpatialOrientation.LEFT, SpatialOrientation.RIGHT, SpatialOrientation.UP, SpatialOrientation.DOWN),
            SpatialOrientation.BACK: (SpatialOrientation.RIGHT, SpatialOrientation.LEFT, SpatialOrientation.UP, SpatialOrientation.DOWN)
        }[self]

    def back_project(self, planar: PlanarOrientation) -> "SpatialOrientation": return self._projection()[planar.value]
    def at(self, planar: PlanarOrientation) -> "SpatialOrientation": return self.back_project(planar)

    def determine_adjacent_planar_orientation(self, planar: PlanarOrientation) -> PlanarOrientation:
        #Find the side of the neighbour at 'planar' which touches this face
        adjacent = self.back_project(planar)
        for side in PlanarOrientation:
            if adjacent.back_project(side) == self: return side

        raise AdjacencyError(f"{adjacent.name} has no side adjacent to {self.name}")
