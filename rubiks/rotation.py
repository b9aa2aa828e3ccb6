import typing, enum, math
from .orientation import SpatialOrientation, RotateDirection

class Rotation(enum.Enum):
    U = (SpatialOrientation.UP, RotateDirection.CLOCKWISE)
    U2 = (SpatialOrientation.UP, RotateDirection.DOUBLE)
    Ur = (SpatialOrientation.UP, RotateDirection.COUNTER_CLOCKWISE)
    D = (SpatialOrientation.DOWN, RotateDirection.CLOCKWISE)
    D2 = (SpatialOrientation.DOWN, RotateDirection.DOUBLE)
    Dr = (SpatialOrientation.DOWN, RotateDirection.COUNTER_CLOCKWISE)
    F = (SpatialOrientation.FRONT, RotateDirection.CLOCKWISE)
    F2 = (SpatialOrientation.FRONT, RotateDirection.DOUBLE)
    Fr = (SpatialOrientation.FRONT, RotateDirection.COUNTER_CLOCKWISE)
    B = (SpatialOrientation.BACK, RotateDirection.CLOCKWISE)
    B2 = (SpatialOrientation.BACK, RotateDirection.DOUBLE)
    Br = (SpatialOrientation.BACK, RotateDirection.COUNTER_CLOCKWISE)
    L = (SpatialOrientation.LEFT, RotateDirection.CLOCKWISE)
    L2 = (SpatialOrientation.LEFT, RotateDirection.DOUBLE)
    Lr = (SpatialOrientation.LEFT, RotateDirection.COUNTER_CLOCKWISE)
    R = (SpatialOrientation.RIGHT, RotateDirection.CLOCKWISE)
    R2 = (SpatialOrientation.RIGHT, RotateDirection.DOUBLE)
    Rr = (SpatialOrientation.RIGHT, RotateDirection.COUNTER_CLOCKWISE)

    @property
    def orientation(self) -> SpatialOrientation: return self.value[0]
    @property
    def direction(self) -> RotateDirection: return self.value[1]

    @property
    def inverse(self) -> "Rotation": return Rotation.of(self.orientation, self.direction.inverse)

    @property
    def is_ccw(self) -> bool: return self.direction == RotateDirection.COUNTER_CLOCKWISE
    @property
    def is_double_rot(self) -> bool: return self.direction == RotateDirection.DOUBLE

    @property
    def angle(self) -> float: return (-1 if self.is_ccw else +1) * (2 if self.is_double_rot else 1) * math.pi / 2

    @staticmethod
    def of(orientation: SpatialOrientation, direction: RotateDirection) -> "Rotation": return Rotation((orientation, direction))

    @staticmethod
    def parse(text: str) -> typing.List["Rotation"]:
        notation = { str(r): r for r in Rotation }

        rotations = []
        for token in text.split():
            #R2' is the same turn as R2
            if token.endswith("2'"): token = token[:-1]
            if token not in notation: raise ValueError(f"Unknown rotation '{token}'")
            rotations.append(notation[token])
        return rotations

    def __str__(self): return self.name.replace('r', '\'')

def invert(rotations: typing.Iterable[Rotation]) -> typing.List[Rotation]: return [r.inverse for r in reversed(list(rotations))]
