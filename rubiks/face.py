import typing, enum, dataclasses
from .orientation import SpatialOrientation
from .accessor import PlanarAccessor
from .memo import memoized

class Color(enum.Enum):
    WHITE = 'W'
    YELLOW = 'Y'
    RED = 'R'
    GREEN = 'G'
    BLUE = 'B'
    ORANGE = 'O'

class Facelet(enum.Enum):
    U = SpatialOrientation.UP
    D = SpatialOrientation.DOWN
    L = SpatialOrientation.LEFT
    R = SpatialOrientation.RIGHT
    F = SpatialOrientation.FRONT
    B = SpatialOrientation.BACK

    @property
    def home(self) -> SpatialOrientation: return self.value

    @property
    def letter(self) -> str: return self.name

    @property
    def color(self) -> Color: return {
        Facelet.U: Color.YELLOW,
        Facelet.D: Color.WHITE,
        Facelet.L: Color.BLUE,
        Facelet.R: Color.GREEN,
        Facelet.F: Color.RED,
        Facelet.B: Color.ORANGE
    }[self]

    @staticmethod
    def of(orientation: SpatialOrientation) -> "Facelet": return Facelet(orientation)

    def __str__(self): return self.name

Strip = typing.Tuple[Facelet, Facelet, Facelet]

@dataclasses.dataclass(frozen=True)
class Face:
    left_top: Facelet
    top: Facelet
    right_top: Facelet
    left: Facelet
    center: Facelet
    right: Facelet
    left_bottom: Facelet
    bottom: Facelet
    right_bottom: Facelet

    @staticmethod
    def pure(facelet: Facelet) -> "Face": return Face(*[facelet] * 9)

    @property
    def facelets(self) -> typing.Tuple[Facelet, ...]: return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    @property
    def center_facelet(self) -> Facelet: return self.center

    @property
    def is_solved(self) -> bool: return all(f == self.center for f in self.facelets)

    @memoized
    def rows(self) -> typing.Tuple[Strip, Strip, Strip]:
        return (
            (self.left_top, self.top, self.right_top),
            (self.left, self.center, self.right),
            (self.left_bottom, self.bottom, self.right_bottom)
        )

    @memoized
    def columns(self) -> typing.Tuple[Strip, Strip, Strip]:
        return (
            (self.left_top, self.left, self.left_bottom),
            (self.top, self.center, self.bottom),
            (self.right_top, self.right, self.right_bottom)
        )

    @memoized
    def sides(self) -> PlanarAccessor[Strip]:
        #Each edge strip is read clockwise around the face
        return PlanarAccessor(
            (self.left_bottom, self.left, self.left_top),
            (self.right_top, self.right, self.right_bottom),
            (self.left_top, self.top, self.right_top),
            (self.right_bottom, self.bottom, self.left_bottom)
        )

    def __str__(self): return "".join(f.letter for f in self.facelets)
