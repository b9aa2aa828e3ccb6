import typing, enum
from .orientation import AxisOrientation, PlanarOrientation, SpatialOrientation, RotateDirection

T = typing.TypeVar("T")
R = typing.TypeVar("R")

def _const(val): return lambda: val

def _slot(orientation: enum.Enum) -> property: return property(lambda self: self.at(orientation))

class OrientedAccessor(typing.Generic[T]):
    ORIENTATION: typing.ClassVar[typing.Type[enum.Enum]]

    _producers: typing.Tuple[typing.Callable[[], T], ...]

    def __init__(self, *values: T):
        if len(values) != len(self.ORIENTATION):
            raise TypeError(f"{type(self).__name__} takes {len(self.ORIENTATION)} values, got {len(values)}")
        self._producers = tuple(_const(v) for v in values)

    @classmethod
    def lazy(cls, *producers: typing.Callable[[], T]):
        if len(producers) != len(cls.ORIENTATION):
            raise TypeError(f"{cls.__name__} takes {len(cls.ORIENTATION)} producers, got {len(producers)}")
        acc = cls.__new__(cls)
        acc._producers = tuple(producers)
        return acc

    @classmethod
    def of(cls, source: typing.Union["OrientedAccessor[T]", typing.Callable[[typing.Any], T]]):
        #Copy another accessor, or wrap a function of the orientation
        fnc = source.at if isinstance(source, OrientedAccessor) else source
        return cls.lazy(*((lambda o=o: fnc(o)) for o in cls.ORIENTATION))

    def at(self, orientation: enum.Enum) -> T:
        if not isinstance(orientation, self.ORIENTATION):
            raise TypeError(f"{type(self).__name__} is indexed by {self.ORIENTATION.__name__}, got {orientation!r}")
        return self._producers[orientation.value]()

    def map(self, fnc: typing.Callable[[T], R]) -> "OrientedAccessor[R]":
        return type(self).lazy(*((lambda p=p: fnc(p())) for p in self._producers))

    def resolve(self) -> "OrientedAccessor[T]": return type(self)(*(p() for p in self._producers))

    def items(self) -> typing.Iterator[typing.Tuple[enum.Enum, T]]:
        for o in self.ORIENTATION: yield o, self.at(o)

    def __iter__(self) -> typing.Iterator[T]:
        for p in self._producers: yield p()

    def __len__(self): return len(self._producers)

    def __eq__(self, other):
        if type(other) is not type(self): return NotImplemented
        return tuple(self) == tuple(other)

    def __hash__(self): return hash((type(self), tuple(self)))

    def __repr__(self): return f"{type(self).__name__}({', '.join(f'{o.name.lower()}={v!r}' for o, v in self.items())})"

class AxisAccessor(OrientedAccessor[T]):
    ORIENTATION = AxisOrientation

    left = _slot(AxisOrientation.LEFT)
    right = _slot(AxisOrientation.RIGHT)

class PlanarAccessor(OrientedAccessor[T]):
    ORIENTATION = PlanarOrientation

    left = _slot(PlanarOrientation.LEFT)
    right = _slot(PlanarOrientation.RIGHT)
    top = _slot(PlanarOrientation.TOP)
    bottom = _slot(PlanarOrientation.BOTTOM)

    def rotate(self, direction: RotateDirection) -> "PlanarAccessor[T]":
        l, r, t, b = self._producers
        if direction == RotateDirection.CLOCKWISE: return PlanarAccessor.lazy(b, t, l, r)
        elif direction == RotateDirection.COUNTER_CLOCKWISE: return PlanarAccessor.lazy(t, b, r, l)
        elif direction == RotateDirection.DOUBLE: return PlanarAccessor.lazy(r, l, b, t)
        else: assert False

class SpatialAccessor(OrientedAccessor[T]):
    ORIENTATION = SpatialOrientation

    up = _slot(SpatialOrientation.UP)
    down = _slot(SpatialOrientation.DOWN)
    left = _slot(SpatialOrientation.LEFT)
    right = _slot(SpatialOrientation.RIGHT)
    front = _slot(SpatialOrientation.FRONT)
    back = _slot(SpatialOrientation.BACK)

    def rotate(self, orientation: SpatialOrientation, direction: RotateDirection) -> "SpatialAccessor[T]":
        #Values on the ring around the axis, indexed by where they end up
        around = PLANAR_ORIENTATIONS.rotate(direction).map(orientation.back_project).map(self.at)

        producers = list(self._producers)
        for planar in PlanarOrientation:
            producers[orientation.back_project(planar).value] = (lambda p=planar: around.at(p))

        return SpatialAccessor.lazy(*producers)

PLANAR_ORIENTATIONS: PlanarAccessor[PlanarOrientation] = PlanarAccessor(*PlanarOrientation)
SPATIAL_ORIENTATIONS: SpatialAccessor[SpatialOrientation] = SpatialAccessor(*SpatialOrientation)
