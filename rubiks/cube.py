import collections, functools, logging, typing
from . import log, codec
from .orientation import SpatialOrientation, PlanarOrientation
from .accessor import SpatialAccessor, SPATIAL_ORIENTATIONS
from .face import Facelet, Face
from .rotation import Rotation
from .memo import memoized

class RubiksCube:
    _codes: SpatialAccessor[int]

    def __init__(self, codes: typing.Optional[SpatialAccessor[int]] = None):
        if codes is None: codes = SPATIAL_ORIENTATIONS.map(Facelet.of).map(codec.pure_face_code_of)
        self._codes = codes.resolve()

    @property
    def codes(self) -> SpatialAccessor[int]: return self._codes

    def rotate(self, rotations: typing.Union[Rotation, typing.Iterable[Rotation]]) -> "RubiksCube":
        if isinstance(rotations, Rotation): return self._rotate(rotations)
        return functools.reduce(RubiksCube._rotate, rotations, self)

    def _rotate(self, rotation: Rotation) -> "RubiksCube":
        orientation, direction = rotation.orientation, rotation.direction

        #Turn the face itself
        center_code = codec.rotate_face_code(self._codes.at(orientation), direction)

        #Every adjacent face receives the strip of the neighbour which precedes it in the turn direction
        adjacent = orientation.project()
        adjacent_codes = adjacent.map(self._codes.at)

        def updated_code(planar: PlanarOrientation) -> int:
            prev = planar.rotate_backward(direction)
            return codec.copy_side(
                adjacent_codes.at(prev), orientation.determine_adjacent_planar_orientation(prev),
                adjacent_codes.at(planar), orientation.determine_adjacent_planar_orientation(planar)
            )

        new_codes = { orientation: center_code, orientation.opposite: self._codes.at(orientation.opposite) }
        for planar in PlanarOrientation: new_codes[adjacent.at(planar)] = updated_code(planar)

        cube = RubiksCube(SpatialAccessor.of(new_codes.__getitem__))
        if log.LOGGER.isEnabledFor(logging.DEBUG): log.LOGGER.log(logging.DEBUG, f"rotate {rotation!s:3s} -> {cube}")
        return cube

    @memoized
    def faces(self) -> SpatialAccessor[Face]: return self._codes.map(codec.face_of).resolve()

    def face(self, orientation: SpatialOrientation) -> Face: return self.faces.at(orientation)

    @property
    def center_facelets(self) -> SpatialAccessor[Facelet]: return self.faces.map(lambda f: f.center_facelet)

    @property
    def is_solved(self) -> bool: return all(f.is_solved for f in self.faces)

    def facelet_counts(self) -> typing.Counter[Facelet]: return collections.Counter(fl for f in self.faces for fl in f.facelets)

    def __eq__(self, other):
        if not isinstance(other, RubiksCube): return NotImplemented
        return self._codes == other._codes

    def __hash__(self): return hash(self._codes)

    def __repr__(self): return f"RubiksCube({self})"
    def __str__(self): return " ".join(str(f) for f in self.faces)

SOLVED_CUBE = RubiksCube()
