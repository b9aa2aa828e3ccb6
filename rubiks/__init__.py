from .log import LOGGER
from .orientation import AdjacencyError, RotateDirection, AxisOrientation, PlanarOrientation, SpatialOrientation
from .accessor import AxisAccessor, PlanarAccessor, SpatialAccessor, PLANAR_ORIENTATIONS, SPATIAL_ORIENTATIONS
from .face import Color, Facelet, Face
from .codec import InvalidCodeError
from .rotation import Rotation, invert
from .cube import RubiksCube, SOLVED_CUBE
from .stringify import CubeStringifier, ConsoleColor, decolorize
