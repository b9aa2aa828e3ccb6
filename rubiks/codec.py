import typing
from .orientation import PlanarOrientation, RotateDirection
from .face import Facelet, Face

#A face is packed into one integer, 3 bits per facelet:
#
#   bits  0- 8: left_top    top     right_top
#   bits  9-17: left        center  right
#   bits 18-26: left_bottom bottom  right_bottom
#
#Strips of 3 facelets are packed the same way (first, second, third) and are always
#read clockwise around the face (see Face.sides).

class InvalidCodeError(ValueError):
    pass

FACELET_BITS = 3
FACELET_MASK = (1 << FACELET_BITS) - 1
FACE_BITS = 9 * FACELET_BITS

OFFSET_LEFT_TOP = 0
OFFSET_TOP = 3
OFFSET_RIGHT_TOP = 6
OFFSET_LEFT = 9
OFFSET_CENTER = 12
OFFSET_RIGHT = 15
OFFSET_LEFT_BOTTOM = 18
OFFSET_BOTTOM = 21
OFFSET_RIGHT_BOTTOM = 24

FACE_OFFSETS = (
    OFFSET_LEFT_TOP, OFFSET_TOP, OFFSET_RIGHT_TOP,
    OFFSET_LEFT, OFFSET_CENTER, OFFSET_RIGHT,
    OFFSET_LEFT_BOTTOM, OFFSET_BOTTOM, OFFSET_RIGHT_BOTTOM
)

FACELET_CODES: typing.Dict[Facelet, int] = {
    Facelet.D: 0b000,
    Facelet.U: 0b001,
    Facelet.F: 0b010,
    Facelet.B: 0b011,
    Facelet.R: 0b100,
    Facelet.L: 0b101
}
CODE_FACELETS: typing.Dict[int, Facelet] = { c: f for f, c in FACELET_CODES.items() }

#Offsets of each strip in clockwise reading order
SIDE_OFFSETS: typing.Dict[PlanarOrientation, typing.Tuple[int, int, int]] = {
    PlanarOrientation.LEFT: (OFFSET_LEFT_BOTTOM, OFFSET_LEFT, OFFSET_LEFT_TOP),
    PlanarOrientation.RIGHT: (OFFSET_RIGHT_TOP, OFFSET_RIGHT, OFFSET_RIGHT_BOTTOM),
    PlanarOrientation.TOP: (OFFSET_LEFT_TOP, OFFSET_TOP, OFFSET_RIGHT_TOP),
    PlanarOrientation.BOTTOM: (OFFSET_RIGHT_BOTTOM, OFFSET_BOTTOM, OFFSET_LEFT_BOTTOM)
}

#New slot <- old slot, listed in FACE_OFFSETS order
ROTATION_SOURCES: typing.Dict[RotateDirection, typing.Tuple[int, ...]] = {
    RotateDirection.CLOCKWISE: (
        OFFSET_LEFT_BOTTOM, OFFSET_LEFT, OFFSET_LEFT_TOP,
        OFFSET_BOTTOM, OFFSET_CENTER, OFFSET_TOP,
        OFFSET_RIGHT_BOTTOM, OFFSET_RIGHT, OFFSET_RIGHT_TOP
    ),
    RotateDirection.COUNTER_CLOCKWISE: (
        OFFSET_RIGHT_TOP, OFFSET_RIGHT, OFFSET_RIGHT_BOTTOM,
        OFFSET_TOP, OFFSET_CENTER, OFFSET_BOTTOM,
        OFFSET_LEFT_TOP, OFFSET_LEFT, OFFSET_LEFT_BOTTOM
    ),
    RotateDirection.DOUBLE: (
        OFFSET_RIGHT_BOTTOM, OFFSET_BOTTOM, OFFSET_LEFT_BOTTOM,
        OFFSET_RIGHT, OFFSET_CENTER, OFFSET_LEFT,
        OFFSET_RIGHT_TOP, OFFSET_TOP, OFFSET_LEFT_TOP
    )
}

def facelet_code_at(code: int, offset: int) -> int: return (code >> offset) & FACELET_MASK

def facelet_code_of(facelet: Facelet) -> int: return FACELET_CODES[facelet]

def facelet_of(code: int) -> Facelet:
    if code not in CODE_FACELETS: raise InvalidCodeError(f"Invalid facelet code: {code:#05b}")
    return CODE_FACELETS[code]

def face_code_of(face: Face) -> int:
    code = 0
    for offset, facelet in zip(FACE_OFFSETS, face.facelets): code |= facelet_code_of(facelet) << offset
    return code

def pure_face_code_of(facelet: Facelet) -> int: return face_code_of(Face.pure(facelet))

def face_of(code: int) -> Face:
    if code < 0 or code >> FACE_BITS: raise InvalidCodeError(f"Face code out of range: {code:#x}")
    return Face(*(facelet_of(facelet_code_at(code, offset)) for offset in FACE_OFFSETS))

def rotate_face_code(code: int, direction: RotateDirection) -> int:
    rotated = 0
    for offset, src_offset in zip(FACE_OFFSETS, ROTATION_SOURCES[direction]):
        rotated |= facelet_code_at(code, src_offset) << offset
    return rotated

def side_code_of(code: int, side: PlanarOrientation) -> int:
    side_code = 0
    for i, offset in enumerate(SIDE_OFFSETS[side]): side_code |= facelet_code_at(code, offset) << (i * FACELET_BITS)
    return side_code

def copy_side(from_code: int, from_side: PlanarOrientation, to_code: int, to_side: PlanarOrientation) -> int:
    side_code = side_code_of(from_code, from_side)

    #Overwrite the destination strip, keeping the other 6 facelets
    for i, offset in enumerate(SIDE_OFFSETS[to_side]):
        to_code &= ~(FACELET_MASK << offset)
        to_code |= facelet_code_at(side_code, i * FACELET_BITS) << offset
    return to_code
