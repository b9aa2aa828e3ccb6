import typing, enum, dataclasses, re
from .face import Color, Facelet
from .cube import RubiksCube

class TextColor(enum.Enum):
    NONE = ""
    BLACK = "\x1b[30m"
    RED = "\x1b[31m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    BLUE = "\x1b[34m"
    PURPLE = "\x1b[35m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"

class BackgroundColor(enum.Enum):
    NONE = ""
    BLACK = "\x1b[40m"
    RED = "\x1b[41m"
    GREEN = "\x1b[42m"
    YELLOW = "\x1b[43m"
    BLUE = "\x1b[44m"
    PURPLE = "\x1b[45m"
    CYAN = "\x1b[46m"
    WHITE = "\x1b[47m"

RESET = "\x1b[0m"
_SGR_PATTERN = re.compile("\x1b\\[\\d+m")

def decolorize(text: str) -> str: return _SGR_PATTERN.sub("", text)

@dataclasses.dataclass(frozen=True)
class ConsoleColor:
    text_color: TextColor
    background_color: BackgroundColor = BackgroundColor.NONE

    def wrap(self, text: str) -> str: return f"{self.text_color.value}{self.background_color.value}{text}{RESET}"

INFO = ConsoleColor(TextColor.BLUE)
SUCCESS = ConsoleColor(TextColor.GREEN)
FAILED = ConsoleColor(TextColor.RED)

#The 8 color terminal palette has no orange, purple stands in for it
FACELET_COLORS: typing.Dict[Color, ConsoleColor] = {
    Color.YELLOW: ConsoleColor(TextColor.BLACK, BackgroundColor.YELLOW),
    Color.WHITE: ConsoleColor(TextColor.BLACK, BackgroundColor.WHITE),
    Color.BLUE: ConsoleColor(TextColor.BLACK, BackgroundColor.BLUE),
    Color.GREEN: ConsoleColor(TextColor.BLACK, BackgroundColor.GREEN),
    Color.RED: ConsoleColor(TextColor.BLACK, BackgroundColor.RED),
    Color.ORANGE: ConsoleColor(TextColor.BLACK, BackgroundColor.PURPLE)
}

INDENT = " " * 18
SMALL_TOP = "┏━━━━━┳━━━━━┳━━━━━┓"
SMALL_SEP = "┣━━━━━╋━━━━━╋━━━━━┫"
SMALL_BOTTOM = "┗━━━━━┻━━━━━┻━━━━━┛"
WIDE_TOP = "┏━━━━━┳━━━━━┳━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━┳━━━━━┳━━━━━┳━━━━━┳━━━━━┳━━━━━┓"
WIDE_SEP = "┣━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━┫"
WIDE_BOTTOM = "┗━━━━━┻━━━━━┻━━━━━╋━━━━━╋━━━━━╋━━━━━╋━━━━━┻━━━━━┻━━━━━┻━━━━━┻━━━━━┻━━━━━┛"

class CubeStringifier:
    PUZZLE_NAME = "Rubik's Cube(3 x 3 x 3)"

    colors: bool

    def __init__(self, colors: bool = True): self.colors = colors

    def stringify(self, cube: RubiksCube) -> str:
        state = self._wrap(SUCCESS, "Solved") if cube.is_solved else self._wrap(FAILED, "Unsolved")
        props = [
            ("Puzzle", CubeStringifier.PUZZLE_NAME),
            ("State", state),
            ("Expanded View", "\n" + self.expanded_view(cube))
        ]
        return "\n".join(f"- {self._wrap(INFO, k)}:\t {v}" for k, v in props)

    def expanded_view(self, cube: RubiksCube) -> str:
        faces = cube.faces
        band = [faces.left, faces.front, faces.right, faces.back]

        lines = [INDENT + SMALL_TOP]
        for i, row in enumerate(faces.up.rows):
            if i > 0: lines.append(INDENT + SMALL_SEP)
            lines.append(INDENT + self._row(row))

        lines.append(WIDE_TOP)
        for i in range(3):
            if i > 0: lines.append(WIDE_SEP)
            lines.append(self._row([fl for f in band for fl in f.rows[i]]))
        lines.append(WIDE_BOTTOM)

        for i, row in enumerate(faces.down.rows):
            if i > 0: lines.append(INDENT + SMALL_SEP)
            lines.append(INDENT + self._row(row))
        lines.append(INDENT + SMALL_BOTTOM)

        return "\n".join(lines) + "\n"

    def _row(self, facelets: typing.Iterable[Facelet]) -> str:
        return "┃ " + " ┃ ".join(self._wrap(FACELET_COLORS[f.color], f" {f.letter} ") for f in facelets) + " ┃"

    def _wrap(self, color: ConsoleColor, text: str) -> str: return color.wrap(text) if self.colors else text
