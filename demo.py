import asyncio, aioconsole, logging, argparse, typing, rubiks
from view import CubeView

logging.basicConfig(level=logging.INFO)

parser = argparse.ArgumentParser()
parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
parser.add_argument("--plain", action="store_true", help="Print the cube without console colors")
args = parser.parse_args()

if args.debug: rubiks.LOGGER.setLevel(logging.DEBUG)

async def command_loop(stringifier: rubiks.CubeStringifier):
    cube = rubiks.SOLVED_CUBE
    history: typing.List[typing.List[rubiks.Rotation]] = []

    view : CubeView = None
    def show_state(move: typing.Optional[rubiks.Rotation]):
        if view and not view.has_exit: view.cube.update_state(cube, move)

    def apply(rotations: typing.List[rubiks.Rotation]):
        nonlocal cube
        for rot in rotations:
            cube = cube.rotate(rot)
            show_state(rot)

    #Main command loop
    try:
        while True:
            cmd, _, arg = (await aioconsole.ainput("> ")).strip().partition(" ")
            cmd = cmd.lower()
            if cmd == "h" or cmd == "help":
                print("(h)elp:             Shows this help text")
                print("(q)uit:             Exits the demo")
                print("(p)rint:            Prints the current cube")
                print("(r)otate <moves>:   Applies rotations, e.g. r R U R' U'")
                print("(u)ndo:             Reverts the last rotate command")
                print("(x) reset:          Resets the cube to the solved state")
                print("(v)iew:             Opens a 3D view of the cube which updates in real time")
                print("(d)ebug:            Toggles debug logging")
            elif cmd == "q" or cmd == "quit":
                print("Exiting...")
                break
            elif cmd == "p" or cmd == "print":
                print(stringifier.stringify(cube))
            elif cmd == "r" or cmd == "rotate":
                try: rotations = rubiks.Rotation.parse(arg)
                except ValueError as e:
                    print(e)
                    continue

                apply(rotations)
                history.append(rotations)
                print(stringifier.stringify(cube))
            elif cmd == "u" or cmd == "undo":
                if not history:
                    print("Nothing to undo")
                    continue

                apply(rubiks.invert(history.pop()))
                print(stringifier.stringify(cube))
            elif cmd == "x" or cmd == "reset":
                cube = rubiks.SOLVED_CUBE
                history.clear()
                show_state(None)
                print("Reset the cube")
            elif cmd == "v" or cmd == "view":
                if not view or view.has_exit:
                    view, _ = await CubeView.run_thread()
                    show_state(None)
            elif cmd == "d" or cmd == "debug":
                if rubiks.LOGGER.level != logging.DEBUG:
                    rubiks.LOGGER.setLevel(logging.DEBUG)
                    print("Enabled debug logging")
                else:
                    rubiks.LOGGER.setLevel(logging.INFO)
                    print("Disabled debug logging")
            elif cmd: print("Unknown command")
    finally:
        if view: view.close_threadsafe()

async def main():
    stringifier = rubiks.CubeStringifier(colors=not args.plain)
    print(stringifier.stringify(rubiks.SOLVED_CUBE))
    await command_loop(stringifier)

asyncio.run(main())
