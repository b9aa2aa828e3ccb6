import asyncio, threading, pyglet, math, typing, rubiks
from pyglet.math import Vec2, Vec3, Mat4

CUBE_VERTS = [
    0, 0, 0,  0, 0, 1,  0, 1, 1,  0, 0, 0,  0, 1, 1,  0, 1, 0, # -x
    1, 0, 0,  1, 1, 0,  1, 1, 1,  1, 0, 0,  1, 1, 1,  1, 0, 1, # +x
    0, 0, 0,  1, 0, 0,  1, 0, 1,  0, 0, 0,  1, 0, 1,  0, 0, 1, # -y
    0, 1, 0,  0, 1, 1,  1, 1, 1,  0, 1, 0,  1, 1, 1,  1, 1, 0, # +y
    0, 0, 0,  0, 1, 0,  1, 1, 0,  0, 0, 0,  1, 1, 0,  1, 0, 0, # -z
    0, 0, 1,  1, 0, 1,  1, 1, 1,  0, 0, 1,  1, 1, 1,  0, 1, 1, # +z
]
CUBE_VERT_FACES = [
    rubiks.SpatialOrientation.LEFT, rubiks.SpatialOrientation.RIGHT,
    rubiks.SpatialOrientation.DOWN, rubiks.SpatialOrientation.UP,
    rubiks.SpatialOrientation.BACK, rubiks.SpatialOrientation.FRONT
]

CUBE_VERT_SHADER_SRC = """
#version 150 core

in vec3 pos;
in vec4 color;
out vec3 vertPos;
out vec4 vertCol;

uniform WindowBlock {
    mat4 projection;
    mat4 view;
} window;

uniform mat4 cubeMat, cubeletMat;

void main() {
    gl_Position = window.projection * window.view * cubeMat * cubeletMat * vec4(pos, 1.0);
    vertPos = pos;
    vertCol = color;
}
""".strip()

CUBE_FRAG_SHADER_SRC = """
#version 150 core

in vec3 vertPos;
in vec4 vertCol;
out vec4 outCol;

void main() {
    float xDst = min(vertPos.x, 1-vertPos.x), yDst = min(vertPos.y, 1-vertPos.y), zDst = min(vertPos.z, 1-vertPos.z);
    float xyDst = max(xDst, yDst), xzDst = max(xDst, zDst), yzDst = max(yDst, zDst);
    float edgeDst = min(xyDst, min(xzDst, yzDst));

    outCol = edgeDst > 0.05 ? vertCol : vec4(0.05, 0.05, 0.05, 1);
}
""".strip()

_cube_shader = None

def cube_shader() -> "pyglet.graphics.shader.ShaderProgram":
    #Compiled on first use, from the view thread which owns the GL context
    global _cube_shader
    if _cube_shader is None:
        _cube_shader = pyglet.graphics.shader.ShaderProgram(
            pyglet.graphics.shader.Shader(CUBE_VERT_SHADER_SRC, "vertex"),
            pyglet.graphics.shader.Shader(CUBE_FRAG_SHADER_SRC, "fragment")
        )
    return _cube_shader

COLOR_RGBS = {
    rubiks.Color.WHITE: (255, 255, 255),
    rubiks.Color.YELLOW: (255, 213, 0),
    rubiks.Color.RED: (185, 0, 0),
    rubiks.Color.GREEN: (0, 155, 72),
    rubiks.Color.BLUE: (0, 69, 173),
    rubiks.Color.ORANGE: (255, 89, 0)
}

def is_on_face(face: rubiks.SpatialOrientation, x: int, y: int, z: int) -> bool:
    dx, dy, dz = face.direction
    return (
        (dx == 0 or x == dx+1) and
        (dy == 0 or y == dy+1) and
        (dz == 0 or z == dz+1)
    )

def facelet_at(cube: rubiks.RubiksCube, face: rubiks.SpatialOrientation, x: int, y: int, z: int) -> rubiks.Facelet:
    #Locate the cubelet on the face's own grid, using the face's planar right/top directions
    p = (x-1, y-1, z-1)
    right = face.at(rubiks.PlanarOrientation.RIGHT).direction
    top = face.at(rubiks.PlanarOrientation.TOP).direction
    col = 1 + sum(a*b for a, b in zip(p, right))
    row = 1 - sum(a*b for a, b in zip(p, top))
    return cube.face(face).rows[row][col]

def cubelet_colors(cube: rubiks.RubiksCube, x: int, y: int, z: int) -> typing.List[float]:
    #RGBA per vertex, in CUBE_VERTS order; sides hidden inside the cube stay transparent
    colors = []
    for face in CUBE_VERT_FACES:
        if is_on_face(face, x, y, z):
            col = COLOR_RGBS[facelet_at(cube, face, x, y, z).color]
            colors += [col[0] / 255, col[1] / 255, col[2] / 255, 1] * 6
        else:
            colors += [0,0,0,0] * 6
    return colors

class Cubelet:
    x: int
    y: int
    z: int

    cubelet_mat: Mat4
    cube: "pyglet.graphics.vertexdomain.VertexList"

    def __init__(self, x, y, z, state: rubiks.RubiksCube):
        self.x, self.y, self.z = x, y, z
        self.cubelet_mat = Mat4.from_translation(Vec3(x, y, z))
        self.cube = cube_shader().vertex_list(
            len(CUBE_VERTS) // 3, pyglet.gl.GL_TRIANGLES,
            pos=('f', CUBE_VERTS), color=('f', cubelet_colors(state, x, y, z))
        )

    def draw(self):
        shader = cube_shader()
        with shader:
            shader["cubeletMat"] = self.cubelet_mat
            self.cube.draw(pyglet.gl.GL_TRIANGLES)

    def update_state(self, state: rubiks.RubiksCube):
        self.cube.color[:] = cubelet_colors(state, self.x, self.y, self.z)

class Cube:
    TURN_SPEED = 4*math.pi

    cube_mat: Mat4
    cubelets: typing.List[typing.List[typing.List[Cubelet]]]

    _lock: threading.Lock
    _new_state: rubiks.RubiksCube
    _new_move: rubiks.Rotation

    _cur_move: rubiks.Rotation
    _cur_move_angle: float
    _cur_move_end_state: rubiks.RubiksCube

    def __init__(self, mat):
        self.cube_mat = mat

        self._lock = threading.Lock()
        self._new_state = self._new_move = None

        self._cur_move = self._cur_move_angle = self._cur_move_end_state = None

        #Create cubelets
        self.cubelets = [[[Cubelet(x, y, z, rubiks.SOLVED_CUBE) for z in range(3)] for y in range(3)] for x in range(3)]

        pyglet.clock.schedule(self.update)

    def update(self, dt):
        #Check if we have a new cube state
        with self._lock:
            new_state, new_move = self._new_state, self._new_move
            self._new_state = self._new_move = None

        if new_state is not None:
            if new_move is None:
                #Jump straight to the new state
                self._cur_move = self._cur_move_angle = self._cur_move_end_state = None
                self._set_state(new_state)
            else:
                if self._cur_move: self._set_state(self._cur_move_end_state)
                self._cur_move, self._cur_move_angle, self._cur_move_end_state = new_move, 0, new_state

        #Animate the current move
        if not self._cur_move: return
        self._cur_move_angle += Cube.TURN_SPEED * dt

        if self._cur_move_angle >= abs(self._cur_move.angle):
            self._set_state(self._cur_move_end_state)
            self._cur_move = self._cur_move_angle = self._cur_move_end_state = None

    def draw(self):
        shader = cube_shader()
        with shader:
            shader["cubeMat"] = self.cube_mat

            #Draw cubelets
            for cblet in self:
                if self._in_cur_move(cblet): continue
                cblet.draw()

            #Draw moving cubelets
            if self._cur_move:
                shader["cubeMat"] = self.cube_mat @ Mat4.from_rotation((+1 if self._cur_move.is_ccw else -1) * self._cur_move_angle, Vec3(*self._cur_move.orientation.direction))

                for cblet in self:
                    if not self._in_cur_move(cblet): continue
                    cblet.draw()

    def update_state(self, state: rubiks.RubiksCube, move: typing.Optional[rubiks.Rotation]):
        #Called from other threads, the meshes are only touched by update() on the view thread
        with self._lock: self._new_state, self._new_move = state, move

    def _in_cur_move(self, cblet: Cubelet) -> bool:
        return bool(self._cur_move) and is_on_face(self._cur_move.orientation, cblet.x, cblet.y, cblet.z)

    def _set_state(self, state: rubiks.RubiksCube):
        for cblet in self: cblet.update_state(state)

    def __iter__(self) -> typing.Iterable[Cubelet]:
        for x in range(3):
            for y in range(3):
                for z in range(3):
                    yield self.cubelets[x][y][z]

def orientation_mat(top: rubiks.SpatialOrientation) -> Mat4:
    #Turns the whole cube so that 'top' faces up, and its right neighbour faces the camera's +x
    ud = Vec3(*top.direction)
    sd = Vec3(*top.at(rubiks.PlanarOrientation.RIGHT).direction)
    return Mat4.from_translation(-Vec3(3,3,3) / 2) @ Mat4([
        *sd, 0,
        *ud, 0,
        *sd.cross(ud), 0,
        0, 0, 0, 1
    ]).transpose()

class CubeView(pyglet.window.Window):
    KEY_FACES = {
        pyglet.window.key._1: rubiks.SpatialOrientation.UP,
        pyglet.window.key._2: rubiks.SpatialOrientation.DOWN,
        pyglet.window.key._3: rubiks.SpatialOrientation.LEFT,
        pyglet.window.key._4: rubiks.SpatialOrientation.RIGHT,
        pyglet.window.key._5: rubiks.SpatialOrientation.FRONT,
        pyglet.window.key._6: rubiks.SpatialOrientation.BACK
    }

    cam_angles: Vec2
    cube: Cube

    _lock: threading.Lock
    _should_close: bool

    def __init__(self):
        super().__init__(1024, 1024, caption="Rubik's Cube View")
        self.set_vsync(True)

        self._lock = threading.Lock()
        self._should_close = False

        #Set up rendering
        pyglet.gl.glClearColor(0.9, 0.9, 0.9, 1)
        pyglet.gl.glEnable(pyglet.gl.GL_DEPTH_TEST)
        pyglet.gl.glCullFace(pyglet.gl.GL_BACK)
        self.cam_angles = Vec2(math.pi/4, math.pi/4)

        #Create the cube
        self.cube = Cube(orientation_mat(rubiks.SpatialOrientation.UP))

    def on_resize(self, width, height):
        super().on_resize(width, height)
        self.projection = Mat4.perspective_projection(self.aspect_ratio, 0.1, 1000)

    def on_draw(self, dt):
        self.clear()

        #Update view matrix
        sx, cx = math.sin(self.cam_angles.x), math.cos(self.cam_angles.x)
        sy, cy = math.sin(self.cam_angles.y), math.cos(self.cam_angles.y)
        cam_pos = Vec3(sy * cx, sx, cy * cx) * 10
        self.view = Mat4.look_at(cam_pos, Vec3(), -cam_pos.cross(Vec3(0, 1, 0)).cross(-cam_pos).normalize())

        #Draw the cube
        self.cube.draw()

    def on_key_press(self, symbol, modifiers):
        #Keys 1-6 put U, D, L, R, F or B on top
        top = CubeView.KEY_FACES.get(symbol)
        if top: self.cube.cube_mat = orientation_mat(top)

    def on_mouse_drag(self, x, y, dx, dy, buttons, modifiers):
        if (buttons & pyglet.window.mouse.LEFT) == 0: return
        self.cam_angles.x -= dy / 512
        self.cam_angles.y -= dx / 512
        self.cam_angles.x = pyglet.math.clamp(self.cam_angles.x, -math.pi/2 * 0.9, +math.pi/2 * 0.9)
        self.cam_angles.y = self.cam_angles.y % (2*math.pi)

    def run(self):
        while not self.has_exit:
            with self._lock:
                if self._should_close: break

            dt = pyglet.clock.tick()
            self.dispatch_events()
            self.dispatch_event('on_draw', dt)
            self.flip()

        self.close()

    @staticmethod
    def run_thread(exit_cb: typing.Union[None, typing.Callable] = None) -> asyncio.Future[typing.Tuple["CubeView", threading.Thread]]:
        fut = asyncio.Future()

        def thread_fnc(loop: asyncio.BaseEventLoop):
            view = CubeView()
            loop.call_soon_threadsafe(lambda: fut.set_result((view, threading.current_thread())))
            view.run()
            if exit_cb and loop.is_running(): loop.call_soon_threadsafe(exit_cb)

        threading.Thread(target=thread_fnc, args=(asyncio.get_event_loop(),)).start()

        return fut

    def close_threadsafe(self):
        with self._lock: self._should_close = True

if __name__ == '__main__': CubeView().run()
