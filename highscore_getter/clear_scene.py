"""The stage-clear scene: a walking player, a sliding logo and a prompt back to the title."""

from __future__ import annotations

from typing import Callable

from .clock import delta_time
from .csvreader import CsvReader
from .effect import _screen_position
from .field import TILE_IMAGE, Field
from .gameobject import GameObject, instantiate
from .render import Camera
from .scenery import BackGround
from .scenes import SceneId, SceneManager

PLAYER_IMAGE = "Assets/Image/new-Player1.5.png"
PLAYER_IMAGE_SIZE = int(48 * 1.5)
PLAYER_START_X = 400.0
PLAYER_START_Y = 890.0
PLAYER_WRAP_X = 1680.0
PLAYER_SPEED = 100.0
PLAYER_SCREEN_X = 400

LOGO_IMAGE = "Assets/Image/Clear.png"
LOGO_START = (2000.0, 200.0, 0.0)
LOGO_STOP_X = 250.0
LOGO_SPEED = 200.0
PROMPT_TEXT = "Return StartKey to title"
PROMPT_POSITION = (200, 500)

CLEAR_MAP = "Clear.csv"
CLEAR_MUSIC = "Assets/Sounds/BGM/Clear.mp3"
CAMERA_START = (100, 300)


class ClearPlayer(GameObject):
    """The player sprite running right forever, with the camera following it."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Clearplayer")
        self.image: str | None = None
        self.framecnt = 0
        self.fc_max = 0
        self.animframe = 0
        self.af_max = 0

    def initialize(self) -> None:
        self.image = PLAYER_IMAGE
        self.framecnt = 0
        self.animframe = 0
        self.fc_max = 11
        self.af_max = 6
        self.set_position(PLAYER_START_X, PLAYER_START_Y, 0.0)

    def update(self) -> None:
        self.framecnt += 1
        if self.framecnt > self.fc_max:
            self.framecnt = 0
            self.animframe = (self.animframe + 1) % self.af_max
        pos = self.transform.position
        pos.x += PLAYER_SPEED * delta_time()
        if pos.x > PLAYER_WRAP_X:
            pos.x = PLAYER_START_X
        cam = self.parent.find_game_object(Camera) if self.parent is not None else None
        if cam is None:
            raise LookupError("no Camera object found beside the player")
        cam.value = int(pos.x - PLAYER_SCREEN_X)

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        size = PLAYER_IMAGE_SIZE
        renderer.draw_rect_graph(
            self.image, xpos, ypos, self.animframe * size, 2 * size, size, size, True, False
        )


class ClearLogo(GameObject):
    """The clear logo sliding in from the right; once in place it shows the prompt."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "ClearLogo")
        self.image: str | None = None
        self.output = False

    def initialize(self) -> None:
        self.image = LOGO_IMAGE
        self.set_position(*LOGO_START)

    def update(self) -> None:
        pos = self.transform.position
        pos.x -= LOGO_SPEED * delta_time()
        if pos.x < LOGO_STOP_X:
            pos.x = LOGO_STOP_X
            self.output = True

    def draw(self, renderer) -> None:
        pos = self.transform.position
        renderer.draw_graph(self.image, int(pos.x), int(pos.y), True)
        if self.output:
            renderer.draw_string(PROMPT_TEXT, *PROMPT_POSITION)


class ClearScene(GameObject):
    """Builds the clear stage and returns to the title when start is pressed."""

    def __init__(
        self,
        parent: GameObject | None = None,
        *,
        map_reader: CsvReader | None = None,
        start_pressed: Callable[[], bool] | None = None,
        scene_manager: SceneManager | None = None,
    ) -> None:
        super().__init__(parent, "ClearScene")
        self.image: str | None = None
        self.map_reader = map_reader
        self.start_pressed = start_pressed if start_pressed is not None else (lambda: False)
        self.scene_manager = scene_manager
        self.music_playing: str | None = None

    def initialize(self) -> None:
        cam = instantiate(Camera, self)
        instantiate(BackGround, self)
        field = instantiate(Field, self)
        field.filename = CLEAR_MAP
        cam.value, cam.value_y = CAMERA_START
        if self.map_reader is not None:
            field.image = TILE_IMAGE
            field.load(self.map_reader)
        else:
            field.reset()
        instantiate(ClearPlayer, self)
        instantiate(ClearLogo, self)
        self.music_playing = CLEAR_MUSIC

    def _manager(self) -> SceneManager:
        if self.scene_manager is not None:
            return self.scene_manager
        node = self.parent
        while node is not None:
            if isinstance(node, SceneManager):
                return node
            node = node.parent
        raise LookupError("no SceneManager above the clear scene")

    def update(self) -> None:
        logo = self.find_game_object(ClearLogo)
        if logo is None:
            raise LookupError("no ClearLogo in the clear scene")
        if logo.output:
            self.music_playing = None
            if self.start_pressed():
                self._manager().change_scene(SceneId.TITLE)

    def draw(self, renderer) -> None:
        if self.image is not None:
            pos = self.transform.position
            renderer.draw_graph(self.image, pos.x, pos.y, True)