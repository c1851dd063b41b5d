"""Static stage objects: the goal flag, checkpoints and the scrolling background."""

from __future__ import annotations

from .effect import _screen_position
from .gameobject import GameObject
from .hitobject import HitObject

GOAL_SIZE = 48
CHECKPOINT_SIZE = 16
CHECKPOINT_SCORE = 10
BACKGROUND_WIDTH = 1280
BACKGROUND_TILES = 10


class _AnimatedMarker(GameObject):
    """A four-frame looping sprite with a map hit box."""

    image_path = ""
    image_size = 0

    def __init__(self, parent: GameObject | None, name: str) -> None:
        super().__init__(parent, name)
        self.image: str | None = None
        self.hit_object: HitObject | None = None
        self.framecnt = 0
        self.animframe = 0

    def initialize(self) -> None:
        self.image = self.image_path
        self.hit_object = HitObject.from_size((self.image_size, self.image_size), self)

    def update(self) -> None:
        self.framecnt += 1
        if self.framecnt > 15:
            self.framecnt = 0
            self.animframe = (self.animframe + 1) % 4

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        size = self.image_size
        renderer.draw_rect_graph(self.image, xpos, ypos, self.animframe * size, 0, size, size, True)


class Goal(_AnimatedMarker):
    """The flag that ends a stage."""

    image_path = "Assets/Image/Objects/Flag.png"
    image_size = GOAL_SIZE

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Goal")
        self.hitsize = (GOAL_SIZE, GOAL_SIZE)

    def initialize(self) -> None:
        super().initialize()

    def update(self) -> None:
        super().update()

    def draw(self, renderer) -> None:
        super().draw(renderer)


class CheckPoint(_AnimatedMarker):
    """A rune the player can restart from."""

    image_path = "Assets/Image/Objects/Rune.png"
    image_size = CHECKPOINT_SIZE

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "CheckPoint")

    def initialize(self) -> None:
        super().initialize()

    def update(self) -> None:
        super().update()

    def draw(self, renderer) -> None:
        super().draw(renderer)

    def add_score(self, scoreboard) -> None:
        """Credit the checkpoint's points to a scoreboard with an add_score method."""
        scoreboard.add_score(CHECKPOINT_SCORE)


class BackGround(GameObject):
    """A fixed backdrop and a horizontally scrolling forest strip."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "BackGround")
        self.image: str | None = None
        self.image_move: str | None = None

    def initialize(self) -> None:
        self.image = "Assets/Image/BackGround4.png"
        self.image_move = "Assets/Image/forest.png"

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self, vertical=False)
        renderer.draw_graph(self.image, 0, 0, False)
        for i in range(BACKGROUND_TILES):
            renderer.draw_graph(self.image_move, xpos + i * BACKGROUND_WIDTH, ypos, True)