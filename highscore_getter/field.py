"""Tile map of a stage: terrain lookup, collision push-back and spawn points."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Iterator

from .csvreader import CsvReader
from .gameobject import GameObject
from .render import Camera

TILE_SIZE = 48
TILE_IMAGE = "Assets/Image/MapChip/SwanpTiles1.5.png"
MAP_FOLDER = Path("Assets") / "Map"

_WALL_CHIPS = range(0, 60)
_LADDER_CHIPS = range(60, 63)
_ITEM_CHIP = 106
_TUTORIAL_CHIPS = range(300, 310)


def _cdiv(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b >= 0) else -q


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - _cdiv(a, b) * b


class ObjectNumber(IntEnum):
    """Map cell values that place objects rather than terrain."""

    GOAL = 102
    CHECKPOINT = 103
    PLAYER = 105
    ITEM = 106
    RIFT_L = 107
    RIFT_C = 108
    RIFT_R = 109
    BOX = 110
    SLIMEA = 201
    SLIMEB = 202
    SLIMEC = 203
    BARDA = 204
    PLANTA = 205
    ZOMBIEA = 206
    SKELETONA = 207


@dataclass(frozen=True)
class SpawnPoint:
    """An object placed by the map, at the centre of its cell."""

    kind: ObjectNumber
    row: int
    column: int
    x: int
    y: int


class Field(GameObject):
    """The tile grid a stage is built on."""

    def __init__(
        self,
        parent: GameObject | None = None,
        filename: str = "text.csv",
        folder: str | Path = MAP_FOLDER,
    ) -> None:
        super().__init__(parent, "Field")
        self.filename = filename
        self.folder = Path(folder)
        self.image: str | None = None
        self._map: list[int] | None = None
        self.width = 0
        self.height = 0

    def load(self, reader: CsvReader) -> None:
        """Fill the grid from a table; its width is that of the first line."""
        height = reader.lines()
        width = reader.columns(0)
        self._map = [reader.get_int(row, col) for row in range(height) for col in range(width)]
        self.height = height
        self.width = width

    def reset(self) -> None:
        """Load the map file named by folder and filename."""
        self.image = TILE_IMAGE
        self.load(CsvReader(self.folder / self.filename))

    def spawn_points(self) -> Iterator[SpawnPoint]:
        """Objects the map places, row by row."""
        if self._map is None:
            return
        half = TILE_SIZE // 2
        for index, value in enumerate(self._map):
            try:
                kind = ObjectNumber(value)
            except ValueError:
                continue
            row, column = divmod(index, self.width)
            yield SpawnPoint(kind, row, column, column * TILE_SIZE + half, row * TILE_SIZE + half)

    def draw(self, renderer) -> None:
        if self._map is None:
            return
        scroll = scroll_y = 0
        if self.parent is not None:
            cam = self.parent.find_game_object(Camera)
            if cam is not None:
                scroll, scroll_y = cam.value, cam.value_y
        for index, chip in enumerate(self._map):
            row, column = divmod(index, self.width)
            renderer.draw_rect_graph(
                self.image,
                column * TILE_SIZE - scroll,
                row * TILE_SIZE - scroll_y,
                TILE_SIZE * _cmod(chip, 10),
                TILE_SIZE * _cdiv(chip, 10),
                TILE_SIZE,
                TILE_SIZE,
                True,
            )

    def release(self) -> None:
        self._map = None

    def chip_num(self, x, y) -> int:
        """Value of the cell holding the point (x, y)."""
        if self._map is None:
            raise RuntimeError("no map loaded")
        column = _cdiv(int(x), TILE_SIZE)
        row = _cdiv(int(y), TILE_SIZE)
        if not (0 <= column < self.width and 0 <= row < self.height):
            raise IndexError(f"point ({x}, {y}) lies outside the map")
        return self._map[row * self.width + column]

    def what_block(self, x, y) -> str:
        """Kind of terrain at (x, y): Wall, Ladder, Item, Tutorial or empty."""
        if self._map is None:
            return ""
        chip = self.chip_num(x, y)
        if chip in _WALL_CHIPS:
            return "Wall"
        if chip in _LADDER_CHIPS:
            return "Ladder"
        if chip == _ITEM_CHIP:
            return "Item"
        if chip in _TUTORIAL_CHIPS:
            return "Tutorial"
        return ""

    def collision_down_check(self, x, y) -> int:
        if self.what_block(x, y) == "Wall":
            return _cmod(int(y), TILE_SIZE) + 1
        return 0

    def collision_up_check(self, x, y) -> int:
        if self.what_block(x, y) == "Wall":
            return TILE_SIZE - _cmod(int(y), TILE_SIZE) - 1
        return 0

    def collision_left_check(self, x, y) -> int:
        if self.what_block(x, y) == "Wall":
            return TILE_SIZE - _cmod(int(x), TILE_SIZE)
        return 0

    def collision_right_check(self, x, y) -> int:
        if self.what_block(x, y) == "Wall":
            return _cmod(int(x), TILE_SIZE) + 1
        return 0

    def collision_object_check(self, x, y) -> bool:
        """Whether (x, y) is on a ladder."""
        return self.what_block(x, y) == "Ladder"

    def collision_object_check_number(self, x, y) -> int:
        """Cell value of a tutorial sign at (x, y), or -1."""
        if self.what_block(x, y) == "Tutorial":
            return self.chip_num(x, y)
        return -1