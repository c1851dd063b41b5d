"""Short sprite animations such as hits, explosions and dust."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .gameobject import GameObject, Transform, Vec3
from .render import Camera


def _screen_position(obj: GameObject, vertical: bool = True) -> tuple[int, int]:
    """Position of obj on screen after the camera scroll of its parent's scene."""
    xpos = int(obj.position.x)
    ypos = int(obj.position.y)
    cam = obj.parent.find_game_object(Camera) if obj.parent is not None else None
    if cam is not None:
        xpos -= int(cam.value)
        if vertical:
            ypos -= int(cam.value_y)
    return xpos, ypos


class EffectType(IntEnum):
    KILL = 0
    GRASS = 1
    JUMP = 2
    SLASH = 3
    MINE = 4
    WALK = 5
    RUN = 6
    EXPLOSION = 7
    EXTINCTION = 8
    HIT = 9
    END = 10


@dataclass(frozen=True)
class _EffectSpec:
    file_name: str
    can_loop: bool
    fc_max: int
    af_max: int
    image_size: tuple[int, int]
    object_name: str


_FOLDER = "Assets/Image/Effect/"

_SPECS = {
    EffectType.KILL: _EffectSpec(_FOLDER + "Kill.png", False, 10, 7, (64, 64), "KillEffect"),
    EffectType.GRASS: _EffectSpec(_FOLDER + "Grass.png", True, 20, 5, (64, 64), "GrassEffect"),
    EffectType.JUMP: _EffectSpec(_FOLDER + "Jump.png", False, 5, 4, (64, 64), "jumpEffect"),
    EffectType.SLASH: _EffectSpec(_FOLDER + "Slash.png", False, 7, 4, (64, 64), "SlashEffect"),
    EffectType.MINE: _EffectSpec(_FOLDER + "Mine.png", True, 25, 4, (64, 64), "MineEffect"),
    EffectType.WALK: _EffectSpec(_FOLDER + "Walk.png", True, 10, 6, (24, 6), "WalkEffect"),
    EffectType.RUN: _EffectSpec(_FOLDER + "Run.png", True, 10, 6, (38, 6), "RunEffect"),
    EffectType.EXPLOSION: _EffectSpec(_FOLDER + "Explosion.png", False, 15, 4, (160, 160), "RunEffect"),
    EffectType.EXTINCTION: _EffectSpec(_FOLDER + "Hit1.png", False, 10, 5, (32, 32), "ExtinctionEffect"),
    EffectType.HIT: _EffectSpec(_FOLDER + "Hit2.png", False, 10, 7, (32, 32), "HitEffect"),
}


class Effect(GameObject):
    """A one-shot or looping animation drawn at a point of the stage."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Effect")
        self.image: str | None = None
        self.framecnt = 0
        self.fc_max = 0
        self.animframe = 0
        self.af_max = 0
        self.file_name = ""
        self.can_loop = False
        self.is_right = True
        self.image_size: tuple[int, int] = (0, 0)

    def reset(self, transform: Transform, effect_type, is_right: bool = True) -> None:
        """Choose the animation and place it; facing left puts it left of the point."""
        try:
            spec = _SPECS[EffectType(effect_type)]
        except (ValueError, KeyError):
            raise ValueError(f"no effect image for type {effect_type!r}") from None
        self.file_name = spec.file_name
        self.can_loop = spec.can_loop
        self.fc_max = spec.fc_max
        self.af_max = spec.af_max
        self.image_size = spec.image_size
        self.object_name = spec.object_name
        self.is_right = is_right
        parent_transform = self.transform.parent
        self.transform = transform.copy()
        self.transform.parent = parent_transform
        if not self.is_right:
            self.transform.position.x -= self.image_size[0]
        self.image = self.file_name

    def update(self) -> None:
        if self.framecnt > self.fc_max:
            self.framecnt = 0
            if self.can_loop:
                self.animframe = (self.animframe + 1) % self.af_max
            elif self.animframe >= self.af_max:
                self.kill_me()
            else:
                self.animframe += 1
        self.framecnt += 1

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        width, height = self.image_size
        renderer.draw_rect_graph(
            self.image, xpos, ypos, self.animframe * width, 0, width, height, True, self.is_right
        )

    def set_back_effect_pos(self, pos: Vec3, facing_right: bool) -> None:
        """Place the effect behind an object facing the given way."""
        self.is_right = facing_right
        self.transform.position = pos.copy()
        if self.is_right:
            self.transform.position.x -= self.image_size[0]

    def set_front_effect_pos(self, pos: Vec3, facing_right: bool) -> None:
        """Place the effect in front of an object facing the given way."""
        self.is_right = facing_right
        self.transform.position = pos.copy()
        if not self.is_right:
            self.transform.position.x -= self.image_size[0]