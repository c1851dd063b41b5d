"""Enemy bullets and explosions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .clock import delta_time
from .effect import Effect, EffectType, _screen_position
from .gameobject import GameObject, Transform, Vec3, instantiate
from .hitobject import HitObject


class BulletType(IntEnum):
    FIRE = 0
    CHARGE = 1
    BOLT = 2


@dataclass(frozen=True)
class _BulletSpec:
    file_name: str
    lupoint: tuple[int, int]
    anim_frames: int
    size: tuple[int, int]
    hit_box: tuple[int, int]
    change_frame: int


_BULLET_SPECS = {
    BulletType.FIRE: _BulletSpec("fire", (8, 8), 4, (48, 48), (32, 32), 15),
    BulletType.CHARGE: _BulletSpec("Charged", (5, 5), 6, (63, 48), (56, 38), 10),
    BulletType.BOLT: _BulletSpec("Pulse", (5, 5), 4, (63, 32), (56, 22), 10),
}


class Bullet(GameObject):
    """A projectile that flies straight until it travels its range or hits a wall."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Bullet")
        self.direction = 1
        self.speed = 200.0
        self.bullet_type = BulletType.FIRE
        self.origin = Vec3()
        self.range = -1.0
        self.framecnt = 0
        self.animframe = 0
        self.target_name = ""
        self.damage = 0
        self.image: str | None = None
        self.hit_object: HitObject | None = None
        self.anim_frames = 0
        self.change_frame = 0
        self.bullet_size: tuple[int, int] = (0, 0)
        self.bullet_hit_box: tuple[int, int] = (0, 0)
        self.lupoint: tuple[int, int] = (0, 0)

    def set(self, direction, bullet_type, pos: Vec3, range_, target_name) -> None:
        """Launch the bullet from pos; direction is 1 for right and -1 for left."""
        try:
            spec = _BULLET_SPECS[BulletType(bullet_type)]
        except ValueError:
            raise ValueError(f"unknown bullet type {bullet_type!r}") from None
        self.direction = direction
        self.bullet_type = BulletType(bullet_type)
        self.range = range_
        # A left-flying bullet starts one sprite width back, using the size known so far.
        if self.direction == 1:
            self.origin = pos.copy()
        else:
            self.origin = Vec3(pos.x - self.bullet_size[0], pos.y, pos.z)
        self.transform.position = self.origin.copy()
        self.target_name = target_name
        self.lupoint = spec.lupoint
        self.anim_frames = spec.anim_frames
        self.bullet_size = spec.size
        self.bullet_hit_box = spec.hit_box
        self.change_frame = spec.change_frame
        self.image = f"Assets/Image/Enemy/{spec.file_name}.png"
        self.hit_object = HitObject(self.lupoint, self.bullet_hit_box, self)

    def _vanish(self) -> None:
        effect = instantiate(Effect, self.parent)
        if self.bullet_type != BulletType.FIRE:
            if self.direction == -1:
                effect.reset(self.transform, EffectType.EXTINCTION)
            else:
                trans = Transform()
                pos = self.transform.position
                trans.position = Vec3(pos.x + self.bullet_size[0] / 2, pos.y, pos.z)
                effect.reset(trans, EffectType.EXTINCTION)
            effect.object_name = "BExplosionEffect"
        self.kill_me()

    def update(self) -> None:
        self.transform.position.x += self.speed * delta_time() * self.direction
        if abs(self.origin.x - self.transform.position.x) >= self.range:
            self._vanish()
        if self.hit_object.left_collision_check():
            self._vanish()
        if self.hit_object.right_collision_check():
            self._vanish()
        if self.framecnt >= self.change_frame:
            self.framecnt = 0
            self.animframe += 1
            if self.animframe >= self.anim_frames:
                self.animframe = 0
        self.framecnt += 1

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        width, height = self.bullet_size
        renderer.draw_rect_graph(
            self.image, xpos, ypos, self.animframe * width, 0, width, height, True,
            bool(-self.direction - 1),
        )

    def size(self) -> tuple[int, int]:
        return self.bullet_size

    def center(self) -> tuple[float, float]:
        pos = self.transform.position
        return (pos.x + self.bullet_size[0] / 2, pos.y + self.bullet_size[1] / 2)

    def hit_transform(self) -> Transform:
        """Transform at the top-left of the hit box."""
        trans = Transform()
        pos = self.transform.position
        trans.position = Vec3(pos.x + self.lupoint[0], pos.y + self.lupoint[1], pos.z)
        return trans

    def hit_box(self) -> tuple[int, int]:
        return self.bullet_hit_box

    def set_damage(self, damage: int) -> None:
        """Set the damage dealt; anything not positive becomes 1."""
        self.damage = damage if damage > 0 else 1


class ExplosionType(IntEnum):
    FIRE = 0


_EXPLOSION_NAMES = {ExplosionType.FIRE: "Fire"}


class Explosion(GameObject):
    """A blast animation that leaves when it scrolls off screen or finishes."""

    ANIMATION_FRAMES = 4
    SIZE = (160, 160)

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Explosion")
        self.explosion_type = ExplosionType.FIRE
        self.hit_box_size: tuple[int, int] = (0, 0)
        self.framecnt = 0
        self.animframe = 0
        self.image: str | None = None

    def _load_image(self) -> None:
        try:
            name = _EXPLOSION_NAMES[ExplosionType(self.explosion_type)]
        except ValueError:
            raise ValueError(f"unknown explosion type {self.explosion_type!r}") from None
        self.image = f"Assets/Image/Enemy/Explosion_{name}.png"

    def initialize(self) -> None:
        self._load_image()

    def configure(self, explosion_type, hit_box) -> None:
        """Choose the explosion kind and the size of the box it came from."""
        self.explosion_type = explosion_type
        self.hit_box_size = (int(hit_box[0]), int(hit_box[1]))
        self._load_image()

    def update(self) -> None:
        xpos, _ = _screen_position(self)
        if xpos > 800 or xpos < 0:
            self.kill_me()
        if self.framecnt >= 15:
            self.framecnt = 0
            self.animframe += 1
        self.framecnt += 1

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        width, height = self.SIZE
        renderer.draw_rect_graph(
            self.image, xpos - width // 2, ypos - height // 2,
            self.animframe * width, 0, width, height, True,
        )

    def size(self) -> tuple[int, int]:
        return self.SIZE

    def center(self) -> tuple[float, float]:
        pos = self.transform.position
        return (pos.x + self.SIZE[0] // 2, pos.y + self.SIZE[1] // 2)

    def animation_end(self) -> bool:
        """Whether the last frame was reached; the explosion then removes itself."""
        if self.animframe >= self.ANIMATION_FRAMES - 1:
            self.kill_me()
            return True
        return False

    def set_position(self, x, y=None, z=None) -> None:
        """Place the explosion, lowered by a quarter of the source box height."""
        if isinstance(x, Vec3):
            x, y, z = x.x, x.y, x.z
        y = 0.0 if y is None else y
        z = 0.0 if z is None else z
        self.transform.position = Vec3(x, y + int(self.hit_box_size[1] / 4), z)