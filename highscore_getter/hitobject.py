"""Collision of an object's box against the map, and between two boxes."""

from __future__ import annotations

from enum import IntFlag

from .field import Field
from .gameobject import GameObject, Vec3

WHITE = (255, 255, 255)


def _vec2(value) -> tuple[float, float]:
    if isinstance(value, Vec3):
        return (value.x, value.y)
    x, y = tuple(value)[:2]
    return (float(x), float(y))


class CollisionSide(IntFlag):
    """Sides on which a map collision was found."""

    RIGHT = 0b0001
    LEFT = 0b0010
    UP = 0b0100
    DOWN = 0b1000


def hit_object_and_object(trans1, size1, trans2, size2) -> bool:
    """Whether two boxes given by top-left corner and size overlap.

    The vertical test uses the first box's height on both sides.
    """
    x1, y1 = _vec2(trans1)
    x2, y2 = _vec2(trans2)
    w1, h1 = _vec2(size1)
    w2, _ = _vec2(size2)
    cx1, cy1 = x1 + w1 / 2.0, y1 + h1 / 2.0
    cx2, cy2 = x2 + w2 / 2.0, y2 + _vec2(size2)[1] / 2.0
    return abs(cx1 - cx2) < abs(w1) / 2.0 + abs(w2) / 2.0 and abs(cy1 - cy2) < abs(h1) / 2.0 + abs(h1) / 2.0


class HitObject:
    """A box attached to an object that is pushed out of map walls."""

    def __init__(self, left_up, size, obj: GameObject) -> None:
        lx, ly = _vec2(left_up)
        sx, sy = _vec2(size)
        self._set_corners((lx, ly), (lx + sx, ly), (lx, ly + sy), (lx + sx, ly + sy))
        self.size = (sx, sy)
        self.obj = obj
        self.field = self._find_field(obj)

    @classmethod
    def from_corners(cls, left_up, right_up, left_down, right_down, obj: GameObject) -> HitObject:
        hit = cls.__new__(cls)
        hit._set_corners(_vec2(left_up), _vec2(right_up), _vec2(left_down), _vec2(right_down))
        hit.size = (-1.0, -1.0)
        hit.obj = obj
        hit.field = cls._find_field(obj)
        return hit

    @classmethod
    def from_size(cls, size, obj: GameObject) -> HitObject:
        return cls((0.0, 0.0), size, obj)

    def _set_corners(self, lu, ru, ld, rd) -> None:
        self.left_up, self.right_up, self.left_down, self.right_down = lu, ru, ld, rd

    @staticmethod
    def _find_field(obj: GameObject) -> Field:
        parent = obj.parent
        field = parent.find_game_object(Field) if parent is not None else None
        if field is None:
            raise LookupError("no Field object found beside the checked object")
        return field

    def _move(self, dx: float = 0.0, dy: float = 0.0) -> None:
        pos = self.obj.position
        self.obj.set_position(Vec3(pos.x + dx, pos.y + dy, pos.z))

    def right_collision_check(self) -> bool:
        pos = self.obj.position
        push = self.field.collision_right_check(pos.x + self.right_down[0], pos.y + self.right_down[1])
        if push >= 1:
            self._move(dx=-push)
            return True
        return False

    def left_collision_check(self) -> bool:
        pos = self.obj.position
        push = self.field.collision_left_check(pos.x + self.left_down[0], pos.y + self.left_down[1])
        if push >= 1:
            self._move(dx=push)
            return True
        return False

    def up_collision_check(self) -> bool:
        pos = self.obj.position
        left = self.field.collision_up_check(pos.x + self.left_up[0], pos.y + self.left_up[1] - 1)
        right = self.field.collision_up_check(pos.x + self.right_up[0], pos.y + self.right_up[1] - 2)
        push = max(left, right)
        if push >= 1:
            self._move(dy=push + 1)
            return True
        return False

    def down_collision_check(self) -> bool:
        pos = self.obj.position
        left = self.field.collision_down_check(pos.x + self.left_down[0], pos.y + self.left_down[1] + 1)
        right = self.field.collision_down_check(pos.x + self.right_down[0], pos.y + self.right_down[1] + 2)
        push = max(left, right)
        if push >= 1:
            self._move(dy=-(push - 1))
            return True
        return False

    def all_collision_check(self) -> CollisionSide:
        """Check and push out on every side: down, up, left, then right."""
        return self.select_collision_check(
            CollisionSide.DOWN | CollisionSide.UP | CollisionSide.LEFT | CollisionSide.RIGHT
        )

    def select_collision_check(self, sides) -> CollisionSide:
        """Check only the given sides, in the order down, up, left, right."""
        sides = CollisionSide(sides)
        result = CollisionSide(0)
        checks = (
            (CollisionSide.DOWN, self.down_collision_check),
            (CollisionSide.UP, self.up_collision_check),
            (CollisionSide.LEFT, self.left_collision_check),
            (CollisionSide.RIGHT, self.right_collision_check),
        )
        for side, check in checks:
            if side in sides and check():
                result |= side
        return result

    def draw_hit_box(self, renderer, position, color=WHITE) -> None:
        x, y = _vec2(position)
        if self.size[0] > 0:
            renderer.draw_box(int(x), int(y), int(x + self.size[0]), int(y + self.size[1]), color, False)
        else:
            renderer.draw_box(
                int(x + self.left_up[0]),
                int(y + self.left_up[1]),
                int(x + self.right_down[0]),
                int(y + self.right_down[1]),
                color,
                False,
            )