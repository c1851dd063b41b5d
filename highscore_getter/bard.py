"""A flying enemy that patrols, chases and dives at the player."""

from __future__ import annotations

import math

from .clock import delta_time
from .effect import Effect, EffectType, _screen_position
from .enemy import DAMAGE_TIME, Enemy, EnemyAnimation
from .gameobject import GameObject, Vec3, instantiate
from .hitobject import HitObject, _vec2

IMAGE_SIZE = 80
LU_POINT = (10.0, 10.0)
HIT_BOX_SIZE = (60.0, 60.0)
IDLE_TIME = 3.0
ATTACK_RANGE = 70.0
_ARRIVAL = 10

_FRAMES = {
    EnemyAnimation.NONE: (4, 25),
    EnemyAnimation.IDLE: (4, 25),
    EnemyAnimation.ATTACK: (4, 15),
    EnemyAnimation.MOVE: (4, 15),
    EnemyAnimation.RUN: (4, 15),
    EnemyAnimation.DAMAGE: (2, 10),
    EnemyAnimation.DEATH: (4, 20),
}


def _near(a: Vec3, b: Vec3) -> bool:
    return b.x - _ARRIVAL < a.x < b.x + _ARRIVAL and b.y - _ARRIVAL < a.y < b.y + _ARRIVAL


class Bard(Enemy):
    """Bird enemy: bobs while idle, patrols, then dives at the player and back."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent)
        self.hit_object = HitObject(LU_POINT, HIT_BOX_SIZE, self)
        self.idle_timer = 0.0
        self.sin_angle = 0.0
        self.target_vec: tuple[float, float] = (0.0, 0.0)
        self.target_pos = Vec3()
        self.speed = 0.0
        self.attack_pos = Vec3()
        self.dir_changed = False
        self.lu = LU_POINT
        self.hitbox_size = HIT_BOX_SIZE

    def initialize(self) -> None:
        pass

    def update(self) -> None:
        self.anim.loop = True
        pos = self.transform.position
        self.set_center_trans_pos(Vec3(pos.x + LU_POINT[0], pos.y + LU_POINT[1], pos.z), HIT_BOX_SIZE)
        handlers = {
            EnemyAnimation.NONE: self.update_none,
            EnemyAnimation.IDLE: self.update_idle,
            EnemyAnimation.ATTACK: self.update_attack,
            EnemyAnimation.MOVE: self.update_move,
            EnemyAnimation.RUN: self.update_run,
            EnemyAnimation.DAMAGE: self.update_damage,
            EnemyAnimation.DEATH: self.update_death,
        }
        anim_type = EnemyAnimation(self.anim.anim_type)
        self.anim.af_max, self.anim.afc_max = _FRAMES[anim_type]
        handlers[anim_type]()
        self.animation_calculation()

    def draw(self, renderer) -> None:
        xpos, ypos = _screen_position(self)
        row = 0 if self.anim.anim_type < 0 else int(self.anim.anim_type)
        renderer.draw_rect_graph(
            self.image, xpos, ypos,
            self.anim.frame * IMAGE_SIZE, row * IMAGE_SIZE,
            IMAGE_SIZE, IMAGE_SIZE, True, self.anim.right,
        )

    def update_idle(self) -> None:
        self.sin_angle += 3.0
        self.transform.position.y += math.sin(math.radians(self.sin_angle))
        self.dir_changed = False
        self.anim.skip = False
        if self.idle_timer > 0:
            self.idle_timer -= delta_time()
        else:
            self.idle_timer = IDLE_TIME
            self.anim.anim_type = EnemyAnimation.MOVE

    def update_attack(self) -> None:
        step = self.speed * delta_time()
        self.transform.position.x -= self.target_vec[0] * step
        self.transform.position.y -= self.target_vec[1] * step
        if _near(self.center_trans_pos, self.target_pos) and not self.dir_changed:
            self.target_vec = (-self.target_vec[0], -self.target_vec[1])
            self.dir_changed = True
            self.set_center_trans_pos(self.target_pos)
        if _near(self.center_trans_pos, self.attack_pos) and self.dir_changed:
            self.anim.anim_type = EnemyAnimation.IDLE
            self.idle_timer = self.status.move_timer
            self.set_center_trans_pos(self.attack_pos)
            self.origin = self.transform.position.copy()

    def _walk(self, speed: float) -> None:
        if self.anim.right:
            self.transform.position.x += speed * delta_time()
            if self.hit_object.right_collision_check():
                self.move_rmax = True
        else:
            self.transform.position.x -= speed * delta_time()
            if self.hit_object.left_collision_check():
                self.move_lmax = True

    def update_move(self) -> None:
        if self.is_exist_player(self.status.range):
            self.anim.anim_type = EnemyAnimation.RUN
            return
        self._walk(self.status.speed)
        move_range = self.status.move_range
        if self.origin.x - self.transform.position.x > move_range or self.move_lmax:
            if not self.move_lmax:
                self.transform.position.x = self.origin.x - move_range
            self.anim.right = True
            self.anim.anim_type = EnemyAnimation.IDLE
            self.idle_timer = self.status.move_timer
            self.move_lmax = False
        if self.origin.x - self.transform.position.x < -move_range or self.move_rmax:
            if not self.move_rmax:
                self.transform.position.x = self.origin.x + move_range
            self.anim.right = False
            self.anim.anim_type = EnemyAnimation.IDLE
            self.idle_timer = self.status.move_timer
            self.move_rmax = False

    def update_run(self) -> None:
        if self.is_exist_player(HIT_BOX_SIZE[0] / 2.0 + ATTACK_RANGE):
            player = self._player()
            if player is None:
                raise LookupError("no player to attack")
            px, py = _vec2(player.hit_box_center_position())
            dx = self.center_trans_pos.x - px
            dy = self.center_trans_pos.y - py
            length = math.hypot(dx, dy)
            self.target_vec = (dx / length, dy / length) if length else (0.0, 0.0)
            self.anim.anim_type = EnemyAnimation.ATTACK
            self.target_pos = Vec3(px, py, 0.0)
            self.speed = self.status.run_speed
            self.attack_pos = self.center_trans_pos.copy()
            self.origin = self.transform.position.copy()
            return
        if not self.is_exist_player(self.status.range):
            self.anim.anim_type = EnemyAnimation.IDLE
            self.idle_timer = self.status.move_timer
            self.origin = self.transform.position.copy()
            return
        self.player_dir()
        self._walk(self.status.run_speed)

    def update_damage(self) -> None:
        self.anim.loop = True
        if self.damage_timer > 0:
            self.damage_timer -= delta_time()
        else:
            self.damage_timer = DAMAGE_TIME
            self.anim.anim_type = EnemyAnimation.IDLE

    def update_death(self) -> None:
        self.anim.loop = True
        effect = instantiate(Effect, self.parent)
        effect.reset(self.transform, EffectType.KILL)
        effect.object_name = "EKillEffect"
        self.kill_me()