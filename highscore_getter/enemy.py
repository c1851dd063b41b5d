"""Behaviour shared by every enemy: status table, damage, animation and player sensing."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Callable

from .clock import delta_time
from .csvreader import CsvReader
from .gameobject import GameObject, Vec3
from .hitobject import HitObject, _vec2

GRAVITY = 9.8 / 60.0
DAMAGE_TIME = 1.0
INVINCIBLE_TIME = 0.5
ENEMY_TYPE_NUM = 7
STATUS_FILE = Path("Assets") / "Status" / "EnemyStatus.csv"
ENEMY_IMAGE_FOLDER = "Assets/Image/Enemy/"
DEATH_SOUND = "G_E_Death"

_BASE_LU_POINT = (-1.0, -1.0)
_BASE_HIT_BOX = (-1.0, -1.0)


class EnemyAnimation(IntEnum):
    """Animation rows of an enemy sprite sheet; NONE waits for the stage to start."""

    NONE = -1
    IDLE = 0
    ATTACK = 1
    MOVE = 2
    RUN = 3
    DAMAGE = 4
    DEATH = 5


class _StatusColumn(IntEnum):
    MOVE_SPEED = 1
    RUN_SPEED = 2
    HP = 3
    MOVE_TIMER = 4
    RANGE = 5
    MOVE_RANGE = 6
    SCORE = 7
    FILE_NAME = 8


@dataclass
class EnemyStatus:
    """Parameters of one enemy kind, read from the status table."""

    speed: float = 0.0
    run_speed: float = 0.0
    hp: int = 0
    move_timer: float = 0.0
    file_name: str = ""
    range: float = 0.0
    move_range: float = 0.0
    score: int = 0


@dataclass
class AnimationState:
    """Where an enemy is in its sprite animation."""

    anim_type: EnemyAnimation = EnemyAnimation.NONE
    before_type: EnemyAnimation = EnemyAnimation.NONE
    af_max: int = 0
    frame: int = 0
    afc_max: int = 0
    frame_count: int = 0
    loop: bool = True
    right: bool = True
    skip: bool = False


def _as_vec3(pos) -> Vec3:
    if isinstance(pos, Vec3):
        return pos.copy()
    return Vec3(*pos)


class Enemy(GameObject):
    """Base enemy; subclasses supply the per-state update hooks.

    The player is the sibling object named "Player", which must offer
    hit_box_center_position(). The running stage is the object named
    "PlayScene" under the root, which must offer is_start().
    """

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Enemy")
        self.hit_object = HitObject(_BASE_LU_POINT, _BASE_HIT_BOX, self)
        self.anim = AnimationState()
        self.status = EnemyStatus()
        self.image: str | None = None
        self.origin = Vec3()
        self.center_trans_pos = Vec3()
        self.gravity_accel = 0.0
        self.idle_timer = 0.0
        self.damage_timer = 0.0
        self.move_lmax = False
        self.move_rmax = False
        self.invincible = False
        self.invincible_timer = 0.0
        self.lu: tuple[float, float] = (0.0, 0.0)
        self.hitbox_size: tuple[float, float] = (0.0, 0.0)
        self.scoreboard = None
        self.sound: Callable[[str], None] | None = None

    # Per-state hooks
    def update_idle(self) -> None:
        pass

    def update_attack(self) -> None:
        pass

    def update_move(self) -> None:
        pass

    def update_run(self) -> None:
        pass

    def update_damage(self) -> None:
        pass

    def update_death(self) -> None:
        pass

    def initialize(self) -> None:
        self.anim.afc_max = 25
        self.anim.af_max = 3

    def _settle(self) -> None:
        self.hit_object.right_collision_check()
        self.hit_object.left_collision_check()
        if self.hit_object.down_collision_check():
            self.gravity_accel = 0.0
        self.hit_object.up_collision_check()

    def reset(self, pos=None) -> None:
        """Restart at pos, or where the enemy stands (then skipping animation)."""
        if pos is None:
            self.origin = self.transform.position.copy()
            self.anim = AnimationState(skip=True)
        else:
            self.origin = _as_vec3(pos)
            self.transform.position = self.origin.copy()
            self.anim = AnimationState(skip=False)
        self.move_lmax = False
        self.move_rmax = False
        self._settle()

    def status_reader(self, enemy_number: int, reader: CsvReader | None = None) -> None:
        """Load the status row whose first column equals enemy_number."""
        if reader is None:
            reader = CsvReader(STATUS_FILE)
        for line in range(1, ENEMY_TYPE_NUM + 1):
            if reader.get_int(line, 0) != enemy_number:
                continue
            name = reader.get_string(line, _StatusColumn.FILE_NAME)
            self.status = EnemyStatus(
                speed=reader.get_float(line, _StatusColumn.MOVE_SPEED),
                run_speed=reader.get_float(line, _StatusColumn.RUN_SPEED),
                hp=reader.get_int(line, _StatusColumn.HP),
                move_timer=reader.get_float(line, _StatusColumn.MOVE_TIMER),
                file_name=f"{ENEMY_IMAGE_FOLDER}{name}_sprite.png",
                range=float(reader.get_int(line, _StatusColumn.RANGE)),
                move_range=float(reader.get_int(line, _StatusColumn.MOVE_RANGE)),
                score=reader.get_int(line, _StatusColumn.SCORE),
            )
            self.object_name = name
            self.image = self.status.file_name
            self.anim = AnimationState()
            break

    def status_damage(self) -> None:
        self.anim.anim_type = EnemyAnimation.DAMAGE

    def hit_damage(self, damage: int) -> None:
        """Take damage unless invincible; dying credits the score."""
        if damage < 0 or self.invincible:
            return
        self.status.hp -= damage
        if self.status.hp <= 0:
            self.anim.anim_type = EnemyAnimation.DEATH
            if self.scoreboard is not None:
                self.scoreboard.add_score(self.status.score)
            if self.sound is not None:
                self.sound(DEATH_SOUND)
        else:
            self.anim.anim_type = EnemyAnimation.DAMAGE
            self.damage_timer = DAMAGE_TIME
        self.invincible_timer = INVINCIBLE_TIME
        self.invincible = True
        self.anim.frame_count = 0
        self.anim.frame = 0

    def hit_trans_pos(self) -> Vec3:
        """Top-left corner of the hit box."""
        pos = self.transform.position
        return Vec3(pos.x + self.lu[0], pos.y + self.lu[1], pos.z)

    def hit_box(self) -> tuple[float, float]:
        return self.hitbox_size

    def animation_calculation(self) -> None:
        """Count down invincibility and advance the animation by one frame."""
        if self.invincible:
            self.invincible_timer -= delta_time()
            if self.invincible_timer < 0.0:
                self.invincible = False
        anim = self.anim
        if not anim.skip:
            if anim.before_type != anim.anim_type:
                anim.frame = 0
                anim.frame_count = 0
            anim.frame_count += 1
            if anim.frame_count > anim.afc_max:
                anim.frame_count = 0
                if anim.loop:
                    anim.frame = (anim.frame + 1) % anim.af_max
                else:
                    anim.frame += 1
                    if anim.frame == anim.af_max:
                        anim.anim_type = EnemyAnimation.IDLE
                        anim.frame = 0
                        anim.frame_count = 0
        anim.before_type = anim.anim_type

    def _player(self) -> GameObject | None:
        if self.parent is None:
            return None
        return self.parent.find_game_object(GameObject, "Player")

    def player_distance(self) -> float:
        """Distance from the hit box centre to the player's; 0 with no player."""
        player = self._player()
        if player is None:
            return 0.0
        px, py = _vec2(player.hit_box_center_position())
        return math.hypot(self.center_trans_pos.x - px, self.center_trans_pos.y - py)

    def is_exist_player(self, radius: float) -> bool:
        """Whether the player is strictly within radius."""
        return self.player_distance() ** 2 < radius * radius

    def player_dir(self) -> None:
        """Face toward the player."""
        player = self._player()
        if player is None:
            return
        self.anim.right = not (player.position.x - self.transform.position.x < 0)

    def set_center_trans_pos(self, pos, size=None) -> None:
        """Set the hit box centre directly, or from its top-left corner and size."""
        pos = _as_vec3(pos)
        if size is None:
            self.center_trans_pos = pos
        else:
            sx, sy = _vec2(size)
            self.center_trans_pos = Vec3(pos.x + sx / 2.0, pos.y + sy / 2.0, pos.z)

    def update_none(self) -> None:
        """Wake up once the stage has started."""
        scene = self.root_job().find_game_object(GameObject, "PlayScene")
        if scene is not None and scene.is_start():
            self.anim.anim_type = EnemyAnimation.IDLE

    def enemy_attack_hit_check(self, trans, hitbox) -> bool:
        return False

    def state_idle(self) -> None:
        self.anim.anim_type = EnemyAnimation.IDLE

    def debug_hp(self) -> None:
        self.status.hp = 1