import pytest

from highscore_getter import clock
from highscore_getter.csvreader import CsvReader
from highscore_getter.enemy import (
    DAMAGE_TIME,
    DEATH_SOUND,
    INVINCIBLE_TIME,
    AnimationState,
    Enemy,
    EnemyAnimation,
)
from highscore_getter.field import Field
from highscore_getter.gameobject import GameObject, Vec3, instantiate

STATUS_TEXT = (
    "id,speed,runspeed,hp,movetimer,range,moverange,score,file\n"
    "201,50,100,3,2.0,200,96,100,Slime\n"
    "204,60,120,2,1.5,300,144,200,Bard\n"
)


class _PlayScene(GameObject):
    def __init__(self, parent=None):
        super().__init__(parent, "PlayScene")
        self.started = False

    def is_start(self):
        return self.started


class _Player(GameObject):
    def __init__(self, parent=None):
        super().__init__(parent, "Player")
        self.center = Vec3()

    def hit_box_center_position(self):
        return self.center


class _Board:
    def __init__(self):
        self.scores = []

    def add_score(self, score):
        self.scores.append(score)


def _make_field(parent, columns=30, rows=10):
    field = instantiate(Field, parent)
    field.load(CsvReader.from_text("\n".join(",".join(["-1"] * columns) for _ in range(rows))))
    return field


@pytest.fixture
def scene():
    manager = GameObject(None, "SceneManager")
    play = instantiate(_PlayScene, manager)
    _make_field(play)
    return play


@pytest.fixture
def enemy(scene):
    e = instantiate(Enemy, scene)
    e.status_reader(204, CsvReader.from_text(STATUS_TEXT))
    e.reset(Vec3(100, 100, 0))
    return e


def test_needs_field():
    with pytest.raises(LookupError):
        Enemy(GameObject(None, "Empty"))


def test_status_reader_fills_status(enemy):
    assert enemy.status.hp == 2
    assert enemy.status.speed == pytest.approx(60.0)
    assert enemy.status.run_speed == pytest.approx(120.0)
    assert enemy.status.move_timer == pytest.approx(1.5)
    assert enemy.status.range == 300.0
    assert enemy.status.move_range == 144.0
    assert enemy.status.score == 200
    assert enemy.object_name == "Bard"
    assert enemy.image == "Assets/Image/Enemy/Bard_sprite.png"


def test_status_reader_unknown_enemy_runs_off_table(scene):
    e = instantiate(Enemy, scene)
    with pytest.raises(IndexError):
        e.status_reader(999, CsvReader.from_text(STATUS_TEXT))


def test_reset_with_position_sets_origin(enemy):
    assert enemy.origin == Vec3(100, 100, 0)
    assert enemy.position == Vec3(100, 100, 0)
    assert enemy.anim == AnimationState(skip=False)


def test_reset_without_position_skips_animation(enemy):
    enemy.set_position(250, 120, 0)
    enemy.reset()
    assert enemy.origin == Vec3(250, 120, 0)
    assert enemy.anim.skip is True
    assert enemy.anim.anim_type == EnemyAnimation.NONE


def test_hit_damage_and_invincibility(enemy):
    hp = enemy.status.hp
    enemy.hit_damage(1)
    assert enemy.status.hp == hp - 1
    assert enemy.anim.anim_type == EnemyAnimation.DAMAGE
    assert enemy.damage_timer == DAMAGE_TIME
    assert enemy.invincible is True
    assert enemy.invincible_timer == INVINCIBLE_TIME
    enemy.hit_damage(1)
    assert enemy.status.hp == hp - 1


def test_negative_damage_is_ignored(enemy):
    hp = enemy.status.hp
    enemy.hit_damage(-3)
    assert enemy.status.hp == hp
    assert enemy.invincible is False


def test_lethal_damage_scores_and_plays_sound(enemy):
    board = _Board()
    sounds = []
    enemy.scoreboard = board
    enemy.sound = sounds.append
    enemy.hit_damage(enemy.status.hp)
    assert enemy.anim.anim_type == EnemyAnimation.DEATH
    assert board.scores == [enemy.status.score]
    assert sounds == [DEATH_SOUND]


def test_invincibility_expires(enemy, monkeypatch):
    enemy.hit_damage(1)
    enemy.anim.skip = True
    monkeypatch.setattr(clock.default_clock, "delta", INVINCIBLE_TIME + 0.1)
    enemy.animation_calculation()
    assert enemy.invincible is False


def test_looping_animation_cycles(enemy):
    enemy.anim = AnimationState(anim_type=EnemyAnimation.IDLE, before_type=EnemyAnimation.IDLE, af_max=3, afc_max=0)
    frames = []
    for _ in range(3):
        enemy.animation_calculation()
        frames.append(enemy.anim.frame)
    assert frames[-1] == 0
    assert sorted(frames) == list(range(3))


def test_one_shot_animation_returns_to_idle(enemy):
    enemy.anim = AnimationState(
        anim_type=EnemyAnimation.ATTACK, before_type=EnemyAnimation.ATTACK,
        af_max=2, afc_max=0, frame=1, loop=False,
    )
    enemy.animation_calculation()
    assert enemy.anim.anim_type == EnemyAnimation.IDLE
    assert enemy.anim.frame == 0
    assert enemy.anim.before_type == EnemyAnimation.IDLE


def test_type_change_restarts_animation(enemy):
    enemy.anim = AnimationState(
        anim_type=EnemyAnimation.MOVE, before_type=EnemyAnimation.IDLE,
        af_max=4, afc_max=100, frame=2, frame_count=5,
    )
    enemy.animation_calculation()
    assert enemy.anim.frame == 0
    assert enemy.anim.frame_count == 1
    assert enemy.anim.before_type == EnemyAnimation.MOVE


def test_player_distance_and_range(enemy, scene):
    player = instantiate(_Player, scene)
    enemy.set_center_trans_pos(Vec3(100, 100, 0))
    player.center = Vec3(130, 100, 0)
    assert enemy.player_distance() == pytest.approx(30.0)
    assert enemy.is_exist_player(31) is True
    assert enemy.is_exist_player(30) is False


def test_no_player_means_zero_distance(enemy):
    assert enemy.player_distance() == 0.0


def test_player_dir(enemy, scene):
    player = instantiate(_Player, scene)
    player.set_position(50, 100, 0)
    enemy.player_dir()
    assert enemy.anim.right is False
    player.set_position(150, 100, 0)
    enemy.player_dir()
    assert enemy.anim.right is True


def test_set_center_from_corner_and_size(enemy):
    enemy.set_center_trans_pos(Vec3(10, 20, 0), (60, 40))
    assert enemy.center_trans_pos == Vec3(40, 40, 0)


def test_hit_trans_pos_and_box(enemy):
    enemy.lu = (10, 5)
    enemy.hitbox_size = (60, 60)
    assert enemy.hit_trans_pos() == Vec3(110, 105, 0)
    assert enemy.hit_box() == (60, 60)


def test_update_none_waits_for_start(enemy, scene):
    enemy.update_none()
    assert enemy.anim.anim_type == EnemyAnimation.NONE
    scene.started = True
    enemy.update_none()
    assert enemy.anim.anim_type == EnemyAnimation.IDLE


def test_small_state_helpers(enemy):
    enemy.status_damage()
    assert enemy.anim.anim_type == EnemyAnimation.DAMAGE
    enemy.state_idle()
    assert enemy.anim.anim_type == EnemyAnimation.IDLE
    enemy.debug_hp()
    assert enemy.status.hp == 1
    assert enemy.enemy_attack_hit_check(Vec3(), (1, 1)) is False