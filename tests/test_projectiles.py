import pytest

from highscore_getter.clock import default_clock
from highscore_getter.csvreader import CsvReader
from highscore_getter.effect import Effect
from highscore_getter.field import Field
from highscore_getter.gameobject import GameObject, Vec3, instantiate
from highscore_getter.projectiles import Bullet, BulletType, Explosion, ExplosionType
from highscore_getter.render import Camera, RecordingRenderer


def _stage():
    root = GameObject()
    field = instantiate(Field, root)
    rows = [",".join(["99"] * 9 + ["0"]) for _ in range(5)]
    field.load(CsvReader.from_text("\n".join(rows)))
    return root


@pytest.fixture
def delta(monkeypatch):
    def set_delta(value):
        monkeypatch.setattr(default_clock, "delta", value)

    return set_delta


def _bullet(root, x, y, direction=1, kind=BulletType.FIRE, range_=1000.0):
    b = instantiate(Bullet, root)
    b.set(direction, kind, Vec3(x, y, 0), range_, "Player")
    return b


def test_set_fire_bullet():
    b = _bullet(_stage(), 100, 100)
    assert b.image == "Assets/Image/Enemy/fire.png"
    assert b.size() == (48, 48)
    assert b.hit_box() == (32, 32)
    assert b.origin == Vec3(100, 100, 0)
    assert b.target_name == "Player"


def test_unknown_bullet_type():
    b = instantiate(Bullet, _stage())
    with pytest.raises(ValueError):
        b.set(1, 7, Vec3(0, 0, 0), 100.0, "Player")


def test_bullet_moves_with_speed(delta):
    delta(0.1)
    b = _bullet(_stage(), 100, 100)
    b.update()
    assert b.position.x == pytest.approx(100 + b.speed * 0.1)
    assert not b.is_dead()


def test_bullet_past_range_leaves_effect(delta):
    delta(0.1)
    root = _stage()
    b = _bullet(root, 100, 100, kind=BulletType.CHARGE, range_=5.0)
    b.update()
    assert b.is_dead()
    effects = root.find_game_objects(Effect)
    assert len(effects) == 1
    assert effects[0].object_name == "BExplosionEffect"
    assert effects[0].position.x == pytest.approx(b.position.x + b.size()[0] / 2)


def test_bullet_stops_at_wall(delta):
    delta(0.1)
    b = _bullet(_stage(), 380, 100)
    b.update()
    assert b.is_dead()


def test_bullet_animation_stays_in_range(delta):
    delta(0.0)
    b = _bullet(_stage(), 100, 100)
    frames = set()
    for _ in range(200):
        b.update()
        frames.add(b.animframe)
    assert frames == set(range(4))
    assert not b.is_dead()


def test_set_damage():
    b = Bullet()
    b.set_damage(0)
    assert b.damage == 1
    b.set_damage(5)
    assert b.damage == 5


def test_hit_transform_and_center():
    b = _bullet(_stage(), 100, 100)
    assert b.hit_transform().position == Vec3(108, 108, 0)
    assert b.center() == (124, 124)


def test_bullet_flip_follows_direction():
    root = _stage()
    right = _bullet(root, 100, 100, direction=1)
    left = _bullet(root, 200, 100, direction=-1)
    renderer = RecordingRenderer()
    right.draw(renderer)
    left.draw(renderer)
    assert renderer.calls[0].flip is True
    assert renderer.calls[1].flip is False


def test_explosion_initialize_and_configure():
    e = instantiate(Explosion, GameObject())
    assert e.image == "Assets/Image/Enemy/Explosion_Fire.png"
    with pytest.raises(ValueError):
        e.configure(3, (10, 10))
    e.configure(ExplosionType.FIRE, (40, 40))
    assert e.hit_box_size == (40, 40)


def test_explosion_set_position_lowers_by_quarter():
    e = instantiate(Explosion, GameObject())
    e.configure(ExplosionType.FIRE, (40, 40))
    e.set_position(50, 60, 0)
    assert e.position == Vec3(50, 70, 0)


def test_explosion_off_screen_dies():
    root = GameObject()
    inside = instantiate(Explosion, root)
    inside.set_position(100, 100, 0)
    outside = instantiate(Explosion, root)
    outside.set_position(900, 100, 0)
    inside.update()
    outside.update()
    assert not inside.is_dead()
    assert outside.is_dead()


def test_explosion_animation_end():
    e = instantiate(Explosion, GameObject())
    e.set_position(100, 100, 0)
    assert e.animation_end() is False
    for _ in range(1000):
        e.update()
        if e.animframe >= Explosion.ANIMATION_FRAMES - 1:
            break
    assert e.animation_end() is True
    assert e.is_dead()


def test_explosion_size_center_and_draw():
    root = GameObject()
    cam = instantiate(Camera, root)
    cam.value = 10
    e = instantiate(Explosion, root)
    e.set_position(200, 100, 0)
    assert e.size() == (160, 160)
    assert e.center() == (280, 180)
    renderer = RecordingRenderer()
    e.draw(renderer)
    call = renderer.calls[0]
    assert (call.x, call.y) == (200 - 10 - 80, 100 - 80)