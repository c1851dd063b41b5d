import pytest

from highscore_getter.effect import Effect, EffectType
from highscore_getter.gameobject import GameObject, Transform, Vec3, instantiate
from highscore_getter.render import Camera, RecordingRenderer


def _transform(x, y):
    t = Transform()
    t.position = Vec3(x, y, 0)
    return t


def test_reset_kill_sets_image_and_name():
    e = Effect()
    e.reset(_transform(100, 50), EffectType.KILL)
    assert e.image == "Assets/Image/Effect/Kill.png"
    assert e.object_name == "KillEffect"
    assert e.position == Vec3(100, 50, 0)


def test_reset_facing_left_shifts_by_width():
    right = Effect()
    right.reset(_transform(100, 50), EffectType.HIT, True)
    left = Effect()
    left.reset(_transform(100, 50), EffectType.HIT, False)
    assert right.position.x - left.position.x == left.image_size[0]


def test_reset_copies_transform():
    t = _transform(10, 20)
    e = Effect()
    e.reset(t, EffectType.SLASH)
    t.position.x = 999
    assert e.position.x == 10


def test_reset_end_is_rejected():
    with pytest.raises(ValueError):
        Effect().reset(_transform(0, 0), EffectType.END)


def test_one_shot_effect_dies():
    e = Effect()
    e.reset(_transform(0, 0), EffectType.KILL)
    for _ in range(5):
        e.update()
    assert not e.is_dead()
    for _ in range(200):
        e.update()
    assert e.is_dead()
    assert e.animframe == e.af_max


def test_looping_effect_keeps_running():
    e = Effect()
    e.reset(_transform(0, 0), EffectType.GRASS)
    seen = set()
    for _ in range(500):
        e.update()
        seen.add(e.animframe)
    assert not e.is_dead()
    assert seen == set(range(e.af_max))


def test_back_and_front_positions():
    e = Effect()
    e.reset(_transform(0, 0), EffectType.JUMP)
    e.set_back_effect_pos(Vec3(200, 10, 0), True)
    assert e.position.x == 200 - e.image_size[0]
    e.set_back_effect_pos(Vec3(200, 10, 0), False)
    assert e.position.x == 200
    e.set_front_effect_pos(Vec3(200, 10, 0), False)
    assert e.position.x == 200 - e.image_size[0]
    e.set_front_effect_pos(Vec3(200, 10, 0), True)
    assert e.position.x == 200


def test_draw_applies_camera_scroll():
    root = GameObject()
    cam = instantiate(Camera, root)
    cam.value = 30
    cam.value_y = 7
    e = instantiate(Effect, root)
    e.reset(_transform(100, 50), EffectType.KILL)
    renderer = RecordingRenderer()
    e.draw(renderer)
    call = renderer.calls[0]
    assert (call.x, call.y) == (100 - 30, 50 - 7)
    assert call.image == e.image
    assert call.flip is True