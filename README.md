# highscore_getter

This package holds the logic of a small side-scrolling action game and the
scene-graph engine it runs on. Rendering is separate from the game logic. Every
`draw` method takes a renderer, and `RecordingRenderer` keeps the draw calls it
receives in order. You can drive and check the game frame by frame without
opening a window.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Modules

- `highscore_getter.gameobject`
  - `Vec3` and `Transform`.
  - `GameObject`, a tree of objects that are updated, drawn and released together. Objects marked with `kill_me()` are removed after their parent's update.
  - `instantiate(cls, parent)` creates an object, attaches it to its parent and initialises it.
  - `clamp(value, low, high)`.
- `highscore_getter.render`
  - The `Renderer` interface.
  - `RecordingRenderer` and its `DrawCall` records.
  - `Camera`, which holds the horizontal and vertical scroll offsets (`value`, `value_y`).
- `highscore_getter.csvreader`
  - `CsvReader` and `parse_csv` read map and status tables. They skip a leading BOM and handle quoted fields that span lines.
  - `CsvReader(path)` gives an empty table when the file cannot be read.
  - `CsvReader.from_text(text)` parses a string.
- `highscore_getter.clock`
  - `Clock` measures the seconds between refreshes.
  - `delta_time()` reads the shared clock.
- `highscore_getter.scenes`
  - `SceneId` and `SceneManager`. You register a factory for each scene, and a requested change happens on the next `update`.
  - `RootObject`, which drives a scene manager.
- `highscore_getter.field`
  - `Field`, the tile map. It classifies terrain (`what_block`), computes push-back distances for collisions and lists the objects the map places (`spawn_points`, as `SpawnPoint` entries with `ObjectNumber` kinds).
- `highscore_getter.hitobject`
  - `HitObject` pushes an object's box out of map walls. It reports the sides that collided as `CollisionSide` flags.
  - `hit_object_and_object` tests whether two boxes overlap.
- `highscore_getter.effect`
  - `Effect` and `EffectType`: looping and one-shot sprite animations.
- `highscore_getter.scenery`
  - `Goal`, `CheckPoint` and the scrolling `BackGround`.
- `highscore_getter.projectiles`
  - `Bullet` / `BulletType` and `Explosion` / `ExplosionType`.
- `highscore_getter.enemy`
  - `Enemy`, the base enemy. It reads its status table, takes damage, runs its animation state machine and senses the player.
  - `EnemyAnimation`, `EnemyStatus` and `AnimationState`.
- `highscore_getter.bard`
  - `Bard`, a flying enemy. It bobs while idle, patrols, chases the player and dives at them.
- `highscore_getter.clear_scene`
  - `ClearScene`, `ClearPlayer` and `ClearLogo`, which make up the stage-clear screen.

## Example

```python
from highscore_getter.csvreader import CsvReader
from highscore_getter.field import Field
from highscore_getter.gameobject import GameObject, instantiate
from highscore_getter.render import Camera, RecordingRenderer

root = GameObject(None, "Root")
camera = instantiate(Camera, root)
field = instantiate(Field, root)
field.load(CsvReader.from_text("0,999\n999,105\n"))

field.what_block(10, 10)       # "Wall"
list(field.spawn_points())     # [SpawnPoint(kind=ObjectNumber.PLAYER, row=1, column=1, x=72, y=72)]

renderer = RecordingRenderer()
root.update_sub()
root.draw_sub(renderer)
len(renderer.calls)            # 4 tiles drawn
```

## What the package does not do

- **No screen.** There is no window and no renderer that puts pixels on a screen. Images are named by their file paths, and `RecordingRenderer` only records what would be drawn.
- **No input or sound.**
  - `ClearScene` takes a `start_pressed` callable to learn whether the start button is down.
  - `Enemy` reports its death sound through an optional `sound` callable.
  - The clear scene only records which music it would play.
- **No player, title, play, tutorial or result scenes.**
  - Enemies look for a sibling object named `"Player"` that offers `hit_box_center_position()`. They look for a `"PlayScene"` object with `is_start()`. You supply both.
  - Scores go to any object with an `add_score` method that you assign.
- **Scenes are not registered for you.** `SceneManager` builds only the scenes you register.
- **No command to run.** The package has no program that starts a game loop.

## Tests

```
pytest
```