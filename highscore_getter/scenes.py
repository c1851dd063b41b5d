"""Scene switching and the root of the object tree."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable

from .clock import Clock, default_clock
from .gameobject import GameObject, instantiate


class SceneId(IntEnum):
    TEST = 0
    TITLE = 1
    TUTORIAL = 2
    PREPARATION = 3
    PLAY = 4
    RESULT = 5
    CLEAR = 6


SceneFactory = Callable[[GameObject], GameObject]


class SceneManager(GameObject):
    """Owns the current scene and replaces it when a change is requested."""

    def __init__(self, parent: GameObject | None = None, *, clock: Clock | None = None) -> None:
        super().__init__(parent, "SceneManager")
        self.clock = clock if clock is not None else default_clock
        self._factories: dict[SceneId, SceneFactory] = {}
        self._current = SceneId.TEST
        self._next = SceneId.TEST

    def register(self, scene_id: SceneId, factory: SceneFactory) -> None:
        """Register the class (or callable taking the parent) that builds a scene."""
        self._factories[SceneId(scene_id)] = factory

    def _create(self, scene_id: SceneId) -> GameObject:
        factory = self._factories.get(scene_id)
        if factory is None:
            raise KeyError(f"no scene registered for {scene_id.name}")
        return instantiate(factory, self)

    def initialize(self) -> None:
        self.clock.start()
        self._current = SceneId.TEST
        self._next = self._current
        self._create(self._current)

    def update(self) -> None:
        if self._current != self._next:
            self.kill_all_children()
            self._create(self._next)
            self._current = self._next

    def draw(self, renderer) -> None:
        self.clock.refresh()

    def change_scene(self, next_scene: SceneId) -> None:
        """Request a scene change; it happens on the next update."""
        self._next = SceneId(next_scene)

    def current_scene(self) -> SceneId:
        return self._current


class RootObject(GameObject):
    """Top of the tree; drives the scene manager every frame."""

    def __init__(self, scene_manager: SceneManager | None = None) -> None:
        super().__init__(None, "RootObject")
        self.scene_manager = scene_manager if scene_manager is not None else SceneManager()

    def initialize(self) -> None:
        self.scene_manager.initialize()

    def update(self) -> None:
        self.scene_manager.update_sub()

    def draw(self, renderer) -> None:
        self.scene_manager.draw_sub(renderer)

    def release(self) -> None:
        self.scene_manager.release_sub()