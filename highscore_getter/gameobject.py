"""Scene-graph objects: vectors, transforms and the parent/child object tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, TypeVar

T = TypeVar("T", bound="GameObject")


@dataclass
class Vec3:
    """A mutable three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def copy(self) -> Vec3:
        return Vec3(self.x, self.y, self.z)


@dataclass
class Transform:
    """Position, rotation and scale of an object, optionally linked to a parent."""

    position: Vec3 = field(default_factory=Vec3)
    rotate: Vec3 = field(default_factory=Vec3)
    scale: Vec3 = field(default_factory=lambda: Vec3(1.0, 1.0, 1.0))
    parent: Transform | None = field(default=None, repr=False, compare=False)

    def copy(self) -> Transform:
        return Transform(self.position.copy(), self.rotate.copy(), self.scale.copy(), self.parent)


def clamp(value, low, high):
    """Clamp value into [low, high]; return 0 when the bounds are inverted."""
    if low > high:
        return 0
    if value <= low:
        return low
    if value >= high:
        return high
    return value


def instantiate(cls: type[T], parent: GameObject | None) -> T:
    """Create an object, attach it to parent and initialise it."""
    obj = cls(parent)
    if parent is not None:
        parent.push_back_child(obj)
    obj.initialize()
    return obj


class GameObject:
    """A node of the object tree; updates and draws itself, then its children."""

    def __init__(self, parent: GameObject | None = None, name: str = "") -> None:
        self.parent = parent
        self.object_name = name
        self.transform = Transform()
        self._children: list[GameObject] = []
        self._initialized = False
        self._entered = True
        self._visible = True
        self._dead = False
        if parent is not None:
            self.transform.parent = parent.transform

    # Overridable hooks
    def initialize(self) -> None:
        pass

    def update(self) -> None:
        pass

    def draw(self, renderer) -> None:
        pass

    def release(self) -> None:
        pass

    # Tree traversal
    def update_sub(self) -> None:
        self.update()
        for child in self._children:
            if child.is_entered():
                child.update_sub()
        alive = []
        for child in self._children:
            if child.is_dead():
                child.release_sub()
            else:
                alive.append(child)
        self._children[:] = alive

    def draw_sub(self, renderer) -> None:
        self.draw(renderer)
        for child in self._children:
            if child.is_visible():
                child.draw_sub(renderer)

    def release_sub(self) -> None:
        for child in self._children:
            child.release_sub()
        self._children.clear()
        self.release()

    # State flags
    def is_dead(self) -> bool:
        return self._dead

    def kill_me(self) -> None:
        self._dead = True

    def enter(self) -> None:
        self._entered = True

    def leave(self) -> None:
        self._entered = False

    def show(self) -> None:
        self._visible = True

    def hide(self) -> None:
        self._visible = False

    def is_initialized(self) -> bool:
        return self._initialized

    def set_initialized(self) -> None:
        self._initialized = True

    def is_entered(self) -> bool:
        return self._entered

    def is_visible(self) -> bool:
        return self._visible

    # Children and lookup
    @property
    def children(self) -> list[GameObject]:
        return self._children

    def find_child_object(self, name: str) -> GameObject | None:
        """Depth-first search of descendants by object name."""
        for child in self._children:
            if child.object_name == name:
                return child
            found = child.find_child_object(name)
            if found is not None:
                return found
        return None

    def find_game_object(self, cls: type[T], tag: str | None = None) -> T | None:
        """First direct child that is an instance of cls (and named tag, if given)."""
        for child in self._children:
            if isinstance(child, cls) and (tag is None or child.object_name == tag):
                return child
        return None

    def find_game_objects(self, cls: type[T], tag: str | None = None) -> list[T]:
        """All direct children that are instances of cls (and named tag, if given)."""
        return [
            child
            for child in self._children
            if isinstance(child, cls) and (tag is None or child.object_name == tag)
        ]

    def find_object(self, name: str) -> GameObject | None:
        return self.root_job().find_child_object(name)

    def push_back_child(self, obj: GameObject) -> None:
        if obj is None:
            raise ValueError("cannot add a missing child object")
        obj.parent = self
        obj.transform.parent = self.transform
        self._children.append(obj)

    def push_front_child(self, obj: GameObject) -> None:
        if obj is None:
            raise ValueError("cannot add a missing child object")
        obj.parent = self
        obj.transform.parent = self.transform
        self._children.insert(0, obj)

    def kill_all_children(self) -> None:
        for child in self._children:
            self._kill_object_sub(child)
        self._children.clear()

    @classmethod
    def _kill_object_sub(cls, obj: GameObject) -> None:
        for grandchild in obj._children:
            cls._kill_object_sub(grandchild)
        obj._children.clear()
        obj.release()

    def root_job(self) -> GameObject:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    # Transform access
    @property
    def position(self) -> Vec3:
        return self.transform.position

    @position.setter
    def position(self, value: Vec3) -> None:
        self.transform.position = value.copy()

    def set_position(self, x, y=None, z=None) -> None:
        """Set the position from a Vec3 or from three components."""
        if isinstance(x, Vec3):
            self.transform.position = x.copy()
        else:
            self.transform.position = Vec3(x, y if y is not None else 0.0, z if z is not None else 0.0)

    def world_position(self) -> Vec3:
        if self.parent is None:
            return self.transform.position.copy()
        return self.parent.transform.position + self.transform.position