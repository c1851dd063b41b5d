"""Drawing interface used by game objects, a recording renderer and the camera."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .gameobject import GameObject


@dataclass(frozen=True)
class DrawCall:
    """One drawing request."""

    kind: str
    image: str | None = None
    x: float = 0
    y: float = 0
    src_x: float = 0
    src_y: float = 0
    width: float = 0
    height: float = 0
    x2: float = 0
    y2: float = 0
    transparent: bool = True
    flip: bool = False
    color: tuple[int, int, int] | None = None
    filled: bool = False
    text: str = ""


class Renderer(ABC):
    """Something that can draw images, boxes and text on screen."""

    @abstractmethod
    def draw_graph(self, image, x, y, transparent=True) -> None:
        """Draw a whole image with its top-left corner at (x, y)."""

    @abstractmethod
    def draw_rect_graph(self, image, x, y, src_x, src_y, width, height, transparent=True, flip=False) -> None:
        """Draw a rectangular region of an image at (x, y)."""

    @abstractmethod
    def draw_box(self, x1, y1, x2, y2, color, filled=False) -> None:
        """Draw a box between two corners."""

    @abstractmethod
    def draw_string(self, text, x, y) -> None:
        """Draw text at (x, y)."""


class RecordingRenderer(Renderer):
    """Renderer that keeps every request in order instead of drawing."""

    def __init__(self) -> None:
        self.calls: list[DrawCall] = []

    def draw_graph(self, image, x, y, transparent=True) -> None:
        self.calls.append(DrawCall("graph", image=image, x=x, y=y, transparent=transparent))

    def draw_rect_graph(self, image, x, y, src_x, src_y, width, height, transparent=True, flip=False) -> None:
        self.calls.append(
            DrawCall(
                "rect_graph",
                image=image,
                x=x,
                y=y,
                src_x=src_x,
                src_y=src_y,
                width=width,
                height=height,
                transparent=transparent,
                flip=bool(flip),
            )
        )

    def draw_box(self, x1, y1, x2, y2, color, filled=False) -> None:
        self.calls.append(DrawCall("box", x=x1, y=y1, x2=x2, y2=y2, color=tuple(color), filled=filled))

    def draw_string(self, text, x, y) -> None:
        self.calls.append(DrawCall("string", x=x, y=y, text=text))

    def clear(self) -> None:
        self.calls.clear()


class Camera(GameObject):
    """Horizontal and vertical scroll offsets of the view."""

    def __init__(self, parent: GameObject | None = None) -> None:
        super().__init__(parent, "Camera")
        self.value = 0
        self.value_y = 0