"""Geometry primitives, animation clips and the base class of every game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class Point:
    """An integer position on the playing field."""

    x: int = 0
    y: int = 0

    def __add__(self, other: object) -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle whose right and bottom edges are inclusive."""

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    @property
    def left(self) -> int:
        return self.x

    @property
    def top(self) -> int:
        return self.y

    @property
    def right(self) -> int:
        return self.x + self.width - 1

    @property
    def bottom(self) -> int:
        return self.y + self.height - 1

    def contains(self, point: Point) -> bool:
        """Tell whether the point lies inside the rectangle."""
        if self.width <= 0 or self.height <= 0:
            return False
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom


@dataclass(eq=False)
class Movie:
    """A looping animation clip that steps one frame per advance at full speed."""

    source: str
    frame_count: int = 1
    current_frame: int = field(default=0, init=False)
    speed: int = field(default=100, init=False)
    running: bool = field(default=False, init=False)
    _progress: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.frame_count < 1:
            raise ValueError(f"a movie needs at least one frame, got {self.frame_count}")

    def start(self) -> None:
        """Start playing from the first frame; a running movie is left alone."""
        if self.running:
            return
        self.running = True
        self.current_frame = 0
        self._progress = 0.0

    def stop(self) -> None:
        """Stop playing; the next start begins from the first frame."""
        self.running = False

    def advance(self) -> None:
        """Move the clip on by one tick, scaled by its playback speed."""
        if not self.running:
            return
        self._progress += self.speed / 100
        while self._progress >= 1:
            self._progress -= 1
            self.current_frame = (self.current_frame + 1) % self.frame_count

    def set_speed(self, percent: int) -> None:
        """Set the playback speed as a percentage of normal speed."""
        self.speed = percent


class Entity(ABC):
    """Anything that lives in a scene and is updated once per tick."""

    def __init__(self, scene: Optional[Any] = None) -> None:
        self.scene = scene
        self.alive = True
        self.strength = 1
        self.x = 0
        self.y = 0
        self.width = 0
        self.height = 0
        self.movie: Optional[Movie] = None

    @property
    def pos(self) -> Point:
        return Point(self.x, self.y)

    @property
    def geometry(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @abstractmethod
    def act(self) -> None:
        """Advance the entity by one tick."""

    def set_geometry(self, x: float, y: float, width: float, height: float) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)

    def move(self, x: float, y: float) -> None:
        self.x = int(x)
        self.y = int(y)

    def set_movie(self, movie: Optional[Movie]) -> None:
        self.movie = movie

    def _play_sound(self, name: str) -> None:
        if self.scene is not None:
            self.scene.play_sound(name)

    def _spawn_anim(self, anim_class: type, x: float, y: float, width: float, height: float) -> Any:
        anim = anim_class(self.scene)
        anim.set_geometry(x, y, width, height)
        if self.scene is not None:
            self.scene.anims.append(anim)
        return anim