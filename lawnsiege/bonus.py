"""Collectable sun tokens."""

from __future__ import annotations

import random
from typing import Any, Optional

from lawnsiege.entity import Entity, Movie

SUN_VALUE = 25
SUN_LIFETIME = 750


class Bonus(Entity):
    """A collectable item; the base kind does nothing on its own."""

    def act(self) -> None:
        pass


class _SunToken(Bonus):
    """A sun that lives a fixed number of ticks and moves until it settles."""

    def __init__(self, scene: Optional[Any], x: float, y: float) -> None:
        super().__init__(scene)
        self.set_geometry(x, y, 80, 80)
        self.set_movie(Movie("Bonus/Sun.gif"))
        self.movie.start()
        self.frame = SUN_LIFETIME
        self.speed = 0.0
        self.level = 0.0

    def _tick(self) -> bool:
        """Age the token; tell whether it is still above its resting level."""
        self.frame -= 1
        if self.frame <= 0:
            self.alive = False
        return self.y <= self.level

    def _collect(self) -> None:
        """The sun vanishes and the scene gains its value."""
        self.alive = False
        self.scene.sun_point += SUN_VALUE
        self._play_sound("Sun.wav")


class Sun(_SunToken):
    """A sun thrown up by a sunflower that arcs down to a resting level."""

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, 260, 80)
        rng = rng or random.Random()
        self.speed = float(-(rng.randrange(5) + 7))
        self.accelerate = 2.0
        self.level = 200.0
        self.x_speed = float(rng.randrange(5) - 2)

    def act(self) -> None:
        if self._tick():
            self.speed += self.accelerate
            self.move(self.x + self.x_speed, self.y + self.speed)

    def click(self) -> None:
        """Collect the sun: it vanishes and the scene gains its value."""
        self._collect()


class SunFall(_SunToken):
    """A sun that drops from the sky at a steady pace."""

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        super().__init__(scene, rng.randrange(600) + 320, 0)
        self.speed = 2.0
        self.level = float(rng.randrange(400) + 100)

    def act(self) -> None:
        if self._tick():
            self.move(self.x, self.y + self.speed)

    def click(self) -> None:
        """Collect the sun: it vanishes and the scene gains its value."""
        self._collect()