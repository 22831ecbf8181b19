"""Shots that fly along a lane and strike the first zombie they reach."""

from __future__ import annotations

from typing import Any, Optional

from lawnsiege.anims import Fire, PeaHit
from lawnsiege.entity import Entity, Movie

HIT_REACH = 20
SPLASH_REACH = 60
SPLASH_DAMAGE = 10


class Projectile(Entity):
    """A flying object in a lane; the base kind stays where it is.

    Subclasses describe their shot with class attributes: the clip, the
    speed, how close a zombie must be, the damage and the impact effect.
    """

    source = ""
    speed = 0
    can_fire = False
    is_ball = False
    reach = HIT_REACH
    damage = 10
    impact: Optional[type] = None
    impact_dy = 0

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.row = 0
        if self.source:
            self.set_movie(Movie(self.source))
            self.movie.start()

    def act(self) -> None:
        pass

    def _fly(self) -> None:
        """Move one step and strike the first zombie within reach."""
        if not self.scene.screen.contains(self.pos):
            self.alive = False
        self.move(self.x + self.speed, self.y)
        zombie = self._target()
        if zombie is None:
            return
        self.alive = False
        if self.impact is not None:
            self._spawn_anim(self.impact, self.x + 20, self.y + self.impact_dy, 40, 40)
        self._strike(zombie)

    def _target(self) -> Optional[Any]:
        for zombie in self.scene.zombies:
            if (
                abs(zombie.x - self.x + zombie.offset + 60) < self.reach
                and self.row == zombie.row
                and self.alive
            ):
                return zombie
        return None

    def _strike(self, zombie: Any) -> None:
        zombie.hit(self.damage)

    def _splash(self) -> None:
        for zombie in list(self.scene.zombies):
            if abs(zombie.x - self.x + zombie.offset + 60) < SPLASH_REACH and self.row == zombie.row:
                zombie.hit(SPLASH_DAMAGE, True)


class Pea(Projectile):
    source = "FlyingObjects/Pea.gif"
    speed = 10
    can_fire = True
    impact = PeaHit

    def act(self) -> None:
        self._fly()


class Ball(Projectile):
    """A ball that a fire tree turns into a fireball."""

    source = "FlyingObjects/ball3.gif"
    speed = 10
    is_ball = True
    impact = PeaHit
    impact_dy = 50

    def act(self) -> None:
        self._fly()


class FirePea(Projectile):
    """A burning pea that also scorches zombies close to its target."""

    source = "FlyingObjects/PeaFire.gif"
    speed = 10
    impact = Fire

    def act(self) -> None:
        self._fly()

    def _strike(self, zombie: Any) -> None:
        super()._strike(zombie)
        self._splash()


class FireBall(FirePea):
    """A burning ball that incinerates its target and scorches its neighbours."""

    source = "FlyingObjects/FireBall2.gif"
    speed = 15
    reach = 40
    damage = 200

    def act(self) -> None:
        self._fly()

    def _strike(self, zombie: Any) -> None:
        super()._strike(zombie)
        self._play_sound("FireBallHit.wav")


class IcePea(Pea):
    """A frozen pea that slows the zombie it hits."""

    source = "FlyingObjects/PeaIce.gif"

    def act(self) -> None:
        self._fly()

    def _strike(self, zombie: Any) -> None:
        zombie.ice()
        super()._strike(zombie)


class Mush(Projectile):
    """A short-range spore that fades after a few ticks."""

    source = "FlyingObjects/Mush.gif"
    speed = 12
    lifetime = 22

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.timer_fly = self.lifetime

    def act(self) -> None:
        self.timer_fly -= 1
        if self.timer_fly < 0:
            self.alive = False
        self._fly()