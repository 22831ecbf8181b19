"""The plants a player places on the lawn."""

from __future__ import annotations

import random
from typing import Any, Callable, Optional

from lawnsiege.anims import Boom, MashedPotato
from lawnsiege.bonus import Sun
from lawnsiege.entity import Entity, Movie
from lawnsiege.projectiles import Ball, FireBall, FirePea, IcePea, Mush, Pea

SHOOT_PERIOD = 50
IDLE_JITTER = 20
KILL_DAMAGE = 1200


def _is_left(button: Any) -> bool:
    return getattr(button, "value", button) == "left"


class Plant(Entity):
    """A plant in a lawn cell; the base kind does nothing on its own."""

    source = ""
    toughness = 1

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene)
        self._rng = rng or random.Random()
        self.row = 0
        self.column = 0
        self.strength = self.toughness
        if self.source:
            self.set_movie(Movie(self.source))
            self.movie.start()

    def act(self) -> None:
        pass

    def hit(self, damage: int) -> None:
        """Take damage; the plant dies once its strength is used up."""
        self.strength -= damage
        if self.strength <= 0:
            self.alive = False

    def _launch(self, kind: type, x: float, y: float, width: float, height: float, sound: str) -> Any:
        shot = kind(self.scene)
        shot.set_geometry(x, y, width, height)
        shot.row = self.row
        self.scene.projectiles.append(shot)
        self._play_sound(sound)
        return shot

    def _zombies_near(self, reach: int, rows: int) -> list:
        return [
            zombie
            for zombie in self.scene.zombies
            if abs(zombie.x - self.x + zombie.offset + 50) < reach and abs(self.row - zombie.row) <= rows
        ]


class _Shooter(Plant):
    toughness = 200

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, rng)
        self.timer_shoot_max = SHOOT_PERIOD
        self.timer_shoot = self.timer_shoot_max

    def _idle_if_clear(self) -> bool:
        if not self.scene.has_enemy[self.row]:
            # not to shoot too many shots in a single tick
            self.timer_shoot = self._rng.randrange(IDLE_JITTER)
            return True
        return False

    def _cycle(self, fire: Callable[[], None]) -> None:
        if self.timer_shoot <= 0:
            if self._idle_if_clear():
                return
            self.timer_shoot = self.timer_shoot_max
            fire()
        else:
            self.timer_shoot -= 1

    def _fire_ball(self) -> None:
        self._launch(Ball, self.x + 55, self.y - 60 - self._rng.randrange(5), 100, 210, "PeaHit.wav")


class PeaShooter(_Shooter):
    source = "Plants/Peashooter.gif"

    def act(self) -> None:
        self._cycle(self._fire_ball)


class KunShooter(_Shooter):
    """A shooter that also blasts a wide area when clicked."""

    source = "Plants/Kunshooter.gif"

    def act(self) -> None:
        self._cycle(self._fire_ball)

    def click(self, button: Any) -> None:
        if not _is_left(button):
            return
        self._play_sound("KunBlast.wav")
        self._spawn_anim(Boom, self.x + 160, self.y - 150, 400, 300)
        for zombie in self._zombies_near(840, 2):
            zombie.hit(KILL_DAMAGE)


class SunFlower(Plant):
    source = "Plants/SunFlower.gif"
    toughness = 200

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, rng)
        self.timer_sun_max = 500
        self.timer_sun = self._rng.randrange(self.timer_sun_max)

    def act(self) -> None:
        if self.timer_sun > 0:
            self.timer_sun -= 1
            return
        self.timer_sun = self.timer_sun_max
        sun = Sun(self.scene, self._rng)
        sun.set_geometry(self.x, self.y + 15 - self._rng.randrange(5), 80, 80)
        sun.level = float(self.y + 40)
        self.scene.bonuses.append(sun)


class WallNut(Plant):
    source = "Plants/WallNut.gif"
    toughness = 1200

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, rng)
        self.cracked = Movie("Plants/Wallnut_1.gif")
        self.crumbling = Movie("Plants/Wallnut_2.gif")
        self.cracked.start()
        self.crumbling.start()

    def act(self) -> None:
        if self.strength < 400:
            self.set_movie(self.crumbling)


class Repeater(_Shooter):
    """A shooter that fires a second pea when its timer reaches five."""

    source = "Plants/Repeater.gif"

    def _fire_pea(self) -> None:
        self._launch(Pea, self.x + 20, self.y + 15 - self._rng.randrange(5), 80, 40, "PeaHit.wav")

    def act(self) -> None:
        if self.timer_shoot <= 0:
            if self._idle_if_clear():
                return
            self.timer_shoot = self.timer_shoot_max
            self._fire_pea()
        elif self.timer_shoot == 5:
            if self._idle_if_clear():
                return
            self._fire_pea()
        else:
            self.timer_shoot -= 1


class PotatoMine(Plant):
    source = "Plants/PotatoMine_1.gif"
    toughness = 200

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, rng)
        self.armed = Movie("Plants/PotatoMine.gif")
        self.armed.start()
        self.timer_grow = 800

    def act(self) -> None:
        if self.timer_grow > 0:
            self.timer_grow -= 1
            return
        self.set_movie(self.armed)
        for zombie in list(self.scene.zombies):
            if abs(zombie.x - self.x + zombie.offset + 50) < 40 and self.row == zombie.row:
                if self.alive:
                    self._spawn_anim(MashedPotato, self.x - 40, self.y, 150, 100)
                    self._play_sound("Potato.wav")
                self.alive = False
                zombie.hit(KILL_DAMAGE)


class FireTree(Plant):
    """Sets alight the peas and balls that pass through it."""

    source = "Plants/FireTree.gif"
    toughness = 300

    def act(self) -> None:
        kept, lit = [], []
        for shot in self.scene.projectiles:
            passing = shot.row == self.row and abs(self.x - shot.x - 10) < 20
            if passing and shot.can_fire:
                flame = FirePea(self.scene)
                flame.set_geometry(shot.x, shot.y, 80, 40)
            elif passing and shot.is_ball:
                flame = FireBall(self.scene)
                flame.set_geometry(shot.x, shot.y + 60, 100, 100)
            else:
                kept.append(shot)
                continue
            flame.row = shot.row
            lit.append(flame)
        self.scene.projectiles[:] = kept + lit


class CherryBomb(Plant):
    source = "Plants/CherryBomb.gif"
    toughness = 2000

    def __init__(self, scene: Optional[Any] = None, rng: Optional[random.Random] = None) -> None:
        super().__init__(scene, rng)
        self.timer_boom = 12

    def act(self) -> None:
        if self.timer_boom > 0:
            self.timer_boom -= 1
            return
        for zombie in self._zombies_near(340, 2):
            zombie.hit(KILL_DAMAGE)
        self._spawn_anim(Boom, self.x - 160, self.y - 150, 400, 300)
        self._play_sound("Boom.wav")
        self.alive = False


class IcePeaShooter(_Shooter):
    source = "Plants/IcePeaShooter.gif"

    def act(self) -> None:
        self._cycle(
            lambda: self._launch(IcePea, self.x + 20, self.y + 15 - self._rng.randrange(5), 80, 40, "PeaHit.wav")
        )


class Mushroom(_Shooter):
    source = "Plants/Mushroom.gif"
    toughness = 100

    def act(self) -> None:
        self._cycle(
            lambda: self._launch(Mush, self.x + 20, self.y + 55 - self._rng.randrange(5), 80, 40, "Mush.wav")
        )


_BY_INDEX = {
    1: SunFlower,
    2: PeaShooter,
    3: WallNut,
    4: Repeater,
    5: PotatoMine,
    6: FireTree,
    7: CherryBomb,
    8: IcePeaShooter,
    9: Mushroom,
    10: KunShooter,
}


def plant_for_index(index: int, scene: Any) -> Plant:
    """Create the plant that a card's plant index stands for."""
    try:
        kind = _BY_INDEX[index]
    except KeyError:
        raise ValueError(f"no plant for index {index}") from None
    return kind(scene)