"""The zombies that walk down the lanes, eat plants and take damage."""

from __future__ import annotations

import random
from typing import Any, Optional

from lawnsiege.anims import (
    BurnDie,
    NewsDie,
    NewsHead,
    PoleZombieDie,
    PoleZombieHead,
    ZombieDie,
    ZombieHead,
)
from lawnsiege.entity import Entity, Movie

START_X = 950.0
BURN_DAMAGE = 200
SLOWED_PERCENT = 50

POLE_JUMP_FRAMES = 10
POLE_LAND_FRAMES = 8
NEWS_LOST_FRAMES = 12

_BODY_BOX = (-30, 25, 180, 150)
_HEAD_BOX = (50, 25, 180, 200)


class Zombie(Entity):
    """A zombie in a lane; the base kind is inert."""

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.row = 0
        self.offset = 0
        self.eat_frame = 0
        self.iced = False
        self.shield = False
        self.speed = 0.0
        self.xpos = 0.0

    def act(self) -> None:
        pass

    def hit(self, damage: int, silence: bool = False) -> None:
        pass

    def ice(self) -> None:
        pass

    def _plant_in_reach(self) -> Optional[Any]:
        for plant in self.scene.plants:
            if (
                abs(plant.x - self.x - 55 - self.offset) < 40
                and plant.row == self.row
                and self.alive
            ):
                return plant
        return None

    def _bite(self, plant: Any, movie: Movie, period: int = 20, damage: int = 1) -> None:
        if self.eat_frame <= 0:
            self._play_sound("Eat.wav")
            self.eat_frame = period
        self.eat_frame -= 1
        self.set_movie(movie)
        plant.hit(damage)

    def _walk(self, movie: Optional[Movie]) -> None:
        self.set_movie(movie)
        self.xpos -= self.speed
        self.move(self.xpos, self.y)

    def _burned(self, damage: int, dx: float) -> bool:
        """Incinerate the zombie if the damage is heavy enough."""
        if damage < BURN_DAMAGE:
            return False
        self.alive = False
        self._spawn_anim(BurnDie, self.x + dx, self.y + 25, 180, 150)
        return True

    def _die(self, body: type, head: type, body_box=_BODY_BOX, head_box=_HEAD_BOX) -> None:
        self.alive = False
        for anim, (dx, dy, width, height) in ((body, body_box), (head, head_box)):
            self._spawn_anim(anim, self.x + dx, self.y + dy, width, height)

    def _slow(self, *movies: Optional[Movie]) -> None:
        self.iced = True
        self.speed /= 2
        for movie in movies:
            if movie is not None:
                movie.set_speed(SLOWED_PERCENT)

    @staticmethod
    def _finished(movie: Movie) -> bool:
        """Step a one-shot clip; stop it and report once its last frame shows."""
        movie.advance()
        if movie.current_frame >= movie.frame_count - 1:
            movie.stop()
            return True
        return False


class CommonZombie(Zombie):
    """Kinds: 0 plain, 1 flag, 2 cone, 3 bucket, 4 shield."""

    _PROPS = {
        2: (False, False, 200, "ZombieCone", 20),
        3: (True, False, 400, "ZombieBucket", 0),
        4: (True, True, 400, "ZombieShield", 0),
    }

    def __init__(
        self,
        scene: Optional[Any] = None,
        kind: int = 0,
        rng: Optional[random.Random] = None,
    ) -> None:
        super().__init__(scene)
        if kind not in range(5):
            raise ValueError(f"unknown common zombie kind: {kind}")
        rng = rng or random.Random()
        self.kind = kind
        self.walk: Optional[Movie] = Movie(
            "Zombies/Zombie.gif" if rng.randrange(2) == 0 else "Zombies/Zombie_2.gif"
        )
        self.attack: Optional[Movie] = Movie("Zombies/ZombieAttack.gif")
        self.prop_walk: Optional[Movie] = None
        self.prop_attack: Optional[Movie] = None
        self.prop = False
        self.iron = False
        self.prop_strength = 0
        if kind == 1:
            self.offset = 20
            self.walk = Movie("Zombies/ZombieFlag.gif")
            self.attack = Movie("Zombies/ZombieFlagAttack.gif")
        elif kind in self._PROPS:
            iron, shield, strength, clip, offset = self._PROPS[kind]
            self.prop = True
            self.iron = iron or shield
            self.shield = shield
            self.prop_strength = strength
            self.prop_walk = Movie(f"Zombies/{clip}.gif")
            self.prop_attack = Movie(f"Zombies/{clip}Attack.gif")
            self.offset = offset
        self.speed = 0.25
        self.strength = 200
        self.xpos = START_X
        for movie in self._movies():
            movie.start()
        self.set_movie(self.prop_walk if self.prop else self.walk)

    def _movies(self) -> list:
        return [m for m in (self.walk, self.attack, self.prop_walk, self.prop_attack) if m is not None]

    def act(self) -> None:
        plant = self._plant_in_reach()
        if plant is not None:
            self._bite(plant, self.prop_attack if self.prop else self.attack)
            return
        self._walk(self.prop_walk if self.prop else self.walk)

    def hit(self, damage: int, silence: bool = False) -> None:
        if self._burned(damage, -30):
            self.prop_walk = None
            self.prop_attack = None
            return
        if not silence:
            self._play_sound("ShieldHit.wav" if self.prop and self.iron else "Pea.wav")
        if self.prop:
            self.prop_strength -= damage
            if self.prop_strength <= 0:
                self.prop = False
                self.xpos += self.offset
                self.act()
                self.set_movie(self.walk)
                self.walk.start()
                self.prop_walk = None
                self.prop_attack = None
                self.shield = False
        else:
            self.strength -= damage
        if self.strength <= 0:
            self._die(ZombieDie, ZombieHead)

    def ice(self) -> None:
        if not (self.iced or self.shield):
            self._slow(*self._movies())


class PoleZombie(Zombie):
    """A zombie that vaults over the first plant it meets."""

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.walk = Movie("Zombies/PoleZombieWalk.gif")
        self.attack = Movie("Zombies/PoleZombieAttack.gif")
        self.run = Movie("Zombies/PoleZombie.gif")
        self.jump_1 = Movie("Zombies/PoleZombieJump.gif", POLE_JUMP_FRAMES)
        self.jump_2 = Movie("Zombies/PoleZombieJump2.gif", POLE_LAND_FRAMES)
        self.poled = True
        self.jumping = False
        self.jumping_1 = False
        self.set_movie(self.run)
        for movie in (self.run, self.walk, self.attack):
            movie.start()
        self.speed = 0.5
        self.strength = 200
        self.xpos = START_X
        self.offset = 145

    def act(self) -> None:
        if self.jumping_1:
            if self._finished(self.jump_2):
                self.jumping_1 = False
                self.speed /= 2
            return
        if self.jumping:
            if self._finished(self.jump_1):
                self.set_movie(self.jump_2)
                self.jump_2.start()
                self.xpos -= 110
                self.move(self.xpos, self.y)
                self.jumping_1 = True
                self.jumping = False
            return
        plant = self._plant_in_reach()
        if plant is None:
            self._walk(self.run if self.poled else self.walk)
        elif self.poled:
            self.poled = False
            self.jumping = True
            self.set_movie(self.jump_1)
            self.jump_1.start()
            self._play_sound("Pole.wav")
        else:
            self._bite(plant, self.attack)

    def hit(self, damage: int, silence: bool = False) -> None:
        if self._burned(damage, self.offset - 20):
            return
        if not silence:
            self._play_sound("Pea.wav")
        self.strength -= damage
        if self.strength <= 0:
            self._die(PoleZombieDie, PoleZombieHead, (-30, 0, 300, 200), (0, -50, 300, 300))

    def ice(self) -> None:
        if not self.iced:
            self._slow(self.walk, self.attack, self.jump_1, self.jump_2, self.run)


class NewsZombie(Zombie):
    """A zombie behind a newspaper that speeds up once the paper is gone."""

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.walk = Movie("Zombies/NewsWalk.gif")
        self.attack = Movie("Zombies/NewsAttack.gif")
        self.paper_walk = Movie("Zombies/NewsWalk_1.gif")
        self.paper_attack = Movie("Zombies/NewsAttack_1.gif")
        self.lose_paper = Movie("Zombies/NewsLost.gif", NEWS_LOST_FRAMES)
        self.paper = True
        self.angrying = False
        self.set_movie(self.paper_walk)
        for movie in (self.paper_walk, self.walk, self.attack, self.paper_attack):
            movie.start()
        self.speed = 0.25
        self.strength = 200
        self.paper_strength = 50
        self.xpos = START_X

    def act(self) -> None:
        if self.angrying:
            if self._finished(self.lose_paper):
                self.angrying = False
                self.speed *= 2
                self._play_sound("NewsLost.wav")
            return
        plant = self._plant_in_reach()
        if plant is None:
            self._walk(self.paper_walk if self.paper else self.walk)
        elif self.paper:
            self._bite(plant, self.paper_attack, period=27)
        else:
            self._bite(plant, self.attack, period=27, damage=2)

    def hit(self, damage: int, silence: bool = False) -> None:
        if self._burned(damage, self.offset - 20):
            return
        if not silence:
            self._play_sound("Pea.wav")
        if self.paper:
            self.paper_strength -= damage
            if self.paper_strength <= 0:
                self.paper = False
                self.angrying = True
                self.set_movie(self.lose_paper)
                self.lose_paper.start()
        else:
            self.strength -= damage
            if self.strength <= 0:
                self._die(NewsDie, NewsHead)

    def ice(self) -> None:
        if not self.iced:
            self._slow(self.walk, self.attack, self.paper_walk, self.paper_attack, self.lose_paper)