"""Short-lived effects that play for a fixed number of ticks and then vanish."""

from __future__ import annotations

from typing import Any, Optional

from lawnsiege.entity import Entity, Movie


class Anim(Entity):
    """An effect that counts its frames down and dies when they run out.

    Concrete effects name their clip and lifetime as class keywords.
    """

    source = ""
    lifetime = 0

    def __init_subclass__(cls, source: str = "", lifetime: int = 0, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if source:
            cls.source = f"Anims/{source}"
        if lifetime:
            cls.lifetime = lifetime

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.frame = self.lifetime
        if self.source:
            self.set_movie(Movie(self.source))
            self.movie.start()

    def act(self) -> None:
        if self.frame > 0:
            self.frame -= 1
        else:
            self.alive = False


class PeaHit(Anim, source="PeaHit.gif", lifetime=2):
    """A pea bursting on impact."""


class Fire(Anim, source="Fire.gif", lifetime=2):
    """A burning pea bursting on impact."""


class ZombieDie(Anim, source="ZombieDie.gif", lifetime=50):
    """A zombie body falling over."""


class BurnDie(Anim, source="BurnDie.gif", lifetime=85):
    """A zombie burnt to ashes."""


class ZombieHead(Anim, source="ZombieHead.gif", lifetime=40):
    """A zombie head dropping off."""


class MashedPotato(Anim, source="PotatoMine_mashed.gif", lifetime=20):
    """A potato mine going off."""


class Boom(Anim, source="Boom3.gif", lifetime=40):
    """A large explosion."""


class PoleZombieDie(Anim, source="PoleZombieDie.gif", lifetime=50):
    """A pole-vaulting zombie falling over."""


class PoleZombieHead(Anim, source="PoleZombieHead.gif", lifetime=40):
    """A pole-vaulting zombie's head dropping off."""


class NewsDie(Anim, source="NewsDie.gif", lifetime=50):
    """A newspaper zombie falling over."""


class NewsHead(Anim, source="NewsHead.gif", lifetime=40):
    """A newspaper zombie's head dropping off."""