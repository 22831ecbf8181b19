"""Seed cards that pick the plant to place, and the shovel that removes one."""

from __future__ import annotations

from typing import Any, Optional

from lawnsiege.entity import Entity, Movie, Rect
from lawnsiege.scene import MouseButton

CARD_LEFT = 125
CARD_TOP = 40
CARD_STEP = 60
CARD_WIDTH = 100
CARD_HEIGHT = 60

FRONT_TOP = 6
FRONT_WIDTH = 100
FRONT_HEIGHT = 54

HIDDEN = Rect(0, 0, 0, 0)


class Card(Entity):
    """A card in the seed bank, shaded while it recharges or while sun is short."""

    source = ""
    plant_index = 0
    cost = 50
    cooldown = 1
    start_frame: Optional[int] = None
    label_text: Optional[str] = None

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.sun_point = self.cost
        self.frame_max = self.cooldown
        self.frame = self.cooldown if self.start_frame is None else self.start_frame
        self.label = str(self.cost) if self.label_text is None else self.label_text
        self.front = Rect(0, FRONT_TOP, FRONT_WIDTH, self._front_height())
        self.back = Rect(0, FRONT_TOP, FRONT_WIDTH, FRONT_HEIGHT)
        if self.source:
            self.set_movie(Movie(self.source))
            self.movie.start()

    def _front_height(self) -> int:
        return FRONT_HEIGHT * self.frame // self.frame_max

    def act(self) -> None:
        if self.frame > 0:
            self.frame -= 1
        self.trans_front()

    def set_index(self, index: int) -> None:
        """Put the card in the given slot of the seed bank."""
        self.set_geometry(CARD_LEFT, CARD_TOP + CARD_STEP * index, CARD_WIDTH, CARD_HEIGHT)

    def trans_front(self) -> None:
        """Update the recharge shade and the not-enough-sun shade."""
        self.front = Rect(0, FRONT_TOP, FRONT_WIDTH, self._front_height())
        if self.scene.sun_point >= self.sun_point:
            self.back = HIDDEN
        else:
            self.back = Rect(0, FRONT_TOP, FRONT_WIDTH, FRONT_HEIGHT)

    def click(self, button: MouseButton) -> None:
        """Select the card if it is charged and affordable; any other button deselects."""
        scene = self.scene
        if button is not MouseButton.LEFT:
            scene.current_card = None
            return
        if self.front.height > 0 or scene.sun_point < self.sun_point:
            scene.play_sound("NotEnoughSun.wav")
            scene.current_card = None
            return
        scene.play_sound("Place.wav")
        scene.current_pos = self.pos
        scene.current_card = self


class SunFlowerCard(Card):
    source = "Cards/card_Sunflower.png"
    plant_index = 1
    cost = 50
    cooldown = 100


class PeaShooterCard(Card):
    source = "Cards/card_PeaShooter.png"
    plant_index = 2
    cost = 100
    cooldown = 100


class KunShooterCard(Card):
    source = "Cards/card_Kunshooter.png"
    plant_index = 10
    cost = 1000
    cooldown = 100


class WallNutCard(Card):
    source = "Cards/card_WallNut.png"
    plant_index = 3
    cost = 50
    cooldown = 500


class RepeaterCard(Card):
    source = "Cards/card_Repeater.png"
    plant_index = 4
    cost = 200
    cooldown = 100


class PotatoMineCard(Card):
    source = "Cards/card_PotatoMine.png"
    plant_index = 5
    cost = 25
    cooldown = 500


class FireTreeCard(Card):
    source = "Cards/card_FireTree.png"
    plant_index = 6
    cost = 175
    cooldown = 300


class CherryBombCard(Card):
    source = "Cards/card_CherryBomb.png"
    plant_index = 7
    cost = 150
    cooldown = 500


class IcePeaShooterCard(Card):
    source = "Cards/card_IcePeaShooter.png"
    plant_index = 8
    cost = 175
    cooldown = 100


class MushroomCard(Card):
    source = "Cards/card_Mushroom.png"
    plant_index = 9
    cost = 0
    cooldown = 300


class Shovel(Card):
    """Digs up a planted cell; always ready and free."""

    source = "Cards/Shovel.png"
    plant_index = 0
    cost = 0
    cooldown = 1
    start_frame = 0
    label_text = ""

    def __init__(self, scene: Optional[Any] = None) -> None:
        super().__init__(scene)
        self.set_geometry(250, 5, 76, 34)