"""The playing field: it owns every entity, places plants and zombies and judges defeat."""

from __future__ import annotations

import random
from enum import Enum
from typing import Any, Callable, Optional

from lawnsiege.entity import Entity, Point, Rect
from lawnsiege.plants import plant_for_index
from lawnsiege.zombies import CommonZombie, NewsZombie, PoleZombie, Zombie

ROWS = 6
THREAT_CAP = 9001
THREAT_PER_ZOMBIE = 600
MIXED_WAVE_THREAT = 5000
LOSE_LINE = 130
LOSE_DELAY = 100
ZOMBIE_START_X = 950


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class Signal(Enum):
    TO_TITLE = "to_title"
    TO_LAWN = "to_lawn"
    TO_DARK_LAWN = "to_dark_lawn"


class Scene(Entity):
    """A screen of the game holding all entities that take part in a tick."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_player: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(None)
        self._rng = rng or random.Random()
        self._sound_player = sound_player
        self._handlers: dict = {}
        self.played_sounds: list = []

        self.zombies: list = []
        self.plants: list = []
        self.projectiles: list = []
        self.anims: list = []
        self.bonuses: list = []
        self.cards: list = []

        self.m = Point()
        self.cell_size = Point(1, 1)
        self.rect = Rect(0, 0, 1, 1)
        self.screen = Rect(170, 0, 900, 600)

        self.sun_label = ""
        self.sun_display_visible = True

        self.has_enemy = [False] * ROWS
        self.sun_point = 50
        self.threat = 0
        self.timer_lose = 0
        self.current_card: Optional[Any] = None
        self.current_pos = Point()

    def connect(self, signal: Signal, handler: Callable[[], Any]) -> None:
        """Call the handler whenever the signal is emitted."""
        self._handlers.setdefault(signal, []).append(handler)

    def emit(self, signal: Signal) -> None:
        for handler in list(self._handlers.get(signal, ())):
            handler()

    def play_sound(self, name: str) -> None:
        self.played_sounds.append(name)
        if self._sound_player is not None:
            self._sound_player(name)

    def get_cell(self) -> Point:
        """The lawn cell under the mouse, or (-1, -1) when it is off the lawn."""
        if not self.rect.contains(self.m):
            return Point(-1, -1)
        return Point(
            (self.m.x - self.rect.left) // self.cell_size.x,
            (self.m.y - self.rect.top) // self.cell_size.y,
        )

    def remove_dead(self) -> None:
        """Drop dead entities and note which rows still hold zombies."""
        self.plants[:] = [p for p in self.plants if p.alive]
        self.has_enemy = [False] * ROWS
        self.zombies[:] = [z for z in self.zombies if z.alive]
        for zombie in self.zombies:
            self.has_enemy[zombie.row] = True
        self.projectiles[:] = [p for p in self.projectiles if p.alive]
        self.anims[:] = [a for a in self.anims if a.alive]
        self.bonuses[:] = [b for b in self.bonuses if b.alive]

    def act(self) -> None:
        for group in (self.zombies, self.plants, self.projectiles, self.anims, self.bonuses, self.cards):
            for entity in list(group):
                # something earlier in the tick may have taken it off the field
                if any(entity is other for other in group):
                    entity.act()

    def create_zombie(self) -> None:
        """Raise the threat and send a zombie when the field holds too few."""
        if self.threat < THREAT_CAP:
            self.threat += 1
        if len(self.zombies) < self.threat // THREAT_PER_ZOMBIE:
            if self.threat < MIXED_WAVE_THREAT:
                self.put_zombie(self._rng.randrange(5), 0)
            else:
                self.put_zombie(self._rng.randrange(5), self._rng.randrange(7))

    def judge(self) -> None:
        """End the game once a zombie reaches the house."""
        if self.timer_lose > 1:
            self.timer_lose -= 1
            return
        if self.timer_lose == 1:
            self.emit(Signal.TO_TITLE)
            return
        for zombie in self.zombies:
            if zombie.x + zombie.offset < LOSE_LINE:
                self.current_card = None
                self.cards.clear()
                self.sun_display_visible = False
                self.move(0, 0)
                self.play_sound("Lose.wav")
                self.timer_lose = LOSE_DELAY
                return

    def ui_setup(self) -> None:
        pass

    def put_plant(self, cell: Point) -> None:
        """Use the selected card on a cell: plant there, or dig up with the shovel."""
        card = self.current_card
        if card is None:
            raise ValueError("no card is selected")
        if card.plant_index == 0:
            for plant in self.plants:
                if plant.row == cell.y and plant.column == cell.x:
                    self.plants.remove(plant)
                    card.move(self.current_pos.x, self.current_pos.y)
                    break
            self.current_card = None
            return
        plant = plant_for_index(card.plant_index, self)
        plant.set_geometry(
            self.rect.x + 10 + self.cell_size.x * cell.x,
            self.rect.y - 15 + self.cell_size.y * cell.y,
            120,
            100,
        )
        plant.row = cell.y
        plant.column = cell.x
        self.plants.append(plant)
        self.sun_point -= card.sun_point
        card.frame = card.frame_max
        self.current_card = None

    def put_zombie(self, row: int, kind: int) -> Zombie:
        """Send a zombie down a row; kinds 0-4 are common, 5 pole vaulter, 6 newspaper."""
        if kind in range(5):
            zombie: Zombie = CommonZombie(self, kind, self._rng)
        elif kind == 5:
            zombie = PoleZombie(self)
        elif kind == 6:
            zombie = NewsZombie(self)
        else:
            raise ValueError(f"unknown zombie kind: {kind}")
        zombie.row = row
        zombie.set_geometry(ZOMBIE_START_X, row * 100 - 25 + self._rng.randrange(5), 340, 200)
        self.zombies.append(zombie)
        return zombie

    def mouse_move(self, pos: Point) -> None:
        self.m = pos
        if self.current_card is not None:
            self.current_card.move(pos.x - 40, pos.y + 1)

    def mouse_press(self, pos: Point, button: MouseButton) -> None:
        self.m = pos
        cell = self.get_cell()
        card = self.current_card
        if button is MouseButton.LEFT:
            if cell.x > -1 and card is not None:
                if card.plant_index > 0 and any(
                    plant.row == cell.y and plant.column == cell.x for plant in self.plants
                ):
                    self.play_sound("NotEnoughSun.wav")
                    return
                card.move(self.current_pos.x, self.current_pos.y)
                self.put_plant(cell)
                self.play_sound("Place.wav")
        else:
            if card is not None:
                card.move(self.current_pos.x, self.current_pos.y)
            self.current_card = None