"""The playable lawns, the title menu and the splash screen."""

from __future__ import annotations

import random
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from lawnsiege.bonus import SunFall
from lawnsiege.cards import (
    CherryBombCard,
    FireTreeCard,
    IcePeaShooterCard,
    KunShooterCard,
    MushroomCard,
    PeaShooterCard,
    PotatoMineCard,
    RepeaterCard,
    Shovel,
    SunFlowerCard,
    WallNutCard,
)
from lawnsiege.entity import Movie, Point, Rect
from lawnsiege.scene import MouseButton, Scene, Signal

TICK_MS = 20
THREAT_BOOST = 6001
SUN_BONUS = 100
SUN_FALL_ODDS = 521
SPLASH_FRAMES = 100


class Key(Enum):
    KEY_1 = "1"
    KEY_2 = "2"
    KEY_3 = "3"
    KEY_4 = "4"
    KEY_5 = "5"
    KEY_6 = "6"
    KEY_7 = "7"
    KEY_8 = "8"
    KEY_9 = "9"
    ESCAPE = "escape"


_ZOMBIE_KEYS = {
    Key.KEY_1: 0,
    Key.KEY_2: 1,
    Key.KEY_3: 2,
    Key.KEY_4: 3,
    Key.KEY_5: 4,
    Key.KEY_6: 5,
    Key.KEY_7: 6,
}


class _Level(Scene):
    """A lawn on which the game is played, ticked every TICK_MS milliseconds."""

    name = ""
    background_source = ""
    card_layout: tuple = ()
    timer_interval = TICK_MS

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_player: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(rng, sound_player)
        self.set_geometry(-120, 0, 1400, 600)
        self.cell_size = Point(81, 100)
        self.rect = Rect(250, 85, 729, 500)
        self.background = Movie(self.background_source)
        self.background.start()
        self.set_movie(self.background)
        self.exit_button = Rect(950, 0, 60, 60)
        self.ui_setup()

    def ui_setup(self) -> None:
        """Show the sun counter and lay out the seed bank and the shovel."""
        self.sun_label = str(self.sun_point)
        self.sun_display_visible = True
        self.cards.clear()
        for card_class, slot in self.card_layout:
            card = card_class(self)
            card.set_index(slot)
            self.cards.append(card)
        self.cards.append(Shovel(self))

    def _boost_threat(self) -> None:
        raise NotImplementedError

    def _drop_sun(self) -> None:
        pass

    def key_press(self, key: Key) -> None:
        """Keys 1-7 send zombies, 8 gives sun, 9 raises the threat, Escape leaves."""
        if key in _ZOMBIE_KEYS:
            self.put_zombie(self._rng.randrange(5), _ZOMBIE_KEYS[key])
        elif key is Key.KEY_8:
            self.sun_point += SUN_BONUS
        elif key is Key.KEY_9:
            self._boost_threat()
        elif key is Key.ESCAPE:
            self.emit(Signal.TO_TITLE)

    def on_timer(self) -> None:
        """Run one tick of the game."""
        self.remove_dead()
        self.act()
        self.sun_label = str(self.sun_point)
        self.create_zombie()
        self._drop_sun()
        self.judge()

    def leave(self) -> None:
        self.emit(Signal.TO_TITLE)


class LawnScene(_Level):
    """The daytime lawn, where sun falls from the sky."""

    name = "lawn"
    background_source = "Background/background1.jpg"
    card_layout = (
        (SunFlowerCard, 0),
        (PeaShooterCard, 1),
        (WallNutCard, 2),
        (RepeaterCard, 4),
        (PotatoMineCard, 5),
        (FireTreeCard, 6),
        (CherryBombCard, 7),
        (IcePeaShooterCard, 3),
        (KunShooterCard, 8),
    )

    def ui_setup(self) -> None:
        super().ui_setup()

    def key_press(self, key: Key) -> None:
        super().key_press(key)

    def on_timer(self) -> None:
        super().on_timer()

    def leave(self) -> None:
        super().leave()

    def _boost_threat(self) -> None:
        self.threat += THREAT_BOOST

    def _drop_sun(self) -> None:
        if self._rng.randrange(SUN_FALL_ODDS) < 1:
            self.bonuses.append(SunFall(self, self._rng))


class DarkScene(_Level):
    """The night lawn: no sun falls, but mushrooms are free."""

    name = "dark"
    background_source = "Background/background2.jpg"
    card_layout = (
        (SunFlowerCard, 1),
        (PeaShooterCard, 2),
        (WallNutCard, 3),
        (RepeaterCard, 5),
        (PotatoMineCard, 6),
        (FireTreeCard, 7),
        (CherryBombCard, 8),
        (IcePeaShooterCard, 4),
        (MushroomCard, 0),
    )

    def ui_setup(self) -> None:
        super().ui_setup()

    def key_press(self, key: Key) -> None:
        super().key_press(key)

    def on_timer(self) -> None:
        super().on_timer()

    def leave(self) -> None:
        super().leave()

    def _boost_threat(self) -> None:
        self.threat = THREAT_BOOST


class StartScene(Scene):
    """The title menu: pick a lawn, and see the player's profile."""

    name = "title"

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_player: Optional[Callable[[str], None]] = None,
        user_file: Optional[Union[str, Path]] = None,
    ) -> None:
        super().__init__(rng, sound_player)
        self.set_geometry(0, 0, 800, 600)
        self.background = Movie("Background/Title.jpg")
        self.background.start()
        self.set_movie(self.background)
        self.lawn_button = Rect(120, 205, 180, 180)
        self.dark_button = Rect(500, 205, 180, 180)
        self.title = "Select a Scene"
        self.user_name, self.best_time = self._read_profile(user_file)
        self.user_label = f"User: {self.user_name}"
        self.best_label = f"BestTime: {self.best_time}"

    @staticmethod
    def _read_profile(user_file: Optional[Union[str, Path]]) -> tuple:
        if user_file is None:
            return "", ""
        lines = Path(user_file).read_text(encoding="utf-8").splitlines()
        fields = (lines[0] if lines else "").split(" ")
        if len(fields) < 2:
            raise ValueError(f"{user_file}: expected a user name and a best time on the first line")
        return fields[0], fields[1]

    def mouse_press(self, pos: Point, button: MouseButton) -> None:
        if self.lawn_button.contains(pos):
            self.emit(Signal.TO_LAWN)
        if self.dark_button.contains(pos):
            self.emit(Signal.TO_DARK_LAWN)


class StartScreen(Scene):
    """The splash screen that fades in and out before the title menu."""

    name = "splash"
    timer_interval = TICK_MS

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_player: Optional[Callable[[str], None]] = None,
    ) -> None:
        super().__init__(rng, sound_player)
        self.set_geometry(0, 0, 800, 600)
        self.background = Movie("Interface/StartScreen.jpg")
        self.background.start()
        self.set_movie(self.background)
        self.frame = SPLASH_FRAMES
        self.overlay_alpha = 1.0

    def on_timer(self) -> None:
        """Fade the black overlay; once the frames run out, ask for the title."""
        if self.frame > 0:
            self.frame -= 1
            if self.frame > 50:
                self.overlay_alpha = (self.frame - 50) / 50.0
            if self.frame < 30:
                self.overlay_alpha = (30 - self.frame) / 30.0
        else:
            self.emit(Signal.TO_TITLE)