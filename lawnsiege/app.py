"""The main window: it switches between the splash, the title menu and the lawns."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Union

from lawnsiege.entity import Point, Rect
from lawnsiege.levels import DarkScene, Key, LawnScene, StartScene, StartScreen
from lawnsiege.scene import MouseButton, Scene, Signal

TITLE_SIZE = (800, 600)
LAWN_SIZE = (900, 600)


class MainDialog:
    """Holds the current scene and swaps it when the scene asks to."""

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        sound_player: Optional[Callable[[str], None]] = None,
        user_file: Optional[Union[str, Path]] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._sound_player = sound_player
        self._user_file = user_file
        self.size = TITLE_SIZE
        self.scene: Scene = StartScreen(self._rng, self._sound_player)
        self.scene.connect(Signal.TO_TITLE, self.back)

    def start_lawn(self) -> None:
        self.size = LAWN_SIZE
        self.scene = LawnScene(self._rng, self._sound_player)
        self.scene.connect(Signal.TO_TITLE, self.back)

    def start_dark(self) -> None:
        self.size = LAWN_SIZE
        self.scene = DarkScene(self._rng, self._sound_player)
        self.scene.connect(Signal.TO_TITLE, self.back)

    def back(self) -> None:
        self.size = TITLE_SIZE
        self.scene = StartScene(self._rng, self._sound_player, user_file=self._user_file)
        self.scene.connect(Signal.TO_LAWN, self.start_lawn)
        self.scene.connect(Signal.TO_DARK_LAWN, self.start_dark)


def _centre(rect: Rect) -> Point:
    return Point(rect.x + rect.width // 2, rect.y + rect.height // 2)


def _parse_keys(text: str) -> list:
    return [Key(token) for token in text.split()]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lawnsiege",
        description="Run a headless game: pass the splash, pick a lawn, press keys and tick.",
    )
    parser.add_argument("--scene", choices=("lawn", "dark"), default="lawn")
    parser.add_argument("--ticks", type=int, default=500, help="game ticks to run on the lawn")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--keys", default="", help="space-separated keys: 1-9 or escape")
    parser.add_argument("--user-file", default=None, help="profile file: '<name> <best time>'")
    return parser


def main(argv: Optional[list] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.ticks < 0:
        parser.error("--ticks must not be negative")
    try:
        keys = _parse_keys(args.keys)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        dialog = MainDialog(rng=random.Random(args.seed), user_file=args.user_file)
        while not isinstance(dialog.scene, StartScene):
            dialog.scene.on_timer()
        title = dialog.scene
        button = title.lawn_button if args.scene == "lawn" else title.dark_button
        title.mouse_press(_centre(button), MouseButton.LEFT)
        for key in keys:
            press = getattr(dialog.scene, "key_press", None)
            if press is None:
                break
            press(key)
        for _ in range(args.ticks):
            tick = getattr(dialog.scene, "on_timer", None)
            if tick is None:
                break
            tick()
    except (OSError, ValueError) as exc:
        print(f"lawnsiege: {exc}", file=sys.stderr)
        return 1

    scene = dialog.scene
    print(f"scene: {scene.name}")
    if isinstance(scene, (LawnScene, DarkScene)):
        print(f"sun: {scene.sun_point}")
        print(f"threat: {scene.threat}")
        print(f"zombies: {len(scene.zombies)}")
        print(f"plants: {len(scene.plants)}")
        print(f"lost: {'yes' if scene.timer_lose > 0 else 'no'}")
    return 0


if __name__ == "__main__":
    sys.exit(main())