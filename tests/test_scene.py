import random

import pytest

from lawnsiege.anims import PeaHit
from lawnsiege.cards import PeaShooterCard, Shovel, SunFlowerCard
from lawnsiege.entity import Point, Rect
from lawnsiege.plants import SunFlower
from lawnsiege.scene import MouseButton, Scene, Signal
from lawnsiege.zombies import CommonZombie, NewsZombie, PoleZombie


@pytest.fixture
def scene():
    s = Scene(rng=random.Random(7))
    s.cell_size = Point(81, 100)
    s.rect = Rect(250, 85, 729, 500)
    return s


def test_get_cell_on_and_off_lawn(scene):
    scene.m = Point(250, 85)
    assert scene.get_cell() == Point(0, 0)
    scene.m = Point(250 + 81, 85 + 100)
    assert scene.get_cell() == Point(1, 1)
    scene.m = Point(10, 10)
    assert scene.get_cell() == Point(-1, -1)


def test_signals_reach_every_handler(scene):
    calls = []
    scene.connect(Signal.TO_TITLE, lambda: calls.append("a"))
    scene.connect(Signal.TO_TITLE, lambda: calls.append("b"))
    scene.emit(Signal.TO_LAWN)
    scene.emit(Signal.TO_TITLE)
    assert calls == ["a", "b"]


def test_play_sound_uses_player():
    heard = []
    s = Scene(sound_player=heard.append)
    s.play_sound("Boom.wav")
    assert heard == ["Boom.wav"]
    assert s.played_sounds == ["Boom.wav"]


@pytest.mark.parametrize("kind, cls", [(0, CommonZombie), (4, CommonZombie), (5, PoleZombie), (6, NewsZombie)])
def test_put_zombie_kinds(scene, kind, cls):
    zombie = scene.put_zombie(2, kind)
    assert isinstance(zombie, cls)
    assert zombie.row == 2
    assert zombie.x == 950
    assert 175 <= zombie.y < 180
    assert scene.zombies == [zombie]


def test_put_zombie_unknown_kind(scene):
    with pytest.raises(ValueError):
        scene.put_zombie(0, 7)


def test_remove_dead_and_enemy_rows(scene):
    living = scene.put_zombie(3, 0)
    dead = scene.put_zombie(1, 0)
    dead.alive = False
    plant = SunFlower(scene)
    plant.alive = False
    scene.plants.append(plant)
    anim = PeaHit(scene)
    anim.alive = False
    scene.anims.append(anim)
    scene.remove_dead()
    assert scene.zombies == [living]
    assert scene.plants == []
    assert scene.anims == []
    assert scene.has_enemy[3] is True
    assert scene.has_enemy[1] is False


def test_act_runs_every_group(scene):
    anim = PeaHit(scene)
    scene.anims.append(anim)
    card = SunFlowerCard(scene)
    scene.cards.append(card)
    scene.act()
    assert anim.frame == 1
    assert card.frame == card.frame_max - 1


def test_create_zombie_spawns_when_threat_allows(scene):
    scene.threat = 599
    scene.create_zombie()
    assert scene.threat == 600
    assert len(scene.zombies) == 1
    assert scene.zombies[0].kind == 0
    scene.create_zombie()
    assert len(scene.zombies) == 1


def test_threat_is_capped(scene):
    scene.threat = 9001
    scene.zombies.extend(object() for _ in range(20))
    scene.create_zombie()
    assert scene.threat == 9001


def test_judge_loses_when_zombie_reaches_house(scene):
    scene.cards.append(Shovel(scene))
    zombie = scene.put_zombie(0, 0)
    zombie.move(100, zombie.y)
    scene.judge()
    assert scene.timer_lose == 100
    assert scene.cards == []
    assert scene.current_card is None
    assert scene.sun_display_visible is False
    assert scene.played_sounds[-1] == "Lose.wav"


def test_judge_counts_down_then_returns_to_title(scene):
    calls = []
    scene.connect(Signal.TO_TITLE, lambda: calls.append(True))
    scene.timer_lose = 3
    scene.judge()
    scene.judge()
    assert scene.timer_lose == 1
    assert calls == []
    scene.judge()
    assert calls == [True]


def test_put_plant_spends_sun_and_resets_card(scene):
    card = SunFlowerCard(scene)
    card.frame = 0
    scene.sun_point = 100
    scene.current_card = card
    scene.put_plant(Point(2, 1))
    (plant,) = scene.plants
    assert isinstance(plant, SunFlower)
    assert (plant.row, plant.column) == (1, 2)
    assert scene.sun_point == 100 - card.sun_point
    assert card.frame == card.frame_max
    assert scene.current_card is None


def test_put_plant_without_card(scene):
    with pytest.raises(ValueError):
        scene.put_plant(Point(0, 0))


def test_shovel_digs_up_plant(scene):
    scene.current_card = SunFlowerCard(scene)
    scene.put_plant(Point(0, 0))
    scene.current_card = Shovel(scene)
    scene.put_plant(Point(0, 0))
    assert scene.plants == []
    assert scene.current_card is None


def test_mouse_press_plants_on_free_cell(scene):
    card = PeaShooterCard(scene)
    scene.sun_point = 100
    scene.current_card = card
    scene.mouse_press(Point(260, 90), MouseButton.LEFT)
    assert len(scene.plants) == 1
    assert scene.sun_point == 0
    assert scene.played_sounds[-1] == "Place.wav"


def test_mouse_press_refuses_occupied_cell(scene):
    scene.current_card = SunFlowerCard(scene)
    scene.put_plant(Point(0, 0))
    card = PeaShooterCard(scene)
    scene.current_card = card
    scene.mouse_press(Point(260, 90), MouseButton.LEFT)
    assert len(scene.plants) == 1
    assert scene.current_card is card
    assert scene.played_sounds[-1] == "NotEnoughSun.wav"


def test_right_press_returns_card(scene):
    card = Shovel(scene)
    scene.current_pos = Point(250, 5)
    scene.current_card = card
    scene.mouse_move(Point(400, 300))
    assert card.pos == Point(400, 300) + Point(-40, 1)
    scene.mouse_press(Point(400, 300), MouseButton.RIGHT)
    assert card.pos == scene.current_pos
    assert scene.current_card is None