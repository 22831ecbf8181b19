import pytest

from lawnsiege.cards import (
    Card,
    CherryBombCard,
    KunShooterCard,
    MushroomCard,
    PeaShooterCard,
    Shovel,
    SunFlowerCard,
    WallNutCard,
)
from lawnsiege.entity import Rect
from lawnsiege.scene import MouseButton, Scene


@pytest.fixture
def scene():
    return Scene()


@pytest.mark.parametrize(
    "kind, index, cost, cooldown",
    [
        (SunFlowerCard, 1, 50, 100),
        (PeaShooterCard, 2, 100, 100),
        (WallNutCard, 3, 50, 500),
        (CherryBombCard, 7, 150, 500),
        (MushroomCard, 9, 0, 300),
        (KunShooterCard, 10, 1000, 100),
    ],
)
def test_card_settings(scene, kind, index, cost, cooldown):
    card = kind(scene)
    assert card.plant_index == index
    assert card.sun_point == cost
    assert card.frame_max == cooldown
    assert card.frame == cooldown
    assert card.label == str(cost)


def test_set_index_first_slot(scene):
    card = SunFlowerCard(scene)
    card.set_index(0)
    assert card.geometry == Rect(125, 40, 100, 60)


def test_slots_are_evenly_spaced(scene):
    card = SunFlowerCard(scene)
    card.set_index(3)
    third = card.y
    card.set_index(4)
    assert card.y - third == 60
    assert card.x == 125


def test_front_shade_shrinks_to_nothing(scene):
    card = SunFlowerCard(scene)
    assert card.front.height == 54
    heights = []
    for _ in range(card.frame_max):
        card.act()
        heights.append(card.front.height)
    assert heights == sorted(heights, reverse=True)
    assert heights[-1] == 0
    assert card.frame == 0


def test_frame_never_goes_negative(scene):
    card = Shovel(scene)
    card.act()
    card.act()
    assert card.frame == 0


def test_back_shade_follows_sun(scene):
    card = PeaShooterCard(scene)
    scene.sun_point = 50
    card.trans_front()
    assert card.back == Rect(0, 6, 100, 54)
    scene.sun_point = 100
    card.trans_front()
    assert card.back == Rect(0, 0, 0, 0)


def test_click_while_recharging_is_refused(scene):
    card = SunFlowerCard(scene)
    scene.sun_point = 500
    scene.current_card = card
    card.click(MouseButton.LEFT)
    assert scene.current_card is None
    assert scene.played_sounds == ["NotEnoughSun.wav"]


def test_click_without_sun_is_refused(scene):
    card = PeaShooterCard(scene)
    card.frame = 0
    card.trans_front()
    scene.sun_point = 99
    card.click(MouseButton.LEFT)
    assert scene.current_card is None
    assert scene.played_sounds[-1] == "NotEnoughSun.wav"


def test_click_ready_card_selects_it(scene):
    card = PeaShooterCard(scene)
    card.set_index(1)
    card.frame = 0
    card.trans_front()
    scene.sun_point = 100
    card.click(MouseButton.LEFT)
    assert scene.current_card is card
    assert scene.current_pos == card.pos
    assert scene.played_sounds[-1] == "Place.wav"


def test_right_click_deselects(scene):
    card = Shovel(scene)
    scene.current_card = card
    card.click(MouseButton.RIGHT)
    assert scene.current_card is None
    assert scene.played_sounds == []


def test_shovel_is_ready_and_free(scene):
    shovel = Shovel(scene)
    assert shovel.geometry == Rect(250, 5, 76, 34)
    assert shovel.label == ""
    assert shovel.front.height == 0
    scene.sun_point = 0
    shovel.click(MouseButton.LEFT)
    assert scene.current_card is shovel


def test_base_card_defaults(scene):
    card = Card(scene)
    assert card.sun_point == 50
    assert card.frame_max == 1
    assert card.frame == 1