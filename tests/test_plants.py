import random

import pytest

from lawnsiege.anims import Boom, MashedPotato
from lawnsiege.bonus import Sun
from lawnsiege.entity import Rect
from lawnsiege.plants import (
    CherryBomb,
    FireTree,
    IcePeaShooter,
    KunShooter,
    Mushroom,
    PeaShooter,
    Plant,
    PotatoMine,
    Repeater,
    SunFlower,
    WallNut,
    plant_for_index,
)
from lawnsiege.projectiles import Ball, FireBall, FirePea, IcePea, Mush, Pea
from lawnsiege.zombies import CommonZombie


class FakeScene:
    def __init__(self):
        self.zombies = []
        self.plants = []
        self.projectiles = []
        self.anims = []
        self.bonuses = []
        self.has_enemy = [False] * 6
        self.screen = Rect(170, 0, 900, 600)
        self.sounds = []
        self.sun_point = 50

    def play_sound(self, name):
        self.sounds.append(name)


def make_zombie(scene, x, row=0):
    zombie = CommonZombie(scene, 0, rng=random.Random(1))
    zombie.set_geometry(x, 100, 340, 200)
    zombie.row = row
    scene.zombies.append(zombie)
    return zombie


def place(plant, x=300, y=100, row=0):
    plant.set_geometry(x, y, 120, 100)
    plant.row = row
    return plant


def test_plant_hit_until_dead():
    plant = Plant(FakeScene())
    plant.strength = 3
    plant.hit(2)
    assert plant.alive is True
    plant.hit(1)
    assert plant.alive is False


def test_shooter_waits_without_enemy():
    scene = FakeScene()
    shooter = place(PeaShooter(scene, random.Random(3)))
    shooter.timer_shoot = 0
    shooter.act()
    assert scene.projectiles == []
    assert 0 <= shooter.timer_shoot < 20


def test_shooter_counts_down():
    scene = FakeScene()
    shooter = place(PeaShooter(scene, random.Random(3)))
    before = shooter.timer_shoot
    shooter.act()
    assert shooter.timer_shoot == before - 1
    assert scene.projectiles == []


@pytest.mark.parametrize(
    "kind, shot_kind",
    [(PeaShooter, Ball), (KunShooter, Ball), (IcePeaShooter, IcePea), (Mushroom, Mush)],
)
def test_shooter_fires_at_enemy(kind, shot_kind):
    scene = FakeScene()
    scene.has_enemy[2] = True
    shooter = place(kind(scene, random.Random(3)), row=2)
    shooter.timer_shoot = 0
    shooter.act()
    assert len(scene.projectiles) == 1
    assert isinstance(scene.projectiles[0], shot_kind)
    assert scene.projectiles[0].row == 2
    assert shooter.timer_shoot == shooter.timer_shoot_max


def test_repeater_keeps_firing_at_five():
    scene = FakeScene()
    scene.has_enemy[0] = True
    repeater = place(Repeater(scene, random.Random(3)))
    repeater.timer_shoot = 5
    repeater.act()
    repeater.act()
    assert len(scene.projectiles) == 2
    assert all(isinstance(p, Pea) for p in scene.projectiles)
    assert repeater.timer_shoot == 5


def test_sunflower_makes_sun():
    scene = FakeScene()
    flower = place(SunFlower(scene, random.Random(3)), y=200)
    flower.timer_sun = 0
    flower.act()
    assert len(scene.bonuses) == 1
    sun = scene.bonuses[0]
    assert isinstance(sun, Sun)
    assert sun.level == flower.y + 40
    assert flower.timer_sun == flower.timer_sun_max


def test_wallnut_crumbles_when_weak():
    nut = place(WallNut(FakeScene(), random.Random(3)))
    original = nut.movie
    nut.act()
    assert nut.movie is original
    nut.hit(nut.strength - 1)
    nut.act()
    assert nut.movie is nut.crumbling


def test_potato_mine_waits_to_grow():
    scene = FakeScene()
    zombie = make_zombie(scene, 250)
    mine = place(PotatoMine(scene, random.Random(3)))
    mine.act()
    assert mine.alive is True
    assert zombie.alive is True


def test_potato_mine_explodes():
    scene = FakeScene()
    zombie = make_zombie(scene, 250)
    mine = place(PotatoMine(scene, random.Random(3)))
    mine.timer_grow = 0
    mine.act()
    assert mine.alive is False
    assert zombie.alive is False
    assert any(isinstance(a, MashedPotato) for a in scene.anims)
    assert "Potato.wav" in scene.sounds


def test_fire_tree_lights_passing_shots():
    scene = FakeScene()
    tree = place(FireTree(scene, random.Random(3)))
    pea = Pea(scene)
    pea.set_geometry(290, 100, 80, 40)
    ball = Ball(scene)
    ball.set_geometry(290, 40, 100, 210)
    mush = Mush(scene)
    mush.set_geometry(290, 100, 80, 40)
    far = Pea(scene)
    far.set_geometry(600, 100, 80, 40)
    scene.projectiles.extend([pea, ball, mush, far])
    tree.act()
    kinds = [type(p) for p in scene.projectiles]
    assert kinds == [Mush, Pea, FirePea, FireBall]
    assert scene.projectiles[3].y == ball.y + 60


def test_cherry_bomb_blasts_nearby_rows():
    scene = FakeScene()
    near = make_zombie(scene, 250, row=2)
    far_row = make_zombie(scene, 250, row=3)
    bomb = place(CherryBomb(scene, random.Random(3)), row=0)
    for _ in range(12):
        bomb.act()
    assert near.alive is True and bomb.alive is True
    bomb.act()
    assert near.alive is False
    assert far_row.alive is True
    assert bomb.alive is False
    assert any(isinstance(a, Boom) for a in scene.anims)


def test_kunshooter_click():
    scene = FakeScene()
    zombie = make_zombie(scene, 600)
    kun = place(KunShooter(scene, random.Random(3)))
    kun.click("right")
    assert zombie.alive is True
    assert scene.anims == []
    kun.click("left")
    assert zombie.alive is False
    assert any(isinstance(a, Boom) for a in scene.anims)


def test_plant_for_index():
    scene = FakeScene()
    assert isinstance(plant_for_index(1, scene), SunFlower)
    assert isinstance(plant_for_index(10, scene), KunShooter)
    assert plant_for_index(3, scene).scene is scene


@pytest.mark.parametrize("index", [0, 11, -1])
def test_plant_for_bad_index(index):
    with pytest.raises(ValueError):
        plant_for_index(index, FakeScene())