import pytest

from lawndefense.mapfile import PlantSlot, spawn_cells
from lawndefense.plants import PlantKind, create_plant
from lawndefense.ui import Vec
from lawndefense.zombies import (
    RoundManager,
    ZombieKind,
    create_zombie,
    cull_zombies,
    spawn_wave,
)


class FakeTime:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeTime()


def make_plant(kind, x, y, clock):
    return create_plant(kind, PlantSlot(Vec(x, y)), clock)


def test_z1_stats(clock):
    z = create_zombie(ZombieKind.Z1, 2, 3, clock)
    assert (z.life, z.att, z.speed.x) == (1000, 20, -7)
    assert (z.rect.width, z.rect.height) == (56, 90)
    assert (z.pos.x, z.pos.y) == (30, 45)


def test_z2_stats(clock):
    z = create_zombie(ZombieKind.Z2, 0, 0, clock)
    assert (z.life, z.att, z.speed.x) == (1500, 40, -5)
    assert z.w_max == 150


def test_attack_damages_first_touching_plant(clock):
    z = create_zombie(ZombieKind.Z1, 20, 20, clock)
    first = make_plant(PlantKind.PEA, 300, 300, clock)
    second = make_plant(PlantKind.PEA, 300, 300, clock)
    assert z.attack_plants([first, second]) is True
    assert first.life == 40 - z.att
    assert second.life == 40
    assert z.speed.x == 0


def test_attack_miss_restores_speed(clock):
    z = create_zombie(ZombieKind.Z2, 20, 20, clock)
    z.speed.x = 0
    far = make_plant(PlantKind.SUN, 900, 0, clock)
    assert z.attack_plants([far]) is False
    assert z.speed.x == -5
    assert far.life == 40


def test_attack_walnut_gains_experience(clock):
    z = create_zombie(ZombieKind.Z1, 20, 20, clock)
    nut = make_plant(PlantKind.WALNUT, 300, 300, clock)
    z.attack_plants([nut])
    assert nut.exp == 50
    assert nut.life == 100 - z.att


def test_step_bites_only_on_interval(clock):
    z = create_zombie(ZombieKind.Z1, 20, 20, clock)
    plant = make_plant(PlantKind.PEA, 300, 300, clock)
    clock.now = 1.5
    z.step([plant])
    assert plant.life == 40
    clock.now = 2.0
    start_x = z.pos.x
    z.step([plant])
    assert plant.life == 40 - z.att
    assert z.pos.x == start_x


def test_animate_walks_after_interval(clock):
    z = create_zombie(ZombieKind.Z2, 40, 10, clock)
    x = z.pos.x
    clock.now = 0.1
    assert z.animate() is False
    clock.now = 0.2
    assert z.animate() is True
    assert z.pos.x == x + z.speed.x


def test_death_plays_out(clock):
    z = create_zombie(ZombieKind.Z1, 40, 10, clock)
    z.life = 0
    for _ in range(20):
        clock.now += 0.2
        z.step([])
        if z.finished():
            break
    assert z.finished()
    assert z.rect.left == z.death_end
    assert z.sprite is None


def test_cull_counts_zombies_at_house(clock):
    home = create_zombie(ZombieKind.Z1, 1, 0, clock)
    walking = create_zombie(ZombieKind.Z2, 60, 0, clock)
    dead = create_zombie(ZombieKind.Z1, 1, 0, clock)
    dead.in_death = 2
    zombies = [home, walking, dead]
    assert cull_zombies(zombies) == 1
    assert zombies == [walking]


def test_spawn_wave(clock):
    text = "12\n 1"
    zombies = spawn_wave(text, clock)
    assert [z.kind for z in zombies] == [ZombieKind.Z1, ZombieKind.Z2, ZombieKind.Z1]
    for zombie, cell in zip(zombies, spawn_cells(text)):
        assert (zombie.pos.x, zombie.pos.y) == (15 * cell.x, 15 * cell.y)


def test_round_manager_releases_waves(clock):
    rounds = RoundManager(clock)
    assert rounds.tick(False) is None
    assert rounds.banner == "Round :1"
    clock.now = 3.0
    assert rounds.tick(False) == "zombies_spawn1"
    assert rounds.round == 1
    assert rounds.tick(True) is None
    assert rounds.banner is None


def test_round_manager_completes_and_resets(clock):
    rounds = RoundManager(clock)
    waves = []
    for _ in range(10):
        clock.now += 3.0
        wave = rounds.tick(False)
        if wave:
            waves.append(wave)
    assert waves == ["zombies_spawn1", "zombies_spawn2", "zombies_spawn3"]
    assert rounds.complete
    rounds.reset()
    assert rounds.round == 0
    assert rounds.label() == "Round :1"