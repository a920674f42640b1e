"""Zombies walking across the lawn, their attacks and the wave schedule."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable

from .mapfile import CELL_SIZE, spawn_cells
from .plants import PlantKind
from .ui import Clock, Rect, Vec, advance_death_frame, advance_frame, boxes_touch

TimeSource = Callable[[], float]

ATTACK_INTERVAL = 2
FRAME_INTERVAL = 0.18
HOUSE_X = 200
ROUND_DELAY = 3.0
WALNUT_HIT_EXP = 50
WAVES = ("zombies_spawn1", "zombies_spawn2", "zombies_spawn3")
FINAL_ROUND = len(WAVES)


class ZombieKind(Enum):
    Z1 = "1"
    Z2 = "2"


@dataclass(frozen=True)
class _Profile:
    image: str
    death_image: str
    speed: float
    size: tuple[int, int]
    frame_max: int
    death_size: tuple[int, int]
    death_end: int
    att: int
    life: int
    experience: int


_PROFILES: dict[ZombieKind, _Profile] = {
    ZombieKind.Z1: _Profile(
        image="z1_alive",
        death_image="z1_die",
        speed=-7,
        size=(56, 90),
        frame_max=112,
        death_size=(56, 90),
        death_end=336,
        att=20,
        life=1000,
        experience=2,
    ),
    ZombieKind.Z2: _Profile(
        image="z2_alive",
        death_image="z2_die",
        speed=-5,
        size=(75, 90),
        frame_max=150,
        death_size=(77, 90),
        death_end=462,
        att=40,
        life=1500,
        experience=4,
    ),
}


class Zombie:
    """One zombie: walks left, bites the plants it touches, then dies."""

    def __init__(self, kind: ZombieKind, pos: Vec, clock: TimeSource = time.monotonic) -> None:
        profile = _PROFILES[kind]
        self.kind = kind
        self._profile = profile
        self.pos = pos
        self.speed = Vec(profile.speed, 0)
        width, height = profile.size
        self.rect = Rect(0, 0, width, height)
        self.w_max = profile.frame_max
        self.att = profile.att
        self.life = profile.life
        self.experience = profile.experience
        self.level = 0
        self.interval = ATTACK_INTERVAL
        self.in_death = 0
        self.frame_clock = Clock(clock)
        self.attack_clock = Clock(clock)

    @property
    def death_end(self) -> int:
        return self._profile.death_end

    @property
    def sprite(self) -> str | None:
        """The image to show this frame, or None once the death is over."""
        if self.life > 0:
            return self._profile.image
        if self.rect.left < self.death_end:
            return self._profile.death_image
        return None

    def attack_plants(self, plants: Iterable) -> bool:
        """Bite the first plant touched; stop walking while biting."""
        hit = False
        for plant in plants:
            if boxes_touch(plant.pos, plant.rect, self.pos, self.rect):
                if plant.kind is PlantKind.WALNUT:
                    plant.exp += WALNUT_HIT_EXP
                plant.life -= self.att
                hit = True
                break
        self.speed.x = 0 if hit else self._profile.speed
        return hit

    def step(self, plants: Iterable) -> None:
        """Advance the zombie by one frame."""
        if int(self.attack_clock.elapsed()) == self.interval:
            self.attack_plants(plants)
            self.attack_clock.restart()
        if self.life <= 0 and self.in_death == 0:
            width, height = self._profile.death_size
            self.rect = Rect(0, 0, width, height)
            self.w_max = self.death_end
            self.in_death = 1
        if self.rect.left == self.death_end and self.in_death == 1:
            self.in_death = 2
        self.animate()

    def animate(self) -> bool:
        """Step the texture frame and the walk when the interval has passed."""
        if self.frame_clock.elapsed() <= FRAME_INTERVAL:
            return False
        if self.life > 0:
            advance_frame(self.rect, self.rect.width, self.w_max)
        elif self.in_death == 1:
            advance_death_frame(self.rect, self.rect.width, self.w_max)
        self.pos.x += self.speed.x
        self.frame_clock.restart()
        return True

    def finished(self) -> bool:
        return self.in_death == 2

    def reached_house(self) -> bool:
        return self.pos.x <= HOUSE_X


def create_zombie(
    kind: ZombieKind, x: int, y: int, clock: TimeSource = time.monotonic
) -> Zombie:
    """Create a zombie standing on grid cell (x, y)."""
    return Zombie(kind, Vec(CELL_SIZE * x, CELL_SIZE * y), clock)


def spawn_wave(text: str, clock: TimeSource = time.monotonic) -> list[Zombie]:
    """Create every zombie a wave file lists, in file order."""
    return [
        create_zombie(ZombieKind(cell.symbol), cell.x, cell.y, clock)
        for cell in spawn_cells(text)
    ]


def cull_zombies(zombies: list[Zombie]) -> int:
    """Drop dead zombies and those at the house; return how many reached it."""
    reached = 0
    kept = []
    for zombie in zombies:
        if zombie.finished():
            continue
        if zombie.reached_house():
            reached += 1
            continue
        kept.append(zombie)
    zombies[:] = kept
    return reached


class RoundManager:
    """Announces each round and releases its wave after a short delay."""

    def __init__(self, clock: TimeSource = time.monotonic) -> None:
        self._time = clock
        self.round = 0
        self.banner: str | None = None
        self._timer: Clock | None = None

    @property
    def complete(self) -> bool:
        return self.round >= FINAL_ROUND

    def tick(self, has_zombies: bool) -> str | None:
        """Return the wave asset name to load when the next wave is due."""
        self.banner = None
        if has_zombies or self.complete:
            return None
        if self._timer is None:
            self._timer = Clock(self._time)
        self.banner = self.label()
        if self._timer.elapsed() >= ROUND_DELAY:
            wave = WAVES[self.round]
            self._timer = None
            self.round += 1
            return wave
        return None

    def label(self) -> str:
        return f"Round :{self.round + 1}"

    def reset(self) -> None:
        self.round = 0
        self.banner = None
        self._timer = None


__all__ = [
    "ZombieKind",
    "Zombie",
    "create_zombie",
    "spawn_wave",
    "cull_zombies",
    "RoundManager",
    "WAVES",
    "FINAL_ROUND",
]