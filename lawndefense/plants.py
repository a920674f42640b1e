"""Plants on the lawn: shooters, the sunflower and the walnut wall."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, ClassVar, Iterable, Protocol

from .mapfile import PlantSlot
from .ui import (
    Clock,
    Event,
    Rect,
    Vec,
    advance_death_frame,
    advance_frame,
    boxes_touch,
    button_clicked,
)

TimeSource = Callable[[], float]

PROJECTILE_STEP = 0.05
SHOT_OFFSET_X = 55
SHOT_RANGE = 400
SUN_DESPAWN_Y = -50
SUN_SPAWN_SECOND = 5


class PlantKind(Enum):
    WALNUT = 0
    SUN = 1
    PEA = 2
    BEET = 3


class Target(Protocol):
    """What a projectile can hit: a zombie with a box, health and a bounty."""

    pos: Vec
    rect: Rect
    life: int
    experience: int


@dataclass
class Projectile:
    """A pea, a beet bullet or a sun floating up from a sunflower."""

    image: str
    pos: Vec
    rect: Rect
    speed: Vec
    clock: Clock

    def advance(self, origin: Vec, hit: bool) -> bool:
        """Fly forward, or jump back to the shooter after a hit.

        Returns True when the step was taken.
        """
        if self.clock.elapsed() <= PROJECTILE_STEP:
            return False
        if hit:
            self.pos.x = origin.x + SHOT_OFFSET_X
        else:
            self.pos.x += self.speed.x
        self.clock.restart()
        return True


def _rise(sun: Projectile) -> None:
    if sun.clock.elapsed() > PROJECTILE_STEP:
        advance_frame(sun.rect, 50, 150)
        sun.pos.y -= sun.speed.y
        sun.clock.restart()


class Plant:
    """State shared by every plant: health, level, animation and death."""

    kind: ClassVar[PlantKind]
    death_image: ClassVar[str]
    frame_interval: ClassVar[float]
    death_step: ClassVar[int]
    death_limit: ClassVar[int]
    death_end: ClassVar[int]

    def __init__(
        self,
        slot: PlantSlot,
        clock: TimeSource,
        *,
        life: int,
        rect: Rect,
        image: str,
    ) -> None:
        self.slot = slot
        slot.occupied = True
        self.pos = slot.pos.copy()
        self.life = life
        self.rect = rect
        self.image = image
        self.level = 1
        self.exp = 0
        self.in_death = 0
        self.time_source = clock
        self.frame_clock = Clock(clock)
        self.projectiles: list[Projectile] = []

    def _alive(self) -> bool:
        return self.life > 0

    def _act(self, zombies: list[Target]) -> None:
        """What a living plant does each frame."""

    def _begin_death(self) -> None:
        self.rect.left = 0

    def _frame_span(self) -> tuple[int, int]:
        raise NotImplementedError

    @property
    def sprite(self) -> str | None:
        """The image to show this frame, or None once the death is over."""
        if self._alive():
            return self.image
        if self.life <= 0 and self.rect.left < self.death_end:
            return self.death_image
        return None

    def step(self, zombies: list[Target]) -> None:
        """Advance the plant by one frame against the current zombies."""
        if self._alive():
            self._act(zombies)
        elif self.in_death == 0:
            self._begin_death()
            self.in_death = 1
        if self.rect.left == self.death_end and self.in_death == 1:
            self.in_death = 2
        self.animate()

    def animate(self) -> bool:
        """Move to the next texture frame when its interval has passed."""
        if self.frame_clock.elapsed() <= self.frame_interval:
            return False
        if self.life > 0:
            offset, maximum = self._frame_span()
            advance_frame(self.rect, offset, maximum)
        elif self.rect.left < self.death_end:
            advance_death_frame(self.rect, self.death_step, self.death_limit)
        self.frame_clock.restart()
        return True

    def finished(self) -> bool:
        """True once the death animation has played out."""
        return self.in_death == 2

    def release(self) -> None:
        """Free the slot and drop every projectile."""
        self.slot.occupied = False
        self.projectiles.clear()


class _Shooter(Plant):
    ball_image: ClassVar[str]
    ball_offset_y: ClassVar[int]
    ball_size: ClassVar[tuple[int, int]]

    def __init__(self, slot: PlantSlot, clock: TimeSource, *, att: int, **kwargs) -> None:
        super().__init__(slot, clock, **kwargs)
        self.att = att

    def _fill(self, count: int) -> None:
        while len(self.projectiles) < count:
            width, height = self.ball_size
            self.projectiles.append(
                Projectile(
                    image=self.ball_image,
                    pos=Vec(self.pos.x + SHOT_OFFSET_X, self.pos.y + self.ball_offset_y),
                    rect=Rect(0, 0, width, height),
                    speed=Vec(5, 0),
                    clock=Clock(self.time_source),
                )
            )

    def refill(self) -> None:
        raise NotImplementedError

    def level_up(self) -> None:
        raise NotImplementedError

    def _act(self, zombies: list[Target]) -> None:
        if self.slot.occupied:
            self.refill()
        self.level_up()
        for ball in self.projectiles:
            ball.advance(self.pos, projectile_hits(ball, zombies, self))


class Peashooter(_Shooter):
    kind = PlantKind.PEA
    death_image = "pea_die"
    frame_interval = 0.1
    death_step = 75
    death_limit = 225
    death_end = 225
    ball_image = "pea_ball"
    ball_offset_y = 15
    ball_size = (20, 20)

    def __init__(self, slot: PlantSlot, clock: TimeSource = time.monotonic) -> None:
        super().__init__(
            slot, clock, att=10, life=40, rect=Rect(75, 0, 75, 75), image="pea_alive"
        )

    def _alive(self) -> bool:
        return self.life >= 0

    def _frame_span(self) -> tuple[int, int]:
        return 75, 150

    def refill(self) -> None:
        """Keep one pea in flight at level 1 and three at level 3."""
        if self.level == 1:
            self._fill(1)
        elif self.level == 3:
            self._fill(3)

    def level_up(self) -> None:
        if self.level == 1 and self.exp >= 300:
            self.image = "pea_alive2"
            self.level = 2
            self.att = 20
        elif self.level == 2 and self.exp >= 1000:
            self.image = "pea_alive3"
            self.level = 3
            self.att = 25


class Beet(_Shooter):
    kind = PlantKind.BEET
    death_image = "beet_die"
    frame_interval = 0.2
    death_step = 55
    death_limit = 225
    death_end = 165
    ball_image = "beet_bullet"
    ball_offset_y = 40
    ball_size = (28, 18)

    def __init__(self, slot: PlantSlot, clock: TimeSource = time.monotonic) -> None:
        super().__init__(
            slot, clock, att=25, life=40, rect=Rect(0, 0, 55, 75), image="beet_alive"
        )
        self.w_max = 110

    def _frame_span(self) -> tuple[int, int]:
        return self.rect.width, self.w_max

    def refill(self) -> None:
        """Keep one bullet in flight at level 1 and three at level 3."""
        if self.level == 1:
            self._fill(1)
        elif self.level == 3:
            self._fill(3)

    def level_up(self) -> None:
        if self.level == 1 and self.exp >= 50:
            self.image = "beet_alive2"
            self.rect = Rect(0, 0, 61, 86)
            self.w_max = 122
            self.level = 2
            self.att = 30


class Sunflower(Plant):
    kind = PlantKind.SUN
    death_image = "sun_die"
    frame_interval = 0.3
    death_step = 66
    death_limit = 330
    death_end = 330
    sun_caps: ClassVar[dict[int, int]] = {1: 2, 2: 3, 3: 4}

    def __init__(
        self,
        slot: PlantSlot,
        clock: TimeSource = time.monotonic,
        rng: random.Random | None = None,
    ) -> None:
        super().__init__(slot, clock, life=40, rect=Rect(0, 0, 66, 75), image="sun_alive")
        self.seconds = 0.0
        self.point = 25
        self.age_clock = Clock(clock)
        self.sun_clock = Clock(clock)
        self.rng = rng if rng is not None else random.Random()

    @property
    def suns(self) -> list[Projectile]:
        return self.projectiles

    def _frame_span(self) -> tuple[int, int]:
        return 66, 132

    def spawn_sun(self, whole_seconds: int) -> Projectile | None:
        """Drop a new sun on the lawn on the fifth second, up to the level's cap."""
        cap = self.sun_caps.get(self.level, 0)
        if len(self.suns) >= cap or whole_seconds != SUN_SPAWN_SECOND:
            return None
        sun = Projectile(
            image="sun_sun",
            pos=Vec(self.rng.randrange(900) + 100, self.rng.randrange(500) + 80),
            rect=Rect(0, 0, 50, 48),
            speed=Vec(0, 3),
            clock=Clock(self.time_source),
        )
        self.suns.append(sun)
        return sun

    def update_level(self) -> None:
        """Grow with age: older sunflowers make more and richer suns."""
        if self.seconds < 15:
            self.level, self.point = 1, 25
        elif self.seconds <= 15 * 3:
            self.level, self.point = 2, 50
        else:
            self.level, self.point = 3, 70

    def collect(self, event: Event, mouse: Vec) -> int:
        """Pick up every sun under a left click and return the points earned."""
        picked = [s for s in self.suns if button_clicked(event, mouse, s.pos, s.rect)]
        for sun in picked:
            self.suns.remove(sun)
        return len(picked) * self.point

    def _act(self, zombies: list[Target]) -> None:
        self.seconds = float(int(self.age_clock.elapsed()))
        whole = int(self.sun_clock.elapsed())
        if self.slot.occupied:
            self.spawn_sun(whole)
        self.update_level()
        if whole >= SUN_SPAWN_SECOND:
            self.sun_clock.restart()
        self.suns[:] = [s for s in self.suns if s.pos.y > SUN_DESPAWN_Y]
        for sun in self.suns:
            _rise(sun)


class Walnut(Plant):
    kind = PlantKind.WALNUT
    death_image = "walnut_die"
    frame_interval = 0.3
    death_step = 66
    death_limit = 264
    death_end = 264

    def __init__(self, slot: PlantSlot, clock: TimeSource = time.monotonic) -> None:
        super().__init__(
            slot, clock, life=100, rect=Rect(0, 0, 66, 75), image="walnut_alive"
        )
        self.w_max = 264

    def _frame_span(self) -> tuple[int, int]:
        return self.rect.width, self.w_max

    def _begin_death(self) -> None:
        self.rect = Rect(0, 0, 66, 75)
        self.w_max = 264

    def level_up(self) -> None:
        if self.level == 1 and self.exp >= 250:
            self.image = "walnut_alive2"
            self.w_max = 159
            self.rect = Rect(0, 0, 53, 78)
            self.life = 150
            self.level = 2

    def _act(self, zombies: list[Target]) -> None:
        self.level_up()


_PLANT_TYPES: dict[PlantKind, type[Plant]] = {
    PlantKind.WALNUT: Walnut,
    PlantKind.SUN: Sunflower,
    PlantKind.PEA: Peashooter,
    PlantKind.BEET: Beet,
}


def create_plant(
    kind: PlantKind, slot: PlantSlot, clock: TimeSource = time.monotonic
) -> Plant:
    """Plant a new ``kind`` on ``slot``, marking the slot as taken."""
    return _PLANT_TYPES[kind](slot, clock)


def projectile_hits(projectile: Projectile, zombies: Iterable[Target], shooter) -> bool:
    """Damage the first zombie the projectile touches.

    Returns True on a hit or when the projectile has flown out of range.
    """
    for zombie in zombies:
        if boxes_touch(projectile.pos, projectile.rect, zombie.pos, zombie.rect):
            zombie.life -= shooter.att
            shooter.exp += zombie.experience
            return True
    return projectile.pos.x >= shooter.pos.x + SHOT_OFFSET_X + SHOT_RANGE


def cull_plants(plants: list[Plant]) -> list[Plant]:
    """Remove plants whose death has played out, releasing their slots.

    The list is changed in place; the removed plants are returned.
    """
    removed = [plant for plant in plants if plant.finished()]
    plants[:] = [plant for plant in plants if not plant.finished()]
    for plant in removed:
        plant.release()
    return removed


__all__ = [
    "PlantKind",
    "Target",
    "Projectile",
    "Plant",
    "Peashooter",
    "Beet",
    "Sunflower",
    "Walnut",
    "create_plant",
    "projectile_hits",
    "cull_plants",
]

_unused = field