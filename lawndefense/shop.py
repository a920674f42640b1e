"""The seed shop: buying a plant, holding it and planting it on the lawn."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Iterable

from .mapfile import PlantSlot
from .plants import Plant, PlantKind, create_plant
from .ui import Event, EventKind, MouseButton, Vec, Widget, button_clicked, make_widget

TimeSource = Callable[[], float]

START_POINTS = 100
CARD_SIZE = 96
SCORE_POS = Vec(15, 542)


@dataclass
class ShopItem:
    """One seed card in the shop."""

    kind: PlantKind
    price: int
    widget: Widget

    @property
    def held(self) -> bool:
        return self.widget.clicked

    @held.setter
    def held(self, value: bool) -> None:
        self.widget.clicked = value


@dataclass
class Shop:
    """Seed cards, the player's sun points and the plant in hand."""

    items: list[ShopItem]
    points: int = START_POINTS
    selected: ShopItem | None = field(default=None)

    def refresh(self) -> None:
        """Grey out every card the player cannot afford."""
        for item in self.items:
            item.widget.rect.left = 0 if self.points >= item.price else CARD_SIZE

    def handle(self, event: Event, mouse: Vec) -> None:
        """Buy a card on left click, or give the held one back on right click."""
        for item in self.items:
            if (
                self.points >= item.price
                and button_clicked(event, mouse, item.widget.pos, item.widget.rect)
                and self.selected is None
            ):
                self.points -= item.price
                self.selected = item
                item.held = True
            elif (
                self.selected is not None
                and item.held
                and event.kind is EventKind.MOUSE_PRESSED
                and event.button is MouseButton.RIGHT
            ):
                self.selected = None
                self.points += item.price
                item.held = False

    def place(
        self,
        slots: Iterable[PlantSlot],
        event: Event,
        mouse: Vec,
        plants: list[Plant],
        clock: TimeSource = time.monotonic,
    ) -> Plant | None:
        """Plant the held seed on a free slot under a left click."""
        for slot in slots:
            if (
                self.selected is not None
                and not slot.occupied
                and button_clicked(event, mouse, slot.pos, slot.rect)
            ):
                plant = create_plant(self.selected.kind, slot, clock)
                plants.append(plant)
                self.selected.held = False
                self.selected = None
                return plant
        return None

    def reset(self) -> None:
        self.points = START_POINTS


_CARDS = (
    (PlantKind.WALNUT, "walnut_buy", 0.15, 25),
    (PlantKind.SUN, "sun_buy", 0.35, 50),
    (PlantKind.PEA, "pea_buy", 0.55, 100),
    (PlantKind.BEET, "beet_buy", 0.75, 125),
)


def default_shop() -> Shop:
    """The four seed cards stacked on the left edge of the lawn."""
    items = []
    for kind, image, fy, price in _CARDS:
        widget = make_widget(image, 0, fy, CARD_SIZE, 0, CARD_SIZE, CARD_SIZE)
        widget.price = price
        widget.kind = kind
        items.append(ShopItem(kind=kind, price=price, widget=widget))
    return Shop(items=items)


def digits(n: int) -> str:
    """Decimal text of a non-negative number; negatives give an empty string."""
    return str(n) if n >= 0 else ""


__all__ = ["ShopItem", "Shop", "default_shop", "digits", "START_POINTS", "SCORE_POS"]