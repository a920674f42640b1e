"""Reading level text files and locating plant slots and zombie spawns."""

from __future__ import annotations

from dataclasses import dataclass, field
from os import PathLike
from typing import Iterator, NamedTuple

from .ui import Rect, Vec

CELL_SIZE = 15
SLOT_SYMBOL = "m"
SPAWN_SYMBOLS = "12"


class MapError(Exception):
    """Raised when a level file cannot be opened or read."""


class Cell(NamedTuple):
    symbol: str
    x: int
    y: int


@dataclass
class PlantSlot:
    """A spot on the lawn where one plant may be placed."""

    pos: Vec
    occupied: bool = False
    rect: Rect = field(default_factory=lambda: Rect(0, 0, 75, 75))


def iter_cells(text: str, symbols: str) -> Iterator[Cell]:
    """Yield the grid coordinates of every character in ``symbols``.

    An ``E`` marks the start of an offset block: the row counter restarts and
    columns after it are shifted by the column the ``E`` stood on.
    """
    x = y = end = 0
    for char in text:
        if char == "E":
            end = x
            y = 0
        elif char == "\n":
            x = -1
            y += 1
        if char in symbols:
            yield Cell(char, x + end, y)
        x += 1


def read_map(path: str | PathLike) -> str:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read()
    except OSError as exc:
        raise MapError(f'can\'t open "{path}" file') from exc


def build_slots(text: str) -> list[PlantSlot]:
    return [
        PlantSlot(Vec(CELL_SIZE * cell.x, CELL_SIZE * cell.y))
        for cell in iter_cells(text, SLOT_SYMBOL)
    ]


def spawn_cells(text: str) -> list[Cell]:
    return list(iter_cells(text, SPAWN_SYMBOLS))