"""Geometry, input events, clocks and widget helpers shared by the game."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

WINDOW_WIDTH = 1110
WINDOW_HEIGHT = 602


@dataclass
class Vec:
    """A mutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def copy(self) -> Vec:
        return Vec(self.x, self.y)


@dataclass
class Rect:
    """An integer rectangle: texture frame offset and size."""

    left: int = 0
    top: int = 0
    width: int = 0
    height: int = 0

    def copy(self) -> Rect:
        return Rect(self.left, self.top, self.width, self.height)


class EventKind(Enum):
    CLOSED = "closed"
    KEY_PRESSED = "key_pressed"
    MOUSE_PRESSED = "mouse_pressed"
    MOUSE_RELEASED = "mouse_released"
    OTHER = "other"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


@dataclass(frozen=True)
class Event:
    """One input event; ``button`` is set for mouse events, ``key`` for keys."""

    kind: EventKind
    button: MouseButton | None = None
    key: str | None = None


class Clock:
    """Measures elapsed seconds since creation or the last restart."""

    def __init__(self, now: Callable[[], float] = time.monotonic) -> None:
        self._now = now
        self._start = now()

    def elapsed(self) -> float:
        return self._now() - self._start

    def restart(self) -> float:
        """Reset the clock and return the time elapsed before the reset."""
        current = self._now()
        spent = current - self._start
        self._start = current
        return spent


@dataclass
class Widget:
    """A positioned image with a texture frame and a toggled state."""

    image: str
    pos: Vec
    rect: Rect
    clicked: bool = False
    price: int = 0
    kind: object | None = None

    def contains(self, point: Vec) -> bool:
        return point_in_box(point, self.pos, self.rect)


def boxes_touch(pos_a: Vec, rect_a: Rect, pos_b: Vec, rect_b: Rect) -> bool:
    """True when two boxes overlap; boxes that only share an edge do not."""
    return (
        pos_a.x + rect_a.width > pos_b.x
        and pos_a.y + rect_a.height > pos_b.y
        and pos_b.x + rect_b.width > pos_a.x
        and pos_b.y + rect_b.height > pos_a.y
    )


def point_in_box(point: Vec, pos: Vec, rect: Rect) -> bool:
    """True when ``point`` lies inside the box, edges included."""
    return (
        pos.x <= point.x <= pos.x + rect.width
        and pos.y <= point.y <= pos.y + rect.height
    )


def advance_frame(rect: Rect, offset: int, max_value: int) -> None:
    """Step a looping animation frame, wrapping to 0 at ``max_value``."""
    rect.left += offset
    if rect.left >= max_value:
        rect.left = 0


def advance_death_frame(rect: Rect, offset: int, max_value: int) -> None:
    """Step a one-shot animation frame, stopping once ``max_value`` is reached."""
    if rect.left < max_value:
        rect.left += offset


def layout_position(fx: float, fy: float, rect: Rect) -> Vec:
    """Place a box at fractions of the free window space."""
    return Vec(fx * (WINDOW_WIDTH - rect.width), fy * (WINDOW_HEIGHT - rect.height))


def make_widget(
    image: str, fx: float, fy: float, left: int, top: int, width: int, height: int
) -> Widget:
    rect = Rect(left, top, width, height)
    return Widget(image=image, pos=layout_position(fx, fy, rect), rect=rect)


def _mouse_event(
    event: Event, kind: EventKind, mouse: Vec, pos: Vec, rect: Rect
) -> bool:
    return (
        point_in_box(mouse, pos, rect)
        and event.kind is kind
        and event.button is MouseButton.LEFT
    )


def button_clicked(event: Event, mouse: Vec, pos: Vec, rect: Rect) -> bool:
    """True for a left press while the mouse is over the box."""
    return _mouse_event(event, EventKind.MOUSE_PRESSED, mouse, pos, rect)


def button_released(event: Event, mouse: Vec, pos: Vec, rect: Rect) -> bool:
    """True for a left release while the mouse is over the box."""
    return _mouse_event(event, EventKind.MOUSE_RELEASED, mouse, pos, rect)


def key_pressed(event: Event, key: str) -> bool:
    return event.kind is EventKind.KEY_PRESSED and event.key == key


def animate_button(widget: Widget, mouse: Vec, offset: int, pressed: bool) -> int:
    """Pick the hover/press frame of a button and return its new left offset."""
    if widget.contains(mouse):
        widget.rect.left = offset * 2 if pressed else offset
    else:
        widget.rect.left = 0
    return widget.rect.left


__all__ = [
    "WINDOW_WIDTH",
    "WINDOW_HEIGHT",
    "Vec",
    "Rect",
    "EventKind",
    "MouseButton",
    "Event",
    "Clock",
    "Widget",
    "boxes_touch",
    "point_in_box",
    "advance_frame",
    "advance_death_frame",
    "layout_position",
    "make_widget",
    "button_clicked",
    "button_released",
    "key_pressed",
    "animate_button",
]

_unused = field  # keep dataclasses.field available for subclasses importing it