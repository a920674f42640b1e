"""Main menu, its settings box, and the in-game settings panel."""

from __future__ import annotations

from dataclasses import dataclass, field

from .ui import (
    Event,
    Vec,
    Widget,
    animate_button,
    button_clicked,
    button_released,
    key_pressed,
    make_widget,
)

ESCAPE_KEY = "escape"

BAR_WIDTH = 133
KNOB_HALF_WIDTH = 12.5
KNOB_MIN_X = 490
KNOB_MAX_X = 610
KNOB_CLAMP_X = 605
DRAG_MIN_X = 500
DRAG_MAX_X = 610

FPS_FRAME = 39
OK_FRAME = 412
SETTINGS_FRAME = 32
PLAY_IDLE_TOP = 144
MENU_BUTTON_FRAME = 114
GAME_OK_FRAME = 417
PANEL_BUTTON_FRAME = 208


@dataclass
class Music:
    """A looping background track with a volume between 0 and 100."""

    name: str
    volume: float = 50.0
    loop: bool = True
    playing: bool = False
    saved_volume: float = 50.0

    def set_volume(self, volume: float) -> float:
        self.volume = min(100.0, max(0.0, float(volume)))
        return self.volume

    def play(self) -> None:
        self.playing = True

    def pause(self) -> None:
        self.playing = False


def _volume_bar() -> list[Widget]:
    return [
        make_widget("settings_bar", 0.5, 0.4125, 0, 0, 133, 7),
        make_widget("settings_bar_btn", 0.5, 0.405, 0, 0, 25, 31),
    ]


def _drag_knob(
    knob: Widget, bar: Widget, mouse: Vec, pressed: bool, music: Music
) -> bool:
    """Move the volume knob under a held left button; True when it moved."""
    if not (pressed and knob.contains(mouse)):
        return False
    volume = ((knob.pos.x - bar.pos.x) + 25 * music.volume * 0.01) * 100 / BAR_WIDTH
    if knob.pos.x > KNOB_MAX_X:
        volume = 100
        knob.pos.x = KNOB_CLAMP_X
    elif knob.pos.x < KNOB_MIN_X:
        volume = 0
        knob.pos.x = KNOB_MIN_X
    if DRAG_MIN_X < mouse.x < DRAG_MAX_X:
        knob.pos.x = mouse.x - KNOB_HALF_WIDTH
        music.set_volume(volume)
        return True
    return False


def _fps_buttons() -> list[Widget]:
    buttons = []
    rate = 30
    for index in range(4):
        widget = make_widget("yes_no", 0.425 + 0.05 * index, 0.6, 0, 0, 39, 34)
        widget.price = rate
        buttons.append(widget)
        rate *= 2
    buttons[1].clicked = True
    buttons[1].rect.left = FPS_FRAME
    buttons[3].price = 144
    return buttons


@dataclass
class MenuSettings:
    """The settings box of the main menu: volume and frame rate."""

    box: list[Widget] = field(
        default_factory=lambda: [
            make_widget("settings_box", 0.5, 0.65, 0, 0, 417, 485),
            make_widget("settings_box_ok", 0.5, 0.92, 0, 0, 412, 105),
        ]
    )
    sound: list[Widget] = field(default_factory=_volume_bar)
    fps: list[Widget] = field(default_factory=_fps_buttons)
    saved_fps: int = 1
    saved_knob: Vec = field(default_factory=Vec)

    def __post_init__(self) -> None:
        self.saved_knob = self.sound[1].pos.copy()

    @property
    def knob(self) -> Widget:
        return self.sound[1]

    @property
    def bar(self) -> Widget:
        return self.sound[0]

    def select_fps(self, index: int) -> None:
        """Tick the frame-rate button at ``index`` and untick the others."""
        for position, button in enumerate(self.fps):
            button.clicked = position == index
            button.rect.left = FPS_FRAME if button.clicked else 0

    def handle_fps_clicks(self, event: Event, mouse: Vec) -> None:
        for index, button in enumerate(self.fps):
            if button_clicked(event, mouse, button.pos, button.rect):
                self.select_fps(index)

    def drag_volume(self, mouse: Vec, pressed: bool, music: Music) -> bool:
        return _drag_knob(self.knob, self.bar, mouse, pressed, music)

    def handle_ok(self, event: Event, mouse: Vec) -> None:
        """Highlight the OK button on hover and toggle it on a left click."""
        ok = self.box[1]
        ok.rect.left = OK_FRAME if ok.contains(mouse) else 0
        if button_clicked(event, mouse, ok.pos, ok.rect):
            ok.clicked = not ok.clicked

    def remember(self, music: Music) -> None:
        """Save the current settings so that cancelling can bring them back."""
        music.saved_volume = music.volume
        self.saved_knob = self.knob.pos.copy()
        self.saved_fps = next(
            (index for index, button in enumerate(self.fps) if button.clicked),
            len(self.fps),
        )

    def restore(self, music: Music) -> None:
        music.set_volume(music.saved_volume)
        self.knob.pos = self.saved_knob.copy()
        self.select_fps(self.saved_fps)

    def frame_limit(self) -> int | None:
        """The chosen frame rate, or None when no button is ticked."""
        limit = None
        for button in self.fps:
            if button.clicked:
                limit = button.price
        return limit

    def place_volume_knob(self, volume: float) -> None:
        """Put the knob where ``volume`` sits on the bar."""
        share = volume * 0.01
        self.knob.pos.x = share * (BAR_WIDTH - self.knob.rect.width) + self.bar.pos.x


@dataclass
class Menu:
    """The main menu: background, play and settings buttons, and music."""

    background: Widget = field(
        default_factory=lambda: make_widget("menu_background", 0, 0, 0, 0, 1110, 602)
    )
    buttons: list[Widget] = field(
        default_factory=lambda: [
            make_widget("play_btn", 0.5, 0.95, 0, PLAY_IDLE_TOP, 492, 144),
            make_widget("settings_btn", 0.98, 0.05, 0, 0, 32, 33),
        ]
    )
    music: Music = field(
        default_factory=lambda: Music("menu_music", volume=50.0, playing=True)
    )
    settings: MenuSettings = field(default_factory=MenuSettings)

    @property
    def play(self) -> Widget:
        return self.buttons[0]

    @property
    def settings_button(self) -> Widget:
        return self.buttons[1]

    @property
    def settings_open(self) -> bool:
        return self.settings_button.clicked and not self.settings.box[1].clicked

    def _handle_buttons(self, event: Event, mouse: Vec) -> None:
        gear, play = self.settings_button, self.play
        if gear.contains(mouse):
            gear.rect.left = SETTINGS_FRAME
            if button_clicked(event, mouse, gear.pos, gear.rect):
                gear.clicked = not gear.clicked
        else:
            gear.rect.left = 0
        if play.contains(mouse) and not gear.clicked:
            play.rect.top = 0
            if button_clicked(event, mouse, play.pos, play.rect):
                play.clicked = not play.clicked
        else:
            play.rect.top = PLAY_IDLE_TOP

    def _settle(self) -> None:
        box, ok = self.settings.box
        if not self.settings_button.clicked and box.clicked and not ok.clicked:
            self.settings.restore(self.music)
            box.clicked = False
        elif self.settings_button.clicked and ok.clicked:
            box.clicked = False
            ok.clicked = False
            self.settings_button.clicked = False

    def handle(self, event: Event, mouse: Vec, pressed: bool) -> None:
        """React to one event on the menu page."""
        escape = key_pressed(event, ESCAPE_KEY)
        gear = self.settings_button
        if ((gear.contains(mouse) and pressed) or escape) and not gear.clicked:
            self.settings.remember(self.music)
        if escape:
            gear.clicked = not gear.clicked
        self._handle_buttons(event, mouse)
        if self.settings_open:
            self.settings.box[0].clicked = True
            self.settings.drag_volume(mouse, pressed, self.music)
            self.settings.handle_fps_clicks(event, mouse)
            self.settings.handle_ok(event, mouse)
        self._settle()


def _hearts() -> list[Widget]:
    return [
        make_widget("heart_img", 0.1 + 0.05 * index, 0.95, 0, 0, 32, 32)
        for index in range(3)
    ]


@dataclass
class GameSettings:
    """The pause panel reached from the in-game menu button."""

    menu: Widget = field(
        default_factory=lambda: make_widget("game_menu_btn", 0.95, -0.005, 0, 0, 114, 32)
    )
    box: list[Widget] = field(
        default_factory=lambda: [
            make_widget("game_settings_box", 0.5, 0.65, 0, 0, 417, 485),
            make_widget("game_settings_box_ok", 0.5, 0.92, 0, 0, 412, 105),
        ]
    )
    sound: list[Widget] = field(default_factory=_volume_bar)
    restart: Widget = field(
        default_factory=lambda: make_widget("restart_btn", 0.5, 0.5, 0, 0, 208, 43)
    )
    main_menu: Widget = field(
        default_factory=lambda: make_widget("return_menu_btn", 0.5, 0.6, 0, 0, 208, 43)
    )
    lives: list[Widget] = field(default_factory=_hearts)
    music: Music = field(default_factory=lambda: Music("game_music", volume=50.0))

    def animate(self, mouse: Vec, pressed: bool) -> None:
        """Pick the hover and press frames of the panel's buttons."""
        animate_button(self.box[1], mouse, GAME_OK_FRAME, pressed)
        if not self.menu.clicked:
            animate_button(self.menu, mouse, MENU_BUTTON_FRAME, pressed)
        animate_button(self.restart, mouse, PANEL_BUTTON_FRAME, pressed)
        animate_button(self.main_menu, mouse, PANEL_BUTTON_FRAME, pressed)

    def handle(self, event: Event, mouse: Vec) -> None:
        """Open or close the panel and toggle its buttons on release."""
        if not self.menu.clicked:
            self.restart.clicked = False
            self.box[1].clicked = False
            self.box[0].clicked = False
            self.main_menu.clicked = False
        if button_released(event, mouse, self.menu.pos, self.menu.rect) or key_pressed(
            event, ESCAPE_KEY
        ):
            self.menu.clicked = not self.menu.clicked
            self.menu.rect.left = MENU_BUTTON_FRAME * 2
        if self.menu.clicked:
            if button_released(event, mouse, self.restart.pos, self.restart.rect):
                self.restart.clicked = not self.restart.clicked
            if button_released(event, mouse, self.box[1].pos, self.box[1].rect):
                self.box[1].clicked = not self.box[1].clicked
            # The return button is hit-tested with the OK button's size.
            if button_released(event, mouse, self.main_menu.pos, self.box[1].rect):
                self.main_menu.clicked = not self.main_menu.clicked

    def drag_volume(self, mouse: Vec, pressed: bool, music: Music) -> bool:
        return _drag_knob(self.sound[1], self.sound[0], mouse, pressed, music)


__all__ = ["ESCAPE_KEY", "Music", "MenuSettings", "Menu", "GameSettings"]