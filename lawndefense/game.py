"""The running game: pages, event dispatch, per-frame updates and outcomes."""

from __future__ import annotations

import time
from typing import Callable

from .assets import Assets, Page
from .mapfile import MapError, build_slots, read_map
from .plants import Plant, Sunflower, cull_plants
from .settings import ESCAPE_KEY, GameSettings, Menu
from .shop import Shop, default_shop
from .ui import (
    Event,
    EventKind,
    Vec,
    Widget,
    animate_button,
    button_released,
    key_pressed,
    layout_position,
    make_widget,
)
from .zombies import FINAL_ROUND, RoundManager, Zombie, cull_zombies, spawn_wave

TimeSource = Callable[[], float]
WaveLoader = Callable[[str], str]

START_LIFE = 3
OUTCOME_BUTTON_FRAME = 208

HELP_TEXT = (
    "Les regles de notre Defender sont"
    "simple, protege la maison et posant des"
    "plantes dans ton jardin afin de tuer les vagues de"
    "zombies en approche\n"
    "Tu auras acces au volume du son dans le"
    "main menu et en plaine partie, tu pourras egalemant quitter la"
    " partie et meme la restart si tu as mal commencé"
    "Bonne chance a toi\n"
)


def help_text() -> str:
    """The rules shown by the ``-h`` option."""
    return HELP_TEXT


class Game:
    """All game state, driven by input events and one update per frame."""

    def __init__(
        self,
        map_text: str,
        *,
        assets: Assets | None = None,
        clock: TimeSource = time.monotonic,
        wave_loader: WaveLoader | None = None,
    ) -> None:
        self.assets = assets if assets is not None else Assets()
        self.clock = clock
        self._load_wave = wave_loader or (lambda name: read_map(self.assets.path(name)))
        self.running = True
        self.page = Page.MENU
        self.life = START_LIFE
        self.escape = False
        self.mouse = Vec()
        self.menu = Menu()
        self.game_settings = GameSettings()
        self.shop: Shop = default_shop()
        self.map_widget = make_widget("map_1", 0, 0, 0, 0, 1110, 602)
        self.slots = build_slots(map_text)
        self.plants: list[Plant] = []
        self.zombies: list[Zombie] = []
        self.rounds = RoundManager(clock)
        self.win_image = make_widget("win_img", 0.5, 0.5, 0, 0, 869, 602)
        self.lose_image = make_widget("lose_img", 0.5, 0.5, 0, 0, 1111, 602)
        self.restart_button = make_widget("restart_btn", 0.2, 0.1, 0, 0, 208, 43)
        self.menu_button = make_widget("return_menu_btn", 0.5, 0.1, 0, 0, 208, 43)
        self.exit_button = make_widget("exit_btn", 0.8, 0.1, 0, 0, 208, 43)

    @property
    def paused(self) -> bool:
        return self.game_settings.menu.clicked

    @property
    def frame_limit(self) -> int | None:
        return self.menu.settings.frame_limit()

    @property
    def outcome_buttons(self) -> tuple[Widget, Widget, Widget]:
        return self.restart_button, self.menu_button, self.exit_button

    def change_page(self) -> None:
        """Leave the menu for the lawn once Play has been clicked."""
        play = self.menu.play
        if play.clicked and not self.menu.settings.box[0].clicked:
            self.page = Page.GAME
            self.menu.music.pause()
            self.game_settings.music.play()
            play.clicked = False

    def handle_event(self, event: Event, pressed: bool) -> None:
        """Dispatch one input event; ``pressed`` tells whether the left button is held."""
        mouse = self.mouse
        if event.kind is EventKind.CLOSED:
            self.running = False
        if key_pressed(event, ESCAPE_KEY):
            self.escape = not self.escape
        if self.page is Page.MENU:
            self.menu.handle(event, mouse, pressed)
        if self.page in (Page.WIN, Page.LOSE):
            self._handle_outcome(event, pressed)
        self.shop.handle(event, mouse)
        panel = self.game_settings
        panel.animate(mouse, pressed)
        panel.handle(event, mouse)
        panel.drag_volume(mouse, pressed, panel.music)
        self.shop.place(self.slots, event, mouse, self.plants, self.clock)
        for plant in self.plants:
            if isinstance(plant, Sunflower):
                self.shop.points += plant.collect(event, mouse)

    def _handle_outcome(self, event: Event, pressed: bool) -> None:
        for button in self.outcome_buttons:
            animate_button(button, self.mouse, OUTCOME_BUTTON_FRAME, pressed)
        for button in self.outcome_buttons:
            if button_released(event, self.mouse, button.pos, button.rect):
                button.clicked = not button.clicked
        if self.exit_button.clicked:
            self.running = False
        if self.restart_button.clicked:
            self.restart()
        if self.menu_button.clicked:
            self.return_to_menu()

    def _clear_run(self) -> None:
        for plant in self.plants:
            plant.release()
        self.plants.clear()
        self.zombies.clear()
        self.rounds.reset()
        self.life = START_LIFE
        self.shop.reset()

    def restart(self) -> None:
        """Start the level over from the win or lose screen."""
        self._clear_run()
        self.page = Page.GAME
        self.restart_button.clicked = False

    def return_to_menu(self) -> None:
        """Abandon the level from the win or lose screen and show the menu."""
        self._clear_run()
        self.menu_button.clicked = False
        self.page = Page.MENU

    def apply_game_settings(self) -> None:
        """Carry out what was chosen on the in-game settings panel."""
        panel = self.game_settings
        self._panel_restart()
        if panel.main_menu.clicked:
            panel.restart.clicked = True
            self._panel_restart()
            panel.menu.clicked = False
            self.page = Page.MENU
            panel.music.pause()
            self.menu.music.play()
            panel.main_menu.clicked = False
        if panel.box[1].clicked:
            panel.menu.clicked = False

    def _panel_restart(self) -> None:
        panel = self.game_settings
        if panel.menu.clicked and panel.restart.clicked:
            self._clear_run()
            panel.restart.clicked = False

    def _spawn(self, wave: str) -> None:
        try:
            text = self._load_wave(wave)
        except MapError as exc:
            print(f"ERROR: {exc}")
            return
        self.zombies.extend(spawn_wave(text, self.clock))

    def update(self) -> None:
        """Advance plants, zombies and rounds by one frame."""
        active = self.page is Page.GAME and not self.paused
        if active:
            for plant in self.plants:
                plant.step(self.zombies)
        cull_plants(self.plants)
        if active:
            for zombie in self.zombies:
                zombie.step(self.plants)
        self.life -= cull_zombies(self.zombies)
        if self.page is Page.GAME:
            wave = self.rounds.tick(bool(self.zombies))
            if wave is not None:
                self._spawn(wave)
        self.apply_game_settings()
        if self.page is Page.GAME:
            self.shop.refresh()
        self.check_outcome()

    def check_outcome(self) -> None:
        """Switch to the win or lose screen when the level is decided."""
        if not self.zombies and self.rounds.round == FINAL_ROUND:
            self.page = Page.WIN
        lost = self.life <= 0 or (not self.plants and self.shop.points == 0)
        if lost and self.page is not Page.LOSE:
            self.page = Page.LOSE
            for button, fy in zip(self.outcome_buttons, (0.2, 0.3, 0.4)):
                button.pos = layout_position(0.1, fy, button.rect)


__all__ = ["Game", "help_text", "START_LIFE"]