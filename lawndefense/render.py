"""Drawing the game with pygame and running the main window loop."""

from __future__ import annotations

import sys
from pathlib import Path

import pygame

from .assets import WINDOW_TITLE, Assets, Page
from .game import Game, help_text
from .mapfile import MapError, read_map
from .settings import ESCAPE_KEY, Music
from .shop import SCORE_POS
from .ui import WINDOW_HEIGHT, WINDOW_WIDTH, Event, EventKind, MouseButton, Rect, Vec, Widget

ROUND_POS = Vec(555, 301)
SCORE_FONT_SIZE = 40
ROUND_FONT_SIZE = 50
WHITE = (255, 255, 255)

_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


def translate_event(pg_event) -> Event:
    """Turn a pygame event into the game's own event."""
    kind = pg_event.type
    if kind == pygame.QUIT:
        return Event(EventKind.CLOSED)
    if kind == pygame.KEYDOWN:
        key = ESCAPE_KEY if pg_event.key == pygame.K_ESCAPE else f"key{pg_event.key}"
        return Event(EventKind.KEY_PRESSED, key=key)
    if kind in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        event_kind = (
            EventKind.MOUSE_PRESSED
            if kind == pygame.MOUSEBUTTONDOWN
            else EventKind.MOUSE_RELEASED
        )
        return Event(event_kind, button=_BUTTONS.get(pg_event.button))
    return Event(EventKind.OTHER)


def _load_font(path: Path, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(str(path), size)
    except (OSError, pygame.error):
        return pygame.font.Font(None, size)


class Renderer:
    """Draws every page of the game onto a surface."""

    def __init__(self, surface: pygame.Surface, assets: Assets) -> None:
        self.surface = surface
        self.assets = assets
        self._images: dict[str, pygame.Surface] = {}
        pygame.font.init()
        font_path = assets.path("font")
        self.score_font = _load_font(font_path, SCORE_FONT_SIZE)
        self.round_font = _load_font(font_path, ROUND_FONT_SIZE)

    def image(self, name: str) -> pygame.Surface:
        """Load an image once; a missing file draws as nothing."""
        if name not in self._images:
            try:
                self._images[name] = pygame.image.load(str(self.assets.path(name)))
            except (pygame.error, OSError):
                self._images[name] = pygame.Surface((1, 1), pygame.SRCALPHA)
        return self._images[name]

    def _blit(self, name: str, pos: Vec, rect: Rect | None = None) -> None:
        area = None
        if rect is not None:
            area = pygame.Rect(rect.left, rect.top, rect.width, rect.height)
        self.surface.blit(self.image(name), (int(pos.x), int(pos.y)), area)

    def _widget(self, widget: Widget) -> None:
        self._blit(widget.image, widget.pos, widget.rect)

    def _text(self, font: pygame.font.Font, text: str, pos: Vec) -> None:
        self.surface.blit(font.render(text, True, WHITE), (int(pos.x), int(pos.y)))

    def _draw_menu(self, game: Game) -> None:
        menu = game.menu
        self._widget(menu.background)
        for button in menu.buttons:
            self._widget(button)
        if menu.settings_open:
            settings = menu.settings
            for widget in (*settings.box, *settings.sound, *settings.fps):
                self._widget(widget)

    def _draw_lawn(self, game: Game) -> None:
        self._widget(game.map_widget)
        for slot in game.slots:
            self._blit("mini_map", slot.pos)
        for plant in game.plants:
            sprite = plant.sprite
            if sprite is not None:
                self._blit(sprite, plant.pos, plant.rect)
            if plant.life > 0:
                for shot in plant.projectiles:
                    self._blit(shot.image, shot.pos, shot.rect)
        for heart in game.game_settings.lives[: max(game.life, 0)]:
            self._widget(heart)
        for zombie in game.zombies:
            sprite = zombie.sprite
            if sprite is not None:
                self._blit(sprite, zombie.pos, zombie.rect)
        if game.rounds.banner:
            self._text(self.round_font, game.rounds.banner, ROUND_POS)
        panel = game.game_settings
        self._widget(panel.menu)
        if panel.menu.clicked:
            for widget in (*panel.box, *panel.sound, panel.restart, panel.main_menu):
                self._widget(widget)
        for item in game.shop.items:
            self._widget(item.widget)
        self._text(self.score_font, str(game.shop.points), SCORE_POS)
        if game.shop.selected is not None:
            card = game.shop.selected.widget
            self._blit(card.image, game.mouse, card.rect)

    def _draw_outcome(self, game: Game) -> None:
        self._widget(game.win_image if game.page is Page.WIN else game.lose_image)
        for button in game.outcome_buttons:
            self._widget(button)

    def draw(self, game: Game) -> None:
        """Clear the surface and draw the page the game is on."""
        self.surface.fill((0, 0, 0))
        if game.page is Page.MENU:
            self._draw_menu(game)
        elif game.page is Page.GAME:
            self._draw_lawn(game)
        elif game.page in (Page.WIN, Page.LOSE):
            self._draw_outcome(game)


class _Jukebox:
    """Plays the menu and game tracks as the game's music state says."""

    def __init__(self, assets: Assets, tracks: list[Music]) -> None:
        self._sounds: dict[str, pygame.mixer.Sound] = {}
        self._channels: dict[str, pygame.mixer.Channel] = {}
        try:
            pygame.mixer.init()
            for track in tracks:
                self._sounds[track.name] = pygame.mixer.Sound(str(assets.path(track.name)))
        except (pygame.error, OSError):
            self._sounds.clear()

    def sync(self, tracks: list[Music]) -> None:
        for track in tracks:
            sound = self._sounds.get(track.name)
            if sound is None:
                continue
            sound.set_volume(track.volume / 100)
            channel = self._channels.get(track.name)
            if track.playing:
                if channel is None:
                    found = sound.play(loops=-1 if track.loop else 0)
                    if found is not None:
                        self._channels[track.name] = found
                else:
                    channel.unpause()
            elif channel is not None:
                channel.pause()


def run(game: Game, assets: Assets) -> None:
    """Open the window and drive the game until it stops running."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        renderer = Renderer(screen, assets)
        tracks = [game.menu.music, game.game_settings.music]
        jukebox = _Jukebox(assets, tracks)
        ticker = pygame.time.Clock()
        while game.running:
            game.change_page()
            x, y = pygame.mouse.get_pos()
            game.mouse = Vec(x, y)
            pressed = bool(pygame.mouse.get_pressed()[0])
            for pg_event in pygame.event.get():
                game.handle_event(translate_event(pg_event), pressed)
            game.update()
            jukebox.sync(tracks)
            renderer.draw(game)
            pygame.display.flip()
            ticker.tick(game.frame_limit or 0)
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: ``-h`` prints the rules, otherwise an optional map file."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) == 1 and args[0] == "-h":
        print(help_text(), end="")
        return 0
    assets = Assets()
    map_path = args[0] if args else assets.path("map_txt")
    try:
        map_text = read_map(map_path)
    except MapError as exc:
        print(f"ERROR: {exc}")
        return 84
    run(Game(map_text, assets=assets), assets)
    return 0


__all__ = ["Renderer", "translate_event", "run", "main"]