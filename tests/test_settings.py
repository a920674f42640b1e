import pytest

from lawndefense.settings import ESCAPE_KEY, GameSettings, Menu, MenuSettings, Music
from lawndefense.ui import Event, EventKind, MouseButton, Vec


def centre(widget):
    return Vec(widget.pos.x + widget.rect.width / 2, widget.pos.y + widget.rect.height / 2)


LEFT_PRESS = Event(EventKind.MOUSE_PRESSED, button=MouseButton.LEFT)
LEFT_RELEASE = Event(EventKind.MOUSE_RELEASED, button=MouseButton.LEFT)
ESCAPE = Event(EventKind.KEY_PRESSED, key=ESCAPE_KEY)
NOWHERE = Vec(-1000, -1000)


def test_music_volume_is_clamped():
    music = Music("menu_music")
    assert music.set_volume(150) == 100.0
    assert music.set_volume(-5) == 0.0
    assert music.volume == 0.0


def test_music_play_and_pause():
    music = Music("game_music")
    music.play()
    assert music.playing is True
    music.pause()
    assert music.playing is False


def test_default_frame_limit_is_second_button():
    settings = MenuSettings()
    assert settings.frame_limit() == settings.fps[1].price
    assert [b.clicked for b in settings.fps] == [False, True, False, False]


def test_select_fps_ticks_exactly_one():
    settings = MenuSettings()
    settings.select_fps(3)
    assert settings.frame_limit() == 144
    assert [b.clicked for b in settings.fps] == [False, False, False, True]
    assert settings.fps[3].rect.left == 39
    assert all(b.rect.left == 0 for b in settings.fps[:3])


def test_frame_rates_double_before_the_last():
    settings = MenuSettings()
    prices = [b.price for b in settings.fps]
    assert prices[1] == 2 * prices[0]
    assert prices[2] == 2 * prices[1]


def test_click_on_fps_button_selects_it():
    settings = MenuSettings()
    settings.handle_fps_clicks(LEFT_PRESS, centre(settings.fps[2]))
    assert settings.frame_limit() == settings.fps[2].price
    assert settings.fps[1].clicked is False


def test_remember_and_restore_round_trip():
    settings = MenuSettings()
    music = Music("menu_music", volume=40.0)
    original_knob = settings.knob.pos.copy()
    settings.remember(music)
    settings.select_fps(0)
    music.set_volume(90)
    settings.knob.pos.x += 30
    settings.restore(music)
    assert music.volume == 40.0
    assert settings.knob.pos == original_knob
    assert settings.frame_limit() == settings.fps[1].price


def test_drag_volume_moves_knob_to_mouse():
    settings = MenuSettings()
    music = Music("menu_music")
    mouse = Vec(settings.knob.pos.x + 5, settings.knob.pos.y + 5)
    assert settings.drag_volume(mouse, True, music) is True
    assert settings.knob.pos.x == mouse.x - 12.5
    assert 0.0 <= music.volume <= 100.0


def test_drag_volume_needs_button_held():
    settings = MenuSettings()
    music = Music("menu_music", volume=50.0)
    before = settings.knob.pos.copy()
    mouse = centre(settings.knob)
    assert settings.drag_volume(mouse, False, music) is False
    assert settings.knob.pos == before
    assert music.volume == 50.0


def test_place_volume_knob_spans_the_bar():
    settings = MenuSettings()
    settings.place_volume_knob(0)
    assert settings.knob.pos.x == pytest.approx(settings.bar.pos.x)
    settings.place_volume_knob(100)
    expected = settings.bar.pos.x + settings.bar.rect.width - settings.knob.rect.width
    assert settings.knob.pos.x == pytest.approx(expected)


def test_ok_button_hover_and_toggle():
    settings = MenuSettings()
    ok = settings.box[1]
    settings.handle_ok(LEFT_PRESS, centre(ok))
    assert ok.clicked is True
    assert ok.rect.left == 412
    settings.handle_ok(Event(EventKind.OTHER), NOWHERE)
    assert ok.rect.left == 0
    assert ok.clicked is True


def test_escape_opens_and_cancel_restores():
    menu = Menu()
    menu.handle(ESCAPE, NOWHERE, False)
    assert menu.settings_button.clicked is True
    assert menu.settings.box[0].clicked is True
    menu.settings.select_fps(3)
    menu.handle(ESCAPE, NOWHERE, False)
    assert menu.settings_button.clicked is False
    assert menu.settings.box[0].clicked is False
    assert menu.settings.frame_limit() == menu.settings.fps[1].price


def test_ok_confirms_new_settings():
    menu = Menu()
    menu.handle(ESCAPE, NOWHERE, False)
    menu.settings.select_fps(3)
    menu.handle(LEFT_PRESS, centre(menu.settings.box[1]), True)
    assert menu.settings_button.clicked is False
    assert menu.settings.box[1].clicked is False
    assert menu.settings.frame_limit() == 144


def test_play_button_click_toggles():
    menu = Menu()
    menu.handle(LEFT_PRESS, centre(menu.play), True)
    assert menu.play.clicked is True
    assert menu.play.rect.top == 0
    menu.handle(Event(EventKind.OTHER), NOWHERE, False)
    assert menu.play.rect.top == 144


def test_menu_music_starts_playing():
    menu = Menu()
    assert menu.music.playing is True
    assert menu.music.name == "menu_music"


def test_game_panel_opens_on_menu_button_release():
    panel = GameSettings()
    panel.handle(LEFT_RELEASE, centre(panel.menu))
    assert panel.menu.clicked is True
    assert panel.menu.rect.left == 2 * 114
    panel.handle(ESCAPE, NOWHERE)
    assert panel.menu.clicked is False


def test_game_panel_buttons_only_while_open():
    panel = GameSettings()
    panel.handle(LEFT_RELEASE, centre(panel.restart))
    assert panel.restart.clicked is False
    panel.handle(ESCAPE, NOWHERE)
    panel.handle(LEFT_RELEASE, centre(panel.restart))
    assert panel.restart.clicked is True


def test_game_panel_closing_clears_buttons():
    panel = GameSettings()
    panel.handle(ESCAPE, NOWHERE)
    panel.handle(LEFT_RELEASE, centre(panel.restart))
    panel.handle(ESCAPE, NOWHERE)
    panel.handle(Event(EventKind.OTHER), NOWHERE)
    assert panel.restart.clicked is False
    assert panel.main_menu.clicked is False


def test_game_panel_animation_frames():
    panel = GameSettings()
    panel.animate(centre(panel.restart), True)
    assert panel.restart.rect.left == 2 * 208
    panel.animate(centre(panel.restart), False)
    assert panel.restart.rect.left == 208
    panel.animate(NOWHERE, False)
    assert panel.restart.rect.left == 0


def test_game_panel_has_three_lives_and_drags_volume():
    panel = GameSettings()
    assert len(panel.lives) == 3
    music = panel.music
    knob = panel.sound[1]
    mouse = Vec(knob.pos.x + 5, knob.pos.y + 5)
    assert panel.drag_volume(mouse, True, music) is True
    assert knob.pos.x == mouse.x - 12.5