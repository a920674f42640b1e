"""Window pages and the locations of the game's resource files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

WINDOW_TITLE = "my_defender"


class Page(IntEnum):
    GAME = 71080
    MENU = 77080
    SETTINGS = 83080
    WIN = 45644
    LOSE = 56433


ASSET_FILES: dict[str, str] = {
    "foot_zombie_alive": "Extending/Game/Zombies/foot_zombie/alive/alive_foot.png",
    "foot_zombie_die": "Extending/Game/Zombies/foot_zombie/die/die_foot.png",
    "normal_zombie_alive": "Extending/Game/Zombies/normal_zombie/alive/zombie_alive.png",
    "normal_zombie_die": "Extending/Game/Zombies/normal_zombie/die/zombie_die.png",
    "beet_alive": "Extending/Game/Plants/beet/alive/alive_beet.png",
    "beet_alive2": "Extending/Game/Plants/beet/alive/beet2.png",
    "beet_alive3": "Extending/Game/Plants/beet/alive/beet3.png",
    "beet_die": "Extending/Game/Plants/beet/die/die_beet.png",
    "beet_bullet": "Extending/Game/Plants/beet/beetbullet.png",
    "beet_buy": "Extending/Game/Plants/beet/buy/buy_beet.png",
    "pea_alive": "Extending/Game/Plants/peashooter/alive/pea_alive.png",
    "pea_alive2": "Extending/Game/Plants/peashooter/alive/pea2.png",
    "pea_alive3": "Extending/Game/Plants/peashooter/alive/pea3.png",
    "pea_die": "Extending/Game/Plants/peashooter/die/die_pea.png",
    "pea_buy": "Extending/Game/Plants/peashooter/buy/buy_pea.png",
    "pea_ball": "Extending/Game/Plants/peashooter/pea_ball.png",
    "sun_alive": "Extending/Game/Plants/sunflower/alive/sun_life.png",
    "sun_die": "Extending/Game/Plants/sunflower/die/sun_die.png",
    "sun_buy": "Extending/Game/Plants/sunflower/buy/buy_sun.png",
    "sun_sun": "Extending/Game/Plants/sunflower/money/Untitled.png",
    "walnut_alive": "Extending/Game/Plants/walnut/alive/walnut_live.png",
    "walnut_alive2": "Extending/Game/Plants/walnut/alive/walnut2.png",
    "walnut_die": "Extending/Game/Plants/walnut/die/die_walnut.png",
    "walnut_buy": "Extending/Game/Plants/walnut/buy/buy_walnut.png",
    "z1_alive": "Extending/Game/Zombies/normal_zombie/alive/zombie_alive.png",
    "z1_die": "Extending/Game/Zombies/normal_zombie/die/zombie_die.png",
    "z2_alive": "Extending/Game/Zombies/foot_zombie/alive/alive_foot.png",
    "z2_die": "Extending/Game/Zombies/foot_zombie/die/die_foot.png",
    "zombies_text": "Extending/Game/Zombies/text.txt",
    "zombies_spawn1": "Extending/Game/Zombies/wave_zombie1.txt",
    "zombies_spawn2": "Extending/Game/Zombies/wave_zombie2.txt",
    "zombies_spawn3": "Extending/Game/Zombies/wave_zombie3.txt",
    "map_txt": "Extending/Maps/txt/map.txt",
    "map_1": "Extending/Maps/img/map_1.jpg",
    "mini_map": "Extending/Maps/img/plants_pos.png",
    "menu_background": "Extending/Menu/img/menu_background.jpg",
    "menu_music": "Extending/Menu/sound/menu_music.ogg",
    "game_music": "Extending/Menu/sound/testmuis.ogg",
    "play_btn": "Extending/Menu/img/play_button.png",
    "settings_btn": "Extending/Menu/img/Settings_button.png",
    "settings_box": "Extending/Menu/img/setting_box.png",
    "settings_box_ok": "Extending/Menu/img/bouton_ok.png",
    "game_settings_box": "Extending/Menu/img/game_setting_box.png",
    "game_settings_box_ok": "Extending/Menu/img/backtogame.png",
    "game_menu_btn": "Extending/Menu/img/game_menu_button.png",
    "settings_bar": "Extending/Menu/img/setting_bar.png",
    "settings_bar_btn": "Extending/Menu/img/bouton.png",
    "yes_no": "Extending/Menu/img/yes_no.png",
    "restart_btn": "Extending/Menu/img/restardlvl.png",
    "return_menu_btn": "Extending/Menu/img/bouton_menu.png",
    "exit_btn": "Extending/Menu/img/exit_btn.jpg",
    "font": "Extending/Game/04b_25.ttf",
    "win_img": "Extending/Game/Other/img/win_img.jpg",
    "lose_img": "Extending/Game/Other/img/gameOver.jpg",
    "heart_img": "Extending/Game/Other/img/life.png",
}


@dataclass(frozen=True)
class Assets:
    """Resolves named resources against a data directory."""

    root: Path = Path(".")

    def path(self, name: str) -> Path:
        try:
            relative = ASSET_FILES[name]
        except KeyError:
            raise KeyError(f"unknown asset: {name!r}") from None
        return Path(self.root) / relative