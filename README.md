# lawndefense

A small real-time lane-defense game. Buy plants in the shop on the left of the
lawn, drop them on free tiles, and stop three waves of zombies before they
reach the house.

## Install

```
pip install .
```

The game uses `pygame` for its window, input and sound.

## Play

```
lawndefense
```

Pass a map file to use your own lawn layout:

```
lawndefense path/to/map.txt
```

Show the rules and exit:

```
lawndefense -h
```

If the map file cannot be read, the command prints an error and exits with
status 84.

The game looks for its images, sounds, font and wave files in an `Extending/`
directory under the directory it is started from (see
`lawndefense.assets.ASSET_FILES` for every path). A missing image is drawn as
nothing, missing sounds leave the game silent, and a missing font falls back to
pygame's default font.

### Rules

- You start with 100 sun points and three lives.
- Click a shop item you can afford to pick it up, then click a free lawn tile
  to plant it. Right-click cancels the purchase and refunds it.
- Plants:
  - **Walnut** (25): a wall that gains experience each time it is bitten and,
    once grown, gets a new look and 150 health.
  - **Sunflower** (50): drops suns that float upwards; click them to collect
    points. Older sunflowers drop more suns worth more points.
  - **Peashooter** (100): shoots peas and levels up with experience from hits.
  - **Beet** (125): harder-hitting shots; levels up after far fewer hits.
- Zombies walk left and stop to bite any plant they touch. Each zombie that
  reaches the house costs a life. Lose all lives, or have no plants and no
  points left, and the game is over. Survive all three rounds to win.
- On the lawn, Escape or the menu button opens the in-game panel: change the
  music volume, restart the level, or return to the main menu.
- On the main menu, the gear button (or Escape) opens the settings box for the
  music volume and the frame-rate limit (30, 60, 120 or 144). Closing it
  without pressing OK brings the previous settings back.
- The win and lose screens offer restart, main menu and exit buttons.

## Map files

A map is plain text. Each `m` marks a tile where a plant can be placed; an `E`
restarts the row count and shifts the columns that follow it by the column it
stood on. Wave files use the same grid with `1` for a normal zombie and `2` for
a football zombie. Each grid cell is 15 pixels.

## Using it as a library

The game logic runs without a window:

- `lawndefense.game.Game` holds the whole state; feed it events with
  `handle_event` and advance it with `update`.
- `lawndefense.mapfile` reads maps (`read_map`, `build_slots`, `spawn_cells`).
- `lawndefense.plants` and `lawndefense.zombies` hold the units, and
  `lawndefense.zombies.RoundManager` schedules the waves.
- `lawndefense.shop` holds the seed shop and the player's points.
- `lawndefense.settings` holds the main menu and the in-game settings panel.
- `lawndefense.render.run` draws it all with pygame and drives the loop.

## What it does not do

There is no saved progress or score table: each run starts fresh, and the
level has a single lawn and three fixed waves.

## Tests

```
pip install .[test]
pytest
```