# terminvaders

An arcade game for the terminal with sound effects, in the spirit of
*Space Invaders*. Your cannon sits on the bottom row of a 40 × 20 character
playfield. A grid of invaders marches from side to side. Each time it reaches
an edge it drops one row and moves faster. Shoot them all before they land.

## Installing

```
pip install .
```

This installs the `terminvaders` command. The game draws with `blessed` and
plays sounds through `pygame`.

## Playing

```
terminvaders
```

Options:

| Option              | Effect                                                   |
|---------------------|----------------------------------------------------------|
| `--audio-dir DIR`   | Directory holding the WAV files (default `audio/original`) |
| `--mute`            | Play no sound                                            |

The game opens on a menu:

| Key           | Menu action                      |
|---------------|----------------------------------|
| Up / Down     | Move the selection               |
| Space / Enter | Choose "New game" or "Exit"      |

During a game:

| Key           | Action                                   |
|---------------|------------------------------------------|
| Left / Right  | Move the cannon                          |
| Space / Enter | Fire (at most two shots in flight)       |
| Esc / q       | Give up and return to the menu           |

Each invader is worth one point. The top row shows the score (`SCORE: 0000`)
and the level (`LEVEL: 01`). When you clear a wave, the level goes up and a
new wave appears. When the level reaches 3, the game is won and ends. If an
invader reaches the bottom row, the game goes back to the menu with a fresh
cannon and army.

### Sound

The game loads the sounds `explode`, `lose`, `move`, `pew`, `startup` and
`win` from `<audio-dir>/<name>.wav`. It skips any file that is missing or
cannot be loaded. If no audio device can be opened, the game runs silently.

## Using the pieces

The game logic runs without a terminal:

- `terminvaders.app.Game` holds one session. `handle_menu_key(key)` and
  `handle_game_key(key)` take `blessed` key names such as `"KEY_LEFT"`, `" "`
  or `"q"`. `step(delta)` advances by a `datetime.timedelta` and returns the
  frame to show. `reset()` returns to the menu.
- `terminvaders.app.Sounds` loads and plays the sound effects.
- `terminvaders.frame.new_frame()` returns a blank grid indexed as
  `frame[x][y]`.
- `Player`, `Invaders`, `Shot`, `Score`, `Level` and `Menu` each have a
  `draw(frame)` method that paints them onto a frame.
- `terminvaders.render.render(term, stream, last_frame, curr_frame, force)`
  writes only the cells that changed. With `force`, it clears the screen and
  redraws every cell.

## Running the tests

```
pip install ".[test]"
pytest
```