# tinyarcade

Ten small arcade games and toys, each in its own pygame window.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

Each game has its own command:

| Command | Game | Controls |
|---|---|---|
| `tinyarcade-pong` | Two-player Pong | W/S for the left paddle, Up/Down for the right |
| `tinyarcade-breakout` | Breakout with three lives | Left/Right to move the paddle |
| `tinyarcade-flappy-cube` | A cube that falls and jumps | Space to jump, Left/Right to move |
| `tinyarcade-bouncing-ball` | A ball bouncing off the window edges | none |
| `tinyarcade-dino-runner` | Jump over the incoming cacti | Space to jump |
| `tinyarcade-space-shooter` | Dodge and shoot meteors | Arrow keys to fly, Space to fire |
| `tinyarcade-camera-movement` | A camera following a square across a field of circles | Arrow keys to move, W/S to zoom |
| `tinyarcade-falling-blocks` | Catch the falling blocks | Left/Right to move |
| `tinyarcade-mouse-circle` | A circle that follows the mouse | Mouse |
| `tinyarcade-tic-tac-toe` | Two-player Tic Tac Toe | Click a cell; Space restarts a finished game |

Close the window or press Escape to quit. The space shooter also ends by
itself when a meteor hits the rocket.

### Sprites and sound

No images, fonts or sounds ship with the package. Without them the dino
runner and the space shooter draw plain coloured shapes and play no sound.
Both commands take an `--assets DIR` option to use your own files:

- `tinyarcade-dino-runner --assets DIR` loads `DIR/dino.png` and
  `DIR/cactus.png`, scaled to the sprites' sizes.
- `tinyarcade-space-shooter --assets DIR` loads `star.png`, `player.png`,
  `laser.png`, `meteor.png` and the font `Oxanium-Bold.ttf` from
  `DIR/images/`, and `laser.wav`, `explosion.wav` and `game_music.wav` from
  `DIR/audio/`.

## Using the games from code

Every game is a plain object with `update(dt, controls)` and `draw(surface)`.
The game rules live in `update`, which needs no window; `draw` paints onto a
`pygame.Surface`. `tinyarcade.frame.run(title, width, height, game, background)`
is the loop that drives a game in a window, feeding it a `Controls` snapshot
built by `read_controls()` each frame:

```python
import random

from tinyarcade.frame import run
from tinyarcade.pong import PongGame

run("Pong Clone", 1400, 800, PongGame(random.Random()), (0, 0, 0))
```

A `Controls` records the keys held (`is_down(key)`), the keys pressed this
frame (`was_pressed(key)`), the mouse position and whether the left button was
clicked, so tests can build one by hand. If a game's `update` returns `False`,
`run` stops.

Games that use randomness take a `random.Random` instance, so a seeded
generator gives the same game every time. `TicTacToe` is fully deterministic
and exposes `click(x, y)`, `is_draw()`, `check_win()` and `restart()`.

`tinyarcade.geometry` holds the shared `Vector2` and `Rect` types and the
collision helpers `check_collision_circle_rec`, `check_collision_recs` and
`normalize`.