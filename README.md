# Goblin Castle

A small roguelike that runs in your terminal. Each game generates a new
castle of rooms joined by corridors; you start in the first room and
explore it with a limited field of view, while goblins and hobgoblins
wait in the dark.

## Installing

```
pip install .
```

## Playing

```
goblin-castle
```

The command prints the title, then opens the game in the terminal's
alternate screen and keyboard raw mode; both are restored when the game
ends. Press any key on the start screen to begin.

The screen is 80 columns by 43 rows: the four most recent messages at the
top (older ones fainter), and the map below. Squares you can see are drawn
brightly, squares you have seen before are drawn dimly, and creatures are
shown only while they are in sight (`g` goblin, `H` hobgoblin, `@` you).

### Keys

Movement (vi keys or the arrow and keypad keys):

| Key          | Direction   |
|--------------|-------------|
| `y` / Home   | up-left     |
| `k` / Up     | up          |
| `u` / PgUp   | up-right    |
| `h` / Left   | left        |
| `l` / Right  | right       |
| `b` / End    | down-left   |
| `j` / Down   | down        |
| `n` / PgDn   | down-right  |
| `.`          | wait a turn |

Other keys:

- `m` opens the message history. Scroll it with Up/Down (one line),
  PgUp/PgDn (ten lines), Home (oldest) and End (newest); any other key
  closes it.
- Ctrl+C quits at any time.

Walking into a wall or off the map, or pressing a key the play screen does
not know, rings the terminal bell. Upper-case letters are ignored.

## What the game does not do yet

There is a single level and nothing more to it than exploring: the
goblins and hobgoblins stand still, there is no combat, no items, no
stairs and no way to save a game.

## Using it as a library

The game logic can be driven without a terminal:

```python
from goblin_castle.game import Game, MoveBlocked

game = Game(seed=42)          # the same seed always gives the same level
try:
    game.move_player(1, 0)
except MoveBlocked:
    print("the way is not clear")

level = game.level
print(level.width, level.height, level.player.pos)
for msg, age in game.log.latest(4):
    print(age, msg)
```

Other parts usable on their own:

- `goblin_castle.generate.generate_level(seed=None)` builds a `Level`;
  the seed in use is logged at INFO level on the `goblin_castle.generate`
  logger.
- `goblin_castle.fov.compute_fov(width, height, is_transparent, player_x,
  player_y, radius=8)` returns the visibility of every square, row by row,
  and `goblin_castle.fov.line` gives the Bresenham line between two points.
- `goblin_castle.messages.MessageLog(max_memory)` keeps the most recent
  messages with the turn they were logged in.
- `goblin_castle.app.run(console=None, game=None)` runs the main loop; a
  `goblin_castle.console.Console` passed in is left open, one made by
  `run` is closed on return.

## Running the tests

```
pip install .[test]
pytest
```