# blocktris

blocktris is a falling-block puzzle game that runs in a terminal.

Pieces fall onto a board 10 cells wide and 20 rows high. Rotation uses Super Rotation System wall kicks, so a piece that turns into a wall or the floor can shift to a nearby free spot. A hollow ghost piece (`□`) shows where the current piece will land. Each kind of piece has its own ANSI colour. A panel beside the board shows the next piece, the score and the combo.

## Installing

```
pip install .
```

The package needs nothing outside the standard library.

## Playing

```
blocktris
```

| Key     | Action                         |
|---------|--------------------------------|
| `a`     | move left                      |
| `d`     | move right                     |
| `s`     | move down one row              |
| `w`     | rotate clockwise               |
| `x`     | rotate counter-clockwise       |
| `space` | hard drop                      |
| `m`     | turn the ghost piece on or off |

The game ignores any other key.

Options:

| Option               | Default     | Meaning                                                |
|----------------------|-------------|--------------------------------------------------------|
| `--score-file PATH`  | `score.txt` | file that saved scores go into                         |
| `--seed N`           | random      | seed for the order of pieces, to repeat a game         |
| `--interval SECONDS` | `0.5`       | seconds between gravity ticks at the start (above 0)   |

When standard input is a POSIX terminal, the game switches it to unbuffered, no-echo mode while it runs. It puts the old settings back when it exits.

Pieces come in bags of seven. Every shape appears once before any shape repeats. A piece locks when it rests on the floor or on a locked block at a gravity tick. The game ends when a locked block sits at or above the top of the board.

## Scoring

| Lines cleared at once | Points |
|-----------------------|--------|
| 1                     | 100    |
| 2                     | 300    |
| 3                     | 500    |
| 4 or more             | 1000   |

Each clear raises the combo by one. From a combo of 2 upwards, a clear earns an extra `100 × (combo − 1)` points. The combo goes back to 0 when a piece locks without clearing a line.

The gravity interval is divided by `1 + 0.1 × (score // 1000)`. The game therefore speeds up with every full thousand points.

After a game ends, the game asks two questions and waits for `y` or `n`:

1. Do you want to save the score? On `y`, the score is written as a new first line of the score file, so the newest score is at the top. If the file cannot be written, the score is dropped without a message.
2. Do you want to play again?

## Using the pieces from code

The game is built from a few classes that you can also drive directly:

- `blocktris.blocklist.BlockList` holds every block in play. `remove_lines()` clears full rows and returns how many it cleared. `is_game_over()` reports the end of the game.
- `blocktris.board.Board` lays the blocks out on the grid and writes the screen to any text stream with `render(current, upcoming, score, combo)`.
- `blocktris.tetromino.make_mino(kind, block_list, board)` creates a piece at the spawn point. Pieces have `move`, `rotate`, `hard_drop` and `on_tick`.
- `blocktris.game.Game` runs the loop. `step()` runs a single gravity tick and `parse_input(key)` applies one key.
- `blocktris.terminal.InputReader` queues keystrokes from a background thread. `feed(char)` puts characters into the queue without a terminal.

## What it does not do

- Saved scores are only written to the score file. The game never reads them back or shows a high-score table.
- There is no pause key, no hold piece and no level display.
- Raw key input works only on POSIX terminals. Elsewhere, or when input is not a terminal, keys reach the game only after Enter.

## Development

```
pip install -e ".[test]"
pytest
```