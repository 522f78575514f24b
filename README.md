# edaversi

This is Reversi (also called Othello) on an 8×8 board. You play one colour and the computer plays the other.

The computer picks its moves with a minimax search that uses alpha-beta pruning:

- It searches up to ten plies deep.
- A search stops after 10,000 evaluated nodes.
- Its evaluation counts pieces and gives each corner an extra weight of 100.

## Installing

```
pip install .
```

The game window uses pygame. To install the test dependencies as well:

```
pip install ".[test]"
```

## Playing

```
edaversi
```

- When no game is running, click **Play black** or **Play white** to choose your side. Black always moves first.
- To play a move, click an empty square that flanks at least one of your opponent's pieces. The game ignores clicks on any other square.
- A player who has no legal move loses the turn. The game ends when neither player can move.
- The panel shows each side's score and the total time each side has spent on its moves.
- Press Alt+Enter to switch between a window and full screen.
- Close the window to quit.

The command has no options apart from `--help`.

## Using the engine from Python

The rules and the AI work without a window. They live in `edaversi.model` and `edaversi.ai`:

```python
from edaversi.model import GameModel, Player, Square
from edaversi.ai import get_best_move

model = GameModel()
model.start()                       # opening position, black to move

print(model.valid_moves())          # legal squares for the player to move
move = get_best_move(model)         # the AI's choice for that player
model.play_move(move)               # raises ValueError if the move is illegal

print(model.score(Player.BLACK), model.score(Player.WHITE))
print(model.piece_at(Square(3, 3)))
```

### `edaversi.model`

- `Player` has the values `BLACK` and `WHITE`. Each value has two methods:
  - `opponent()` returns the other player.
  - `piece()` returns that player's piece.
- `Piece` has the values `EMPTY`, `BLACK` and `WHITE`.
- `Square(x, y)` is a board coordinate: `x` is the column and `y` is the row. The check `is_square_valid(square)` tells you whether a square is on the board.
- `GameModel(clock=None)` holds the whole game state.
  - A new model has an empty board and `game_over` set to true. Call `start()` to set up the opening position.
  - `clock` is a callable that returns seconds. It defaults to `time.monotonic`. You can pass a fixed clock in tests.
  - `valid_moves()` lists the current player's legal squares. It scans column by column.
  - `play_move(move)` places the piece, flips the pieces it captures, adds the elapsed time to the mover's total and passes the turn. If the next player cannot move, the turn comes back to the mover. If neither player can move, `game_over` is set.
  - `score(player)` counts that player's pieces on the board.
  - `timer(player)` gives the seconds that player has spent. While the game is running, this includes the current turn.
  - `piece_at(square)` and `set_piece(square, piece)` read and write single squares. Both raise `IndexError` for a square off the board.
  - `copy()` returns an independent copy of the model.
  - `game_over`, `current_player`, `human_player` and `player_time` are plain attributes.

### `edaversi.ai`

- `get_best_move(model, on_progress=None)` returns the best move it finds for the current player. It raises `ValueError` if that player has no legal move. If you pass `on_progress`, it is called with the model before each candidate move is searched. The game uses it to redraw the window during a search.
- `check_board(model)` scores the position from the current player's point of view: +1 for each own piece and −1 for each opposing piece. Corners count an extra +100 or −100. The function returns 0 when the game is over.
- `game_over(model)` returns whether the model is already marked as over. It has a side effect: if the current player has no move, it passes the turn. If neither player can move, it marks the game over.

### `edaversi.view` and `edaversi.controller`

- `View` opens the pygame window and draws the board and the side panel.
- `View.poll_input()` returns an `InputState` for the current frame.
- Two helper functions in `edaversi.view` need no window:
  - `square_at(x, y)` maps a window point to a board square, or to `INVALID_SQUARE` if the point is off the board.
  - `format_timer(seconds)` formats a time as `MM:SS`.
- `edaversi.controller.update_view(model, view)` runs one frame of the game. It returns `False` when the window should close.