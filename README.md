# sandbox-apps

This package has a few small console programs and some helper functions you can import.

## Installation

```
pip install .
```

To also run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### `sandbox-todo [--file PATH]`

A todo list that you drive from a menu:

```
1. Add Task
2. List Tasks
3. Mark a Task
4. Save Tasks as JSON
5. Exit
```

**Starting up.** The program loads tasks from `PATH`. The default is `todos.json` in the current directory.
- If the file is missing or cannot be read, it starts with an empty list.
- If the file holds something that is not a valid task list, it also starts with an empty list.

**Saving.** Option 4 writes the tasks back to the same file as a JSON array. Each entry has:
- `created_at`: Unix time in whole seconds
- `description`
- `completed`

Tasks are only written when you choose option 4. Exiting with option 5 or ending input does not save.

**Listing.** Option 2 shows each task as `N. [X] description : YYYY-MM-DD HH:MM:SS`. The time is in local time.

### `sandbox-guess`

The program picks a fruit at random from grapes, apples, bananas, pears and kiwis, and prints the one it picked. It then reads guesses from standard input, one per line.

Each guess is trimmed and lower-cased before it is checked. A name that is not on the list is rejected. The game ends on a correct guess or when input runs out.

### `sandbox-tictactoe`

This program prompts players X and O in turn for a move. A move is a row and a column from 0 to 2, separated by whitespace, for example `1 2`.

A move is refused when any of these is true:
- it does not have exactly two parts;
- a part is not a non-negative integer;
- it lies off the board;
- its cell is already taken.

The program stops when input ends.

### `sandbox-basics`

Prints a short demonstration of the helpers in `sandbox_apps.basics`.

## Library use

```python
from sandbox_apps.basics import get_first_word, even_filter, doubled, group_by_values, lookup_user
from sandbox_apps.todo import Todo, save_tasks, load_tasks
from sandbox_apps.guessing import guess_checker, pick_fruit, play
from sandbox_apps.tictactoe import initialize_board, render_board, parse_move, InvalidMove

get_first_word("Entschudigung, milch bitte!")   # "Entschudigung,"
even_filter([1, 2, 4, 5, 6])                    # [2, 4, 6]
doubled([1, 2, 3])                              # [2, 4, 6]
group_by_values([(21, "a"), (34, "b")])         # {21: "a", 34: "b"}
lookup_user({"Raj": 1053}, "Anuska")            # None

board = initialize_board()
row, col = parse_move("1 1", board)             # (1, 1)
parse_move("3 0", board)                        # raises InvalidMove
```

**Todo storage.**
- `load_tasks(path)` raises `OSError` if the file cannot be read.
- It raises `ValueError` if the file does not hold a valid task list.
- `Todo.to_dict()` and `Todo.from_dict()` convert a task to and from its JSON form.

**Guessing game.** `play(secret, lines, out)` reads guesses from any iterable of lines and writes its replies to `out`. It returns whether the fruit was guessed.

## What it does not do

- **Tic-tac-toe** is only a move prompt, not a playable game. `play_game` checks each move against the board but never places a mark on it, so:
  - the board always stays empty;
  - no cell is ever taken during play;
  - no winner or draw is detected;
  - turns go on until input ends.
- **Todo list** has no way to edit or delete tasks, and it never saves on its own.