# aoc2023

Solutions to the Advent of Code 2023 puzzles, with a small command-line
runner. The runner downloads your puzzle input when needed, solves it, and
then prints the answer or submits it.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The command

```
aoc2023                    # latest unlocked day, part 1
aoc2023 --day 4 2          # day 4, part 2
aoc2023 -d 7 1 --publish   # solve day 7 part 1 and submit the answer
aoc2023 --all              # every unlocked day, both parts
```

Options:

- `-d`, `--day DAY`: the day to run. The default is the latest day of 2023
  that is unlocked. If no day is unlocked yet, the command stops with
  "AoC 2023 is not unlocked yet".
- `PART`: a positional argument. The default is `1`.
- `-p`, `--publish`: submit the answer and print the site's reply as plain
  text, in place of the answer.
- `--all`: run both parts of every unlocked day, in order.

Before each part it prints `Executing day N part P`.

Inputs are kept in `input/dayN.txt` under the current directory. The
`input` directory is created if it is missing. An input is downloaded only
when its file does not exist yet, so you can put input files there yourself.

### Session cookie

Every run needs your session cookie, even when the input file is already
there. The runner looks for it in this order:

1. the `ADVENT_OF_CODE_SESSION` environment variable;
2. `~/.adventofcode.session`;
3. `~/.config/adventofcode.session`.

At startup the command reads a `.env` file in the current directory, if
there is one. Its `KEY=value` lines set environment variables that are not
already set, so the variable can also be put there.

## As a library

Every solved day has a module, `aoc2023.day01` to `aoc2023.day09`. There is
no module for day 3. Each module has `part1(text)` and, except for day 5,
`part2(text)`. These functions take the puzzle input as a string and return
the answer as an integer.

```python
from aoc2023 import day01

text = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"
print(day01.part1(text))  # 142
```

Some helpers are available as well:

- `day01.first_and_last_digits(line)` and `first_and_last_digits_spelled(line)`
- `day02.parse_game(line)`
- `day04.card_matches(line)`
- `day06.count_wins(time, distance)`
- `day07.card_value(card)`, `classify(cards)`, `total_winnings(text)`, and the
  `HandType` enum. There is also the `Hand` class, whose instances sort so
  that weaker hands come first. A `J` is the weakest card and also counts as
  a joker. For this reason `part1` and `part2` give the same result.
- `day08.parse_network(text)`, `count_steps(instructions, network, start, is_end)`
  and the `Instruction` enum
- `day09.extrapolate_forward(values)` and `extrapolate_backward(values)`

Malformed input raises `ValueError`.

`aoc2023.executer.solve(day, part, text)` passes a day (1–25) and a part
(1 or 2) to the matching solver and returns the answer as a string. Any other
day or part raises `ValueError`.
`aoc2023.executer.execute_day(day, part, input_dir="input")` reads
`dayN.txt` from `input_dir` and then solves it.

`aoc2023.client.AocClient(session, year, day)` has three methods:

- `fetch_input()` downloads the input.
- `save_input(path)` writes the input to a file.
- `submit_answer(part, answer)` submits an answer and returns the reply as
  plain text.

`aoc2023.client.last_unlocked_day(year, now=None)` returns the latest
unlocked day of a year, or `None`.
`aoc2023.client.load_session_cookie(environ, home)` finds the cookie as
described above. It raises `LookupError` when there is none.

## What is not solved

Days 3 and 10 to 25 have no solutions, and neither does day 5 part 2. For
these puzzles the runner still reads or downloads the input, but the answer
is an empty string. With `--publish`, that empty answer is submitted.