"""Command line: solve a day's puzzle, fetching its input when needed."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence
from pathlib import Path

from aoc2023.client import AocClient, last_unlocked_day, load_session_cookie
from aoc2023.executer import execute_day

YEAR = 2023


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line: ``[-d DAY] [PART] [-p] [--all]``."""
    parser = argparse.ArgumentParser(prog="aoc2023", description="Solve puzzles of the 2023 calendar.")
    parser.add_argument("-d", "--day", type=int, default=None, help="day to run (default: latest unlocked)")
    parser.add_argument("part", type=int, nargs="?", default=None, help="part to run (default: 1)")
    parser.add_argument("-p", "--publish", action="store_true", help="submit the answer instead of printing it")
    parser.add_argument("--all", action="store_true", help="run every unlocked day, both parts")
    return parser.parse_args(argv)


def _load_dotenv(path: Path) -> None:
    if not path.is_file():
        return
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        if key.startswith("export "):
            key = key[len("export "):].strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
            value = value[1:-1]
        os.environ.setdefault(key, value)


def run_day(
    year: int, day: int, part: int, publish: bool, input_dir: str | Path = "input"
) -> str:
    """Solve one part, downloading its input first if absent; print and return the answer."""
    directory = Path(input_dir)
    directory.mkdir(parents=True, exist_ok=True)
    input_path = directory / f"day{day}.txt"

    client = AocClient(load_session_cookie(os.environ, Path.home()), year, day)
    if not input_path.exists():
        client.save_input(input_path)

    result = execute_day(day, part, directory)
    if publish:
        print(client.submit_answer(part, result))
    else:
        print(result)
    return result


def _latest_day() -> int:
    day = last_unlocked_day(YEAR)
    if day is None:
        raise SystemExit(f"AoC {YEAR} is not unlocked yet")
    return day


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command."""
    _load_dotenv(Path(".env"))
    args = parse_args(argv)

    if args.all:
        for day in range(1, _latest_day() + 1):
            for part in (1, 2):
                print(f"Executing day {day} part {part}")
                run_day(YEAR, day, part, args.publish)
        return 0

    day = args.day if args.day is not None else _latest_day()
    part = args.part if args.part is not None else 1
    print(f"Executing day {day} part {part}")
    run_day(YEAR, day, part, args.publish)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())