"""A small client for downloading puzzle inputs and submitting answers."""

from __future__ import annotations

import html
import re
import urllib.parse
import urllib.request
from collections.abc import Mapping
from datetime import datetime, timedelta, timezone
from pathlib import Path

BASE_URL = "https://adventofcode.com"
FIRST_YEAR = 2015
LAST_DAY = 25
SESSION_VARIABLE = "ADVENT_OF_CODE_SESSION"
SESSION_FILES = (Path(".adventofcode.session"), Path(".config") / "adventofcode.session")

# Puzzles unlock at midnight in UTC-5.
_RELEASE_TZ = timezone(timedelta(hours=-5))
_ARTICLE = re.compile(r"<article[^>]*>(.*?)</article>", re.DOTALL | re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")


def last_unlocked_day(year: int, now: datetime | None = None) -> int | None:
    """Latest puzzle day of ``year`` unlocked at ``now``, or None if none is."""
    now = datetime.now(_RELEASE_TZ) if now is None else now.astimezone(_RELEASE_TZ)
    if year < FIRST_YEAR or year > now.year:
        return None
    if year < now.year:
        return LAST_DAY
    if now.month != 12:
        return None
    return min(now.day, LAST_DAY)


def load_session_cookie(environ: Mapping[str, str], home: str | Path) -> str:
    """Find the session cookie in the environment or in the usual files under ``home``."""
    value = environ.get(SESSION_VARIABLE, "").strip()
    if value:
        return value
    for relative in SESSION_FILES:
        candidate = Path(home) / relative
        if candidate.is_file():
            value = candidate.read_text(encoding="utf-8").strip()
            if value:
                return value
    raise LookupError(
        f"no session cookie: set {SESSION_VARIABLE} or write it to ~/{SESSION_FILES[0]}"
    )


def _plain_text(page: str) -> str:
    match = _ARTICLE.search(page)
    body = match.group(1) if match else page
    return " ".join(html.unescape(_TAG.sub("", body)).split())


class AocClient:
    """Access to one day's puzzle of one year."""

    def __init__(self, session: str, year: int, day: int) -> None:
        if not session:
            raise ValueError("empty session cookie")
        if year < FIRST_YEAR:
            raise ValueError(f"invalid year: {year}")
        if not 1 <= day <= LAST_DAY:
            raise ValueError(f"invalid day: {day}")
        self.session = session
        self.year = year
        self.day = day

    @property
    def _day_url(self) -> str:
        return f"{BASE_URL}/{self.year}/day/{self.day}"

    def _request(self, url: str, data: bytes | None = None) -> str:
        request = urllib.request.Request(
            url,
            data=data,
            headers={"Cookie": f"session={self.session}", "User-Agent": "aoc2023"},
            method="POST" if data is not None else "GET",
        )
        with urllib.request.urlopen(request, timeout=30) as response:
            return response.read().decode("utf-8")

    def fetch_input(self) -> str:
        """Download the puzzle input."""
        return self._request(f"{self._day_url}/input")

    def save_input(self, path: str | Path) -> Path:
        """Download the puzzle input and write it to ``path``."""
        target = Path(path)
        target.write_text(self.fetch_input(), encoding="utf-8")
        return target

    def submit_answer(self, part: int, answer: object) -> str:
        """Submit ``answer`` for ``part`` and return the site's verdict as text."""
        if part not in (1, 2):
            raise ValueError(f"invalid part: {part}")
        body = urllib.parse.urlencode({"level": str(part), "answer": str(answer)})
        return _plain_text(self._request(f"{self._day_url}/answer", body.encode("ascii")))