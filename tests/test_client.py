from datetime import datetime, timezone
from unittest import mock

import pytest

from aoc2023.client import AocClient, last_unlocked_day, load_session_cookie


def _respond(urlopen, body: bytes):
    urlopen.return_value.__enter__.return_value.read.return_value = body


def test_past_year_fully_unlocked():
    assert last_unlocked_day(2023, datetime(2024, 3, 1, tzinfo=timezone.utc)) == 25


def test_december_day_after_release():
    now = datetime(2023, 12, 10, 6, 0, tzinfo=timezone.utc)
    assert last_unlocked_day(2023, now) == 10


def test_december_day_before_release():
    now = datetime(2023, 12, 10, 4, 0, tzinfo=timezone.utc)
    assert last_unlocked_day(2023, now) == 9


def test_not_unlocked_yet():
    assert last_unlocked_day(2023, datetime(2023, 11, 20, tzinfo=timezone.utc)) is None
    assert last_unlocked_day(2030, datetime(2023, 12, 20, tzinfo=timezone.utc)) is None
    assert last_unlocked_day(2010, datetime(2023, 12, 20, tzinfo=timezone.utc)) is None


def test_late_december_caps_at_last_day():
    now = datetime(2023, 12, 31, 12, 0, tzinfo=timezone.utc)
    assert last_unlocked_day(2023, now) == 25


def test_session_from_environment(tmp_path):
    session = "token"
    assert load_session_cookie({"ADVENT_OF_CODE_SESSION": session}, tmp_path) == session


def test_session_from_home_file(tmp_path):
    session = "secret"
    (tmp_path / ".adventofcode.session").write_text(session + "\n", encoding="utf-8")
    assert load_session_cookie({}, tmp_path) == session


def test_session_from_config_file(tmp_path):
    session = "placeholder"
    (tmp_path / ".config").mkdir()
    (tmp_path / ".config" / "adventofcode.session").write_text(session, encoding="utf-8")
    assert load_session_cookie({}, tmp_path) == session


def test_missing_session(tmp_path):
    with pytest.raises(LookupError):
        load_session_cookie({}, tmp_path)


@pytest.mark.parametrize("year, day", [(2014, 1), (2023, 0), (2023, 26)])
def test_client_rejects_invalid_arguments(year, day):
    with pytest.raises(ValueError):
        AocClient("token", year, day)


@mock.patch("urllib.request.urlopen")
def test_fetch_input_sends_cookie(urlopen):
    _respond(urlopen, b"1abc2\n")
    client = AocClient("token", 2023, 1)
    assert client.fetch_input() == "1abc2\n"
    request = urlopen.call_args[0][0]
    assert request.full_url.endswith("/2023/day/1/input")
    assert request.get_header("Cookie") == "session=token"
    assert request.get_method() == "GET"


@mock.patch("urllib.request.urlopen")
def test_save_input_writes_file(urlopen, tmp_path):
    _respond(urlopen, b"0 3 6\n")
    target = tmp_path / "day9.txt"
    written = AocClient("token", 2023, 9).save_input(target)
    assert written == target
    assert target.read_text(encoding="utf-8") == "0 3 6\n"


@mock.patch("urllib.request.urlopen")
def test_submit_answer_posts_and_reports(urlopen):
    _respond(
        urlopen,
        b"<html><main><article><p>That&#39;s the <em>right</em> answer!</p></article></main></html>",
    )
    outcome = AocClient("token", 2023, 4).submit_answer(2, 42)
    request = urlopen.call_args[0][0]
    assert request.get_method() == "POST"
    assert request.full_url.endswith("/2023/day/4/answer")
    assert request.data == b"level=2&answer=42"
    assert outcome == "That's the right answer!"


def test_submit_answer_rejects_invalid_part():
    with pytest.raises(ValueError):
        AocClient("token", 2023, 4).submit_answer(3, "1")