import pytest

from aoc2023.day01 import (
    first_and_last_digits,
    first_and_last_digits_spelled,
    part1,
    part2,
)

EXAMPLE_1 = "1abc2\npqr3stu8vwx\na1b2c3d4e5f\ntreb7uchet\n"

EXAMPLE_2 = (
    "two1nine\n"
    "eightwothree\n"
    "abcone2threexyz\n"
    "xtwone3four\n"
    "4nineeightseven2\n"
    "zoneight234\n"
    "7pqrstsixteen\n"
)


@pytest.mark.parametrize("number", range(10, 100))
def test_two_digit_number_round_trips(number):
    assert first_and_last_digits(str(number)) == number
    assert first_and_last_digits_spelled(str(number)) == number


@pytest.mark.parametrize("digit", "123456789")
def test_single_digit_is_used_twice(digit):
    assert first_and_last_digits(f"ab{digit}cd") == int(digit * 2)


def test_surrounding_letters_are_ignored():
    assert first_and_last_digits("xx4yy7zz") == first_and_last_digits("47")


def test_inner_digits_are_ignored():
    assert first_and_last_digits("1234567") == first_and_last_digits("17")


def test_line_without_digit_raises():
    with pytest.raises(ValueError):
        first_and_last_digits("abcdef")


def test_spelled_line_without_digit_raises():
    with pytest.raises(ValueError):
        first_and_last_digits_spelled("nothing here")


def test_plain_part_ignores_words():
    assert first_and_last_digits("one5nine") == first_and_last_digits("5")


def test_spelled_word_counts_as_digit():
    assert first_and_last_digits_spelled("one") == first_and_last_digits("1")
    assert first_and_last_digits_spelled("one5nine") == first_and_last_digits("159")


def test_overlapping_words_both_count():
    assert first_and_last_digits_spelled("eightwo") == first_and_last_digits("82")
    assert first_and_last_digits_spelled("twone") == first_and_last_digits("21")


def test_spelled_matches_plain_without_words():
    line = "a1b2c3"
    assert first_and_last_digits_spelled(line) == first_and_last_digits(line)


def test_part1_sums_each_line():
    lines = EXAMPLE_1.splitlines()
    assert part1(EXAMPLE_1) == sum(first_and_last_digits(line) for line in lines)


def test_part2_sums_each_line():
    lines = EXAMPLE_2.splitlines()
    assert part2(EXAMPLE_2) == sum(
        first_and_last_digits_spelled(line) for line in lines
    )


def test_example_answers():
    assert part1(EXAMPLE_1) == 142
    assert part2(EXAMPLE_2) == 281


def test_part1_is_additive():
    first, second = "a3b9", "7x"
    assert part1(f"{first}\n{second}") == part1(first) + part1(second)


def test_part1_rejects_line_without_digit():
    with pytest.raises(ValueError):
        part1("12\nnone\n")