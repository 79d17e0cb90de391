"""Day 5: mapping seeds through a chain of almanac ranges."""


def _parse_number(token: str) -> int:
    if not (token.isascii() and token.isdecimal()):
        raise ValueError(f"invalid number: {token!r}")
    return int(token)


def part1(text: str) -> int:
    """Lowest location reached by any seed through every map in turn."""
    pending: list[int] = []
    mapped: list[int] = []
    for line in text.splitlines():
        if not line:
            continue
        if ":" in line and not line.endswith(":"):
            pending = []
            mapped = [_parse_number(token) for token in line.split(":")[1].split(" ") if token]
        elif any(char.isalpha() for char in line):
            pending = mapped + pending
            mapped = []
        else:
            numbers = [_parse_number(token) for token in line.split(" ")]
            if len(numbers) < 3:
                raise ValueError(f"incomplete range line: {line!r}")
            destination, source, length = numbers[:3]
            unmatched = []
            for value in pending:
                if source <= value <= source + length - 1:
                    mapped.append(destination + value - source)
                else:
                    unmatched.append(value)
            pending = unmatched

    locations = mapped + pending
    if not locations:
        raise ValueError("no seeds given")
    return min(locations)