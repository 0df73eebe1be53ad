"""Line-by-line splitting of comma-separated text."""

from __future__ import annotations

import argparse
from typing import Iterable, Iterator

DEFAULT_PATH = "../data.csv"


def split_fields(line: str) -> list[str]:
    """Split a line on commas; a trailing comma yields no extra empty field."""
    fields = line.split(",")
    if fields[-1] == "":
        fields.pop()
    return fields


def parse_lines(lines: Iterable[str]) -> Iterator[tuple[str, list[str]]]:
    """Yield each line (without its newline) together with its fields."""
    for raw in lines:
        line = raw[:-1] if raw.endswith("\n") else raw
        yield line, split_fields(line)


def main(argv=None) -> int:
    """Print every line of a CSV file followed by each of its fields."""
    parser = argparse.ArgumentParser(description="Print the lines and fields of a CSV file.")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    try:
        handle = open(args.path, encoding="utf-8", newline="")
    except OSError:
        print(f"Unable to open file: {args.path}")
        return 1

    with handle:
        for line, fields in parse_lines(handle):
            print(line)
            for field in fields:
                print(field)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())