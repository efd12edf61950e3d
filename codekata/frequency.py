"""Map exercises: a colour table and sorting values by how often they occur."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping


def sort_by_frequency(values: Iterable[int]) -> list[int]:
    """Order values by descending frequency, ties broken by ascending value."""
    counts = Counter(values)
    ordered = sorted(counts.items(), key=lambda item: (-item[1], item[0]))
    return [value for value, count in ordered for _ in range(count)]


def default_colors() -> dict[str, str]:
    """Return the sample colour table: red, green and black with their hex codes."""
    colors = {
        "red": "#ff0000",
        "green": "#4bf745",
        "white": "#ffffff",
    }
    colors["black"] = "#000000"
    del colors["white"]
    return colors


def format_colors(colors: Mapping[str, str]) -> list[str]:
    """Return one description line per colour."""
    return [f"color: {color} hex: {hex_code}" for color, hex_code in colors.items()]


def main(argv: list[str] | None = None) -> int:
    """Print the colour table and a frequency-sorted sample."""
    for line in format_colors(default_colors()):
        print(line)
    print(sort_by_frequency([4, 3, 1, 6, 4, 1, 3, 4]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())