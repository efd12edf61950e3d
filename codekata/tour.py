"""Warm-up exercises: closures, loops, maps, slices, structs, interfaces and files."""

from __future__ import annotations

import argparse
import datetime
import math
import os
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field, fields
from typing import Protocol

DEFAULT_SQRT_ITERATIONS = 10


class Bot(Protocol):
    """Anything that can greet."""

    def greeting(self) -> str: ...


class EnglishBot:
    """A bot that greets in English."""

    def greeting(self) -> str:
        """Return the English greeting."""
        return "Hi there!"


class SpanishBot:
    """A bot that greets in Spanish."""

    def greeting(self) -> str:
        """Return the Spanish greeting."""
        return "Hola!"


class Shape(Protocol):
    """Anything with an area."""

    def area(self) -> float: ...


@dataclass(frozen=True)
class Triangle:
    """A triangle given by its base and height."""

    base: float
    height: float

    def area(self) -> float:
        """Return half of base times height."""
        return 0.5 * self.base * self.height


@dataclass(frozen=True)
class Square:
    """A square given by the length of its side."""

    side_length: float

    def area(self) -> float:
        """Return the side length squared."""
        return self.side_length * self.side_length


@dataclass
class ContactInfo:
    """How to reach a person."""

    email: str = ""
    phone: str = ""


@dataclass
class Person:
    """A person with a name and contact details."""

    first_name: str = ""
    last_name: str = ""
    contact: ContactInfo = field(default_factory=ContactInfo)


def fibonacci() -> Iterator[int]:
    """Yield the Fibonacci numbers, starting 0, 1, 1, 2, ..."""
    a, b = 1, 0
    while True:
        a, b = b, a + b
        yield a


def _newton_steps(x: float, iterations: int) -> Iterator[float]:
    z = 1.0
    for _ in range(iterations):
        z -= (z * z - x) / (2 * z)
        yield z


def newton_sqrt(x: float, iterations: int = DEFAULT_SQRT_ITERATIONS) -> float:
    """Approximate the square root of ``x`` with Newton's method, starting from 1."""
    if iterations < 0:
        raise ValueError(f"iterations must not be negative, got {iterations}")
    z = 1.0
    for z in _newton_steps(x, iterations):
        pass
    return z


def sum_below(limit: int) -> int:
    """Return the sum of the integers from 0 up to, not including, ``limit``."""
    return sum(range(limit))


def double_until(limit: int) -> int:
    """Start at 1 and keep doubling while the value is below ``limit``."""
    total = 1
    while total < limit:
        total += total
    return total


def word_count(text: str) -> dict[str, int]:
    """Count the whitespace separated words of ``text``."""
    return dict(Counter(text.split()))


def pic(dx: int, dy: int) -> list[list[int]]:
    """Return a ``dy`` by ``dx`` grid of bytes.

    All rows share one pattern, ``x ^ (dy - 1)`` truncated to a byte, as every
    row is filled from the same line buffer, whose last fill wins.
    """
    if dx < 0 or dy < 0:
        raise ValueError(f"dimensions must not be negative, got {dx}x{dy}")
    line = [(x ^ (dy - 1)) & 0xFF for x in range(dx)] if dy else []
    return [list(line) for _ in range(dy)]


def time_greeting(hour: int | None = None) -> str:
    """Return a greeting fitting ``hour``, or the current hour when none is given."""
    if hour is None:
        hour = datetime.datetime.now().hour
    if hour < 12:
        return "Good morning!"
    if hour < 17:
        return "Good afternoon."
    return "Good evening."


def describe_parity(number: int) -> str:
    """Say whether ``number`` is even or odd."""
    return f"{number} is {'even' if number % 2 == 0 else 'odd'}"


def home_state() -> str:
    """Return the name of the home state."""
    return "California"


def _relative_path(filename: str, base: str | os.PathLike[str] | None) -> str:
    directory = os.fspath(base) if base is not None else os.getcwd()
    return f"{directory}/{filename}"


def read_relative_file(filename: str, base: str | os.PathLike[str] | None = None) -> str:
    """Return the text of ``filename`` inside ``base``, the working directory by default.

    Raises ``OSError`` if the file cannot be read.
    """
    with open(_relative_path(filename, base), "rb") as handle:
        return handle.read().decode("utf-8", errors="replace")


def _format_float(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def _person_fields(person: Person) -> str:
    contact = " ".join(f"{f.name}:{getattr(person.contact, f.name)}" for f in fields(ContactInfo))
    return f"{{firstName:{person.first_name} lastName:{person.last_name} contact:{{{contact}}}}}"


def main(argv: list[str] | None = None) -> int:
    """Run the warm-up exercises and print their results."""
    parser = argparse.ArgumentParser(prog="tour", description=main.__doc__)
    parser.add_argument("file", nargs="?", help="file to print, relative to the working directory")
    args = parser.parse_args(argv)

    try:
        print("hello")

        numbers = fibonacci()
        for _ in range(10):
            print(next(numbers))

        print(sum_below(10))
        print(double_until(1000))

        print(_format_float(math.sqrt(4.0)))
        for step, z in enumerate(_newton_steps(4.0, DEFAULT_SQRT_ITERATIONS), start=1):
            print(f"Iteration {step}, value = {_format_float(z)}")
        print(_format_float(newton_sqrt(4.0)))

        print(word_count("I am learning Go and Go is fun"))

        i, j = 42, 2701
        print(i)
        i = 21
        print(i)
        j //= 37
        print(j)

        for age in (0, 10, 20, 30):
            print("My age is", age)

        nobody = Person()
        someone = Person("Jane", "Doe", ContactInfo("jane@example.com", "000000"))
        print(_person_fields(nobody))
        print(someone)

        print(time_greeting())
        for number in range(11):
            print(describe_parity(number))
        print(home_state())

        for bot in (EnglishBot(), SpanishBot()):
            print(bot.greeting())
        for shape in (Triangle(10, 10), Square(10)):
            print(_format_float(shape.area()))

        if args.file is not None:
            path = _relative_path(args.file, None)
            print(f"Open filename {path}")
            print(read_relative_file(args.file), end="")
    finally:
        print("world")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())