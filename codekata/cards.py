"""A small deck of playing cards that can be shuffled, dealt, saved and loaded."""

from __future__ import annotations

import os
import random
import sys
from typing import Protocol

SUITS = ("Spades", "Dimonds", "Hearts", "Clubs")
VALUES = ("Ace", "Two", "Three", "Four")
SEPARATOR = ","
DEFAULT_PERM = 0o666


class Writer(Protocol):
    """Anything that can write bytes to a named file."""

    def write_file(self, filename: str, data: bytes, perm: int) -> None: ...


class Reader(Protocol):
    """Anything that can read the bytes of a named file."""

    def read_file(self, filename: str) -> bytes: ...


class FileWriter:
    """Writes data to the file system."""

    def write_file(self, filename: str, data: bytes, perm: int = DEFAULT_PERM) -> None:
        """Write ``data`` to ``filename``, creating it with ``perm`` if needed."""
        fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, perm)
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)


class FileReader:
    """Reads data from the file system."""

    def read_file(self, filename: str) -> bytes:
        """Return the whole content of ``filename``."""
        with open(filename, "rb") as handle:
            return handle.read()


class Deck(list):
    """An ordered list of card names."""

    def show(self) -> None:
        """Print every card with its position."""
        for position, card in enumerate(self):
            print(position, card)

    def to_string(self) -> str:
        """Join the cards into one comma separated string."""
        return SEPARATOR.join(self)

    def save_to_file(self, writer: Writer, filename: str) -> None:
        """Save the deck through ``writer`` under ``filename``."""
        writer.write_file(filename, self.to_string().encode("utf-8"), DEFAULT_PERM)

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle in place by swapping each card with a random earlier-chosen slot.

        Raises ValueError for a deck of a single card, which has no slot to pick.
        """
        rng = rng if rng is not None else random.Random()
        size = len(self)
        for i in range(size):
            new_position = rng.randrange(size - 1)
            self[i], self[new_position] = self[new_position], self[i]


def new_deck() -> Deck:
    """Return a fresh, ordered deck of sixteen cards."""
    return Deck(f"{value} of {suit}" for suit in SUITS for value in VALUES)


def deal(deck: Deck, hand_size: int) -> tuple[Deck, Deck]:
    """Split ``deck`` into a hand of ``hand_size`` cards and the remaining cards."""
    if not 0 <= hand_size <= len(deck):
        raise ValueError(f"hand size {hand_size} out of range for a deck of {len(deck)}")
    return Deck(deck[:hand_size]), Deck(deck[hand_size:])


def load_deck_from_file(reader: Reader, filename: str) -> Deck:
    """Load a deck saved by :meth:`Deck.save_to_file`."""
    data = reader.read_file(filename)
    return Deck(data.decode("utf-8").split(SEPARATOR))


def main(argv: list[str] | None = None) -> int:
    """Print a freshly shuffled deck."""
    cards = new_deck()
    cards.shuffle()
    print(cards.to_string())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())