import random

import pytest

from codekata.cards import (
    Deck,
    FileReader,
    FileWriter,
    deal,
    load_deck_from_file,
    main,
    new_deck,
)


class FakeFileWriter:
    def __init__(self):
        self.calls = []

    def write_file(self, filename, data, perm):
        self.calls.append((filename, data, perm))


class FakeFileReader:
    def read_file(self, filename):
        return new_deck().to_string().encode("utf-8")


def test_new_deck():
    d = new_deck()
    assert len(d) == 16
    assert d[0] == "Ace of Spades"
    assert d[-1] == "Four of Clubs"


def test_save_to_file_uses_writer():
    d = new_deck()
    writer = FakeFileWriter()
    assert d.save_to_file(writer, "test") is None
    assert len(writer.calls) == 1
    filename, data, perm = writer.calls[0]
    assert filename == "test"
    assert data.decode("utf-8") == d.to_string()
    assert perm == 0o666


def test_load_deck_from_file_with_fake_reader():
    d = load_deck_from_file(FakeFileReader(), "test")
    assert d == new_deck()
    assert isinstance(d, Deck)


def test_real_file_round_trip(tmp_path):
    path = tmp_path / "deck.txt"
    d = new_deck()
    d.save_to_file(FileWriter(), str(path))
    assert FileReader().read_file(str(path)) == d.to_string().encode("utf-8")
    assert load_deck_from_file(FileReader(), str(path)) == d


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_deck_from_file(FileReader(), str(tmp_path / "missing"))


def test_to_string_splits_back():
    d = new_deck()
    assert d.to_string().split(",") == list(d)


def test_deal_splits_deck():
    d = new_deck()
    hand, rest = deal(d, 5)
    assert len(hand) == 5
    assert len(rest) == 11
    assert hand + rest == d
    assert hand[0] == "Ace of Spades"


@pytest.mark.parametrize("size", [-1, 17])
def test_deal_out_of_range(size):
    with pytest.raises(ValueError):
        deal(new_deck(), size)


def test_shuffle_keeps_cards():
    d = new_deck()
    d.shuffle(random.Random(42))
    assert sorted(d) == sorted(new_deck())
    assert len(d) == 16


def test_shuffle_is_reproducible_with_seed():
    first = new_deck()
    second = new_deck()
    first.shuffle(random.Random(7))
    second.shuffle(random.Random(7))
    assert first == second


def test_shuffle_single_card_raises():
    d = Deck(["Ace of Spades"])
    with pytest.raises(ValueError):
        d.shuffle(random.Random(1))


def test_show_prints_positions(capsys):
    new_deck().show()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "0 Ace of Spades"
    assert lines[-1] == "15 Four of Clubs"


def test_main_prints_shuffled_deck(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out.strip()
    assert sorted(out.split(",")) == sorted(new_deck())