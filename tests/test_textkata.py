import pytest

from codekata.textkata import (
    are_anagrams,
    are_anagrams_optimized,
    clear_string,
    first_non_repeating,
    is_palindrome,
    length_of_longest_substring,
    main,
    reverse_runes,
    reverse_string,
)

ANAGRAM_CASES = [
    ("listen", "silent", True),
    ("triangle", "integral", True),
    ("apple", "pale", False),
]


@pytest.mark.parametrize("first,second,expected", ANAGRAM_CASES)
def test_are_anagrams(first, second, expected):
    assert are_anagrams(first, second) is expected


@pytest.mark.parametrize("first,second,expected", ANAGRAM_CASES)
def test_are_anagrams_optimized(first, second, expected):
    assert are_anagrams_optimized(first, second) is expected


@pytest.mark.parametrize("word", ["listen", "triangle", "apple", "éclair"])
def test_anagram_of_reversed_word(word):
    assert are_anagrams(word, word[::-1]) is True
    assert are_anagrams_optimized(word, word[::-1]) is True


def test_anagram_same_length_different_letters():
    assert are_anagrams("aab", "abb") is False
    assert are_anagrams_optimized("aab", "abb") is False


def test_longest_substring_sample():
    assert length_of_longest_substring("abcabcbb") == 3


@pytest.mark.parametrize("text", ["", "a", "bbbbb", "pwwkew", "abcdef", "dvdf"])
def test_longest_substring_bounds(text):
    result = length_of_longest_substring(text)
    assert result <= len(set(text))
    assert result <= len(text)
    if text:
        assert result >= 1
    else:
        assert result == 0


def test_longest_substring_all_unique():
    text = "abcdef"
    assert length_of_longest_substring(text) == len(text)


def test_reverse_string_sample():
    assert reverse_string("hello") == "olleh"


@pytest.mark.parametrize("text", ["", "hello", "!oG ,olleH", "añb"])
def test_reverse_round_trips(text):
    assert reverse_string(reverse_string(text)) == text
    assert reverse_runes(reverse_runes(text)) == text
    assert reverse_runes(text) == reverse_string(text)


def test_reverse_runes_greeting():
    assert reverse_runes("!oG ,olleH") == "Hello, Go!"


def test_clear_string_keeps_letters_only():
    result = clear_string("A man, a plan, a canal: Panama")
    assert result.isalpha()
    assert result == "AmanaplanacanalPanama"


def test_clear_string_keeps_non_ascii_letters():
    text = "Loïc-123"
    assert clear_string(text) == text[:4]


def test_is_palindrome_sample():
    assert is_palindrome("A man, a plan, a canal: Panama") is True


def test_is_not_palindrome():
    assert is_palindrome("hello") is False


def test_first_non_repeating_samples():
    assert first_non_repeating("swiss") == "w"
    assert first_non_repeating("aabbcc") == ""


def test_first_non_repeating_occurs_once():
    text = "abracadabra"
    char = first_non_repeating(text)
    assert text.count(char) == 1
    assert all(text.count(c) > 1 for c in text[: text.index(char)])


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Hello, world."
    assert lines[1] == "Hello, Go!"
    assert lines[2:6] == ["True", "True", "False", "False"]
    assert lines[6] == "3"
    assert lines[7] == "olleh"