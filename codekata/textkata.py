"""Small string exercises: anagrams, palindromes, reversals and more."""

from __future__ import annotations

from collections import Counter


def are_anagrams(first: str, second: str) -> bool:
    """Return True if both strings hold the same characters, counted."""
    if len(first) != len(second):
        return False
    first_counts = Counter(first)
    second_counts = Counter(second)
    if len(first_counts) != len(second_counts):
        return False
    return all(second_counts[char] == count for char, count in first_counts.items())


def are_anagrams_optimized(first: str, second: str) -> bool:
    """Return True if both strings are anagrams, using a single counter."""
    if len(first) != len(second):
        return False
    counts = Counter(first)
    counts.subtract(second)
    return all(count == 0 for count in counts.values())


def length_of_longest_substring(text: str) -> int:
    """Return the length of the longest run of text without a repeated character."""
    last_seen: dict[str, int] = {}
    longest = 0
    start = 0
    for index, char in enumerate(text):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        longest = max(longest, index - start + 1)
    return longest


def reverse_string(text: str) -> str:
    """Return ``text`` reversed."""
    return text[::-1]


def clear_string(text: str) -> str:
    """Keep only the letters of ``text``."""
    return "".join(char for char in text if char.isalpha())


def is_palindrome(text: str) -> bool:
    """Return True if the letters of ``text`` read the same both ways, ignoring case."""
    letters = clear_string(text.lower())
    return letters == reverse_string(letters)


def first_non_repeating(text: str) -> str:
    """Return the first character that occurs only once, or an empty string."""
    counts = Counter(text)
    return next((char for char in text if counts[char] == 1), "")


def reverse_runes(text: str) -> str:
    """Return ``text`` reversed character by character."""
    return text[::-1]


_SAMPLES = (
    (reverse_runes, ("!oG ,olleH",)),
    (are_anagrams, ("listen", "silent")),
    (are_anagrams_optimized, ("triangle", "integral")),
    (are_anagrams, ("apple", "pale")),
    (are_anagrams_optimized, ("apple", "pale")),
    (length_of_longest_substring, ("abcabcbb",)),
    (reverse_string, ("hello",)),
    (is_palindrome, ("A man, a plan, a canal: Panama",)),
    (first_non_repeating, ("swiss",)),
    (first_non_repeating, ("aabbcc",)),
)


def main(argv: list[str] | None = None) -> int:
    """Run the string exercises on their sample inputs and print the results."""
    results = [function(*arguments) for function, arguments in _SAMPLES]
    print("Hello, world.")
    for result in results:
        print(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())