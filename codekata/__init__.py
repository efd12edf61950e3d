"""Small programming exercises: cards, strings, primes, link checks and a file upload service."""

__version__ = "0.1.0"