# codekata

A collection of small, self-contained programming exercises. Each one is a
module you can import and a command you can run.

| Module | What it holds |
| --- | --- |
| `codekata.cards` | `Deck`, `new_deck`, `deal`, `load_deck_from_file`, `FileWriter`, `FileReader` |
| `codekata.textkata` | `are_anagrams`, `are_anagrams_optimized`, `length_of_longest_substring`, `reverse_string`, `reverse_runes`, `clear_string`, `is_palindrome`, `first_non_repeating` |
| `codekata.frequency` | `sort_by_frequency`, `default_colors`, `format_colors` |
| `codekata.primes` | `is_prime`, `primes_in_range`, `chunk_bounds`, `parallel_primes` |
| `codekata.parallel_sum` | `split_chunks`, `parallel_sum` |
| `codekata.linkcheck` | `check_link`, `check_links_sequential`, `check_links`, `watch_links`, `dump_response` |
| `codekata.logger` | `info`, `warn` and `error` loggers, `configure` |
| `codekata.store` | `StoreApp` (WSGI), `create_app` |
| `codekata.uploader` | `UploadApp` (WSGI), `backoff_delay`, `create_app` |
| `codekata.client` | `upload_file` |
| `codekata.tour` | `fibonacci`, `newton_sqrt`, `sum_below`, `double_until`, `word_count`, `pic`, `time_greeting`, `describe_parity`, `home_state`, `read_relative_file`, `EnglishBot`, `SpanishBot`, `Triangle`, `Square`, `Person`, `ContactInfo` |

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from codekata.cards import new_deck, deal
from codekata.textkata import is_palindrome, are_anagrams, first_non_repeating
from codekata.frequency import sort_by_frequency
from codekata.parallel_sum import parallel_sum
from codekata.primes import parallel_primes

deck = new_deck()                                 # 16 cards, "Ace of Spades" .. "Four of Clubs"
hand, rest = deal(deck, 5)                        # ValueError if 5 is out of range

is_palindrome("A man, a plan, a canal: Panama")   # True
are_anagrams("listen", "silent")                  # True
first_non_repeating("swiss")                      # "w"

sort_by_frequency([4, 3, 1, 6, 4, 1, 3, 4])       # [4, 4, 4, 1, 1, 3, 3, 6]
parallel_sum(list(range(1, 11)), 4)               # 55
parallel_primes(30, 4)                            # [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
```

A deck is a `list` of card names. `Deck.save_to_file(writer, filename)` writes
it as one comma-separated line through any object with a `write_file` method,
and `load_deck_from_file(reader, filename)` reads it back through any object
with a `read_file` method. `Deck.shuffle(rng)` accepts an optional
`random.Random`. A one-card deck cannot be shuffled and raises `ValueError`.

`watch_links(links, interval, max_checks)` is a generator that yields
`(link, up)` pairs. It checks each link again `interval` seconds after its last
check, and it runs forever unless `max_checks` is given. A link counts as up
when any HTTP response arrives, whatever its status.

## Commands

```
codekata-cards                       # print a freshly shuffled deck
codekata-strings                     # run the string puzzles on sample inputs
codekata-frequency                   # the colour table and a frequency sort
codekata-primes [LIMIT] [--workers N]          # primes below LIMIT (default 30, 4 workers)
codekata-parallel-sum [VALUES...] [--workers N] # sums of VALUES (default 1..10)
codekata-linkcheck [MODE] [LINKS...] [--interval SECONDS]
codekata-tour [FILE]                 # the tour exercises; prints FILE if given
```

`codekata-linkcheck` modes:

- `sequential` checks the links one after another.
- `concurrent` (the default) checks them all at once and prints `up` or `down` for each.
- `watch` re-checks every link at the given interval until interrupted.
- `dump` prints the body of one URL chunk by chunk, with each chunk's byte count.

### File upload pipeline

Start the storage server. It listens on port 8181, accepts `POST /store`, and
writes the `file` form field into `./uploads`. Then start the uploader. It
listens on port 8080, accepts `POST /upload`, and forwards the request to the
storage server:

```
codekata-store    [--host HOST] [--port 8181] [--upload-dir ./uploads]
codekata-uploader [--host HOST] [--port 8080] [--target-url http://localhost:8181/store]
```

Then send a file through the uploader with the client, which prints the
server's answer:

```
codekata-client path/to/file.pdf [--url http://localhost:8080/upload] [--field file]
```

Both servers answer any method other than `POST` with `405`. When the storage
server returns a 5xx status or cannot be reached, the uploader retries up to
five times in all. Before each retry it waits an exponentially growing delay
with random jitter (`backoff_delay`). When every attempt fails, it answers
`502 Bad Gateway`. Any other answer from the storage server, including 4xx, is
passed back to the client unchanged.

## What this package does not do

The storage server only writes files. It cannot list, download or delete stored
files, and a new upload with the same name replaces the old file. Neither server
has authentication or TLS, and both run on Werkzeug's development server.