# hashboggle

Three small, self-contained tools and the random generator they share:

- **Boggle solver** (`hashboggle.boggle`) – generates a random square board
  using Scrabble letter frequencies and finds dictionary words running
  straight across (left to right), down, or diagonally down-right.
- **String hash** (`hashboggle.strhash`) – hashes strings of letters and
  digits by reading them as base-36 numbers in groups of six characters,
  taken from the end of the string, and weighting each group with a fixed or
  random multiplier. The result is kept to 64 bits.
- **Hash table** (`hashboggle.hashtable`) – an open-addressing map with
  linear or double-hash probing, deletion markers and growth through a fixed
  list of prime capacities.
- **Random generator** (`hashboggle.mt19937`) – a 32-bit Mersenne Twister,
  `MT19937(seed)`, whose instances return the next 32-bit number when called
  and can also be iterated.

## Installation

```
pip install .
```

## Command line

Generate and solve a board of a given size and seed against a dictionary
file (whitespace-separated words):

```
boggle-driver 5 42 words.txt
```

It prints the board, then `Found N words:` and the words in sorted order,
separated by commas. With fewer than three arguments it prints a usage line
and exits with status 1. A dictionary file that cannot be opened raises
`ValueError`.

Hash a string with the fixed debugging multipliers:

```
str-hash antidisestablishmentarianism
```

This prints `h(antidisestablishmentarianism)=1137429692708383810`.

Run a short hash-table demonstration (inserts, lookups, removals and sizes):

```
ht-demo
```

## Library use

### Boggle

```python
from hashboggle.boggle import gen_board, format_board, print_board, parse_dict, boggle

board = gen_board(4, 7)          # list of lists of upper-case letters
print(format_board(board))       # each letter right-aligned in two columns
words, prefixes = parse_dict("words.txt")
print(sorted(boggle(words, prefixes, board)))
```

`parse_dict` returns the set of words and the set of their proper prefixes,
with the empty string included. `boggle` starts from every cell in each of
the three directions and keeps, for each start and direction, the longest
dictionary word found along that line; the search along a line stops as
soon as the letters read so far are neither a word nor a prefix. Words are
matched exactly as they appear in the dictionary, so an upper-case
dictionary is needed to match the board's letters.

### String hash

```python
from hashboggle.strhash import StringHash, letter_digit_to_number

h = StringHash(debug=True)
h("abc")                    # 9953503400
h("ABC") == h("abc")        # True: letters are case-insensitive
letter_digit_to_number("7") # 33
```

`StringHash(debug=False)` draws its five multipliers (`r_values`) from a
Mersenne Twister seeded with the current time; `generate_r_values()` draws a
fresh set. Characters other than letters and digits count as 0. Only the
last 30 characters of a key take part in the hash.

### Hash table

```python
from hashboggle.hashtable import HashTable, DoubleHashProber, LinearProber
from hashboggle.strhash import StringHash

table = HashTable(0.7, DoubleHashProber(StringHash(True)))
table.insert("hi1", 1)
table["hi1"] += 1
"hi1" in table        # True
table.find("hi1")     # ("hi1", 2)
table.remove("hi1")
len(table)            # 0
table.empty()         # True
```

`HashTable(resize_alpha=0.4, prober=None, hasher=hash, key_equal=operator.eq)`
uses a `LinearProber` when no prober is given. The table grows to the next
prime capacity when an insertion finds the load factor at or above
`resize_alpha`. Removed items are marked deleted and their slots are reused
by later insertions.

- `find(key)` returns a `(key, value)` tuple or `None`.
- `at(key)` and `table[key]` raise `KeyError` for a missing key.
- `table[key] = value` is the same as `insert(key, value)`.
- `report_all(out)` writes `Bucket i: key value` for every occupied slot,
  deleted ones included, to a text stream.
- `total_probes()` and `clear_total_probes()` read and reset a count of
  probe steps taken.

Running out of capacities, or finding no free slot, raises `HashTableError`,
a subclass of `RuntimeError`.

## Tests

```
pip install .[test]
pytest
```