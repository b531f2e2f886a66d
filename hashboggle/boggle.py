"""Straight-line Boggle: find dictionary words along rows, columns and diagonals."""

import re
import sys

from hashboggle.mt19937 import MT19937

# Scrabble letter frequencies for A..Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
LETTERS = tuple(
    chr(ord("A") + offset) for offset, count in enumerate(_FREQUENCIES) for _ in range(count)
)
DIRECTIONS = ((0, 1), (1, 0), (1, 1))


def gen_board(n, seed):
    """Build an n x n board of letters drawn with Scrabble frequencies."""
    rng = MT19937(seed)
    return [[LETTERS[rng() % len(LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board):
    """Render the board with each letter right-aligned in a two-character cell."""
    return "".join("".join(f"{ch:>2}" for ch in row) + "\n" for row in board)


def print_board(board):
    print(format_board(board), end="")


def parse_dict(fname):
    """Read whitespace-separated words; return (words, proper prefixes plus "")."""
    try:
        with open(fname, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words = set(text.split())
    prefixes = {word[:i] for word in words for i in range(1, len(word))}
    prefixes.add("")
    return words, prefixes


def _longest_on_ray(dictionary, prefix, board, row, col, dr, dc):
    """Return the longest word reachable along one ray, or None."""
    size = len(board)
    word = ""
    best = None
    while row < size and col < size:
        word += board[row][col]
        in_dict = word in dictionary
        if not in_dict and word not in prefix:
            break
        if in_dict:
            best = word
        row += dr
        col += dc
    return best


def boggle(dictionary, prefix, board):
    """Return the set of longest words found from every cell in each direction."""
    size = len(board)
    found = set()
    for row in range(size):
        for col in range(size):
            for dr, dc in DIRECTIONS:
                word = _longest_on_ray(dictionary, prefix, board, row, col, dr, dc)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if len(argv) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = _atoi(argv[0])
    seed = _atoi(argv[1])
    board = gen_board(max(size, 0), seed)
    print_board(board)
    dictionary, prefix = parse_dict(argv[2])
    found = boggle(dictionary, prefix, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())