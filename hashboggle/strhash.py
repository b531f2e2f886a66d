"""String hash over base-36 groups of six characters, weighted by r values."""

import sys
import time

from hashboggle.mt19937 import MT19937

DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)

_MASK64 = 0xFFFFFFFFFFFFFFFF
_GROUP_LEN = 6
_GROUPS = 5


def letter_digit_to_number(letter):
    """Map a-z (any case) to 0-25 and 0-9 to 26-35; anything else maps to 0."""
    ch = letter.lower()
    if "a" <= ch <= "z":
        return ord(ch) - ord("a")
    if "0" <= ch <= "9":
        return 26 + ord(ch) - ord("0")
    return 0


class StringHash:
    """Callable string hash; with debug off the r values are drawn at random."""

    def __init__(self, debug=True):
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def _groups(self, key):
        """Return the five base-36 group values, the last one for the key's tail."""
        w = [0] * _GROUPS
        end = len(key)
        for group in reversed(range(_GROUPS)):
            if end <= 0:
                break
            value = 0
            for ch in key[max(0, end - _GROUP_LEN):end]:
                value = value * 36 + letter_digit_to_number(ch)
            w[group] = value
            end -= _GROUP_LEN
        return w

    def __call__(self, key):
        total = sum(r * w for r, w in zip(self.r_values, self._groups(key)))
        return total & _MASK64

    def generate_r_values(self):
        """Draw new r values from a generator seeded with the current time."""
        seed = time.time_ns() & 0xFFFFFFFF
        generator = MT19937(seed)
        self.r_values = [generator() for _ in range(_GROUPS)]


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        print("Please provide a string to hash")
        return 1
    key = argv[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())