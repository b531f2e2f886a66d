"""Open-addressing hash table with pluggable probing strategies."""

import operator
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from hashboggle.strhash import StringHash

# Prime table sizes used as the table grows.
CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

# Moduli used for the double-hash step size as the table grows.
DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class HashTableError(RuntimeError):
    """Raised when the table has no free slot or cannot grow any further."""


class Prober(ABC):
    """Produces the sequence of table locations to try for one key."""

    def __init__(self):
        self.start = 0
        self.m = 0
        self.num_probes = 0

    def init(self, start, m, key):
        """Begin a new probe sequence at start in a table of size m."""
        del key
        self.start = start
        self.m = m
        self.num_probes = 0

    @abstractmethod
    def next(self):
        """Return the next location, or None once every slot has been tried."""


class LinearProber(Prober):
    """Tries consecutive slots, wrapping around the table."""

    def next(self):
        if self.num_probes >= self.m:
            return None
        loc = (self.start + self.num_probes) % self.m
        self.num_probes += 1
        return loc


class DoubleHashProber(Prober):
    """Steps through the table by an amount derived from a second hash of the key."""

    def __init__(self, h2=None):
        super().__init__()
        self.h2 = h2 if h2 is not None else StringHash()
        self.step = 0

    @staticmethod
    def _modulus_for(table_size):
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def init(self, start, m, key):
        super().init(start, m, key)
        modulus = self._modulus_for(m)
        self.step = modulus - self.h2(key) % modulus

    def next(self):
        if self.num_probes >= self.m:
            return None
        loc = (self.start + self.num_probes * self.step) % self.m
        self.num_probes += 1
        return loc


@dataclass
class _HashItem:
    key: Any
    value: Any
    deleted: bool = False


class HashTable:
    """Map from keys to values stored by open addressing with lazy deletion."""

    def __init__(self, resize_alpha=0.4, prober=None, hasher=hash, key_equal=operator.eq):
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hash = hasher
        self._key_equal = key_equal
        self._total_probes = 0
        self._cap_index = 0
        self._count = 0
        self._table = [None] * CAPACITIES[0]

    @property
    def _capacity(self):
        return CAPACITIES[self._cap_index]

    def __len__(self):
        return self._count

    def empty(self):
        """Return True when the table holds no live items."""
        return self._count == 0

    def _probe_sequence(self, key):
        self._prober.init(self._hash(key) % self._capacity, self._capacity, key)
        while True:
            loc = self._prober.next()
            self._total_probes += 1
            if loc is None:
                return
            yield loc

    def _is_live_match(self, slot, key):
        return slot is not None and not slot.deleted and self._key_equal(slot.key, key)

    def insert(self, key, value):
        """Add key with value, or replace the value of an existing key."""
        if self._count / self._capacity >= self._resize_alpha:
            self._resize()

        first_deleted = None
        for loc in self._probe_sequence(key):
            slot = self._table[loc]
            if slot is None:
                target = loc if first_deleted is None else first_deleted
                self._table[target] = _HashItem(key, value)
                self._count += 1
                return
            if self._is_live_match(slot, key):
                slot.value = value
                return
            if slot.deleted and first_deleted is None:
                first_deleted = loc

        if first_deleted is not None:
            self._table[first_deleted] = _HashItem(key, value)
            self._count += 1
            return
        raise HashTableError("No available slot")

    def _locate(self, key):
        """Return the live item holding key, or None."""
        for loc in self._probe_sequence(key):
            slot = self._table[loc]
            if slot is None:
                return None
            if self._is_live_match(slot, key):
                return slot
        return None

    def remove(self, key):
        """Mark the item with key as deleted; do nothing if it is absent."""
        item = self._locate(key)
        if item is not None:
            item.deleted = True
            self._count -= 1

    def find(self, key):
        """Return the (key, value) pair for key, or None if it is absent."""
        item = self._locate(key)
        return None if item is None else (item.key, item.value)

    def at(self, key):
        """Return the value for key, raising KeyError if it is absent."""
        item = self._locate(key)
        if item is None:
            raise KeyError("Bad key")
        return item.value

    def __getitem__(self, key):
        return self.at(key)

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __contains__(self, key):
        return self._locate(key) is not None

    def _resize(self):
        if self._cap_index + 1 >= len(CAPACITIES):
            raise HashTableError("No more capacities available")
        self._cap_index += 1
        old_table = self._table
        self._table = [None] * self._capacity
        self._count = 0
        for item in old_table:
            if item is not None and not item.deleted:
                self.insert(item.key, item.value)

    def report_all(self, out):
        """Write every occupied bucket, including deleted ones, to out."""
        for index, item in enumerate(self._table):
            if item is not None:
                out.write(f"Bucket {index}: {item.key} {item.value}\n")

    def clear_total_probes(self):
        self._total_probes = 0

    def total_probes(self):
        """Return the number of probe steps taken since the last reset."""
        return self._total_probes


def main(argv=None):
    del argv
    table = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if table.find("hi1") is not None:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if table.find("doesnotexist") is None:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if table.find("hi9") is not None:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())