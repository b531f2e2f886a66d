"""Straight-line Boggle solver, base-36 string hash, open-addressing hash table and a Mersenne Twister."""

__version__ = "0.1.0"
__all__ = ["mt19937", "strhash", "boggle", "hashtable"]