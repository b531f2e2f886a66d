"""The 32-bit Mersenne Twister generator with the standard integer seeding."""

_N = 624
_M = 397
_MASK32 = 0xFFFFFFFF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF
_MATRIX_A = 0x9908B0DF
_INIT_MULT = 1812433253


class MT19937:
    """Mersenne Twister producing 32-bit unsigned integers when called."""

    def __init__(self, seed=5489):
        state = [seed & _MASK32]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULT * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = _N

    def _twist(self):
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER) | (mt[(i + 1) % _N] & _LOWER)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def __call__(self):
        """Return the next 32-bit output."""
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def __iter__(self):
        return self

    def __next__(self):
        return self()