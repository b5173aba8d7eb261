"""Deterministic pseudo-random generators with reproducible output.

``MT19937`` produces the same stream as the standard 32-bit Mersenne Twister.
Its ``uniform_int`` maps that stream onto a closed range the same way the GNU
C++ library's ``uniform_int_distribution`` does. ``GlibcRandom`` reproduces
the additive feedback generator behind glibc's ``srand``/``rand``.
"""

from __future__ import annotations

from collections import deque

_MASK32 = 0xFFFFFFFF


class MT19937:
    """32-bit Mersenne Twister seeded with a single integer."""

    _N = 624
    _M = 397
    _MATRIX_A = 0x9908B0DF
    _UPPER = 0x80000000
    _LOWER = 0x7FFFFFFF

    def __init__(self, seed: int) -> None:
        state = [seed & _MASK32]
        for i in range(1, self._N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        mt = self._state
        n = self._N
        for i in range(n):
            y = (mt[i] & self._UPPER) | (mt[(i + 1) % n] & self._LOWER)
            value = mt[(i + self._M) % n] ^ (y >> 1)
            if y & 1:
                value ^= self._MATRIX_A
            mt[i] = value
        self._index = 0

    def next_u32(self) -> int:
        """Return the next raw 32-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32

    def uniform_int(self, low: int, high: int) -> int:
        """Return an integer uniformly drawn from the closed range [low, high]."""
        span = high - low
        if span < 0:
            raise ValueError(f"empty range: low={low} > high={high}")
        if span == _MASK32:
            return low + self.next_u32()
        if span > _MASK32:
            raise ValueError("range is wider than 32 bits")
        width = span + 1
        product = self.next_u32() * width
        low_bits = product & _MASK32
        if low_bits < width:
            threshold = ((1 << 32) - width) % width
            while low_bits < threshold:
                product = self.next_u32() * width
                low_bits = product & _MASK32
        return low + (product >> 32)


class GlibcRandom:
    """The default ``rand()`` generator of the GNU C library."""

    _DEGREE = 31
    _SEPARATION = 3
    _DISCARD = 310

    def __init__(self, seed: int) -> None:
        seed &= _MASK32
        if seed == 0:
            seed = 1
        values = [seed]
        word = seed
        for _ in range(self._DEGREE - 1):
            hi, lo = divmod(word, 127773)
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            values.append(word)
        values.extend(values[: self._SEPARATION])
        self._window: deque[int] = deque(values, maxlen=self._DEGREE + self._SEPARATION)
        for _ in range(self._DISCARD):
            self._step()

    def _step(self) -> int:
        value = (self._window[-self._DEGREE] + self._window[-self._SEPARATION]) & _MASK32
        self._window.append(value)
        return value

    def rand(self) -> int:
        """Return the next value in the range [0, 2**31 - 1]."""
        return self._step() >> 1