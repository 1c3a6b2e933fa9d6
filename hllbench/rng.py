"""64-bit Mersenne Twister and an unbiased bounded-integer draw."""

from __future__ import annotations

__all__ = ["MT19937_64", "uniform_int"]

_MASK64 = (1 << 64) - 1

_N = 312
_M = 156
_MATRIX_A = 0xB5026F5AA96619E9
_UPPER_MASK = 0xFFFFFFFF80000000
_LOWER_MASK = 0x7FFFFFFF
_INIT_MULT = 6364136223846793005

_U, _D = 29, 0x5555555555555555
_S, _B = 17, 0x71D67FFFEDA60000
_T, _C = 37, 0xFFF7EEE000000000
_L = 43


class MT19937_64:
    """The standard 64-bit Mersenne Twister engine (mt19937_64).

    Calling the engine returns the next 64-bit unsigned integer.
    """

    min = 0
    max = _MASK64

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK64]
        for i in range(1, _N):
            prev = state[-1]
            state.append((_INIT_MULT * (prev ^ (prev >> 62)) + i) & _MASK64)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        mt = self._state
        for i in range(_N):
            y = (mt[i] & _UPPER_MASK) | (mt[(i + 1) % _N] & _LOWER_MASK)
            value = mt[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            mt[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= (y >> _U) & _D
        y ^= (y << _S) & _B
        y ^= (y << _T) & _C
        y ^= y >> _L
        return y & _MASK64


def uniform_int(rng: MT19937_64, low: int, high: int) -> int:
    """Draw an integer uniformly from ``[low, high]`` using 64-bit engine output.

    Uses multiply-and-shift downscaling with rejection, so the result is
    unbiased and a given engine state always gives the same value.
    """
    if low > high:
        raise ValueError(f"empty range: low={low} > high={high}")
    span = high - low + 1
    if span > 1 << 64:
        raise ValueError("range wider than the engine output")
    if span == 1 << 64:
        return low + rng()

    product = rng() * span
    low_bits = product & _MASK64
    if low_bits < span:
        threshold = ((1 << 64) - span) % span
        while low_bits < threshold:
            product = rng() * span
            low_bits = product & _MASK64
    return low + (product >> 64)