"""Deterministic stream of random short strings."""

from __future__ import annotations

from collections.abc import Iterator

from hllbench.rng import MT19937_64, uniform_int

__all__ = ["ALPHABET", "MIN_LENGTH", "MAX_LENGTH", "RandomStream"]

ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "-"
)
MIN_LENGTH = 1
MAX_LENGTH = 30


class RandomStream(Iterator[str]):
    """Yields ``total_size`` random strings of 1 to 30 characters from a seed."""

    def __init__(self, seed: int, total_size: int) -> None:
        if total_size < 0:
            raise ValueError("total_size must be non-negative")
        self._rng = MT19937_64(seed)
        self.total_size = total_size
        self.produced = 0

    def __iter__(self) -> RandomStream:
        return self

    def __next__(self) -> str:
        if self.produced >= self.total_size:
            raise StopIteration
        rng = self._rng
        length = uniform_int(rng, MIN_LENGTH, MAX_LENGTH)
        last = len(ALPHABET) - 1
        value = "".join(ALPHABET[uniform_int(rng, 0, last)] for _ in range(length))
        self.produced += 1
        return value

    def __len__(self) -> int:
        return self.total_size