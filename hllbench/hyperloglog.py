"""HyperLogLog cardinality sketches with byte-per-register and 6-bit packed storage."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator

__all__ = [
    "rho",
    "alpha_m",
    "estimate_from_registers",
    "PackedRegisters",
    "HyperLogLog",
    "PackedHyperLogLog",
]

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1
_TWO32 = 4294967296.0

_REGISTER_BITS = 6
_REGISTER_MASK = (1 << _REGISTER_BITS) - 1
_WORD_BITS = 64


def rho(w: int, width: int, max_rho: int) -> int:
    """Return one plus the leading zeros of ``w`` as a ``width``-bit word, capped at ``max_rho``.

    A zero word gives ``max_rho``.
    """
    if w == 0:
        return max_rho
    return min(width - w.bit_length() + 1, max_rho)


def alpha_m(m: int) -> float:
    """Return the bias-correction constant for ``m`` registers."""
    if m == 16:
        return 0.673
    if m == 32:
        return 0.697
    if m == 64:
        return 0.709
    return 0.7213 / (1.0 + 1.079 / float(m))


def estimate_from_registers(registers: Iterable[int]) -> float:
    """Estimate the cardinality from register values.

    Applies linear counting for small estimates when some registers are
    still zero, and the large-range correction for a 32-bit hash space.
    """
    values = list(registers)
    if not values:
        raise ValueError("at least one register is required")

    total = sum(math.ldexp(1.0, -r) for r in values)
    zeros = values.count(0)

    m = float(len(values))
    estimate = alpha_m(len(values)) * m * m / total

    if estimate <= 2.5 * m and zeros > 0:
        estimate = m * math.log(m / float(zeros))

    if estimate > (1.0 / 30.0) * _TWO32:
        ratio = estimate / _TWO32
        if ratio < 1.0:
            estimate = -_TWO32 * math.log(1.0 - ratio)

    return estimate


class PackedRegisters:
    """A fixed number of 6-bit registers packed into 64-bit words.

    Values written are reduced to their low 6 bits.
    """

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError("register count must be non-negative")
        self._count = count
        words = (count * _REGISTER_BITS + _WORD_BITS - 1) // _WORD_BITS
        self._words = [0] * words

    def __len__(self) -> int:
        return self._count

    def _locate(self, index: int) -> tuple[int, int]:
        if not -self._count <= index < self._count:
            raise IndexError("register index out of range")
        if index < 0:
            index += self._count
        return divmod(index * _REGISTER_BITS, _WORD_BITS)

    def __getitem__(self, index: int) -> int:
        word, shift = self._locate(index)
        words = self._words
        value = words[word] >> shift
        if shift > _WORD_BITS - _REGISTER_BITS and word + 1 < len(words):
            value |= words[word + 1] << (_WORD_BITS - shift)
        return value & _REGISTER_MASK

    def __setitem__(self, index: int, value: int) -> None:
        word, shift = self._locate(index)
        words = self._words
        v = value & _REGISTER_MASK

        mask = (_REGISTER_MASK << shift) & _MASK64
        words[word] = (words[word] & ~mask) | ((v << shift) & _MASK64)

        if shift > _WORD_BITS - _REGISTER_BITS and word + 1 < len(words):
            spill_mask = (1 << (shift - (_WORD_BITS - _REGISTER_BITS))) - 1
            part = (v >> (_WORD_BITS - shift)) & spill_mask
            words[word + 1] = (words[word + 1] & ~spill_mask) | part

    def __iter__(self) -> Iterator[int]:
        return (self[i] for i in range(self._count))


class HyperLogLog:
    """HyperLogLog over a 32-bit hash, one byte per register."""

    def __init__(self, b: int, hasher: Callable[[str], int]) -> None:
        if not 0 <= b <= 32:
            raise ValueError("b must be between 0 and 32")
        self.b = b
        self.hasher = hasher
        self._m = 1 << b
        self.registers = bytearray(self._m)

    def add(self, value: str) -> None:
        """Record one stream element."""
        x = self.hasher(value) & _MASK32
        index = x >> (32 - self.b) if self.b else 0
        w = (x << self.b) & _MASK32
        r = rho(w, 32, 33)
        if index < self._m and self.registers[index] < r:
            self.registers[index] = r

    def estimate(self) -> float:
        """Return the estimated number of distinct elements added."""
        return estimate_from_registers(self.registers)

    def m(self) -> int:
        """Return the number of registers."""
        return self._m


class PackedHyperLogLog:
    """HyperLogLog over a 64-bit hash with 6-bit packed registers."""

    def __init__(self, b: int, hasher: Callable[[str], int]) -> None:
        if not 0 <= b <= 64:
            raise ValueError("b must be between 0 and 64")
        self.b = b
        self.hasher = hasher
        self._m = 1 << b
        self.registers = PackedRegisters(self._m)

    def add(self, value: str) -> None:
        """Record one stream element."""
        x = self.hasher(value) & _MASK64
        index = x >> (64 - self.b) if self.b else 0
        w = (x << self.b) & _MASK64
        r = rho(w, 64, (64 - self.b) + 1) & 0xFF
        if index < self._m and self.registers[index] < r:
            self.registers[index] = r

    def estimate(self) -> float:
        """Return the estimated number of distinct elements added."""
        return estimate_from_registers(self.registers)

    def m(self) -> int:
        """Return the number of registers."""
        return self._m