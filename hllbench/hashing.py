"""Seeded FNV-1a string hashes with avalanche finalizers."""

from __future__ import annotations

from dataclasses import dataclass

from hllbench.rng import MT19937_64

__all__ = ["fmix32", "fmix64", "Hash32", "Hash64", "HashFuncGen"]

_MASK32 = (1 << 32) - 1
_MASK64 = (1 << 64) - 1

_FNV32_OFFSET = 2166136261
_FNV32_PRIME = 16777619
_FNV64_OFFSET = 14695981039346656037
_FNV64_PRIME = 1099511628211


def fmix32(x: int) -> int:
    """Mix all bits of a 32-bit value."""
    x &= _MASK32
    x ^= x >> 16
    x = (x * 0x7FEB352D) & _MASK32
    x ^= x >> 15
    x = (x * 0x846CA68B) & _MASK32
    x ^= x >> 16
    return x


def fmix64(x: int) -> int:
    """Mix all bits of a 64-bit value."""
    x &= _MASK64
    x ^= x >> 33
    x = (x * 0xFF51AFD7ED558CCD) & _MASK64
    x ^= x >> 33
    x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    x ^= x >> 33
    return x


def _as_bytes(s: str | bytes) -> bytes:
    return s.encode("utf-8") if isinstance(s, str) else bytes(s)


@dataclass(frozen=True)
class Hash32:
    """32-bit seeded hash of a string's bytes."""

    seed: int

    def __call__(self, s: str | bytes) -> int:
        h = (_FNV32_OFFSET ^ self.seed) & _MASK32
        for byte in _as_bytes(s):
            h = ((h ^ byte) * _FNV32_PRIME) & _MASK32
        return fmix32(h)


@dataclass(frozen=True)
class Hash64:
    """64-bit seeded hash of a string's bytes."""

    seed: int

    def __call__(self, s: str | bytes) -> int:
        h = (_FNV64_OFFSET ^ self.seed) & _MASK64
        for byte in _as_bytes(s):
            h = ((h ^ byte) * _FNV64_PRIME) & _MASK64
        return fmix64(h)


class HashFuncGen:
    """Produces hash functions with seeds drawn from a seeded engine."""

    def __init__(self, seed: int) -> None:
        self._rng = MT19937_64(seed)

    def make(self) -> Hash32:
        """Return a new 32-bit hash with a non-zero seed."""
        seed = self._rng() & _MASK32
        return Hash32(seed or 1)

    def make64(self) -> Hash64:
        """Return a new 64-bit hash with a non-zero seed."""
        seed = self._rng()
        return Hash64(seed or 1)