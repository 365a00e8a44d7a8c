# scatter_engine/core/utils/rng.py
from __future__ import annotations
import numbers
from typing import Protocol, Sequence, TypeVar, Union

T = TypeVar("T")

_MASK64 = 0xFFFFFFFFFFFFFFFF


def _splitmix64(x: int) -> int:
    x = (x + 0x9E3779B97F4A7C15) & _MASK64
    z = x
    z = (z ^ (z >> 30)) * 0xBF58476D1CE4E5B9 & _MASK64
    z = (z ^ (z >> 27)) * 0x94D049BB133111EB & _MASK64
    return z ^ (z >> 31)


def seed_from_any(x: Union[int, str, bytes]) -> int:
    # bool is an int subclass, but a True/False seed is almost certainly a bug
    if isinstance(x, bool):
        raise TypeError("Unsupported seed type")
    if isinstance(x, numbers.Integral):
        return int(x) & _MASK64
    if isinstance(x, bytes):
        acc = 0xcbf29ce484222325
        for b in x:
            acc ^= b
            acc = (acc * 0x100000001B3) & _MASK64
        return acc
    if isinstance(x, str):
        return seed_from_any(x.encode('utf-8'))
    raise TypeError("Unsupported seed type")


class RandomSource(Protocol):
    """The two draws the sampler consumes. Tests substitute scripted sources."""

    def uniform(self) -> float: ...
    def randint(self, a: int, b: int) -> int: ...


class RNG:
    """Seeded splitmix64 stream, platform independent and reproducible."""

    __slots__ = ("state",)

    def __init__(self, seed: Union[int, str, bytes]):
        self.state = seed_from_any(seed)

    def u64(self) -> int:
        self.state = _splitmix64(self.state)
        return self.state

    def u32(self) -> int:
        return self.u64() >> 32

    def uniform(self) -> float:
        return (self.u64() >> 11) * (1.0 / (1 << 53))

    def uniform_range(self, lo: float, hi: float) -> float:
        return uniform_range(self, lo, hi)

    def randint(self, a: int, b: int) -> int:
        if a > b: a, b = b, a
        span = b - a + 1
        return a + (self.u64() % span)

    def choose(self, seq: Sequence[T]) -> T:
        return seq[self.randint(0, len(seq) - 1)]


def uniform_range(rng: RandomSource, lo: float, hi: float) -> float:
    """Uniform float in [lo, hi) drawn from any RandomSource."""
    return lo + (hi - lo) * rng.uniform()
