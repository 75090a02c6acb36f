"""
Seeded Random Stream

Deterministic pseudo-random generation for reproducible models.

The stream uses the Mulberry32 mix: a single 32-bit state word is
advanced by a constant on every draw and scrambled with multiply/xor/shift
steps. All arithmetic is masked to 32 bits so the output sequence is
identical on every platform and interpreter.

Every generator and component receives the stream explicitly. There is
no module-level stream, so independent generations never share state.
"""

import logging
import math
import time
from typing import Optional, Sequence, Tuple, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
GOLDEN_INCREMENT = 0x6D2B79F5
TWO_POW_32 = 4294967296.0


def _imul(a: int, b: int) -> int:
    """32-bit integer multiply, low word only."""
    return (a * b) & MASK32


def _to_int32(value: int) -> int:
    """Wrap an integer to the signed 32-bit range."""
    value &= MASK32
    if value >= 0x80000000:
        value -= 0x100000000
    return value


def hash_seed(text: str) -> int:
    """
    Hash a text seed to a non-negative integer.

    Rolling hash over UTF-16 code units (h * 31 + unit), wrapped to a
    signed 32-bit word after every step, absolute value at the end.

    Args:
        text: Seed text, e.g. "hello"

    Returns:
        Non-negative integer seed (0 .. 2**31)
    """
    data = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for i in range(0, len(data), 2):
        unit = data[i] | (data[i + 1] << 8)
        value = _to_int32((value << 5) - value + unit)
    return abs(value)


def normalize_seed(seed: Union[int, str]) -> int:
    """Convert an int or text seed to the integer recorded with a model."""
    if isinstance(seed, str):
        return hash_seed(seed)
    return int(seed)


def generate_seed() -> int:
    """Derive a fresh seed from the current time in milliseconds."""
    return int(time.time() * 1000)


class SeededRNG:
    """
    Deterministic random stream.

    Example:
        rng = SeededRNG(12345)
        rng.range(1, 6)          # dice roll
        rng.choice(["a", "b"])   # uniform pick
        rng.boolean(0.25)        # 25% true
    """

    def __init__(self, seed: Union[int, str] = 0):
        self.seed = 0
        self._state = 0
        self.set_seed(seed)

    def set_seed(self, seed: Union[int, str]):
        """
        Reseed the stream.

        Args:
            seed: Integer seed (truncated to 32 bits) or text seed (hashed)
        """
        self.seed = normalize_seed(seed)
        self._state = self.seed & MASK32

    @property
    def state(self) -> int:
        """Current 32-bit state word."""
        return self._state

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        self._state = (self._state + GOLDEN_INCREMENT) & MASK32
        t = self._state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / TWO_POW_32

    def range(self, min_value: int, max_value: int) -> int:
        """
        Return an integer in [min_value, max_value], both inclusive.

        Bounds are floored first so callers may pass half sizes.
        """
        lo = math.floor(min_value)
        hi = math.floor(max_value)
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def choice(self, items: Sequence[T]) -> T:
        """Return a uniformly drawn element of items."""
        if len(items) == 0:
            raise ValueError("Cannot choose from an empty sequence")
        return items[math.floor(self.next() * len(items))]

    def boolean(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next() < probability

    def weighted_choice(self, entries: Sequence[Tuple[T, float]]) -> T:
        """
        Draw one item from (item, weight) pairs.

        Consumes exactly one draw. Zero-weight entries are never picked.

        Args:
            entries: Sequence of (item, weight) with non-negative weights

        Returns:
            The selected item
        """
        total = sum(weight for _, weight in entries)
        if not entries or total <= 0:
            raise ValueError("weighted_choice requires a positive total weight")

        target = self.next() * total
        cumulative = 0.0
        for item, weight in entries:
            cumulative += weight
            if target < cumulative and weight > 0:
                return item

        # Float rounding can leave target == total; fall back to the last live entry
        for item, weight in reversed(entries):
            if weight > 0:
                return item
        raise ValueError("weighted_choice requires a positive total weight")

    def __repr__(self) -> str:
        return f"SeededRNG(seed={self.seed}, state={self._state:#010x})"


def make_rng(seed: Optional[Union[int, str]] = None) -> Tuple[SeededRNG, int]:
    """
    Create a stream for one generation call.

    Args:
        seed: Explicit seed, or None for a fresh time-derived seed

    Returns:
        Tuple of (stream, integer seed to record with the model)
    """
    if seed is None:
        seed = generate_seed()
        logger.debug("No seed given, derived %d from clock", seed)
    rng = SeededRNG(seed)
    return rng, rng.seed
