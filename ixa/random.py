"""Independent, reproducible random number streams keyed by name.

Each stream is identified by an :class:`RngId`. Streams are created lazily
from a base seed combined with a hash of the stream's name, so the same base
seed always reproduces the same sequence for a given stream.
"""

from __future__ import annotations

import bisect
import hashlib
import itertools
import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MASK_64 = (1 << 64) - 1
_defined_names: set[str] = set()


class RngNotInitializedError(RuntimeError):
    """Raised when a stream is requested before a base seed has been set."""

    def __init__(self) -> None:
        super().__init__(
            "You must initialize the random number generator with a base seed"
        )


@dataclass(frozen=True)
class RngId:
    """Key that selects an independent random number stream."""

    name: str


def define_rng(name: str) -> RngId:
    """Define a new stream key; each name may be defined only once."""
    if not name:
        raise ValueError("an RNG name must not be empty")
    if name in _defined_names:
        raise ValueError(f"an RNG named {name!r} is already defined")
    _defined_names.add(name)
    return RngId(name)


def hash_str(text: str) -> int:
    """A stable unsigned 64-bit hash of ``text``."""
    digest = hashlib.blake2b(text.encode("utf-8"), digest_size=8).digest()
    return int.from_bytes(digest, "little")


class RandomSource:
    """Holds a base seed and one generator per :class:`RngId`."""

    def __init__(self) -> None:
        self._base_seed: int | None = None
        self._rngs: dict[RngId, random.Random] = {}

    def init_random(self, base_seed: int) -> None:
        """Set the base seed and discard existing streams so they are re-seeded."""
        logger.debug("initializing random module")
        self._base_seed = base_seed & _MASK_64
        self._rngs.clear()

    def get_rng(self, rng_id: RngId) -> random.Random:
        """Return the generator for ``rng_id``, creating it on first use."""
        if self._base_seed is None:
            raise RngNotInitializedError()
        rng = self._rngs.get(rng_id)
        if rng is None:
            logger.debug(
                "creating new RNG (seed=%s) for %s", self._base_seed, rng_id.name
            )
            seed = (self._base_seed + hash_str(rng_id.name)) & _MASK_64
            rng = random.Random(seed)
            self._rngs[rng_id] = rng
        return rng

    def sample(self, rng_id: RngId, sampler: Callable[[random.Random], T]) -> T:
        """Apply ``sampler`` to the generator for ``rng_id`` and return its result."""
        return sampler(self.get_rng(rng_id))

    def sample_range(self, rng_id: RngId, start: float, stop: float) -> float:
        """A uniform sample from the half-open range ``[start, stop)``.

        Integers give an integer; otherwise the result is a float.
        """
        if not start < stop:
            raise ValueError(f"cannot sample empty range [{start}, {stop})")
        rng = self.get_rng(rng_id)
        if isinstance(start, int) and isinstance(stop, int):
            return rng.randrange(start, stop)
        while True:
            value = start + (stop - start) * rng.random()
            if value < stop:
                return value

    def sample_bool(self, rng_id: RngId, p: float) -> bool:
        """True with probability ``p``."""
        if not 0.0 <= p <= 1.0:
            raise ValueError(f"probability {p} is not in [0, 1]")
        if p == 1.0:
            self.get_rng(rng_id).random()
            return True
        return self.get_rng(rng_id).random() < p

    def sample_weighted(self, rng_id: RngId, weights: Sequence[float]) -> int:
        """Draw an index into ``weights`` with probability proportional to its weight."""
        if not weights:
            raise ValueError("weights must not be empty")
        if any(w < 0 for w in weights):
            raise ValueError("weights must not be negative")
        cumulative = list(itertools.accumulate(weights))
        total = cumulative[-1]
        if total <= 0:
            raise ValueError("weights must not all be zero")
        rng = self.get_rng(rng_id)
        point = rng.random() * total
        return min(bisect.bisect_right(cumulative, point), len(weights) - 1)