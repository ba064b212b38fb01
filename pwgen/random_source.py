"""Seeded and cryptographically secure random sources.

Both variants expose the same small interface so the generator picks one at
construction time and never inspects which kind it holds.
"""

from __future__ import annotations

import logging
import random
import secrets
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional

from common.exceptions import EntropyError, SeedFileError
from common.file_helpers import file_digest

logger = logging.getLogger(__name__)

INT63_BITS = 63
SEED_BYTES = 8

Clock = Callable[[], int]


class RandomSource(ABC):
    """Uniformly distributed integers in a bounded range."""

    @abstractmethod
    def int63(self) -> int:
        """Return a non-negative integer in ``[0, 2**63)``."""

    @abstractmethod
    def randbelow(self, n: int) -> int:
        """Return an integer in ``[0, n)``."""

    @abstractmethod
    def seed(self, value: int) -> None:
        """Restart the sequence from ``value`` where the source supports it."""

    def choice(self, alphabet: str) -> str:
        return alphabet[self.randbelow(len(alphabet))]

    def shuffle(self, items: List) -> None:
        """Fisher-Yates shuffle in place."""
        for i in range(len(items) - 1, 0, -1):
            j = self.randbelow(i + 1)
            items[i], items[j] = items[j], items[i]


class SeededSource(RandomSource):
    """Reproducible pseudo-random sequence determined by its seed."""

    def __init__(self, seed: int) -> None:
        self._random = random.Random(seed)

    def int63(self) -> int:
        return self._random.getrandbits(INT63_BITS)

    def randbelow(self, n: int) -> int:
        return self._random.randrange(n)

    def seed(self, value: int) -> None:
        self._random.seed(value)


class SecureSource(RandomSource):
    """Operating-system entropy; cannot be seeded."""

    def __init__(self) -> None:
        self._random = secrets.SystemRandom()

    def int63(self) -> int:
        try:
            return self._random.getrandbits(INT63_BITS)
        except (OSError, NotImplementedError) as exc:
            raise EntropyError(f"random source is unavailable: {exc}") from exc

    def randbelow(self, n: int) -> int:
        try:
            return self._random.randrange(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyError(f"random source is unavailable: {exc}") from exc

    def seed(self, value: int) -> None:
        pass


def select_random_source(
    secure: bool, seed: int = 0, clock: Clock = time.time_ns
) -> RandomSource:
    """Choose the random source for a generator.

    A secure source ignores ``seed``. A zero seed means the sequence starts
    from the current ``clock`` reading.
    """
    if secure:
        if seed:
            logger.debug("Seed ignored for secure random source")
        return SecureSource()
    if seed != 0:
        logger.debug(f"Seeded random source: {seed}")
        return SeededSource(seed)
    return SeededSource(clock())


def seed_from_file(path: Path) -> int:
    """Derive a 64-bit seed from the SHA-1 digest of a file's content.

    The first eight digest bytes are read as a little-endian integer, so the
    same file always yields the same password sequence.

    Raises:
        SeedFileError: If the file cannot be opened or read
    """
    try:
        digest = file_digest(path, "sha1")
    except OSError as exc:
        raise SeedFileError(f"can not read seed file {path}: {exc}") from exc
    return int.from_bytes(digest[:SEED_BYTES], "little")


def resolve_seed(seed: int = 0, seed_file: Optional[Path] = None) -> int:
    """A seed file takes precedence over an explicit seed."""
    if seed_file is not None:
        return seed_from_file(seed_file)
    return seed
