"""Password construction honoring required digit and symbol placement."""

from __future__ import annotations

import logging
import threading
import time
from typing import Iterator, Optional

from pwgen.alphabet import alphabet_for, required_pools
from pwgen.config import GenerationConfig
from pwgen.random_source import Clock, RandomSource, resolve_seed, select_random_source

logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Builds passwords for one configuration.

    The alphabet is computed once and the random source is owned for the
    generator's lifetime, so consecutive calls continue the same sequence.
    """

    def __init__(
        self,
        config: GenerationConfig,
        source: Optional[RandomSource] = None,
        clock: Clock = time.time_ns,
    ) -> None:
        self.config = config
        self.alphabet = alphabet_for(config)
        self.digits, self.symbols = required_pools(config)
        if config.symbols and not self.symbols:
            logger.warning("every symbol is removed, passwords may lack a symbol")
        if config.requires_numeral and not self.digits:
            logger.warning("every digit is removed, passwords may lack a number")
        if source is None:
            seed = resolve_seed(config.seed, config.seed_file)
            source = select_random_source(config.secure, seed, clock)
        self.source = source
        logger.debug(f"{type(source).__name__} for {len(self.alphabet)}-character alphabet")
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return (
            f"PwGen <length: {self.config.length}, number:{self.config.count}> "
            f"from {self.alphabet}"
        )

    def generate(self) -> str:
        """Return a new password of exactly ``config.length`` characters.

        Positions are filled from the end: the required symbol, then the
        required digit, then the rest from the alphabet. The whole password
        is shuffled afterwards.
        """
        cfg = self.config
        with self._lock:
            password = [""] * cfg.length
            n = cfg.length - 1
            if cfg.symbols and self.symbols:
                password[n] = self.source.choice(self.symbols)
                n -= 1
            # digit only while more than one slot is open; symbol goes first
            if cfg.requires_numeral and self.digits and n > 0:
                password[n] = self.source.choice(self.digits)
                n -= 1
            for i in range(n, -1, -1):
                password[i] = self.source.choice(self.alphabet)
            self.source.shuffle(password)
        return "".join(password)

    def generate_all(self, count: Optional[int] = None) -> Iterator[str]:
        """Lazily yield ``count`` passwords (the configured count by default)."""
        total = self.config.count if count is None else count
        for _ in range(total):
            yield self.generate()

    def __iter__(self) -> Iterator[str]:
        return self.generate_all()
