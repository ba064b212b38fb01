"""Generation settings shared by the alphabet, random source and generator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

from common.exceptions import ArgumentError, ConfigurationError

DEFAULT_PW_LENGTH = 8
DEFAULT_NUM_PW = 160
SCREEN_WIDTH = 80


@dataclass(frozen=True)
class GenerationConfig:
    length: int = DEFAULT_PW_LENGTH
    count: int = DEFAULT_NUM_PW

    # alphabet toggles
    no_numerals: bool = False
    numerals: bool = True
    no_capitalize: bool = False
    ambiguous: bool = False
    symbols: bool = False
    no_vowels: bool = False
    remove_chars: str = ""

    # output and randomness
    one_line: bool = False
    secure: bool = False
    seed_file: Optional[Path] = None
    seed: int = 0  # 0 = derive from the clock

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ConfigurationError("password length is to be positive")
        if self.count < 1:
            raise ConfigurationError("passwords numbers is to be positive")

    @property
    def requires_numeral(self) -> bool:
        """At least one digit must be placed in every password."""
        return self.numerals and not self.no_numerals


def _positive_int(value: str, what: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise ArgumentError(f"{what} must be an integer, got {value!r}") from exc
    if number < 1:
        raise ArgumentError(f"{what} is to be positive")
    return number


def parse_positional(args: Sequence[str]) -> Tuple[int, int]:
    """Parse ``[length] [count]`` positional arguments.

    Missing values fall back to the defaults; anything after the second
    argument is ignored.

    Raises:
        ArgumentError: If a value is not an integer or is less than 1
    """
    length = DEFAULT_PW_LENGTH
    count = DEFAULT_NUM_PW
    if len(args) >= 1:
        length = _positive_int(args[0], "password length")
    if len(args) >= 2:
        count = _positive_int(args[1], "passwords numbers")
    return length, count
