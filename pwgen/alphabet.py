"""Character pool construction from inclusion/exclusion toggles."""

from __future__ import annotations

import logging
import string
from typing import Tuple

from common.exceptions import ConfigurationError
from pwgen.config import GenerationConfig

logger = logging.getLogger(__name__)

PW_DIGITS = string.digits
PW_LOWERS = string.ascii_lowercase
PW_UPPERS = string.ascii_uppercase
PW_SYMBOLS = string.punctuation
PW_AMBIGUOUS = "B8G6I1l0OQDS5Z2"
PW_VOWELS = "01aeiouyAEIOUY"


def removal_set(
    remove_chars: str = "",
    ambiguous: bool = False,
    no_vowels: bool = False,
    no_numerals: bool = False,
) -> frozenset:
    """Union of the explicit removal string and every active exclusion rule."""
    chars = set(remove_chars)
    if ambiguous:
        chars.update(PW_AMBIGUOUS)
    if no_vowels:
        chars.update(PW_VOWELS)
    if no_numerals:
        chars.update(PW_DIGITS)
    return frozenset(chars)


def filter_chars(chars: str, removed: frozenset) -> str:
    """Drop removed and repeated characters, keeping the original order."""
    seen = set()
    result = []
    for ch in chars:
        if ch in removed or ch in seen:
            continue
        seen.add(ch)
        result.append(ch)
    return "".join(result)


def build_alphabet(
    remove_chars: str = "",
    no_numerals: bool = False,
    no_capitalize: bool = False,
    symbols: bool = False,
    ambiguous: bool = False,
    no_vowels: bool = False,
) -> str:
    """Return the ordered, duplicate-free character pool.

    Lowercase letters are always the base; digits, uppercase letters and
    symbols are appended in that order depending on the toggles. Removed
    characters are filtered out without disturbing the base order.

    Raises:
        ConfigurationError: If nothing is left to build passwords from
    """
    chars = PW_LOWERS
    if not no_numerals:
        chars += PW_DIGITS
    if not no_capitalize:
        chars += PW_UPPERS
    if symbols:
        chars += PW_SYMBOLS

    removed = removal_set(remove_chars, ambiguous, no_vowels, no_numerals)
    alphabet = filter_chars(chars, removed)
    if not alphabet:
        raise ConfigurationError("no symbols for passwords generation")
    logger.debug(f"Alphabet of {len(alphabet)} characters: {alphabet}")
    return alphabet


def alphabet_for(config: GenerationConfig) -> str:
    return build_alphabet(
        remove_chars=config.remove_chars,
        no_numerals=config.no_numerals,
        no_capitalize=config.no_capitalize,
        symbols=config.symbols,
        ambiguous=config.ambiguous,
        no_vowels=config.no_vowels,
    )


def required_pools(config: GenerationConfig) -> Tuple[str, str]:
    """Digits and symbols eligible for the required positions.

    Removal rules apply here too, so a forced digit or symbol never brings
    back an excluded character. An empty pool drops that requirement.
    """
    removed = removal_set(
        config.remove_chars, config.ambiguous, config.no_vowels, config.no_numerals
    )
    return filter_chars(PW_DIGITS, removed), filter_chars(PW_SYMBOLS, removed)
