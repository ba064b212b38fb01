"""Tests for pwgen.config module."""

from __future__ import annotations

import dataclasses

import pytest

from common.exceptions import ArgumentError, ConfigurationError
from pwgen.config import (
    DEFAULT_NUM_PW,
    DEFAULT_PW_LENGTH,
    GenerationConfig,
    parse_positional,
)


def test_defaults():
    """Test default configuration values."""
    cfg = GenerationConfig()

    assert cfg.length == 8
    assert cfg.count == 160
    assert cfg.numerals is True
    assert cfg.requires_numeral is True
    assert cfg.seed == 0
    assert cfg.seed_file is None


def test_no_numerals_overrides_numerals():
    """Test that excluding digits cancels the digit requirement."""
    cfg = GenerationConfig(no_numerals=True, numerals=True)
    assert cfg.requires_numeral is False


def test_config_is_immutable():
    """Test that configuration cannot be changed after creation."""
    cfg = GenerationConfig()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.length = 12


@pytest.mark.parametrize("length,count", [(0, 10), (-1, 10), (16, 0), (16, -5)])
def test_non_positive_values_rejected(length: int, count: int):
    """Test that length and count must be positive."""
    with pytest.raises(ConfigurationError, match="is to be positive"):
        GenerationConfig(length=length, count=count)


@pytest.mark.parametrize(
    "args,expected",
    [
        ([], (DEFAULT_PW_LENGTH, DEFAULT_NUM_PW)),
        (["12"], (12, DEFAULT_NUM_PW)),
        (["12", "23"], (12, 23)),
        (["12", "23", "7"], (12, 23)),
        (["12", "23", "7", "8", "9"], (12, 23)),
    ],
)
def test_parse_positional(args, expected):
    """Test positional length/count parsing."""
    assert parse_positional(args) == expected


@pytest.mark.parametrize(
    "args",
    [["a"], ["2", "a"], ["-1"], ["0"], ["5", "-5"], ["a", "-5"], ["-5", "5"]],
)
def test_parse_positional_invalid(args):
    """Test that malformed or non-positive values raise ArgumentError."""
    with pytest.raises(ArgumentError):
        parse_positional(args)
