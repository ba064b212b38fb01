"""Shared pytest fixtures for pwgen tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from pwgen.config import GenerationConfig
from pwgen.generator import PasswordGenerator

PINNED_SEED = 12345


@pytest.fixture
def seed_file(tmp_path: Path) -> Path:
    """Create a small file whose digest seeds the generator.

    Args:
        tmp_path: Pytest temporary directory fixture

    Returns:
        Path to the seed file
    """
    file_path = tmp_path / "pwgen_test.tmp"
    file_path.write_text("abcdef")
    return file_path


@pytest.fixture
def make_generator() -> Callable[..., PasswordGenerator]:
    """Factory for reproducible generators.

    Returns:
        Callable taking GenerationConfig keyword arguments; the seed defaults
        to a pinned value so property checks are stable between runs
    """

    def _make(**kwargs) -> PasswordGenerator:
        kwargs.setdefault("seed", PINNED_SEED)
        return PasswordGenerator(GenerationConfig(**kwargs))

    return _make
