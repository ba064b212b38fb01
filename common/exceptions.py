"""Shared exception classes for pwgen."""

from __future__ import annotations


class PwgenError(Exception):
    """Base exception for all pwgen errors."""

    pass


class ArgumentError(PwgenError):
    """Malformed or non-positive positional argument."""

    pass


class ConfigurationError(PwgenError):
    """Generation settings that cannot produce a password."""

    pass


class PwgenIOError(PwgenError, OSError):
    """Error while reading or writing a file or stream."""

    pass


class SeedFileError(PwgenIOError):
    """Seed file could not be opened or read."""

    pass


class OutputError(PwgenIOError):
    """Writing generated passwords failed."""

    pass


class EntropyError(PwgenError):
    """Operating-system random source is unavailable."""

    pass
