"""Render a stream of passwords as one line or as fixed-width columns."""

from __future__ import annotations

import logging
from typing import Iterable, TextIO

from common.exceptions import OutputError
from pwgen.config import SCREEN_WIDTH

logger = logging.getLogger(__name__)


def _write(sink: TextIO, text: str) -> None:
    try:
        sink.write(text)
    except OSError as exc:
        raise OutputError(f"can not write passwords: {exc}") from exc


def render(
    passwords: Iterable[str],
    sink: TextIO,
    one_line: bool = False,
    screen_width: int = SCREEN_WIDTH,
) -> int:
    """Write passwords to ``sink`` and return how many were written.

    One-line mode separates passwords with single spaces. Column mode packs
    ``max(1, screen_width // length)`` passwords per row, each followed by a
    space, ending the row with a newline instead. Output always finishes with
    a newline.

    Raises:
        OutputError: On the first failed write; nothing more is written
    """
    written = 0
    per_row = 1
    ended = True
    for password in passwords:
        if written == 0:
            per_row = max(1, screen_width // max(1, len(password)))
        written += 1
        if one_line:
            # no space after the last token, unlike a partial column row
            _write(sink, password if written == 1 else f" {password}")
            ended = False
        elif written % per_row == 0:
            _write(sink, f"{password}\n")
            ended = True
        else:
            _write(sink, f"{password} ")
            ended = False
    if not ended:
        _write(sink, "\n")
    logger.debug(f"Rendered {written} password(s), {per_row} per row")
    return written
