"""Password generator CLI: pronounceable-style or fully random passwords.

Builds passwords from lowercase letters, digits and capitals (optionally
symbols), with at least one digit by default. Characters can be excluded by
class, as ambiguous look-alikes, as vowels, or one by one. A file's SHA-1
digest can seed the generator so the same passwords can be produced again.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from common.cli_helpers import add_log_level_argument, setup_logging
from common.exceptions import ArgumentError, PwgenError
from pwgen.config import GenerationConfig, parse_positional
from pwgen.formatter import render
from pwgen.generator import PasswordGenerator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ARGUMENTS = 1
EXIT_GENERATION = 2


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate pronounceable passwords.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "positional",
        nargs="*",
        metavar="N",
        help="Password length (default 8) and number of passwords (default 160)",
    )

    chars = parser.add_argument_group("Characters")
    chars.add_argument(
        "--no-numerals",
        action="store_true",
        help="Don't include numbers in the generated passwords",
    )
    chars.add_argument(
        "--numerals",
        action="store_true",
        help="Include at least one number in the password",
    )
    chars.add_argument(
        "--no-require-numerals",
        dest="numerals",
        action="store_false",
        help="Do not enforce at least one number in the password",
    )
    parser.set_defaults(numerals=True)
    chars.add_argument(
        "--no-capitalize",
        action="store_true",
        help="Don't bother to include any capital letters in the generated passwords",
    )
    chars.add_argument(
        "--symbols",
        action="store_true",
        help="Include at least one special character in the password",
    )
    chars.add_argument(
        "--no-vowels",
        action="store_true",
        help="Do not use vowels or numbers that might be mistaken for vowels",
    )
    chars.add_argument(
        "--ambiguous",
        action="store_true",
        help="Don't use characters that could be confused when printed, such as 'l' and '1'",
    )
    chars.add_argument(
        "--remove-chars",
        default="",
        help="Don't use the specified characters in passwords",
    )

    rnd = parser.add_argument_group("Randomness")
    rnd.add_argument(
        "--secure",
        action="store_true",
        help="Generate completely random, hard-to-memorize passwords",
    )
    rnd.add_argument(
        "--seed-file",
        type=Path,
        help="Seed the generator with the SHA-1 digest of this file",
    )
    rnd.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Explicit generator seed (0 derives it from the clock)",
    )

    parser.add_argument(
        "--one-line",
        action="store_true",
        help="Print the generated passwords on one line",
    )
    add_log_level_argument(parser)
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> GenerationConfig:
    length, count = parse_positional(args.positional)
    return GenerationConfig(
        length=length,
        count=count,
        no_numerals=args.no_numerals,
        numerals=args.numerals,
        no_capitalize=args.no_capitalize,
        ambiguous=args.ambiguous,
        symbols=args.symbols,
        no_vowels=args.no_vowels,
        remove_chars=args.remove_chars,
        one_line=args.one_line,
        secure=args.secure,
        seed_file=args.seed_file,
        seed=args.seed,
    )


def main(argv: Optional[List[str]] = None, out: Optional[TextIO] = None) -> int:
    args = parse_arguments(argv)
    setup_logging(args.log_level)
    if out is None:
        out = sys.stdout

    try:
        config = build_config(args)
    except ArgumentError as ex:
        logger.error(f"required integer arguments: {ex}")
        return EXIT_ARGUMENTS
    except PwgenError as ex:
        logger.error(str(ex))
        return EXIT_GENERATION

    try:
        generator = PasswordGenerator(config)
        logger.debug(repr(generator))
        render(generator.generate_all(), out, one_line=config.one_line)
    except PwgenError as ex:
        logger.error(str(ex))
        return EXIT_GENERATION

    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
