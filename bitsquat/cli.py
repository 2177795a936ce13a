"""
cli.py

Command-line interface: parses arguments, runs the bitsquatter on one URL and
prints every valid domain that differs from it by a single bit.
"""

import argparse
import logging
import sys
from typing import List, Optional

from bitsquat.config.bconfig import (LOG_LEVEL, OUTPUT_FORMAT_DEFAULT, OUTPUT_FORMATS, PERMUTATE_EXTENSION_DEFAULT,
                                     PROGRAM_NAME, STRICT_VARIANTS_DEFAULT, VERSION)
from bitsquat.services.bitsquatter import Bitsquatter
from bitsquat.services.errors import BitsquatError, SplitError
from bitsquat.services.format import Format

logger = logging.getLogger("cli")

DESCRIPTION = "BitSquatter outputs all valid domains different by 1 bit from the input URL."
EPILOG = "Example: bitsquat --verbose https://foobar.com"


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        argv: Argument list, ``sys.argv[1:]`` when None.

    Returns:
        The parsed arguments.
    """
    parser = argparse.ArgumentParser(
        prog="bitsquat",
        description=DESCRIPTION,
        epilog=EPILOG,
    )

    parser.add_argument("url", metavar="URL",
                        help="target URL, e.g. https://foobar.com")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="display domain name and extension bitstrings")
    parser.add_argument("-e", "--extension-too", action="store_true", default=PERMUTATE_EXTENSION_DEFAULT,
                        help="generate URL permutations for the extension too")
    parser.add_argument("--strict", action="store_true", default=STRICT_VARIANTS_DEFAULT,
                        help="emit only true single-bit neighbours (no unflipped duplicates)")
    parser.add_argument("-f", "--format", choices=OUTPUT_FORMATS, default=OUTPUT_FORMAT_DEFAULT,
                        help="output format")
    parser.add_argument("--version", action="version",
                        version=f"{PROGRAM_NAME} v{VERSION}")

    return parser.parse_args(argv)


def print_verbose_header(squatter: Bitsquatter) -> None:
    """Print the split labels and their bitstrings."""
    domain_bits, extension_bits = squatter.bitstrings()
    print(f"Target Domain: {squatter.url}")
    print(f"Domain Name: {squatter.domain}\tDomain extension: {squatter.extension}")
    print(f"{squatter.domain}:\t{domain_bits}")
    print(f"{squatter.extension}:\t{extension_bits}")


def run(args: argparse.Namespace) -> int:
    """
    Run the bitsquatter for the parsed arguments.

    Returns:
        Exit code (0 on success, 1 on failure).
    """
    try:
        squatter = Bitsquatter(args.url, permutate_extension=args.extension_too, strict=args.strict)
    except SplitError:
        print(f"Failed to split URL: {args.url} into domain name and extension", file=sys.stderr)
        return 1
    except BitsquatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        print_verbose_header(squatter)

    try:
        candidates = squatter.permutations()
    except BitsquatError as e:
        logger.error(f"Bitsquatting {args.url} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = Format(candidates).render(args.format)
    if output:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Program entry point.

    Returns:
        Exit code (0 on success, non-zero on error).
    """
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    args = parse_arguments(argv)
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
