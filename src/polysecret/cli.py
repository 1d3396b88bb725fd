#!/usr/bin/env python3
"""Command-line entrypoint: print the secret constant for each test case."""

import argparse
import logging
import sys

from polysecret.codec import load_document
from polysecret.config import DEFAULT_CONFIG, load_config
from polysecret.errors import (
    InputReadError, InsufficientPointsError, MalformedInputError, NumericRangeError,
    SingularMatrixError,
)
from polysecret.solver import find_constant

logger = logging.getLogger('polysecret')

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_SOLVE_ERROR = 2


def setup_logger(level=logging.WARNING) -> logging.Logger:
    """Attach one stderr handler with a compact format to the package logger."""
    logger.setLevel(level)
    if not logger.handlers:
        ch = logging.StreamHandler()
        fmt = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s",
                                datefmt="%Y-%m-%d %H:%M:%S")
        ch.setFormatter(fmt)
        logger.addHandler(ch)
    return logger


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog='polysecret',
        description="Recover the constant term of the polynomial through "
                    "the first k base-encoded points of each input file.",
    )
    p.add_argument(
        'inputs',
        nargs='*',
        help="JSON test case files. Default: testcase1.json testcase2.json",
    )
    p.add_argument(
        '--config', '-c',
        default=None,
        help="Optional JSON config file to override defaults.",
    )
    p.add_argument(
        '--epsilon',
        type=float,
        default=None,
        help="Smallest pivot magnitude accepted during inversion.",
    )
    verbosity = p.add_mutually_exclusive_group()
    verbosity.add_argument('--verbose', '-v', action='store_true',
                           help="Log debug output to stderr.")
    verbosity.add_argument('--quiet', '-q', action='store_true',
                           help="Only log errors.")
    return p


def main(argv=None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    args = build_arg_parser().parse_args(argv)

    cfg = DEFAULT_CONFIG.copy()
    if args.config:
        try:
            cfg = load_config(args.config, base=cfg)
        except (OSError, ValueError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR

    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = cfg['log_level']
    setup_logger(level)

    paths = args.inputs or cfg['inputs']
    epsilon = args.epsilon if args.epsilon is not None else cfg['pivot_epsilon']

    # Every document is read before anything is solved
    documents = []
    for path in paths:
        try:
            documents.append(load_document(path))
        except (InputReadError, MalformedInputError) as e:
            print(f"Error reading or parsing the file: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR

    for n, document in enumerate(documents, start=1):
        try:
            secret = find_constant(document, epsilon)
        except MalformedInputError as e:
            print(f"Error in testcase {n}: {e}", file=sys.stderr)
            return EXIT_INPUT_ERROR
        except (InsufficientPointsError, NumericRangeError, SingularMatrixError) as e:
            print(f"Cannot solve testcase {n}: {e}", file=sys.stderr)
            return EXIT_SOLVE_ERROR
        print(f"Secret for testcase {n}: {secret}")

    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
