"""
Command-line entry point for the interactive matrix session.
"""

import argparse

from pymatrix.console.session import MatrixSession


def _parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive dense matrix calculator")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for generated matrices",
    )
    parser.add_argument(
        "--file",
        default="input.txt",
        help="Text file read when file entry is chosen",
    )
    return parser.parse_args(args=args)


def main(args=None) -> int:
    options = _parse_args(args=args)

    session = MatrixSession(rng=options.seed, file_path=options.file)

    try:
        session.run()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0
