"""``eigix render``: populate a container from the command line and print it."""

from __future__ import annotations

import argparse
import sys

from eigix.core import EigixError, FixedMatrix, FixedTensor3
from eigix.logging import get_logger


def parse_shape(text):
    """Parse ``"2x3"`` style shapes into a tuple of integers."""

    try:
        dims = tuple(int(part) for part in text.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid shape: {text!r}") from None
    return dims


def parse_value(text):
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None


def register_subcommands(subparsers):
    """Register ``matrix`` and ``tensor`` render targets.

    Examples
    --------
    >>> parser = argparse.ArgumentParser(prog="eigix render")
    >>> subparsers = parser.add_subparsers(dest="subcommand", required=True)
    >>> register_subcommands(subparsers)
    >>> parser.parse_args(["matrix", "--shape", "1x2", "3", "4"]).shape
    (1, 2)
    """

    for name, example in (("matrix", "RxC"), ("tensor", "DxRxC")):
        target = subparsers.add_parser(name, help=f"Render a {name}")
        target.add_argument("--shape", type=parse_shape, required=True, help=f"Shape as {example}")
        target.add_argument("--dtype", default="float64", help="numpy element type (default float64)")
        target.add_argument("values", nargs="*", type=parse_value, help="Values in fill order")


def build(args):
    if args.subcommand == "matrix":
        if len(args.shape) != 2:
            raise argparse.ArgumentTypeError("matrix shape must be RxC")
        return FixedMatrix.from_values(*args.shape, args.values, dtype=args.dtype)
    if len(args.shape) != 3:
        raise argparse.ArgumentTypeError("tensor shape must be DxRxC")
    return FixedTensor3.from_values(*args.shape, args.values, dtype=args.dtype)


def dispatch(args):
    logger = get_logger(__name__)
    try:
        container = build(args)
    except (EigixError, argparse.ArgumentTypeError) as exc:
        logger.debug("render %s failed: %s", args.subcommand, exc)
        print(f"eigix render: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc
    container.write(sys.stdout)
