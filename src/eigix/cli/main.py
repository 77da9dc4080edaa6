"""Entry point for the ``eigix`` console script."""

import argparse

from eigix.cli import check, render, logging as logging_cli


def build_parser():
    parser = argparse.ArgumentParser(prog="eigix", description="eigix container toolkit")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_parser = subparsers.add_parser("check", help="Run the built-in self-checks")
    check.register_arguments(check_parser)

    render_parser = subparsers.add_parser("render", help="Render a matrix or tensor")
    render_subparsers = render_parser.add_subparsers(dest="subcommand", required=True)
    render.register_subcommands(render_subparsers)

    logging_parser = subparsers.add_parser("logging", help="Logging utilities")
    logging_subparsers = logging_parser.add_subparsers(dest="subcommand", required=True)
    logging_cli.register_subcommands(logging_subparsers)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    if args.command == "check":
        check.dispatch(args)
    elif args.command == "render":
        render.dispatch(args)
    elif args.command == "logging":
        logging_cli.dispatch(args)
