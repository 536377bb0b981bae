""" Command-line entry point for SeaShell. """
import argparse
from datetime import datetime

from constants import MAX_ARGS
from shell import Shell

BANNER_WIDTH = 50


def welcome_banner(now=None) -> str:
    """ Build the startup banner showing the current date and time. """
    now = now or datetime.now()
    border = "*" * BANNER_WIDTH
    lines = [
        "Welcome to SeaShell",
        "",
        f"Date: {now.strftime('%m/%d/%Y')}",
        f"Time: {now.strftime('%H:%M:%S')}",
    ]
    inner = BANNER_WIDTH - 2
    body = [f"*{text:^{inner}}*" for text in lines]
    return "\n".join([border, *body, border]) + "\n"


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description="A small shell with redirection, pipes and background jobs"
    )
    parser.add_argument(
        "--prompt",
        metavar="TEXT",
        default=None,
        help="Prompt string (default: $PS1, else 'SeaShell> ')"
    )
    parser.add_argument(
        "--max-args",
        metavar="N",
        type=int,
        default=MAX_ARGS,
        help=f"Maximum words per command line (default: {MAX_ARGS})"
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the welcome banner"
    )
    return parser


def main(argv=None):
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.max_args < 1:
        parser.error("--max-args must be at least 1")

    if not args.no_banner:
        print(welcome_banner())

    sh = Shell(prompt=args.prompt, max_args=args.max_args)
    rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
