""" Command-line entry point for myshell. """
import argparse
import logging
import os
import sys

from exceptions import ShellExit
from shell import Shell


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="myshell",
        description="A small interactive shell"
    )
    parser.add_argument(
        "-c",
        dest="command",
        metavar="LINE",
        help="run a single command line and exit with its status"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=bool(os.environ.get("MYSHELL_DEBUG")),
        help="log lexing and dispatch decisions to stderr"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    sh = Shell()
    if args.command is not None:
        try:
            rc = sh.run_line(args.command)
        except ShellExit as e:
            rc = e.status
    else:
        rc = sh.run()
    raise SystemExit(rc)


if __name__ == "__main__":
    main()
