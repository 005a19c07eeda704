"""
Command-line entry point.

    toy "x = 2; y = x + 3;"
    toy --file program.toy --explain
    echo "x = 1;" | toy -f -
"""

from typing import List, Optional
import argparse
import logging
import sys

from .toy_runtime import ToyRuntime, RuntimeOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="toy",
        description="Run a toy assignment program and print the final variable bindings.",
    )
    parser.add_argument("program", nargs="?", help="Program text, e.g. \"x = 1; y = x * 2;\"")
    parser.add_argument("-f", "--file", help="Read the program from a file ('-' for stdin).")
    parser.add_argument("--lenient", action="store_true",
                        help="Treat a missing left operand at the end of an expression as 0.")
    parser.add_argument("--explain", action="store_true",
                        help="Print the error code and message for each failure.")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log to stderr (-v for info, -vv for debug).")
    return parser


def _read_program(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.program is not None and args.file is not None:
        parser.error("give the program as an argument or with --file, not both")
    if args.program is None and args.file is None:
        parser.error("missing program text")

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(stream=sys.stderr, level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.file is not None:
        try:
            program = _read_program(args.file)
        except (OSError, UnicodeDecodeError) as e:
            print(f"Error: cannot read '{args.file}': {e}", file=sys.stderr)
            return 1
    else:
        program = args.program

    runtime = ToyRuntime(RuntimeOptions(lenient=args.lenient))
    result = runtime.execute(program)
    for line in result.lines(explain=args.explain):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
