"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.arguments import ArgumentError, parse_arguments
from philo.table import Table

_PROGRAM = "philo"
_RULE = "-" * 73
_USAGE = (
    f"Usage: <{_PROGRAM}> <number of philosophers> <time to die> "
    "<time to eat> <time to sleep>"
)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one banquet from the given arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        print(_USAGE)
        return 0
    try:
        settings = parse_arguments(args)
    except ArgumentError:
        print("Could not parse arguments")
        return 1

    print(_RULE, flush=True)
    table = Table(settings, out=sys.stdout)
    table.run()
    print(_RULE)
    if settings.count_each:
        table.report()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())