"""Entry: list Google Maps Platform tools or call one from the command line."""
import sys

from gmaps_tools.config import LOG_LEVEL
from gmaps_tools.logging_utils import configure_logging


def main() -> None:
    configure_logging(LOG_LEVEL)
    from gmaps_tools.cli import USAGE, run_call, run_list

    if len(sys.argv) < 2:
        print(USAGE, file=sys.stderr)
        sys.exit(1)
    cmd = sys.argv[1].lower()
    if cmd == "list":
        sys.exit(run_list())
    elif cmd == "call":
        sys.exit(run_call(sys.argv))
    else:
        print("Unknown command. Use: list | call", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
