import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from gamma.batch import numbered_lines, play_batch, select_mode
from gamma.interactive import play_interactive

load_dotenv()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gamma",
        description="Play gamma. The first input line selects batch (B) or interactive (I) mode.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=os.getenv("GAMMA_LOG_LEVEL", "WARNING"),
        help="logging level for diagnostics on stderr (default: %(default)s)",
    )
    return parser


def main(argv=None, stdin=None, stdout=None, stderr=None) -> int:
    args = build_parser().parse_args(argv)
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stderr = sys.stderr if stderr is None else stderr

    # argparse applies type but not choices to the default taken from the environment.
    level = args.log_level
    if level not in LOG_LEVELS:
        stderr.write(f"gamma: unknown log level {args.log_level!r}\n")
        return 2

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    lines = numbered_lines(stdin)
    selection = select_mode(lines, stdout, stderr)
    if selection is None:
        return 0

    cmd, game = selection
    if cmd.mode == "B":
        play_batch(game, lines, stdout, stderr)
    else:
        play_interactive(game, stdin, stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
