"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..audio.pcm import check_rates, downsample_array, pcm16_from_bytes, pcm16_to_bytes
from ..audio.rate_options import selectable_rates

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 2


def setup_logging(log_file: str | None, verbose: bool = False) -> None:
    """Configure logging to stderr and optionally a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers,
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="downsampler",
        description="Downsample raw 16-bit mono PCM between supported sample rates",
    )
    parser.add_argument(
        "--from", dest="source_rate", type=int, help="Source sample rate in Hz"
    )
    parser.add_argument(
        "--to", dest="target_rate", type=int, help="Target sample rate in Hz"
    )
    parser.add_argument(
        "--input", help="Raw PCM16 input file (default: stdin)", default=None
    )
    parser.add_argument(
        "--output", help="Raw PCM16 output file (default: stdout)", default=None
    )
    parser.add_argument(
        "--list-rates",
        type=int,
        metavar="RATE",
        help="Print the target rates available for a source rate and exit",
    )
    parser.add_argument("--log-file", default=None, help="Log file path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def _read_input(path: str | None) -> bytes:
    if path is None:
        return sys.stdin.buffer.read()
    return Path(path).read_bytes()


def _write_output(path: str | None, data: bytes) -> None:
    if path is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
    else:
        Path(path).write_bytes(data)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_file, args.verbose)

    if args.list_rates is not None:
        for rate in selectable_rates(args.list_rates):
            print(rate)
        return EXIT_OK

    if args.source_rate is None or args.target_rate is None:
        parser.error("--from and --to are required")

    check = check_rates(args.source_rate, args.target_rate)
    if not check.is_valid:
        logger.error(check.message)
        return EXIT_INVALID

    try:
        samples = pcm16_from_bytes(_read_input(args.input))
    except ValueError as e:
        logger.error(f"Invalid input: {e}")
        return EXIT_INVALID

    converted = downsample_array(
        samples, args.source_rate, args.target_rate, logger=logger
    )
    _write_output(args.output, pcm16_to_bytes(converted))

    logger.info(
        f"Wrote {len(converted)} samples at {args.target_rate} Hz "
        f"({len(samples)} read at {args.source_rate} Hz)"
    )
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
