"""CLI command for pairing read files."""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from .config import LOG_LEVELS, PairedScanConfig, PairingConfig
from .discovery import discover_candidates, suffixes_for
from .errors import classify_error
from .pairing import pair_files
from .prefixes import infer_patterns
from pairedscan.common import setup_logging, get_logger, ConfigLoader, LogContext, PairedScanError

APP_NAME = "pairedscan"

PREFIX_FIELDS = ("prefix_1", "prefix_2", "prefix_paired")


def pair_command(config: PairingConfig, out: Optional[TextIO] = None) -> int:
    """Scan, pair and print read files.

    Patterns are inferred before scanning so prefix errors surface without
    touching the filesystem.

    Args:
        config: Pairing options
        out: Stream for the paired list (defaults to stdout)

    Returns:
        Exit code (0 for success)
    """
    logger = get_logger(__package__ or __name__)
    out = out if out is not None else sys.stdout

    with LogContext(logger, root=config.root):
        try:
            patterns = infer_patterns(config)
            candidates = discover_candidates(
                Path(config.root),
                recursive=config.recursive,
                suffixes=suffixes_for(config.gzipped),
            )
            paired = pair_files(candidates, config, patterns=patterns)
        except PairedScanError as e:
            logger.error(f"Pairing failed ({classify_error(e)}): {e.message}")
            return 1

    if paired:
        out.write("\n".join(paired) + "\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Find paired R1/R2 read files and print them in a validated order"
    )
    parser.add_argument(
        "root",
        type=Path,
        help="Root folder to scan"
    )
    parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Scan provided folder and all of its descendants"
    )
    parser.add_argument(
        "-g", "--gz",
        dest="gzipped",
        action="store_true",
        help="Scan for gzipped fastqs instead of plaintext ones"
    )
    parser.add_argument(
        "-i", "--interleave",
        action="store_true",
        help="Interleave each R1 with its matched R2"
    )
    parser.add_argument(
        "-1", "--p1",
        dest="prefix_1",
        help="Custom R1 prefix"
    )
    parser.add_argument(
        "-2", "--p2",
        dest="prefix_2",
        help="Custom R2 prefix"
    )
    parser.add_argument(
        "-p", "--pp",
        dest="prefix_paired",
        help="Custom shared prefix, 'X' marks the mate number (e.g. RX)"
    )
    parser.add_argument(
        "-a", "--absolute",
        action="store_true",
        help="Print absolute paths"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to config file (defaults.toml)"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (overrides config)"
    )
    return parser


def merge_cli_overrides(config: PairedScanConfig, args: argparse.Namespace) -> PairingConfig:
    """Apply command line values on top of the loaded pairing section."""
    overrides = {"root": str(args.root)}
    for flag in ("recursive", "gzipped", "interleave", "absolute"):
        if getattr(args, flag):
            overrides[flag] = True
    # Any prefix on the command line replaces the configured prefix mode
    cli_prefixes = {prefix: getattr(args, prefix) for prefix in PREFIX_FIELDS}
    if any(value is not None for value in cli_prefixes.values()):
        overrides.update(cli_prefixes)
    return config.pairing.model_copy(update=overrides)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the pairedscan command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    loader = ConfigLoader(
        app_name=APP_NAME,
        config_class=PairedScanConfig
    )
    try:
        config = loader.load(defaults_path=args.config)
    except PairedScanError as e:
        parser.error(e.message)

    level = args.log_level or config.logging.level
    log_file = Path(config.logging.file) if config.logging.file else None
    setup_logging(level=level, format=config.logging.format, log_file=log_file)

    return pair_command(merge_cli_overrides(config, args))


if __name__ == "__main__":
    sys.exit(main())
