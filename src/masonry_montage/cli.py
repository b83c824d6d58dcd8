"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError

import masonry_montage.config as mm_config
import masonry_montage.main as mm_main
from masonry_montage.config_defaults import (
    DEFAULT_INPUT_DIR,
    DEFAULT_MAX_WIDTH,
    DEFAULT_OUTPUT_FILE,
    DEFAULT_THUMBNAIL_HEIGHT,
    DEFAULT_THUMBNAILS_DIR,
)
from masonry_montage.errors import ConfigError, OperationCancelledError
from masonry_montage.logging_utils import logger, set_verbosity
from masonry_montage.runtime.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    prog = Path(__file__).name
    p = argparse.ArgumentParser(
        description=(
            "Resize a directory of images to a fixed height and pack the "
            "thumbnails into a single masonry montage."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            f"Examples:\n"
            f"python {prog} --input photos\n"
            f"python {prog} --input photos --output wall.png "
            f"--maxwidth 1600 --height 240\n"
            f"python {prog} --input photos --pattern '*.png' -y\n"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging")

    inp = p.add_argument_group("input")
    inp.add_argument(
        "--input", type=str,
        help=(
            "Directory containing the input images "
            f"(default: {DEFAULT_INPUT_DIR})"
        ),
        default=argparse.SUPPRESS)
    inp.add_argument(
        "--pattern", dest="patterns", action="append", type=str,
        help=(
            "Glob pattern for input files; repeat for several patterns "
            "(default: *.jpg and *.jpeg)"
        ),
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--output", type=str,
        help=f"Output image file (default: {DEFAULT_OUTPUT_FILE})",
        default=argparse.SUPPRESS)

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--maxwidth", type=int,
        help=(
            "Maximum width of the output image "
            f"(default: {DEFAULT_MAX_WIDTH})"
        ),
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--no-sort", action="store_true",
        help="Keep discovery order instead of placing widest images first")

    thumbs = p.add_argument_group("thumbnails")
    thumbs.add_argument(
        "--height", type=int,
        help=(
            "Height of the thumbnails "
            f"(default: {DEFAULT_THUMBNAIL_HEIGHT})"
        ),
        default=argparse.SUPPRESS)
    thumbs.add_argument(
        "--thumbnails-dir", type=str,
        help=(
            "Directory thumbnails are written to "
            f"(default: {DEFAULT_THUMBNAILS_DIR})"
        ),
        default=argparse.SUPPRESS)
    thumbs.add_argument(
        "--no-thumbnails", action="store_true",
        help="Do not write thumbnails to disk")
    thumbs.add_argument(
        "-y", "--yes", action="store_true",
        help="Replace an existing thumbnails directory without asking")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a montage")

    return p


def log_parameters(cfg: mm_config.MontageConfig) -> None:
    """Log the effective run parameters."""
    logger.info("Input Directory: %s", cfg.input.input_dir)
    logger.info("Patterns: %s", ", ".join(cfg.input.patterns))
    logger.info("Output File: %s", cfg.output.output)
    logger.info("Max Width: %d", cfg.layout.max_width)
    logger.info("Thumbnail Height: %d", cfg.thumbnails.height)
    logger.info("Sort By Width: %s",
                "Enabled" if cfg.layout.sort_by_width else "Disabled")
    logger.info("Save Thumbnails: %s",
                cfg.thumbnails.directory if cfg.thumbnails.save
                else "Disabled")


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic error into a single readable line."""
    parts = [
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    ]
    return "invalid configuration: " + "; ".join(parts)


def load_config(args: argparse.Namespace) -> mm_config.MontageConfig:
    """
    Build the effective configuration from a namespace.

    Raises:
        ConfigError: If the config file is missing or any value fails
            validation.

    """
    try:
        return mm_config.build_config_from_cli(vars(args))
    except FileNotFoundError as exc:
        raise ConfigError(str(exc)) from exc
    except ValidationError as exc:
        raise ConfigError(_format_validation_error(exc)) from exc


def run_from_args(args: argparse.Namespace) -> int:
    """Build a montage from parsed command-line arguments."""
    cfg = load_config(args)
    if args.validate_config_only:
        logger.info("Config %s validated successfully.",
                    args.config or "(defaults)")
        return 0

    log_parameters(cfg)
    try:
        mm_main.create_montage(cfg)
    except OperationCancelledError:
        logger.info("Operation cancelled.")
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface for montage creation."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    set_verbosity(verbose=args.verbose)

    try:
        return run_from_args(args)
    except ConfigError as exc:
        arg_parser.error(str(exc))
    return 2  # pragma: no cover


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
