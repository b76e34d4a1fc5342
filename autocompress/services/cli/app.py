# autocompress/services/cli/app.py
"""Command line entry point: autocompress <input_file> <desired_output_size_MB>."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import ValidationError

from autocompress.common.settings import get_settings
from autocompress.common.logging import get_logger
from autocompress.domain.entities.budget import SizeTarget
from autocompress.domain.errors import CompressorError, UsageError
from autocompress.services.compress.service import CompressService, RunConfig

logger = get_logger()

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class _ArgumentParser(argparse.ArgumentParser):
    """argparse that raises UsageError instead of exiting the interpreter."""

    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message, usage=self.format_usage())


def build_parser() -> _ArgumentParser:
    parser = _ArgumentParser(
        prog="autocompress",
        description="Re-encode a video with ffmpeg so that it lands near a target file size.",
    )
    parser.add_argument("input_file", help="Input video path")
    parser.add_argument("desired_output_size_MB", help="Target output size in MB (integer)")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Probe and print the computed bitrate without encoding",
    )
    return parser


def parse_config(argv: Optional[Sequence[str]] = None) -> RunConfig:
    args = build_parser().parse_args(argv)
    return RunConfig(
        input_path=Path(args.input_file),
        size=SizeTarget.parse(args.desired_output_size_MB),
        workdir=Path.cwd(),
        dry_run=args.dry_run,
    )


def main(argv: Optional[List[str]] = None, service: Optional[CompressService] = None) -> int:
    """Run one compression and return the process exit status."""
    try:
        get_logger(level=get_settings().log_level)
    except ValidationError as e:
        logger.error("error: invalid configuration: %s", e)
        return EXIT_FAILURE

    try:
        config = parse_config(argv)
    except UsageError as e:
        sys.stderr.write(e.usage)
        sys.stderr.write(f"autocompress: error: {e}\n")
        return EXIT_USAGE
    except SystemExit as e:
        # --help
        return e.code if isinstance(e.code, int) else EXIT_OK
    except CompressorError as e:
        logger.error("error: %s", e)
        return EXIT_FAILURE

    try:
        (service or CompressService()).run(config)
    except CompressorError as e:
        logger.error("error: %s", e)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
