"""Command-line entry point for generating placeholder CSV fixtures."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable

from .emitter import generate
from .errors import GeneratorError, Err
from .paths import program_name_from
from .prompts import prompt_user, usage_synopsis
from .request import FIELD_NAMES, build_request

logger = logging.getLogger(__name__)


def _build_parser(program_name: str) -> argparse.ArgumentParser:
    # positionals are left to parse_known_args so dash-led file names survive
    parser = argparse.ArgumentParser(
        prog=program_name,
        usage="%(prog)s [--overwrite] [--log-level LEVEL] <output_file> <number_of_columns> <number_of_rows>",
        description="Generate a placeholder CSV file with N columns and M rows; prompts unless exactly three values are given",
        allow_abbrev=False,
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Truncate an existing output file instead of appending to it",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level written to stderr (default: WARNING)",
    )
    return parser


def missing_message(missing: list[str]) -> str:
    label = "Missing arguments" if len(missing) > 1 else "Missing argument"
    return f"{label}: {','.join(missing)}"


def usage_line(program_name: str) -> str:
    return f"Usage: {usage_synopsis(program_name)}"


def main(
    argv: Iterable[str] | None = None,
    *,
    program_name: str | None = None,
    cwd: str | os.PathLike[str] | None = None,
) -> int:
    program_name = program_name or program_name_from(sys.argv[0])
    parser = _build_parser(program_name)
    args, params = parser.parse_known_args(list(argv) if argv is not None else None)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if len(params) == len(FIELD_NAMES):
        out, cols, rows = params
        raw = {"out": out, "cols": cols, "rows": rows}
    else:
        raw = prompt_user(program_name)

    try:
        request = build_request(raw, program_name=program_name, cwd=cwd)
    except GeneratorError as exc:
        if exc.code is not Err.INVALID_ARGUMENT:
            raise
        print(missing_message(list(exc.ctx.get("missing", []))))
        print(usage_line(program_name))
        return 1

    logger.info("resolved output file %s", request.file_path)
    generate(request, overwrite=args.overwrite)
    return 0


def entrypoint() -> None:  # pragma: no cover - console entry
    try:
        raise SystemExit(main())
    except GeneratorError as exc:  # pragma: no cover - console behavior
        raise SystemExit(f"error: {exc}")
