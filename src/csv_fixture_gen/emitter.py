from __future__ import annotations

"""Directory provisioning, placeholder CSV emission and status output."""

import logging
from pathlib import Path
from typing import Callable, TextIO

from .errors import GeneratorError, Err
from .request import GenerationRequest

logger = logging.getLogger(__name__)

COLUMN_SUFFIX = "_Column"
PLACEHOLDER_CELL = "data"


def header_line(column_count: int) -> str:
    # every field is comma-led, so the first header field is empty
    return "".join(f",{i}{COLUMN_SUFFIX}" for i in range(column_count)) + "\n"


def data_line(column_count: int) -> str:
    return f",{PLACEHOLDER_CELL}" * column_count + "\n"


def ensure_output_directory(path: Path) -> None:
    if path.is_dir():
        return
    if path.exists():
        raise GeneratorError(
            Err.IO_FAILURE,
            ctx={"path": str(path), "reason": "not_a_directory"},
        )
    try:
        path.mkdir()
    except OSError as exc:
        raise GeneratorError(
            Err.IO_FAILURE,
            ctx={"path": str(path), "reason": "mkdir_failed"},
            cause=exc,
        ) from exc
    logger.debug("created output directory %s", path)


def _silent(_: str) -> None:
    return None


def _emit(fh: TextIO, request: GenerationRequest, echo: Callable[[str], None]) -> int:
    echo("Writing columns...")
    written = fh.write(header_line(request.column_count))
    echo("Writing rows...")
    row = data_line(request.column_count)
    for _ in range(request.row_count):
        written += fh.write(row)
    return written


def write_fixture(
    request: GenerationRequest,
    *,
    overwrite: bool = False,
    echo: Callable[[str], None] = _silent,
) -> int:
    """Write the header and all rows to ``request.file_path``.

    Appends by default; ``overwrite`` truncates the file first. Returns the
    number of characters written.
    """
    mode = "w" if overwrite else "a"
    target = request.file_path
    logger.debug("writing %s in mode %r", target, mode)
    try:
        with target.open(mode, encoding="utf-8", newline="") as fh:
            written = _emit(fh, request, echo)
    except OSError as exc:
        raise GeneratorError(
            Err.IO_FAILURE,
            ctx={"path": str(target), "reason": "write_failed"},
            cause=exc,
        ) from exc
    logger.debug("wrote %d characters to %s", written, target)
    return written


def generate(
    request: GenerationRequest,
    *,
    overwrite: bool = False,
    echo: Callable[[str], None] = print,
) -> Path:
    """Provision the directory, write the fixture and report progress via ``echo``."""
    echo(
        f"\n\nCreating {request.file_path.name} to contain {request.column_count} columns"
        f" and {request.row_count} rows...\n\n"
    )
    ensure_output_directory(request.output_directory)
    write_fixture(request, overwrite=overwrite, echo=echo)
    echo(f"File has been generated here: {request.file_path}")
    return request.file_path
