from __future__ import annotations

"""Validated generation parameters."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping
import os

from .errors import GeneratorError, Err
from .paths import OutputPaths, usable_file_name

FIELD_NAMES = ("output_file", "number_of_columns", "number_of_rows")

# raw input keys -> user-facing field names
_RAW_KEYS = {
    "out": "output_file",
    "cols": "number_of_columns",
    "rows": "number_of_rows",
}


def parse_count(value: Any) -> int | None:
    """Return a positive integer, or None when the value is missing or invalid.

    Strings must be base-10 integers; floats and booleans are rejected rather
    than coerced.
    """
    if value is None or isinstance(value, (bool, float)):
        return None
    if isinstance(value, int):
        number = value
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = int(text, 10)
        except ValueError:
            return None
    if number <= 0:
        return None
    return number


@dataclass(frozen=True)
class GenerationRequest:
    output_path: str
    column_count: int
    row_count: int
    program_name: str
    cwd: Path | None = None
    paths: OutputPaths = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        missing = [
            name
            for name, value in (
                ("number_of_columns", self.column_count),
                ("number_of_rows", self.row_count),
            )
            if parse_count(value) is None
        ]
        if missing:
            raise GeneratorError(Err.INVALID_ARGUMENT, ctx={"missing": missing})
        object.__setattr__(
            self,
            "paths",
            OutputPaths.resolve(self.output_path, program_name=self.program_name, cwd=self.cwd),
        )

    @property
    def output_directory(self) -> Path:
        return self.paths.output_directory

    @property
    def file_path(self) -> Path:
        return self.paths.file_path


def missing_fields(raw: Mapping[str, Any]) -> list[str]:
    """Names of every field in ``raw`` that fails validation, in usage order."""
    missing: list[str] = []
    out = raw.get("out")
    if out is None or not str(out).strip() or usable_file_name(str(out).strip()) is None:
        missing.append(_RAW_KEYS["out"])
    for key in ("cols", "rows"):
        if parse_count(raw.get(key)) is None:
            missing.append(_RAW_KEYS[key])
    return missing


def build_request(
    raw: Mapping[str, Any],
    *,
    program_name: str,
    cwd: str | os.PathLike[str] | None = None,
) -> GenerationRequest:
    missing = missing_fields(raw)
    if missing:
        raise GeneratorError(Err.INVALID_ARGUMENT, ctx={"missing": missing})
    return GenerationRequest(
        output_path=str(raw["out"]).strip(),
        column_count=parse_count(raw["cols"]),
        row_count=parse_count(raw["rows"]),
        program_name=program_name,
        cwd=Path(cwd) if cwd is not None else None,
    )
