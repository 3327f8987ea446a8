from __future__ import annotations

"""Output location helpers: program name, default directory and file path."""

from dataclasses import dataclass
from pathlib import Path
import os

from .errors import GeneratorError, Err

DEFAULT_PROGRAM_NAME = "csv_generator"
OUTPUT_DIR_SUFFIX = "_output"


def program_name_from(argv0: str | os.PathLike[str] | None) -> str:
    """Base name of the invoking executable without its extension."""
    if not argv0:
        return DEFAULT_PROGRAM_NAME
    stem = Path(argv0).stem
    # `python -m csv_fixture_gen` reports the package's __main__.py
    if not stem or stem == "__main__":
        return DEFAULT_PROGRAM_NAME
    return stem


def default_output_dirname(program_name: str) -> str:
    return f"{program_name}{OUTPUT_DIR_SUFFIX}"


def usable_file_name(output_path: str | os.PathLike[str]) -> str | None:
    name = Path(output_path).name
    if name in ("", ".", ".."):
        return None
    return name


@dataclass(frozen=True)
class OutputPaths:
    """Absolute output directory and the file path inside it."""

    output_directory: Path
    file_path: Path

    @classmethod
    def resolve(
        cls,
        output_path: str | os.PathLike[str],
        *,
        program_name: str,
        cwd: str | os.PathLike[str] | None = None,
    ) -> "OutputPaths":
        name = usable_file_name(output_path)
        if name is None:
            raise GeneratorError(
                Err.INVALID_ARGUMENT,
                ctx={"missing": ["output_file"], "output_path": str(output_path)},
            )
        base = Path(cwd) if cwd is not None else Path.cwd()
        parent = Path(output_path).parent
        if parent == Path("."):
            directory = base / default_output_dirname(program_name)
        else:
            directory = base / parent
        # normpath collapses ".." without following symlinks
        directory = Path(os.path.normpath(os.path.abspath(directory)))
        return cls(output_directory=directory, file_path=directory / name)
