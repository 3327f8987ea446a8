"""Placeholder CSV fixture generator."""

from .emitter import data_line, ensure_output_directory, generate, header_line, write_fixture
from .errors import Err, GeneratorError
from .paths import OutputPaths, default_output_dirname, program_name_from
from .request import FIELD_NAMES, GenerationRequest, build_request, parse_count

__all__ = [
    "Err",
    "FIELD_NAMES",
    "GenerationRequest",
    "GeneratorError",
    "OutputPaths",
    "build_request",
    "data_line",
    "default_output_dirname",
    "ensure_output_directory",
    "generate",
    "header_line",
    "parse_count",
    "program_name_from",
    "write_fixture",
]
