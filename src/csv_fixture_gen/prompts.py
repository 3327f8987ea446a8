from __future__ import annotations

from typing import Callable

from .request import FIELD_NAMES


def usage_synopsis(program_name: str) -> str:
    return f"{program_name} " + " ".join(f"<{name}>" for name in FIELD_NAMES)


def _prompt(question: str) -> str | None:
    print(question)
    try:
        return input().rstrip("\r\n")
    except EOFError:
        return None


def prompt_user(
    program_name: str,
    *,
    echo: Callable[[str], None] = print,
) -> dict[str, str | None]:
    """Ask for the output file, column count and row count on stdin."""
    echo("Creation parameters can be passed to the script as arguments like so:")
    echo(usage_synopsis(program_name) + "\n")
    echo("Proceeding with prompted questions...")
    raw = {
        "out": _prompt("Name of output file?"),
        "cols": _prompt("How many columns?"),
        "rows": _prompt("How many rows?"),
    }
    echo("")
    return raw
