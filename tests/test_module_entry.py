from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"


def run(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    env = {**os.environ, "PYTHONPATH": str(SRC)}
    return subprocess.run(
        [sys.executable, "-m", "csv_fixture_gen", *args],
        cwd=str(cwd),
        env=env,
        input=stdin,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
    )


def test_module_entry_writes_default_directory(tmp_path: Path) -> None:
    proc = run(["out.csv", "1", "1"], cwd=tmp_path)

    assert proc.returncode == 0, proc.stdout + proc.stderr
    target = tmp_path / "csv_generator_output" / "out.csv"
    assert target.read_text(encoding="utf-8") == ",0_Column\n,data\n"


def test_module_entry_invalid_argument_exit_code(tmp_path: Path) -> None:
    proc = run(["out.csv", "0", "1"], cwd=tmp_path)

    assert proc.returncode == 1
    assert "Missing argument: number_of_columns" in proc.stdout
    assert "Usage: csv_generator <output_file> <number_of_columns> <number_of_rows>" in proc.stdout
    assert list(tmp_path.iterdir()) == []


def test_module_entry_interactive_from_stdin(tmp_path: Path) -> None:
    proc = run([], cwd=tmp_path, stdin="typed.csv\n2\n3\n")

    assert proc.returncode == 0, proc.stdout + proc.stderr
    lines = (tmp_path / "csv_generator_output" / "typed.csv").read_text(encoding="utf-8").splitlines()
    assert lines == [",0_Column,1_Column"] + [",data,data"] * 3


def test_module_entry_io_failure_is_nonzero(tmp_path: Path) -> None:
    (tmp_path / "csv_generator_output").write_text("x", encoding="utf-8")

    proc = run(["out.csv", "1", "1"], cwd=tmp_path)

    assert proc.returncode == 1
    assert "error: IO_FAILURE" in proc.stderr
