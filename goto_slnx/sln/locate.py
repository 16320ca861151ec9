"""Input and output path resolution for the converter."""

from __future__ import annotations

import os
from pathlib import Path

from goto_slnx.errors import InputNotFound, InputUnreadable, OutputUnwritable


def find_solution_file(directory: str) -> str:
    """Return the single .sln file in directory."""
    try:
        sln_files = sorted(
            p for p in Path(directory).iterdir()
            if p.is_file() and p.suffix.lower() == ".sln"
        )
    except OSError as e:
        raise InputUnreadable(directory, str(e)) from e
    if not sln_files:
        raise InputNotFound(
            f"No .sln file found in {directory}. Pass the .sln file path instead."
        )
    if len(sln_files) > 1:
        names = ", ".join(p.name for p in sln_files)
        raise InputNotFound(
            f"Multiple .sln files in {directory} ({names}). Pass the one to convert."
        )
    return str(sln_files[0])


def resolve_input_path(path: str) -> str:
    """Resolve a file or directory argument to a .sln file path."""
    if os.path.isdir(path):
        path = find_solution_file(path)
    if Path(path).suffix.lower() != ".sln":
        raise InputNotFound(f"Input is not a .sln file: {path}")
    return path


def default_output_path(sln_path: str) -> str:
    return str(Path(sln_path).with_suffix(".slnx"))


def resolve_output_path(sln_path: str, output_path: str | None, force: bool) -> str:
    """Pick the destination and refuse to overwrite unless forced."""
    if output_path is None:
        output_path = default_output_path(sln_path)
    if os.path.exists(output_path) and not force:
        raise OutputUnwritable(output_path, "already exists, use --force to overwrite")
    return output_path
