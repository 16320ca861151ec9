"""Sequential phase orchestrator with timing."""

from __future__ import annotations

import logging
import time
import xml.etree.ElementTree as ET

from goto_slnx.config import ConvertConfig, ConvertResult
from goto_slnx.output import render_output, write_output
from goto_slnx.sln.locate import resolve_input_path, resolve_output_path
from goto_slnx.sln.parser import parse_solution_file
from goto_slnx.sln.solution import SolutionData
from goto_slnx.slnx.assembler import build_solution_tree

logger = logging.getLogger(__name__)

_PHASE_LABELS = {
    "locate": "Locating solution file",
    "parse": "Parsing solution",
    "assemble": "Assembling .slnx tree",
    "write": "Writing .slnx",
}


def _collect_stats(data: SolutionData) -> dict[str, int]:
    projects = data.buildable_projects()
    return {
        "projects": len(projects),
        "folders": len(data.folders()),
        "solution_configs": len(data.solution_configs),
        "build_types": len(data.build_types),
        "platforms": len(data.platforms),
        "dependencies": sum(len(p.dependencies) for p in projects),
        "nested": len(data.nested_projects),
    }


def run_pipeline(
    config: ConvertConfig,
    progress_callback=None,
) -> ConvertResult:
    """Convert config.input_path to .slnx and return the result.

    Args:
        config: Conversion configuration.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.

    Raises:
        SlnxError: the input cannot be located or read, or the output
            cannot be written. Nothing is written in that case.
    """
    result = ConvertResult()
    data = SolutionData()
    tree = ET.Element("Solution")
    timings: dict[str, float] = {}
    total_start = time.monotonic()

    def locate() -> None:
        result.input_path = resolve_input_path(config.input_path)
        if not config.dry_run:
            result.output_path = resolve_output_path(
                result.input_path, config.output_path, config.force
            )

    def parse() -> None:
        nonlocal data
        data = parse_solution_file(result.input_path)

    def assemble() -> None:
        nonlocal tree
        tree = build_solution_tree(data)

    def write() -> None:
        if config.dry_run:
            result.document = render_output(tree)
            return
        write_output(tree, result.output_path)
        result.written = True

    phases = [
        ("locate", locate),
        ("parse", parse),
        ("assemble", assemble),
        ("write", write),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn()
        timings[name] = time.monotonic() - start

    result.stats = _collect_stats(data)
    result.timings = timings
    result.duration_ms = round((time.monotonic() - total_start) * 1000, 1)
    logger.info(f"Converted {result.input_path} in {result.duration_ms}ms")
    return result
