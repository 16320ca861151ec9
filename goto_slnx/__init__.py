"""goto-slnx - Convert Visual Studio .sln solutions to the .slnx format."""

from goto_slnx.config import ConvertConfig, ConvertResult
from goto_slnx.pipeline import run_pipeline
from goto_slnx.sln.parser import parse_lines, parse_solution_file
from goto_slnx.slnx.assembler import build_solution_tree

__version__ = "0.1.0"
__all__ = [
    "ConvertConfig",
    "ConvertResult",
    "build_solution_tree",
    "parse_lines",
    "parse_solution_file",
    "run_pipeline",
]
