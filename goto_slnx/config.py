"""Core data types and configuration for .sln to .slnx conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Project type GUID marking a solution folder rather than a buildable project
SOLUTION_FOLDER_TYPE_GUID = "{66A26720-8FB5-11D2-AA7E-00C04F688DDE}"


@dataclass
class ProjectConfigMapping:
    """How one project builds under one solution configuration."""
    project_build_type: str = ""
    project_platform: str = ""
    has_active: bool = False
    build: bool = False
    build_set: bool = False
    deploy: bool = False
    deploy_set: bool = False

    def activate(self, build_type: str, platform: str) -> None:
        self.project_build_type = build_type
        self.project_platform = platform
        self.has_active = True


@dataclass
class ProjectEntry:
    """A Project(...) block from a .sln file. Solution folders included."""
    type_guid: str
    name: str
    path: str
    guid: str
    dependencies: list[str] = field(default_factory=list)
    solution_items: list[str] = field(default_factory=list)
    config_map: dict[str, ProjectConfigMapping] = field(default_factory=dict)

    @property
    def is_solution_folder(self) -> bool:
        return self.type_guid == SOLUTION_FOLDER_TYPE_GUID

    def mapping_for(self, solution_config: str) -> ProjectConfigMapping:
        """Get or create the mapping for a solution configuration."""
        mapping = self.config_map.get(solution_config)
        if mapping is None:
            mapping = ProjectConfigMapping()
            self.config_map[solution_config] = mapping
        return mapping

    def sorted_configs(self) -> list[tuple[str, ProjectConfigMapping]]:
        return sorted(self.config_map.items())


@dataclass
class ConvertConfig:
    input_path: str = ""
    output_path: str | None = None
    force: bool = False
    dry_run: bool = False
    verbose: bool = False
    quiet: bool = False


@dataclass
class ConvertResult:
    input_path: str = ""
    output_path: str = ""
    written: bool = False
    document: str | None = None
    stats: dict[str, Any] = field(default_factory=dict)
    timings: dict[str, float] = field(default_factory=dict)
    duration_ms: float = 0.0
