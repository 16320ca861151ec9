"""Build the .slnx element tree from a parsed solution."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import PureWindowsPath

from goto_slnx.config import ProjectConfigMapping, ProjectEntry
from goto_slnx.graph.folders import ROOT, FolderPathResolver
from goto_slnx.sln.solution import SolutionData

logger = logging.getLogger(__name__)


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _file_stem(path: str) -> str:
    # .sln paths use backslashes; PureWindowsPath accepts both separators
    return PureWindowsPath(path).stem


def append_configurations(root: ET.Element, data: SolutionData) -> None:
    """Configurations block listing every build type and platform."""
    if not data.build_types and not data.platforms:
        return
    configs = ET.SubElement(root, "Configurations")
    for build_type in data.sorted_build_types():
        ET.SubElement(configs, "BuildType", Name=build_type)
    for platform in data.sorted_platforms():
        ET.SubElement(configs, "Platform", Name=platform)


def _append_mapping(
    project_elem: ET.Element, solution_config: str, mapping: ProjectConfigMapping
) -> None:
    if mapping.project_build_type:
        ET.SubElement(
            project_elem, "BuildType",
            Solution=solution_config, Project=mapping.project_build_type,
        )
    if mapping.project_platform:
        ET.SubElement(
            project_elem, "Platform",
            Solution=solution_config, Project=mapping.project_platform,
        )
    if mapping.build_set:
        ET.SubElement(project_elem, "Build", Solution=solution_config, Project=_flag(mapping.build))
    if mapping.deploy_set:
        ET.SubElement(project_elem, "Deploy", Solution=solution_config, Project=_flag(mapping.deploy))


def append_project(parent: ET.Element, project: ProjectEntry, data: SolutionData) -> ET.Element:
    """Project node with its dependencies and configuration mappings."""
    project_elem = ET.SubElement(parent, "Project", Path=project.path, Id=project.guid)
    if project.name and project.name != _file_stem(project.path):
        project_elem.set("DisplayName", project.name)

    for dep_guid in project.dependencies:
        dep_path = data.guid_to_path.get(dep_guid)
        if dep_path is None:
            logger.debug(f"{project.name}: dependency {dep_guid} has no project path, skipped")
            continue
        ET.SubElement(project_elem, "BuildDependency", Project=dep_path)

    for solution_config, mapping in project.sorted_configs():
        if mapping.has_active:
            _append_mapping(project_elem, solution_config, mapping)

    return project_elem


def group_by_folder(
    data: SolutionData, resolver: FolderPathResolver
) -> tuple[dict[str, list[ProjectEntry]], dict[str, list[str]]]:
    """Split entries into projects per folder path and items per folder path."""
    projects_by_folder: dict[str, list[ProjectEntry]] = {}
    files_by_folder: dict[str, list[str]] = {}

    for project in data.projects:
        if project.is_solution_folder:
            continue
        folder_path = resolver.resolve_parent(project.guid)
        projects_by_folder.setdefault(folder_path, []).append(project)

    for folder in data.folders():
        folder_path = resolver.resolve(folder.guid)
        files_by_folder[folder_path] = folder.solution_items

    return projects_by_folder, files_by_folder


def build_solution_tree(data: SolutionData) -> ET.Element:
    """Assemble the <Solution> document for the given solution model."""
    root = ET.Element("Solution")
    append_configurations(root, data)

    resolver = FolderPathResolver(data)
    projects_by_folder, files_by_folder = group_by_folder(data, resolver)

    folder_paths = (set(files_by_folder) | set(projects_by_folder)) - {ROOT}
    for folder_path in sorted(folder_paths):
        folder_elem = ET.SubElement(root, "Folder", Name=folder_path)
        for file_path in files_by_folder.get(folder_path, []):
            ET.SubElement(folder_elem, "File", Path=file_path)
        for project in projects_by_folder.get(folder_path, []):
            append_project(folder_elem, project, data)

    for project in projects_by_folder.get(ROOT, []):
        append_project(root, project, data)

    logger.debug(
        f"Assembled {len(folder_paths)} folders, "
        f"{len(projects_by_folder.get(ROOT, []))} root projects "
        f"({resolver.calls} folder resolutions)"
    )
    return root
