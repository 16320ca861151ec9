"""Parse .sln files (custom text format, not XML) into SolutionData.

The format is line oriented and the meaning of a line depends on the block
it sits in, so parsing is a small state machine:

    Outside --Project(...)--> InProject(NONE)
    InProject --ProjectSection(...)--> InProject(DEPENDENCIES | SOLUTION_ITEMS | OTHER)
    InProject --EndProjectSection--> InProject(NONE)
    InProject --EndProject--> Outside
    Outside --GlobalSection(Name)--> InGlobal(Name)
    InGlobal --EndGlobalSection--> Outside

Unrecognised or malformed lines are dropped, never raised.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Union

from goto_slnx.config import ProjectEntry
from goto_slnx.errors import InputUnreadable
from goto_slnx.sln.solution import SolutionData
from goto_slnx.sln.text import split_config, split_once, starts_with, trim

logger = logging.getLogger(__name__)

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.vcxproj", "{PROJECT-GUID}"
_PROJECT_RE = re.compile(
    r'Project\(\"\{([^}]+)\}\"\)\s*=\s*\"([^\"]+)\"\s*,\s*\"([^\"]+)\"\s*,\s*\"\{([^}]+)\}\"\s*'
)

# Solutions saved by older Visual Studio versions use the ANSI code page
_LEGACY_ENCODING = "cp1252"

_LINE_END_RE = re.compile(r"\r\n|\r|\n")


class Subsection(str, Enum):
    NONE = "none"
    DEPENDENCIES = "dependencies"
    SOLUTION_ITEMS = "solution_items"
    OTHER = "other"


@dataclass(frozen=True)
class Outside:
    pass


@dataclass(frozen=True)
class InProject:
    entry: ProjectEntry
    subsection: Subsection = Subsection.NONE


@dataclass(frozen=True)
class InGlobal:
    section: str = ""


ParserState = Union[Outside, InProject, InGlobal]


def parse_project_header(line: str) -> ProjectEntry | None:
    """Build a ProjectEntry from a Project(...) header, or None if malformed."""
    match = _PROJECT_RE.fullmatch(line)
    if match is None:
        return None
    type_guid, name, path, guid = match.groups()
    return ProjectEntry(
        type_guid=f"{{{type_guid}}}",
        name=name,
        path=path,
        guid=f"{{{guid}}}",
    )


def _section_name(line: str) -> str:
    """Text between the first '(' and the first ')', empty if absent."""
    start = line.find("(")
    end = line.find(")")
    if start == -1 or end == -1 or end <= start + 1:
        return ""
    return line[start + 1:end]


# --- GlobalSection line handlers ---

def parse_solution_configuration(line: str, data: SolutionData) -> None:
    """Debug|x64 = Debug|x64"""
    left = trim(split_once(line, "=")[0])
    if not left:
        return
    data.add_solution_config(left)
    build_type, platform = split_config(left)
    data.add_build_type(build_type)
    data.add_platform(platform)


def parse_project_configuration(line: str, data: SolutionData) -> None:
    """{GUID}.Debug|x64.ActiveCfg = Debug|x64"""
    parts = split_once(line, "=")
    if len(parts) < 2:
        return
    left = trim(parts[0])
    right = trim(parts[1])

    if not starts_with(left, "{"):
        return
    guid_end = left.find("}")
    if guid_end == -1:
        return
    guid = left[:guid_end + 1]
    remainder = left[guid_end + 1:]
    if not starts_with(remainder, "."):
        return
    solution_config, dot, suffix = remainder[1:].rpartition(".")
    if not dot:
        return
    if suffix.isdigit() and "." in solution_config:
        # Build.0 / Deploy.0 carry a trailing index
        solution_config, _, kind = solution_config.rpartition(".")
        suffix = f"{kind}.{suffix}"

    data.add_solution_config(solution_config)

    project = data.find_project(guid)
    if project is None:
        logger.debug(f"Configuration for unknown project {guid} ignored")
        return

    mapping = project.mapping_for(solution_config)
    if suffix == "ActiveCfg":
        mapping.activate(*split_config(right))
    elif starts_with(suffix, "Build"):
        mapping.build = True
        mapping.build_set = True
        if right and not mapping.has_active:
            mapping.activate(*split_config(right))
    elif starts_with(suffix, "Deploy"):
        mapping.deploy = True
        mapping.deploy_set = True
        if right and not mapping.has_active:
            mapping.activate(*split_config(right))


def parse_nested_project(line: str, data: SolutionData) -> None:
    """{CHILD-GUID} = {PARENT-GUID}"""
    parts = split_once(line, "=")
    if len(parts) < 2:
        return
    child = trim(parts[0])
    parent = trim(parts[1])
    if not child or not parent:
        return
    data.add_nesting(child, parent)


_GLOBAL_HANDLERS: dict[str, Callable[[str, SolutionData], None]] = {
    "SolutionConfigurationPlatforms": parse_solution_configuration,
    "ProjectConfigurationPlatforms": parse_project_configuration,
    "NestedProjects": parse_nested_project,
}


class SolutionParser:
    """Feeds .sln lines through the section state machine."""

    def __init__(self) -> None:
        self.data = SolutionData()
        self.state: ParserState = Outside()

    def feed(self, raw_line: str) -> None:
        line = trim(raw_line)
        if not line:
            return
        if isinstance(self.state, InProject):
            self.state = self._in_project(line, self.state)
        else:
            self.state = self._outside_project(line, self.state)

    def finish(self) -> SolutionData:
        self.data.finalize()
        return self.data

    def _outside_project(self, line: str, state: ParserState) -> ParserState:
        if starts_with(line, "Project("):
            entry = parse_project_header(line)
            if entry is None:
                logger.debug(f"Malformed project header dropped: {line}")
                return state
            self.data.add_project(entry)
            return InProject(entry)

        if starts_with(line, "GlobalSection("):
            return InGlobal(_section_name(line))
        if starts_with(line, "EndGlobalSection"):
            return Outside()

        if isinstance(state, InGlobal):
            handler = _GLOBAL_HANDLERS.get(state.section)
            if handler is not None:
                handler(line, self.data)
        return state

    def _in_project(self, line: str, state: InProject) -> ParserState:
        if starts_with(line, "ProjectSection("):
            if "ProjectDependencies" in line:
                return InProject(state.entry, Subsection.DEPENDENCIES)
            if "SolutionItems" in line:
                return InProject(state.entry, Subsection.SOLUTION_ITEMS)
            return InProject(state.entry, Subsection.OTHER)
        if starts_with(line, "EndProjectSection"):
            return InProject(state.entry)
        if starts_with(line, "EndProject"):
            return Outside()

        parts = split_once(line, "=")
        if len(parts) < 2:
            return state
        if state.subsection is Subsection.DEPENDENCIES:
            dependency = trim(parts[0])
            if dependency:
                state.entry.dependencies.append(dependency)
        elif state.subsection is Subsection.SOLUTION_ITEMS:
            item = trim(parts[1])
            if item:
                state.entry.solution_items.append(item)
        return state


def parse_lines(lines: Iterable[str]) -> SolutionData:
    """Parse .sln content already split into lines."""
    parser = SolutionParser()
    for line in lines:
        parser.feed(line)
    return parser.finish()


def decode_solution(raw: bytes) -> str:
    """Decode .sln bytes as UTF-8, falling back to the ANSI code page."""
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError:
        logger.debug(f"Solution is not UTF-8, decoding as {_LEGACY_ENCODING}")
        return raw.decode(_LEGACY_ENCODING, errors="replace")


def read_lines(sln_path: str) -> list[str]:
    """Read a .sln file as lines. Raises InputUnreadable."""
    try:
        with open(sln_path, "rb") as f:
            raw = f.read()
    except OSError as e:
        raise InputUnreadable(sln_path, str(e)) from e
    # Split on line ends only; str.splitlines also breaks on \x1c, \x85 and friends
    return _LINE_END_RE.split(decode_solution(raw))


def parse_solution_file(sln_path: str) -> SolutionData:
    """Parse a .sln file and return the solution model."""
    data = parse_lines(read_lines(sln_path))
    logger.info(
        f"Parsed {sln_path}: {len(data.projects)} entries, "
        f"{len(data.solution_configs)} solution configurations"
    )
    return data
