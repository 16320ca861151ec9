"""In-memory model of a parsed .sln file."""

from __future__ import annotations

from goto_slnx.config import ProjectEntry


class SolutionData:
    """Projects, GUID indexes, nesting edges and configuration sets.

    guid_to_path: project GUID -> project file path (folders excluded)
    guid_to_name: GUID -> display name (folders included)
    nested_projects: child GUID -> parent folder GUID
    """

    def __init__(self) -> None:
        self.projects: list[ProjectEntry] = []
        self.guid_to_path: dict[str, str] = {}
        self.guid_to_name: dict[str, str] = {}
        self.nested_projects: dict[str, str] = {}
        self.solution_configs: set[str] = set()
        self.build_types: set[str] = set()
        self.platforms: set[str] = set()
        self._by_guid: dict[str, ProjectEntry] = {}

    def add_project(self, entry: ProjectEntry) -> None:
        self.projects.append(entry)
        self.guid_to_name[entry.guid] = entry.name
        if not entry.is_solution_folder:
            self.guid_to_path[entry.guid] = entry.path
        # A repeated GUID still resolves to the first entry declaring it
        self._by_guid.setdefault(entry.guid, entry)

    def find_project(self, guid: str) -> ProjectEntry | None:
        return self._by_guid.get(guid)

    def add_nesting(self, child: str, parent: str) -> None:
        self.nested_projects[child] = parent

    def add_solution_config(self, solution_config: str) -> None:
        self.solution_configs.add(solution_config)

    def add_build_type(self, build_type: str) -> None:
        if build_type:
            self.build_types.add(build_type)

    def add_platform(self, platform: str) -> None:
        if platform:
            self.platforms.add(platform)

    def sorted_build_types(self) -> list[str]:
        return sorted(self.build_types)

    def sorted_platforms(self) -> list[str]:
        return sorted(self.platforms)

    def folders(self) -> list[ProjectEntry]:
        return [p for p in self.projects if p.is_solution_folder]

    def buildable_projects(self) -> list[ProjectEntry]:
        return [p for p in self.projects if not p.is_solution_folder]

    def finalize(self) -> None:
        """Give every active mapping explicit build/deploy flags.

        A configuration the solution never marked for build or deploy is
        written out as Build="false" / Deploy="false".
        """
        for project in self.projects:
            for mapping in project.config_map.values():
                if not mapping.has_active:
                    continue
                if not mapping.build_set:
                    mapping.build = False
                    mapping.build_set = True
                if not mapping.deploy_set:
                    mapping.deploy = False
                    mapping.deploy_set = True
