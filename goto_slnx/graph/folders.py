"""Solution folder path resolution from NestedProjects edges."""

from __future__ import annotations

import logging

from goto_slnx.sln.solution import SolutionData

logger = logging.getLogger(__name__)

ROOT = "/"


def normalize_folder_path(segments: list[str]) -> str:
    """Join folder names into '/A/B/'. No segments gives the root '/'."""
    path = ROOT
    for segment in segments:
        if not segment:
            continue
        path += segment
        if not path.endswith("/"):
            path += "/"
    return path


def split_folder_path(path: str) -> list[str]:
    return [segment for segment in path.strip("/").split("/") if segment]


class FolderPathResolver:
    """Resolves a folder GUID to its '/Parent/Child/' path.

    Results are memoised. A GUID met again while its own resolution is
    still in progress resolves to the root, so nesting cycles terminate
    with the chain cut at that point.
    """

    def __init__(self, data: SolutionData) -> None:
        self.data = data
        self.cache: dict[str, str] = {}
        self.visiting: set[str] = set()
        self.calls = 0

    def resolve(self, folder_guid: str) -> str:
        cached = self.cache.get(folder_guid)
        if cached is not None:
            return cached
        if folder_guid in self.visiting:
            logger.debug(f"Nesting cycle at {folder_guid}, placing at root")
            return ROOT

        self.visiting.add(folder_guid)
        self.calls += 1

        segments: list[str] = []
        name = self.data.guid_to_name.get(folder_guid)
        if name is not None:
            segments.append(name)

        parent = self.data.nested_projects.get(folder_guid)
        if parent is not None:
            parent_path = self.resolve(parent)
            if parent_path != ROOT:
                segments = split_folder_path(parent_path) + segments

        path = normalize_folder_path(segments)
        self.cache[folder_guid] = path
        self.visiting.discard(folder_guid)
        return path

    def resolve_parent(self, guid: str) -> str:
        """Path of the folder containing guid, root if it is not nested."""
        parent = self.data.nested_projects.get(guid)
        if parent is None:
            return ROOT
        return self.resolve(parent)
