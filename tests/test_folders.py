"""Tests for solution folder path resolution."""

from __future__ import annotations

from goto_slnx.graph.folders import FolderPathResolver, normalize_folder_path
from goto_slnx.sln.solution import SolutionData


def _data(names: dict[str, str], nesting: dict[str, str]) -> SolutionData:
    data = SolutionData()
    data.guid_to_name.update(names)
    data.nested_projects.update(nesting)
    return data


class TestNormalize:
    def test_root(self):
        assert normalize_folder_path([]) == "/"

    def test_segments(self):
        assert normalize_folder_path(["Engine", "", "Rendering"]) == "/Engine/Rendering/"


class TestFolderPathResolver:
    def test_top_level_folder(self):
        resolver = FolderPathResolver(_data({"{F}": "Src"}, {}))
        assert resolver.resolve("{F}") == "/Src/"

    def test_nested_chain(self):
        data = _data(
            {"{A}": "Engine", "{B}": "Rendering", "{C}": "Vulkan"},
            {"{B}": "{A}", "{C}": "{B}"},
        )
        resolver = FolderPathResolver(data)
        assert resolver.resolve("{C}") == "/Engine/Rendering/Vulkan/"
        assert resolver.resolve("{B}") == "/Engine/Rendering/"

    def test_unknown_guid_is_root(self):
        resolver = FolderPathResolver(_data({}, {}))
        assert resolver.resolve("{MISSING}") == "/"

    def test_unnamed_folder_inherits_parent_segments(self):
        data = _data({"{A}": "Engine"}, {"{X}": "{A}"})
        resolver = FolderPathResolver(data)
        assert resolver.resolve("{X}") == "/Engine/"

    def test_memoised(self):
        data = _data({"{A}": "Engine", "{B}": "Rendering"}, {"{B}": "{A}"})
        resolver = FolderPathResolver(data)

        first = resolver.resolve("{B}")
        calls = resolver.calls
        second = resolver.resolve("{B}")

        assert first == second
        assert resolver.calls == calls == 2
        assert resolver.cache == {"{A}": "/Engine/", "{B}": "/Engine/Rendering/"}

    def test_self_reference_terminates(self):
        resolver = FolderPathResolver(_data({"{A}": "Loop"}, {"{A}": "{A}"}))
        assert resolver.resolve("{A}") == "/Loop/"
        assert resolver.visiting == set()

    def test_cycle_terminates_at_root(self):
        data = _data({"{A}": "A", "{B}": "B"}, {"{A}": "{B}", "{B}": "{A}"})
        resolver = FolderPathResolver(data)

        # The back edge to {A} resolves to the root, cutting the cycle there
        assert resolver.resolve("{A}") == "/B/A/"
        assert resolver.resolve("{B}") == "/B/"
        assert resolver.visiting == set()

    def test_unnamed_cycle_resolves_to_root(self):
        resolver = FolderPathResolver(_data({}, {"{A}": "{B}", "{B}": "{A}"}))
        assert resolver.resolve("{A}") == "/"
        assert resolver.resolve("{B}") == "/"

    def test_resolve_parent(self):
        data = _data({"{F}": "Src", "{P}": "App"}, {"{P}": "{F}"})
        resolver = FolderPathResolver(data)
        assert resolver.resolve_parent("{P}") == "/Src/"
        assert resolver.resolve_parent("{F}") == "/"
