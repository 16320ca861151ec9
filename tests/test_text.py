"""Tests for the .sln text helpers."""

from goto_slnx.sln.text import split_config, split_once, starts_with, trim


class TestTextHelpers:
    def test_trim(self):
        assert trim("\t  Debug|x64 = Debug|x64 \r") == "Debug|x64 = Debug|x64"

    def test_starts_with(self):
        assert starts_with("Project(\"{X}\")", "Project(")
        assert not starts_with("EndProject", "Project(")

    def test_split_once_splits_on_first_delimiter(self):
        assert split_once("a = b = c", "=") == ["a ", " b = c"]

    def test_split_once_without_delimiter(self):
        assert split_once("HideSolutionNode", "=") == ["HideSolutionNode"]

    def test_split_config(self):
        assert split_config(" Debug | x64 ") == ("Debug", "x64")

    def test_split_config_uses_last_pipe(self):
        assert split_config("Debug|Any|CPU") == ("Debug|Any", "CPU")

    def test_split_config_without_platform(self):
        assert split_config("Debug") == ("Debug", "")
