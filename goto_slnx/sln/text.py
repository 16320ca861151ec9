"""Small string helpers shared by the .sln line handlers."""

from __future__ import annotations


def trim(text: str) -> str:
    return text.strip()


def starts_with(text: str, prefix: str) -> bool:
    return text.startswith(prefix)


def split_once(text: str, delimiter: str) -> list[str]:
    """Split on the first delimiter. Returns one part if it is absent."""
    head, sep, tail = text.partition(delimiter)
    if not sep:
        return [text]
    return [head, tail]


def split_config(config: str) -> tuple[str, str]:
    """Split 'BuildType|Platform' on the last '|' into trimmed parts."""
    head, sep, tail = config.rpartition("|")
    if not sep:
        return trim(config), ""
    return trim(head), trim(tail)
