"""XML serialisation of the assembled .slnx tree."""

from __future__ import annotations

import os
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path

from goto_slnx.errors import OutputUnwritable


def _serialize(root: ET.Element) -> bytes:
    tree = ET.ElementTree(root)
    ET.indent(tree, space="  ")
    return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


def render_output(root: ET.Element) -> str:
    """Return the document as text, declaration included."""
    return _serialize(root).decode("utf-8")


def write_output(root: ET.Element, output_path: str) -> None:
    """Write the document to output_path atomically.

    The bytes go to a temporary file next to the destination which then
    replaces it, so a failed write never leaves a truncated .slnx behind.
    """
    payload = _serialize(root)
    target = Path(output_path)
    tmp_path = None
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(target.parent)
        )
        with os.fdopen(fd, "wb") as f:
            f.write(payload)
        os.replace(tmp_path, target)
    except OSError as e:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise OutputUnwritable(output_path, str(e)) from e
