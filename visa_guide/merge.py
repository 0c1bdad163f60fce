"""Splice generated content into hand-maintained rules modules."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Tuple


logger = logging.getLogger(__name__)

AUTO_START = "# --- AUTO-GENERATED VISA MATRIX START ---"
AUTO_END = "# --- AUTO-GENERATED VISA MATRIX END ---"

EMPTY_BLOCK = f"{AUTO_START}\nvisa_matrix = {{}}\n{AUTO_END}\n"


class MarkerError(RuntimeError):
    """Raised when a rules module has missing or misordered markers."""


def scaffold_for(destination: str) -> str:
    return (
        f'"""{destination} entry rules."""\n'
        "\n"
        "checklist = []\n"
        "\n"
        "rules = []\n"
        "\n"
        f"{EMPTY_BLOCK}"
    )


def ensure_markers(path: Path) -> Tuple[str, bool]:
    """Return the file content, adding a generated block where none exists.

    A missing file is created from a scaffold. A file lacking either marker
    gets an empty block appended after its content. An orphan marker is left
    in place, so a lone end marker still precedes the new start marker and
    ``replace_generated_block`` rejects the file. The second value tells
    whether the file was written.
    """

    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        content = scaffold_for(path.parent.name.upper())
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        logger.info("Created rules scaffold at %s", path)
        return content, True

    if AUTO_START in content and AUTO_END in content:
        return content, False

    content = f"{content.rstrip()}\n\n{EMPTY_BLOCK}"
    path.write_text(content, encoding="utf-8")
    logger.info("Appended generated block to %s", path)
    return content, True


def replace_generated_block(file_content: str, generated_block: str) -> str:
    """Swap the text between the markers for ``generated_block``.

    Everything up to the start marker and from the end marker onward is
    kept byte for byte.
    """

    start = file_content.find(AUTO_START)
    end = file_content.find(AUTO_END)
    if start == -1 or end == -1 or end < start:
        raise MarkerError("Auto-generated markers not found or invalid ordering.")

    before = file_content[: start + len(AUTO_START)]
    after = file_content[end:]
    if not generated_block.endswith("\n"):
        generated_block += "\n"
    return f"{before}\n{generated_block}{after}"
