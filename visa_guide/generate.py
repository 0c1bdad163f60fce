"""Regenerate the visa matrix block of every destination rules module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Tuple

import httpx

from .matrix import group_by_destination, parse_tidy_csv, render_visa_matrix
from .merge import ensure_markers, replace_generated_block
from .loader import RULES_FILENAME
from .models import GenerationSummary


logger = logging.getLogger(__name__)


class DatasetDownloadError(RuntimeError):
    """Raised when the passport-index CSV cannot be downloaded."""


def fetch_text(url: str, *, timeout: float = 30.0) -> str:
    try:
        response = httpx.get(url, timeout=timeout, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPError as exc:
        raise DatasetDownloadError(f"Failed to download CSV from {url}: {exc}") from exc
    return response.text


def list_destination_dirs(rules_root: Path) -> List[Tuple[str, Path]]:
    """Return (CODE, directory) pairs for every destination directory, sorted."""

    dirs = [
        (entry.name.upper(), entry)
        for entry in rules_root.iterdir()
        if entry.is_dir()
    ]
    return sorted(dirs)


def run_generation(
    dataset_url: str, rules_root: Path, *, timeout: float = 30.0
) -> GenerationSummary:
    """Download the dataset once and refresh each known destination's block.

    Only destinations that already have a directory under ``rules_root`` are
    touched, and a file is rewritten only when its content changes.
    """

    logger.info("Downloading visa dataset from %s", dataset_url)
    csv_text = fetch_text(dataset_url, timeout=timeout)
    rows = parse_tidy_csv(csv_text)
    by_destination = group_by_destination(rows)
    logger.info(
        "Parsed %d rows covering %d destinations", len(rows), len(by_destination)
    )

    destinations = list_destination_dirs(rules_root)
    updated = 0
    for code, directory in destinations:
        path = directory / RULES_FILENAME
        existing, written = ensure_markers(path)

        generated = render_visa_matrix(by_destination.get(code, {}))
        updated_content = replace_generated_block(existing, generated)
        if updated_content != existing:
            path.write_text(updated_content, encoding="utf-8")
            logger.info("Updated visa matrix for %s", code)
            written = True
        if written:
            updated += 1

    return GenerationSummary(updated=updated, total=len(destinations))
