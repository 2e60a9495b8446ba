"""Filesystem helpers."""

from pathlib import Path
from typing import Sequence


def find_repo_root(
    start: Path | None = None,
    markers: Sequence[str] = ("pyproject.toml", ".env"),
) -> Path:
    """Walk upwards from ``start`` until a folder containing one of ``markers`` is found.

    Args:
        start: Optional starting path. Defaults to the location of this file.
        markers: Filenames used to identify the project root.

    Returns:
        The project root, or the current working directory if no marker is found
        (e.g. when running from an installed wheel).
    """
    p = (start or Path(__file__).resolve()).parent
    for candidate in [p, *p.parents]:
        if any((candidate / marker).exists() for marker in markers):
            return candidate
    return Path.cwd()
