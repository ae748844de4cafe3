from __future__ import annotations

import logging

from .csv_files import DataPaths

logger = logging.getLogger(__name__)


def ensure_data_dirs(paths: DataPaths) -> None:
    """Create the data and attendance directories (idempotent)."""

    paths.data_dir.mkdir(parents=True, exist_ok=True)
    paths.attendance_dir.mkdir(parents=True, exist_ok=True)
    logger.info("data directory ready at %s", paths.data_dir)


def list_data_files(paths: DataPaths) -> list[str]:
    """Names of the files currently present, relative to the data directory."""

    if not paths.data_dir.exists():
        return []
    return sorted(str(p.relative_to(paths.data_dir)) for p in paths.data_dir.rglob("*") if p.is_file())
