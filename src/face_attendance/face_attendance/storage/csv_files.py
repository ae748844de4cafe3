from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Sequence, Tuple

from ..core.constants import ATTENDANCE_DIR_NAME, STUDENTS_FILE_NAME, SUBJECTS_FILE_NAME

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataPaths:
    """Resolved locations of every flat file the backend owns."""

    data_dir: Path

    @classmethod
    def from_dir(cls, data_dir) -> "DataPaths":
        return cls(data_dir=Path(data_dir).resolve())

    @property
    def students_file(self) -> Path:
        return self.data_dir / STUDENTS_FILE_NAME

    @property
    def subjects_file(self) -> Path:
        return self.data_dir / SUBJECTS_FILE_NAME

    @property
    def attendance_dir(self) -> Path:
        return self.data_dir / ATTENDANCE_DIR_NAME


def read_rows(path: Path) -> Tuple[List[str], List[Dict[str, str]]]:
    """Read a delimited file into (header, rows).

    A missing or empty file reads as no header and no rows. Short rows get ""
    for the missing trailing cells.
    """

    if not path.exists():
        return [], []

    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f, restval="")
        rows = [{k: (v or "") for k, v in row.items() if k is not None} for row in reader]
        header = list(reader.fieldnames or [])

    logger.debug("read %d rows from %s", len(rows), path)
    return header, rows


def write_rows(path: Path, fieldnames: Sequence[str], rows: Iterable[Mapping[str, str]]) -> None:
    """Rewrite the whole file: header row, then one line per record."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(fieldnames), restval="", extrasaction="ignore")
        writer.writeheader()
        count = 0
        for row in rows:
            writer.writerow(row)
            count += 1

    logger.debug("wrote %d rows to %s", count, path)
