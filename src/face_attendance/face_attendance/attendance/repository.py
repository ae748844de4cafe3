from __future__ import annotations

from pathlib import Path
from typing import Optional, Protocol, Sequence

from .model import AttendanceSheet


class SheetRepository(Protocol):
    """Storage of per-subject attendance sheets."""

    def exists(self, subject: str) -> bool:
        raise NotImplementedError

    def load(self, subject: str) -> Optional[AttendanceSheet]:
        raise NotImplementedError

    def save(self, sheet: AttendanceSheet) -> None:
        raise NotImplementedError

    def list_subjects(self) -> Sequence[str]:
        """Subjects that currently have a sheet file, sorted by name."""

        raise NotImplementedError

    def path_for(self, subject: str) -> Path:
        raise NotImplementedError

    def delete_all(self) -> int:
        raise NotImplementedError
