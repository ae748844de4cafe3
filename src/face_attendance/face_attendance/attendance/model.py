from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set


@dataclass
class SheetRow:
    """One student's line in a subject sheet."""

    name: str
    roll: str
    present_dates: Set[str] = field(default_factory=set)

    def is_present(self, day: str) -> bool:
        return day in self.present_dates


@dataclass
class AttendanceSheet:
    """A subject's roll x date presence matrix.

    Rows are keyed by roll (insertion order is file order). `dates` is the
    ordered list of date columns; a column may exist with nobody present in it.
    """

    subject: str
    dates: List[str] = field(default_factory=list)
    rows: Dict[str, SheetRow] = field(default_factory=dict)

    def __iter__(self) -> Iterator[SheetRow]:
        return iter(self.rows.values())

    def __len__(self) -> int:
        return len(self.rows)

    def __contains__(self, roll: str) -> bool:
        return roll in self.rows

    def get(self, roll: str) -> Optional[SheetRow]:
        return self.rows.get(roll)

    def add_row(self, name: str, roll: str) -> bool:
        """Add a bare row. Returns False if the roll is already there."""
        if roll in self.rows:
            return False
        self.rows[roll] = SheetRow(name=name, roll=roll)
        return True

    def remove_row(self, roll: str) -> bool:
        return self.rows.pop(roll, None) is not None

    def add_date(self, day: str) -> None:
        if day not in self.dates:
            self.dates.append(day)

    def mark_present(self, roll: str, day: str) -> None:
        self.add_date(day)
        self.rows[roll].present_dates.add(day)

    def remove_date(self, day: str) -> bool:
        if day not in self.dates:
            return False
        self.dates.remove(day)
        for row in self.rows.values():
            row.present_dates.discard(day)
        return True

    def present_on(self, day: str) -> List[SheetRow]:
        return [row for row in self.rows.values() if row.is_present(day)]


@dataclass(frozen=True)
class AttendanceEntry:
    """Read-model: one student present on one date for one subject."""

    name: str
    roll: str
    date: str
    subject: str
    time: str

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "roll": self.roll,
            "date": self.date,
            "time": self.time,
            "subject": self.subject,
        }


@dataclass(frozen=True)
class SheetSummary:
    """Read-model for a whole sheet: dates taken and per-student totals."""

    subject: str
    dates: List[str]
    students: List[dict]

    def to_dict(self) -> dict:
        return {
            "subject": self.subject,
            "dates": list(self.dates),
            "total_sessions": len(self.dates),
            "students": list(self.students),
        }
