from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for the roster.

    Note (DIP): services depend on this interface, not on the CSV file.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_roll(self, roll: str) -> Optional[Student]:
        raise NotImplementedError

    def upsert(self, student: Student) -> bool:
        """Replace in place or append. Returns True when the roll is new."""

        raise NotImplementedError

    def delete_by_roll(self, roll: str) -> bool:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError
