from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.constants import STUDENT_FIELDS
from ..storage.csv_files import DataPaths, read_rows, write_rows
from .model import Student
from .repository import StudentRepository


class CsvStudentRepository(StudentRepository):
    def __init__(self, paths: DataPaths):
        self._paths = paths

    def _load(self) -> List[Student]:
        _, rows = read_rows(self._paths.students_file)
        return [
            Student(roll=row.get("roll", ""), name=row.get("name", ""), descriptors=row.get("descriptors", ""))
            for row in rows
        ]

    def _save(self, students: Sequence[Student]) -> None:
        write_rows(self._paths.students_file, STUDENT_FIELDS, (s.to_row() for s in students))

    def list_all(self) -> Sequence[Student]:
        return self._load()

    def get_by_roll(self, roll: str) -> Optional[Student]:
        for student in self._load():
            if student.roll == roll:
                return student
        return None

    def upsert(self, student: Student) -> bool:
        students = self._load()
        for i, existing in enumerate(students):
            if existing.roll == student.roll:
                students[i] = student
                self._save(students)
                return False

        students.append(student)
        self._save(students)
        return True

    def delete_by_roll(self, roll: str) -> bool:
        students = self._load()
        kept = [s for s in students if s.roll != roll]
        self._save(kept)
        return len(kept) != len(students)

    def clear(self) -> None:
        self._save([])
