from __future__ import annotations

from typing import List, Sequence

from ..core.constants import SUBJECT_FIELDS
from ..storage.csv_files import DataPaths, read_rows, write_rows
from .model import Subject
from .repository import SubjectRepository


class CsvSubjectRepository(SubjectRepository):
    def __init__(self, paths: DataPaths):
        self._paths = paths

    def list_all(self) -> List[Subject]:
        _, rows = read_rows(self._paths.subjects_file)
        return [Subject(name=row["subject"]) for row in rows if row.get("subject")]

    def save_all(self, subjects: Sequence[Subject]) -> None:
        write_rows(self._paths.subjects_file, SUBJECT_FIELDS, (s.to_dict() for s in subjects))

    def add(self, subject: Subject) -> None:
        subjects = self.list_all()
        subjects.append(subject)
        self.save_all(subjects)
