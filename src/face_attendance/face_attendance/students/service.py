from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from ..attendance.service import AttendanceService
from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from ..subjects.service import SubjectService
from .model import Student
from .repository import StudentRepository

logger = logging.getLogger(__name__)


def serialize_descriptors(value: Any) -> str:
    """Descriptors arrive as a JSON array or as already-serialized text."""
    if value is None or value == "" or value == []:
        raise ValidationError("Missing required field: descriptors")
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"))


class StudentService:
    """Use case: manage the roster and keep every sheet in step with it."""

    def __init__(self, students: StudentRepository, subjects: SubjectService, attendance: AttendanceService):
        self._students = students
        self._subjects = subjects
        self._attendance = attendance

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def upsert(self, *, name: Any, roll: Any, descriptors: Any) -> Student:
        student = Student(
            roll=require_non_empty(roll, "roll"),
            name=require_non_empty(name, "name"),
            descriptors=serialize_descriptors(descriptors),
        )

        created = self._students.upsert(student)
        if created:
            self._attendance.add_student_to_all(self._subjects.subject_names(), name=student.name, roll=student.roll)
            logger.info("registered student %s", student.roll)
        else:
            logger.info("updated student %s", student.roll)
        return student

    def delete(self, roll: str) -> None:
        if self._students.delete_by_roll(roll):
            logger.info("deleted student %s", roll)
        self._attendance.remove_student_from_all(roll)

    def clear(self) -> None:
        self._students.clear()
        self._attendance.truncate_all()
        logger.info("cleared all student registrations")
