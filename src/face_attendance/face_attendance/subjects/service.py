from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List

from ..attendance.repository import SheetRepository
from ..attendance.service import AttendanceService
from ..common.validators import is_subject_name, require_subject_name
from ..core.exceptions import ConflictError
from .model import Subject
from .repository import SubjectRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconcileResult:
    subjects: List[Subject]
    added: List[Subject]


class SubjectService:
    """Use case: manage the subject registry.

    The registry file and the sheet files can drift apart (sheets copied in by
    hand, registry edited or lost). `list_subjects` reports the union without
    writing; `reconcile` also records the missing names in the registry.
    """

    def __init__(self, subjects: SubjectRepository, sheets: SheetRepository, attendance: AttendanceService):
        self._subjects = subjects
        self._sheets = sheets
        self._attendance = attendance

    def _union(self) -> ReconcileResult:
        registered = list(self._subjects.list_all())
        known = {s.name for s in registered}
        added = [Subject(name=name) for name in self._sheets.list_subjects() if name not in known]
        return ReconcileResult(subjects=registered + added, added=added)

    def list_subjects(self) -> List[Subject]:
        return self._union().subjects

    def subject_names(self) -> List[str]:
        """Names that have, or may get, a sheet file; exactly as recorded."""
        names = []
        for subject in self.list_subjects():
            if is_subject_name(subject.name):
                names.append(subject.name)
            else:
                logger.warning("registry entry %r cannot name a sheet, skipped", subject.name)
        return names

    def reconcile(self) -> ReconcileResult:
        result = self._union()
        if result.added:
            self._subjects.save_all(result.subjects)
            logger.info("registered %d subjects found on disk: %s", len(result.added), [s.name for s in result.added])
        return result

    def create(self, name: str) -> Subject:
        name = require_subject_name(name)
        if any(s.name == name for s in self._subjects.list_all()):
            raise ConflictError("Subject already exists")

        subject = Subject(name=name)
        self._subjects.add(subject)
        self._attendance.get_or_create(name)
        logger.info("created subject %r", name)
        return subject
