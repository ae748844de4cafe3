from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """Domain entity: a registered student.

    Note: `descriptors` is the face model's output serialized as text. The
    backend stores and returns it but never interprets it.
    """

    roll: str
    name: str
    descriptors: str

    def to_row(self) -> dict:
        return {"name": self.name, "roll": self.roll, "descriptors": self.descriptors}
