from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    name: str

    def to_dict(self) -> dict:
        return {"subject": self.name}
