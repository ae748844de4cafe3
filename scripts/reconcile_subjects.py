"""Register subjects whose attendance sheets exist on disk but are missing
from subjects_data.csv."""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.face_attendance.face_attendance.container import build_container


def main() -> None:
    settings = load_settings()
    container = build_container(data_dir=settings["DATA_DIR"])

    result = container.subject_service.reconcile()
    added = ", ".join(s.name for s in result.added) or "none"
    print(f"OK: {len(result.subjects)} subjects registered (added: {added})")


if __name__ == "__main__":
    main()
