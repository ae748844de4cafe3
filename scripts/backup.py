"""Backup the data directory.

Note: Writes the same ZIP bundle the /api/export endpoint serves, into
`backups/` under the working directory.
"""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.face_attendance.face_attendance.container import build_container


def main() -> None:
    settings = load_settings()
    container = build_container(data_dir=settings["DATA_DIR"])

    out_dir = Path.cwd() / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_data_{ts}.zip"

    count = container.export_service.write_bundle(out_file)
    print(f"OK: Backup created: {out_file} ({count} files)")


if __name__ == "__main__":
    main()
