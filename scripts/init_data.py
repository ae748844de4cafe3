from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import load_settings

from src.face_attendance.face_attendance.storage.bootstrap import ensure_data_dirs, list_data_files
from src.face_attendance.face_attendance.storage.csv_files import DataPaths


def main() -> None:
    settings = load_settings()
    paths = DataPaths.from_dir(settings["DATA_DIR"])

    ensure_data_dirs(paths)
    files = list_data_files(paths)
    print(f"OK: data directory ready -> {paths.data_dir} (files={len(files)})")


if __name__ == "__main__":
    main()
