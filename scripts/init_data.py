from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from config import get_settings_module

from checkin_desk.attendance.csv_attendance_repository import CsvAttendanceRepository


def main() -> None:
    settings = importlib.import_module(get_settings_module())

    ledger = CsvAttendanceRepository(settings.ATTENDANCE_FILE)
    created = ledger.ensure_exists()
    print(f"OK: {'created' if created else 'found'} attendance ledger -> {ledger.path}")

    roster = Path(settings.STUDENT_DATA_FILE)
    if not roster.is_file():
        raise SystemExit(f"Missing roster: {roster}. Please create this file with student data.")
    print(f"OK: roster -> {roster}")


if __name__ == "__main__":
    main()
