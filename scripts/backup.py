"""Backup the attendance ledger.

Note: copies the CSV as-is into backups/ with a timestamp; the roster is
maintained out-of-band and is not backed up here.
"""

from __future__ import annotations

import importlib
import shutil
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    ledger = Path(settings.ATTENDANCE_FILE)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{ts}.csv"

    try:
        shutil.copy2(ledger, out_file)
    except FileNotFoundError:
        raise SystemExit(f"Không tìm thấy file điểm danh: {ledger}")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
