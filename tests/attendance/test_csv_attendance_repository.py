from __future__ import annotations

import os

import pytest

from checkin_desk.attendance import csv_attendance_repository as module
from checkin_desk.attendance.csv_attendance_repository import CsvAttendanceRepository
from checkin_desk.attendance.model import AttendanceRecord
from checkin_desk.core.exceptions import PersistenceError, StorageError
from checkin_desk.roster.model import StudentRecord

HEADER = (
    "Student ID,First Name,Last Name,Year Of Study,Degree Programme Title,"
    "Mdx Email,Mb Phone Number,Nationality Description,Day1,Day2"
)


def _student(student_id="M12345678", first="Jane", last="Doe"):
    return StudentRecord(student_id, first, last, "2", "BSc Computer Science", "jd@x", "0770", "British")


def test_ensure_exists_writes_header_once(ledger_file):
    repo = CsvAttendanceRepository(ledger_file)

    assert repo.ensure_exists() is True
    assert repo.ensure_exists() is False
    assert ledger_file.read_text(encoding="utf-8").splitlines() == [HEADER]
    assert repo.load() == {}


def test_save_then_load_round_trip(ledger_file):
    repo = CsvAttendanceRepository(ledger_file)
    records = {
        "M12345678": AttendanceRecord(_student(), day1="2026-03-02 09:00:00", day2="2026-03-03 10:15:00"),
        "M87654321": AttendanceRecord(_student("M87654321", "Omar", "Haddad"), day2="2026-03-03 11:00:00"),
    }
    ledger_file.parent.mkdir(parents=True)

    repo.save(records)

    assert repo.load() == records
    assert list(repo.load()) == ["M12345678", "M87654321"]


def test_missing_days_serialize_as_empty_strings(ledger_file):
    repo = CsvAttendanceRepository(ledger_file)
    repo.ensure_exists()

    repo.save({"M12345678": AttendanceRecord(_student(), day1="2026-03-02 09:00:00")})

    lines = ledger_file.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER
    assert lines[1].endswith(",2026-03-02 09:00:00,")
    assert not repo.temp_path.exists()


def test_failed_rename_keeps_previous_file(ledger_file, monkeypatch):
    repo = CsvAttendanceRepository(ledger_file)
    repo.ensure_exists()
    before = ledger_file.read_text(encoding="utf-8")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr(module.os, "replace", boom)

    with pytest.raises(PersistenceError):
        repo.save({"M12345678": AttendanceRecord(_student(), day1="2026-03-02 09:00:00")})

    assert ledger_file.read_text(encoding="utf-8") == before
    assert not os.path.exists(repo.temp_path)


def test_malformed_ledger_raises(ledger_file):
    ledger_file.parent.mkdir(parents=True)
    ledger_file.write_text(HEADER + "\nM12345678,Jane,Doe\n", encoding="utf-8")

    with pytest.raises(StorageError):
        CsvAttendanceRepository(ledger_file).load()


def test_missing_ledger_raises(ledger_file):
    repo = CsvAttendanceRepository(ledger_file)

    with pytest.raises(StorageError):
        repo.load()
    with pytest.raises(StorageError):
        repo.read_raw()


def test_read_raw_returns_file_text(ledger_file):
    repo = CsvAttendanceRepository(ledger_file)
    repo.ensure_exists()

    assert repo.read_raw().startswith("Student ID,First Name")
