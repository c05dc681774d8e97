from __future__ import annotations

import csv
import itertools
from datetime import datetime, timedelta, timezone

import pytest

from checkin_desk.core.constants import ROSTER_COLUMNS

STUDENTS = [
    ["M12345678", "Jane", "Doe", "2", "BSc Computer Science", "jd123@live.mdx.ac.uk", "07700900001", "British"],
    ["M87654321", "Omar", "Haddad", "1", "BEng Robotics", "oh456@live.mdx.ac.uk", "07700900002", "Jordanian"],
]


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


def write_roster(path, rows, *, header=ROSTER_COLUMNS):
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        writer.writerows(rows)
    return path


@pytest.fixture
def clock():
    return FakeClock(datetime(2026, 3, 2, 9, 0, 0, tzinfo=timezone.utc))


@pytest.fixture
def token_factory():
    counter = itertools.count(1)
    return lambda: f"tok{next(counter):02d}"


@pytest.fixture
def roster_file(tmp_path):
    return write_roster(tmp_path / "student_data.csv", STUDENTS)


@pytest.fixture
def ledger_file(tmp_path):
    return tmp_path / "out" / "attendance.csv"


@pytest.fixture
def app_factory(monkeypatch, roster_file, ledger_file, clock):
    monkeypatch.setenv("APP_ENV", "testing")

    from checkin_desk.main import create_app

    def _make(**overrides):
        settings = {
            "STUDENT_DATA_FILE": str(roster_file),
            "ATTENDANCE_FILE": str(ledger_file),
        }
        settings.update(overrides)
        return create_app(settings, clock=clock)

    return _make


@pytest.fixture
def app(app_factory):
    return app_factory()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    resp = client.post("/api/login", json={"username": "operator", "password": "s3cret"})
    assert resp.status_code == 200
    return {"Authorization": f"Session {resp.get_json()['sessionId']}"}


@pytest.fixture
def make_roster(tmp_path):
    def _make(rows, name="roster.csv"):
        return write_roster(tmp_path / name, rows)

    return _make
