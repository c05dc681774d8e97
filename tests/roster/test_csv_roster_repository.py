from __future__ import annotations

import pytest

from checkin_desk.core.exceptions import StorageError
from checkin_desk.roster.csv_roster_repository import CsvRosterRepository

JANE = ["M12345678", "Jane", "Doe", "2", "BSc Computer Science", "jd@x", "0770", "British"]


def test_load_keys_students_by_id(roster_file, clock):
    repo = CsvRosterRepository(roster_file, clock=clock)

    students = repo.load()

    assert set(students) == {"M12345678", "M87654321"}
    assert students["M12345678"].display_name == "Jane Doe"
    assert students["M87654321"].programme_title == "BEng Robotics"


def test_cached_within_ttl_then_reloaded(make_roster, clock):
    path = make_roster([JANE])
    repo = CsvRosterRepository(path, ttl_seconds=300, clock=clock)
    first = repo.load()

    path.unlink()
    clock.advance(seconds=299)
    assert repo.load() is first

    clock.advance(seconds=2)
    with pytest.raises(StorageError):
        repo.load()


def test_reload_after_ttl_picks_up_changes(make_roster, clock):
    path = make_roster([JANE])
    repo = CsvRosterRepository(path, ttl_seconds=300, clock=clock)
    assert "M11112222" not in repo.load()

    make_roster([JANE, ["M11112222", "Li", "Wei", "3", "BA Design", "lw@x", "0771", "Chinese"]])
    assert "M11112222" not in repo.load()

    clock.advance(minutes=5, seconds=1)
    assert "M11112222" in repo.load()


def test_missing_file_raises(tmp_path, clock):
    repo = CsvRosterRepository(tmp_path / "nope.csv", clock=clock)

    assert not repo.exists()
    with pytest.raises(StorageError):
        repo.load()


def test_malformed_row_raises(make_roster, clock):
    path = make_roster([JANE, ["M87654321", "Omar"]])

    with pytest.raises(StorageError):
        CsvRosterRepository(path, clock=clock).load()


def test_blank_lines_ignored_and_duplicates_keep_last(tmp_path, clock):
    path = tmp_path / "roster.csv"
    path.write_text(
        "Student ID,First Name,Last Name,Year Of Study,Degree Programme Title,Mdx Email,Mb Phone Number,Nationality Description\n"
        "M12345678,Jane,Doe,2,BSc CS,jd@x,0770,British\n"
        "\n"
        "M12345678,Janet,Doe,3,BSc CS,jd@x,0770,British\n",
        encoding="utf-8",
    )

    students = CsvRosterRepository(path, clock=clock).load()

    assert len(students) == 1
    assert students["M12345678"].first_name == "Janet"


def test_loaded_mapping_is_read_only(roster_file, clock):
    students = CsvRosterRepository(roster_file, clock=clock).load()

    with pytest.raises(TypeError):
        students["M00000000"] = students["M12345678"]
