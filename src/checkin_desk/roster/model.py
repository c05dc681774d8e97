from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StudentRecord:
    """Thực thể miền (domain): một sinh viên trong danh sách lớp (roster).

    Lưu ý: Đây là đối tượng dữ liệu thuần, chỉ đọc sau khi nạp từ file.
    """

    student_id: str
    first_name: str
    last_name: str
    year_of_study: str
    programme_title: str
    email: str
    phone: str
    nationality: str

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_row(self) -> list[str]:
        return [
            self.student_id,
            self.first_name,
            self.last_name,
            self.year_of_study,
            self.programme_title,
            self.email,
            self.phone,
            self.nationality,
        ]

    @classmethod
    def from_row(cls, row: list[str]) -> "StudentRecord":
        return cls(*row)
