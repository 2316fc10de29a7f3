from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class AttendanceStatus(str, Enum):
    """Trạng thái điểm danh của học viên trong một ngày."""

    PRESENT = "present"
    ABSENT = "absent"
    # Giáo viên nghỉ: không tính là học viên vắng khi đếm buổi học.
    TEACHER_ABSENT = "teacher_absent"

    @classmethod
    def parse(cls, value: "AttendanceStatus | str") -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Trạng thái điểm danh không hợp lệ: {value!r}") from None

    @classmethod
    def from_stored(cls, value: str) -> "AttendanceStatus | str":
        """Read side: known codes become members, anything else is kept as the raw code."""
        try:
            return cls(value)
        except ValueError:
            return value


class FeeCalculationMethod(str, Enum):
    """Phương pháp tính học phí (giá trị lưu trong bảng settings)."""

    PER_SESSION = "PER_SESSION"
    PER_CYCLE = "PER_CYCLE"

    @classmethod
    def parse(cls, value: "FeeCalculationMethod | str") -> "FeeCalculationMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Phương pháp tính học phí không hợp lệ: {value!r}") from None


class StudentStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
