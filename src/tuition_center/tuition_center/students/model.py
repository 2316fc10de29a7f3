from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StudentStatus


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học viên."""

    student_id: int
    name: str
    code: str
    phone: str
    class_id: int
    payment_cycle: str
    status: StudentStatus = StudentStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == StudentStatus.ACTIVE
