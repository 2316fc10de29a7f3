from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TuitionClass:
    """Thực thể miền (domain): Lớp học."""

    class_id: int
    name: str
    fee: int
    # Lịch học dạng chữ tự do, ví dụ "2, 4, 6 (18:00 - 20:00)".
    schedule: str
    location: str
    payment_cycle: Optional[str] = None
