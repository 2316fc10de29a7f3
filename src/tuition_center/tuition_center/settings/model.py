from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Setting:
    """Thực thể miền (domain): Một cài đặt hệ thống (khóa duy nhất)."""

    key: str
    value: str
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {"key": self.key, "value": self.value, "description": self.description}
