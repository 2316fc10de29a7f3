from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TuitionClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[TuitionClass]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[TuitionClass]:
        raise NotImplementedError
