from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Setting


class SettingsRepository(Protocol):
    def list_all(self) -> Sequence[Setting]:
        raise NotImplementedError

    def get(self, key: str) -> Optional[Setting]:
        raise NotImplementedError

    def create(self, *, key: str, value: str, description: Optional[str] = None) -> Setting:
        """Insert a new setting; fails when the key already exists (UNIQUE key)."""

        raise NotImplementedError

    def update(self, *, key: str, value: str) -> Optional[Setting]:
        """Returns None when the key does not exist."""

        raise NotImplementedError

    def upsert(self, *, key: str, value: str, description: Optional[str] = None) -> Setting:
        """Create or update in one atomic statement keyed by the unique setting key."""

        raise NotImplementedError

    def delete(self, *, key: str) -> bool:
        raise NotImplementedError
