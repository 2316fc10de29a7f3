from __future__ import annotations

import logging
import threading
from typing import Callable, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.constants import (
    FEE_CALCULATION_METHOD_DESCRIPTION,
    FEE_CALCULATION_METHOD_KEY,
    SETTINGS_QUERY,
)
from ..core.enums import FeeCalculationMethod
from ..core.exceptions import ConflictError, NotFoundError
from .model import Setting
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsStore:
    """Key/value settings with a shared cache.

    The cache is loaded lazily from the repository and dropped after every
    successful write, so a read following a write always sees it
    (read-your-writes). One store serves every request thread: a snapshot
    whose load started before a write is returned to its caller but never
    cached. Concurrent create-or-update for one key is resolved by the
    repository's atomic upsert on the unique key, not by locking here.
    Repository errors propagate as-is; nothing is retried.
    """

    def __init__(
        self,
        settings: SettingsRepository,
        *,
        on_invalidate: Optional[Callable[[str], None]] = None,
    ):
        self._settings = settings
        self._on_invalidate = on_invalidate
        self._cache: Optional[dict[str, Setting]] = None
        self._generation = 0
        self._lock = threading.Lock()

    def _loaded(self) -> dict[str, Setting]:
        with self._lock:
            if self._cache is not None:
                return self._cache
            generation = self._generation

        snapshot = {s.key: s for s in self._settings.list_all()}

        with self._lock:
            # Cache only if no write happened during the load.
            if self._generation == generation:
                self._cache = snapshot
        return snapshot

    def _invalidate(self) -> None:
        with self._lock:
            self._generation += 1
            self._cache = None

    def refresh(self) -> None:
        self._invalidate()
        self._loaded()

    def _after_write(self) -> None:
        self.refresh()
        if self._on_invalidate:
            self._on_invalidate(SETTINGS_QUERY)

    def list_all(self) -> Sequence[Setting]:
        return list(self._loaded().values())

    def get_setting(self, key: str) -> Optional[Setting]:
        return self._loaded().get(key)

    def get(self, key: str) -> Optional[str]:
        setting = self.get_setting(key)
        return setting.value if setting else None

    def create(self, key: str, value: str, description: Optional[str] = None) -> Setting:
        key = require_non_empty(key, "Khóa cài đặt")
        if key in self._loaded():
            raise ConflictError(f"Cài đặt '{key}' đã tồn tại")

        created = self._settings.create(key=key, value=str(value), description=description)
        logger.info("Created setting %s", key)
        self._after_write()
        return created

    def update(self, key: str, value: str) -> Setting:
        key = require_non_empty(key, "Khóa cài đặt")
        updated = self._settings.update(key=key, value=str(value))
        if updated is None:
            raise NotFoundError(f"Không tìm thấy cài đặt '{key}'")

        logger.info("Updated setting %s", key)
        self._after_write()
        return updated

    def upsert(self, key: str, value: str, description: Optional[str] = None) -> Setting:
        key = require_non_empty(key, "Khóa cài đặt")
        saved = self._settings.upsert(key=key, value=str(value), description=description)
        logger.info("Saved setting %s", key)
        self._after_write()
        return saved

    def delete(self, key: str) -> None:
        key = require_non_empty(key, "Khóa cài đặt")
        if not self._settings.delete(key=key):
            raise NotFoundError(f"Không tìm thấy cài đặt '{key}'")

        logger.info("Deleted setting %s", key)
        self._after_write()


class FeePolicyStore(SettingsStore):
    """Settings store exposing the active fee-calculation policy."""

    def get_fee_calculation_method(self) -> FeeCalculationMethod:
        # Anything but an exact PER_CYCLE (missing key, legacy casing, junk) means per session.
        if self.get(FEE_CALCULATION_METHOD_KEY) == FeeCalculationMethod.PER_CYCLE.value:
            return FeeCalculationMethod.PER_CYCLE
        return FeeCalculationMethod.PER_SESSION

    def set_fee_calculation_method(self, method: FeeCalculationMethod | str) -> Setting:
        method = FeeCalculationMethod.parse(method)
        return self.upsert(
            FEE_CALCULATION_METHOD_KEY,
            method.value,
            description=FEE_CALCULATION_METHOD_DESCRIPTION,
        )
