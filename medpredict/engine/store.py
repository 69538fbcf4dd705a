"""Local record store: profile + health-check history over a key-value backend."""
import logging
from pathlib import Path
from typing import Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from medpredict.config import settings, PROFILE_KEY, HEALTH_CHECKS_KEY
from medpredict.models import HealthCheck, User

logger = logging.getLogger(__name__)

_history_adapter = TypeAdapter(list[HealthCheck])


class KeyValueBackend(Protocol):
    def get(self, key: str) -> Optional[str]: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class MemoryBackend:
    """Dict-backed storage; nothing survives the process."""

    def __init__(self):
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class FileBackend:
    """One `<key>.json` file per key under `directory`."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Cannot read {path}, treating as absent: {e}")
            return None

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(value, encoding="utf-8")

    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


class RecordStore:
    """
    Two records under fixed keys: the profile object and the history array
    (newest first). Stored data that does not decode into the expected shape
    is reported as absent rather than raised.

    append_health_check() is read-modify-write; two concurrent writers can
    lose an update.
    """

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend

    def save_profile(self, profile: User) -> None:
        self.backend.set(PROFILE_KEY, profile.model_dump_json())
        logger.debug(f"Profile saved: id={profile.id}")

    def get_profile(self) -> Optional[User]:
        raw = self.backend.get(PROFILE_KEY)
        if not raw:
            return None
        try:
            return User.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Stored profile is malformed, treating as absent: {e.error_count()} error(s)")
            return None

    def append_health_check(self, check: HealthCheck) -> None:
        checks = [check, *self.get_health_checks()]
        self.backend.set(HEALTH_CHECKS_KEY, _history_adapter.dump_json(checks).decode("utf-8"))
        logger.debug(f"Health check {check.id} stored ({len(checks)} total).")

    def get_health_checks(self) -> list[HealthCheck]:
        raw = self.backend.get(HEALTH_CHECKS_KEY)
        if not raw:
            return []
        try:
            return _history_adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Stored history is malformed, treating as empty: {e.error_count()} error(s)")
            return []

    def clear_all(self) -> None:
        self.backend.delete(PROFILE_KEY)
        self.backend.delete(HEALTH_CHECKS_KEY)
        logger.info("Local records cleared.")


_store: RecordStore | None = None


def get_store() -> RecordStore:
    """Get singleton file-backed RecordStore rooted at settings.storage_dir."""
    global _store
    if _store is None:
        _store = RecordStore(FileBackend(settings.storage_dir))
        logger.info(f"Record store opened at {settings.storage_dir}")
    return _store
