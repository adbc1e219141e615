"""
Saved deals and input profiles
Repositories sit on an injectable key-value store; the engine never touches it
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
import json
import logging
import os
import tempfile
import threading
import uuid

from .deal import DealInputs, DealResults, SharingModel, to_sharing_model
from .derivation import derive

logger = logging.getLogger(__name__)


class SnapshotNotFoundError(KeyError):
    """Raised when a saved deal or profile id is unknown"""


# =============================================================================
# KEY-VALUE STORES
# =============================================================================

class KeyValueStore(ABC):
    """Minimal key-value store holding JSON-compatible dicts"""

    @abstractmethod
    def get(self, key: str) -> Optional[Dict[str, Any]]:
        ...

    @abstractmethod
    def put(self, key: str, value: Dict[str, Any]) -> None:
        ...

    @abstractmethod
    def delete(self, key: str) -> bool:
        ...

    @abstractmethod
    def keys(self, prefix: str = "") -> List[str]:
        ...


class InMemoryStore(KeyValueStore):
    """Dict-backed store, e.g. for st.session_state or tests"""

    def __init__(self, data: Optional[Dict[str, Dict[str, Any]]] = None):
        self._data = data if data is not None else {}

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        return self._data.get(key)

    def put(self, key: str, value: Dict[str, Any]) -> None:
        self._data[key] = value

    def delete(self, key: str) -> bool:
        return self._data.pop(key, None) is not None

    def keys(self, prefix: str = "") -> List[str]:
        return [k for k in self._data if k.startswith(prefix)]


class JsonFileStore(KeyValueStore):
    """
    Store persisted as a single JSON object on disk

    One instance is shared by every Streamlit session, each running in its own
    thread, so every read-modify-write holds the instance lock and writes go
    through a unique temp file before the atomic replace.
    """

    def __init__(self, filepath: str):
        self.filepath = Path(filepath)
        self._lock = threading.RLock()

    def _load(self) -> Dict[str, Dict[str, Any]]:
        if not self.filepath.exists():
            return {}
        try:
            with open(self.filepath, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read store {self.filepath}: {e}")
            raise

    def _save(self, data: Dict[str, Dict[str, Any]]) -> None:
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=self.filepath.parent,
            prefix=f".{self.filepath.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            json.dump(data, f, indent=2)
        try:
            os.replace(f.name, self.filepath)
        except OSError:
            os.unlink(f.name)
            raise

    def get(self, key: str) -> Optional[Dict[str, Any]]:
        with self._lock:
            return self._load().get(key)

    def put(self, key: str, value: Dict[str, Any]) -> None:
        with self._lock:
            data = self._load()
            data[key] = value
            self._save(data)

    def delete(self, key: str) -> bool:
        with self._lock:
            data = self._load()
            if key not in data:
                return False
            del data[key]
            self._save(data)
            return True

    def keys(self, prefix: str = "") -> List[str]:
        with self._lock:
            return [k for k in self._load() if k.startswith(prefix)]


# =============================================================================
# RECORDS
# =============================================================================

def _now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid.uuid4().hex


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, datetime):
        try:
            value = datetime.fromisoformat(str(value))
        except ValueError:
            return datetime.fromtimestamp(0, timezone.utc)
    # Naive timestamps are treated as UTC
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


@dataclass
class DealSnapshot:
    """Named, timestamped record of a computed deal"""
    name: str
    model: SharingModel
    inputs: DealInputs
    results: DealResults
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "model": self.model.value,
            "inputs": self.inputs.to_dict(),
            "results": self.results.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DealSnapshot":
        return cls(
            id=data.get("id") or _new_id(),
            name=data.get("name", "Untitled Deal"),
            created_at=_parse_timestamp(data.get("created_at")),
            model=to_sharing_model(data.get("model")),
            inputs=DealInputs.from_dict(data.get("inputs", {})),
            results=DealResults.from_dict(data.get("results", {})),
        )


@dataclass
class InputProfile:
    """Named preset of a model and its inputs"""
    name: str
    model: SharingModel
    inputs: DealInputs
    id: str = field(default_factory=_new_id)
    created_at: datetime = field(default_factory=_now)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "model": self.model.value,
            "inputs": self.inputs.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InputProfile":
        return cls(
            id=data.get("id") or _new_id(),
            name=data.get("name", "Untitled Profile"),
            created_at=_parse_timestamp(data.get("created_at")),
            model=to_sharing_model(data.get("model")),
            inputs=DealInputs.from_dict(data.get("inputs", {})),
        )


# =============================================================================
# REPOSITORIES
# =============================================================================

class _Repository:
    prefix = ""
    record_type = None
    label = "record"

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _key(self, record_id: str) -> str:
        return f"{self.prefix}{record_id}"

    def _save(self, record):
        self.store.put(self._key(record.id), record.to_dict())
        logger.info(f"Saved {self.label} '{record.name}' ({record.id})")
        return record

    def get(self, record_id: str):
        data = self.store.get(self._key(record_id))
        if data is None:
            raise SnapshotNotFoundError(record_id)
        return self.record_type.from_dict(data)

    def list_all(self) -> List:
        """All records, newest first"""
        records = []
        for key in self.store.keys(self.prefix):
            data = self.store.get(key)
            if data is not None:
                records.append(self.record_type.from_dict(data))
        return sorted(records, key=lambda r: r.created_at, reverse=True)

    def delete(self, record_id: str) -> None:
        if not self.store.delete(self._key(record_id)):
            raise SnapshotNotFoundError(record_id)
        logger.info(f"Deleted {self.label} {record_id}")


class DealRepository(_Repository):
    """Saved deal snapshots"""
    prefix = "deal:"
    record_type = DealSnapshot
    label = "deal"

    def save(
        self,
        name: str,
        model: SharingModel,
        inputs: DealInputs,
        results: Optional[DealResults] = None,
    ) -> DealSnapshot:
        """Save a snapshot, deriving results when not supplied"""
        if results is None:
            results = derive(model, inputs)
        return self._save(DealSnapshot(name=name, model=model, inputs=inputs, results=results))


class ProfileRepository(_Repository):
    """Saved input profiles"""
    prefix = "profile:"
    record_type = InputProfile
    label = "profile"

    def save(self, name: str, model: SharingModel, inputs: DealInputs) -> InputProfile:
        return self._save(InputProfile(name=name, model=model, inputs=inputs))
