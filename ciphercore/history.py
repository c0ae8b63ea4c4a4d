"""
Activity Log
============
A most-recent-N log of successful transforms, newest first.

The cipher functions never write here themselves. Callers hand their
results to a HistoryStore they own, and anything that needs to react to
changes (a history panel, a counter) registers with `subscribe()`.

With a `path`, the log is mirrored to a JSON file after each mutation
and reloaded from it on construction.
"""

import contextlib
import json
import os
import tempfile
import threading
import time
import uuid
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from loguru import logger

from .config import get_settings
from .result import Algorithm, EncryptionResult, Mode

Listener = Callable[[List["HistoryEntry"]], None]


@dataclass(frozen=True)
class HistoryEntry:
    id: str
    algorithm: str
    input: str
    output: str
    timestamp: int   # epoch milliseconds
    mode: str

    @classmethod
    def from_dict(cls, data: dict) -> "HistoryEntry":
        return cls(
            id=str(data["id"]),
            algorithm=Algorithm.parse(data["algorithm"]).value,
            input=data["input"],
            output=data["output"],
            timestamp=int(data["timestamp"]),
            mode=Mode(data["mode"]).value,
        )

    def to_text(self) -> str:
        when = datetime.fromtimestamp(self.timestamp / 1000).strftime("%Y-%m-%d %H:%M:%S")
        return (
            f"[{when}] {self.algorithm.upper()} - {self.mode.upper()}\n"
            f"Input: {self.input}\n"
            f"Output: {self.output}\n"
            f"{'=' * 50}\n"
        )


class HistoryStore:
    """Append-only, size-capped activity log with change notification."""

    def __init__(self, max_entries: Optional[int] = None, path=None,
                 clock: Callable[[], float] = time.time):
        if max_entries is None:
            max_entries = get_settings().history_max_entries
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1.")
        self.max_entries = max_entries
        self.path        = Path(path) if path is not None else None
        self._clock      = clock
        self._lock       = threading.Lock()
        self._listeners: List[Listener] = []
        self._entries: List[HistoryEntry] = self._load()[:max_entries]

    # ── mutation ─────────────────────────────────────────────────────────────

    def append(self, algorithm, input: str, output: str, mode) -> HistoryEntry:
        entry = HistoryEntry(
            id=uuid.uuid4().hex,
            algorithm=Algorithm.parse(algorithm).value,
            input=input,
            output=output,
            timestamp=int(self._clock() * 1000),
            mode=(mode if isinstance(mode, Mode) else Mode(mode)).value,
        )
        with self._lock:
            snapshot = self._commit([entry] + self._entries[:self.max_entries - 1])
        self._notify(snapshot)
        return entry

    def record(self, algorithm, mode, input: str,
               result: EncryptionResult) -> Optional[HistoryEntry]:
        """Append a transform outcome; failed results are not logged."""
        if not result.success:
            return None
        return self.append(algorithm, input, result.output, mode)

    def delete(self, entry_id: str) -> bool:
        with self._lock:
            kept = [e for e in self._entries if e.id != entry_id]
            if len(kept) == len(self._entries):
                return False
            snapshot = self._commit(kept)
        self._notify(snapshot)
        return True

    def clear(self) -> None:
        with self._lock:
            snapshot = self._commit([])
        self._notify(snapshot)

    # ── queries ──────────────────────────────────────────────────────────────

    def entries(self) -> List[HistoryEntry]:
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def search(self, query: str) -> List[HistoryEntry]:
        needle = query.lower()
        return [
            e for e in self.entries()
            if needle in e.algorithm
            or needle in e.input.lower()
            or needle in e.output.lower()
        ]

    def filter_by_algorithm(self, algorithm) -> List[HistoryEntry]:
        if algorithm == "all":
            return self.entries()
        name = Algorithm.parse(algorithm).value
        return [e for e in self.entries() if e.algorithm == name]

    def export(self, fmt: str = "json") -> str:
        entries = self.entries()
        if fmt == "json":
            return json.dumps([asdict(e) for e in entries], indent=2, ensure_ascii=False)
        if fmt == "txt":
            return "\n".join(e.to_text() for e in entries)
        raise ValueError(f"Unsupported export format: {fmt}")

    # ── notification ─────────────────────────────────────────────────────────

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register `listener(entries)`; returns a function that unregisters it."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, snapshot: List[HistoryEntry]) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            listener(list(snapshot))

    # ── persistence ──────────────────────────────────────────────────────────

    def _commit(self, entries: List[HistoryEntry]) -> List[HistoryEntry]:
        """
        Persist `entries`, then make them current. Called under the lock.
        If the write fails the in-memory log is left untouched.
        """
        if self.path is not None:
            payload = json.dumps([asdict(e) for e in entries], ensure_ascii=False)
            self._write_atomic(payload)
        self._entries = entries
        return list(entries)

    def _write_atomic(self, payload: str) -> None:
        # Readers only ever see the old file or the complete new one.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
            raise

    def _load(self) -> List[HistoryEntry]:
        if self.path is None or not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return [HistoryEntry.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("Ignoring unreadable history file {}: {}", self.path, exc)
            return []
