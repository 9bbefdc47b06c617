"""A JSON list-of-records file shared by the JSON repositories.

Every repository funnels its reads and writes through one store per file.
The store holds a re-entrant lock keyed by resolved path, so a
read-modify-write done inside ``transaction()`` cannot interleave with
another thread working on the same file.

The lock only serializes threads of one process. Running the CLI against the
same data directory as a live `serve` leaves two processes free to interleave
their read-modify-writes, so stock checks can race across them; point each
process at its own data directory, or stop the server before using the CLI
for writes.
"""

from __future__ import annotations

import json
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

_LOCKS: dict[Path, threading.RLock] = {}
_LOCKS_GUARD = threading.Lock()


def _lock_for(path: Path) -> threading.RLock:
    with _LOCKS_GUARD:
        lock = _LOCKS.get(path)
        if lock is None:
            lock = _LOCKS[path] = threading.RLock()
        return lock


class JsonFileStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._lock = _lock_for(self._file_path)
        self._ensure_file()

    def load(self) -> list[dict]:
        with self._lock:
            return json.loads(self._file_path.read_text(encoding="utf-8"))

    def persist(self, records: list[dict]) -> None:
        with self._lock:
            # write-then-rename so readers never see a half-written file
            tmp = self._file_path.with_suffix(self._file_path.suffix + ".tmp")
            tmp.write_text(json.dumps(records, indent=2) + "\n", encoding="utf-8")
            tmp.replace(self._file_path)

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Yield the records under the file lock and persist them on exit.

        Nothing is written if the block raises.
        """
        with self._lock:
            records = self.load()
            yield records
            self.persist(records)

    def _ensure_file(self) -> None:
        with self._lock:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
