"""JSON-file store for per-item tier tallies.

The whole store is one pretty-printed JSON document:

    {"<item>": {"S": 0, "A": 0, "B": 0, "C": 0, "D": 0}, ...}

Handles:
- Creating the document at startup (never lazily)
- Full load/parse on every read, no in-process cache
- Atomic save (temp file in the same directory, fsync, rename)
- A single lock serializing read-modify-write mutations

No ranking or merge logic in the store - that belongs in services.
"""

from collections.abc import Callable
import json
import logging
import os
from pathlib import Path
import tempfile
import threading

from tierboard.services.tiers import TIER_SYMBOLS
from tierboard.settings import get_settings

TallyRecord = dict[str, int]
Tallies = dict[str, TallyRecord]

logger = logging.getLogger("uvicorn.error")

# Store instance (initialized on startup)
_store: "TallyFileStore | None" = None


class TallyStoreError(RuntimeError):
    pass


class TallyFileStore:
    """Tally store backed by a single JSON document."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self._lock = threading.Lock()

    def init(self) -> bool:
        """Create the document as an empty mapping if it does not exist.

        Returns:
            True if the document was created.
        """
        if self.path.exists():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save({})
        logger.info(f"Initialized ratings document: {self.path}")
        return True

    def load(self) -> Tallies:
        """Read and parse the document.

        Raises:
            TallyStoreError: If the document is missing, unreadable or corrupt.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError, RecursionError) as e:
            # ValueError covers bad JSON and bad UTF-8
            raise TallyStoreError(f"Failed to read {self.path}: {e}") from e
        return _validate_tallies(data)

    def save(self, tallies: Tallies) -> None:
        """Overwrite the document with the full mapping.

        Raises:
            TallyStoreError: If the document cannot be written.
        """
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except OSError as e:
            raise TallyStoreError(f"Failed to write {self.path}: {e}") from e

        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(tallies, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            _fsync_dir(self.path.parent)
        except OSError as e:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise TallyStoreError(f"Failed to write {self.path}: {e}") from e

    def clear(self) -> None:
        """Overwrite the document with an empty mapping."""
        with self._lock:
            self.save({})

    def update(self, mutate: Callable[[Tallies], Tallies]) -> Tallies:
        """Load, apply `mutate` and save, as one serialized step.

        If `mutate` raises, nothing is written.

        Returns:
            The saved mapping.
        """
        with self._lock:
            tallies = mutate(self.load())
            self.save(tallies)
            return tallies


def _fsync_dir(directory: Path) -> None:
    """Flush a directory entry so a completed rename survives a crash."""
    fd = os.open(directory, os.O_RDONLY)
    try:
        os.fsync(fd)
    finally:
        os.close(fd)


def _validate_tallies(data: object) -> Tallies:
    """Check the parsed document against the tally layout."""
    if not isinstance(data, dict):
        raise TallyStoreError("Ratings document must be a JSON object")

    for item, record in data.items():
        if not isinstance(record, dict) or set(record) != set(TIER_SYMBOLS):
            raise TallyStoreError(f"Malformed tally record for {item!r}")
        for symbol, count in record.items():
            # bool is an int subclass; reject it explicitly
            if isinstance(count, bool) or not isinstance(count, int) or count < 0:
                raise TallyStoreError(f"Invalid {symbol} count for {item!r}: {count!r}")
    return data


def init_store(path: Path | str | None = None) -> TallyFileStore:
    """Initialize the store and create its document if absent."""
    global _store
    if path is None:
        path = get_settings().ratings_file
    _store = TallyFileStore(path)
    _store.init()
    return _store


def close_store() -> None:
    """Drop the store instance."""
    global _store
    _store = None


def get_store() -> TallyFileStore:
    """Get store instance."""
    if _store is None:
        raise RuntimeError("Store not initialized. Call init_store() first.")
    return _store
