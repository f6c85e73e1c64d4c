import logging
import threading
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class UsageRecord:
    """One successful calculation: operands as received and the system used."""
    num1: float
    num2: float
    system: str


class UsageLog:
    """Append-only, in-memory history of calculations.

    Appends from concurrent request handlers are serialized by a lock and
    readers only ever see a copy taken under that lock.
    """

    def __init__(self):
        self._records: List[UsageRecord] = []
        self._lock = threading.Lock()

    def record(self, entry: UsageRecord) -> None:
        with self._lock:
            self._records.append(entry)
            total = len(self._records)
        logging.debug(f"Recorded {entry.system} request #{total}: {entry.num1}, {entry.num2}")

    def snapshot(self) -> Tuple[UsageRecord, ...]:
        with self._lock:
            return tuple(self._records)

    def frequency(self) -> Dict[str, int]:
        """Request count per number system, in first-seen order."""
        counts = Counter(entry.system for entry in self.snapshot())
        return dict(counts)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
