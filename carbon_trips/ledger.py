import threading
from typing import Iterator, List, Tuple

from .context import TripRecord


class TripLedger:
    """
    Ordered trip records for one session. Records are only ever appended
    one at a time or cleared all at once; readers get immutable snapshots.
    """

    def __init__(self):
        self._records: List[TripRecord] = []
        self.lock = threading.Lock()

    def append(self, record: TripRecord) -> None:
        with self.lock:
            self._records.append(record)

    def clear(self) -> None:
        with self.lock:
            self._records = []

    def snapshot(self) -> Tuple[TripRecord, ...]:
        with self.lock:
            return tuple(self._records)

    @property
    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def __iter__(self) -> Iterator[TripRecord]:
        return iter(self.snapshot())
