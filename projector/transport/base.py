from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """
    Abstract duplex byte channel to the projector.

    Contract:
      - open()/close() manage the underlying connection; close() is idempotent.
      - read(n) performs a single bounded read and returns 0..n bytes. It may
        return fewer than n bytes, or b"" when the read timeout elapsed with
        no data. Accumulation is the caller's job.
      - write(data) returns the number of bytes written.
      - flush() discards stale buffered input and pending output.
    """

    @abstractmethod
    def open(self) -> None: ...

    @abstractmethod
    def close(self) -> None: ...

    @abstractmethod
    def is_open(self) -> bool: ...

    @abstractmethod
    def read(self, n: int) -> bytes: ...

    @abstractmethod
    def write(self, data: bytes) -> int: ...

    @abstractmethod
    def flush(self) -> None: ...

    def __enter__(self) -> "Transport":
        self.open()
        return self

    def __exit__(self, exc_type: type | None, exc_val: BaseException | None, exc_tb: Any) -> None:
        self.close()
