import threading
from contextlib import contextmanager

from ._exceptions import MNSQuotaExceededError


class QuotaManager:
    """Tracks file content bytes held by a namespace.

    ``max_quota=None`` disables the limit; usage is still tracked so that
    :meth:`snapshot` reports it.
    """

    def __init__(self, max_quota: int | None = None) -> None:
        if max_quota is not None and max_quota < 0:
            raise ValueError(f"max_quota must be >= 0 or None, got {max_quota!r}.")
        self._max_quota: int | None = max_quota
        self._used: int = 0
        self._lock: threading.Lock = threading.Lock()

    @contextmanager
    def reserve(self, size: int):
        if size <= 0:
            yield
            return
        with self._lock:
            if self._max_quota is not None:
                available = self._max_quota - self._used
                if size > available:
                    raise MNSQuotaExceededError(requested=size, available=available)
            self._used += size
        try:
            yield
        except BaseException:
            with self._lock:
                self._used -= size
            raise

    def release(self, size: int) -> None:
        if size <= 0:
            return
        with self._lock:
            self._used = max(0, self._used - size)

    def snapshot(self) -> tuple[int | None, int, int | None]:
        """Return (maximum, used, free) atomically; maximum and free are None when unlimited."""
        with self._lock:
            if self._max_quota is None:
                return None, self._used, None
            return self._max_quota, self._used, self._max_quota - self._used

