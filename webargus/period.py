"""Tracking of when each order was last checked."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable, Iterable

from webargus.orders import Order

ONE_HOUR = 3600.0


class PeriodTracker:
    """Remembers check times and says which orders are due again."""

    def __init__(
        self,
        interval: float = ONE_HOUR,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.interval = interval
        self._clock = clock
        self._checked: dict[str, float] = {}
        self._lock = threading.Lock()

    def mark(self, order_id: str) -> None:
        """Record that the order is being checked now."""
        with self._lock:
            self._checked[order_id] = self._clock()

    def should_be_checked(self, order_id: str) -> bool:
        """True if the order was never checked or its interval has fully passed."""
        with self._lock:
            recorded = self._checked.get(order_id)
        if recorded is None:
            return True
        return self._clock() > recorded + self.interval

    def checkable(self, orders: Iterable[Order]) -> list[Order]:
        """Return the given orders that are due for a check, in their order."""
        return [order for order in orders if self.should_be_checked(order.id)]