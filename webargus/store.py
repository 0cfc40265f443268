"""Thread-safe in-memory keeping of orders by identifier."""

from __future__ import annotations

import threading
from typing import Optional

from webargus.orders import Order


class OrderStore:
    """A mapping of order identifiers to orders, safe to share between threads."""

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._lock = threading.Lock()

    def put(self, order: Order) -> None:
        """Store the order, replacing any with the same identifier."""
        with self._lock:
            self._orders[order.id] = order

    def get(self, order_id: str) -> Optional[Order]:
        """Return the order with this identifier, or None if there is none."""
        with self._lock:
            return self._orders.get(order_id)

    def exists(self, order_id: str) -> bool:
        """Tell whether an order with this identifier is stored."""
        with self._lock:
            return order_id in self._orders

    def all(self) -> list[Order]:
        """Return a snapshot list of every stored order."""
        with self._lock:
            return list(self._orders.values())

    def delete(self, order_id: str) -> None:
        """Remove the order with this identifier; missing ones are ignored."""
        with self._lock:
            self._orders.pop(order_id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)