"""Periodic checking of pending orders and notification of those that pass."""

from __future__ import annotations

import time
from collections.abc import Callable

from webargus.checker import is_online
from webargus.notify import SmsClient, notify
from webargus.orders import Order
from webargus.period import PeriodTracker
from webargus.store import OrderStore

DEFAULT_INTERVAL = 300.0
SETTLE_DELAY = 5.0


class Monitor:
    """Checks due orders and notifies and archives the ones that come online."""

    def __init__(
        self,
        pending: OrderStore,
        archive: OrderStore,
        tracker: PeriodTracker,
        sms: SmsClient,
        checker: Callable[[str], bool] = is_online,
    ) -> None:
        self.pending = pending
        self.archive = archive
        self.tracker = tracker
        self.sms = sms
        self.checker = checker

    def iterate(self, order: Order) -> bool:
        """Check one order now; notify if it passed. Return whether it passed."""
        print(f"[Cron] ({order.id}) Checking...")
        self.tracker.mark(order.id)

        online = self.checker(order.url)
        if online:
            print(f"[Cron] ({order.id}) Order passed check!")
            print(f"[Cron] ({order.id}) Preparing notification...")
            notify(order, self.pending, self.archive, self.sms)

        print(f"[Cron] ({order.id}) Iteration completed.")
        return online

    def _due(self) -> list[Order]:
        due = self.tracker.checkable(self.pending.all())
        if not due:
            print("[Cron] There is no orders available")
        return due

    def _check_all(self, due: list[Order]) -> list[Order]:
        passed = [order for order in due if self.iterate(order)]
        print("[Cron] Operation completed.")
        return passed

    def run_once(self) -> list[Order]:
        """Check every due order once and return those that passed."""
        due = self._due()
        if not due:
            return []
        return self._check_all(due)

    def run_forever(self, interval: float = DEFAULT_INTERVAL) -> None:
        """Wait the interval, check due orders, and repeat without end."""
        print("[Cron] Preparing orders checker...")
        while True:
            time.sleep(interval)
            due = self._due()
            if not due:
                continue
            self._check_all(due)
            time.sleep(SETTLE_DELAY)
            print(f"[Cron] Rechecking in {interval:g} seconds...")