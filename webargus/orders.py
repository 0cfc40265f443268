"""Watch orders: what to check and whom to tell when it passes."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class NotificationRule:
    """Where and how to send the notification for an order."""

    phone: str
    title: str
    message: str

    def to_dict(self) -> dict[str, str]:
        """Return the rule as a JSON-ready mapping."""
        return {"phone": self.phone, "title": self.title, "message": self.message}


@dataclass(frozen=True)
class Order:
    """A URL to watch together with its notification rule."""

    id: str
    url: str
    check_type: str
    notify: NotificationRule
    period: str

    def to_dict(self) -> dict[str, Any]:
        """Return the order as a JSON-ready mapping using the API field names."""
        return {
            "id": self.id,
            "url": self.url,
            "checkType": self.check_type,
            "notify": self.notify.to_dict(),
            "period": self.period,
        }


def create_order(
    url: str,
    check_type: str,
    period: str,
    phone: str,
    title: str,
    message: str,
) -> Order:
    """Build a new order with a freshly generated random identifier."""
    return Order(
        id=str(uuid.uuid4()),
        url=url,
        check_type=check_type,
        notify=NotificationRule(phone=phone, title=title, message=message),
        period=period,
    )