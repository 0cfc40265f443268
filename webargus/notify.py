"""Sending SMS notifications for orders that passed their check."""

from __future__ import annotations

import json
import os
import urllib.error
import urllib.request
from typing import Optional

from webargus.orders import Order
from webargus.store import OrderStore

SMS_TIMEOUT = 30.0


class SmsClient:
    """Client for the SMS delivery service, authenticated with a bearer token."""

    def __init__(self, service_url: str, token: str) -> None:
        self.service_url = service_url
        self.token = token

    @classmethod
    def from_env(cls) -> "SmsClient":
        """Build a client from GLAUCUS_SMS_SERVICE_URL and GLAUCUS_SMS_SERVICE_TOKEN."""
        return cls(
            os.environ.get("GLAUCUS_SMS_SERVICE_URL", ""),
            os.environ.get("GLAUCUS_SMS_SERVICE_TOKEN", ""),
        )

    def build_payload(self, number: str, title: str, content: str) -> bytes:
        """Return the JSON request body for one message."""
        payload = {"recipients": [number], "senderTitle": title, "message": content}
        return json.dumps(payload).encode("utf-8")

    def send(self, number: str, title: str, content: str) -> Optional[str]:
        """Post the message; return the service's reply, or None if it could not be sent."""
        try:
            request = urllib.request.Request(
                self.service_url,
                data=self.build_payload(number, title, content),
                method="POST",
            )
            request.add_header("Authorization", f"Bearer {self.token}")
            request.add_header("Content-Type", "application/json")
            with urllib.request.urlopen(request, timeout=SMS_TIMEOUT) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            with exc:
                body = exc.read()
        except (OSError, ValueError) as exc:
            print(exc)
            return None
        text = body.decode("utf-8", errors="replace")
        print(text)
        return text


def notify(
    order: Order,
    pending: OrderStore,
    archive: OrderStore,
    sms: SmsClient,
) -> Optional[str]:
    """Archive the order, drop it from the pending store and send its SMS."""
    archive.put(order)
    pending.delete(order.id)
    rule = order.notify
    print("[Notify] Sending notification...")
    return sms.send(rule.phone, rule.title, rule.message)