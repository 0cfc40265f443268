"""Command entry: start the order checker and the HTTP API together."""

from __future__ import annotations

import argparse
import os
import threading
from collections.abc import Mapping
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from webargus.cron import Monitor
from webargus.notify import SmsClient
from webargus.period import PeriodTracker
from webargus.server import Api, serve
from webargus.store import OrderStore


def build_components(environ: Optional[Mapping[str, str]] = None) -> tuple[Monitor, Api]:
    """Wire the stores, checker and API from the environment; return (monitor, api)."""
    env = os.environ if environ is None else environ
    token = env.get("GLAUCUS_SMS_SERVICE_TOKEN", "")
    pending = OrderStore()
    archive = OrderStore()
    sms = SmsClient(env.get("GLAUCUS_SMS_SERVICE_URL", ""), token)
    monitor = Monitor(pending, archive, PeriodTracker(), sms)
    api = Api(pending, token)
    return monitor, api


def main(argv: Optional[list[str]] = None) -> int:
    """Load .env, start the checker in the background and serve the API."""
    parser = argparse.ArgumentParser(description="Watch URLs and send an SMS once they are online.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=80, help="port to listen on (default: 80)")
    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))

    print("[Argus] Starting...")
    print("[TESTING MODE] Testing phone is: " + os.environ.get("TEST_ORDER_PHONE", ""))

    monitor, api = build_components()

    print("[Argus] Starting cron worker...")
    threading.Thread(target=monitor.run_forever, name="argus-cron", daemon=True).start()

    print("[Argus] Starting http server...")
    serve(api, args.host, args.port)
    return 0