"""HTTP API for adding and listing watch orders."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any, Optional
from urllib.parse import urlsplit

from webargus.orders import create_order
from webargus.store import OrderStore

JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Response:
    """An HTTP response: status code, headers and body bytes."""

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


def _json_response(status: int, payload: Any) -> Response:
    text = json.dumps(payload, separators=(",", ":")) + "\n"
    return Response(status, text.encode("utf-8"), {"Content-Type": JSON_CONTENT_TYPE})


def _error_response(status: int, message: str) -> Response:
    return Response(
        status,
        (message + "\n").encode("utf-8"),
        {"Content-Type": TEXT_CONTENT_TYPE, "X-Content-Type-Options": "nosniff"},
    )


def _field(mapping: Any, name: str) -> Any:
    """Look a key up exactly, falling back to a case-insensitive match."""
    if not isinstance(mapping, Mapping):
        return None
    if name in mapping:
        return mapping[name]
    folded = name.casefold()
    for key, value in mapping.items():
        if isinstance(key, str) and key.casefold() == folded:
            return value
    return None


def _text(mapping: Any, name: str) -> str:
    value = _field(mapping, name)
    return value if isinstance(value, str) else ""


def is_valid_add_request(payload: Any) -> bool:
    """Tell whether an add request has a URL and a complete notification rule."""
    rule = _field(payload, "notify")
    return all(
        (
            _text(payload, "url"),
            _text(rule, "phone"),
            _text(rule, "title"),
            _text(rule, "message"),
        )
    )


class Api:
    """Routes requests to the order endpoints behind bearer authentication."""

    def __init__(self, pending: OrderStore, token: str = "") -> None:
        self.pending = pending
        self.token = token
        self._routes: dict[str, Callable[[bytes], Response]] = {
            "/": self._default,
            "/orders": self._list,
            "/orders/add": self._add,
        }

    def handle(
        self,
        method: str,
        path: str,
        headers: Optional[Mapping[str, str]] = None,
        body: bytes = b"",
    ) -> Response:
        """Answer one request given its method, request URI, headers and body."""
        lowered = {key.lower(): value for key, value in (headers or {}).items()}
        parts = urlsplit(path)
        target = self._route(parts.path or "/", parts.query)
        if target is None:
            return self._default(body)

        print(f"[HTTP][Request] ({method} '{path}') Received.")
        denied = self._authenticate(lowered.get("authorization", ""))
        if denied is not None:
            return denied
        return target(body)

    def _route(self, path: str, query: str) -> Optional[Callable[[bytes], Response]]:
        handler = self._routes.get(path)
        if handler is not None:
            return handler
        if path.endswith("/"):
            stripped = path.rstrip("/")
            if stripped in self._routes:
                location = stripped + (f"?{query}" if query else "")
                return lambda _body: Response(
                    301, b"", {"Location": location, "Content-Type": JSON_CONTENT_TYPE}
                )
        return None

    def _authenticate(self, header: str) -> Optional[Response]:
        if not header.startswith("Bearer "):
            return _error_response(401, "Missing or invalid Authorization header")
        if header[len("Bearer "):] != self.token:
            return _error_response(401, "Empty Bearer token")
        return None

    def _default(self, _body: bytes) -> Response:
        return _json_response(200, {"error": "Resource not specified"})

    def _list(self, _body: bytes) -> Response:
        return _json_response(200, [order.to_dict() for order in self.pending.all()])

    def _add(self, body: bytes) -> Response:
        try:
            payload = json.loads(body or b"null")
        except ValueError:
            payload = None
        if not is_valid_add_request(payload):
            return _json_response(400, {"error": "Invalid request"})

        rule = _field(payload, "notify")
        order = create_order(
            _text(payload, "url"),
            _text(payload, "checkType"),
            _text(payload, "period"),
            _text(rule, "phone"),
            _text(rule, "title"),
            _text(rule, "message"),
        )
        self.pending.put(order)
        return _json_response(200, {"message": "Successfully created", "uuid": order.id})


def make_server(api: Api, host: str = "", port: int = 80) -> ThreadingHTTPServer:
    """Create a threaded HTTP server that answers every request through the API."""

    class _Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            try:
                length = int(self.headers.get("Content-Length") or 0)
            except ValueError:
                self.send_error(400, "Invalid Content-Length")
                return
            body = self.rfile.read(length) if length > 0 else b""
            response = api.handle(self.command, self.path, dict(self.headers.items()), body)
            self.send_response(response.status)
            for name, value in response.headers.items():
                self.send_header(name, value)
            self.send_header("Content-Length", str(len(response.body)))
            self.end_headers()
            if self.command != "HEAD":
                self.wfile.write(response.body)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = do_HEAD = do_OPTIONS = _dispatch

        def log_message(self, format: str, *args: Any) -> None:
            pass

    return ThreadingHTTPServer((host, port), _Handler)


def serve(api: Api, host: str = "", port: int = 80) -> None:
    """Serve the API until the process is stopped."""
    server = make_server(api, host, port)
    print(f"[HTTP] Listening on {host}:{port}")
    with server:
        server.serve_forever()