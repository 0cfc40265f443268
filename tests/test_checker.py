import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest

from webargus.checker import is_online


class _Handler(BaseHTTPRequestHandler):
    def do_GET(self):
        if self.path == "/ok":
            self._reply(200)
        elif self.path == "/redirect":
            self.send_response(302)
            self.send_header("Location", "/ok")
            self.send_header("Content-Length", "0")
            self.end_headers()
        elif self.path == "/error":
            self._reply(500)
        elif self.path == "/created":
            self._reply(201)
        else:
            self._reply(404)

    def _reply(self, status):
        body = b"body"
        self.send_response(status)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, *args):
        pass


@pytest.fixture(autouse=True)
def _no_proxy(monkeypatch):
    for name in ("http_proxy", "HTTP_PROXY", "https_proxy", "HTTPS_PROXY", "all_proxy", "ALL_PROXY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url():
    httpd = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_address[1]}"
    httpd.shutdown()
    httpd.server_close()


def test_status_200_is_online(base_url):
    assert is_online(f"{base_url}/ok", timeout=5) is True


def test_status_404_is_offline(base_url):
    assert is_online(f"{base_url}/missing", timeout=5) is False


def test_status_500_is_offline(base_url):
    assert is_online(f"{base_url}/error", timeout=5) is False


def test_other_success_status_is_offline(base_url):
    assert is_online(f"{base_url}/created", timeout=5) is False


def test_redirect_to_200_is_online(base_url):
    assert is_online(f"{base_url}/redirect", timeout=5) is True


def test_unreachable_is_offline():
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        port = sock.getsockname()[1]
    assert is_online(f"http://127.0.0.1:{port}/", timeout=5) is False


def test_invalid_url_is_offline():
    assert is_online("not a url") is False


def test_logs_request(base_url, capsys):
    url = f"{base_url}/ok"
    is_online(url, timeout=5)
    assert f"[HTTP Checker] Requesting '{url}'..." in capsys.readouterr().out