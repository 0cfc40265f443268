import json
from unittest import mock

from webargus.app import build_components, main


def test_build_components_uses_environment():
    monitor, api = build_components(
        {
            "GLAUCUS_SMS_SERVICE_URL": "http://localhost/sms",
            "GLAUCUS_SMS_SERVICE_TOKEN": "token",
        }
    )
    assert api.token == "token"
    assert monitor.sms.token == "token"
    assert monitor.sms.service_url == "http://localhost/sms"
    assert monitor.pending is api.pending
    assert monitor.archive is not monitor.pending


def test_orders_added_through_api_reach_monitor():
    monitor, api = build_components({"GLAUCUS_SMS_SERVICE_TOKEN": "token"})
    payload = {
        "url": "https://example.com/page",
        "notify": {"phone": "test-phone", "title": "Title", "message": "Message"},
    }
    response = api.handle(
        "POST", "/orders/add", {"Authorization": "Bearer token"}, json.dumps(payload).encode()
    )
    order_id = json.loads(response.body)["uuid"]
    assert [order.id for order in monitor.pending.all()] == [order_id]


def test_build_components_defaults_to_empty_settings():
    monitor, api = build_components({})
    assert api.token == ""
    assert monitor.sms.service_url == ""


def test_main_loads_dotenv_and_serves(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TEST_ORDER_PHONE", raising=False)
    (tmp_path / ".env").write_text("TEST_ORDER_PHONE=test-phone\n")

    with mock.patch("http.server.ThreadingHTTPServer.serve_forever") as serve_forever:
        result = main(["--host", "127.0.0.1", "--port", "0"])

    assert result == 0
    assert serve_forever.call_count == 1
    output = capsys.readouterr().out
    assert "[TESTING MODE] Testing phone is: test-phone" in output
    assert output.index("[Argus] Starting cron worker...") < output.index(
        "[Argus] Starting http server..."
    )