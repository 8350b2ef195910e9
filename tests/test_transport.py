import requests

from src.inference import transport as transport_mod
from src.inference.transport import HttpTransport


class FakeResponse:
    def __init__(self, status_code, payload=None, text=""):
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


def test_post_json_sends_payload_and_decodes(monkeypatch):
    seen = {}

    def fake_post(url, json=None, timeout=None):
        seen.update(url=url, json=json, timeout=timeout)
        return FakeResponse(200, {"response": "hola"})

    monkeypatch.setattr(transport_mod.requests, "post", fake_post)
    reply = HttpTransport(timeout=30).post_json("http://x/ask", {"question": "q", "profile": "p"})
    assert seen == {"url": "http://x/ask", "json": {"question": "q", "profile": "p"}, "timeout": 30}
    assert reply.ok
    assert reply.body == {"response": "hola"}


def test_error_status_body_not_decoded(monkeypatch):
    monkeypatch.setattr(
        transport_mod.requests, "post", lambda url, json=None, timeout=None: FakeResponse(500, {"error": "boom"})
    )
    reply = HttpTransport().post_json("http://x/ask", {})
    assert not reply.ok
    assert reply.status_code == 500
    assert reply.body is None


def test_non_json_success_body(monkeypatch):
    monkeypatch.setattr(
        transport_mod.requests, "post", lambda url, json=None, timeout=None: FakeResponse(200, None, "<html>")
    )
    reply = HttpTransport().post_json("http://x/ask", {})
    assert reply.ok
    assert reply.body is None


def test_network_errors_propagate(monkeypatch):
    def boom(url, json=None, timeout=None):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(transport_mod.requests, "post", boom)
    try:
        HttpTransport().post_json("http://x/ask", {})
    except requests.RequestException as exc:
        assert "refused" in str(exc)
    else:
        raise AssertionError("expected RequestException")
