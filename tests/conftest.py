import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ.setdefault("INFERENCE_BASE_URL", "http://inference.test")

from src.inference.transport import TransportReply  # noqa: E402


class FakeTransport:
    """Records every POST and answers with a canned reply or exception."""

    def __init__(self, reply=None, exc=None):
        self.reply = reply if reply is not None else TransportReply(status_code=200, body={"response": ""})
        self.exc = exc
        self.calls = []

    def post_json(self, url, payload):
        self.calls.append((url, payload))
        if self.exc is not None:
            raise self.exc
        return self.reply


@pytest.fixture
def fake_transport():
    return FakeTransport()


@pytest.fixture
def make_transport():
    def _make(status_code=200, body=None, exc=None):
        return FakeTransport(reply=TransportReply(status_code=status_code, body=body), exc=exc)
    return _make
