from pathlib import Path

import pytest

from src.cli import ask_cli
from src.config.settings import get_settings
from src.inference.client import InferenceClient


@pytest.fixture
def patched_client(monkeypatch, make_transport):
    monkeypatch.setattr(ask_cli, "configure_logging", lambda level="INFO": None)

    def install(**kwargs):
        transport = make_transport(**kwargs)
        monkeypatch.setattr(
            ask_cli.InferenceClient,
            "from_settings",
            classmethod(lambda cls, settings=None: InferenceClient("http://inference.test/ask", transport=transport)),
        )
        return transport

    return install


def test_prints_extracted_answer(patched_client, capsys):
    patched_client(body={"response": "ctx ### Respuesta:  Claro que sí. "})
    code = ask_cli.main(["--question", "¿Y?", "--profile", "mty_c+b_35-55"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "Claro que sí."


def test_raw_flag_prints_transcript(patched_client, capsys):
    patched_client(body={"response": "ctx ### Respuesta: sí"})
    code = ask_cli.main(["--question", "¿Y?", "--profile", "mty_c+b_35-55", "--raw"])
    assert code == 0
    assert capsys.readouterr().out.strip() == "ctx ### Respuesta: sí"


def test_failure_exits_1(patched_client, capsys):
    patched_client(status_code=502)
    code = ask_cli.main(["--question", "¿Y?", "--profile", "cdmx_c-d+_18-25"])
    assert code == 1
    assert "HTTP 502" in capsys.readouterr().err


def test_unknown_profile_rejected_by_parser():
    with pytest.raises(SystemExit) as exc:
        ask_cli.main(["--question", "¿Y?", "--profile", "gdl"])
    assert exc.value.code == 2


def test_missing_base_url_exits_1(monkeypatch, capsys):
    monkeypatch.delenv("INFERENCE_BASE_URL", raising=False)
    monkeypatch.chdir(Path(__file__).parent)
    get_settings.cache_clear()
    try:
        code = ask_cli.main(["--question", "¿Y?", "--profile", "cdmx_c-d+_18-25"])
    finally:
        get_settings.cache_clear()
    assert code == 1
    assert "INFERENCE_BASE_URL" in capsys.readouterr().err
