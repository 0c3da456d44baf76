import logging

import httpx
from unittest.mock import patch

from rich.logging import RichHandler

from src.main import _setup_logging, main
from src.models import InferenceRequest
from src.vision.gemini import GeminiVisionClient


def test_setup_logging_installs_single_rich_handler():
    _setup_logging("debug")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], RichHandler)


def test_setup_logging_unknown_level_falls_back_to_info():
    _setup_logging("chatty")

    assert logging.getLogger().level == logging.INFO


def test_main_serves_app_on_configured_address(monkeypatch):
    monkeypatch.setattr("src.config.load_dotenv", lambda **_: None)
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setenv("HOST", "127.0.0.1")
    monkeypatch.setenv("PORT", "9001")

    with patch("src.main.uvicorn.run") as mock_run:
        main()

    mock_run.assert_called_once()
    kwargs = mock_run.call_args.kwargs
    assert kwargs["host"] == "127.0.0.1"
    assert kwargs["port"] == 9001
    assert kwargs["log_config"] is None


class RecordingHandler(logging.Handler):

    def __init__(self) -> None:
        super().__init__()
        self.messages: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


async def test_setup_logging_keeps_api_key_out_of_request_logs():
    _setup_logging("INFO")
    recorder = RecordingHandler()
    logging.getLogger().addHandler(recorder)
    reply = {"candidates": [{"content": {"parts": [{"text": "{}"}]}}]}
    client = GeminiVisionClient(
        timeout=5, transport=httpx.MockTransport(lambda _: httpx.Response(200, json=reply))
    )
    request = InferenceRequest(
        url="https://x/v1beta/models/gemini-flash-latest:generateContent",
        body={"contents": []},
        params={"key": "super-secret-key"},
    )

    try:
        await client.generate(request)
        logging.getLogger("src.main").info("after request")
    finally:
        logging.getLogger().removeHandler(recorder)

    assert "after request" in recorder.messages
    assert not any("super-secret-key" in m for m in recorder.messages)
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
