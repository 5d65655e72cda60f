"""Unit tests for the uvicorn launcher."""

import importlib.util
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

START_PY = Path(__file__).resolve().parents[2] / "start.py"


def _load_launcher():
    spec = importlib.util.spec_from_file_location("atelier_start", START_PY)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.unit
def test_launcher_serves_the_single_api_app():
    from api import server

    launcher = _load_launcher()

    assert launcher.app is server.app
    assert "src.api.server" not in sys.modules


@pytest.mark.unit
def test_main_reads_port_from_environment(monkeypatch):
    launcher = _load_launcher()
    run = MagicMock()
    monkeypatch.setattr(launcher.uvicorn, "run", run)
    monkeypatch.setenv("PORT", "8123")
    monkeypatch.delenv("HOST", raising=False)

    launcher.main()

    assert run.call_args.args == (launcher.app,)
    assert run.call_args.kwargs["port"] == 8123
    assert run.call_args.kwargs["host"] == "0.0.0.0"
