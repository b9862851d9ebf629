from __future__ import annotations

import pytest

from src.aub_converter.aub_converter.main import create_app

SAMPLE_LOG = (
    "72\t2025-11-03 08:52:08\t104\t15\tJohn Doe\tI\t0\t1\n"
    "\n"
    "72\t2025-11-03 18:18:47\t104\t15\tJohn Doe\tI\t0\t1\n"
    "not-a-record\n"
    "73\t2025-11-03 07:01:00\n"
)


@pytest.fixture
def sample_log() -> str:
    return SAMPLE_LOG


@pytest.fixture
def app(monkeypatch):
    monkeypatch.delenv("AUB_DIRECTION_MODE", raising=False)
    app = create_app("config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()
