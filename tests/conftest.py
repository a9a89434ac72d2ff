# tests/conftest.py
import os
import sys
from pathlib import Path
from typing import Callable, Dict, List

import httpx
import pytest
import pytest_asyncio


# Добавляем src в sys.path, чтобы работал импорт "fx_converter.…" без установки
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from fx_converter.config.config_service import ConfigService  # noqa: E402


# ───────────────────────────────────────────────────────────────────────────
# ФЕЙКОВЫЙ frankfurter.app (курсы относительно EUR)
# ───────────────────────────────────────────────────────────────────────────
RATES_EUR: Dict[str, float] = {
    "EUR": 1.0,
    "USD": 1.08,
    "GBP": 0.86,
    "JPY": 162.5,
    "CHF": 0.95,
}


def frankfurter_handler(calls: List[str]) -> Callable[[httpx.Request], httpx.Response]:
    """Отдаёт таблицу для известных кодов и 404 {"message": "not found"} для прочих."""

    def handler(request: httpx.Request) -> httpx.Response:
        code = request.url.params.get("from", "")
        calls.append(code)
        if code not in RATES_EUR:
            return httpx.Response(404, json={"message": "not found"})
        base_rate = RATES_EUR[code]
        rates = {k: round(v / base_rate, 10) for k, v in RATES_EUR.items() if k != code}
        return httpx.Response(
            200,
            json={"amount": 1.0, "base": code, "date": "2026-10-16", "rates": rates},
        )

    return handler


class StubFetcher:
    """Фейковый IRatesFetcher: всегда отдаёт один и тот же payload."""

    def __init__(self, payload):
        self.payload = payload
        self.calls: List[str] = []

    async def fetch(self, currency: str):
        self.calls.append(currency)
        return self.payload


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    # Каждый тест читает конфиг заново и без FX_* из окружения
    for name in list(os.environ):
        if name.startswith("FX_"):
            monkeypatch.delenv(name, raising=False)
    ConfigService.reset()
    yield
    ConfigService.reset()


@pytest.fixture
def calls() -> List[str]:
    return []


@pytest_asyncio.fixture
async def http_client(calls):
    transport = httpx.MockTransport(frankfurter_handler(calls))
    async with httpx.AsyncClient(transport=transport) as client:
        yield client


@pytest.fixture
def stub_fetcher():
    """Фабрика StubFetcher: stub_fetcher(payload)."""
    return StubFetcher
