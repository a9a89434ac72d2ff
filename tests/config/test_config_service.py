"""
🧪 test_config_service.py — unit-тести для ConfigService

Перевіряє:
- Singleton та дефолти з config.yaml
- Перекриття значень змінними середовища FX_*
- Доступ за крапковим ключем і значення за замовчуванням
"""

import pytest

from fx_converter import FX
from fx_converter.config import ConfigService


def test_singleton():
    assert ConfigService() is ConfigService()


def test_reset_drops_instance():
    first = ConfigService()
    ConfigService.reset()
    assert ConfigService() is not first


def test_yaml_defaults():
    service = ConfigService()
    assert service.get("rates_api.url") == "https://api.frankfurter.app/latest"
    assert service.get("rates_api.timeout_sec") is None
    assert service.get("converter.default_base") == "usd"
    assert service.get("logging.level") == "INFO"
    assert isinstance(service.get("logging"), dict)


def test_missing_key_returns_default():
    service = ConfigService()
    assert service.get("rates_api.nope") is None
    assert service.get("nope.deeper", "fallback") == "fallback"
    assert service.get("rates_api.url.deeper", 42) == 42


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("FX_RATES_API_URL", "https://rates.example/latest")
    monkeypatch.setenv("FX_RATES_API_TIMEOUT", "2.5")
    monkeypatch.setenv("FX_LOG_LEVEL", "DEBUG")

    service = ConfigService()

    assert service.get("rates_api.url") == "https://rates.example/latest"
    assert service.get("rates_api.timeout_sec") == 2.5
    assert service.get("logging.level") == "DEBUG"
    assert service.get("logging.console") is True  # сусідні ключі не затерті


def test_invalid_env_value_is_ignored(monkeypatch):
    monkeypatch.setenv("FX_RATES_API_TIMEOUT", "soon")
    assert ConfigService().get("rates_api.timeout_sec") is None


@pytest.mark.parametrize("env_value, expected", [("EUR", "eur"), ("gbp", "gbp")])
def test_default_base_drives_converter_state(monkeypatch, env_value, expected):
    monkeypatch.setenv("FX_DEFAULT_BASE", env_value)
    assert FX().base_currency == expected


def test_explicit_base_beats_config(monkeypatch):
    monkeypatch.setenv("FX_DEFAULT_BASE", "EUR")
    assert FX(base_currency="CHF").base_currency == "chf"
