"""
🧪 test_validators.py — unit-тести для перевірок суми та кодів валют

Перевіряє:
- Шаблон числового рядка (цифри + одна опційна крапка)
- Нескінченні значення та безпечну межу
- Перевірку «код валюти є рядком»
- Розпізнавання числового запиту диспетчером
"""

from decimal import Decimal

import pytest

from fx_converter.domain.currency import (
    MAX_SAFE_INTEGER,
    CurrencyRole,
    check_currency,
    is_numeric_query,
    validate_amount,
)
from fx_converter.errors import InvalidAmountError, InvalidCurrencyError


# -------------------
# 🔢 Сума
# -------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("0", 0.0),
        ("100", 100.0),
        ("100.5", 100.5),
        ("007.25", 7.25),
        ("9007199254740991", float(MAX_SAFE_INTEGER)),
    ],
)
def test_numeric_strings_are_accepted(raw, expected):
    assert validate_amount(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "abc", "-1", "+1", "1e3", ".5", "5.", "1.2.3", " 1", "1 ", "1,5", "١٢", "Infinity"],
)
def test_malformed_strings_are_rejected(raw):
    with pytest.raises(InvalidAmountError, match="Amount must be a number"):
        validate_amount(raw)


@pytest.mark.parametrize("raw, expected", [(10, 10.0), (10.5, 10.5), (Decimal("2.5"), 2.5), (-5, -5.0)])
def test_numbers_bypass_string_pattern(raw, expected):
    assert validate_amount(raw) == expected


@pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan")])
def test_non_finite_numbers_are_rejected(raw):
    with pytest.raises(InvalidAmountError, match="finite"):
        validate_amount(raw)


@pytest.mark.parametrize("raw", [MAX_SAFE_INTEGER + 1, -(MAX_SAFE_INTEGER + 1), "9007199254740993"])
def test_amount_above_safe_integer_is_rejected(raw):
    with pytest.raises(InvalidAmountError, match="safe limit"):
        validate_amount(raw)


@pytest.mark.parametrize("raw", [None, True, [1], {"amount": 1}])
def test_non_numeric_types_are_rejected(raw):
    with pytest.raises(InvalidAmountError):
        validate_amount(raw)


# -------------------
# 🔤 Код валюти
# -------------------

def test_string_currency_is_returned_as_is():
    assert check_currency(CurrencyRole.BASE, "eur") == "eur"
    assert check_currency(CurrencyRole.TARGET, "not-a-code") == "not-a-code"


@pytest.mark.parametrize("value", [None, 1, 1.5, b"USD", ["USD"]])
def test_non_string_currency_is_rejected(value):
    with pytest.raises(InvalidCurrencyError) as exc_info:
        check_currency(CurrencyRole.TARGET, value)
    assert str(exc_info.value) == "Target currency must be specified as a string"
    assert exc_info.value.role is CurrencyRole.TARGET


# -------------------
# 🔎 Числовий запит
# -------------------

@pytest.mark.parametrize(
    "query",
    ["100", "100.5", " 42 ", "", "1e3", "-3", ".5", "Infinity", "-Infinity", "0x10", "0b101", "0o17", 100, 2.5],
)
def test_numeric_queries(query):
    assert is_numeric_query(query) is True


@pytest.mark.parametrize(
    "query",
    ["abc", "EUR", "usd", "nan", "NaN", "inf", "infinity", "1_000", "12abc", "-0x10", "0x", "1e"],
)
def test_currency_like_queries(query):
    assert is_numeric_query(query) is False
