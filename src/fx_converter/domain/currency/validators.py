# ✅ fx_converter/domain/currency/validators.py
"""
✅ Чисті синхронні перевірки суми та кодів валют.

🔹 `validate_amount` — число або рядок з цифр з однією опційною крапкою (без знака та експоненти).
🔹 `check_currency` — лише перевірка, що код є рядком; невідомий код ловиться пізніше,
    коли його не знайдено в таблиці курсів.
"""

from __future__ import annotations

# 🔠 Системні імпорти
import logging
import math
import re
from decimal import Decimal
from typing import Any

# 🧩 Внутрішні модулі проєкту
from fx_converter.errors.custom_errors import (
    CurrencyRole,
    InvalidAmountError,
    InvalidCurrencyError,
)
from fx_converter.shared.utils.logger import LOG_NAME
from .interfaces import MAX_SAFE_INTEGER

logger = logging.getLogger(f"{LOG_NAME}.validators")

_AMOUNT_RE = re.compile(r"\d+(\.\d+)?", re.ASCII)		# 🔢 "100", "100.5"; без "+", "-", "1e3", ".5"
_NUMERIC_QUERY_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|Infinity)"		# 🔢 десяткові, експонента, Infinity
    r"|0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+",				# 🔢 hex / octal / binary без знака
    re.ASCII,
)


def validate_amount(value: Any) -> float:
    """
    🔢 Перевіряє та повертає суму як float.

    Raises:
        InvalidAmountError: рядок не відповідає шаблону, значення не число,
            нескінченне/NaN або за модулем більше `MAX_SAFE_INTEGER`.
    """
    if isinstance(value, str):
        if not _AMOUNT_RE.fullmatch(value):
            raise InvalidAmountError("Amount must be a number", amount=value)
        amount = float(value)
    elif isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        amount = float(value)
    else:
        raise InvalidAmountError("Amount must be a number", amount=value)

    if not math.isfinite(amount):
        raise InvalidAmountError("Amount must be a finite number", amount=value)

    if abs(amount) > MAX_SAFE_INTEGER:
        raise InvalidAmountError("Amount exceeds safe limit", amount=value)

    logger.debug("🔢 Сума прийнята: %r → %s", value, amount)
    return amount


def check_currency(role: CurrencyRole, currency: Any) -> str:
    """🔤 Повертає код як є, якщо це рядок; інакше `InvalidCurrencyError`."""
    if not isinstance(currency, str):
        raise InvalidCurrencyError(role, currency)
    return currency


def is_numeric_query(query: Any) -> bool:
    """
    🔎 Чи схожий запит на число (а не на код валюти).

    Пробіли навколо ігноруються, порожній
    рядок числовий, `Infinity` та літерали `0x`/`0o`/`0b` числові; `"inf"`, `"nan"`
    і рядки з `_` ні. Усе, що не є числом, викликач трактує як код валюти.
    """
    if not isinstance(query, str):
        return True
    text = query.strip()
    if not text:
        return True
    return _NUMERIC_QUERY_RE.fullmatch(text) is not None


__all__ = ["validate_amount", "check_currency", "is_numeric_query"]
