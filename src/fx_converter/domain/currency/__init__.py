# 💱 fx_converter/domain/currency/__init__.py
"""
💱 Пакет `domain.currency` публікує контракти, DTO та валідатори для валютних операцій.

🔹 `interfaces.py` — `RateTable`, `RatesPayload`, `ConversionRequest`, протокол `IRatesFetcher`.
🔹 `validators.py` — `validate_amount`, `check_currency`, `is_numeric_query`.
"""

# 🧩 Внутрішні модулі проєкту
from .interfaces import (
    MAX_SAFE_INTEGER,            # 📏 Безпечна межа суми
    Amount,                      # 🔢 Допустимі типи суми
    ConversionRequest,           # 🧾 DTO запиту на конвертацію
    CurrencyRole,                # 🔁 Base / Target
    IRatesFetcher,               # 🌐 Контракт джерела курсів
    RatesPayload,                # 📦 Розібрана відповідь сервісу курсів
    RateTable,                   # 💱 Таблиця курсів
)
from .validators import check_currency, is_numeric_query, validate_amount


# ================================
# 📤 ПУБЛІЧНИЙ API ПАКЕТА
# ================================
__all__ = [
    "MAX_SAFE_INTEGER",
    "Amount",
    "ConversionRequest",
    "CurrencyRole",
    "IRatesFetcher",
    "RatesPayload",
    "RateTable",
    "check_currency",
    "is_numeric_query",
    "validate_amount",
]
