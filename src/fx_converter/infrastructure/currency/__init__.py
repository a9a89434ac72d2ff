# 💱 fx_converter/infrastructure/currency/__init__.py
"""
💱 Інфраструктурні сервіси для роботи з валютами.

🔹 `RatesFetcher` — отримання таблиці курсів з frankfurter.app.
🔹 `FX` — конвертер зі станом курсів та ланцюжковим білдером.
"""

from __future__ import annotations

# 🌐 Джерело курсів
from .rates_fetcher import DEFAULT_API_URL, RatesFetcher

# 🔁 Конвертація валют
from .currency_converter import FX, ConversionBuilder, TargetStep, fx

__all__ = ["DEFAULT_API_URL", "RatesFetcher", "FX", "ConversionBuilder", "TargetStep", "fx"]
