# 💱 fx_converter/domain/currency/interfaces.py
"""
🧩 interfaces.py — Контракти та DTO для валютних операцій.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Protocol, Union

# 🧩 Внутрішні модулі проєкту
from fx_converter.errors.custom_errors import CurrencyRole

# ================================
# 🏷️ ТИПИ
# ================================
RateTable = Dict[str, float]						# 💱 {"USD": 1, "EUR": 0.92, ...} відносно базової валюти
Amount = Union[int, float, Decimal, str]			# 🔢 Що приймає валідатор суми

MAX_SAFE_INTEGER: int = 2**53 - 1					# 📏 Межа точного цілого у float64


# ================================
# 🏛️ СТРУКТУРИ ДАНИХ (DTO)
# ================================
@dataclass(frozen=True)
class RatesPayload:
    """DTO з розібраною відповіддю сервісу курсів."""
    base: str
    rates: Dict[str, float]

    def as_table(self) -> RateTable:
        """Повна таблиця: базова валюта з курсом 1 плюс усі отримані курси."""
        return {self.base: 1, **self.rates}


@dataclass(frozen=True)
class ConversionRequest:
    """DTO одного запиту на конвертацію; живе лише під час виклику."""
    amount: float
    from_currency: str
    to_currency: str


# ================================
# 🌐 КОНТРАКТ ДЖЕРЕЛА КУРСІВ
# ================================
class IRatesFetcher(Protocol):
    """🌐 Асинхронно отримує таблицю курсів для базової валюти."""

    async def fetch(self, currency: str) -> RatesPayload | None:
        """Повертає `RatesPayload` або None, якщо у відповіді немає `base`/`rates`."""
        ...


__all__ = [
    "Amount",
    "ConversionRequest",
    "CurrencyRole",
    "IRatesFetcher",
    "MAX_SAFE_INTEGER",
    "RateTable",
    "RatesPayload",
]
