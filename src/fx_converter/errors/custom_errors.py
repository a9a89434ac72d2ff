# 🚨 fx_converter/errors/custom_errors.py
"""
🚨 Ієрархія винятків конвертера валют.

🔹 `AppError` — базовий виняток з `message`/`details` та `to_log_extra()` для logger.extra.
🔹 `UserVisibleError` — помилки вхідних даних: сума, код валюти, відсутній курс.
🔹 `RemoteError` — сервіс курсів повернув поле `message`.

Усі винятки піднімаються всередині корутин і доходять до того, хто робив `await`,
без повторних спроб чи локального відновлення.
"""

from __future__ import annotations

# 🔠 Системні імпорти
from enum import Enum												# 🏷️ Роль валюти в конверсії
from typing import Any, Dict, Optional								# 📐 Типізація


# ================================
# ⚠️ КОДИ ПОМИЛОК
# ================================
class ErrorCode:
    """⚠️ Рядкові коди для логів та зовнішніх обробників."""

    INVALID_AMOUNT = "invalid_amount"								# 🔢 Некоректна сума
    INVALID_CURRENCY = "invalid_currency"							# 🔤 Код валюти не рядок
    CURRENCY_NOT_FOUND = "currency_not_found"						# 🔍 Коду немає в таблиці курсів
    REMOTE = "remote_error"											# 🌐 Сервіс курсів повідомив про помилку
    UNKNOWN = "unknown_error"										# ❓ Резервний код


class CurrencyRole(str, Enum):
    """🔁 Роль валюти у запиті: джерело (Base) чи ціль (Target)."""

    BASE = "Base"
    TARGET = "Target"


# ================================
# 🧠 БАЗОВІ ВИНЯТКИ
# ================================
class AppError(Exception):
    """🧠 Базовий виняток бібліотеки."""

    error_code: str = ErrorCode.UNKNOWN

    def __init__(self, message: str, *, details: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message										# 🗒️ Текст для людини
        self.details = details										# 🔎 Технічні подробиці (опційно)

    def to_log_extra(self) -> Dict[str, Any]:
        """📦 Формує словник для logger.extra."""
        extra: Dict[str, Any] = {"error_code": self.error_code}
        if self.details:
            extra["details"] = self.details
        return extra

    def __str__(self) -> str:
        return self.message


class UserVisibleError(AppError):
    """👀 Помилка, спричинена вхідними даними викликача."""


# ================================
# 🧾 ДОМЕННІ ВИНЯТКИ
# ================================
class InvalidAmountError(UserVisibleError):
    """🔢 Сума не є числом, нескінченна або перевищує безпечну межу."""

    error_code = ErrorCode.INVALID_AMOUNT

    def __init__(self, message: str, *, amount: Any = None, details: Optional[str] = None) -> None:
        super().__init__(message, details=details)
        self.amount = amount

    def to_log_extra(self) -> Dict[str, Any]:
        extra = super().to_log_extra()
        extra["amount"] = repr(self.amount)
        return extra


class InvalidCurrencyError(UserVisibleError):
    """🔤 Код валюти переданий не рядком (None, число, ...)."""

    error_code = ErrorCode.INVALID_CURRENCY

    def __init__(self, role: CurrencyRole, value: Any = None) -> None:
        super().__init__(f"{role.value} currency must be specified as a string")
        self.role = role
        self.value = value

    def to_log_extra(self) -> Dict[str, Any]:
        extra = super().to_log_extra()
        extra.update({"role": self.role.value, "value": repr(self.value)})
        return extra


class CurrencyNotFoundError(UserVisibleError):
    """🔍 Коду валюти немає в отриманій таблиці курсів."""

    error_code = ErrorCode.CURRENCY_NOT_FOUND

    def __init__(self, currency: str, role: CurrencyRole) -> None:
        super().__init__(f"{role.value} currency {currency} not found")
        self.currency = currency
        self.role = role

    def to_log_extra(self) -> Dict[str, Any]:
        extra = super().to_log_extra()
        extra.update({"role": self.role.value, "currency": self.currency})
        return extra


class RemoteError(AppError):
    """🌐 Сервіс курсів повернув тіло з полем `message`."""

    error_code = ErrorCode.REMOTE

    def __init__(
        self,
        message: str,
        *,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.url = url												# 🔗 URL запиту
        self.status_code = status_code								# 🔢 HTTP-код відповіді

    def to_log_extra(self) -> Dict[str, Any]:
        extra = super().to_log_extra()
        if self.url:
            extra["url"] = self.url
        if self.status_code is not None:
            extra["status_code"] = self.status_code
        return extra


# ================================
# 📤 ПУБЛІЧНИЙ API
# ================================
__all__ = [
    "ErrorCode",
    "CurrencyRole",
    "AppError",
    "UserVisibleError",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "CurrencyNotFoundError",
    "RemoteError",
]
