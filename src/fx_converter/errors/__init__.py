# 🚨 fx_converter/errors/__init__.py
"""🚨 Публічні винятки конвертера валют."""

from .custom_errors import (
    AppError,
    CurrencyNotFoundError,
    CurrencyRole,
    ErrorCode,
    InvalidAmountError,
    InvalidCurrencyError,
    RemoteError,
    UserVisibleError,
)

__all__ = [
    "AppError",
    "CurrencyNotFoundError",
    "CurrencyRole",
    "ErrorCode",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "RemoteError",
    "UserVisibleError",
]
