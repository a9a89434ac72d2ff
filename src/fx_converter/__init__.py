# 💱 fx_converter/__init__.py
"""
💱 fx_converter — асинхронна конвертація валют за актуальними курсами frankfurter.app.

    from fx_converter import FX, fx

    rates = await fx()                               # курси відносно USD
    eur = await fx("EUR")                            # курси відносно EUR
    all_ = await fx("100", "EUR")                    # 100 EUR в усіх валютах
    usd = await fx("100", "EUR", "USD")              # 100 EUR → USD
    usd = await fx("100").from_("EUR").to("USD")     # те саме ланцюжком
"""

import logging

from fx_converter.errors import (
    AppError,
    CurrencyNotFoundError,
    CurrencyRole,
    InvalidAmountError,
    InvalidCurrencyError,
    RemoteError,
)
from fx_converter.infrastructure.currency import (
    FX,
    ConversionBuilder,
    RatesFetcher,
    TargetStep,
    fx,
)
from fx_converter.shared.utils.logger import LOG_NAME

logging.getLogger(LOG_NAME).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    "FX",
    "ConversionBuilder",
    "TargetStep",
    "RatesFetcher",
    "fx",
    "AppError",
    "CurrencyNotFoundError",
    "CurrencyRole",
    "InvalidAmountError",
    "InvalidCurrencyError",
    "RemoteError",
]
