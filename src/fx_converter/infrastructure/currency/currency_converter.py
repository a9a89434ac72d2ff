# 💱 fx_converter/infrastructure/currency/currency_converter.py
"""
💱 FX — конвертер валют поверх свіжих курсів frankfurter.app.

🔹 Стан екземпляра: `base_currency` (нижній регістр, за замовчуванням "usd") та
    `exchange_rates` (остання отримана таблиця або None).
🔹 Іменовані операції: `get_exchange_rates`, `convert`, `convert_all`, `amount(...).from_(...).to(...)`.
🔹 `FX.__call__` зберігає старий «перевантажений» виклик і лише маршрутизує аргументи
    на одну з цих операцій.
🔹 Кожна конвертація заново тягне курси для валюти-джерела, кешу між викликами немає.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 Опційний спільний клієнт

# 🔠 Системні імпорти
import asyncio                                                      # 🔁 Паралельні конверсії (gather)
import logging                                                      # 🧾 Логи конвертера
from decimal import Decimal, ROUND_HALF_UP                          # 💰 Округлення «від нуля»
from typing import Any, Awaitable, Dict, Optional, Union

# 🧩 Внутрішні модулі проєкту
from fx_converter.config.config_service import ConfigService
from fx_converter.domain.currency.interfaces import (
    Amount,
    ConversionRequest,
    CurrencyRole,
    IRatesFetcher,
    RateTable,
)
from fx_converter.domain.currency.validators import (
    check_currency,
    is_numeric_query,
    validate_amount,
)
from fx_converter.errors.custom_errors import CurrencyNotFoundError
from fx_converter.infrastructure.currency.rates_fetcher import RatesFetcher
from fx_converter.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.converter")

_CENT = Decimal("0.01")                                             # 📏 Квант результату
_MISSING: Any = object()                                            # 🕳️ «query не передано» (на відміну від None)


def _apply_rates(amount: float, from_rate: float, to_rate: float) -> float:
    """🧮 (amount / from_rate) * to_rate, округлено до 2 знаків (half away from zero)."""
    value = Decimal(str(amount)) / Decimal(str(from_rate)) * Decimal(str(to_rate))
    return float(value.quantize(_CENT, rounding=ROUND_HALF_UP))


# ================================
# 🔗 ЛАНЦЮЖКОВИЙ БІЛДЕР
# ================================
class TargetStep:
    """🎯 Другий крок білдера: чекає на цільову валюту."""

    def __init__(self, fx: "FX", amount: Amount, from_currency: str) -> None:
        self._fx = fx
        self._amount = amount
        self._from_currency = from_currency

    async def to(self, to_currency: str) -> float:
        check_currency(CurrencyRole.TARGET, to_currency)
        return await self._fx.convert(self._amount, self._from_currency, to_currency)


class ConversionBuilder:
    """
    🔗 `fx.amount(100).from_("EUR").to("USD")`.

    ⚠️ `from_()` одразу записує валюту-джерело в `fx.base_currency` екземпляра.
    Це навмисна частина API: після виклику білдера екземпляр «памʼятає» останню
    базову валюту так само, як після звичайного отримання курсів.
    """

    def __init__(self, fx: "FX", amount: Amount) -> None:
        self._fx = fx
        self._amount = amount

    def from_(self, from_currency: str) -> TargetStep:
        check_currency(CurrencyRole.BASE, from_currency)
        self._fx.base_currency = from_currency.lower()
        logger.debug("🔗 Білдер: базова валюта → %s", self._fx.base_currency)
        return TargetStep(self._fx, self._amount, from_currency)


# ================================
# 💱 КОНВЕРТЕР
# ================================
class FX:
    """
    💱 Екземпляр конвертера зі спільним станом курсів.

    Стан не захищено локом: якщо кілька корутин одночасно тягнуть курси для
    різних валют, у `base_currency`/`exchange_rates` лишиться результат того
    запиту, що завершився останнім.
    """

    def __init__(
        self,
        *,
        fetcher: Optional[IRatesFetcher] = None,
        client: Optional[httpx.AsyncClient] = None,
        api_url: Optional[str] = None,
        base_currency: Optional[str] = None,
        config_service: Optional[ConfigService] = None,
    ) -> None:
        config = config_service or ConfigService()
        self._fetcher: IRatesFetcher = fetcher or RatesFetcher(
            api_url=api_url,
            client=client,
            config_service=config,
        )
        default_base = base_currency or config.get("converter.default_base") or "usd"
        self.base_currency: str = str(default_base).lower()          # 🏷️ Поточна базова валюта
        self.exchange_rates: Optional[RateTable] = None              # 💱 Остання таблиця курсів

    # ================================
    # ♻️ ЖИТТЄВИЙ ЦИКЛ
    # ================================
    async def __aenter__(self) -> "FX":
        opener = getattr(self._fetcher, "open", None)
        if opener is not None:
            await opener()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        closer = getattr(self._fetcher, "aclose", None)
        if closer is not None:
            await closer()

    # ================================
    # 🔓 ПУБЛІЧНІ ОПЕРАЦІЇ
    # ================================
    async def get_exchange_rates(self, base: Optional[str] = None) -> Optional[RateTable]:
        """
        Повертає таблицю курсів.

        Якщо `base` передано, спершу тягне свіжі курси для неї; інакше віддає
        те, що вже є в `exchange_rates` (може бути None).
        """
        if base:
            await self._load_rates(base)
        return self.exchange_rates

    async def convert(self, amount: Amount, from_currency: str, to_currency: str) -> float:
        """
        Конвертує `amount` з `from_currency` у `to_currency`.

        Raises:
            InvalidCurrencyError, InvalidAmountError: до будь-якого мережевого запиту
                (спершу коди валют, потім сума).
            CurrencyNotFoundError: коду немає в отриманій таблиці.
            RemoteError: сервіс курсів повернув `message`.
        """
        check_currency(CurrencyRole.BASE, from_currency)
        check_currency(CurrencyRole.TARGET, to_currency)
        value = validate_amount(amount)
        request = ConversionRequest(value, from_currency, to_currency)

        table = await self._load_rates(request.from_currency) or {}

        from_rate = table.get(request.from_currency.upper())
        to_rate = table.get(request.to_currency.upper())
        if not from_rate:
            error = CurrencyNotFoundError(request.from_currency, CurrencyRole.BASE)
            logger.error("❌ %s", error, extra=error.to_log_extra())
            raise error
        if not to_rate:
            error = CurrencyNotFoundError(request.to_currency, CurrencyRole.TARGET)
            logger.error("❌ %s", error, extra=error.to_log_extra())
            raise error

        result = _apply_rates(request.amount, from_rate, to_rate)
        logger.debug(
            "✅ Конвертовано %s %s → %s %s (from_rate=%s, to_rate=%s)",
            request.amount,
            request.from_currency,
            result,
            request.to_currency,
            from_rate,
            to_rate,
        )
        return result

    async def convert_all(self, amount: Amount, from_currency: str) -> Dict[str, float]:
        """
        Конвертує `amount` в усі валюти з таблиці `from_currency`.

        Конверсії запускаються паралельно; перша ж помилка валить увесь результат.
        """
        check_currency(CurrencyRole.BASE, from_currency)
        validate_amount(amount)
        table = await self._load_rates(from_currency) or {}

        codes = list(table)
        results = await asyncio.gather(
            *(self.convert(amount, from_currency, code) for code in codes)
        )
        logger.info("💱 %s %s конвертовано у %d валют", amount, from_currency, len(codes))
        return dict(zip(codes, results))

    def amount(self, amount: Amount) -> ConversionBuilder:
        """Починає ланцюжок `amount(...).from_(...).to(...)`."""
        return ConversionBuilder(self, amount)

    # ================================
    # 🔀 СУМІСНИЙ ВИКЛИК
    # ================================
    def __call__(
        self,
        query: Any = _MISSING,
        from_currency: Optional[str] = None,
        to_currency: Optional[str] = None,
    ) -> Union[Awaitable[Any], ConversionBuilder]:
        """
        Маршрутизує виклик за формою аргументів (перший збіг перемагає):

        1. `query` не передано → курси для поточної `base_currency`;
        2. нечисловий рядок без валют → курси для `query` як коду валюти;
        3. є лише `from_currency` → `convert_all`;
        4. є обидві валюти → `convert`;
        5. інакше → `ConversionBuilder`.

        Явний `None` не вважається відсутнім `query`: він іде далі як сума
        і падає на валідації.
        """
        if query is _MISSING:
            return self.get_exchange_rates(self.base_currency)
        if isinstance(query, str) and not is_numeric_query(query) and not from_currency and not to_currency:
            return self.get_exchange_rates(query)
        if from_currency and not to_currency:
            return self.convert_all(query, from_currency)
        if from_currency and to_currency:
            return self.convert(query, from_currency, to_currency)
        return self.amount(query)

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    async def _load_rates(self, currency: str) -> Optional[RateTable]:
        """Тягне курси та замінює стан цілком; повертає актуальну таблицю."""
        payload = await self._fetcher.fetch(currency)
        if payload is None:
            return self.exchange_rates
        table = payload.as_table()
        self.base_currency = currency.lower()
        self.exchange_rates = table
        logger.info("🔄 Курси оновлено: base=%s, валют=%d", self.base_currency, len(table))
        return table


def fx(
    query: Any = _MISSING,
    from_currency: Optional[str] = None,
    to_currency: Optional[str] = None,
) -> Union[Awaitable[Any], ConversionBuilder]:
    """Одноразовий виклик на свіжому `FX()`: `await fx("100", "EUR", "USD")`."""
    return FX()(query, from_currency, to_currency)


__all__ = ["FX", "ConversionBuilder", "TargetStep", "fx"]
