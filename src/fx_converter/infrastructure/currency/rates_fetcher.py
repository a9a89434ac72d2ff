# 🌐 fx_converter/infrastructure/currency/rates_fetcher.py
"""
🌐 RatesFetcher — асинхронне отримання таблиці курсів з frankfurter.app.

🎯 Призначення:
    • робить GET `<url>?from=<КОД>` і розбирає поля `base`, `rates`, `message`;
    • якщо у відповіді є `message`, піднімає `RemoteError`;
    • не кешує, не повторює запити і не ставить власного таймауту.

⚙️ Нотатки:
    • зовнішній `httpx.AsyncClient` (переданий у конструктор) лише використовується, але не закривається;
    • без клієнта кожен запит відкриває й закриває власний, або `open()` створює один спільний до `aclose()`.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
import httpx                                                        # 🌐 HTTP-клієнт

# 🔠 Системні імпорти
import logging                                                      # 🧾 Логи сервісу
from typing import Any, Dict, Optional, cast

# 🧩 Внутрішні модулі проєкту
from fx_converter.config.config_service import ConfigService        # ⚙️ Конфіги бібліотеки
from fx_converter.domain.currency.interfaces import IRatesFetcher, RatesPayload
from fx_converter.errors.custom_errors import RemoteError
from fx_converter.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.rates_fetcher")

DEFAULT_API_URL = "https://api.frankfurter.app/latest"


class RatesFetcher(IRatesFetcher):
    """
    🏦 Отримує «сиру» таблицю курсів для однієї базової валюти.
    """

    def __init__(
        self,
        *,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
        config_service: Optional[ConfigService] = None,
    ) -> None:
        config = config_service or ConfigService()
        self._api_url: str = cast(str, api_url or config.get("rates_api.url") or DEFAULT_API_URL)
        self._timeout: Optional[float] = (
            timeout if timeout is not None else config.get("rates_api.timeout_sec")
        )                                                            # ⏱️ None → без таймауту
        self._client: Optional[httpx.AsyncClient] = client          # 🌐 Зовнішній клієнт (не закриваємо)
        self._owned_client: Optional[httpx.AsyncClient] = None      # 🌐 Власний клієнт після open()
        logger.debug("⚙️ RatesFetcher config: url=%s timeout=%s", self._api_url, self._timeout)

    @property
    def api_url(self) -> str:
        return self._api_url

    # ================================
    # 🔓 ПУБЛІЧНИЙ ІНТЕРФЕЙС
    # ================================
    async def open(self) -> None:
        """Створює спільний клієнт, якщо зовнішній не передано."""
        if self._client is None and self._owned_client is None:
            self._owned_client = httpx.AsyncClient(timeout=self._timeout)
            logger.debug("🔧 Створено власний HTTP-клієнт RatesFetcher")

    async def aclose(self) -> None:
        """Закриває лише той клієнт, який створив сам fetcher."""
        if self._owned_client is not None:
            if not self._owned_client.is_closed:
                await self._owned_client.aclose()
                logger.debug("🔌 Власний HTTP-клієнт RatesFetcher закрито.")
            self._owned_client = None

    async def fetch(self, currency: str) -> Optional[RatesPayload]:
        """
        🔄 Запитує курси для `currency` (код передається у верхньому регістрі).

        Повертає:
            RatesPayload, якщо у відповіді є і `base`, і `rates`;
            None, якщо відповідь їх не містить (стан конвертера тоді не змінюється).

        Raises:
            RemoteError: тіло відповіді містить поле `message`.
            httpx.HTTPError: мережеві збої та не-2xx статуси без `message`.
        """
        code = currency.upper()
        client = self._client or self._owned_client
        if client is not None:
            response = await client.get(self._api_url, params={"from": code})
        else:
            async with httpx.AsyncClient(timeout=self._timeout) as ephemeral:
                response = await ephemeral.get(self._api_url, params={"from": code})

        logger.debug("🌐 GET %s → %s", response.request.url, response.status_code)
        data = self._parse_body(response)

        message = data.get("message")
        if message:
            error = RemoteError(
                str(message),
                url=str(response.request.url),
                status_code=response.status_code,
            )
            logger.error("❌ Сервіс курсів повернув помилку: %s", message, extra=error.to_log_extra())
            raise error

        response.raise_for_status()                                  # ❗ не-2xx без `message`

        base = data.get("base")
        rates = data.get("rates")
        if not base or not isinstance(rates, dict):
            logger.warning("⚠️ У відповіді для %s немає base/rates, таблицю не оновлено.", code)
            return None

        payload = RatesPayload(
            base=str(base),
            rates={str(k): float(v) for k, v in rates.items()},
        )
        logger.debug("✅ Отримано %d курсів для %s", len(payload.rates), payload.base)
        return payload

    # ================================
    # 🔒 ВНУТРІШНЯ ЛОГІКА
    # ================================
    @staticmethod
    def _parse_body(response: httpx.Response) -> Dict[str, Any]:
        """Розбирає JSON-тіло; нечитабельне тіло при помилковому статусі → HTTPStatusError."""
        try:
            data = response.json()
        except ValueError:
            response.raise_for_status()
            raise
        return data if isinstance(data, dict) else {}
