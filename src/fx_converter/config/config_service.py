# ⚙️ config_service.py
"""
⚙️ config_service.py — Сервіс для доступу до статичної конфігурації конвертера.

🔹 Клас `ConfigService`:
- Завантажує дефолти з config.yaml, що лежить поруч із модулем.
- Перекриває їх змінними середовища `FX_*` (у т.ч. з файлу .env).
- Надає єдиний метод .get() для доступу до будь-якого параметра.
- Працює як Singleton.
"""

# 🌐 Зовнішні бібліотеки
import yaml                                  # 📦 YAML-парсинг
from dotenv import load_dotenv              # 🔐 Завантаження змінних із .env

# 🔠 Системні імпорти
import os                                   # 📁 Доступ до змінних середовища
import logging                              # 🧾 Логування
from pathlib import Path                    # 📁 Побудова шляху до файлів
from typing import Any, Callable, Dict, Optional, Tuple

# 🧩 Внутрішні модулі проєкту
from fx_converter.shared.utils.logger import LOG_NAME

logger = logging.getLogger(f"{LOG_NAME}.config")

# 🔑 Змінна середовища → (крапковий ключ, перетворювач значення)
_ENV_KEYS: Dict[str, Tuple[str, Callable[[str], Any]]] = {
    "FX_RATES_API_URL": ("rates_api.url", str),
    "FX_RATES_API_TIMEOUT": ("rates_api.timeout_sec", float),
    "FX_DEFAULT_BASE": ("converter.default_base", str),
    "FX_LOG_LEVEL": ("logging.level", str),
    "FX_LOG_FILE": ("logging.file", str),
}


# ============================
# ⚙️ СЕРВІС ДОСТУПУ ДО КОНФІГІВ
# ============================
class ConfigService:
    """
    ⚙️ Надає доступ до конфігураційних параметрів бібліотеки.
    Працює як Singleton: конфігурація зчитується лише один раз.
    """

    _instance: Optional["ConfigService"] = None   # 🧩 Singleton-екземпляр
    _config: Dict[str, Any]                       # 📦 Обʼєднана конфігурація зі всіх джерел

    YAML_PATH: Path = Path(__file__).parent / "config.yaml"

    def __new__(cls):
        # ✅ Патерн Singleton: створюємо лише один екземпляр
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._config = {}
            instance._load_all_configs()
            cls._instance = instance
            logger.debug("🔄 Singleton ConfigService створено і конфігурація завантажена")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """♻️ Скидає singleton: наступний виклик перечитає yaml та оточення."""
        cls._instance = None

    def _load_all_configs(self) -> None:
        """
        📥 Завантажує всі джерела конфігурації в один словник.
        Пріоритет (від слабшого до сильнішого): config.yaml → .env / оточення.
        """

        # --- 1. YAML-файл з дефолтами ---
        try:
            with open(self.YAML_PATH, "r", encoding="utf-8") as f:
                self._deep_update(self._config, yaml.safe_load(f) or {})
        except (FileNotFoundError, yaml.YAMLError) as e:
            logger.warning(f"⚠️ Не вдалося завантажити config.yaml: {e}")

        # --- 2. .env та змінні середовища ---
        load_dotenv()  # 🔐 Не перезаписує вже виставлені змінні оточення
        env_vars: Dict[str, Any] = {}
        for env_name, (key, cast) in _ENV_KEYS.items():
            raw = os.getenv(env_name)
            if raw is None or raw == "":
                continue
            try:
                env_vars[key] = cast(raw)
            except ValueError:
                logger.warning(f"⚠️ Некоректне значення {env_name}={raw!r}, ігнорую")
        self._deep_update(self._config, self._unflatten_dict(env_vars))

        logger.debug(f"🔍 Обʼєднаний словник конфігурації: {self._config}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        🔑 Отримує значення конфігурації за ключем (наприклад: 'rates_api.url').

        Args:
            key (str): Ключ у форматі з крапкою.
            default (Any): Значення за замовчуванням, якщо ключ не знайдено.

        Returns:
            Any: Значення параметра або default.
        """
        value: Any = self._config
        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]                 # 🔎 Переходимо глибше в структуру
            else:
                return default                   # ❌ Ключ не знайдено, повертаємо дефолт
        return value

    # ===============================
    # 🔧 ДОПОМІЖНІ МЕТОДИ ЗЛИТТЯ КОНФІГІВ
    # ===============================

    @staticmethod
    def _unflatten_dict(d: Dict[str, Any]) -> Dict[str, Any]:
        """
        🔁 Перетворює ключі з крапками в ієрархічний словник.
        'rates_api.url' → {'rates_api': {'url': ...}}
        """
        result: Dict[str, Any] = {}
        for key, value in d.items():
            parts = key.split('.')
            d_ref = result
            for part in parts[:-1]:
                d_ref = d_ref.setdefault(part, {})
            d_ref[parts[-1]] = value
        return result

    @classmethod
    def _deep_update(cls, source: Dict[str, Any], overrides: Dict[str, Any]) -> None:
        """🔁 Рекурсивно обʼєднує два словники (overrides перемагає)."""
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(source.get(key), dict):
                cls._deep_update(source[key], value)
            else:
                source[key] = value
