# ⚙️ fx_converter/config/__init__.py
"""⚙️ Доступ до статичної конфігурації бібліотеки."""

from .config_service import ConfigService

__all__ = ["ConfigService"]
