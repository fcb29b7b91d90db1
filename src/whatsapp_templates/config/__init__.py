"""Configurações centralizadas do whatsapp_templates.

Uso típico:
    from whatsapp_templates.config import get_settings
"""

from whatsapp_templates.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
