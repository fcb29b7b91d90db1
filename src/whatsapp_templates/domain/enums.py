"""Enums de domínio para componentes e parâmetros de templates Meta/WhatsApp."""

from __future__ import annotations

from enum import StrEnum


class ParameterType(StrEnum):
    """Tipos de valor aceitos em parâmetros de header/body.

    Conforme API Meta (template message object):
    - text: texto simples (60 chars no header, 1024 no body)
    - currency: valor monetário com fallback
    - date_time: data/hora sempre exibida pelo fallback_value
    - image, document, video: mídia por id ou link
    """

    TEXT = "text"
    CURRENCY = "currency"
    DATE_TIME = "date_time"
    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"


class ComponentType(StrEnum):
    """Seções estruturais de um template."""

    HEADER = "header"
    BODY = "body"
    BUTTON = "button"


class ButtonSubType(StrEnum):
    """Tipos de interação de um botão de template."""

    URL = "url"
    QUICK_REPLY = "quick_reply"


class ButtonParameterType(StrEnum):
    """Tipos de parâmetro aceitos em um ButtonComponent."""

    URL = "url"
    PAYLOAD = "payload"


class MessageCategory(StrEnum):
    """Categorias de mensagens conforme política de cobrança Meta/WhatsApp."""

    MARKETING = "MARKETING"
    UTILITY = "UTILITY"
    AUTHENTICATION = "AUTHENTICATION"
    SERVICE = "SERVICE"
