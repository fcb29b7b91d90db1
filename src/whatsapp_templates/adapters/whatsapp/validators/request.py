"""Validadores para metadados da requisição de envio."""

from __future__ import annotations

import re

from whatsapp_templates.adapters.whatsapp.models import OutboundTemplateRequest
from whatsapp_templates.adapters.whatsapp.validators.limits import (
    MAX_IDEMPOTENCY_KEY_LENGTH,
)
from whatsapp_templates.domain.enums import MessageCategory
from whatsapp_templates.domain.errors import MessageRequestError

_E164_PATTERN = re.compile(r"^\+[1-9]\d{7,14}$")


def validate_template_request(request: OutboundTemplateRequest) -> None:
    """Valida destinatário, categoria e chave de idempotência.

    Args:
        request: Requisição de envio

    Raises:
        MessageRequestError: Se algum metadado for inválido
    """
    if not request.to or not _E164_PATTERN.match(request.to):
        raise MessageRequestError(
            "Recipient must be in E.164 format (e.g., +5511999999999)",
            entity="OutboundTemplateRequest",
            field="to",
        )

    if request.category:
        try:
            MessageCategory(request.category)
        except ValueError:
            raise MessageRequestError(
                f"Invalid category: {request.category}",
                entity="OutboundTemplateRequest",
                field="category",
            ) from None

    key = request.idempotency_key
    if key and len(key) > MAX_IDEMPOTENCY_KEY_LENGTH:
        raise MessageRequestError(
            f"idempotency_key must not exceed {MAX_IDEMPOTENCY_KEY_LENGTH}",
            entity="OutboundTemplateRequest",
            field="idempotency_key",
        )
