"""Builder do envelope de mensagem de template para a Cloud API.

Não faz I/O: devolve o dict pronto para serialização JSON. O envio fica a
cargo da camada de transporte do chamador.
"""

from __future__ import annotations

from typing import Any

from whatsapp_templates.adapters.whatsapp.models import OutboundTemplateRequest
from whatsapp_templates.adapters.whatsapp.validators import (
    validate_platform_limits,
    validate_template_request,
)
from whatsapp_templates.config.settings import Settings, get_settings
from whatsapp_templates.domain.template import Template
from whatsapp_templates.observability.logging import get_logger

logger = get_logger(__name__)


def build_base_payload(request: OutboundTemplateRequest) -> dict[str, Any]:
    """Constrói payload base comum a todas as mensagens.

    Args:
        request: Requisição de envio

    Returns:
        Payload com campos obrigatórios
    """
    return {
        "messaging_product": "whatsapp",
        "recipient_type": "individual",
        "to": request.to,
        "type": Template.kind,
    }


def build_template_message(
    template: Template,
    request: OutboundTemplateRequest,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Constrói payload completo de template para a API Meta.

    Args:
        template: Template já construído e validado estruturalmente
        request: Metadados de envio (destinatário, categoria, idempotência)
        settings: Configurações; usa ``get_settings()`` se omitido

    Returns:
        Payload completo pronto para envio

    Raises:
        MessageRequestError: Se os metadados de envio forem inválidos
        PlatformLimitError: Se limites da Meta forem violados (quando habilitado)
    """
    settings = settings or get_settings()

    validate_template_request(request)
    if settings.enforce_platform_limits:
        validate_platform_limits(template)

    payload = build_base_payload(request)
    payload[Template.kind] = template.to_dict()

    # Sem PII: apenas nome do template e contagem de componentes
    logger.debug(
        "Payload de template construído",
        extra={
            "template_name": template.name,
            "language_code": template.language.code,
            "components_count": len(template.components),
            "category": request.category,
        },
    )
    return payload
