"""Modelos de requisição para envio de templates.

O ``Template`` em si é um objeto de domínio imutável; aqui ficam apenas os
metadados de envio, no formato usado pelo transporte.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OutboundTemplateRequest(BaseModel):
    """Requisição para enviar um template outbound."""

    model_config = ConfigDict(frozen=True)

    to: str  # Phone number E.164
    category: str | None = None  # MARKETING, UTILITY, AUTHENTICATION, SERVICE
    idempotency_key: str | None = None  # Para idempotência
