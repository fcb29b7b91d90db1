"""Validadores de limites de plataforma para templates já construídos.

A construção do ``Template`` valida apenas consistência estrutural; os
limites abaixo são regras documentadas pela Meta e verificadas antes do
envio (ver ``Settings.enforce_platform_limits``).
"""

from __future__ import annotations

from typing import NoReturn

from whatsapp_templates.adapters.whatsapp.validators.limits import (
    MAX_BODY_TEXT_LENGTH,
    MAX_HEADER_PARAMETERS,
    MAX_HEADER_TEXT_LENGTH,
    MAX_TEMPLATE_NAME_LENGTH,
    SUPPORTED_TEMPLATE_DOCUMENT_EXTENSIONS,
    SUPPORTED_TEMPLATE_DOCUMENT_TYPES,
)
from whatsapp_templates.domain.components import BodyComponent, HeaderComponent, Parameter
from whatsapp_templates.domain.errors import PlatformLimitError
from whatsapp_templates.domain.parameters import Document, Text
from whatsapp_templates.domain.template import Template
from whatsapp_templates.observability.logging import get_logger

logger = get_logger(__name__)


def _reject(message: str, field: str, template: Template) -> NoReturn:
    logger.warning(
        "Template rejeitado por limite de plataforma",
        extra={"template_name": template.name, "field": field, "reason": message},
    )
    raise PlatformLimitError(message, entity="Template", field=field)


def validate_platform_limits(template: Template) -> None:
    """Valida um template contra os limites documentados pela Meta.

    Args:
        template: Template já construído

    Raises:
        PlatformLimitError: Se algum limite for violado
    """
    if len(template.name) > MAX_TEMPLATE_NAME_LENGTH:
        _reject(f"template name must not exceed {MAX_TEMPLATE_NAME_LENGTH} chars", "name", template)

    headers = [c for c in template.components if isinstance(c, HeaderComponent)]
    bodies = [c for c in template.components if isinstance(c, BodyComponent)]

    if len(headers) > 1:
        _reject("template must have at most one HeaderComponent", "components", template)
    if len(bodies) > 1:
        _reject("template must have at most one BodyComponent", "components", template)

    for header in headers:
        _validate_header(header, template)
    for body in bodies:
        _validate_text_parameters(body.parameters, MAX_BODY_TEXT_LENGTH, "body", template)


def _validate_header(header: HeaderComponent, template: Template) -> None:
    """Valida quantidade, textos e documentos do header."""
    if len(header.parameters) > MAX_HEADER_PARAMETERS:
        _reject(
            f"HeaderComponent accepts at most {MAX_HEADER_PARAMETERS} parameter",
            "header",
            template,
        )

    _validate_text_parameters(header.parameters, MAX_HEADER_TEXT_LENGTH, "header", template)

    for param in header.parameters:
        if isinstance(param.value, Document):
            _validate_document(param.value, template)


def _validate_text_parameters(
    parameters: tuple[Parameter, ...],
    max_length: int,
    section: str,
    template: Template,
) -> None:
    for i, param in enumerate(parameters):
        if isinstance(param.value, Text) and len(param.value.body) > max_length:
            _reject(f"{section} text parameter {i} exceeds {max_length} characters", section, template)


def _validate_document(document: Document, template: Template) -> None:
    """Apenas PDF é suportado em templates de documento."""
    if document.mime_type and document.mime_type not in SUPPORTED_TEMPLATE_DOCUMENT_TYPES:
        _reject(f"Unsupported template document MIME type: {document.mime_type}", "header", template)

    if document.filename and not document.filename.lower().endswith(
        SUPPORTED_TEMPLATE_DOCUMENT_EXTENSIONS
    ):
        _reject(f"Template document must be a PDF: {document.filename}", "header", template)
