"""Composição e validação de payloads de template para a API Meta/WhatsApp.

Uso típico:
    from whatsapp_templates import (
        BodyComponent,
        ButtonComponent,
        Currency,
        PayloadButton,
        Template,
        Text,
    )

    template = Template(
        name="order_update",
        language="pt_BR",
        components=[
            BodyComponent([Text("Maria"), Currency(15990, "BRL", "R$ 15,99")]),
            ButtonComponent(0, "quick_reply", [PayloadButton("track")]),
        ],
    )
    template.to_dict()
"""

from whatsapp_templates.adapters.whatsapp.models import OutboundTemplateRequest
from whatsapp_templates.adapters.whatsapp.payload_builder import build_template_message
from whatsapp_templates.adapters.whatsapp.validators import validate_platform_limits
from whatsapp_templates.config import Settings, get_settings
from whatsapp_templates.domain import (
    BodyComponent,
    ButtonComponent,
    ButtonParameterMismatchError,
    ButtonSubType,
    Currency,
    DateTime,
    Document,
    DuplicateButtonIndexError,
    HeaderComponent,
    Image,
    InvalidFieldError,
    Language,
    MessageRequestError,
    MissingFieldError,
    Parameter,
    ParameterType,
    PayloadButton,
    PlatformLimitError,
    Template,
    TemplateValidationError,
    Text,
    UrlButton,
    Video,
)
from whatsapp_templates.observability.logging import configure_logging_from_settings

__all__ = [
    "Template",
    "Language",
    "HeaderComponent",
    "BodyComponent",
    "ButtonComponent",
    "UrlButton",
    "PayloadButton",
    "Parameter",
    "Text",
    "Currency",
    "DateTime",
    "Image",
    "Document",
    "Video",
    "ParameterType",
    "ButtonSubType",
    "TemplateValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "ButtonParameterMismatchError",
    "DuplicateButtonIndexError",
    "PlatformLimitError",
    "MessageRequestError",
    "OutboundTemplateRequest",
    "build_template_message",
    "validate_platform_limits",
    "Settings",
    "get_settings",
    "configure_logging_from_settings",
]
