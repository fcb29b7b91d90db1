"""Modelo de composição e validação de templates Meta/WhatsApp.

Construção de baixo para cima: valores-folha, depois Parameter,
componentes, Language e por fim Template.
"""

from whatsapp_templates.domain.components import (
    BodyComponent,
    ButtonComponent,
    Component,
    HeaderComponent,
    Parameter,
    PayloadButton,
    UrlButton,
)
from whatsapp_templates.domain.enums import (
    ButtonParameterType,
    ButtonSubType,
    ComponentType,
    MessageCategory,
    ParameterType,
)
from whatsapp_templates.domain.errors import (
    ButtonParameterMismatchError,
    DuplicateButtonIndexError,
    InvalidFieldError,
    MessageRequestError,
    MissingFieldError,
    PlatformLimitError,
    TemplateValidationError,
)
from whatsapp_templates.domain.parameters import (
    Currency,
    DateTime,
    Document,
    Image,
    ParameterValue,
    Text,
    Video,
)
from whatsapp_templates.domain.template import Language, Template

__all__ = [
    "Template",
    "Language",
    "Component",
    "HeaderComponent",
    "BodyComponent",
    "ButtonComponent",
    "UrlButton",
    "PayloadButton",
    "Parameter",
    "ParameterValue",
    "Text",
    "Currency",
    "DateTime",
    "Image",
    "Document",
    "Video",
    "ParameterType",
    "ComponentType",
    "ButtonSubType",
    "ButtonParameterType",
    "MessageCategory",
    "TemplateValidationError",
    "MissingFieldError",
    "InvalidFieldError",
    "ButtonParameterMismatchError",
    "DuplicateButtonIndexError",
    "PlatformLimitError",
    "MessageRequestError",
]
