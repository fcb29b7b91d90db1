"""Validadores de conformidade para envio de templates WhatsApp/Meta.

Uso:
    from whatsapp_templates.adapters.whatsapp.validators import (
        validate_platform_limits,
    )

    validate_platform_limits(template)
"""

from whatsapp_templates.adapters.whatsapp.validators.limits import (
    MAX_BODY_TEXT_LENGTH,
    MAX_HEADER_TEXT_LENGTH,
    MAX_TEMPLATE_NAME_LENGTH,
)
from whatsapp_templates.adapters.whatsapp.validators.request import (
    validate_template_request,
)
from whatsapp_templates.adapters.whatsapp.validators.template import (
    validate_platform_limits,
)

__all__ = [
    "validate_platform_limits",
    "validate_template_request",
    "MAX_TEMPLATE_NAME_LENGTH",
    "MAX_HEADER_TEXT_LENGTH",
    "MAX_BODY_TEXT_LENGTH",
]
