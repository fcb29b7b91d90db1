"""Limites documentados pela Meta para mensagens de template."""

MAX_TEMPLATE_NAME_LENGTH = 512
MAX_HEADER_TEXT_LENGTH = 60
MAX_BODY_TEXT_LENGTH = 1024
MAX_HEADER_PARAMETERS = 1
MAX_IDEMPOTENCY_KEY_LENGTH = 255

# Templates de documento aceitam apenas PDF
SUPPORTED_TEMPLATE_DOCUMENT_TYPES = frozenset({"application/pdf"})
SUPPORTED_TEMPLATE_DOCUMENT_EXTENSIONS = (".pdf",)
