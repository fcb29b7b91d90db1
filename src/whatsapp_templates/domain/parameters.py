"""Valores-folha usados em parâmetros de HeaderComponent/BodyComponent.

Responsabilidade:
- Validar campos obrigatórios de cada tipo na construção
- Expor o discriminador do tipo (``kind``) como atributo de classe
- Serializar apenas os dados do valor, sem o discriminador

O discriminador nunca é copiado para o payload: quem decide o nome do
campo de saída é o ``Parameter`` (ver components.py).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from whatsapp_templates.domain.enums import ParameterType
from whatsapp_templates.domain.errors import InvalidFieldError, MissingFieldError


def require_text(entity: str, field: str, value: Any) -> str:
    """Valida campo textual obrigatório (ausente ou vazio é erro)."""
    if value is None or value == "":
        raise MissingFieldError(entity, field)
    if not isinstance(value, str):
        raise InvalidFieldError(entity, field, value, "must be a string")
    return value


def _optional_text(entity: str, field: str, value: Any) -> None:
    if value is not None and not isinstance(value, str):
        raise InvalidFieldError(entity, field, value, "must be a string")


@dataclass(frozen=True, slots=True)
class Text:
    """Texto simples para um parâmetro de template."""

    kind: ClassVar[ParameterType] = ParameterType.TEXT

    body: str

    def __post_init__(self) -> None:
        require_text("Text", "body", self.body)

    def to_dict(self) -> dict[str, Any]:
        return {"body": self.body}


@dataclass(frozen=True, slots=True)
class Currency:
    """Valor monetário para um parâmetro de template.

    Args:
        amount_1000: Valor multiplicado por 1000 (zero é válido)
        code: Código da moeda conforme ISO 4217
        fallback_value: Texto exibido se a localização falhar
    """

    kind: ClassVar[ParameterType] = ParameterType.CURRENCY

    amount_1000: int | float
    code: str
    fallback_value: str

    def __post_init__(self) -> None:
        # Presença, não truthiness: amount_1000 = 0 é um valor legítimo
        if self.amount_1000 is None:
            raise MissingFieldError("Currency", "amount_1000")
        if isinstance(self.amount_1000, bool) or not isinstance(self.amount_1000, (int, float)):
            raise InvalidFieldError("Currency", "amount_1000", self.amount_1000, "must be a number")
        require_text("Currency", "code", self.code)
        require_text("Currency", "fallback_value", self.fallback_value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "amount_1000": self.amount_1000,
            "code": self.code,
            "fallback_value": self.fallback_value,
        }


@dataclass(frozen=True, slots=True)
class DateTime:
    """Data/hora para um parâmetro de template.

    Na Cloud API o fallback_value é sempre usado; não há tentativa de
    localização a partir de outros campos.
    """

    kind: ClassVar[ParameterType] = ParameterType.DATE_TIME

    fallback_value: str

    def __post_init__(self) -> None:
        require_text("DateTime", "fallback_value", self.fallback_value)

    def to_dict(self) -> dict[str, Any]:
        return {"fallback_value": self.fallback_value}


@dataclass(frozen=True, slots=True)
class _Media:
    """Base para mídia referenciada por ID hospedado na Meta ou link público."""

    kind: ClassVar[ParameterType]

    id: str | None = None  # Media ID previamente hospedado
    link: str | None = None  # URL pública
    caption: str | None = None

    def __post_init__(self) -> None:
        entity = type(self).__name__
        _optional_text(entity, "id", self.id)
        _optional_text(entity, "link", self.link)
        _optional_text(entity, "caption", self.caption)
        if not self.id and not self.link:
            raise MissingFieldError(entity, "id or link")
        if self.id and self.link:
            raise InvalidFieldError(entity, "link", self.link, "cannot be combined with id")

    def to_dict(self) -> dict[str, Any]:
        media_obj: dict[str, Any] = {}

        if self.id:
            media_obj["id"] = self.id
        else:
            media_obj["link"] = self.link

        if self.caption:
            media_obj["caption"] = self.caption

        return media_obj


@dataclass(frozen=True, slots=True)
class Image(_Media):
    """Imagem (JPG, PNG) para header de template."""

    kind: ClassVar[ParameterType] = ParameterType.IMAGE


@dataclass(frozen=True, slots=True)
class Video(_Media):
    """Vídeo (MP4, 3GPP) para header de template."""

    kind: ClassVar[ParameterType] = ParameterType.VIDEO


@dataclass(frozen=True, slots=True)
class Document(_Media):
    """Documento para header de template.

    Templates baseados em documento só aceitam PDF na Meta. ``mime_type``
    não é enviado; serve apenas para validação de limites.
    """

    kind: ClassVar[ParameterType] = ParameterType.DOCUMENT

    filename: str | None = None
    mime_type: str | None = None

    def __post_init__(self) -> None:
        _Media.__post_init__(self)
        _optional_text("Document", "filename", self.filename)
        _optional_text("Document", "mime_type", self.mime_type)

    def to_dict(self) -> dict[str, Any]:
        doc_obj = _Media.to_dict(self)
        if self.filename:
            doc_obj["filename"] = self.filename
        return doc_obj


ParameterValue = Text | Currency | DateTime | Image | Document | Video

PARAMETER_VALUE_TYPES: tuple[type, ...] = (Text, Currency, DateTime, Image, Document, Video)
