"""Componentes de template: header, body e botões.

Responsabilidade:
- Normalizar valores-folha em ``Parameter`` ({type, <payload>})
- Validar consistência entre sub_type do botão e seus parâmetros
- Serializar cada componente no formato esperado pela API Meta

Todos os objetos são imutáveis; listas recebidas viram tuplas.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar

from whatsapp_templates.domain.enums import (
    ButtonParameterType,
    ButtonSubType,
    ComponentType,
    ParameterType,
)
from whatsapp_templates.domain.errors import (
    ButtonParameterMismatchError,
    InvalidFieldError,
    MissingFieldError,
)
from whatsapp_templates.domain.parameters import (
    PARAMETER_VALUE_TYPES,
    ParameterValue,
    Text,
    require_text,
)

# Índices de botão aceitos pela Meta (até 3 botões por template)
MIN_BUTTON_INDEX = 0
MAX_BUTTON_INDEX = 2

# Nome do campo de saída por tipo de parâmetro
_PAYLOAD_FIELDS: dict[ParameterType, str] = {
    ParameterType.TEXT: "text",
    ParameterType.CURRENCY: "currency",
    ParameterType.DATE_TIME: "date_time",
    ParameterType.IMAGE: "image",
    ParameterType.DOCUMENT: "document",
    ParameterType.VIDEO: "video",
}


def as_tuple(entity: str, field: str, values: Any) -> tuple[Any, ...]:
    """Converte um iterável de argumentos em tupla (snapshot imutável)."""
    if values is None:
        return ()
    if isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
        raise InvalidFieldError(entity, field, values, "must be a sequence")
    return tuple(values)


@dataclass(frozen=True, slots=True)
class Parameter:
    """Parâmetro de HeaderComponent ou BodyComponent.

    Para Text, o limite da Meta é 60 caracteres no header e 1024 no body.
    Para Document, apenas PDF é suportado em templates de documento.
    Esses limites são verificados em ``validate_platform_limits``.
    """

    value: ParameterValue

    def __post_init__(self) -> None:
        if self.value is None:
            raise MissingFieldError("Parameter", "parameter")
        if not isinstance(self.value, PARAMETER_VALUE_TYPES):
            raise InvalidFieldError(
                "Parameter", "parameter", self.value, "must be a Text, Currency, DateTime or media value"
            )

    @property
    def type(self) -> ParameterType:  # noqa: A003
        return self.value.kind

    def to_dict(self) -> dict[str, Any]:
        kind = self.value.kind
        field = _PAYLOAD_FIELDS[kind]

        # Text vai direto no campo "text" (conteúdo, não objeto aninhado)
        if isinstance(self.value, Text):
            return {"type": kind.value, field: self.value.body}

        return {"type": kind.value, field: self.value.to_dict()}


def _serialize_parameters(component_type: ComponentType, parameters: tuple[Any, ...]) -> dict[str, Any]:
    component: dict[str, Any] = {"type": component_type.value}
    if parameters:
        component["parameters"] = [p.to_dict() for p in parameters]
    return component


@dataclass(frozen=True, slots=True)
class HeaderComponent:
    """Header de template.

    Aceita valores-folha ou ``Parameter`` já construídos; estes passam sem
    novo encapsulamento.
    """

    type: ClassVar[ComponentType] = ComponentType.HEADER  # noqa: A003

    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self) -> None:
        values = as_tuple("HeaderComponent", "parameters", self.parameters)
        wrapped = tuple(v if isinstance(v, Parameter) else Parameter(v) for v in values)
        object.__setattr__(self, "parameters", wrapped)

    def to_dict(self) -> dict[str, Any]:
        return _serialize_parameters(self.type, self.parameters)


@dataclass(frozen=True, slots=True)
class BodyComponent:
    """Body de template.

    Todo argumento vira um novo ``Parameter``. Um ``Parameter`` recebido é
    reconstruído a partir do seu valor, então cada folha é encapsulada uma
    única vez.
    """

    type: ClassVar[ComponentType] = ComponentType.BODY  # noqa: A003

    parameters: tuple[Parameter, ...] = ()

    def __post_init__(self) -> None:
        values = as_tuple("BodyComponent", "parameters", self.parameters)
        wrapped = tuple(Parameter(v.value if isinstance(v, Parameter) else v) for v in values)
        object.__setattr__(self, "parameters", wrapped)

    def to_dict(self) -> dict[str, Any]:
        return _serialize_parameters(self.type, self.parameters)


@dataclass(frozen=True, slots=True)
class UrlButton:
    """Sufixo de URL anexado pela Meta ao prefixo definido no template."""

    kind: ClassVar[ButtonParameterType] = ButtonParameterType.URL

    url: str

    def __post_init__(self) -> None:
        require_text("UrlButton", "url", self.url)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "url": self.url}


@dataclass(frozen=True, slots=True)
class PayloadButton:
    """Payload devolvido no webhook quando o botão é clicado."""

    kind: ClassVar[ButtonParameterType] = ButtonParameterType.PAYLOAD

    payload: str

    def __post_init__(self) -> None:
        require_text("PayloadButton", "payload", self.payload)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.kind.value, "payload": self.payload}


# sub_type -> tipo de parâmetro proibido
_FORBIDDEN_BUTTON_PARAMETERS: dict[ButtonSubType, type] = {
    ButtonSubType.QUICK_REPLY: UrlButton,
    ButtonSubType.URL: PayloadButton,
}


@dataclass(frozen=True, slots=True)
class ButtonComponent:
    """Botão de template vinculado a uma posição (index 0 a 2).

    Args:
        index: Posição do botão; serializado como string
        sub_type: 'url' ou 'quick_reply'
        parameters: UrlButton/PayloadButton (ao menos um)
    """

    type: ClassVar[ComponentType] = ComponentType.BUTTON  # noqa: A003

    index: int
    sub_type: ButtonSubType
    parameters: tuple[UrlButton | PayloadButton, ...]

    def __post_init__(self) -> None:
        self._validate_index()

        try:
            sub_type = ButtonSubType(self.sub_type)
        except ValueError:
            raise InvalidFieldError(
                "ButtonComponent", "sub_type", self.sub_type, "must be either 'quick_reply' or 'url'"
            ) from None
        object.__setattr__(self, "sub_type", sub_type)

        parameters = as_tuple("ButtonComponent", "parameters", self.parameters)
        if not parameters:
            raise MissingFieldError("ButtonComponent", "parameter")
        object.__setattr__(self, "parameters", parameters)

        forbidden = _FORBIDDEN_BUTTON_PARAMETERS[sub_type]
        for param in parameters:
            if not isinstance(param, (UrlButton, PayloadButton)):
                raise InvalidFieldError(
                    "ButtonComponent", "parameters", param, "must contain only UrlButton or PayloadButton"
                )
            if isinstance(param, forbidden):
                raise ButtonParameterMismatchError(sub_type.value, forbidden.__name__)

    def _validate_index(self) -> None:
        if self.index is None:
            raise MissingFieldError("ButtonComponent", "index")
        if isinstance(self.index, bool) or not isinstance(self.index, int):
            raise InvalidFieldError("ButtonComponent", "index", self.index, "must be an integer")
        if not MIN_BUTTON_INDEX <= self.index <= MAX_BUTTON_INDEX:
            raise InvalidFieldError(
                "ButtonComponent",
                "index",
                self.index,
                f"must be between {MIN_BUTTON_INDEX} and {MAX_BUTTON_INDEX}",
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "sub_type": self.sub_type.value,
            "index": str(self.index),
            "parameters": [p.to_dict() for p in self.parameters],
        }


Component = HeaderComponent | BodyComponent | ButtonComponent
