"""Erros de validação levantados na construção de templates.

Todos os erros são síncronos e locais: a entidade não é criada e o erro
propaga para o chamador, que deve corrigir os argumentos.
"""

from __future__ import annotations

from typing import Any


class TemplateValidationError(Exception):
    """Erro base de validação estrutural de template."""

    def __init__(self, message: str, entity: str | None = None, field: str | None = None) -> None:
        super().__init__(message)
        self.entity = entity
        self.field = field


class MissingFieldError(TemplateValidationError):
    """Campo obrigatório ausente ou vazio."""

    def __init__(self, entity: str, field: str) -> None:
        super().__init__(f"{entity} must have a {field}", entity=entity, field=field)


class InvalidFieldError(TemplateValidationError):
    """Campo com valor fora do domínio aceito (enum, tipo ou faixa)."""

    def __init__(self, entity: str, field: str, value: Any, reason: str) -> None:
        super().__init__(f"{entity} {field} {reason} (got {value!r})", entity=entity, field=field)
        self.value = value


class ButtonParameterMismatchError(TemplateValidationError):
    """Parâmetro de botão incompatível com o sub_type do ButtonComponent."""

    def __init__(self, sub_type: str, parameter_kind: str) -> None:
        super().__init__(
            f"ButtonComponent of type '{sub_type}' cannot have a {parameter_kind}",
            entity="ButtonComponent",
            field="parameters",
        )
        self.sub_type = sub_type
        self.parameter_kind = parameter_kind


class DuplicateButtonIndexError(TemplateValidationError):
    """Dois ou mais ButtonComponents com o mesmo index no mesmo template."""

    def __init__(self, indexes: list[int]) -> None:
        super().__init__(
            f"ButtonComponents must have unique indexes (duplicated: {indexes})",
            entity="Template",
            field="components",
        )
        self.indexes = indexes


class PlatformLimitError(TemplateValidationError):
    """Template estruturalmente válido que viola limites documentados pela Meta."""


class MessageRequestError(TemplateValidationError):
    """Metadados inválidos na requisição de envio do template."""
