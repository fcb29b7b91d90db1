"""Template (agregado raiz) e Language."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Any, ClassVar

from whatsapp_templates.domain.components import (
    BodyComponent,
    ButtonComponent,
    Component,
    HeaderComponent,
    as_tuple,
)
from whatsapp_templates.domain.errors import (
    DuplicateButtonIndexError,
    InvalidFieldError,
    MissingFieldError,
)
from whatsapp_templates.domain.parameters import require_text

# Única política de idioma suportada pela Meta
LANGUAGE_POLICY = "deterministic"


@dataclass(frozen=True, slots=True)
class Language:
    """Idioma/locale de um template.

    Args:
        code: Código do idioma ou locale (ex: "en" ou "en_US")
        policy: Aceito por compatibilidade e ignorado; a saída é sempre
            "deterministic"
    """

    code: str
    policy: str = LANGUAGE_POLICY

    def __post_init__(self) -> None:
        require_text("Language", "code", self.code)
        object.__setattr__(self, "policy", LANGUAGE_POLICY)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "policy": self.policy}


@dataclass(frozen=True, slots=True)
class Template:
    """Template de mensagem para a API Meta.

    Args:
        name: Nome do template aprovado
        language: ``Language`` ou código do idioma (construído implicitamente)
        components: Header/Body/Button na ordem de envio. Para templates só
            de texto, o único componente suportado é BodyComponent.

    Raises:
        MissingFieldError: Se name ou language ausentes
        DuplicateButtonIndexError: Se dois botões compartilham o mesmo index
    """

    kind: ClassVar[str] = "template"

    name: str
    language: Language
    components: tuple[Component, ...] = ()

    def __post_init__(self) -> None:
        require_text("Template", "name", self.name)
        object.__setattr__(self, "language", self._coerce_language(self.language))

        components = as_tuple("Template", "components", self.components)
        for component in components:
            if not isinstance(component, (HeaderComponent, BodyComponent, ButtonComponent)):
                raise InvalidFieldError(
                    "Template",
                    "components",
                    component,
                    "must contain only HeaderComponent, BodyComponent or ButtonComponent",
                )

        # Unicidade apenas entre botões; header/body não têm index
        counts = Counter(c.index for c in components if isinstance(c, ButtonComponent))
        duplicated = sorted(index for index, total in counts.items() if total > 1)
        if duplicated:
            raise DuplicateButtonIndexError(duplicated)

        object.__setattr__(self, "components", components)

    @staticmethod
    def _coerce_language(language: Any) -> Language:
        if language is None or language == "":
            raise MissingFieldError("Template", "language")
        if isinstance(language, Language):
            return language
        if isinstance(language, str):
            return Language(language)
        raise InvalidFieldError("Template", "language", language, "must be a Language or a language code")

    @property
    def buttons(self) -> tuple[ButtonComponent, ...]:
        return tuple(c for c in self.components if isinstance(c, ButtonComponent))

    def to_dict(self) -> dict[str, Any]:
        """Serializa o template no formato do objeto ``template`` da Cloud API."""
        template_obj: dict[str, Any] = {
            "name": self.name,
            "language": self.language.to_dict(),
        }

        if self.components:
            template_obj["components"] = [c.to_dict() for c in self.components]

        return template_obj
