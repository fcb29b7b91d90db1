"""Testes para Template e Language."""

from __future__ import annotations

import pytest

from whatsapp_templates.domain.components import (
    BodyComponent,
    ButtonComponent,
    HeaderComponent,
    PayloadButton,
    UrlButton,
)
from whatsapp_templates.domain.errors import (
    DuplicateButtonIndexError,
    InvalidFieldError,
    MissingFieldError,
)
from whatsapp_templates.domain.parameters import Currency, DateTime, Image, Text
from whatsapp_templates.domain.template import Language, Template


class TestLanguage:
    """Testes para Language."""

    def test_policy_is_always_deterministic(self) -> None:
        """policy informado é ignorado."""
        language = Language("en_US", "anything")
        assert language.to_dict() == {"code": "en_US", "policy": "deterministic"}

    def test_default_policy(self) -> None:
        """Sem policy, também é deterministic."""
        assert Language("pt_BR").policy == "deterministic"

    def test_missing_code_raises(self) -> None:
        """code ausente lança erro."""
        with pytest.raises(MissingFieldError, match="Language must have a code"):
            Language("")


class TestTemplateConstruction:
    """Testes para construção e validação de Template."""

    def test_template_without_components(self) -> None:
        """Sem componentes, o campo é omitido."""
        template = Template("hello_world", "en_US")
        assert template.components == ()
        assert template.to_dict() == {
            "name": "hello_world",
            "language": {"code": "en_US", "policy": "deterministic"},
        }

    def test_language_string_is_converted(self) -> None:
        """Código de idioma vira Language implicitamente."""
        template = Template("hello_world", "pt_BR")
        assert isinstance(template.language, Language)
        assert template.language.code == "pt_BR"

    def test_language_instance_is_kept(self) -> None:
        """Language pré-construído é mantido."""
        language = Language("es")
        assert Template("hello_world", language).language is language

    def test_missing_name_raises(self) -> None:
        """name ausente lança erro."""
        with pytest.raises(MissingFieldError, match="Template must have a name"):
            Template("", "en_US")

    def test_missing_language_raises(self) -> None:
        """language ausente lança erro."""
        with pytest.raises(MissingFieldError, match="Template must have a language"):
            Template("hello_world", None)  # type: ignore[arg-type]

    def test_invalid_language_type_raises(self) -> None:
        """language de tipo inesperado é rejeitado."""
        with pytest.raises(InvalidFieldError):
            Template("hello_world", 42)  # type: ignore[arg-type]

    def test_invalid_component_raises(self) -> None:
        """Componentes devem ser Header/Body/Button."""
        with pytest.raises(InvalidFieldError):
            Template("hello_world", "en_US", [Text("solto")])  # type: ignore[list-item]

    def test_duplicate_button_indexes_raise(self) -> None:
        """Dois botões com o mesmo index invalidam o template."""
        with pytest.raises(DuplicateButtonIndexError) as exc_info:
            Template(
                "order_update",
                "pt_BR",
                [
                    ButtonComponent(1, "quick_reply", [PayloadButton("a")]),
                    ButtonComponent(1, "url", [UrlButton("b")]),
                ],
            )

        assert exc_info.value.indexes == [1]

    def test_distinct_button_indexes_are_valid(self) -> None:
        """Índices distintos em 0..2 são aceitos."""
        template = Template(
            "order_update",
            "pt_BR",
            [
                ButtonComponent(0, "quick_reply", [PayloadButton("a")]),
                ButtonComponent(1, "quick_reply", [PayloadButton("b")]),
                ButtonComponent(2, "url", [UrlButton("c")]),
            ],
        )
        assert [b.index for b in template.buttons] == [0, 1, 2]

    def test_fourth_button_cannot_be_built(self) -> None:
        """Um quarto botão exige index repetido ou fora de 0..2."""
        buttons = [ButtonComponent(i, "quick_reply", [PayloadButton(str(i))]) for i in range(3)]

        with pytest.raises(DuplicateButtonIndexError):
            Template("order_update", "pt_BR", [*buttons, ButtonComponent(0, "url", [UrlButton("d")])])
        with pytest.raises(InvalidFieldError):
            ButtonComponent(3, "quick_reply", [PayloadButton("d")])

    def test_uniqueness_ignores_non_button_components(self) -> None:
        """Header e body não participam da checagem de index."""
        template = Template(
            "order_update",
            "pt_BR",
            [HeaderComponent(), BodyComponent(), ButtonComponent(0, "url", [UrlButton("x")])],
        )
        assert len(template.components) == 3


class TestTemplateSerialization:
    """Testes para o formato de saída do Template."""

    def test_full_template_shape(self) -> None:
        """Componentes saem na ordem de entrada, com tags de tipo."""
        template = Template(
            "purchase_receipt",
            Language("en_US"),
            [
                HeaderComponent([Image(link="https://example.com/logo.png")]),
                BodyComponent(
                    [
                        Text("Maria"),
                        Currency(0, "USD", "$0.00"),
                        DateTime("February 25, 1977"),
                    ]
                ),
                ButtonComponent(0, "url", [UrlButton("receipt/123")]),
            ],
        )

        assert template.to_dict() == {
            "name": "purchase_receipt",
            "language": {"code": "en_US", "policy": "deterministic"},
            "components": [
                {
                    "type": "header",
                    "parameters": [
                        {"type": "image", "image": {"link": "https://example.com/logo.png"}}
                    ],
                },
                {
                    "type": "body",
                    "parameters": [
                        {"type": "text", "text": "Maria"},
                        {
                            "type": "currency",
                            "currency": {
                                "amount_1000": 0,
                                "code": "USD",
                                "fallback_value": "$0.00",
                            },
                        },
                        {
                            "type": "date_time",
                            "date_time": {"fallback_value": "February 25, 1977"},
                        },
                    ],
                },
                {
                    "type": "button",
                    "sub_type": "url",
                    "index": "0",
                    "parameters": [{"type": "url", "url": "receipt/123"}],
                },
            ],
        }

    def test_template_tag_not_in_template_object(self) -> None:
        """A tag 'template' não aparece dentro do objeto template."""
        payload = Template("hello_world", "en_US").to_dict()
        assert "_" not in payload
        assert "type" not in payload
        assert Template.kind == "template"
