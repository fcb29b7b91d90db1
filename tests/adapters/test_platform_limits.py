"""Testes para limites de plataforma (Meta) em templates."""

from __future__ import annotations

import logging

import pytest

from whatsapp_templates.adapters.whatsapp.validators import validate_platform_limits
from whatsapp_templates.domain.components import (
    BodyComponent,
    ButtonComponent,
    HeaderComponent,
    PayloadButton,
)
from whatsapp_templates.domain.errors import PlatformLimitError
from whatsapp_templates.domain.parameters import Document, Image, Text
from whatsapp_templates.domain.template import Template


def _template(*components) -> Template:
    return Template("promo", "pt_BR", list(components))


class TestTextLimits:
    """Limites de caracteres para Text."""

    def test_header_text_at_limit_passes(self) -> None:
        """60 caracteres no header é permitido."""
        validate_platform_limits(_template(HeaderComponent([Text("x" * 60)])))

    def test_header_text_over_limit_raises(self) -> None:
        """61 caracteres no header é rejeitado."""
        with pytest.raises(PlatformLimitError, match="exceeds 60"):
            validate_platform_limits(_template(HeaderComponent([Text("x" * 61)])))

    def test_body_text_at_limit_passes(self) -> None:
        """1024 caracteres no body é permitido."""
        validate_platform_limits(_template(BodyComponent([Text("x" * 1024)])))

    def test_body_text_over_limit_raises(self) -> None:
        """1025 caracteres no body é rejeitado."""
        with pytest.raises(PlatformLimitError, match="exceeds 1024"):
            validate_platform_limits(_template(BodyComponent([Text("x" * 1025)])))


class TestDocumentLimits:
    """Templates de documento aceitam apenas PDF."""

    def test_pdf_document_passes(self) -> None:
        """PDF com mime_type e filename corretos passa."""
        doc = Document(id="1", filename="Boleto.PDF", mime_type="application/pdf")
        validate_platform_limits(_template(HeaderComponent([doc])))

    def test_document_without_metadata_passes(self) -> None:
        """Sem mime_type/filename não há como verificar; passa."""
        validate_platform_limits(_template(HeaderComponent([Document(id="1")])))

    def test_non_pdf_mime_type_raises(self) -> None:
        """MIME type diferente de PDF é rejeitado."""
        doc = Document(id="1", mime_type="application/msword")
        with pytest.raises(PlatformLimitError, match="MIME type"):
            validate_platform_limits(_template(HeaderComponent([doc])))

    def test_non_pdf_filename_raises(self) -> None:
        """Extensão diferente de .pdf é rejeitada."""
        doc = Document(link="https://example.com/a.docx", filename="a.docx")
        with pytest.raises(PlatformLimitError, match="must be a PDF"):
            validate_platform_limits(_template(HeaderComponent([doc])))


class TestStructureLimits:
    """Limites estruturais documentados pela Meta."""

    def test_template_name_too_long_raises(self) -> None:
        """Nome acima de 512 caracteres é rejeitado."""
        with pytest.raises(PlatformLimitError) as exc_info:
            validate_platform_limits(Template("n" * 513, "pt_BR"))

        assert exc_info.value.field == "name"

    def test_header_with_two_parameters_raises(self) -> None:
        """Header aceita no máximo um parâmetro."""
        header = HeaderComponent([Text("a"), Image(id="1")])
        with pytest.raises(PlatformLimitError, match="at most 1 parameter"):
            validate_platform_limits(_template(header))

    def test_two_headers_raise(self) -> None:
        """Apenas um HeaderComponent por template."""
        with pytest.raises(PlatformLimitError, match="one HeaderComponent"):
            validate_platform_limits(_template(HeaderComponent(), HeaderComponent()))

    def test_two_bodies_raise(self) -> None:
        """Apenas um BodyComponent por template."""
        with pytest.raises(PlatformLimitError, match="one BodyComponent"):
            validate_platform_limits(_template(BodyComponent(), BodyComponent()))

    def test_three_buttons_pass(self) -> None:
        """Até 3 botões são aceitos."""
        buttons = [ButtonComponent(i, "quick_reply", [PayloadButton(str(i))]) for i in range(3)]
        validate_platform_limits(_template(*buttons))

    def test_violation_is_logged(self, caplog) -> None:
        """Violação gera log WARNING antes do erro."""
        with caplog.at_level(logging.WARNING), pytest.raises(PlatformLimitError):
            validate_platform_limits(_template(HeaderComponent([Text("x" * 61)])))

        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert record.template_name == "promo"  # type: ignore[attr-defined]
        assert record.field == "header"  # type: ignore[attr-defined]
