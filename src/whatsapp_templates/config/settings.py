"""Configurações da biblioteca via variáveis de ambiente.

Nenhuma entidade do domínio lê estas configurações: apenas o builder de
envelope e ``configure_logging_from_settings`` as consultam.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_VALID_LOG_FORMATS = frozenset({"json", "text"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente (prefixo TEMPLATES_)."""

    model_config = SettingsConfigDict(
        env_prefix="TEMPLATES_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "whatsapp_templates"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # Validação de limites da Meta no envelope (60/1024 chars, 1 header, PDF)
    enforce_platform_limits: bool = True

    def validate_logging_config(self) -> list[str]:
        """Valida nível e formato de log.

        Retorna lista de erros (vazia = tudo OK).
        """
        errors: list[str] = []
        if self.log_level.upper() not in _VALID_LOG_LEVELS:
            errors.append(
                f"TEMPLATES_LOG_LEVEL '{self.log_level}' inválido. "
                f"Valores válidos: {sorted(_VALID_LOG_LEVELS)}"
            )
        if self.log_format.lower() not in _VALID_LOG_FORMATS:
            errors.append("TEMPLATES_LOG_FORMAT inválido: use json | text")
        return errors


@lru_cache
def get_settings() -> Settings:
    """Retorna instância única de Settings (cacheada)."""
    return Settings()
