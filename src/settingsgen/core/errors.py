"""
settingsgen: Canonical Error Structures (v1)

Este módulo define o padrão canônico de payloads de erro do settingsgen,
usados nas superfícies externas (CLI, exportação) para reportar falhas
fatais de forma:

- explícita
- serializável
- acionável

Exceções são levantadas onde o problema é detectado (ver
`settingsgen.core.exceptions`); o mapeamento para payload acontece apenas
na borda.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from settingsgen.core.config.errors import OptionsError
from settingsgen.core.exceptions import (
    DocumentNotFoundError,
    DocumentParseError,
    DuplicateEntryError,
    ImportCycleError,
    InvalidAttributeError,
    InvalidKeyError,
    MissingAttributeError,
    OutputWriteError,
    ResourceError,
    SettingsError,
    UnexpectedElementError,
)


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SettingsErrorPayload:
    """
    Payload canônico de erro do settingsgen.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao autor do documento
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Estrutura do documento
STRUCTURE_DUPLICATE_ENTRY = "STRUCTURE_DUPLICATE_ENTRY"
STRUCTURE_UNEXPECTED_ELEMENT = "STRUCTURE_UNEXPECTED_ELEMENT"
STRUCTURE_MISSING_ATTRIBUTE = "STRUCTURE_MISSING_ATTRIBUTE"
STRUCTURE_INVALID_ATTRIBUTE = "STRUCTURE_INVALID_ATTRIBUTE"
STRUCTURE_INVALID_KEY = "STRUCTURE_INVALID_KEY"
STRUCTURE_IMPORT_CYCLE = "STRUCTURE_IMPORT_CYCLE"
STRUCTURE_ERROR = "STRUCTURE_ERROR"

# Recursos
RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
RESOURCE_PARSE_ERROR = "RESOURCE_PARSE_ERROR"
RESOURCE_WRITE_ERROR = "RESOURCE_WRITE_ERROR"
RESOURCE_ERROR = "RESOURCE_ERROR"

# Opções do gerador
OPTIONS_ERROR = "OPTIONS_ERROR"

# Ordem importa: subclasses antes das bases.
_TYPE_BY_EXCEPTION = (
    (DuplicateEntryError, STRUCTURE_DUPLICATE_ENTRY),
    (UnexpectedElementError, STRUCTURE_UNEXPECTED_ELEMENT),
    (MissingAttributeError, STRUCTURE_MISSING_ATTRIBUTE),
    (InvalidAttributeError, STRUCTURE_INVALID_ATTRIBUTE),
    (InvalidKeyError, STRUCTURE_INVALID_KEY),
    (ImportCycleError, STRUCTURE_IMPORT_CYCLE),
    (DocumentNotFoundError, RESOURCE_NOT_FOUND),
    (DocumentParseError, RESOURCE_PARSE_ERROR),
    (OutputWriteError, RESOURCE_WRITE_ERROR),
    (ResourceError, RESOURCE_ERROR),
)


def payload_from_exception(exc: Exception) -> SettingsErrorPayload:
    """
    Mapeia uma exceção de documento ou de opções para o payload canônico.

    Raises:
        TypeError: Para exceções fora das hierarquias conhecidas.
    """
    if isinstance(exc, SettingsError):
        error_type = STRUCTURE_ERROR
        for exc_cls, candidate in _TYPE_BY_EXCEPTION:
            if isinstance(exc, exc_cls):
                error_type = candidate
                break
        return SettingsErrorPayload(
            type=error_type,
            message=exc.message,
            details=dict(exc.details),
            hint=exc.hint,
        )

    if isinstance(exc, OptionsError):
        return SettingsErrorPayload(
            type=OPTIONS_ERROR,
            message=str(exc),
            details={"exception_class": exc.__class__.__name__},
            hint="Fix the options file or remove the --options flag.",
        )

    raise TypeError(f"no error payload mapping for {type(exc).__name__}")
