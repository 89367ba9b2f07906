"""
settingsgen: Canonical Exceptions (v1)

Este módulo define a hierarquia de exceções tipadas do motor de
construção da árvore de settings.

Objetivo:
- Distinguir erros estruturais (documento malformado) de erros de recurso
  (arquivo ausente ou ilegível)
- Carregar contexto estruturado (`details`) para mapeamento determinístico
  em `SettingsErrorPayload`
- Tratar falhas de consistência interna como faltas de programação

Regras:
- Erros estruturais e de recurso são fatais para a execução corrente
- Apenas imports opcionais rebaixam erros de recurso para warning
- Nenhum retry: o parsing é determinístico
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(eq=False)
class SettingsError(Exception):
    """Base class para erros de documento do settingsgen.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any] = field(default_factory=dict)
    hint: Optional[str] = None

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Erros estruturais
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class StructuralError(SettingsError):
    """Aninhamento ou conteúdo malformado no documento."""


@dataclass(eq=False)
class DuplicateEntryError(StructuralError):
    """Dois entries declarados com a mesma chave completa."""

    @classmethod
    def for_key(cls, key: str) -> "DuplicateEntryError":
        return cls(
            message=f"Found duplicated entry with key: {key}",
            details={"key": key},
            hint="Remove one of the declarations or rename its key.",
        )


@dataclass(eq=False)
class UnexpectedElementError(StructuralError):
    """Elemento filho não permitido na camada em que aparece."""

    @classmethod
    def for_element(cls, element: str, parent: str) -> "UnexpectedElementError":
        return cls(
            message=f"Unexpected child element <{element}> in <{parent}>",
            details={"element": element, "parent": parent},
        )


@dataclass(eq=False)
class MissingAttributeError(StructuralError):
    """Atributo obrigatório ausente em um elemento."""

    @classmethod
    def for_attribute(cls, element: str, attribute: str) -> "MissingAttributeError":
        return cls(
            message=f"Element <{element}> requires attribute '{attribute}'",
            details={"element": element, "attribute": attribute},
        )


@dataclass(eq=False)
class InvalidAttributeError(StructuralError):
    """Valor de atributo fora do domínio aceito."""

    @classmethod
    def for_value(cls, element: str, attribute: str, value: str) -> "InvalidAttributeError":
        return cls(
            message=f"Invalid value '{value}' for attribute '{attribute}' of <{element}>",
            details={"element": element, "attribute": attribute, "value": value},
        )


@dataclass(eq=False)
class InvalidKeyError(StructuralError):
    """Chave sem nenhum segmento utilizável (vazia ou só separadores)."""

    @classmethod
    def for_key(cls, key: str) -> "InvalidKeyError":
        return cls(
            message=f"Key '{key}' has no path segments",
            details={"key": key},
        )


@dataclass(eq=False)
class ImportCycleError(StructuralError):
    """Um documento importa a si mesmo, direta ou transitivamente."""

    @classmethod
    def for_chain(cls, chain: List[str]) -> "ImportCycleError":
        return cls(
            message="Import cycle detected: " + " -> ".join(chain),
            details={"chain": list(chain)},
            hint="Break the cycle or disable imports.cycle_guard to keep legacy behaviour.",
        )


# ---------------------------------------------------------------------------
# Erros de recurso
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class ResourceError(SettingsError):
    """Documento não pôde ser aberto ou lido."""


@dataclass(eq=False)
class DocumentNotFoundError(ResourceError):
    """Arquivo de documento inexistente ou inacessível."""

    @classmethod
    def for_path(cls, path: str, reason: Optional[str] = None) -> "DocumentNotFoundError":
        details: Dict[str, Any] = {"path": path}
        if reason:
            details["reason"] = reason
        return cls(message=f"Failed to open settings document: {path}", details=details)


@dataclass(eq=False)
class DocumentParseError(ResourceError):
    """Arquivo existe, mas não é um XML bem formado."""

    @classmethod
    def for_path(cls, path: str, reason: str) -> "DocumentParseError":
        return cls(
            message=f"Failed to parse settings document {path}: {reason}",
            details={"path": path, "reason": reason},
        )


@dataclass(eq=False)
class OutputWriteError(ResourceError):
    """Arquivo de saída não pôde ser gravado."""

    @classmethod
    def for_path(cls, path: str, reason: str) -> "OutputWriteError":
        return cls(
            message=f"Failed to write output file {path}: {reason}",
            details={"path": path, "reason": reason},
            hint="Check that the output directory is writable and is not a file.",
        )


# ---------------------------------------------------------------------------
# Consistência interna
# ---------------------------------------------------------------------------

class PromotionTargetNotFoundError(AssertionError):
    """O nó a promover não foi encontrado por identidade no pai.

    Indica bug no chamador, nunca erro de usuário.
    """
