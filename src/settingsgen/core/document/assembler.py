# src/settingsgen/core/document/assembler.py
"""
Montagem do documento de settings de uma execução.

O assembler é o driver de nível superior: lê o documento principal (de
qualquer dialeto), dispara imports e tradução flat através do loader de
documentos, aplica defaults de metadados e entrega o documento resolvido.

Política de defaults:
    - `name` ausente → `default_name` explícito, senão a opção
      `document.default_name`, senão o nome base do arquivo de entrada

Decisões arquiteturais:
    - Todo erro fatal propaga ao chamador; nenhum documento parcial é
      devolvido
    - Cada execução possui seu próprio `BuildContext`
    - O hash do documento é calculado sobre o resultado final

Limites explícitos:
    - Não gera código
    - Não persiste o documento (ver `settingsgen.export`)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from settingsgen.core.config.hashing import compute_options_hash
from settingsgen.core.config.loader import load_options
from settingsgen.core.context import STEP_ASSEMBLE, BuildContext
from settingsgen.core.document.hashing import compute_document_hash
from settingsgen.core.document.imports import load_document
from settingsgen.core.document.model import SettingsDocument
from settingsgen.core.tree.nodes import entry_paths


def _base_name(path: Path) -> str:
    return path.name.split(".", 1)[0]


def assemble(
    path: Union[str, Path],
    *,
    ctx: Optional[BuildContext] = None,
    default_name: Optional[str] = None,
) -> SettingsDocument:
    """
    Lê o documento principal e devolve o documento resolvido.

    Args:
        path: Caminho do documento principal.
        ctx: Contexto da execução; criado com opções default quando ausente.
        default_name: Nome a usar quando o documento não declarar `name`.

    Raises:
        SettingsError: Qualquer erro estrutural ou de recurso fatal.
    """
    if ctx is None:
        ctx = BuildContext(options=load_options())

    source = Path(path)
    document = load_document(source, ctx)

    if not document.name:
        document.name = default_name or ctx.option("document.default_name") or _base_name(source)

    ctx.log(
        step_id=STEP_ASSEMBLE,
        level="INFO",
        message="document assembled",
        name=document.name,
        entries=len(entry_paths(document.content)),
    )
    return document


@dataclass(frozen=True)
class BuildResult:
    """Resultado de uma execução completa: documento, contexto e hashes."""

    document: SettingsDocument
    context: BuildContext
    document_hash: str
    options_hash: str


def build(
    path: Union[str, Path],
    *,
    options: Optional[Dict[str, Any]] = None,
    default_name: Optional[str] = None,
) -> BuildResult:
    """Executa uma construção completa com um contexto novo."""
    effective = options if options is not None else load_options()
    ctx = BuildContext(options=effective)
    document = assemble(path, ctx=ctx, default_name=default_name)
    return BuildResult(
        document=document,
        context=ctx,
        document_hash=compute_document_hash(document),
        options_hash=compute_options_hash(effective),
    )
