# src/settingsgen/core/document/imports.py
"""
Resolução de imports entre documentos de settings.

Este módulo carrega documentos de qualquer um dos dois dialetos e enxerta
uma subárvore selecionada do documento importado no ponto em que o import
foi declarado.

Fluxo de um import:
    1. Caminho relativo é resolvido contra o diretório do documento importador
    2. O documento é lido; o elemento raiz decide o dialeto:
        - `Settings`       → parser nativo
        - `SettingsConfig` → parser flat + tradução
    3. Com `rootNode`, a árvore é descida segmento a segmento via locator;
       segmento ausente faz o import contribuir nada (não é erro)
    4. Os filhos da subárvore selecionada são devolvidos como grupo anônimo

Política de falhas:
    - Erro de recurso em import obrigatório → propaga e aborta a execução
    - Erro de recurso em import opcional → warning + nenhum conteúdo
    - Erro estrutural → sempre fatal
    - Ciclo de imports → `ImportCycleError` (opção `imports.cycle_guard`)

Invariantes:
    - Imports são resolvidos de forma ansiosa e completa antes de o
      chamador continuar
    - Metadados do documento importado (includes, backend, type mappings)
      não são propagados; apenas conteúdo de nós
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from settingsgen.core.context import STEP_IMPORT, STEP_READ, BuildContext
from settingsgen.core.document.flat import FLAT_ROOT_TAG, parse_flat_config, translate_config
from settingsgen.core.document.model import ImportDecl, SettingsDocument
from settingsgen.core.document.native import NATIVE_ROOT_TAG, parse_settings
from settingsgen.core.document.reader import local_name, read_document
from settingsgen.core.exceptions import ImportCycleError, ResourceError, UnexpectedElementError
from settingsgen.core.tree.locator import locate
from settingsgen.core.tree.nodes import ContentGroup, content_of
from settingsgen.core.tree.paths import split_path


def resolve_import_path(import_path: str, source: Path) -> Path:
    """Resolve `import_path` contra o diretório de `source` quando relativo."""
    candidate = Path(import_path)
    if not candidate.is_absolute():
        candidate = source.parent / candidate
    return Path(os.path.normpath(os.path.abspath(candidate)))


def select_root(content: ContentGroup, root_node: Optional[str]) -> Optional[ContentGroup]:
    """
    Desce em `content` pelos segmentos de `root_node`.

    Returns:
        O ContentGroup selecionado, ou None se algum segmento não existir.
    """
    current = content
    for segment in split_path(root_node or ""):
        found = locate(current, segment)
        if not found.found:
            return None
        current = content_of(found.node)
    return current


def load_document(path: Path, ctx: BuildContext) -> SettingsDocument:
    """
    Lê e parseia um documento de qualquer dialeto, resolvendo seus imports.

    Raises:
        ImportCycleError: Se o documento já estiver em parsing nesta execução.
        DocumentNotFoundError / DocumentParseError: Falhas de recurso.
        StructuralError: Documento malformado.
    """
    path = Path(os.path.normpath(os.path.abspath(path)))
    key = str(path)
    if ctx.option("imports.cycle_guard", True) and ctx.is_open(key):
        raise ImportCycleError.for_chain(ctx.document_stack + [key])

    root = read_document(path)
    dialect = local_name(root)
    ctx.log(step_id=STEP_READ, level="INFO", message="document loaded", path=key, dialect=dialect)

    with ctx.open_document(key):
        if dialect == NATIVE_ROOT_TAG:
            return parse_settings(
                root,
                source=path,
                importer=lambda decl, source: resolve_import(decl, source, ctx),
            )
        if dialect == FLAT_ROOT_TAG:
            document = SettingsDocument()
            translate_config(parse_flat_config(root), document.content, ctx)
            return document
        raise UnexpectedElementError.for_element(dialect, "document")


def resolve_import(decl: ImportDecl, source: Path, ctx: BuildContext) -> Optional[ContentGroup]:
    """
    Resolve um import declarado no documento `source`.

    Returns:
        Grupo anônimo com o conteúdo a enxertar, ou None quando o import
        não contribui nada (root node ausente ou import opcional falho).
    """
    path = resolve_import_path(decl.path, source)
    try:
        document = load_document(path, ctx)
    except ResourceError as e:
        if decl.required:
            raise
        ctx.warn(step_id=STEP_IMPORT, message=str(e), path=str(path), required=False)
        return None

    selected = select_root(document.content, decl.root_node)
    if selected is None:
        ctx.log(
            step_id=STEP_IMPORT,
            level="INFO",
            message="import root node not found",
            path=str(path),
            root_node=decl.root_node,
        )
        return None

    grafted = ContentGroup(children=list(selected.children))
    ctx.log(
        step_id=STEP_IMPORT,
        level="INFO",
        message="import spliced",
        path=str(path),
        root_node=decl.root_node,
        nodes=len(grafted),
    )
    return grafted
