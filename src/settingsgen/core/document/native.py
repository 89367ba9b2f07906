# src/settingsgen/core/document/native.py
"""
Parser do dialeto nativo (`Settings`).

O dialeto nativo descreve a árvore diretamente por aninhamento:

    <Settings name="AppSettings" prefix="APP_EXPORT">
        <Include local="true">custom.h</Include>
        <Backend class="MyAccessor">
            <Param type="QString" asStr="true">app.ini</Param>
        </Backend>
        <TypeMapping key="range" type="int"/>
        <Node key="network">
            <Entry key="port" type="int" default="8080"/>
            <Entry key="proxy" type="url">
                <Code>QUrl{}</Code>
                <Entry key="enabled" type="bool" default="false"/>
            </Entry>
            <Import required="false" rootNode="extra">extra.xml</Import>
        </Node>
    </Settings>

Decisões arquiteturais:
    - Imports são resolvidos no ponto de declaração, via `importer`
      injetado pelo chamador, e enxertados como grupo anônimo
    - `<Code>` sobrepõe o atributo `default` com um fragmento opaco
    - TypeMapping duplicado: a última declaração vence
    - Chaves repetidas entre irmãos declarados à mão não são verificadas

Limites explícitos:
    - Não abre arquivos (exceto via `importer`)
    - Não interpreta nomes de tipo
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
from xml.etree.ElementTree import Element

from settingsgen.core.document.model import (
    BackendDecl,
    BackendParam,
    ImportDecl,
    IncludeDecl,
    SettingsDocument,
)
from settingsgen.core.document.reader import attr, bool_attr, local_name, required_attr, text_of
from settingsgen.core.exceptions import StructuralError, UnexpectedElementError
from settingsgen.core.tree.nodes import CodeFragment, ContentGroup, EntryNode, GroupNode

NATIVE_ROOT_TAG = "Settings"

# Resolve um import declarado em `source`; None quando nada deve ser enxertado.
Importer = Callable[[ImportDecl, Path], Optional[ContentGroup]]


def read_import_decl(element: Element) -> ImportDecl:
    path = text_of(element)
    if not path:
        raise StructuralError(
            message="Element <Import> requires a document path",
            details={"element": local_name(element)},
        )
    return ImportDecl(
        path=path,
        required=bool_attr(element, "required", True),
        root_node=attr(element, "rootNode"),
    )


def _read_backend(element: Element) -> BackendDecl:
    backend = BackendDecl(class_name=required_attr(element, "class"))
    for child in element:
        tag = local_name(child)
        if tag != "Param":
            raise UnexpectedElementError.for_element(tag, local_name(element))
        backend.params.append(
            BackendParam(
                type=required_attr(child, "type"),
                value=text_of(child),
                as_str=bool_attr(child, "asStr", False),
            )
        )
    return backend


def _read_entry(element: Element, source: Path, importer: Importer) -> EntryNode:
    entry = EntryNode(
        key=required_attr(element, "key"),
        type=required_attr(element, "type"),
        default=attr(element, "default"),
        tr=bool_attr(element, "tr", False),
        tr_context=attr(element, "trContext"),
    )
    for child in element:
        tag = local_name(child)
        if tag == "Code":
            entry.default = CodeFragment(code=text_of(child))
        else:
            _read_content_element(child, entry.content, local_name(element), source, importer)
    return entry


def _read_content_element(
    element: Element,
    target: ContentGroup,
    parent_tag: str,
    source: Path,
    importer: Importer,
) -> None:
    tag = local_name(element)
    if tag == "Node":
        node = target.append(GroupNode(key=required_attr(element, "key")))
        for child in element:
            _read_content_element(child, node.content, tag, source, importer)
    elif tag == "Entry":
        target.append(_read_entry(element, source, importer))
    elif tag == "Import":
        grafted = importer(read_import_decl(element), source)
        if grafted is not None:
            target.append(grafted)
    else:
        raise UnexpectedElementError.for_element(tag, parent_tag)


def parse_settings(root: Element, *, source: Path, importer: Importer) -> SettingsDocument:
    """
    Converte o elemento raiz `Settings` em um `SettingsDocument`.

    Args:
        root: Elemento raiz já parseado.
        source: Caminho do documento (base para imports relativos).
        importer: Resolve cada `<Import>` no ponto de declaração.

    Raises:
        UnexpectedElementError: Para elementos fora do dialeto.
        MissingAttributeError: Para atributos obrigatórios ausentes.
        InvalidAttributeError: Para flags booleanas inválidas.
    """
    if local_name(root) != NATIVE_ROOT_TAG:
        raise UnexpectedElementError.for_element(local_name(root), "document")

    document = SettingsDocument(name=attr(root, "name"), prefix=attr(root, "prefix"))
    for child in root:
        tag = local_name(child)
        if tag == "Include":
            document.includes.append(
                IncludeDecl(path=text_of(child), local=bool_attr(child, "local", False))
            )
        elif tag == "Backend":
            if document.backend is not None:
                raise UnexpectedElementError.for_element(tag, local_name(root))
            document.backend = _read_backend(child)
        elif tag == "TypeMapping":
            document.add_type_mapping(required_attr(child, "key"), required_attr(child, "type"))
        else:
            _read_content_element(child, document.content, local_name(root), source, importer)
    return document
