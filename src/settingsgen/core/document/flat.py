# src/settingsgen/core/document/flat.py
"""
Dialeto flat (SettingsConfig) e sua tradução para a árvore de nós.

O dialeto flat organiza entries em até quatro camadas de apresentação:

    SettingsConfig → Category → Section → Group → Entry

As camadas superiores não carregam dados próprios: existem apenas para
hospedar sequências ordenadas da camada seguinte. A hierarquia real de
settings é dada pela chave de cada entry (ex.: "network/proxy/port").

Política de camadas:
    - SettingsConfig aceita Category, Section, Group e Entry
    - Category aceita Section e Entry
    - Section aceita Group e Entry
    - Group aceita apenas Entry
    - Qualquer outro filho é erro estrutural

Algoritmo de inserção (por entry, em ordem de documento):
    1. Divide a chave em segmentos intermediários + segmento final
    2. Percorre os segmentos a partir da raiz, criando GroupNodes ausentes
    3. No segmento final:
        - ausente → novo EntryNode
        - EntryNode existente → DuplicateEntryError (sem sobrescrita)
        - GroupNode existente → promoção in-place, preservando filhos
    4. Preenche tipo, default e flag de tradução

Invariantes:
    - Nenhuma chave aparece duas vezes entre irmãos
    - A ordem dos irmãos reflete a ordem de declaração
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union
from xml.etree.ElementTree import Element

from settingsgen.core.context import STEP_FLAT, BuildContext
from settingsgen.core.document.reader import attr, bool_attr, local_name, required_attr
from settingsgen.core.exceptions import DuplicateEntryError, UnexpectedElementError
from settingsgen.core.tree.locator import LocateKind, locate
from settingsgen.core.tree.nodes import ContentGroup, EntryNode, GroupNode, content_of
from settingsgen.core.tree.paths import split_key
from settingsgen.core.tree.promoter import promote

FLAT_ROOT_TAG = "SettingsConfig"


# ---------------------------------------------------------------------------
# Estrutura intermediária
# ---------------------------------------------------------------------------

@dataclass
class FlatEntry:
    key: str
    type: str
    default: Optional[str] = None
    trdefault: bool = False


@dataclass
class FlatGroup:
    content: List[FlatEntry] = field(default_factory=list)


@dataclass
class FlatSection:
    content: List[Union[FlatGroup, FlatEntry]] = field(default_factory=list)


@dataclass
class FlatCategory:
    content: List[Union[FlatSection, FlatEntry]] = field(default_factory=list)


@dataclass
class FlatConfig:
    content: List[Union[FlatCategory, FlatSection, FlatGroup, FlatEntry]] = field(default_factory=list)


FlatLayer = Union[FlatConfig, FlatCategory, FlatSection, FlatGroup]


def iter_entries(layer: FlatLayer) -> Iterator[FlatEntry]:
    """Percorre os entries de uma camada em ordem de documento."""
    for element in layer.content:
        if isinstance(element, FlatEntry):
            yield element
        elif isinstance(element, (FlatCategory, FlatSection, FlatGroup)):
            yield from iter_entries(element)
        else:
            raise TypeError(f"unsupported flat element: {type(element).__name__}")


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _read_entry(element: Element) -> FlatEntry:
    # filhos de Entry (SearchKey, Property, ...) são metadados de UI
    return FlatEntry(
        key=required_attr(element, "key"),
        type=required_attr(element, "type"),
        default=attr(element, "default"),
        trdefault=bool_attr(element, "trdefault", False),
    )


def _read_group(element: Element) -> FlatGroup:
    group = FlatGroup()
    for child in element:
        tag = local_name(child)
        if tag == "Entry":
            group.content.append(_read_entry(child))
        else:
            raise UnexpectedElementError.for_element(tag, local_name(element))
    return group


def _read_section(element: Element) -> FlatSection:
    section = FlatSection()
    for child in element:
        tag = local_name(child)
        if tag == "Group":
            section.content.append(_read_group(child))
        elif tag == "Entry":
            section.content.append(_read_entry(child))
        else:
            raise UnexpectedElementError.for_element(tag, local_name(element))
    return section


def _read_category(element: Element) -> FlatCategory:
    category = FlatCategory()
    for child in element:
        tag = local_name(child)
        if tag == "Section":
            category.content.append(_read_section(child))
        elif tag == "Entry":
            category.content.append(_read_entry(child))
        else:
            raise UnexpectedElementError.for_element(tag, local_name(element))
    return category


def parse_flat_config(root: Element) -> FlatConfig:
    """
    Converte o elemento raiz `SettingsConfig` na estrutura intermediária.

    Raises:
        UnexpectedElementError: Se algum elemento violar a política de camadas.
        MissingAttributeError: Se um Entry não declarar `key` ou `type`.
    """
    if local_name(root) != FLAT_ROOT_TAG:
        raise UnexpectedElementError.for_element(local_name(root), "document")

    config = FlatConfig()
    for child in root:
        tag = local_name(child)
        if tag == "Category":
            config.content.append(_read_category(child))
        elif tag == "Section":
            config.content.append(_read_section(child))
        elif tag == "Group":
            config.content.append(_read_group(child))
        elif tag == "Entry":
            config.content.append(_read_entry(child))
        else:
            raise UnexpectedElementError.for_element(tag, local_name(root))
    return config


# ---------------------------------------------------------------------------
# Tradução
# ---------------------------------------------------------------------------

def insert_entry(
    root: ContentGroup,
    entry: FlatEntry,
    ctx: Optional[BuildContext] = None,
) -> EntryNode:
    """
    Insere um entry flat na árvore no caminho dado por sua chave.

    Returns:
        EntryNode: O entry criado ou promovido, já populado.

    Raises:
        InvalidKeyError: Se a chave não possuir segmentos.
        DuplicateEntryError: Se já existir um entry no mesmo caminho.
    """
    segments, final = split_key(entry.key)

    current = root
    for segment in segments:
        found = locate(current, segment)
        if found.found:
            current = content_of(found.node)
        else:
            current = current.append(GroupNode(key=segment)).content

    found = locate(current, final)
    if found.kind is LocateKind.NOT_FOUND:
        node = current.append(EntryNode(key=final))
    elif found.kind is LocateKind.ENTRY:
        raise DuplicateEntryError.for_key(entry.key)
    else:
        node = promote(current, found.node, EntryNode(key=final))
        if ctx is not None:
            ctx.log(
                step_id=STEP_FLAT,
                level="DEBUG",
                message="promoted group to entry",
                key=entry.key,
                children=len(node.content),
            )

    node.type = entry.type
    node.default = entry.default
    node.tr = entry.trdefault
    return node


def translate_config(
    config: FlatConfig,
    target: Optional[ContentGroup] = None,
    ctx: Optional[BuildContext] = None,
) -> ContentGroup:
    """Traduz um `FlatConfig` inteiro para um ContentGroup (novo ou `target`)."""
    root = target if target is not None else ContentGroup()
    for entry in iter_entries(config):
        insert_entry(root, entry, ctx)
    return root
