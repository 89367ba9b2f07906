# src/settingsgen/core/tree/nodes.py
"""
Modelo canônico de nós da árvore de settings.

Este módulo define as estruturas que representam o esquema de settings
resolvido: grupos (namespaces puros), entries (valores tipados) e content
groups (sequências ordenadas de filhos).

Cada filho de um `ContentGroup` é exatamente um dentre:
    - GroupNode    → namespace sem valor, apenas filhos
    - EntryNode    → valor tipado, com default e flags de tradução,
                     que também pode hospedar sub-entries
    - ContentGroup → grupo anônimo aninhado (ex.: conteúdo vindo de import)

Decisões arquiteturais:
    - O conjunto de variantes é fechado; toda travessia cobre os três casos
      e rejeita qualquer outro tipo com `TypeError`
    - O pai é o único dono de seus slots; substituições ocorrem por índice
    - Identidade de nós é comparada com `is`, nunca por igualdade de valor

Invariantes:
    - A ordem de inserção dos filhos é preservada
    - Um GroupNode pode virar EntryNode (promoção); o inverso nunca ocorre

Limites explícitos:
    - Não garante unicidade de chaves (responsabilidade do algoritmo
      locate-or-create da tradução flat)
    - Não interpreta nomes de tipo nem valores default
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass(frozen=True)
class CodeFragment:
    """Default opaco: trecho de código copiado literalmente pelo emissor."""

    code: str


@dataclass
class ContentGroup:
    """
    Sequência ordenada de filhos compartilhada pela raiz, grupos e entries.

    Quando aparece como filho de outro ContentGroup, representa um grupo
    anônimo cujo conteúdo deve ser tratado como se estivesse escrito inline
    no pai.
    """

    children: List["ContentNode"] = field(default_factory=list)

    def append(self, child: "ContentNode") -> "ContentNode":
        if not isinstance(child, (GroupNode, EntryNode, ContentGroup)):
            raise TypeError(f"unsupported content node: {type(child).__name__}")
        self.children.append(child)
        return child

    def __iter__(self) -> Iterator["ContentNode"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


@dataclass
class GroupNode:
    """Namespace puro: possui chave e filhos, nunca valor."""

    key: str
    content: ContentGroup = field(default_factory=ContentGroup)


@dataclass
class EntryNode:
    """
    Entry de settings com tipo, default e metadados de tradução.

    Campos:
        - key: segmento de chave do entry
        - type: nome de tipo declarado (cru, não interpretado)
        - default: valor default cru, `CodeFragment` ou None
        - tr: se o default deve ser marcado para tradução
        - tr_context: contexto de tradução opcional
        - content: sub-entries/grupos hospedados pelo entry
    """

    key: str
    type: Optional[str] = None
    default: Union[str, CodeFragment, None] = None
    tr: bool = False
    tr_context: Optional[str] = None
    content: ContentGroup = field(default_factory=ContentGroup)


ContentNode = Union[GroupNode, EntryNode, ContentGroup]


def content_of(node: ContentNode) -> ContentGroup:
    """Retorna o ContentGroup de filhos de qualquer uma das três variantes."""
    if isinstance(node, ContentGroup):
        return node
    if isinstance(node, (GroupNode, EntryNode)):
        return node.content
    raise TypeError(f"unsupported content node: {type(node).__name__}")


def entry_paths(group: ContentGroup, prefix: str = "") -> List[str]:
    """
    Lista, em ordem de documento, o caminho completo de todos os entries.

    Grupos anônimos são atravessados sem contribuir segmento ao caminho.
    """
    paths: List[str] = []
    for child in group:
        if isinstance(child, ContentGroup):
            paths.extend(entry_paths(child, prefix))
        elif isinstance(child, EntryNode):
            path = f"{prefix}{child.key}"
            paths.append(path)
            paths.extend(entry_paths(child.content, f"{path}/"))
        elif isinstance(child, GroupNode):
            paths.extend(entry_paths(child.content, f"{prefix}{child.key}/"))
        else:
            raise TypeError(f"unsupported content node: {type(child).__name__}")
    return paths


def _default_to_data(default: Union[str, CodeFragment, None]) -> Union[str, Dict[str, str], None]:
    if isinstance(default, CodeFragment):
        return {"code": default.code}
    return default


def content_to_list(group: ContentGroup) -> List[Dict[str, Any]]:
    """Serializa um ContentGroup em estrutura JSON-compatível, preservando ordem."""
    out: List[Dict[str, Any]] = []
    for child in group:
        if isinstance(child, GroupNode):
            out.append({
                "kind": "group",
                "key": child.key,
                "children": content_to_list(child.content),
            })
        elif isinstance(child, EntryNode):
            out.append({
                "kind": "entry",
                "key": child.key,
                "type": child.type,
                "default": _default_to_data(child.default),
                "tr": child.tr,
                "tr_context": child.tr_context,
                "children": content_to_list(child.content),
            })
        elif isinstance(child, ContentGroup):
            out.append({"kind": "content", "children": content_to_list(child)})
        else:
            raise TypeError(f"unsupported content node: {type(child).__name__}")
    return out
