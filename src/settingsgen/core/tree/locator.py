# src/settingsgen/core/tree/locator.py
"""
Localização de filhos por segmento de chave.

O locator inspeciona apenas os filhos imediatos de um `ContentGroup`. A
descida nível a nível é conduzida pelo chamador, um segmento por vez.

Grupos anônimos aninhados (ex.: conteúdo enxertado por import) são
atravessados de forma transparente quando aparecem antes de um match
direto, de modo que o conteúdo importado permanece alcançável como se
estivesse escrito inline.

Invariantes:
    - A comparação de chaves é exata e sensível a maiúsculas
    - O primeiro match em ordem de documento vence
    - O locator nunca muta a árvore
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from settingsgen.core.tree.nodes import ContentGroup, EntryNode, GroupNode


class LocateKind(str, Enum):
    """Classificação do resultado de uma busca."""
    GROUP = "group"
    ENTRY = "entry"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class LocateResult:
    kind: LocateKind
    node: Optional[Union[GroupNode, EntryNode]] = None

    @property
    def found(self) -> bool:
        return self.kind is not LocateKind.NOT_FOUND


NOT_FOUND = LocateResult(LocateKind.NOT_FOUND)


def locate(group: ContentGroup, name: str) -> LocateResult:
    """Procura entre os filhos de `group` um grupo ou entry com chave `name`."""
    for child in group:
        if isinstance(child, GroupNode):
            if child.key == name:
                return LocateResult(LocateKind.GROUP, child)
        elif isinstance(child, EntryNode):
            if child.key == name:
                return LocateResult(LocateKind.ENTRY, child)
        elif isinstance(child, ContentGroup):
            nested = locate(child, name)
            if nested.found:
                return nested
        else:
            raise TypeError(f"unsupported content node: {type(child).__name__}")
    return NOT_FOUND
