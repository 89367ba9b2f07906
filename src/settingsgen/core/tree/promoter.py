# src/settingsgen/core/tree/promoter.py
"""
Promoção in-place de GroupNode para EntryNode.

Quando uma declaração posterior revela que um caminho inferido como grupo
puro também carrega valor, o grupo é substituído por um entry na mesma
posição, herdando seus filhos.

Decisões arquiteturais:
    - O alvo é encontrado por identidade (`is`), não por chave
    - A substituição sobrescreve o slot do pai por índice
    - Grupos anônimos são percorridos, pois o locator pode ter encontrado
      o alvo dentro de um deles

Invariantes:
    - A posição do nó na sequência do pai é preservada
    - Os filhos do grupo passam a pertencer ao novo entry
    - Alvo ausente é falha de consistência interna (AssertionError)
"""

from __future__ import annotations

from typing import Optional

from settingsgen.core.exceptions import PromotionTargetNotFoundError
from settingsgen.core.tree.nodes import ContentGroup, EntryNode, GroupNode


def _replace_slot(parent: ContentGroup, target: GroupNode, entry: EntryNode) -> Optional[EntryNode]:
    for index, child in enumerate(parent.children):
        if child is target:
            entry.content = target.content
            parent.children[index] = entry
            return entry
        if isinstance(child, ContentGroup):
            installed = _replace_slot(child, target, entry)
            if installed is not None:
                return installed
        elif not isinstance(child, (GroupNode, EntryNode)):
            raise TypeError(f"unsupported content node: {type(child).__name__}")
    return None


def promote(parent: ContentGroup, group_node: GroupNode, new_entry: EntryNode) -> EntryNode:
    """
    Substitui `group_node` por `new_entry` dentro de `parent`.

    Returns:
        EntryNode: O entry instalado no slot antes ocupado pelo grupo.

    Raises:
        PromotionTargetNotFoundError: Se o grupo não for filho de `parent`.
    """
    installed = _replace_slot(parent, group_node, new_entry)
    if installed is None:
        raise PromotionTargetNotFoundError(
            f"group '{group_node.key}' is not a child of the given content group"
        )
    return installed
