"""settingsgen: árvore de settings (core).

Componentes canônicos:
 - nodes: GroupNode, EntryNode, ContentGroup, CodeFragment
 - paths: resolução de chaves em segmentos
 - locator: busca de filhos por segmento
 - promoter: promoção in-place de grupo para entry
"""

from .locator import LocateKind, LocateResult, locate  # noqa: F401
from .nodes import (  # noqa: F401
    CodeFragment,
    ContentGroup,
    ContentNode,
    EntryNode,
    GroupNode,
    content_of,
    content_to_list,
    entry_paths,
)
from .paths import split_key, split_path  # noqa: F401
from .promoter import promote  # noqa: F401
