# src/settingsgen/core/document/model.py
"""
Modelo de documento de settings resolvido.

Um `SettingsDocument` é a unidade entregue ao estágio de emissão: a raiz da
árvore de nós mais os metadados de nível de documento.

Campos:
    - name: nome de classe opcional
    - prefix: prefixo de exportação opcional
    - includes: declarações de include, em ordem
    - backend: descritor opcional de backend
    - type_mappings: tabela tipo virtual → tipo concreto (último vence)
    - content: ContentGroup raiz

Invariantes:
    - A ordem de includes e do conteúdo reflete a ordem de declaração
    - Após a entrega ao emissor, o documento não é mais mutado
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from settingsgen.core.tree.nodes import ContentGroup, content_to_list


@dataclass(frozen=True)
class IncludeDecl:
    path: str
    local: bool = False


@dataclass(frozen=True)
class BackendParam:
    type: str
    value: str
    as_str: bool = False


@dataclass
class BackendDecl:
    class_name: str
    params: List[BackendParam] = field(default_factory=list)


@dataclass(frozen=True)
class ImportDecl:
    """
    Declaração de import entre documentos.

    - path: caminho do documento importado (relativo ao documento importador)
    - required: se a falha de carga aborta a execução
    - root_node: caminho opcional da subárvore a enxertar
    """

    path: str
    required: bool = True
    root_node: Optional[str] = None


@dataclass
class SettingsDocument:
    name: Optional[str] = None
    prefix: Optional[str] = None
    includes: List[IncludeDecl] = field(default_factory=list)
    backend: Optional[BackendDecl] = None
    type_mappings: Dict[str, str] = field(default_factory=dict)
    content: ContentGroup = field(default_factory=ContentGroup)

    def add_type_mapping(self, key: str, type_name: str) -> None:
        # last-write-wins
        self.type_mappings[key] = type_name

    def to_dict(self) -> Dict[str, Any]:
        backend = None
        if self.backend is not None:
            backend = {
                "class": self.backend.class_name,
                "params": [
                    {"type": p.type, "value": p.value, "as_str": p.as_str}
                    for p in self.backend.params
                ],
            }
        return {
            "name": self.name,
            "prefix": self.prefix,
            "includes": [{"path": i.path, "local": i.local} for i in self.includes],
            "backend": backend,
            "type_mappings": dict(self.type_mappings),
            "content": content_to_list(self.content),
        }
