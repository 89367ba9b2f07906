"""settingsgen: documentos de settings (core).

Componentes canônicos:
 - model: SettingsDocument e declarações de metadados
 - reader: leitura de arquivos e parsing XML
 - native: dialeto `Settings`
 - flat: dialeto `SettingsConfig` e tradução para a árvore
 - imports: resolução e enxerto de imports
 - assembler: montagem do documento de uma execução
 - hashing: hash canônico do documento resolvido
"""

from .assembler import BuildResult, assemble, build  # noqa: F401
from .flat import FlatConfig, FlatEntry, insert_entry, parse_flat_config, translate_config  # noqa: F401
from .hashing import compute_document_hash  # noqa: F401
from .imports import load_document, resolve_import, select_root  # noqa: F401
from .model import (  # noqa: F401
    BackendDecl,
    BackendParam,
    ImportDecl,
    IncludeDecl,
    SettingsDocument,
)
