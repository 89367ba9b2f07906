# src/settingsgen/core/document/hashing.py
"""
Hashing canônico de documentos de settings resolvidos.

O hash representa a identidade estrutural do documento entregue à
emissão: metadados e árvore completa, na ordem de declaração.

Invariantes:
    - Documentos estruturalmente iguais produzem o mesmo hash
    - A ordem dos filhos participa do hash (ordem é semântica)
    - O valor é uma string hexadecimal de 64 caracteres
"""

from __future__ import annotations

from settingsgen.core.config.hashing import canonical_hash
from settingsgen.core.document.model import SettingsDocument


def compute_document_hash(document: SettingsDocument) -> str:
    if not isinstance(document, SettingsDocument):
        raise TypeError(
            f"Document for hashing must be a SettingsDocument, got: {type(document).__name__}"
        )
    return canonical_hash(document.to_dict())
