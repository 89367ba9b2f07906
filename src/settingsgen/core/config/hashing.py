# src/settingsgen/core/config/hashing.py
"""
Hashing canônico das opções efetivas do gerador.

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256, retornado como string hexadecimal de 64 caracteres
"""

import hashlib
import json
from typing import Any, Dict


def canonical_hash(data: Any) -> str:
    canonical_json = json.dumps(
        data,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()


def compute_options_hash(options: Dict[str, Any]) -> str:
    """
    Gera o hash determinístico das opções efetivas.

    Raises:
        TypeError: Se `options` não for um dicionário.
    """
    if not isinstance(options, dict):
        raise TypeError(
            f"Options for hashing must be a dict, got: {type(options).__name__}"
        )
    return canonical_hash(options)
