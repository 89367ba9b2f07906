# src/settingsgen/core/tree/paths.py
"""
Resolução de chaves de settings em segmentos de caminho.

Chaves usam `/` como separador. Segmentos vazios, produzidos por
separadores iniciais, finais ou duplicados, são descartados.

Exemplos:
    - "a/b/c"  → (["a", "b"], "c")
    - "solo"   → ([], "solo")
    - "/a//b/" → (["a"], "b")
"""

from __future__ import annotations

from typing import List, Tuple

from settingsgen.core.exceptions import InvalidKeyError

KEY_SEPARATOR = "/"


def split_path(path: str) -> List[str]:
    """Divide um caminho em todos os seus segmentos não vazios (pode ser vazio)."""
    return [segment for segment in path.split(KEY_SEPARATOR) if segment]


def split_key(key: str) -> Tuple[List[str], str]:
    """
    Divide uma chave em segmentos intermediários e segmento final.

    Raises:
        InvalidKeyError: Se a chave não possuir nenhum segmento.
    """
    segments = split_path(key)
    if not segments:
        raise InvalidKeyError.for_key(key)
    return segments[:-1], segments[-1]
