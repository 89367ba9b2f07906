# src/settingsgen/core/config/loader.py
"""
Loader canônico de opções do gerador settingsgen.

As opções efetivas são resolvidas a partir de:
    - defaults embutidos (`DEFAULT_OPTIONS`, sempre presentes)
    - um arquivo de override opcional (YAML ou JSON)

Opções conhecidas (v1):
    - imports.cycle_guard (bool): detecta imports cíclicos e falha cedo
    - document.default_name (str | None): nome usado quando o documento
      não declara `name`
    - export.indent (int): indentação do JSON exportado
    - export.include_events (bool): inclui o log de eventos no JSON exportado

Invariantes:
    - O resultado é sempre um dicionário puro (`dict`)
    - O override nunca muta os defaults
    - Um arquivo de override indicado explicitamente deve existir
"""

from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    InvalidOptionsRootTypeError,
    OptionsFileNotFoundError,
    UnsupportedOptionsFormatError,
)

DEFAULT_OPTIONS: Dict[str, Any] = {
    "imports": {
        "cycle_guard": True,
    },
    "document": {
        "default_name": None,
    },
    "export": {
        "indent": 2,
        "include_events": False,
    },
}


def _load_file(path: Path) -> Dict[str, Any]:
    """
    Carrega um arquivo de opções e valida sua estrutura básica.

    Decisões arquiteturais:
        - O formato é inferido pela extensão do arquivo
        - Arquivos vazios são interpretados como dicionários vazios
        - O conteúdo raiz deve ser um dicionário

    Raises:
        OptionsFileNotFoundError: Se o arquivo não existir.
        UnsupportedOptionsFormatError: Se o formato não for suportado.
        InvalidOptionsRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    if not path.exists():
        raise OptionsFileNotFoundError(f"Options file not found: {path}")

    suffix = path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

    elif suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)

    else:
        raise UnsupportedOptionsFormatError(f"Unsupported options format: {path.suffix}")

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidOptionsRootTypeError(
            f"Options root must be a mapping, got: {type(data).__name__}"
        )

    return data


def load_options(*, local_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Resolve as opções efetivas do gerador.

    Args:
        local_path: Caminho opcional para um arquivo de override.

    Returns:
        Dict[str, Any]: Opções finais (defaults + override).

    Raises:
        OptionsFileNotFoundError: Se `local_path` for dado e não existir.
        UnsupportedOptionsFormatError: Se o formato não for suportado.
        InvalidOptionsRootTypeError: Se o conteúdo não for um dicionário.
        OptionsTypeConflictError: Se ocorrer conflito de tipos no merge.
    """
    effective = deepcopy(DEFAULT_OPTIONS)

    if local_path is not None:
        local = _load_file(Path(local_path))
        effective = deep_merge(effective, local)

    return effective
