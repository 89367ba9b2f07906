# src/settingsgen/core/config/__init__.py

"""
Camada de opções do gerador settingsgen.

Este pacote carrega, mescla e identifica as opções que controlam uma
execução do gerador (guarda de ciclos de import, nome default do
documento, formato de exportação).

As opções são:
    - declarativas (defaults embutidos + arquivo de override opcional)
    - determinísticas (a mesma entrada produz as mesmas opções)
    - separadas dos documentos de settings processados

Invariantes:
    - As opções finais são um dicionário puro (dict)
    - Conflitos de tipo entre defaults e override são erro
"""

from .errors import (  # noqa: F401
    InvalidOptionsRootTypeError,
    OptionsError,
    OptionsFileNotFoundError,
    OptionsTypeConflictError,
    UnsupportedOptionsFormatError,
)
from .hashing import compute_options_hash  # noqa: F401
from .loader import DEFAULT_OPTIONS, load_options  # noqa: F401
from .merge import deep_merge  # noqa: F401
