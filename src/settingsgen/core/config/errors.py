# src/settingsgen/core/config/errors.py
"""
Exceções canônicas da camada de opções do settingsgen.

Invariantes:
    - Todas as exceções de opções herdam de `OptionsError`
    - Nenhuma exceção representa erro de documento de settings
"""


class OptionsError(Exception):
    """
    Exceção base para erros de carregamento e resolução de opções.

    Limites explícitos:
        - Não representa erro estrutural de documento
    """


class OptionsFileNotFoundError(OptionsError):
    """Arquivo de override indicado explicitamente não existe."""


class UnsupportedOptionsFormatError(OptionsError):
    """
    Formato do arquivo de opções não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidOptionsRootTypeError(OptionsError):
    """Conteúdo raiz do arquivo de opções não é um dicionário."""


class OptionsTypeConflictError(OptionsError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - defaults: {"imports": {"cycle_guard": true}}
        - override: {"imports": {"cycle_guard": "yes"}}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """
