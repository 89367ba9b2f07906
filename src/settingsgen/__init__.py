"""
settingsgen: gerador declarativo de esquemas de settings.

Este pacote raiz define o namespace público do settingsgen, uma ferramenta
que lê descrições hierárquicas de settings (XML), resolve imports entre
documentos, traduz o dialeto "flat" (category/section/group/entry) e produz
uma única árvore de settings resolvida, pronta para emissão.

Arquitetura em alto nível:
    - core.tree     → modelo de nós, resolução de chaves, localização e promoção
    - core.document → parsing dos dialetos, imports e montagem do documento
    - core.config   → opções do gerador (defaults + override, deep-merge, hashing)
    - core.context  → log estruturado e warnings de uma execução
    - export        → serialização JSON determinística do documento resolvido

Limites explícitos:
    - Não gera código em nenhuma linguagem alvo
    - Não valida semântica de nomes de tipos
    - Não versiona esquemas
"""

__version__ = "0.1.0"
