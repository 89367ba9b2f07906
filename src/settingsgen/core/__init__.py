"""
Core do settingsgen.

Este pacote reúne a implementação canônica do motor de construção e merge
da árvore de settings, independente de CLI ou formato de exportação.

Componentes principais:
    - tree     → nós (group/entry/content group), paths, locator, promoter
    - document → parsing nativo, tradução flat, imports e assembler
    - config   → opções do gerador
    - context  → eventos estruturados e warnings da execução
    - errors   → payloads de erro serializáveis

Princípios fundamentais:
    - Nenhuma decisão silenciosa: conflitos estruturais são erros explícitos
    - A árvore é construída uma vez por execução e entregue inteira
    - Nenhum estado global é compartilhado entre execuções
"""
