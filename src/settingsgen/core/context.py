# src/settingsgen/core/context.py
"""
Contexto de execução de uma construção de documento.

Este módulo define o `BuildContext`, a estrutura canônica que acompanha uma
execução completa do assembler (documento principal + imports), servindo
como ponto central de observabilidade.

O BuildContext atua como o único meio de:
    - registro de logs estruturados da execução
    - coleta de warnings não fatais (ex.: import opcional ausente)
    - rastreamento da cadeia de documentos em parsing (guarda de ciclo)

Princípios fundamentais:
    - Isolamento por execução (cada build possui seu próprio contexto)
    - Logs são eventos estruturados, não strings livres
    - Ausência de estado global compartilhado

Invariantes:
    - Logs sempre incluem `run_id` e `step_id`
    - Warnings são agrupados por `step_id`, preservando ordem de inserção
    - A pilha de documentos reflete exatamente a recursão de imports

Limites explícitos:
    - Não faz parsing de documentos
    - Não decide se um erro é fatal
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List

# Identificadores canônicos das etapas que emitem eventos.
STEP_READ = "document.read"
STEP_IMPORT = "document.import"
STEP_FLAT = "flat.translate"
STEP_ASSEMBLE = "document.assemble"


def new_run_id() -> str:
    return f"build-{uuid.uuid4().hex[:12]}"


@dataclass
class BuildContext:
    """
    Contexto compartilhado de uma execução de build.

    Campos canônicos:
    - run_id: identificador único da execução
    - created_at: timestamp UTC de criação do contexto
    - options: opções efetivas do gerador (defaults + override)
    - events: log estruturado de eventos
    - warnings: warnings por step_id
    - document_stack: documentos atualmente em parsing (mais externo primeiro)
    """

    run_id: str = field(default_factory=new_run_id)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    options: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    document_stack: List[str] = field(default_factory=list, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------

    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        if step_id not in self.warnings:
            self.warnings[step_id] = []
        self.warnings[step_id].append(message)

    def warn(self, *, step_id: str, message: str, **extra: Any) -> None:
        """Registra o warning e o evento de log correspondente."""
        self.add_warning(step_id=step_id, message=message)
        self.log(step_id=step_id, level="WARNING", message=message, **extra)

    def all_warnings(self) -> List[str]:
        return [msg for messages in self.warnings.values() for msg in messages]

    # -----------------------------
    # Document stack
    # -----------------------------

    def is_open(self, path: str) -> bool:
        return path in self.document_stack

    @contextmanager
    def open_document(self, path: str) -> Iterator[None]:
        self.document_stack.append(path)
        try:
            yield
        finally:
            self.document_stack.pop()

    def option(self, dotted: str, default: Any = None) -> Any:
        """Lê uma opção aninhada por caminho pontuado (ex.: "imports.cycle_guard")."""
        current: Any = self.options
        for part in dotted.split("."):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current
