# src/settingsgen/export/tree_json.py
"""
Exportação JSON do documento de settings resolvido.

Este módulo é a fronteira com o estágio de emissão: serializa o documento
resolvido (árvore + metadados), seus hashes e os warnings da execução em
JSON determinístico, consumível por qualquer emissor externo.

Estrutura do payload (v1):
    - settingsgen_version
    - run_id
    - document_hash / options_hash
    - document: `SettingsDocument.to_dict()`
    - warnings: warnings por step_id
    - events: log de eventos (apenas com `export.include_events`)

Decisões arquiteturais:
    - Apenas resultados completos são exportados; falhas fatais nunca
      chegam aqui
    - A ordem dos filhos da árvore é preservada
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from settingsgen import __version__
from settingsgen.core.document.assembler import BuildResult
from settingsgen.core.exceptions import OutputWriteError


def build_to_payload(result: BuildResult) -> Dict[str, Any]:
    ctx = result.context
    payload: Dict[str, Any] = {
        "settingsgen_version": __version__,
        "run_id": ctx.run_id,
        "document_hash": result.document_hash,
        "options_hash": result.options_hash,
        "document": result.document.to_dict(),
        "warnings": {step: list(msgs) for step, msgs in ctx.warnings.items()},
    }
    if ctx.option("export.include_events", False):
        payload["events"] = list(ctx.events)
    return payload


def dumps(result: BuildResult) -> str:
    indent = result.context.option("export.indent", 2)
    return json.dumps(build_to_payload(result), indent=indent, ensure_ascii=False) + "\n"


def export_build(result: BuildResult, path: Union[str, Path]) -> Path:
    """
    Grava o payload JSON em `path`, criando diretórios quando necessário.

    Raises:
        OutputWriteError: Se o diretório ou o arquivo não puder ser criado.
    """
    out = Path(path)
    text = dumps(result)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError.for_path(str(out), e.strerror or str(e)) from e
    return out
