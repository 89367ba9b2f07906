# tests/core/test_context.py
"""
Testes do contexto de execução (BuildContext).

Os testes asseguram que:
- eventos de log são estruturados e carregam `run_id` e `step_id`
- warnings são agrupados por `step_id` em ordem de inserção
- a pilha de documentos reflete a recursão, inclusive sob exceção
- opções aninhadas são lidas por caminho pontuado
"""

import pytest

from settingsgen.core.context import STEP_IMPORT, STEP_READ, BuildContext, new_run_id


def test_log_event_shape(build_ctx):
    build_ctx.log(step_id=STEP_READ, level="INFO", message="document loaded", path="/a.xml")
    event = build_ctx.events[0]
    assert event["run_id"] == "build-test-001"
    assert event["step_id"] == STEP_READ
    assert event["level"] == "INFO"
    assert event["message"] == "document loaded"
    assert event["path"] == "/a.xml"
    assert "timestamp" in event


def test_warnings_grouped_by_step(build_ctx):
    build_ctx.add_warning(step_id=STEP_IMPORT, message="first")
    build_ctx.add_warning(step_id="other", message="second")
    build_ctx.add_warning(step_id=STEP_IMPORT, message="third")
    assert build_ctx.warnings == {STEP_IMPORT: ["first", "third"], "other": ["second"]}
    assert build_ctx.all_warnings() == ["first", "third", "second"]


def test_warn_also_logs(build_ctx):
    build_ctx.warn(step_id=STEP_IMPORT, message="missing", path="/x.xml")
    assert build_ctx.warnings[STEP_IMPORT] == ["missing"]
    assert build_ctx.events[-1]["level"] == "WARNING"
    assert build_ctx.events[-1]["path"] == "/x.xml"


def test_document_stack(build_ctx):
    with build_ctx.open_document("/a.xml"):
        assert build_ctx.is_open("/a.xml")
        with build_ctx.open_document("/b.xml"):
            assert build_ctx.document_stack == ["/a.xml", "/b.xml"]
        assert not build_ctx.is_open("/b.xml")
    assert build_ctx.document_stack == []


def test_document_stack_unwinds_on_error(build_ctx):
    with pytest.raises(RuntimeError):
        with build_ctx.open_document("/a.xml"):
            raise RuntimeError("boom")
    assert build_ctx.document_stack == []


def test_option_lookup(build_ctx):
    assert build_ctx.option("imports.cycle_guard") is True
    assert build_ctx.option("export.indent") == 2
    assert build_ctx.option("export.missing", "fallback") == "fallback"
    assert build_ctx.option("export.indent.deeper") is None


def test_contexts_are_isolated():
    a = BuildContext()
    b = BuildContext()
    a.add_warning(step_id="s", message="m")
    assert b.warnings == {}
    assert a.run_id != b.run_id
    assert new_run_id().startswith("build-")
