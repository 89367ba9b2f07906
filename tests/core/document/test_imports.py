# tests/core/document/test_imports.py
"""
Testes da resolução de imports entre documentos.

Os testes asseguram que:
- o conteúdo importado é enxertado no ponto de declaração
- `rootNode` seleciona uma subárvore; segmento ausente não enxerta nada
- imports opcionais falhos viram warning; obrigatórios abortam
- documentos flat podem ser importados por documentos nativos
- ciclos de import são detectados quando `imports.cycle_guard` está ativo
- metadados do documento importado não são propagados

Decisões arquiteturais:
    - Todos os documentos são gravados em `tmp_path` via `write_doc`
    - O contexto de execução é determinístico (`build_ctx`)
"""

from pathlib import Path

import pytest

from settingsgen.core.context import STEP_IMPORT
from settingsgen.core.document.imports import (
    load_document,
    resolve_import,
    resolve_import_path,
    select_root,
)
from settingsgen.core.document.model import ImportDecl
from settingsgen.core.exceptions import (
    DocumentNotFoundError,
    DocumentParseError,
    DuplicateEntryError,
    ImportCycleError,
    UnexpectedElementError,
)
from settingsgen.core.tree.nodes import ContentGroup, EntryNode, GroupNode, entry_paths

LIBRARY = """\
<Settings name="Library" prefix="LIB">
    <Include>library.h</Include>
    <TypeMapping key="range" type="int"/>
    <Node key="a">
        <Node key="b">
            <Entry key="c" type="int" default="1"/>
            <Entry key="d" type="bool"/>
        </Node>
    </Node>
    <Entry key="top" type="QString"/>
</Settings>
"""


def _main(import_xml: str) -> str:
    return f"""\
<Settings name="Main">
    <Entry key="first" type="int"/>
    {import_xml}
    <Entry key="last" type="int"/>
</Settings>
"""


def test_resolve_import_path_is_relative_to_source(tmp_path: Path):
    source = tmp_path / "docs" / "main.xml"
    assert resolve_import_path("../shared/lib.xml", source) == tmp_path / "shared" / "lib.xml"
    absolute = tmp_path / "abs.xml"
    assert resolve_import_path(str(absolute), source) == absolute


def test_select_root():
    inner = ContentGroup([EntryNode(key="c")])
    content = ContentGroup([GroupNode(key="a", content=ContentGroup([GroupNode(key="b", content=inner)]))])
    assert select_root(content, None) is content
    assert select_root(content, "a/b") is inner
    assert select_root(content, "/a//b/") is inner
    assert select_root(content, "a/missing") is None


def test_whole_document_import(write_doc, build_ctx):
    write_doc("lib.xml", LIBRARY)
    main = write_doc("main.xml", _main("<Import>lib.xml</Import>"))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "a/b/c", "a/b/d", "top", "last"]
    assert isinstance(doc.content.children[1], ContentGroup)


def test_root_node_import(write_doc, build_ctx):
    write_doc("lib.xml", LIBRARY)
    main = write_doc("main.xml", _main('<Import rootNode="a/b">lib.xml</Import>'))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "c", "d", "last"]
    spliced = [e for e in build_ctx.events if e["message"] == "import spliced"]
    assert spliced[0]["nodes"] == 2


def test_root_node_into_entry(write_doc, build_ctx):
    write_doc(
        "lib.xml",
        '<Settings><Entry key="e" type="int"><Entry key="sub" type="int"/></Entry></Settings>',
    )
    main = write_doc("main.xml", _main('<Import rootNode="e">lib.xml</Import>'))
    assert entry_paths(load_document(main, build_ctx).content) == ["first", "sub", "last"]


def test_missing_root_node_grafts_nothing(write_doc, build_ctx):
    write_doc("lib.xml", LIBRARY)
    main = write_doc("main.xml", _main('<Import rootNode="a/missing">lib.xml</Import>'))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "last"]
    assert len(doc.content) == 2
    assert build_ctx.warnings == {}
    assert any(e["message"] == "import root node not found" for e in build_ctx.events)


def test_optional_missing_import_warns(write_doc, build_ctx):
    main = write_doc("main.xml", _main('<Import required="false">absent.xml</Import>'))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "last"]
    warnings = build_ctx.warnings[STEP_IMPORT]
    assert len(warnings) == 1
    assert "absent.xml" in warnings[0]
    assert any(e["level"] == "WARNING" for e in build_ctx.events)


def test_optional_malformed_import_warns(write_doc, build_ctx):
    write_doc("broken.xml", "<Settings><Entry")
    main = write_doc("main.xml", _main('<Import required="false">broken.xml</Import>'))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "last"]
    assert len(build_ctx.warnings[STEP_IMPORT]) == 1


def test_required_missing_import_raises(write_doc, build_ctx):
    main = write_doc("main.xml", _main("<Import>absent.xml</Import>"))
    with pytest.raises(DocumentNotFoundError) as exc_info:
        load_document(main, build_ctx)
    assert exc_info.value.details["path"].endswith("absent.xml")


def test_required_malformed_import_raises(write_doc, build_ctx):
    write_doc("broken.xml", "not xml at all")
    main = write_doc("main.xml", _main("<Import>broken.xml</Import>"))
    with pytest.raises(DocumentParseError):
        load_document(main, build_ctx)


def test_structural_error_in_optional_import_is_fatal(write_doc, build_ctx):
    write_doc("bad.xml", "<Settings><Bogus/></Settings>")
    main = write_doc("main.xml", _main('<Import required="false">bad.xml</Import>'))
    with pytest.raises(UnexpectedElementError):
        load_document(main, build_ctx)


def test_flat_document_import(write_doc, build_ctx, flat_settings_xml):
    write_doc("flat/config.xml", flat_settings_xml)
    main = write_doc("main.xml", _main('<Import rootNode="network">flat/config.xml</Import>'))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == [
        "first",
        "proxy",
        "proxy/host",
        "timeout",
        "last",
    ]


def test_nested_imports_resolve_relative_to_importer(write_doc, build_ctx):
    write_doc("shared/leaf.xml", '<Settings><Entry key="leaf" type="int"/></Settings>')
    write_doc("shared/mid.xml", '<Settings><Node key="mid"><Import>leaf.xml</Import></Node></Settings>')
    main = write_doc("main.xml", _main("<Import>shared/mid.xml</Import>"))

    doc = load_document(main, build_ctx)

    assert entry_paths(doc.content) == ["first", "mid/leaf", "last"]
    assert build_ctx.document_stack == []


def test_imported_metadata_is_dropped(write_doc, build_ctx):
    write_doc("lib.xml", LIBRARY)
    main = write_doc("main.xml", _main("<Import>lib.xml</Import>"))

    doc = load_document(main, build_ctx)

    assert doc.name == "Main"
    assert doc.prefix is None
    assert doc.includes == []
    assert doc.type_mappings == {}


def test_self_import_cycle_raises(write_doc, build_ctx):
    main = write_doc("main.xml", _main("<Import>main.xml</Import>"))
    with pytest.raises(ImportCycleError) as exc_info:
        load_document(main, build_ctx)
    chain = exc_info.value.details["chain"]
    assert chain[0] == chain[-1]
    assert chain[0].endswith("main.xml")


def test_transitive_cycle_raises(write_doc, build_ctx):
    write_doc("a.xml", "<Settings><Import>b.xml</Import></Settings>")
    write_doc("b.xml", '<Settings><Import required="false">a.xml</Import></Settings>')
    with pytest.raises(ImportCycleError) as exc_info:
        load_document(write_doc("main.xml", _main("<Import>a.xml</Import>")), build_ctx)
    assert len(exc_info.value.details["chain"]) == 4


def test_repeated_import_is_not_a_cycle(write_doc, build_ctx):
    write_doc("lib.xml", '<Settings><Entry key="x" type="int"/></Settings>')
    main = write_doc(
        "main.xml",
        """\
<Settings>
    <Node key="one"><Import>lib.xml</Import></Node>
    <Node key="two"><Import>lib.xml</Import></Node>
</Settings>
""",
    )
    doc = load_document(main, build_ctx)
    assert entry_paths(doc.content) == ["one/x", "two/x"]


def test_resolve_optional_missing_returns_none(build_ctx):
    decl = ImportDecl(path="absent.xml", required=False)
    assert resolve_import(decl, Path("/nowhere/main.xml"), build_ctx) is None
    assert len(build_ctx.warnings[STEP_IMPORT]) == 1


def test_flat_duplicate_is_fatal_through_import(write_doc, build_ctx):
    write_doc(
        "dup.xml",
        '<SettingsConfig><Entry key="x/y" type="int"/><Entry key="x/y" type="int"/></SettingsConfig>',
    )
    main = write_doc("main.xml", _main('<Import required="false">dup.xml</Import>'))
    with pytest.raises(DuplicateEntryError):
        load_document(main, build_ctx)


def test_unknown_root_raises(write_doc, build_ctx):
    with pytest.raises(UnexpectedElementError):
        load_document(write_doc("odd.xml", "<Something/>"), build_ctx)


def test_namespaced_documents(write_doc, build_ctx):
    """
    Verifica que documentos com `xmlns` default são reconhecidos pelo nome
    local dos elementos, nos dois dialetos.
    """
    write_doc(
        "flat.xml",
        """\
<SettingsConfig xmlns="urn:example:settings-config">
    <Category>
        <Section>
            <Group><Entry key="net/port" type="int" default="80"/></Group>
        </Section>
    </Category>
</SettingsConfig>
""",
    )
    main = write_doc(
        "main.xml",
        """\
<Settings xmlns="urn:example:settings" name="Main">
    <Include local="true">main.h</Include>
    <Node key="n">
        <Entry key="e" type="url"><Code>QUrl{}</Code></Entry>
    </Node>
    <Import rootNode="net">flat.xml</Import>
</Settings>
""",
    )

    doc = load_document(main, build_ctx)

    assert doc.name == "Main"
    assert [i.path for i in doc.includes] == ["main.h"]
    assert entry_paths(doc.content) == ["n/e", "port"]
    loaded = [e["dialect"] for e in build_ctx.events if e["message"] == "document loaded"]
    assert loaded == ["Settings", "SettingsConfig"]


def test_namespaced_unexpected_element_uses_local_names(write_doc, build_ctx):
    main = write_doc("main.xml", '<Settings xmlns="urn:x"><Bogus/></Settings>')
    with pytest.raises(UnexpectedElementError) as exc_info:
        load_document(main, build_ctx)
    assert exc_info.value.details == {"element": "Bogus", "parent": "Settings"}
