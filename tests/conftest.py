# tests/conftest.py
"""
Fixtures compartilhados para testes do settingsgen.

Este módulo define fixtures reutilizáveis que fornecem:
- documentos de settings mínimos nos dois dialetos (nativo e flat)
- um BuildContext determinístico
- um helper para gravar documentos em `tmp_path`

Decisões arquiteturais:
    - Documentos são fornecidos como strings XML e gravados apenas
      quando o teste exercita leitura de arquivos
    - Imports do core são realizados de forma lazy para melhorar a
      clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture depende de estado global
    - Todo arquivo gravado vive dentro de `tmp_path`
"""

from datetime import datetime, timezone
from pathlib import Path

import pytest


@pytest.fixture
def native_settings_xml() -> str:
    """
    Documento nativo representativo: metadados, nós aninhados, entry com
    sub-entries e default em código.
    """
    return """\
<?xml version="1.0" encoding="UTF-8"?>
<Settings name="AppSettings" prefix="APP_EXPORT">
    <Include local="true">custom.h</Include>
    <Include>QtCore/QDateTime</Include>
    <Backend class="MyAccessor">
        <Param type="QString" asStr="true">app.ini</Param>
        <Param type="int">42</Param>
    </Backend>
    <TypeMapping key="range" type="int"/>
    <TypeMapping key="range" type="qint64"/>
    <Node key="network">
        <Entry key="port" type="int" default="8080"/>
        <Entry key="proxy" type="url">
            <Code>QUrl{}</Code>
            <Entry key="enabled" type="bool" default="false"/>
        </Entry>
    </Node>
    <Entry key="title" type="QString" default="Hello" tr="true" trContext="main"/>
</Settings>
"""


@pytest.fixture
def flat_settings_xml() -> str:
    """
    Documento flat cobrindo as quatro camadas, com promoção implícita de
    `network/proxy` (declarado depois de `network/proxy/host`).
    """
    return """\
<?xml version="1.0" encoding="UTF-8"?>
<SettingsConfig>
    <Category title="General">
        <Section title="Network">
            <Group title="Proxy">
                <Entry key="network/proxy/host" type="QString" default="localhost"/>
                <Entry key="network/proxy" type="bool" default="false"/>
            </Group>
            <Entry key="network/timeout" type="int" default="30"/>
        </Section>
        <Entry key="language" type="QString" default="en" trdefault="true"/>
    </Category>
    <Entry key="/ui//theme/" type="QString" default="dark"/>
</SettingsConfig>
"""


@pytest.fixture
def write_doc(tmp_path: Path):
    """
    Fixture factory que grava um documento em `tmp_path` e retorna seu Path.

    Subdiretórios no nome relativo são criados automaticamente.
    """

    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def build_ctx():
    """
    BuildContext determinístico com as opções default do gerador.
    """
    from settingsgen.core.config.loader import load_options
    from settingsgen.core.context import BuildContext

    return BuildContext(
        run_id="build-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        options=load_options(),
    )
