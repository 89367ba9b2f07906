# src/settingsgen/core/document/reader.py
"""
Fronteira com o sistema de arquivos e o tokenizer XML.

Este módulo abre um documento de settings, entrega o elemento raiz já
parseado e traduz falhas de I/O e de XML em erros de recurso tipados.

Decisões arquiteturais:
    - O parsing XML é delegado ao `defusedxml.ElementTree` (entidades
      externas e expansões maliciosas são rejeitadas)
    - O handle do arquivo vive apenas dentro desta chamada e é liberado
      em caso de sucesso ou falha
    - O caminho já chega resolvido; resolução relativa é responsabilidade
      do resolvedor de imports

Limites explícitos:
    - Não interpreta o dialeto do documento
    - Não registra eventos nem warnings
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
from xml.etree.ElementTree import Element

import defusedxml.ElementTree as ET
from defusedxml import DefusedXmlException

from settingsgen.core.exceptions import (
    DocumentNotFoundError,
    DocumentParseError,
    InvalidAttributeError,
    MissingAttributeError,
)

_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def read_document(path: Path) -> Element:
    """
    Lê e parseia um documento XML, retornando o elemento raiz.

    Raises:
        DocumentNotFoundError: Se o arquivo não existir ou não puder ser aberto.
        DocumentParseError: Se o conteúdo não for XML bem formado.
    """
    try:
        with path.open("rb") as f:
            tree = ET.parse(f)
    except OSError as e:
        raise DocumentNotFoundError.for_path(str(path), e.strerror or str(e)) from e
    except (ET.ParseError, DefusedXmlException) as e:
        raise DocumentParseError.for_path(str(path), str(e) or e.__class__.__name__) from e

    return tree.getroot()


# ---------------------------------------------------------------------------
# Helpers de atributos
# ---------------------------------------------------------------------------

def local_name(element: Element) -> str:
    """Nome do elemento sem o namespace (`{urn:x}Entry` -> `Entry`)."""
    return element.tag.rsplit("}", 1)[-1]


def attr(element: Element, name: str) -> Optional[str]:
    return element.attrib.get(name)


def required_attr(element: Element, name: str) -> str:
    value = element.attrib.get(name)
    if value is None:
        raise MissingAttributeError.for_attribute(local_name(element), name)
    return value


def bool_attr(element: Element, name: str, default: bool) -> bool:
    value = element.attrib.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise InvalidAttributeError.for_value(local_name(element), name, value)


def text_of(element: Element) -> str:
    return (element.text or "").strip()
