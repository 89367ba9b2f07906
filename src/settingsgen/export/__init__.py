"""settingsgen: exportação do documento resolvido."""

from .tree_json import build_to_payload, dumps, export_build  # noqa: F401
