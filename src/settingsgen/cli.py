# src/settingsgen/cli.py
"""
Interface de linha de comando do settingsgen.

Uso:
    settingsgen settings.xml [-o out.json] [--name NAME] [--options opts.yaml]

Códigos de saída:
    - 0: documento resolvido e exportado
    - 1: erro estrutural, de recurso ou de opções (payload JSON no stderr)
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from settingsgen.core.config.errors import OptionsError
from settingsgen.core.config.loader import load_options
from settingsgen.core.document.assembler import build
from settingsgen.core.errors import payload_from_exception
from settingsgen.core.exceptions import SettingsError
from settingsgen.export.tree_json import dumps, export_build


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="settingsgen",
        description="Resolve a settings document (imports, flat dialect) into a single tree.",
    )
    parser.add_argument("input", help="primary settings document (XML)")
    parser.add_argument("-o", "--output", help="write the resolved tree as JSON to this file")
    parser.add_argument("--name", help="document name used when the document declares none")
    parser.add_argument("--options", help="generator options override file (YAML or JSON)")
    parser.add_argument(
        "--events",
        action="store_true",
        help="include the structured build event log in the exported JSON",
    )
    return parser


def parse_args(argv: List[str]) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        options = load_options(local_path=args.options)
        if args.events:
            options["export"]["include_events"] = True

        default_name = args.name
        if default_name is None and args.output:
            # o nome segue o arquivo gerado, como o header no emissor
            default_name = Path(args.output).name.split(".", 1)[0]

        result = build(args.input, options=options, default_name=default_name)

        for message in result.context.all_warnings():
            print(f"warning: {message}", file=sys.stderr)

        if args.output:
            export_build(result, args.output)
        else:
            sys.stdout.write(dumps(result))
    except (SettingsError, OptionsError) as e:
        payload = payload_from_exception(e)
        print(json.dumps(payload.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
