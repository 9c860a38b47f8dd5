"""
tosca-catalog catalog types command.

SUMMARY: Show the node-type catalog of an archive
"""

from __future__ import annotations

import argparse

from tosca_catalog.cli import OutputFormatter, add_archive_args, add_json_flag, open_session

SUMMARY = "Show the node-type catalog of an archive"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_archive_args(parser)
    parser.add_argument(
        "--nested-only",
        action="store_true",
        help="Only list node types marked as nested components",
    )
    parser.add_argument(
        "--with-templates",
        action="store_true",
        help="Include the scoped template of each type (JSON output only)",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)
    session = open_session(args)
    catalog = session.extract_types_info()
    entries = [
        info for _, info in sorted(catalog.items())
        if info.is_nested or not args.nested_only
    ]

    if args.json:
        formatter.json_output(
            {info.type_name: info.to_dict(include_document=args.with_templates) for info in entries}
        )
        return 0

    if not entries:
        formatter.text("No node types found.")
        return 0
    for info in entries:
        flags = []
        if info.is_substitution_mapping:
            flags.append("substitution")
        if info.is_nested:
            flags.append("nested")
        line = f"{info.type_name}  [{', '.join(flags) or '-'}]  {info.source_document_path}"
        if info.derived_from:
            line += f"  derived_from={', '.join(str(p) for p in info.derived_from)}"
        formatter.text(line)
    return 0
