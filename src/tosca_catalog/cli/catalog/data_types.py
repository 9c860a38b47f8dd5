"""
tosca-catalog catalog data-types command.

SUMMARY: Show the merged data types of an archive
"""

from __future__ import annotations

import argparse

import yaml

from tosca_catalog.cli import OutputFormatter, add_archive_args, add_json_flag, open_session

SUMMARY = "Show the merged data types of an archive"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_archive_args(parser)
    parser.add_argument(
        "name",
        nargs="?",
        help="Show a single data type definition",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)
    data_types = open_session(args).data_types()

    if args.name:
        if args.name not in data_types:
            formatter.error(
                KeyError(args.name),
                f"Data type not found: {args.name}",
                error_code="data_type_not_found",
            )
            return 1
        selected = {args.name: data_types[args.name]}
    else:
        selected = data_types

    if args.json:
        formatter.json_output(selected)
    elif args.name:
        formatter.text(yaml.safe_dump(selected, default_flow_style=False, sort_keys=False).rstrip())
    else:
        for name in sorted(selected):
            formatter.text(name)
    return 0
