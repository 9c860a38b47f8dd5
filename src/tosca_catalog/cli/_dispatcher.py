"""
Auto-discovery CLI dispatcher.

Scans subfolders for commands and registers them as ``<domain> <command>``.
Adding a command means adding a module to the matching subfolder.
"""

from __future__ import annotations

import argparse
import importlib
import sys
from functools import lru_cache
from pathlib import Path
from typing import Any, Sequence

from tosca_catalog.cli._output import OutputFormatter
from tosca_catalog.core.exceptions import CatalogError


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """Map CLI domain names to their directories."""
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.is_dir() and not item.name.startswith("_"):
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """Map command names of a domain to their module metadata."""
    domain_dir = discover_domains()[domain]
    commands: dict[str, dict[str, Any]] = {}
    for item in sorted(domain_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        module = importlib.import_module(f"tosca_catalog.cli.{domain}.{item.stem}")
        commands[item.stem] = {
            "module": module,
            "summary": getattr(module, "SUMMARY", f"{domain} {item.stem}"),
            "register_args": getattr(module, "register_args", None),
            "main": getattr(module, "main", None),
        }
    return commands


def _get_version() -> str:
    from tosca_catalog import __version__

    return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tosca-catalog",
        description="Inspect node types and data types of TOSCA CSAR archives",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    parser.add_argument(
        "--config",
        action="append",
        metavar="FILE",
        help="Additional YAML configuration file (repeatable, later files win)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="domains",
        metavar="<domain>",
    )
    for domain_name in sorted(discover_domains()):
        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            metavar="<command>",
        )
        for cmd_name, cmd_info in sorted(discover_commands(domain_name).items()):
            primary_name = cmd_name.replace("_", "-")
            aliases = [cmd_name] if primary_name != cmd_name else []
            cmd_parser = cmd_subparsers.add_parser(
                primary_name,
                aliases=aliases,
                help=cmd_info["summary"],
            )
            if cmd_info["register_args"]:
                cmd_info["register_args"](cmd_parser)
            if cmd_info["main"]:
                cmd_parser.set_defaults(_func=cmd_info["main"])
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    func = getattr(args, "_func", None)
    if func is None:
        parser.print_help()
        return 1

    try:
        return int(func(args) or 0)
    except CatalogError as exc:
        OutputFormatter(json_mode=getattr(args, "json", False)).error(exc, error_code="catalog_error")
        return 1


if __name__ == "__main__":
    sys.exit(main())
