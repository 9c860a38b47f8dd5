"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_archive_args(parser: argparse.ArgumentParser) -> None:
    """Add the archive path and main template arguments."""
    parser.add_argument(
        "archive",
        help="CSAR file or unpacked CSAR directory",
    )
    parser.add_argument(
        "--main",
        dest="main_template",
        default="Definitions/MainServiceTemplate.yaml",
        help="Path of the main service template inside the archive "
        "(default: Definitions/MainServiceTemplate.yaml)",
    )


__all__ = ["add_json_flag", "add_archive_args"]
