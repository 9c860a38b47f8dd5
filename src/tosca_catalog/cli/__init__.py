"""
Command-line interface.

Commands are discovered from domain subfolders (``catalog/`` ...); each
command module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args) -> int``.
"""
from ._output import OutputFormatter
from ._args import add_archive_args, add_json_flag
from ._utils import load_cli_config, open_session

__all__ = [
    "OutputFormatter",
    "add_archive_args",
    "add_json_flag",
    "load_cli_config",
    "open_session",
]
