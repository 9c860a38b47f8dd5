"""CLI output formatting (JSON and text modes)."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional


class OutputFormatter:
    """Output formatter shared by CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Report an error on stderr.

        Errors carrying a ``to_json_error`` payload are emitted as-is in JSON
        mode.
        """
        msg = message or str(error)
        if self.json_mode:
            to_json = getattr(error, "to_json_error", None)
            output: Dict[str, Any] = to_json() if callable(to_json) else {"code": error_code, "message": msg}
            output.setdefault("error", error_code)
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        print(message)


__all__ = ["OutputFormatter"]
