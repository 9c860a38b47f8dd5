"""
Configuration management (YAML layers, environment overrides, JSON Schema).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import jsonschema
import yaml

from tosca_catalog.core.exceptions import ConfigurationError
from tosca_catalog.data import get_data_path, read_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "TOSCA_CATALOG_"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``.

    Nested mappings are merged key by key; any other value (lists included)
    from ``override`` replaces the base value.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigManager:
    """Load, merge, and validate tosca-catalog configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: TOSCA_CATALOG_<SECTION>__<KEY>
    2. Explicit config files, in the order given
    3. Bundled defaults: tosca_catalog.data/config/*.yaml (alphabetical order)
    """

    def __init__(
        self,
        config_paths: Sequence[Path | str] = (),
        *,
        environ: Optional[Dict[str, str]] = None,
    ) -> None:
        self.core_config_dir = get_data_path("config")
        self.config_paths: List[Path] = [Path(p) for p in config_paths]
        self._environ = environ

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}", context={"path": str(path)})
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {path} must contain a mapping at top level",
                context={"path": str(path)},
            )
        return data

    def _iter_core_files(self) -> Iterable[Path]:
        yml = {p.stem: p for p in self.core_config_dir.glob("*.yml")}
        yamls = {p.stem: p for p in self.core_config_dir.glob("*.yaml")}
        for stem in sorted(set(yml) | set(yamls)):
            yield yamls.get(stem) or yml[stem]

    # ---------- environment overrides ----------

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        return value.strip()

    def _iter_env_overrides(self):
        environ = os.environ if self._environ is None else self._environ
        for key in sorted(environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            segments = [seg.lower() for seg in raw.split("__")]
            if not raw or any(seg == "" for seg in segments):
                raise ConfigurationError(f"Malformed {ENV_PREFIX}* key: '{key}'", context={"key": key})
            yield segments, self._coerce_type(environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if nxt is None:
                nxt = cur[part] = {}
            if not isinstance(nxt, dict):
                raise ConfigurationError(
                    f"Cannot override '{'.'.join(path)}': '{part}' is not a mapping",
                    context={"path": path},
                )
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            logger.debug("Applying environment override %s=%r", ".".join(path), value)
            self._set_nested(cfg, path, value)

    # ---------- validation ----------

    def load_schema(self, name: str = "config.schema.yaml") -> Dict[str, Any]:
        return read_yaml("schemas", name)

    def validate_schema(self, config: Dict[str, Any]) -> None:
        validator = jsonschema.Draft202012Validator(self.load_schema())
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        if errors:
            first = errors[0]
            where = ".".join(str(p) for p in first.path) or "<root>"
            raise ConfigurationError(
                f"Invalid configuration at {where}: {first.message}",
                context={"errors": [e.message for e in errors]},
            )

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration dictionary."""
        cfg: Dict[str, Any] = {}
        for path in self._iter_core_files():
            cfg = deep_merge(cfg, self.load_yaml(path))
        for path in self.config_paths:
            logger.debug("Merging config file %s", path)
            cfg = deep_merge(cfg, self.load_yaml(path))
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg


__all__ = ["ConfigManager", "deep_merge", "ENV_PREFIX"]
