"""Decoding of service template bytes into attribute trees."""
from __future__ import annotations

import logging
from typing import Any, Dict

import yaml

from tosca_catalog.core.exceptions import DocumentDecodeError

logger = logging.getLogger(__name__)


def decode_document(content: bytes | str, *, path: str) -> Dict[str, Any]:
    """Decode a YAML service template.

    An empty document decodes to ``{}``. Undecodable bytes, YAML syntax
    errors and a non-mapping top level raise :class:`DocumentDecodeError`.
    """
    if isinstance(content, bytes):
        try:
            text = content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentDecodeError(path, f"not valid UTF-8 ({exc})") from exc
    else:
        text = content

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise DocumentDecodeError(path, str(exc)) from exc

    if data is None:
        logger.debug("Template document %s is empty", path)
        return {}
    if not isinstance(data, dict):
        raise DocumentDecodeError(path, f"top level is a {type(data).__name__}, expected a mapping")
    return data


__all__ = ["decode_document"]
