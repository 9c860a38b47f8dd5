from __future__ import annotations

import pytest

from tosca_catalog.core.exceptions import CatalogError, DocumentDecodeError
from tosca_catalog.core.tosca import decode_document


def test_decodes_bytes_and_text() -> None:
    assert decode_document(b"a: 1\n", path="x.yaml") == {"a": 1}
    assert decode_document("a: [1, 2]\n", path="x.yaml") == {"a": [1, 2]}


def test_empty_document_is_empty_mapping() -> None:
    assert decode_document(b"", path="x.yaml") == {}
    assert decode_document(b"# only a comment\n", path="x.yaml") == {}


@pytest.mark.parametrize(
    "content",
    [
        b"a: [1, 2\n",
        b"- just\n- a list\n",
        b"\xff\xfe\x00garbage",
    ],
)
def test_malformed_documents_raise_decode_error(content: bytes) -> None:
    with pytest.raises(DocumentDecodeError) as exc:
        decode_document(content, path="Definitions/Broken.yaml")
    err = exc.value
    assert err.path == "Definitions/Broken.yaml"
    assert err.context["path"] == "Definitions/Broken.yaml"
    assert isinstance(err, CatalogError)
    assert isinstance(err, ValueError)
    assert err.to_json_error()["code"] == "DocumentDecodeError"
