"""JSON encoding of hardware records whose metadata is itself JSON text.

A hardware record keeps its metadata as a JSON string. Encoded naively, that
string would appear full of escaped quotes; these helpers expand it into a
nested object when dumping and fold it back into a string when loading.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

__all__ = ["dumps_hardware", "loads_hardware"]


def _encode(value: Any) -> str:
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def dumps_hardware(hardware: Mapping[str, Any]) -> str:
    """Encode a hardware record, expanding its metadata string into an object.

    Raises ValueError if the metadata is not JSON text of an object, and
    TypeError if it is not a string at all.
    """
    record = dict(hardware)
    raw = record.get("metadata")
    if raw:
        if not isinstance(raw, str):
            raise TypeError("hardware metadata must be a JSON string")
        metadata = json.loads(raw)
        if metadata is not None and not isinstance(metadata, dict):
            raise ValueError("hardware metadata must be a JSON object")
        record["metadata"] = metadata
    return _encode(record)


def loads_hardware(data: str | bytes) -> dict[str, Any]:
    """Decode a hardware record, folding its metadata object back into a string.

    Raises ValueError if the document is not a JSON object.
    """
    record = json.loads(data)
    if record is None:
        return {}
    if not isinstance(record, dict):
        raise ValueError("hardware document must be a JSON object")
    if "metadata" in record:
        record["metadata"] = _encode(record["metadata"])
    return record