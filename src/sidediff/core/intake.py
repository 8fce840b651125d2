"""Item intake: validation, previews, and per-type metadata for stored items"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, Optional


MAX_ITEM_BYTES = 10 * 1024 * 1024
PREVIEW_LENGTH = 100

METHOD_RE = re.compile(r'^([A-Z]+)\s+')
STATUS_RE = re.compile(r'^HTTP/[\d.]+\s+(\d+)')


class ItemType(str, Enum):
    """Where a stored item's text came from"""
    request = "request"
    response = "response"
    file = "file"
    clipboard = "clipboard"


def validate_item_data(data: str, max_bytes: int = MAX_ITEM_BYTES) -> list[str]:
    """Return a list of validation errors; empty when data is acceptable."""
    errors = []
    if not isinstance(data, str):
        return ["Data must be a string"]
    if len(data) == 0:
        errors.append("Data cannot be empty")
    if len(data) > max_bytes:
        errors.append(f"Data exceeds {max_bytes} character limit")
    return errors


def create_preview(data: str, max_length: int = PREVIEW_LENGTH) -> str:
    """Return data unchanged if short enough, else its first max_length chars plus '...'."""
    if len(data) <= max_length:
        return data
    return data[:max_length] + "..."


def request_method(raw: str) -> str:
    """Leading HTTP method of a raw request (e.g. 'GET'), or 'UNKNOWN'."""
    m = METHOD_RE.match(raw)
    return m.group(1) if m else "UNKNOWN"


def response_status(raw: str) -> str:
    """Status code of a raw HTTP response status line (e.g. '200'), or 'UNKNOWN'."""
    m = STATUS_RE.match(raw)
    return m.group(1) if m else "UNKNOWN"


def item_fields(
    data: str,
    item_type: ItemType,
    source: Optional[str] = None,
    metadata: Optional[dict[str, Any]] = None,
    preview_length: int = PREVIEW_LENGTH,
    ) -> dict[str, Any]:
    """Derive source, preview, and metadata for a new item of the given type.

    Caller-supplied metadata wins over derived keys.
    """
    item_type = ItemType(item_type)
    now = datetime.now().isoformat()
    derived: dict[str, Any] = {}

    if item_type == ItemType.request:
        method = request_method(data)
        source = source or "http_request"
        preview = f"{method} {source}"[:preview_length]
        derived = {"method": method, "url": source}
    elif item_type == ItemType.response:
        status = response_status(data)
        source = source or "http_response"
        preview = f"{status} {source}"[:preview_length]
        derived = {"status_code": status, "url": source}
    elif item_type == ItemType.file:
        source = source or "uploaded_file"
        preview = create_preview(data, preview_length)
        derived = {"filename": source, "uploaded_at": now}
    else:
        source = source or "clipboard"
        preview = create_preview(data, preview_length)
        derived = {"pasted_at": now}

    derived.update(metadata or {})
    return {"source": source, "preview": preview, "metadata": derived}
