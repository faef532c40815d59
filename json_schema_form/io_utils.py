from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


def _read_text(file_obj) -> str:
    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        return content.decode('utf-8') if isinstance(content, bytes) else content
    return Path(getattr(file_obj, 'name', file_obj)).read_text(encoding='utf-8')


def read_json_object(file_obj, label: str = "Document") -> Dict[str, Any]:
    """Parse an uploaded file, or a file path, holding a JSON object.

    Raises ValueError when nothing was uploaded, the content is not JSON,
    or its top level is not an object.
    """
    if file_obj is None:
        raise ValueError("No file uploaded.")

    document: Any = json.loads(_read_text(file_obj))
    if not isinstance(document, dict):
        raise ValueError(f"{label} must be a JSON object.")
    return document
