from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .paths import concat_form_path, join_path
from .schema_nodes import ObjectNode, classify
from .walker import walk_schema


@dataclass(frozen=True)
class FormField:
    path: str
    schema: Mapping[str, Any]
    required: bool
    label: str


def list_form_fields(schema: Mapping[str, Any], root: str = '#') -> List[FormField]:
    """List the leaf fields of an object-chain schema, in declaration order.

    Paths are anchored at `root` ('#/address/zip'). Object properties are
    descended into; everything else becomes one field.
    """
    fields: List[FormField] = []

    def visit(node: Any, path: str) -> None:
        view = classify(node)
        if isinstance(view, ObjectNode):
            for name in view.properties:
                visit(view.properties[name], concat_form_path(path, name))
            return
        if path == root:
            return

        sub_schema, required, name = walk_schema(schema, path)
        label = sub_schema.get('title') or name
        fields.append(FormField(path=path, schema=sub_schema, required=required, label=label))

    visit(schema, root)
    return fields


def _flat_text(value: Any) -> str:
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


def flatten_form_object(data: Any, parent: Optional[List[str]] = None) -> Dict[str, str]:
    """Flatten a nested object into `path -> text` form data.

    This is the inverse of `reconstruct_form` up to numeric coercion: leaf
    values are rendered as the strings an input control would hold. Empty
    nested objects produce no keys.
    """
    parent = parent or []
    flat: Dict[str, str] = {}

    if isinstance(data, Mapping):
        for key, value in data.items():
            path = parent + [str(key)]
            if isinstance(value, Mapping):
                flat.update(flatten_form_object(value, path))
            else:
                flat[join_path(path)] = _flat_text(value)
    elif parent:
        flat[join_path(parent)] = _flat_text(data)

    return flat
