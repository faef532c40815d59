from __future__ import annotations

import math
from typing import Any, Dict, List

import gradio as gr

from .io_utils import read_json_object
from .paths import concat_form_path
from .reconstruct import reconstruct_form_strict
from .schema_utils import FormField, flatten_form_object, list_form_fields


def field_label(field: FormField) -> str:
    return f"{field.label} *" if field.required else field.label


def to_json_safe(value: Any) -> Any:
    """Replace NaN/Infinity (not representable in JSON) with None."""
    if isinstance(value, dict):
        return {k: to_json_safe(v) for k, v in value.items()}
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def blank_form_values(fields) -> Dict[str, str]:
    """Every field of the form, as an untouched input control reports it."""
    return {f.path: "" for f in fields}


def prepare_schema_payload(file_obj):
    if file_obj is None:
        return None, {}, gr.update(interactive=False), "No schema uploaded."

    try:
        schema = read_json_object(file_obj, "Schema")
    except (ValueError, OSError) as e:
        return None, {}, gr.update(interactive=False), f"Error parsing schema: {str(e)}"

    fields = list_form_fields(schema)
    required = sum(1 for f in fields if f.required)
    message = f"Schema loaded. Found {len(fields)} fields ({required} required)."
    return schema, blank_form_values(fields), gr.update(interactive=bool(fields)), message


def load_default_values(file_obj, schema):
    """Seed form values from an example JSON instance.

    Fields the instance does not cover stay blank.
    """
    if schema is None:
        return {}, "Upload a schema first."

    values = blank_form_values(list_form_fields(schema))
    if file_obj is None:
        return values, "No default values uploaded."

    try:
        instance = read_json_object(file_obj, "Default values")
    except (ValueError, OSError) as e:
        return values, f"Error parsing default values: {str(e)}"

    loaded = 0
    for path, text in flatten_form_object(instance).items():
        field_path = concat_form_path('#', path)
        if field_path in values:
            values[field_path] = text
            loaded += 1
    return values, f"Loaded {loaded} default values."


def copy_form_values(values):
    return dict(values or {})


def update_form_value(path: str, value: Any, current_values):
    updated = dict(current_values or {})
    updated[path] = value
    return updated


def diagnostics_table(diagnostics) -> List[List[str]]:
    return [[d.path, d.kind, d.message] for d in diagnostics]


def submit_form_handler(schema, form_values):
    if schema is None:
        return None, [], "Upload a schema first."

    values: Dict[str, Any] = dict(form_values or {})
    outcome = reconstruct_form_strict(schema, values)
    rows = diagnostics_table(outcome.diagnostics)
    if outcome.ok:
        status = "Form data rebuilt."
    else:
        status = f"Form data rebuilt with {len(rows)} problem(s)."
    return to_json_safe(outcome.value), rows, status

