"""Rebuild nested JSON objects from flat, path-keyed form input.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- split slash-delimited form paths
- walk a JSON Schema to a field (sub-schema, required flag, name)
- rebuild nested, typed objects from flat form data
"""
import logging

from .errors import FormDataError, FormDiagnostic, SchemaFormError
from .paths import concat_form_path, split_path
from .reconstruct import ReconstructionResult, reconstruct_form, reconstruct_form_strict
from .schema_utils import FormField, flatten_form_object, list_form_fields
from .walker import PathInfo, walk_schema

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FormDataError",
    "FormDiagnostic",
    "FormField",
    "PathInfo",
    "ReconstructionResult",
    "SchemaFormError",
    "concat_form_path",
    "flatten_form_object",
    "list_form_fields",
    "reconstruct_form",
    "reconstruct_form_strict",
    "split_path",
    "walk_schema",
]
