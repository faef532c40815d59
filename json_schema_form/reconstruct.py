from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from . import errors
from .coercion import is_nan, parse_float, parse_int
from .errors import FormDataError, FormDiagnostic
from .paths import split_path
from .schema_nodes import INTEGER, NUMBER, ScalarNode, classify, declared_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReconstructionResult:
    value: Dict[str, Any]
    diagnostics: Tuple[FormDiagnostic, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    def raise_for_diagnostics(self) -> Dict[str, Any]:
        if self.diagnostics:
            raise FormDataError(self.diagnostics)
        return self.value


def coerce_value(raw: Any, field_schema: Optional[Mapping[str, Any]]) -> Any:
    """Convert a raw input value according to its field's declared type."""
    field_type = declared_type(field_schema)
    if field_type == INTEGER:
        return parse_int(raw)
    if field_type == NUMBER:
        return parse_float(raw)
    return raw


def _get_or_insert_object(container: Dict[str, Any], name: str) -> Optional[Dict[str, Any]]:
    if name not in container:
        container[name] = {}
    existing = container[name]
    if not isinstance(existing, dict):
        return None
    return existing


def _place_value(
    result: Dict[str, Any],
    schema: Mapping[str, Any],
    key: str,
    raw: Any,
    diagnostics: List[FormDiagnostic],
) -> None:
    segments = split_path(key)
    if not segments:
        diagnostics.append(FormDiagnostic(key, errors.EMPTY_PATH, "path has no segments"))
        return
    if '' in segments:
        diagnostics.append(FormDiagnostic(key, errors.EMPTY_SEGMENT, "path contains an empty segment"))

    out = result
    schema_node: Any = schema
    last = len(segments) - 1

    for i, segment in enumerate(segments):
        child = None
        if schema_node is not None:
            view = classify(schema_node)
            child = view.child(segment, leaf=i == last)
            if child is None:
                if isinstance(view, ScalarNode):
                    message = f"{view.kind!r} field has no child {segment!r}"
                    diagnostics.append(FormDiagnostic(key, errors.NOT_AN_OBJECT, message))
                else:
                    message = f"no schema for segment {segment!r}"
                    diagnostics.append(FormDiagnostic(key, errors.UNKNOWN_FIELD, message))

        if i == last:
            if isinstance(out.get(segment), dict):
                message = f"value replaces nested object {segment!r}"
                diagnostics.append(FormDiagnostic(key, errors.PATH_CONFLICT, message))
            value = coerce_value(raw, child)
            if is_nan(value):
                message = f"cannot read {raw!r} as {declared_type(child)}"
                diagnostics.append(FormDiagnostic(key, errors.COERCION_FAILED, message))
            out[segment] = value
            return

        nested = _get_or_insert_object(out, segment)
        if nested is None:
            message = f"{segment!r} already holds a value"
            diagnostics.append(FormDiagnostic(key, errors.PATH_CONFLICT, message))
            return
        out = nested
        schema_node = child


def reconstruct_form_strict(schema: Mapping[str, Any], data: Mapping[str, Any]) -> ReconstructionResult:
    """Rebuild nested form data and report every mismatch found on the way.

    The value is identical to `reconstruct_form`; mismatches are returned as
    diagnostics rather than only logged.
    """
    result: Dict[str, Any] = {}
    diagnostics: List[FormDiagnostic] = []
    for key in sorted(data):
        _place_value(result, schema, key, data[key], diagnostics)
    return ReconstructionResult(result, tuple(diagnostics))


def reconstruct_form(schema: Mapping[str, Any], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild a nested object from flat `path -> raw value` form data.

    Keys are processed in sorted order. Each key's segments are followed
    through the output and the schema together; missing intermediate
    objects are created and the leaf value is coerced by the schema type
    (`integer`, `number`). Unknown fields pass through unchanged and
    unparsable numbers become NaN; nothing here raises.
    """
    outcome = reconstruct_form_strict(schema, data)
    for diagnostic in outcome.diagnostics:
        logger.debug("Form data degraded at %s (%s)", diagnostic, diagnostic.kind)
    return outcome.value
