from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

EMPTY_PATH = 'empty_path'
EMPTY_SEGMENT = 'empty_segment'
UNKNOWN_FIELD = 'unknown_field'
NOT_AN_OBJECT = 'not_an_object'
COERCION_FAILED = 'coercion_failed'
PATH_CONFLICT = 'path_conflict'


@dataclass(frozen=True)
class FormDiagnostic:
    """A schema/data mismatch noticed while rebuilding form data."""

    path: str
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


class SchemaFormError(ValueError):
    """Base class for errors raised by json_schema_form."""


class FormDataError(SchemaFormError):
    """Raised on request when reconstructed form data carries diagnostics."""

    def __init__(self, diagnostics: Sequence[FormDiagnostic]):
        self.diagnostics: Tuple[FormDiagnostic, ...] = tuple(diagnostics)
        summary = "; ".join(str(d) for d in self.diagnostics)
        super().__init__(f"{len(self.diagnostics)} form data problem(s): {summary}")


class ConfigurationError(SchemaFormError):
    """Raised for invalid application settings."""
