"""Typed views over raw JSON Schema mappings.

Schemas arrive as plain dicts. `classify` wraps a node in one of three views
so traversal code can branch on the node kind instead of probing keys:

- ObjectNode: `type == "object"`, children under `properties`
- ScalarNode: any other declared `type` string
- UnknownNode: no usable `type` (None, non-mappings, untyped containers)

Views keep a reference to the raw mapping; nothing is copied.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple, Union

OBJECT = 'object'
INTEGER = 'integer'
NUMBER = 'number'

_EMPTY: Mapping[str, Any] = {}


@dataclass(frozen=True)
class ObjectNode:
    raw: Mapping[str, Any]
    properties: Mapping[str, Any] = field(default_factory=dict)
    required: Tuple[str, ...] = ()

    def child(self, name: str, leaf: bool = False) -> Optional[Mapping[str, Any]]:
        return _as_mapping(self.properties.get(name))

    def is_required(self, name: str) -> bool:
        return name in self.required


@dataclass(frozen=True)
class ScalarNode:
    raw: Mapping[str, Any]
    kind: str

    def child(self, name: str, leaf: bool = False) -> Optional[Mapping[str, Any]]:
        return None


@dataclass(frozen=True)
class UnknownNode:
    raw: Any = None

    def child(self, name: str, leaf: bool = False) -> Optional[Mapping[str, Any]]:
        """Look up a child of an untyped container.

        An untyped mapping with `properties` is read through them; otherwise
        the mapping itself is treated as a properties map: any entry can be
        a `leaf`, but only object-typed entries can be descended into.
        """
        if not isinstance(self.raw, Mapping):
            return None
        properties = self.raw.get('properties')
        if isinstance(properties, Mapping):
            return _as_mapping(properties.get(name))
        candidate = _as_mapping(self.raw.get(name))
        if candidate is not None and (leaf or candidate.get('type') == OBJECT):
            return candidate
        return None


SchemaNodeView = Union[ObjectNode, ScalarNode, UnknownNode]


def _as_mapping(value: Any) -> Optional[Mapping[str, Any]]:
    return value if isinstance(value, Mapping) else None


def _required_names(raw: Mapping[str, Any]) -> Tuple[str, ...]:
    required = raw.get('required')
    if isinstance(required, (list, tuple)):
        return tuple(name for name in required if isinstance(name, str))
    return ()


def classify(node: Any) -> SchemaNodeView:
    """Wrap a raw schema node in its typed view."""
    if not isinstance(node, Mapping) or not node:
        return UnknownNode(node)

    node_type = node.get('type')
    if node_type == OBJECT:
        properties = node.get('properties')
        if not isinstance(properties, Mapping):
            properties = _EMPTY
        return ObjectNode(raw=node, properties=properties, required=_required_names(node))
    if isinstance(node_type, str):
        return ScalarNode(raw=node, kind=node_type)
    return UnknownNode(node)


def declared_type(node: Any) -> Optional[str]:
    """Return the `type` tag of a schema node, or None when it has none."""
    view = classify(node)
    if isinstance(view, ObjectNode):
        return OBJECT
    if isinstance(view, ScalarNode):
        return view.kind
    return None
