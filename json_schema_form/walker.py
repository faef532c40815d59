from __future__ import annotations

import logging
from typing import Any, Mapping, NamedTuple

from .paths import split_path
from .schema_nodes import ObjectNode, classify

logger = logging.getLogger(__name__)


class PathInfo(NamedTuple):
    sub_schema: Mapping[str, Any]
    is_required: bool
    name: str


def walk_schema(schema: Mapping[str, Any], path: str) -> PathInfo:
    """Descend `schema` along `path` and describe the field found there.

    Returns the sub-schema at the path (the original mapping, not a copy),
    whether the last visited segment is listed in its parent's `required`,
    and that segment's name. Descending through anything other than an
    object node stops the walk and yields an empty sub-schema.
    """
    current: Any = schema
    is_required = False
    name = ''

    for segment in split_path(path):
        view = classify(current)
        if not isinstance(view, ObjectNode):
            logger.debug("Path %r leaves the object chain before %r", path, segment)
            current = {}
            break
        is_required = view.is_required(segment)
        name = segment
        current = view.properties.get(segment)

    if not isinstance(current, Mapping):
        current = {}
    return PathInfo(current, is_required, name)
