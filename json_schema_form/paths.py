from __future__ import annotations

from typing import Iterable, List

ROOT_MARKER = '#'
SEPARATOR = '/'


def split_path(path: str) -> List[str]:
    """Split a form path on '/' into its segments.

    A leading '#' root anchor and the empty segment left by a trailing
    separator are dropped. Empty interior segments ('a//b') are kept.
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)

    parts = path.split(SEPARATOR)
    if parts[0] == ROOT_MARKER:
        parts.pop(0)
    if parts and parts[-1] == '':
        parts.pop()
    return parts


def concat_form_path(path: str, node: str) -> str:
    return f"{path}{SEPARATOR}{node}"


def join_path(segments: Iterable[str]) -> str:
    return SEPARATOR.join(str(s) for s in segments)
