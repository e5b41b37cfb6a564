"""Unknown-field passthrough.

Every decodable record keeps the document keys outside its known schema in
an insertion-ordered bucket, and writes them back after its known fields.
"""

import copy
from collections.abc import Iterable, Mapping
from typing import Any

__all__ = ["capture_extra", "emit_extra"]


def capture_extra(node: Mapping[str, Any], known_keys: Iterable[str]) -> dict[str, Any]:
    """Collect every key of ``node`` that is not a known field.

    Parameters
    ----------
    node : Mapping[str, Any]
        Document mapping being decoded.
    known_keys : Iterable[str]
        Keys claimed by the record's schema.

    Returns
    -------
    dict[str, Any]
        Remaining keys in document order, values deep-copied so the decoded
        record shares nothing with the input tree.
    """
    known = frozenset(known_keys)
    return {key: copy.deepcopy(value) for key, value in node.items() if key not in known}


def emit_extra(
    out: dict[str, Any],
    extra: Mapping[str, Any],
    known_keys: Iterable[str] = (),
) -> dict[str, Any]:
    """Append passthrough entries after the known fields already in ``out``.

    A passthrough key that names a known field (emitted or not) is dropped:
    the known-field interpretation always wins.

    Parameters
    ----------
    out : dict[str, Any]
        Document mapping with known fields already emitted.
    extra : Mapping[str, Any]
        Passthrough bucket, in decode order.
    known_keys : Iterable[str], optional
        Keys claimed by the record's schema.

    Returns
    -------
    dict[str, Any]
        ``out``, extended in place.
    """
    known = frozenset(known_keys)
    for key, value in extra.items():
        if key not in out and key not in known:
            out[key] = copy.deepcopy(value)
    return out
