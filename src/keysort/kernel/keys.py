"""Canonical ordering of mapping keys.

Key rules:
- Keys are compared by their text form, coerced the way ``json.dumps`` coerces
  mapping keys (``True`` -> "true", ``None`` -> "null", ``1`` -> "1").
- Index keys ("0", "1", "42", up to 2**31 - 1) sort first, numerically.
- All other keys follow, ordered by collation (see ``collation``).
- Distinct keys with identical text (``1`` and ``"1"``) are ordered by type
  name, then by ``repr()``, so the order stays strict for distinguishable keys.
"""

import math
import re
from typing import Any, Hashable, Iterable, List, Optional

from keysort.kernel.collation import CollationName, collation_key

INDEX_KEY_MAX = 2**31 - 1

_INDEX_KEY_RE = re.compile(r"0|[1-9][0-9]*")


def key_text(key: Any) -> str:
    """Coerce a mapping key to the text a JSON serializer would emit for it."""
    if isinstance(key, str):
        return key
    elif key is True:
        return "true"
    elif key is False:
        return "false"
    elif key is None:
        return "null"
    elif isinstance(key, int):
        return int.__repr__(key)
    elif isinstance(key, float):
        if math.isnan(key):
            return "NaN"
        elif math.isinf(key):
            return "Infinity" if key > 0 else "-Infinity"
        return float.__repr__(key)
    else:
        return str(key)


def index_value(text: str) -> Optional[int]:
    """Return the integer an index key denotes, or None if ``text`` is not one.

    An index key is the canonical decimal spelling of an integer in
    ``0..2**31-1``: no sign, no leading zeros, no fraction.
    """
    if not _INDEX_KEY_RE.fullmatch(text):
        return None
    n = int(text)
    if n > INDEX_KEY_MAX:
        return None
    return n


def is_index_key(text: str) -> bool:
    return index_value(text) is not None


def _type_tag(key: Any) -> str:
    cls = type(key)
    return f"{cls.__module__}.{cls.__qualname__}"


def _tiebreak_repr(key: Any) -> str:
    # str and int keys are already distinguished by their text.
    if isinstance(key, (str, int)):
        return ""
    return repr(key)


def canonical_sort_key(key: Hashable, collation: CollationName = "unicode") -> tuple:
    """Build the ``sorted()`` key implementing canonical key order.

    Keys whose text, type and ``repr()`` all coincide (two distinct
    ``float("nan")`` objects, or instances of one class with the same
    ``repr()``) still compare equal and keep their input order.

    Args:
        key: Mapping key (any hashable)
        collation: Collation used for non-index keys

    Returns:
        Tuple whose natural ordering is the canonical order
    """
    text = key_text(key)
    tag = _type_tag(key)
    n = index_value(text)
    if n is not None:
        return (0, n, tag, _tiebreak_repr(key))
    return (1, collation_key(text, collation), tag, _tiebreak_repr(key))


def compare_keys(a: Hashable, b: Hashable, collation: CollationName = "unicode") -> int:
    """Compare two keys in canonical order.

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, 0 if equivalent
    """
    ka = canonical_sort_key(a, collation)
    kb = canonical_sort_key(b, collation)
    return (ka > kb) - (ka < kb)


def sort_keys(keys: Iterable[Hashable], collation: CollationName = "unicode") -> List[Hashable]:
    """Return ``keys`` as a new list in canonical order."""
    return sorted(keys, key=lambda k: canonical_sort_key(k, collation))
