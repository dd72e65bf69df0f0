"""Public API for the keysort package.

Callers should use these functions instead of importing from keysort.kernel.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict

from keysort.kernel.collation import CollationName
from keysort.kernel.walker import Transform, walk


class CanonicalizeOptions(BaseModel):
    """Per-call canonicalization settings."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    collation: CollationName = "unicode"  # "unicode" (UCA) | "codepoint"


def _resolve_options(
    options: Union[CanonicalizeOptions, Dict[str, Any], None]
) -> CanonicalizeOptions:
    """Normalize options input to a CanonicalizeOptions model."""
    if options is None:
        return CanonicalizeOptions()
    elif isinstance(options, CanonicalizeOptions):
        return options
    else:
        return CanonicalizeOptions(**options)


def canonicalize(
    value: Any,
    transform: Optional[Transform] = None,
    *,
    options: Union[CanonicalizeOptions, Dict[str, Any], None] = None,
) -> Any:
    """
    Return a deep copy of ``value`` with every mapping in canonical key order.

    Rules:
    - Index keys ("0", "1", ...) first, ascending numerically
    - Remaining keys by Unicode collation (or code point order)
    - Lists keep their element order
    - Atomics (scalars, bytes, datetimes, patterns, tuples, ...) returned as-is
    - Cycles and shared substructures are preserved by identity, not unrolled

    Args:
        value: Any value; the input is never mutated
        transform: Optional ``transform(key, value, parent)`` called for every
            member (the root as key ``""`` of ``{"": value}``) before it is
            classified. Return the value to keep it, a new value to replace it,
            or ``keysort.OMIT`` to drop it (list members become None).
        options: CanonicalizeOptions or a dict of its fields

    Returns:
        The canonicalized copy, or ``OMIT`` if the transform dropped the root

    Raises:
        TypeError: If transform is not callable
        pydantic.ValidationError: If options are invalid
        Any exception raised by transform, unchanged
    """
    if transform is not None and not callable(transform):
        raise TypeError(f"transform must be callable, got {type(transform).__name__}")
    opts = _resolve_options(options)
    return walk(value, transform=transform, collation=opts.collation)
