"""String collation for non-index keys.

Two collations are supported:
- "unicode": Unicode Collation Algorithm (DUCET) via pyuca, so accented
  letters sort next to their base letter ("é" before "f").
- "codepoint": plain ``str`` ordering.

The pyuca collator parses its key table on construction, so it is built once
per process on first use and shared read-only afterwards.
"""

import logging
from functools import lru_cache
from typing import Literal, Tuple, get_args

from pyuca import Collator

logger = logging.getLogger(__name__)

CollationName = Literal["unicode", "codepoint"]

COLLATIONS: Tuple[str, ...] = get_args(CollationName)


@lru_cache(maxsize=1)
def _unicode_collator() -> Collator:
    logger.debug("Loading Unicode collation table")
    return Collator()


def collation_key(text: str, collation: CollationName = "unicode") -> tuple:
    """Return a sort key for ``text`` under the named collation.

    Strings that collate equal (e.g. differing only in ignorable characters)
    are separated by their code points so the resulting order is total.

    Args:
        text: Key text to order
        collation: "unicode" or "codepoint"

    Returns:
        Tuple usable as a ``sorted()`` key

    Raises:
        ValueError: If the collation name is unknown
    """
    if collation == "unicode":
        return (_unicode_collator().sort_key(text), text)
    elif collation == "codepoint":
        return ((), text)
    else:
        raise ValueError(
            f"Unknown collation {collation!r}. Expected one of: {', '.join(COLLATIONS)}"
        )
