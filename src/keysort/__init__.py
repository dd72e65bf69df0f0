"""keysort: deterministic key ordering for nested data before serialization."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("keysort")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from keysort.api import canonicalize, CanonicalizeOptions
from keysort.kernel.keys import compare_keys
from keysort.sentinels import OMIT

__all__ = [
    "__version__",
    "canonicalize",
    "CanonicalizeOptions",
    "compare_keys",
    "OMIT",
]
