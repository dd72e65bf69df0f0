"""Canonicalizing traversal.

Walks a value depth-first and builds a copy in which every mapping is
re-inserted in canonical key order (see ``keys``). Lists keep their element
order. Atomics are returned as they are.

Traversal rules:
- The root is visited as member ``""`` of a synthetic ``{"": root}`` parent.
- The transform, if any, runs on every member before it is classified.
- Composites are memoized by identity. A produced container is registered
  when it is created, before its members are visited, so cycles and shared
  substructures resolve to the same produced object.
- An explicit frame stack replaces recursion; depth is limited by memory,
  not by ``sys.getrecursionlimit()``.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Hashable, Iterator, List, Optional, Tuple

from keysort.kernel.classify import Kind, classify
from keysort.kernel.collation import CollationName
from keysort.kernel.keys import sort_keys
from keysort.sentinels import OMIT

logger = logging.getLogger(__name__)

Transform = Callable[[Hashable, Any, Any], Any]


@dataclass
class _Frame:
    """A composite whose members are still being visited."""
    source: Any
    result: Any
    kind: Kind
    members: Iterator[Tuple[Hashable, Any]]


@dataclass
class WalkStats:
    """Counters for a single walk (used for debug logging and tests)."""
    composites: int = 0
    memo_hits: int = 0
    omitted: int = 0


def _list_members(value: list) -> Iterator[Tuple[int, Any]]:
    for i in range(len(value)):
        yield i, value[i]


def _map_members(value: Any, keys: List[Hashable]) -> Iterator[Tuple[Hashable, Any]]:
    for key in keys:
        yield key, value[key]


@dataclass
class Walker:
    """One canonicalization pass. Not reusable across top-level values."""
    transform: Optional[Transform] = None
    collation: CollationName = "unicode"
    stats: WalkStats = field(default_factory=WalkStats)
    _memo: Dict[int, Any] = field(default_factory=dict)
    # Originals are held so their ids cannot be reused mid-walk by objects
    # a transform creates and drops.
    _originals: List[Any] = field(default_factory=list)

    def run(self, root: Any) -> Any:
        wrapper = {"": root}
        produced, frame = self._visit("", root, wrapper)
        stack: List[_Frame] = [frame] if frame is not None else []

        while stack:
            top = stack[-1]
            member = next(top.members, None)
            if member is None:
                stack.pop()
                continue
            key, child = member
            produced_child, child_frame = self._visit(key, child, top.source)
            self._assign(top, key, produced_child)
            if child_frame is not None:
                stack.append(child_frame)

        logger.debug(
            "Canonicalized %d composites (%d memo hits, %d omitted)",
            self.stats.composites, self.stats.memo_hits, self.stats.omitted,
        )
        return produced

    def _visit(self, key: Hashable, value: Any, parent: Any) -> Tuple[Any, Optional[_Frame]]:
        """Transform and classify one member.

        Returns the produced value and, for a newly seen composite, the frame
        whose members still have to be visited.
        """
        if self.transform is not None:
            value = self.transform(key, value, parent)

        kind = classify(value)
        if kind is Kind.ATOMIC:
            return value, None

        ident = id(value)
        if ident in self._memo:
            self.stats.memo_hits += 1
            return self._memo[ident], None

        if kind is Kind.LIST:
            result: Any = [None] * len(value)
            members = _list_members(value)
        else:
            result = {}
            members = _map_members(value, sort_keys(value.keys(), self.collation))

        self._memo[ident] = result
        self._originals.append(value)
        self.stats.composites += 1
        return result, _Frame(source=value, result=result, kind=kind, members=members)

    def _assign(self, frame: _Frame, key: Hashable, produced: Any) -> None:
        if produced is OMIT:
            self.stats.omitted += 1
            # A list keeps its length; the hole reads as None.
            if frame.kind is Kind.LIST:
                frame.result[key] = None
            return
        frame.result[key] = produced


def walk(root: Any, transform: Optional[Transform] = None, collation: CollationName = "unicode") -> Any:
    """Canonicalize ``root`` with a fresh Walker."""
    return Walker(transform=transform, collation=collation).run(root)
