"""Immutable prefix tree (trie) keyed by sequences.

A tree is one of three node kinds:

- ``EMPTY``: the empty tree. It only appears at the root, never as a branch.
- ``Interior``: a branch map plus an optional payload.
- ``Leaf``: a payload and nothing else.

Trees are values. ``merge``, ``build`` and ``with_path`` return new trees and
never modify their operands, so a finished tree can be shared freely between
threads.
"""

from collections.abc import Callable, Hashable, Iterable, Mapping
from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar


K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

ConflictResolver = Callable[[Any, Any], Any]


class PrefixTreeConflictError(ValueError):
    """Two payloads were installed at the same path."""

    def __init__(self, old: Any, new: Any, message: str | None = None):
        self.old = old
        self.new = new
        super().__init__(message or f"Conflicting payloads: {old!r} and {new!r}")


def replace_payload(old: Any, new: Any) -> Any:
    """Default conflict resolver: the incoming payload wins."""
    return new


@dataclass(frozen=True)
class PositionedPayload(Generic[V]):
    """A payload found at `position` elements along a probed path."""

    payload: V
    position: int


class PrefixTree(Generic[K, V]):
    """Base class of the three node kinds."""

    __slots__ = ()

    def lookup(self, path: Iterable[K]) -> V | None:
        """
        Answer the payload installed at exactly `path`.

        Args:
            path: Sequence of keys to walk

        Returns:
            The payload, or None if the path diverges or carries no payload
        """
        node: PrefixTree[K, V] | None = self
        for component in path:
            if not isinstance(node, Interior):
                return None
            node = node.branches.get(component)
            if node is None:
                return None
        if isinstance(node, (Interior, Leaf)):
            return node.payload
        return None

    def __getitem__(self, path: Iterable[K]) -> V | None:
        return self.lookup(path)

    def __contains__(self, path: Iterable[K]) -> bool:
        return self.lookup(path) is not None

    def all_payloads_along(self, path: Iterable[K]) -> list[PositionedPayload[V]]:
        """
        Answer every payload found while walking `path`.

        A payload sitting on a node is recorded before descending out of it,
        at the number of elements consumed so far. Results are therefore
        ordered shortest match first; the last entry is the longest match.

        Args:
            path: Sequence of keys to walk

        Returns:
            List of positioned payloads
        """
        payloads: list[PositionedPayload[V]] = []
        node: PrefixTree[K, V] | None = self
        position = 0
        for component in path:
            if isinstance(node, Interior):
                if node.payload is not None:
                    payloads.append(PositionedPayload(node.payload, position))
                node = node.branches.get(component)
            elif isinstance(node, Leaf):
                payloads.append(PositionedPayload(node.payload, position))
                return payloads
            else:
                return payloads
            position += 1
        if isinstance(node, (Interior, Leaf)) and node.payload is not None:
            payloads.append(PositionedPayload(node.payload, position))
        return payloads

    def merge(
        self,
        other: "PrefixTree[K, V]",
        on_conflict: ConflictResolver = replace_payload,
    ) -> "PrefixTree[K, V]":
        """
        Answer the structural union of the receiver and `other`.

        Args:
            other: Tree to merge in
            on_conflict: Called as ``on_conflict(old, new)`` when both trees
                carry a payload at the same path. May raise to abort.

        Returns:
            The merged tree
        """
        if other is EMPTY:
            return self
        if self is EMPTY:
            return other
        if isinstance(self, Leaf) and isinstance(other, Leaf):
            return Leaf(on_conflict(self.payload, other.payload))
        if isinstance(self, Leaf) and isinstance(other, Interior):
            if other.payload is None:
                return Interior(other.branches, self.payload)
            return Interior(other.branches, on_conflict(self.payload, other.payload))
        if isinstance(self, Interior) and isinstance(other, Leaf):
            if self.payload is None:
                return Interior(self.branches, other.payload)
            return Interior(self.branches, on_conflict(self.payload, other.payload))

        assert isinstance(self, Interior) and isinstance(other, Interior)
        if self.payload is None:
            payload = other.payload
        elif other.payload is None:
            payload = self.payload
        else:
            payload = on_conflict(self.payload, other.payload)
        branches = dict(self.branches)
        for key, subtree in other.branches.items():
            if key in branches:
                branches[key] = branches[key].merge(subtree, on_conflict)
            else:
                branches[key] = subtree
        return Interior(branches, payload)

    def with_path(self, path: Iterable[K], payload: V) -> "PrefixTree[K, V]":
        """Answer a copy with `payload` installed at `path`, replacing any existing one."""
        return self.merge(PrefixTree.build(path, payload), replace_payload)

    @staticmethod
    def build(path: Iterable[K], payload: V) -> "PrefixTree[K, V]":
        """
        Build a single-path tree that culminates in `payload`.

        An empty path yields a leaf directly.
        """
        components = list(path)
        tree: PrefixTree[K, V] = Leaf(payload)
        for component in reversed(components):
            tree = Interior({component: tree}, None)
        return tree

    @staticmethod
    def build_all(paths: Mapping[Any, V]) -> "PrefixTree[K, V]":
        """
        Build a tree equivalent to the mapping from paths to payloads.

        Raises:
            PrefixTreeConflictError: if two entries land on the same path
        """
        return reduce(
            lambda tree, item: tree.merge(PrefixTree.build(item[0], item[1]), _refuse_conflict),
            paths.items(),
            EMPTY,
        )

    def describe(self, indent: str = "\t") -> str:
        """Render the tree as an indented outline, branches sorted by key."""
        lines: list[str] = []
        self._describe_into(lines, 0, indent)
        return "".join(lines)

    def _describe_into(self, lines: list[str], level: int, indent: str) -> None:
        prefix = indent * level
        if isinstance(self, Interior):
            label = "«nil»" if self.payload is None else str(self.payload)
            lines.append(f"{prefix}* {label}\n")
            for key, subtree in sorted(self.branches.items(), key=lambda item: item[0]):
                lines.append(f"{prefix}- {key}:\n")
                subtree._describe_into(lines, level + 1, indent)
        elif isinstance(self, Leaf):
            lines.append(f"{prefix}* {self.payload}\n")
        else:
            lines.append(f"{prefix}- «empty tree»\n")

    def __str__(self) -> str:
        return self.describe()


def _refuse_conflict(old: Any, new: Any) -> Any:
    raise PrefixTreeConflictError(old, new)


class _Empty(PrefixTree[Any, Any]):
    """The empty tree. Use the ``EMPTY`` singleton."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "EMPTY"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _Empty)

    def __hash__(self) -> int:
        return hash(_Empty)


EMPTY: PrefixTree[Any, Any] = _Empty()


@dataclass(frozen=True, eq=True)
class Interior(PrefixTree[K, V]):
    """A node with branches and an optional payload."""

    branches: Mapping[K, PrefixTree[K, V]]
    payload: V | None = None


@dataclass(frozen=True, eq=True)
class Leaf(PrefixTree[K, V]):
    """A node with a payload and no branches."""

    payload: V
