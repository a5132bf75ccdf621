"""Divide-and-conquer tree over the rows of a sparse adjacency graph.

Rows are split recursively into independent parts plus a separator.
Rows of different parts share no edge. Separator rows are split again
one level deeper. Building the tree reorders the rows so that every
part and every separator occupies a contiguous range.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, MutableSequence, Sequence
from dataclasses import dataclass, field
from typing import Any

from dctree.partitioning import extract_local_adjacency, partition_kway
from dctree.permutation import SEPARATOR, create_permutation, permute_in_place


@dataclass
class DCNode:
    """A node of the tree; ``last_row`` is exclusive."""

    nb_parts: int = 0
    first_row: int = 0
    last_row: int = 0
    sons: list[DCNode | None] = field(default_factory=list)
    iso: DCNode | None = None


@dataclass(frozen=True)
class DCArgs:
    """Row range ``[first_row, last_row)`` handed to traversal callbacks."""

    first_row: int
    last_row: int


def _init_node(
    node: DCNode,
    first_row: int,
    last_row: int,
    counts: Sequence[int] = (),
    nb_iso: int = 0,
) -> None:
    node.first_row = first_row
    node.last_row = last_row + 1
    node.nb_parts = len(counts)
    node.sons = [DCNode() if count > 0 else None for count in counts]
    node.iso = DCNode() if counts and nb_iso > 0 else None


def classify_rows(
    row_part: Sequence[int],
    adjacency: Sequence[Sequence[int]],
    nb_parts: int,
) -> tuple[list[int], list[int], int]:
    """Move rows that touch another part into the separator.

    Rows are examined in order; a row becomes a separator row when one of
    its neighbours, not already a separator, lies in a different part.
    Returns the updated part list, the number of rows left in each part and
    the number of separator rows.
    """
    if len(row_part) != len(adjacency):
        raise ValueError(
            f"{len(row_part)} part entries for {len(adjacency)} adjacency rows"
        )
    part = list(row_part)
    counts = [0] * nb_parts
    nb_iso = 0
    for row, neighbours in enumerate(adjacency):
        own = part[row]
        if not 0 <= own < nb_parts:
            raise ValueError(f"row {row} has part {own} outside 0..{nb_parts - 1}")
        touches_other = any(
            part[n] != SEPARATOR and part[n] != own for n in neighbours
        )
        if touches_other:
            nb_iso += 1
            part[row] = SEPARATOR
        else:
            counts[own] += 1
    return part, counts, nb_iso


class DivideConquer:
    """Builds and walks a divide-and-conquer tree of graph rows."""

    def __init__(self, global_nb_row: int, nb_parts: int, level: int) -> None:
        if global_nb_row < 0:
            raise ValueError(f"row count must not be negative, got {global_nb_row}")
        if nb_parts < 1:
            raise ValueError(f"number of parts must be positive, got {nb_parts}")
        self.global_nb_row = global_nb_row
        self.nb_parts = nb_parts
        self.level = level
        self.root = DCNode()
        self._row_perm = list(range(global_nb_row))
        self._row_rev = list(range(global_nb_row))

    def build(
        self,
        adjacency: MutableSequence[MutableSequence[int]],
        values: MutableSequence[int],
    ) -> int:
        """Build the tree, reordering ``adjacency`` and ``values`` in place.

        Neighbour lists keep original row identifiers; they are pruned to
        the neighbours that lie in the same range at each level. Returns
        the first row of the last range that was not split further, or one
        past it when that range holds at most one row or has no separator.
        """
        n = self.global_nb_row
        if len(adjacency) != n or len(values) != n:
            raise ValueError(
                f"expected {n} rows, got {len(adjacency)} adjacency rows "
                f"and {len(values)} values"
            )
        self._row_perm = list(range(n))
        self._row_rev = list(range(n))
        self.root = DCNode()

        node = self.root
        first, last, depth = 0, n - 1, 0
        while True:
            local_nb_row = last - first + 1
            if depth >= self.level or local_nb_row <= 1:
                _init_node(node, first, last)
                return last + 1 if local_nb_row <= 1 else first

            local_adjacency, _ = extract_local_adjacency(
                adjacency, values, self._row_perm, first, last
            )
            parts = min(self.nb_parts, local_nb_row)
            row_part = partition_kway(local_adjacency, local_nb_row, parts)
            row_part, counts, nb_iso = classify_rows(row_part, local_adjacency, parts)
            local_perm = create_permutation(row_part, local_adjacency, self.nb_parts)

            for sequence in (adjacency, values, self._row_rev):
                permute_in_place(sequence, local_perm, first)
            for position, row in enumerate(self._row_rev[first:last + 1], start=first):
                self._row_perm[row] = position

            _init_node(node, first, last, counts, nb_iso)
            if nb_iso == local_nb_row:
                return first

            start = first
            for son, count in zip(node.sons, counts):
                if son is not None:
                    _init_node(son, start, start + count - 1)
                start += count

            if nb_iso == 0 or node.iso is None:
                return last + 1
            node = node.iso
            first = last - nb_iso + 1
            depth += 1

    def _segments(self, level: int | None) -> Iterator[DCArgs]:
        remaining = level
        node: DCNode | None = self.root
        while node is not None:
            for son in node.sons:
                if son is not None:
                    yield DCArgs(son.first_row, son.last_row)
            if node.nb_parts == 0:
                yield DCArgs(node.first_row, node.last_row)
            node = node.iso
            if remaining is not None:
                remaining -= 1
                if remaining == 0:
                    break

    def traverse(
        self,
        func: Callable[[Any, DCArgs], Any],
        user_args: Any = None,
        level: int | None = None,
    ) -> None:
        """Call ``func(user_args, args)`` for every leaf range.

        Parts of a node come first, then its separator is descended into.
        ``level`` limits how many separator levels are visited; ``None``
        visits them all.
        """
        for args in self._segments(level):
            func(user_args, args)

    def row_perm(self) -> list[int]:
        """Position of each original row after building."""
        return list(self._row_perm)

    def row_rev(self) -> list[int]:
        """Original row found at each position after building."""
        return list(self._row_rev)