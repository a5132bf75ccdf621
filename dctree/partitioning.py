"""Graph extraction and greedy k-way partitioning of row adjacency graphs."""

from __future__ import annotations

from itertools import accumulate
from typing import MutableSequence, Sequence


def build_nodal_graph(
    adjacency: Sequence[Sequence[int]],
) -> tuple[list[int], list[int]]:
    """Flatten an adjacency list into compressed (index, value) arrays.

    ``index`` has one more entry than there are rows; the neighbours of
    row ``i`` are ``values[index[i]:index[i + 1]]``.
    """
    index = [0, *accumulate(len(row) for row in adjacency)]
    values = [neighbour for row in adjacency for neighbour in row]
    return index, values


def extract_local_adjacency(
    adjacency: MutableSequence[MutableSequence[int]],
    values: Sequence[int],
    row_perm: Sequence[int],
    first_row: int,
    last_row: int,
) -> tuple[list[list[int]], list[int]]:
    """Build the subgraph induced by rows ``first_row..last_row`` (inclusive).

    Neighbours are global row identifiers mapped to their current position
    through ``row_perm``; only those whose position lies inside the range are
    kept. The global adjacency rows of the range are pruned in place to the
    same kept neighbours. Returns the local adjacency, indexed from zero,
    and the local row values.
    """
    local_adjacency: list[list[int]] = []
    local_values: list[int] = []
    for row in range(first_row, last_row + 1):
        kept_global: list[int] = []
        kept_local: list[int] = []
        for neighbour in adjacency[row]:
            position = row_perm[neighbour]
            if first_row <= position <= last_row:
                kept_global.append(neighbour)
                kept_local.append(position - first_row)
        adjacency[row][:] = kept_global
        local_adjacency.append(kept_local)
        local_values.append(values[row])
    return local_adjacency, local_values


def partition_kway(
    adjacency: Sequence[Sequence[int]], n: int, k: int
) -> list[int]:
    """Split ``n`` rows into ``k`` parts by breadth-first growth.

    Each part is grown from the lowest unassigned row until it reaches
    ``n // k`` rows; rows never reached end up in the last part.
    """
    if k <= 0:
        raise ValueError(f"number of parts must be positive, got {k}")
    part = [-1] * n
    max_row = n // k
    first = 0
    for current in range(k):
        queue: list[int] = []
        head = 0
        while True:
            seeded = False
            while first < n:
                if part[first] == -1:
                    queue.append(first)
                    part[first] = current
                    seeded = True
                    break
                first += 1
            while head < len(queue):
                row = queue[head]
                head += 1
                if len(queue) >= max_row:
                    break
                for neighbour in adjacency[row]:
                    if part[neighbour] == -1:
                        queue.append(neighbour)
                        part[neighbour] = current
                        if len(queue) >= max_row:
                            break
            if not (len(queue) <= max_row and seeded):
                break
        first += 1
    return [k - 1 if p == -1 else p for p in part]