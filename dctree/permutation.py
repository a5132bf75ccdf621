"""Row permutations derived from partitions."""

from __future__ import annotations

from collections import deque
from typing import MutableSequence, Sequence

SEPARATOR = 1_000_000_000
"""Part marker for rows that touch more than one part."""


def create_permutation(
    part: Sequence[int],
    adjacency: Sequence[Sequence[int]],
    nb_parts: int,
) -> list[int]:
    """Order rows by part, separator rows last, each part in BFS order.

    Within a part rows are visited breadth-first from the lowest unvisited
    row, following only neighbours of the same part. Returns ``perm`` where
    ``perm[i]`` is the row placed at position ``i``.
    """
    groups: list[list[int]] = [[] for _ in range(nb_parts + 1)]
    for row, p in enumerate(part):
        if p == SEPARATOR:
            groups[nb_parts].append(row)
        elif 0 <= p < nb_parts:
            groups[p].append(row)
        else:
            raise ValueError(f"row {row} has unknown part {p}")

    visited = [False] * len(part)
    perm: list[int] = []
    for rows in groups:
        for start in rows:
            if visited[start]:
                continue
            visited[start] = True
            queue = deque([start])
            while queue:
                row = queue.popleft()
                perm.append(row)
                for neighbour in adjacency[row]:
                    if visited[neighbour] or part[neighbour] != part[start]:
                        continue
                    visited[neighbour] = True
                    queue.append(neighbour)
    return perm


def permute_in_place(
    sequence: MutableSequence, perm: Sequence[int], offset: int
) -> None:
    """Reorder ``sequence[offset:offset + len(perm)]`` so that position
    ``offset + i`` receives the old item at ``offset + perm[i]``."""
    window = [sequence[p + offset] for p in perm]
    sequence[offset:offset + len(perm)] = window