import pytest
from hypothesis import given, strategies as st

from dctree.partitioning import (
    build_nodal_graph,
    extract_local_adjacency,
    partition_kway,
)


def _path(n):
    return [[j for j in (i - 1, i + 1) if 0 <= j < n] for i in range(n)]


@st.composite
def graphs(draw):
    n = draw(st.integers(min_value=1, max_value=25))
    edges = draw(
        st.lists(
            st.tuples(
                st.integers(min_value=0, max_value=n - 1),
                st.integers(min_value=0, max_value=n - 1),
            ),
            max_size=60,
        )
    )
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        if a != b and b not in adjacency[a]:
            adjacency[a].append(b)
            adjacency[b].append(a)
    return adjacency


def test_nodal_graph_slices_match_rows():
    adjacency = [[1, 2], [0], [], [0, 1, 2]]
    index, values = build_nodal_graph(adjacency)
    assert len(index) == len(adjacency) + 1
    assert index[0] == 0
    assert index[-1] == len(values)
    for i, row in enumerate(adjacency):
        assert values[index[i]:index[i + 1]] == row


def test_nodal_graph_empty_edges():
    index, values = build_nodal_graph([[], [], []])
    assert index == [0, 0, 0, 0]
    assert values == []


@given(graphs())
def test_nodal_graph_round_trip(adjacency):
    index, values = build_nodal_graph(adjacency)
    rebuilt = [values[a:b] for a, b in zip(index, index[1:])]
    assert rebuilt == adjacency


def test_extract_local_identity_perm():
    adjacency = _path(4)
    values = [10, 20, 30, 40]
    local, local_values = extract_local_adjacency(
        adjacency, values, [0, 1, 2, 3], 1, 2
    )
    assert local == [[1], [0]]
    assert local_values == [20, 30]
    assert adjacency[1] == [2]
    assert adjacency[2] == [1]
    assert adjacency[0] == [1]
    assert adjacency[3] == [2]


@given(graphs())
def test_extract_full_range_keeps_everything(adjacency):
    n = len(adjacency)
    original = [list(row) for row in adjacency]
    local, local_values = extract_local_adjacency(
        adjacency, list(range(n)), list(range(n)), 0, n - 1
    )
    assert local == original
    assert adjacency == original
    assert local_values == list(range(n))


def test_partition_path_worked_example():
    assert partition_kway(_path(4), 4, 2) == [0, 0, 0, 1]


def test_partition_single_part():
    assert partition_kway(_path(5), 5, 1) == [0] * 5


def test_partition_rejects_zero_parts():
    with pytest.raises(ValueError):
        partition_kway(_path(3), 3, 0)


@given(graphs(), st.integers(min_value=1, max_value=6))
def test_partition_invariants(adjacency, k):
    n = len(adjacency)
    k = min(k, n)
    part = partition_kway(adjacency, n, k)
    assert len(part) == n
    assert all(0 <= p < k for p in part)
    assert part[0] == 0