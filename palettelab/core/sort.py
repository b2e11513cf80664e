#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: palettelab/core/sort.py

from typing import Dict, List, Sequence, Tuple

from .color import Color
from .difference import distance_ciede2000

Edge = Tuple[int, int]


class _DisjointSet:
    """Disjoint-set forest over 0..n-1 with path halving and union by rank."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, i: int) -> int:
        while self.parent[i] != i:
            self.parent[i] = self.parent[self.parent[i]]
            i = self.parent[i]
        return i

    def union(self, i: int, j: int) -> None:
        ri, rj = self.find(i), self.find(j)
        if ri == rj:
            return
        if self.rank[ri] < self.rank[rj]:
            self.parent[ri] = rj
        elif self.rank[ri] > self.rank[rj]:
            self.parent[rj] = ri
        else:
            self.parent[rj] = ri
            self.rank[ri] += 1


def _sorted_edges(colors: Sequence[Color]) -> List[Edge]:
    """All pairs (u, v) with u < v, by increasing CIEDE2000 distance."""
    dists: Dict[Edge, float] = {}
    n = len(colors)
    for u in range(n - 1):
        for v in range(u + 1, n):
            dists[(u, v)] = distance_ciede2000(colors[u], colors[v])
    # Stable: ties keep pair order
    return sorted(dists, key=dists.get)


def _min_span_tree(n: int, edges: List[Edge]) -> Dict[int, List[int]]:
    """Kruskal's algorithm. Returns sorted neighbor lists of the tree."""
    forest = _DisjointSet(n)
    neighbors: Dict[int, List[int]] = {i: [] for i in range(n)}
    for u, v in edges:
        if forest.find(u) == forest.find(v):
            continue
        neighbors[u].append(v)
        neighbors[v].append(u)
        forest.union(u, v)
    for vs in neighbors.values():
        vs.sort()
    return neighbors


def _preorder(neighbors: Dict[int, List[int]], root: int) -> List[int]:
    order: List[int] = []
    visited = set()
    stack = [root]
    while stack:
        u = stack.pop()
        if u in visited:
            continue
        visited.add(u)
        order.append(u)
        stack.extend(v for v in reversed(neighbors[u]) if v not in visited)
    return order


def _darkest_index(colors: Sequence[Color]) -> int:
    black = Color(0.0, 0.0, 0.0)
    best, best_d = 0, float("inf")
    for i, color in enumerate(colors):
        d = distance_ciede2000(black, color)
        if d < best_d:
            best, best_d = i, d
    return best


def sorted_colors(colors: Sequence[Color]) -> List[Color]:
    """
    Order colors so that neighbors in the list look alike.

    Colors have no natural order, so this builds a minimum spanning tree
    over the pairwise CIEDE2000 distances and walks it depth first from
    the darkest color. The result is a permutation of the input; the input
    is left untouched.
    """
    if len(colors) < 2:
        return list(colors)

    neighbors = _min_span_tree(len(colors), _sorted_edges(colors))
    return [colors[i] for i in _preorder(neighbors, _darkest_index(colors))]
