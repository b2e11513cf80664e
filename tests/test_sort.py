"""Test perceptual color ordering.

Tests for palettelab.core.sort:
    - The result is a permutation of the input
    - The walk starts at the darkest color
    - A shuffled gray ramp comes back in lightness order
    - Trivial inputs (empty, single color)

Run:
    pytest tests/test_sort.py -v
"""

import random
from collections import Counter

from palettelab.core import sort
from palettelab.core.color import Color

GRAYS = [Color.from_lab(L, 0.0, 0.0) for L in (10.0, 30.0, 50.0, 70.0, 90.0)]
MIXED = [
    Color(0.9, 0.2, 0.1),
    Color(0.1, 0.2, 0.8),
    Color(0.05, 0.05, 0.1),
    Color(0.95, 0.9, 0.3),
    Color(0.2, 0.7, 0.3),
    Color(0.85, 0.25, 0.15),
]


class TestSortedColors:
    def test_permutation(self) -> None:
        result = sort.sorted_colors(MIXED)
        assert len(result) == len(MIXED)
        assert Counter(result) == Counter(MIXED)

    def test_starts_at_darkest(self) -> None:
        assert sort.sorted_colors(MIXED)[0] == Color(0.05, 0.05, 0.1)

    def test_gray_ramp(self) -> None:
        shuffled = list(GRAYS)
        random.Random(5).shuffle(shuffled)
        assert sort.sorted_colors(shuffled) == GRAYS

    def test_input_untouched(self) -> None:
        colors = list(reversed(GRAYS))
        sort.sorted_colors(colors)
        assert colors == list(reversed(GRAYS))

    def test_duplicates_kept(self) -> None:
        colors = [GRAYS[2], GRAYS[0], GRAYS[2]]
        assert sort.sorted_colors(colors) == [GRAYS[0], GRAYS[2], GRAYS[2]]

    def test_trivial(self) -> None:
        assert sort.sorted_colors([]) == []
        assert sort.sorted_colors([GRAYS[3]]) == [GRAYS[3]]
        assert sort.sorted_colors((GRAYS[1],)) == [GRAYS[1]]


class TestDisjointSet:
    def test_union_find(self) -> None:
        forest = sort._DisjointSet(4)
        forest.union(0, 1)
        forest.union(2, 3)
        assert forest.find(0) == forest.find(1)
        assert forest.find(0) != forest.find(2)
        forest.union(1, 3)
        assert len({forest.find(i) for i in range(4)}) == 1
