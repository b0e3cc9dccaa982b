"""
Equivalent-state analysis for complete DFAs (table-filling algorithm).

Maintains a boolean distinguishability matrix D over pairs of states and a
dependency map S: S[(m, n)] holds every pair whose distinguishability follows
from (m, n) being distinguishable. A single pass over all pairs either proves
a pair distinguishable through one symbol, or records it as pending on its
successor pairs. Later discoveries propagate through S, so the pass reaches
the fixed point without repeated sweeps.
"""

from typing import Dict, List, Set, Tuple
from collections import deque

import numpy as np
import pandas as pd

from .dfa import DFA, State
from .errors import IncompleteAutomatonError

Pair = Tuple[int, int]


def _pair(i: int, j: int) -> Pair:
    return (i, j) if i <= j else (j, i)


class _UnionFind:
    """Disjoint sets over state indices."""

    def __init__(self, size: int):
        self.parent = list(range(size))

    def find(self, x: int) -> int:
        root = x
        while self.parent[root] != root:
            root = self.parent[root]
        while self.parent[x] != root:
            self.parent[x], x = root, self.parent[x]
        return root

    def union(self, x: int, y: int):
        rx, ry = self.find(x), self.find(y)
        if rx == ry:
            return
        # Lower index stays the root so classes keep a stable representative
        if rx < ry:
            self.parent[ry] = rx
        else:
            self.parent[rx] = ry


class EquivalenceTable:
    """
    Inspectable result of an equivalence analysis.

    Attributes:
        states: States of the analyzed DFA, indexed as in the tables
        distinguishable: Symmetric n × n boolean matrix (D)
        dependencies: Pair → set of pairs implied distinguishable by it (S)
        marks: Number of pairs marked distinguishable after seeding
    """

    def __init__(self, states: Tuple[State, ...], distinguishable: np.ndarray,
                 dependencies: Dict[Pair, Set[Pair]], marks: int = 0):
        self.states = states
        self.distinguishable = distinguishable
        self.dependencies = dependencies
        self.marks = marks

    def _indices(self, p: State, q: State) -> Pair:
        for state in (p, q):
            if state.index >= len(self.states) or self.states[state.index] is not state:
                raise ValueError(f"State {state.label!r} was not part of the analyzed machine")
        return p.index, q.index

    def is_distinguishable(self, p: State, q: State) -> bool:
        i, j = self._indices(p, q)
        return bool(self.distinguishable[i, j])

    def are_equivalent(self, p: State, q: State) -> bool:
        return not self.is_distinguishable(p, q)

    def equivalent_pairs(self) -> List[Tuple[State, State]]:
        """
        Any two distinct states whose D entry is unset are equivalent.

        Returns:
            Unordered pairs (lower index first), each reported once
        """
        rows, cols = np.nonzero(~self.distinguishable)
        return [
            (self.states[i], self.states[j])
            for i, j in zip(rows.tolist(), cols.tolist())
            if i < j
        ]

    def equivalence_classes(self) -> List[List[State]]:
        """
        Partition the states into equivalence classes.

        Returns:
            Classes ordered by their first member's index; members in index
            order. Singleton classes are included.
        """
        uf = _UnionFind(len(self.states))
        for p, q in self.equivalent_pairs():
            uf.union(p.index, q.index)

        classes: Dict[int, List[State]] = {}
        for state in self.states:
            classes.setdefault(uf.find(state.index), []).append(state)
        return list(classes.values())

    def to_dataframe(self) -> pd.DataFrame:
        """D as a 0/1 DataFrame indexed by state labels."""
        labels = [s.label for s in self.states]
        return pd.DataFrame(self.distinguishable.astype(np.int8), index=labels, columns=labels)

    def dependencies_to_dataframe(self) -> pd.DataFrame:
        """S as a DataFrame of '{(m, n), ...}' strings indexed by state labels."""
        n = len(self.states)
        labels = [s.label for s in self.states]
        cells = [["{}"] * n for _ in range(n)]
        for (i, j), deps in self.dependencies.items():
            text = "{" + ", ".join(f"({m}, {k})" for m, k in sorted(deps)) + "}"
            cells[i][j] = cells[j][i] = text
        return pd.DataFrame(cells, index=labels, columns=labels)

    def __repr__(self) -> str:
        return (f"EquivalenceTable(states={len(self.states)}, "
                f"equivalent_pairs={len(self.equivalent_pairs())}, marks={self.marks})")


class EquivalenceAnalyzer:
    """Computes equivalent state pairs of a complete DFA."""

    def __init__(self, dfa: DFA, verbose: bool = False):
        """
        Args:
            dfa: Complete DFA to analyze. Must not be mutated during run().
            verbose: Print progress information
        """
        self.dfa = dfa
        self.verbose = verbose

    def run(self) -> EquivalenceTable:
        """
        Execute the table-filling algorithm.

        Returns:
            EquivalenceTable holding the final D and S tables

        Raises:
            IncompleteAutomatonError: If the DFA is not complete

        Time Complexity: O(n² × |Σ|)
        """
        if not self.dfa.is_complete():
            raise IncompleteAutomatonError(
                "The machine is not a complete DFA. Retrieving equivalent states "
                "is only possible for complete DFAs."
            )

        states = self.dfa.states
        alphabet = self.dfa.alphabet
        n = len(states)

        # delta[i, k] = index of the target of state i on symbol k
        delta = np.array(
            [[s.get_next(a).index for a in alphabet] for s in states],
            dtype=np.int64,
        ).reshape(n, len(alphabet))

        accepting = np.array([s.accepting for s in states], dtype=bool)
        D = accepting[:, None] != accepting[None, :]
        S: Dict[Pair, Set[Pair]] = {}

        if self.verbose:
            seeded = int(np.count_nonzero(np.triu(D, k=1)))
            print(f"Equivalence analysis: {n} states, {len(alphabet)} symbols, "
                  f"{seeded} pairs seeded by acceptance")

        marks = 0
        for i in range(n):
            for j in range(i + 1, n):
                if D[i, j]:
                    continue

                successors = delta[i], delta[j]
                if np.any(D[successors]):
                    marks += self._mark(D, S, i, j)
                    continue

                # Pending: (i, j) becomes distinguishable once a successor pair does
                for m, k in zip(*successors):
                    m, k = int(m), int(k)
                    if m == k:
                        continue
                    key = _pair(m, k)
                    if key != (i, j):
                        S.setdefault(key, set()).add((i, j))

        if self.verbose:
            remaining = n * (n - 1) // 2 - int(np.count_nonzero(np.triu(D, k=1)))
            print(f"  Marked {marks} pairs, {remaining} equivalent pairs remain")

        return EquivalenceTable(states, D, S, marks)

    @staticmethod
    def _mark(D: np.ndarray, S: Dict[Pair, Set[Pair]], i: int, j: int) -> int:
        """
        Mark (i, j) distinguishable and propagate through S.

        Worklist with check-and-set before enqueue, so each pair is marked at
        most once even when S contains cycles.

        Returns:
            Number of pairs newly marked
        """
        if D[i, j]:
            return 0
        D[i, j] = D[j, i] = True
        queue = deque([(i, j)])
        marked = 1

        while queue:
            for m, k in S.get(queue.popleft(), ()):
                if not D[m, k]:
                    D[m, k] = D[k, m] = True
                    queue.append((m, k))
                    marked += 1

        return marked
