"""
Language equivalence between two complete DFAs.

Explores the product automaton breadth-first from the pair of initial
states. The first reachable pair whose acceptance differs yields the
shortest counterexample; if none exists the machines recognize the same
language.
"""

from collections import deque
from typing import Optional, Tuple

from ..core.dfa import DFA
from ..core.errors import IncompleteAutomatonError, NoInitialStateError


def find_counterexample(dfa1: DFA, dfa2: DFA) -> Optional[Tuple[str, ...]]:
    """
    Find the shortest word accepted by exactly one of the machines.

    Args:
        dfa1: Complete DFA
        dfa2: Complete DFA over the same alphabet

    Returns:
        Counterexample word, or None if the languages are equal

    Raises:
        ValueError: If the alphabets differ
        IncompleteAutomatonError: If either machine is incomplete
        NoInitialStateError: If either machine has no states

    Time Complexity: O(|Q1| × |Q2| × |Σ|)
    """
    if set(dfa1.alphabet) != set(dfa2.alphabet):
        raise ValueError(
            f"Alphabets differ: {list(dfa1.alphabet)} vs {list(dfa2.alphabet)}"
        )
    for dfa in (dfa1, dfa2):
        if not dfa.is_complete():
            raise IncompleteAutomatonError("Language comparison requires complete DFAs")
        if dfa.initial_state is None:
            raise NoInitialStateError("Cannot compare a machine without states")

    start = (dfa1.initial_state, dfa2.initial_state)
    if start[0].accepting != start[1].accepting:
        return ()

    queue = deque([((), start[0], start[1])])
    visited = {(start[0].index, start[1].index)}

    while queue:
        word, s1, s2 = queue.popleft()

        for symbol in dfa1.alphabet:
            next_s1 = s1.get_next(symbol)
            next_s2 = s2.get_next(symbol)
            child = word + (symbol,)

            if next_s1.accepting != next_s2.accepting:
                return child

            key = (next_s1.index, next_s2.index)
            if key not in visited:
                visited.add(key)
                queue.append((child, next_s1, next_s2))

    return None


def languages_equal(dfa1: DFA, dfa2: DFA) -> bool:
    return find_counterexample(dfa1, dfa2) is None
