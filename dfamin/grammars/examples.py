"""Small reference machines and word enumeration helpers."""

from itertools import product
from typing import Iterable, List, Tuple

from ..core.dfa import DFA


def build_suffix_dfa() -> DFA:
    """
    Six-state machine over {a, b} accepting words that contain at least two
    b's after their first symbol.

    After the first symbol the machine splits into two branches (q1/q2 after
    'a', q3/q4 after 'b') that behave identically, so q1~q3 and q2~q4 and the
    minimal machine has four states.
    """
    machine = DFA(('a', 'b'))

    q0 = machine.add_state('q0')
    q1 = machine.add_state('q1')
    q2 = machine.add_state('q2')
    q3 = machine.add_state('q3')
    q4 = machine.add_state('q4')
    q5 = machine.add_state('q5', True)

    (machine
        .add_transition(q0, 'a', q1)
        .add_transition(q0, 'b', q3)

        .add_transition(q1, 'a', q1)
        .add_transition(q1, 'b', q2)

        .add_transition(q2, 'a', q2)
        .add_transition(q2, 'b', q5)

        .add_transition(q3, 'a', q3)
        .add_transition(q3, 'b', q4)

        .add_transition(q4, 'a', q4)
        .add_transition(q4, 'b', q5)

        .add_transition(q5, 'a', q5)
        .add_transition(q5, 'b', q5))

    return machine


def build_single_state_dfa(alphabet: Iterable[str] = ('a', 'b')) -> DFA:
    """One accepting initial state looping on every symbol: already minimal."""
    machine = DFA(alphabet)
    state = machine.add_state('q0', True)
    for symbol in machine.alphabet:
        machine.add_transition(state, symbol, state)
    return machine


def generate_strings(alphabet: Iterable[str], max_length: int) -> List[Tuple[str, ...]]:
    """
    Generate all words up to max_length.

    Args:
        alphabet: Input symbols
        max_length: Maximum word length

    Returns:
        Words as symbol tuples, shortest first, including the empty word
    """
    alphabet = tuple(alphabet)
    words = []
    for length in range(max_length + 1):
        words.extend(product(alphabet, repeat=length))
    return words
