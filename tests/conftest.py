"""
Pytest configuration and fixtures for dfamin tests.

Provides the reference machines and a seeded random generator.
"""

import pytest


@pytest.fixture
def suffix_dfa():
    """
    Six-state reference machine over {a, b}.

    q1~q3 and q2~q4; minimal machine has four states.
    """
    from dfamin.grammars import build_suffix_dfa
    return build_suffix_dfa()


@pytest.fixture
def single_state_dfa():
    """One accepting initial state with self-loops on a and b."""
    from dfamin.grammars import build_single_state_dfa
    return build_single_state_dfa(('a', 'b'))


@pytest.fixture
def three_way_dfa():
    """
    Machine where three states are mutually equivalent.

    q0 reads 'a' into one of the equivalent non-accepting states p, r, s,
    each of which moves to the accepting sink on 'a' and between each other
    on 'b'.
    """
    from dfamin.core.dfa import DFA

    dfa = DFA(('a', 'b'))
    q0 = dfa.add_state('q0')
    s = dfa.add_state('s')
    p = dfa.add_state('p')
    r = dfa.add_state('r')
    f = dfa.add_state('f', True)

    dfa.add_transition(q0, 'a', s).add_transition(q0, 'b', f)
    dfa.add_transition(s, 'a', f).add_transition(s, 'b', p)
    dfa.add_transition(p, 'a', f).add_transition(p, 'b', r)
    dfa.add_transition(r, 'a', f).add_transition(r, 'b', s)
    dfa.add_transition(f, 'a', f).add_transition(f, 'b', f)
    return dfa


@pytest.fixture
def generator():
    from dfamin.validation import RandomDFAGenerator
    return RandomDFAGenerator(alphabet_size=2)
