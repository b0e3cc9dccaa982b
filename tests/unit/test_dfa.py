"""
Test the automaton model: construction, membership and queries.
"""

import pytest

from dfamin.core.dfa import DFA
from dfamin.core.errors import (
    AutomatonError,
    DuplicateStateError,
    NoInitialStateError,
    NotMemberError,
    UndefinedTransitionError,
    UnknownStateReferenceError,
    UnknownSymbolError,
)


# ============================================================================
# Construction
# ============================================================================


class TestConstruction:
    """Adding states and transitions."""

    def test_first_state_becomes_initial(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        dfa.add_state('q1')
        assert dfa.initial_state is q0

    def test_states_keep_insertion_order_and_index(self):
        dfa = DFA(('a',))
        labels = ['z', 'b', 'm']
        for label in labels:
            dfa.add_state(label)
        assert [s.label for s in dfa.states] == labels
        assert [s.index for s in dfa.states] == [0, 1, 2]
        assert len(dfa) == 3

    def test_accepting_flag(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        q1 = dfa.add_state('q1', True)
        assert q0.accepting is False
        assert q1.accepting is True
        assert dfa.accepting_states() == [q1]

    def test_duplicate_label_rejected(self):
        dfa = DFA(('a',))
        dfa.add_state('q0')
        with pytest.raises(DuplicateStateError):
            dfa.add_state('q0', True)

    def test_duplicate_alphabet_rejected(self):
        with pytest.raises(ValueError):
            DFA(('a', 'a'))

    def test_set_initial_state(self):
        dfa = DFA(('a',))
        dfa.add_state('q0')
        q1 = dfa.add_state('q1')
        dfa.set_initial_state(q1)
        assert dfa.initial_state is q1

    def test_set_initial_state_foreign(self):
        dfa = DFA(('a',))
        dfa.add_state('q0')
        other = DFA(('a',))
        foreign = other.add_state('q0')
        with pytest.raises(NotMemberError):
            dfa.set_initial_state(foreign)

    def test_add_transition_chains(self):
        dfa = DFA(('a', 'b'))
        q0 = dfa.add_state('q0')
        q1 = dfa.add_state('q1')
        result = dfa.add_transition(q0, 'a', q1).add_transition(q0, 'b', q0)
        assert result is dfa
        assert dfa.transition_target(q0, 'a') is q1
        assert dfa.transition_target(q0, 'b') is q0

    def test_add_transition_overwrites(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        q1 = dfa.add_state('q1')
        dfa.add_transition(q0, 'a', q1)
        dfa.add_transition(q0, 'a', q0)
        assert dfa.transition_target(q0, 'a') is q0
        assert list(q0.transitions) == ['a']

    def test_add_transition_foreign_source(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        foreign = DFA(('a',)).add_state('q0')
        with pytest.raises(NotMemberError):
            dfa.add_transition(foreign, 'a', q0)

    def test_add_transition_foreign_target(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        foreign = DFA(('a',)).add_state('x')
        with pytest.raises(NotMemberError):
            dfa.add_transition(q0, 'a', foreign)
        assert not q0.has_next('a')

    def test_add_transition_unknown_symbol(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        with pytest.raises(UnknownSymbolError):
            dfa.add_transition(q0, 'c', q0)

    def test_errors_share_base_class(self):
        dfa = DFA(('a',))
        dfa.add_state('q0')
        with pytest.raises(AutomatonError):
            dfa.add_state('q0')


# ============================================================================
# Queries
# ============================================================================


class TestQueries:
    """Transition lookup, acceptance and completeness."""

    def test_has_transition(self, suffix_dfa):
        q0 = suffix_dfa.get_state('q0')
        assert suffix_dfa.has_transition(q0, 'a')

    def test_transition_target_undefined(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        assert not dfa.has_transition(q0, 'a')
        with pytest.raises(UndefinedTransitionError):
            dfa.transition_target(q0, 'a')

    def test_undefined_transition_is_key_error(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        with pytest.raises(KeyError):
            q0.get_next('a')

    def test_get_state_unknown(self, suffix_dfa):
        with pytest.raises(UnknownStateReferenceError):
            suffix_dfa.get_state('nope')

    def test_index_of(self, suffix_dfa):
        assert suffix_dfa.index_of(suffix_dfa.get_state('q4')) == 4

    @pytest.mark.parametrize("word,expected", [
        ("", False),
        ("a", False),
        ("ab", False),
        ("abb", True),
        ("bbb", True),
        ("bb", False),
        ("babab", True),
        ("aaaaabab", True),
    ])
    def test_accepts_reference_language(self, suffix_dfa, word, expected):
        assert suffix_dfa.accepts(word) is expected

    def test_accepts_symbol_sequence(self, suffix_dfa):
        assert suffix_dfa.accepts(['a', 'b', 'b'])
        assert suffix_dfa.accepts(('b', 'b', 'b'))

    def test_accepts_multi_character_symbols(self):
        dfa = DFA(('go', 'stop'))
        idle = dfa.add_state('idle')
        moving = dfa.add_state('moving', True)
        dfa.add_transition(idle, 'go', moving).add_transition(idle, 'stop', idle)
        dfa.add_transition(moving, 'go', moving).add_transition(moving, 'stop', idle)
        assert dfa.accepts(['stop', 'go'])
        assert not dfa.accepts(['go', 'stop'])

    def test_accepts_without_states(self):
        with pytest.raises(NoInitialStateError):
            DFA(('a',)).accepts("a")

    def test_accepts_missing_transition(self):
        dfa = DFA(('a', 'b'))
        q0 = dfa.add_state('q0', True)
        dfa.add_transition(q0, 'a', q0)
        assert dfa.accepts("aa")
        with pytest.raises(UndefinedTransitionError):
            dfa.accepts("ab")

    def test_accepts_empty_word_uses_initial(self):
        dfa = DFA(('a',))
        dfa.add_state('q0')
        q1 = dfa.add_state('q1', True)
        assert not dfa.accepts("")
        dfa.set_initial_state(q1)
        assert dfa.accepts("")

    def test_get_state_after(self, suffix_dfa):
        assert suffix_dfa.get_state_after("ab").label == 'q2'
        assert suffix_dfa.get_state_after("").label == 'q0'
        assert suffix_dfa.get_state_after("ac") is None

    def test_contains(self, suffix_dfa):
        assert 'q3' in suffix_dfa
        assert suffix_dfa.get_state('q3') in suffix_dfa
        assert 'q9' not in suffix_dfa
        assert DFA(('a', 'b')).add_state('q3') not in suffix_dfa

    def test_str(self, suffix_dfa):
        assert str(suffix_dfa) == "DFA(|Q|=6, |Σ|=2, q0=q0, |F|=1)"


class TestCompleteness:
    """is_complete over every state and symbol."""

    def test_reference_is_complete(self, suffix_dfa):
        assert suffix_dfa.is_complete()

    def test_empty_machine_is_complete(self):
        assert DFA(('a',)).is_complete()

    def test_removing_any_transition_breaks_completeness(self, suffix_dfa):
        for state in suffix_dfa.states:
            for symbol in suffix_dfa.alphabet:
                partial = DFA(suffix_dfa.alphabet)
                copies = {s.label: partial.add_state(s.label, s.accepting) for s in suffix_dfa}
                for s in suffix_dfa:
                    for a, target in s.transitions.items():
                        if (s is state) and (a == symbol):
                            continue
                        partial.add_transition(copies[s.label], a, copies[target.label])
                assert not partial.is_complete()


class TestReachabilityAndSuffixes:
    """reachable_states and minimal_diverging_suffix."""

    def test_reachable_states(self):
        dfa = DFA(('a',))
        q0 = dfa.add_state('q0')
        dfa.add_state('orphan')
        q2 = dfa.add_state('q2', True)
        dfa.add_transition(q0, 'a', q2).add_transition(q2, 'a', q0)
        assert [s.label for s in dfa.reachable_states()] == ['q0', 'q2']

    def test_reachable_states_empty(self):
        assert DFA(('a',)).reachable_states() == []

    def test_diverging_suffix_on_acceptance(self, suffix_dfa):
        q0 = suffix_dfa.get_state('q0')
        q5 = suffix_dfa.get_state('q5')
        assert suffix_dfa.minimal_diverging_suffix(q0, q5) == ()

    def test_diverging_suffix_shortest(self, suffix_dfa):
        q2 = suffix_dfa.get_state('q2')
        q1 = suffix_dfa.get_state('q1')
        assert suffix_dfa.minimal_diverging_suffix(q1, q2) == ('b',)

    def test_diverging_suffix_equivalent(self, suffix_dfa):
        q1 = suffix_dfa.get_state('q1')
        q3 = suffix_dfa.get_state('q3')
        assert suffix_dfa.minimal_diverging_suffix(q1, q3) is None
