"""
Test the Tomita machines against their predicate definitions.
"""

import pytest

from dfamin.grammars import (
    EXPECTED_STATES,
    TOMITA_GRAMMARS,
    build_tomita_dfa,
    generate_strings,
    get_tomita_grammar,
)


@pytest.mark.parametrize("grammar_id", sorted(TOMITA_GRAMMARS))
def test_dfa_matches_predicate(grammar_id):
    predicate, _ = get_tomita_grammar(grammar_id)
    dfa = build_tomita_dfa(grammar_id)
    assert dfa.is_complete()
    for word in generate_strings(dfa.alphabet, 9):
        assert dfa.accepts(word) == predicate("".join(word)), "".join(word)


@pytest.mark.parametrize("grammar_id", sorted(TOMITA_GRAMMARS))
def test_dfa_has_redundant_states(grammar_id):
    dfa = build_tomita_dfa(grammar_id)
    assert len(dfa) > EXPECTED_STATES[grammar_id]


@pytest.mark.parametrize("word,expected", [
    ("", True),
    ("10", False),
    ("100", True),
    ("110", True),
    ("10110", False),
    ("1001", True),
])
def test_tomita_3_examples(word, expected):
    predicate, _ = get_tomita_grammar(3)
    assert predicate(word) is expected


def test_unknown_grammar():
    with pytest.raises(ValueError):
        get_tomita_grammar(8)
    with pytest.raises(ValueError):
        build_tomita_dfa(0)


def test_generate_strings():
    words = generate_strings(('0', '1'), 2)
    assert words == [(), ('0',), ('1',), ('0', '0'), ('0', '1'), ('1', '0'), ('1', '1')]


def test_generate_strings_count():
    assert len(generate_strings('abc', 3)) == 1 + 3 + 9 + 27
