"""
Tomita Grammars Implementation
Based on Tomita (1982) - classic benchmark grammars for automata learning

Each grammar is available both as a predicate over binary strings and as a
hand-built complete DFA. The DFAs deliberately contain redundant states so
that minimization has something to merge; EXPECTED_STATES gives the size of
the minimal machine.
"""

from typing import Callable, Dict, List, Tuple
import re

from ..core.dfa import DFA


def tomita_1(word: str) -> bool:
    """
    Tomita Grammar 1: 1*
    Accepts strings containing only 1s (no 0s allowed).
    """
    return "0" not in word


def tomita_2(word: str) -> bool:
    """
    Tomita Grammar 2: (10)*
    Accepts strings that are repetitions of "10".
    """
    return word == "10" * (len(word) // 2)


# Not tomita 3: words containing an odd series of consecutive ones and then later an odd series of consecutive zeros
_not_tomita_3 = re.compile("((0|1)*0)*1(11)*(0(0|1)*1)*0(00)*(1(0|1)*)*$")


def tomita_3(w: str) -> bool:
    """
    Tomita Grammar 3: Complement of specific pattern
    Accepts strings that are NOT:
    - words containing an odd series of consecutive ones and then later an odd series of consecutive zeros
    """
    return _not_tomita_3.match(w) is None


def tomita_4(word: str) -> bool:
    """
    Tomita Grammar 4: No three consecutive 0s
    Accepts strings that don't contain "000".
    """
    return "000" not in word


def tomita_5(word: str) -> bool:
    """
    Tomita Grammar 5: Even 0s and even 1s
    Accepts strings with even count of both 0s and 1s.
    """
    return (word.count("0") % 2 == 0) and (word.count("1") % 2 == 0)


def tomita_6(word: str) -> bool:
    """
    Tomita Grammar 6: Difference of 0s and 1s divisible by 3
    Accepts strings where (#0s - #1s) mod 3 = 0.
    """
    return ((word.count("0") - word.count("1")) % 3) == 0


def tomita_7(word: str) -> bool:
    """
    Tomita Grammar 7: At most one occurrence of "10"
    Accepts strings with at most one occurrence of the substring "10".
    """
    return word.count("10") <= 1


# Dictionary of all Tomita grammars
TOMITA_GRAMMARS = {
    1: (tomita_1, "1* (no zeros allowed)"),
    2: (tomita_2, "(10)* (alternating 10 pattern)"),
    3: (tomita_3, "complement of odd consecutive 1s then odd consecutive 0s"),
    4: (tomita_4, "no three consecutive 0s"),
    5: (tomita_5, "even 0s AND even 1s"),
    6: (tomita_6, "(#0s - #1s) mod 3 = 0"),
    7: (tomita_7, "at most one occurrence of '10'")
}

# Size of the minimal DFA for each grammar
EXPECTED_STATES = {
    1: 2,  # 1*
    2: 3,  # (10)*
    3: 5,  # odd 0s after odd 1s
    4: 4,  # no 000
    5: 4,  # even 0s and 1s
    6: 3,  # (#0s - #1s) mod 3 = 0
    7: 5,  # 0*1*0*1*
}

# label: (accepting, target on '0', target on '1'); first entry is initial
_Table = List[Tuple[str, bool, str, str]]

_TOMITA_TABLES: Dict[int, _Table] = {
    1: [
        ("q0", True, "q2", "q1"),
        ("q1", True, "q3", "q0"),   # copy of q0
        ("q2", False, "q2", "q2"),
        ("q3", False, "q3", "q3"),  # second sink
    ],
    2: [
        ("q0", True, "q3", "q1"),
        ("q1", False, "q2", "q3"),
        ("q2", True, "q4", "q1"),   # copy of q0
        ("q3", False, "q4", "q3"),
        ("q4", False, "q3", "q4"),  # sinks alternate
    ],
    3: [
        ("q0", True, "q0", "q1"),   # outside a 1-block
        ("q1", True, "q3", "q2"),   # odd 1-block
        ("q2", True, "q0", "q1"),   # even 1-block, same future as q0
        ("q3", False, "q4", "q6"),  # odd 0-block after odd 1-block
        ("q4", True, "q3", "q5"),   # even 0-block after odd 1-block
        ("q5", True, "q3", "q5"),   # 1-block after odd 1-block, same future as q4
        ("q6", False, "q6", "q6"),
    ],
    4: [
        ("q0", True, "q1", "q0"),
        ("q1", True, "q2", "q4"),
        ("q2", True, "q3", "q0"),
        ("q3", False, "q3", "q3"),
        ("q4", True, "q1", "q4"),   # copy of q0
    ],
    5: [
        ("q0", True, "q1", "q2"),   # even 0s, even 1s
        ("q1", False, "q0", "q3"),  # odd 0s, even 1s
        ("q2", False, "q4", "q0"),  # even 0s, odd 1s
        ("q3", False, "q2", "q1"),  # odd 0s, odd 1s
        ("q4", False, "q2", "q1"),  # copy of q3
    ],
    6: [
        ("q0", True, "q1", "q2"),
        ("q1", False, "q2", "q0"),
        ("q2", False, "q3", "q1"),
        ("q3", True, "q1", "q2"),   # copy of q0
    ],
    7: [
        ("q0", True, "q0", "q1"),
        ("q1", True, "q2", "q1"),
        ("q2", True, "q2", "q3"),
        ("q3", True, "q5", "q3"),
        ("q4", False, "q4", "q4"),
        ("q5", False, "q4", "q5"),
    ],
}


def get_tomita_grammar(grammar_id: int) -> Tuple[Callable[[str], bool], str]:
    """
    Get Tomita grammar function and description by ID.

    Args:
        grammar_id: Grammar ID (1-7)

    Returns:
        Tuple of (grammar_function, description)
    """
    if grammar_id not in TOMITA_GRAMMARS:
        raise ValueError(f"Unknown Tomita grammar ID: {grammar_id}. Valid IDs are 1-7.")
    return TOMITA_GRAMMARS[grammar_id]


def build_tomita_dfa(grammar_id: int) -> DFA:
    """
    Build a complete (non-minimal) DFA recognizing a Tomita grammar.

    Args:
        grammar_id: Grammar ID (1-7)
    """
    if grammar_id not in _TOMITA_TABLES:
        raise ValueError(f"Unknown Tomita grammar ID: {grammar_id}. Valid IDs are 1-7.")

    table = _TOMITA_TABLES[grammar_id]
    dfa = DFA(("0", "1"))
    states = {label: dfa.add_state(label, accepting) for label, accepting, _, _ in table}
    for label, _, on_zero, on_one in table:
        dfa.add_transition(states[label], "0", states[on_zero])
        dfa.add_transition(states[label], "1", states[on_one])
    return dfa
