"""Grammar definitions and reference machines."""

from .tomita import (
    tomita_1, tomita_2, tomita_3, tomita_4,
    tomita_5, tomita_6, tomita_7,
    TOMITA_GRAMMARS,
    EXPECTED_STATES,
    get_tomita_grammar,
    build_tomita_dfa,
)
from .examples import build_suffix_dfa, build_single_state_dfa, generate_strings

__all__ = [
    'tomita_1', 'tomita_2', 'tomita_3', 'tomita_4',
    'tomita_5', 'tomita_6', 'tomita_7',
    'TOMITA_GRAMMARS',
    'EXPECTED_STATES',
    'get_tomita_grammar',
    'build_tomita_dfa',
    'build_suffix_dfa',
    'build_single_state_dfa',
    'generate_strings',
]
