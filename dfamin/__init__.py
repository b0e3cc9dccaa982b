"""
dfamin

Equivalent-state analysis and minimization of deterministic finite automata
using the table-filling algorithm, with JSON and Graphviz DOT interchange.
"""

from .core.dfa import DFA, State
from .core.equivalence import EquivalenceAnalyzer, EquivalenceTable
from .core.minimizer import Minimizer
from .core.serializer import serialize, deserialize, to_dot
from .core.errors import (
    AutomatonError,
    NotMemberError,
    DuplicateStateError,
    UnknownSymbolError,
    UndefinedTransitionError,
    IncompleteAutomatonError,
    NoInitialStateError,
    UnknownStateReferenceError,
    SerializationError,
)
from .config import MinimizationConfig, MergeLabelStyle

__version__ = "0.1.0"
__all__ = [
    "DFA", "State",
    "EquivalenceAnalyzer", "EquivalenceTable", "Minimizer",
    "serialize", "deserialize", "to_dot",
    "AutomatonError", "NotMemberError", "DuplicateStateError", "UnknownSymbolError",
    "UndefinedTransitionError", "IncompleteAutomatonError", "NoInitialStateError",
    "UnknownStateReferenceError", "SerializationError",
    "MinimizationConfig", "MergeLabelStyle",
]
