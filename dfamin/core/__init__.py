"""Core components: automaton model, equivalence analysis, minimization."""

from .dfa import DFA, State
from .equivalence import EquivalenceAnalyzer, EquivalenceTable
from .minimizer import Minimizer
from .serializer import serialize, deserialize, to_dot

__all__ = ["DFA", "State", "EquivalenceAnalyzer", "EquivalenceTable", "Minimizer",
           "serialize", "deserialize", "to_dot"]
