"""
Quotient construction: collapse equivalent states into single states.

Equivalent states are grouped into classes (union-find over the analyzer's
pairs, so classes of any size merge into one state). Each class becomes one
state of a new DFA; the original machine is never mutated.
"""

from typing import Dict, List, Optional

from .dfa import DFA, State
from .equivalence import EquivalenceAnalyzer, EquivalenceTable
from ..config import MinimizationConfig, MergeLabelStyle


class Minimizer:
    """Builds the minimal DFA from an equivalence analysis."""

    def __init__(self, dfa: DFA, config: Optional[MinimizationConfig] = None):
        self.dfa = dfa
        self.config = config or MinimizationConfig()

    def merged_label(self, members: List[State]) -> str:
        """Canonical label for a class of equivalent states."""
        if self.config.label_style == MergeLabelStyle.SORTED:
            labels = sorted(s.label for s in members)
        else:
            labels = [s.label for s in sorted(members, key=lambda s: s.index)]
        return self.config.separator.join(labels)

    def minimize(self, table: Optional[EquivalenceTable] = None) -> DFA:
        """
        Return the minimized machine.

        Args:
            table: Result of a previous analysis of this DFA; computed if omitted

        Returns:
            self.dfa itself when it has no equivalent states, otherwise a new DFA

        Raises:
            IncompleteAutomatonError: If the DFA is not complete
            ValueError: If the table was computed for a different machine
        """
        if table is None:
            table = EquivalenceAnalyzer(self.dfa, verbose=self.config.verbose).run()
        elif (len(table.states) != len(self.dfa)
              or any(a is not b for a, b in zip(table.states, self.dfa.states))):
            raise ValueError("Equivalence table was not computed for this machine")

        if not table.equivalent_pairs():
            if self.config.verbose:
                print(f"Machine with {len(self.dfa)} states is already minimal")
            return self.dfa

        classes = table.equivalence_classes()
        minimized = DFA(self.dfa.alphabet)
        state_map: Dict[int, State] = {}

        # Labels of untouched states are reserved before naming merged classes
        taken = {members[0].label for members in classes if len(members) == 1}

        for members in classes:
            representative = members[0]
            if len(members) == 1:
                label = representative.label
            else:
                label = self.merged_label(members)
                while label in taken:
                    label += "'"
                taken.add(label)

            new_state = minimized.add_state(label, representative.accepting)
            for state in members:
                state_map[state.index] = new_state

        for members in classes:
            # Equivalent states behave identically, any member will do
            representative = members[0]
            source = state_map[representative.index]
            for symbol, target in representative.transitions.items():
                minimized.add_transition(source, symbol, state_map[target.index])

        if self.dfa.initial_state is not None:
            minimized.set_initial_state(state_map[self.dfa.initial_state.index])

        if self.config.verbose:
            print(f"Minimized {len(self.dfa)} states to {len(minimized)} "
                  f"({len(classes)} classes)")

        return minimized
