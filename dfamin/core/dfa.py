"""
Deterministic Finite Automaton (DFA) implementation.

A DFA is formally a 5-tuple (Q, Σ, δ, q₀, F) where Q is the state set,
Σ is the alphabet, δ: Q × Σ → Q is the transition function,
q₀ is the initial state, and F is the set of accepting states.

States live in an arena owned by a single DFA. Their position in that
arena (insertion order) is the stable index used by the equivalence
analyzer.
"""

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union
from types import MappingProxyType
from collections import deque

from .errors import (
    DuplicateStateError,
    NoInitialStateError,
    NotMemberError,
    UndefinedTransitionError,
    UnknownStateReferenceError,
    UnknownSymbolError,
)


class State:
    """A labelled DFA state owned by exactly one automaton."""

    __slots__ = ("label", "accepting", "index", "_owner", "_transitions")

    def __init__(self, label: str, accepting: bool, index: int, owner: "DFA"):
        self.label = label
        self.accepting = accepting
        self.index = index
        self._owner = owner
        self._transitions: Dict[str, "State"] = {}

    @property
    def transitions(self) -> Mapping[str, "State"]:
        """Read-only view of symbol → target state."""
        return MappingProxyType(self._transitions)

    def has_next(self, symbol: str) -> bool:
        return symbol in self._transitions

    def get_next(self, symbol: str) -> "State":
        """
        Get the next state for a symbol.

        Raises:
            UndefinedTransitionError: If no transition exists for the symbol
        """
        try:
            return self._transitions[symbol]
        except KeyError:
            raise UndefinedTransitionError(
                f"Transition for symbol {symbol!r} is not defined in state {self.label!r}"
            ) from None

    def __repr__(self) -> str:
        flag = ", accepting" if self.accepting else ""
        return f"State({self.label!r}{flag})"


class DFA:
    """Deterministic Finite Automaton built incrementally from states and transitions."""

    def __init__(self, alphabet: Iterable[str]):
        """
        Initialize an empty DFA.

        Args:
            alphabet: Input symbols. Fixed for the lifetime of the automaton.
        """
        alphabet = tuple(alphabet)
        if len(set(alphabet)) != len(alphabet):
            raise ValueError("alphabet symbols must be unique")

        self._alphabet = alphabet
        self._states: List[State] = []
        self._by_label: Dict[str, State] = {}
        self._initial: Optional[State] = None

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self._alphabet

    @property
    def states(self) -> Tuple[State, ...]:
        """States in insertion order."""
        return tuple(self._states)

    @property
    def initial_state(self) -> Optional[State]:
        return self._initial

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_state(self, label: str, accepting: bool = False) -> State:
        """
        Create and register a new state.

        The first state added becomes the initial state.

        Args:
            label: Unique state identifier
            accepting: Whether the state is accepting

        Returns:
            The new state

        Raises:
            DuplicateStateError: If a state with this label already exists
        """
        if label in self._by_label:
            raise DuplicateStateError(f"State {label!r} already exists in this machine")

        state = State(label, bool(accepting), len(self._states), self)
        self._states.append(state)
        self._by_label[label] = state

        if self._initial is None:
            self._initial = state

        return state

    def set_initial_state(self, state: State):
        self._check_member(state)
        self._initial = state

    def add_transition(self, from_state: State, symbol: str, to_state: State) -> "DFA":
        """
        Add a transition between two states of this machine.

        An existing transition for (from_state, symbol) is overwritten.

        Returns:
            self, so calls can be chained

        Raises:
            NotMemberError: If either state belongs to another machine
            UnknownSymbolError: If the symbol is not in the alphabet
        """
        self._check_member(from_state)
        self._check_member(to_state)
        if symbol not in self._alphabet:
            raise UnknownSymbolError(
                f"Symbol {symbol!r} is not part of the alphabet {list(self._alphabet)}"
            )

        from_state._transitions[symbol] = to_state
        return self

    def _check_member(self, state: State):
        if not self.owns(state):
            label = getattr(state, "label", state)
            raise NotMemberError(f"State {label!r} is not part of this machine")

    def owns(self, state: State) -> bool:
        """Check that a state handle belongs to this machine's arena."""
        return (
            isinstance(state, State)
            and state._owner is self
            and 0 <= state.index < len(self._states)
            and self._states[state.index] is state
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_state(self, label: str) -> State:
        try:
            return self._by_label[label]
        except KeyError:
            raise UnknownStateReferenceError(f"No state with id {label!r}") from None

    def index_of(self, state: State) -> int:
        self._check_member(state)
        return state.index

    def has_transition(self, state: State, symbol: str) -> bool:
        self._check_member(state)
        return state.has_next(symbol)

    def transition_target(self, state: State, symbol: str) -> State:
        self._check_member(state)
        return state.get_next(symbol)

    def accepting_states(self) -> List[State]:
        return [s for s in self._states if s.accepting]

    def accepts(self, word: Sequence[str]) -> bool:
        """
        Determine if DFA accepts given word.

        Args:
            word: Sequence of symbols; a plain string is read one character
                at a time

        Returns:
            True if word leads to accepting state

        Raises:
            NoInitialStateError: If no state has been added
            UndefinedTransitionError: If a required transition is missing

        Time Complexity: O(|word|)
        """
        if self._initial is None:
            raise NoInitialStateError(
                "No initial state has been set. Perhaps no states have been defined."
            )

        current_state = self._initial
        for symbol in word:
            current_state = current_state.get_next(symbol)

        return current_state.accepting

    def get_state_after(self, word: Sequence[str]) -> Optional[State]:
        """
        Get state reached after processing word.

        Returns:
            The state, or None if no initial state or a transition is undefined
        """
        current = self._initial
        for symbol in word:
            if current is None or not current.has_next(symbol):
                return None
            current = current.get_next(symbol)
        return current

    def is_complete(self) -> bool:
        """Check that every state has a transition for every alphabet symbol."""
        for state in self._states:
            for symbol in self._alphabet:
                if not state.has_next(symbol):
                    return False
        return True

    def reachable_states(self) -> List[State]:
        """States reachable from the initial state, in insertion order."""
        if self._initial is None:
            return []

        reachable = {self._initial.index}
        queue = deque([self._initial])
        while queue:
            current = queue.popleft()
            for next_state in current._transitions.values():
                if next_state.index not in reachable:
                    reachable.add(next_state.index)
                    queue.append(next_state)

        return [s for s in self._states if s.index in reachable]

    def minimal_diverging_suffix(self, state1: State, state2: State) -> Optional[Tuple[str, ...]]:
        """
        Find shortest suffix distinguishing two states.

        Uses BFS over pairs of states. Missing transitions are skipped, so on
        an incomplete DFA only defined paths are explored.

        Returns:
            Shortest word on which the states differ in acceptance, or None
            if no such word exists

        Time Complexity: O(|Q|² × |Σ|) worst case
        """
        self._check_member(state1)
        self._check_member(state2)

        if state1.accepting != state2.accepting:
            return ()  # Empty suffix distinguishes

        queue = deque([((), state1, state2)])
        visited = {(state1.index, state2.index)}

        while queue:
            suffix, s1, s2 = queue.popleft()

            for symbol in self._alphabet:
                if not (s1.has_next(symbol) and s2.has_next(symbol)):
                    continue
                next_s1 = s1.get_next(symbol)
                next_s2 = s2.get_next(symbol)
                new_suffix = suffix + (symbol,)

                if next_s1.accepting != next_s2.accepting:
                    return new_suffix

                key = (next_s1.index, next_s2.index)
                if key not in visited:
                    visited.add(key)
                    queue.append((new_suffix, next_s1, next_s2))

        return None  # States are equivalent

    # ------------------------------------------------------------------
    # Analysis shortcuts
    # ------------------------------------------------------------------

    def get_equivalent_state_pairs(self) -> List[Tuple[State, State]]:
        """
        Get the machine's equivalent states as unordered pairs.

        Raises:
            IncompleteAutomatonError: If the machine is not a complete DFA
        """
        from .equivalence import EquivalenceAnalyzer

        return EquivalenceAnalyzer(self).run().equivalent_pairs()

    def minimize(self, config=None) -> "DFA":
        """
        Return the minimized version of this machine.

        Returns self if the machine is already minimal; otherwise a new DFA.
        """
        from .minimizer import Minimizer

        return Minimizer(self, config=config).minimize()

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        """Return number of states."""
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._states)

    def __contains__(self, item: Union[str, State]) -> bool:
        if isinstance(item, State):
            return self.owns(item)
        return item in self._by_label

    def __str__(self) -> str:
        """String representation for debugging."""
        q0 = self._initial.label if self._initial is not None else None
        return (f"DFA(|Q|={len(self._states)}, |Σ|={len(self._alphabet)}, "
                f"q0={q0}, |F|={len(self.accepting_states())})")
