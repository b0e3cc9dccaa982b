"""
Exceptions raised by the automaton model, analyzer and serializer.

Every error is a caller or data contract violation, never a transient
failure, so nothing here is meant to be retried.
"""


class AutomatonError(Exception):
    """Base class for all automaton errors."""
    pass


class NotMemberError(AutomatonError, ValueError):
    """Raised when a state is used with an automaton it does not belong to."""
    pass


class DuplicateStateError(AutomatonError, ValueError):
    """Raised when a state label is registered twice."""
    pass


class UnknownSymbolError(AutomatonError, ValueError):
    """Raised when a transition uses a symbol outside the alphabet."""
    pass


class UndefinedTransitionError(AutomatonError, KeyError):
    """Raised when a transition is queried that was never defined."""

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class IncompleteAutomatonError(AutomatonError, ValueError):
    """Raised when analysis or minimization is requested on a partial DFA."""
    pass


class NoInitialStateError(AutomatonError, RuntimeError):
    """Raised when a query needs an initial state and none exists."""
    pass


class UnknownStateReferenceError(AutomatonError, KeyError):
    """Raised when a state id does not name a declared state."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SerializationError(AutomatonError, ValueError):
    """Raised when a serialized automaton is missing fields or malformed."""
    pass
