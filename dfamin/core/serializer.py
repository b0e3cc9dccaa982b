"""
Serializes and unserializes DFA state machines.

Provides DOT exporting functionality and exporting to a plain structure
which can, for example, be serialized using JSON. The structural field
names (alphabet, states, initial, id, accepting, transitions) are a wire
contract shared with existing consumers.
"""

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from .dfa import DFA
from .errors import SerializationError, UnknownStateReferenceError


def escape_string(string: str) -> str:
    """Escape a string for use inside a quoted DOT attribute."""
    return string.replace('\\', '\\\\').replace('"', '\\"')


def to_dot(dfa: DFA) -> str:
    """
    Generate Graphviz DOT representation.

    Node ids are assigned as s_0, s_1, ... in state order so the output is
    valid whatever characters the state labels contain.

    Returns:
        DOT format string, without a trailing newline
    """
    node_ids = {state.index: f"s_{i}" for i, state in enumerate(dfa.states)}

    lines = ["digraph {\n"]
    for state in dfa.states:
        lines.append(
            '    %s [label="%s", shape="%s"];\n' % (
                node_ids[state.index],
                escape_string(state.label),
                'doublecircle' if state.accepting else 'circle',
            )
        )
    lines.append("\n")
    for state in dfa.states:
        for symbol, target in state.transitions.items():
            lines.append(
                '    %s -> %s [label="%s"];\n' % (
                    node_ids[state.index],
                    node_ids[target.index],
                    escape_string(symbol),
                )
            )
    lines.append("}")
    return "".join(lines)


def serialize(dfa: DFA) -> Dict[str, Any]:
    """
    Serialize a state machine.

    Returns:
        {'alphabet': [...], 'states': [{'id', 'accepting', 'transitions'}],
         'initial': id or None}
    """
    initial = dfa.initial_state
    return {
        'alphabet': list(dfa.alphabet),
        'states': [
            {
                'id': state.label,
                'accepting': state.accepting,
                'transitions': {symbol: target.label
                                for symbol, target in state.transitions.items()},
            }
            for state in dfa.states
        ],
        'initial': initial.label if initial is not None else None,
    }


def _require(mapping: Any, key: str, where: str):
    if not isinstance(mapping, Mapping):
        raise SerializationError(f"{where} must be an object, got {type(mapping).__name__}")
    if key not in mapping:
        raise SerializationError(f"{where} is missing required field {key!r}")
    return mapping[key]


def deserialize(data: Mapping[str, Any]) -> DFA:
    """
    Unserialize the serialization of a state machine.

    States are created first, then transitions, then the initial state.

    Raises:
        SerializationError: If a required field is missing or malformed
        UnknownStateReferenceError: If a transition or the initial pointer
            names an undeclared state
        DuplicateStateError: If two states share an id
    """
    alphabet = _require(data, 'alphabet', 'machine')
    serialized_states = _require(data, 'states', 'machine')
    if isinstance(alphabet, (str, bytes)) or not isinstance(alphabet, (list, tuple)):
        raise SerializationError("'alphabet' must be a list of symbols")
    if not isinstance(serialized_states, (list, tuple)):
        raise SerializationError("'states' must be a list")

    machine = DFA(alphabet)
    state_map = {}

    for position, serialized_state in enumerate(serialized_states):
        where = f"states[{position}]"
        state_id = _require(serialized_state, 'id', where)
        if not isinstance(state_id, str):
            raise SerializationError(f"{where}.id must be a string")
        accepting = serialized_state.get('accepting', False)
        if not isinstance(accepting, bool):
            raise SerializationError(f"{where}.accepting must be a boolean")
        state_map[state_id] = machine.add_state(state_id, accepting)

    for position, serialized_state in enumerate(serialized_states):
        transitions = serialized_state.get('transitions', {})
        if not isinstance(transitions, Mapping):
            raise SerializationError(f"states[{position}].transitions must be an object")
        source = state_map[serialized_state['id']]
        for symbol, to in transitions.items():
            if not isinstance(to, str):
                raise SerializationError(
                    f"states[{position}].transitions[{symbol!r}] must be a state id"
                )
            if to not in state_map:
                raise UnknownStateReferenceError(
                    f"Transition {serialized_state['id']!r} --{symbol}--> {to!r} "
                    f"references an undeclared state"
                )
            machine.add_transition(source, symbol, state_map[to])

    initial = data.get('initial')
    if initial is not None:
        if not isinstance(initial, str):
            raise SerializationError("'initial' must be a state id or null")
        if initial not in state_map:
            raise UnknownStateReferenceError(f"Initial state {initial!r} is not declared")
        machine.set_initial_state(state_map[initial])

    return machine


def to_json(dfa: DFA, indent: int = 2) -> str:
    return json.dumps(serialize(dfa), indent=indent)


def from_json(text: str) -> DFA:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    return deserialize(data)


def save_json(dfa: DFA, path: Union[str, Path]):
    """Save DFA structure as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(serialize(dfa), f, indent=2)


def load_json(path: Union[str, Path]) -> DFA:
    """Load DFA from a JSON file written by save_json."""
    with open(path, 'r') as f:
        text = f.read()
    return from_json(text)


def save_dot(dfa: DFA, path: Union[str, Path]):
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        f.write(to_dot(dfa))
