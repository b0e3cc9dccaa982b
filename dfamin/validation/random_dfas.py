"""
Generate random complete DFAs for validation testing.

Machines can be padded with redundant states (clones of existing states
with some incoming transitions redirected to them), which never changes
the recognized language but gives the minimizer something to merge.
"""

import json
import random
import subprocess
from pathlib import Path
from typing import Dict, List, Optional

from ..core.dfa import DFA
from ..core.serializer import serialize, to_dot


class RandomDFAGenerator:
    """Generate random DFAs with configurable alphabet sizes."""

    def __init__(self, alphabet_size: int = 2):
        """
        Initialize generator with specified alphabet size.

        Args:
            alphabet_size: Number of symbols in the alphabet
        """
        if alphabet_size <= 0:
            raise ValueError("alphabet_size must be > 0")
        self.alphabet_size = alphabet_size
        # Generate alphabet symbols: for size 2: ['0', '1'], for size 3: ['a', 'b', 'c'], etc.
        if alphabet_size <= 2:
            self.alphabet = ['0', '1'][:alphabet_size]
        elif alphabet_size <= 26:
            self.alphabet = [chr(ord('a') + i) for i in range(alphabet_size)]
        else:
            # For larger alphabets, use a0, a1, a2, ...
            self.alphabet = [f'a{i}' for i in range(alphabet_size)]

    def generate_random_dfa(self, num_states: int,
                            accepting_ratio: float = 0.3,
                            seed: Optional[int] = None,
                            redundancy: int = 0) -> DFA:
        """
        Generate a random complete DFA.

        Args:
            num_states: Number of states before redundant states are added
            accepting_ratio: Ratio of accepting states (0.0 to 1.0)
            seed: Random seed for reproducibility
            redundancy: Number of redundant clone states to add

        Returns:
            Complete DFA with num_states + redundancy states labelled q0, q1, ...
        """
        if num_states <= 0:
            raise ValueError("num_states must be > 0")
        if not 0.0 <= accepting_ratio <= 1.0:
            raise ValueError("accepting_ratio must be in [0, 1]")
        if redundancy < 0:
            raise ValueError("redundancy must be >= 0")

        rng = random.Random(seed)
        labels = [f"q{i}" for i in range(num_states)]

        num_accepting = round(num_states * accepting_ratio)
        accepting = set(rng.sample(labels, num_accepting))

        # label -> symbol -> target label
        transitions: Dict[str, Dict[str, str]] = {
            label: {symbol: rng.choice(labels) for symbol in self.alphabet}
            for label in labels
        }

        for i in range(redundancy):
            original = rng.choice(labels)
            clone = f"q{num_states + i}"
            transitions[clone] = dict(transitions[original])
            if original in accepting:
                accepting.add(clone)

            incoming = [(source, symbol)
                        for source in labels
                        for symbol, target in transitions[source].items()
                        if target == original]
            if incoming:
                source, symbol = rng.choice(incoming)
                transitions[source][symbol] = clone
            labels.append(clone)

        dfa = DFA(self.alphabet)
        states = {label: dfa.add_state(label, label in accepting) for label in labels}
        for label in labels:
            for symbol, target in transitions[label].items():
                dfa.add_transition(states[label], symbol, states[target])
        return dfa


def save_dfa(dfa: DFA, output_path: Path, dfa_id: str, render_png: bool = False):
    """Save DFA as JSON and DOT, optionally rendering a PNG with graphviz."""
    dfa_dir = Path(output_path) / dfa_id
    dfa_dir.mkdir(parents=True, exist_ok=True)

    with open(dfa_dir / 'dfa.json', 'w') as f:
        json.dump(serialize(dfa), f, indent=2)

    dot_path = dfa_dir / 'dfa.dot'
    with open(dot_path, 'w') as f:
        f.write(to_dot(dfa))

    if not render_png:
        print(f"  Saved {dfa_id}: {len(dfa)} states, alphabet size {len(dfa.alphabet)}")
        return

    try:
        subprocess.run(['dot', '-Tpng', str(dot_path), '-o', str(dfa_dir / 'dfa.png')],
                       check=True, capture_output=True)
        print(f"  Saved {dfa_id}: {len(dfa)} states, alphabet size {len(dfa.alphabet)}")
    except (subprocess.CalledProcessError, FileNotFoundError):
        print(f"  Saved {dfa_id}: JSON and DOT only (PNG generation requires graphviz)")


def generate_dataset(output_path: Path, sizes: List[int], count: int,
                     alphabet_size: int = 2, accepting_ratio: float = 0.3,
                     seed: int = 42, redundancy: int = 0,
                     render_png: bool = False) -> Dict:
    """
    Generate and save count DFAs for each size, plus a metadata.json index.

    Returns:
        The metadata dictionary
    """
    output_path = Path(output_path)
    output_path.mkdir(parents=True, exist_ok=True)
    generator = RandomDFAGenerator(alphabet_size=alphabet_size)

    all_dfas = []
    for size in sizes:
        for i in range(count):
            # Create unique seed for each DFA
            dfa_seed = seed + size * 1000 + i
            dfa = generator.generate_random_dfa(
                num_states=size,
                accepting_ratio=accepting_ratio,
                seed=dfa_seed,
                redundancy=redundancy,
            )
            dfa_id = f"alphabet{alphabet_size}_states{size}_v{i+1}"
            save_dfa(dfa, output_path, dfa_id, render_png=render_png)
            all_dfas.append({
                'id': dfa_id,
                'num_states': len(dfa),
                'alphabet_size': alphabet_size,
                'seed': dfa_seed,
            })

    metadata = {
        'alphabet_size': alphabet_size,
        'alphabet': generator.alphabet,
        'sizes': list(sizes),
        'count_per_size': count,
        'accepting_ratio': accepting_ratio,
        'redundancy': redundancy,
        'base_seed': seed,
        'dfas': all_dfas,
    }
    with open(output_path / 'metadata.json', 'w') as f:
        json.dump(metadata, f, indent=2)

    return metadata
