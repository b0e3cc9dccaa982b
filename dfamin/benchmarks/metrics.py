"""
Metrics collection and storage for minimization runs.

Records how much each machine shrank, how much work the table-filling pass
did, and whether the minimized machine still recognizes the same language.
"""

import json
import time
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from ..core.dfa import DFA
from ..core.equivalence import EquivalenceTable


@dataclass
class MinimizationMetrics:
    """Metrics collected during a single minimization run."""

    # Machine sizes
    states_before: int = 0
    states_after: int = 0
    alphabet_size: int = 0

    # Analysis work
    equivalent_pairs: int = 0
    equivalence_classes: int = 0
    marks: int = 0
    dependency_edges: int = 0

    # Timing
    analysis_time: float = 0.0
    total_time: float = 0.0

    # Correctness check against the original machine
    language_preserved: Optional[bool] = None

    @property
    def reduction(self) -> float:
        """Fraction of states removed by minimization."""
        if self.states_before == 0:
            return 0.0
        return 1.0 - self.states_after / self.states_before


class MetricsCollector:
    """Collects metrics during one minimization."""

    def __init__(self):
        self.metrics = MinimizationMetrics()
        self._start_time = None

    def start(self, dfa: DFA):
        """Start timing and record the input machine's size."""
        self.metrics = MinimizationMetrics(states_before=len(dfa),
                                           alphabet_size=len(dfa.alphabet))
        self._start_time = time.perf_counter()

    def record_analysis(self, table: EquivalenceTable, elapsed: float):
        self.metrics.analysis_time = elapsed
        self.metrics.equivalent_pairs = len(table.equivalent_pairs())
        self.metrics.equivalence_classes = len(table.equivalence_classes())
        self.metrics.marks = table.marks
        self.metrics.dependency_edges = sum(len(deps) for deps in table.dependencies.values())

    def end(self, minimized: DFA, language_preserved: Optional[bool] = None):
        """Record the result machine and total time."""
        if self._start_time is not None:
            self.metrics.total_time = time.perf_counter() - self._start_time
        self.metrics.states_after = len(minimized)
        self.metrics.language_preserved = language_preserved

    def get_metrics(self) -> MinimizationMetrics:
        """Get the collected metrics."""
        return self.metrics


@dataclass
class BenchmarkResults:
    """Stores and analyzes results from multiple minimization runs."""

    results: Dict[str, List[MinimizationMetrics]] = field(default_factory=dict)
    # Structure: {source: [metrics1, metrics2, ...]}

    def add_result(self, source: str, metrics: MinimizationMetrics):
        """Add a benchmark result."""
        self.results.setdefault(source, []).append(metrics)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert results to a pandas DataFrame for analysis."""
        data = []
        for source, metrics_list in self.results.items():
            for i, metrics in enumerate(metrics_list):
                row = {'source': source, 'run': i}
                row.update(asdict(metrics))
                row['reduction'] = metrics.reduction
                data.append(row)

        columns = ['source', 'run'] + list(MinimizationMetrics.__dataclass_fields__) + ['reduction']
        return pd.DataFrame(data, columns=columns)

    def summary(self) -> pd.DataFrame:
        """Per-source averages."""
        df = self.to_dataframe()
        if df.empty:
            return df
        summary = df.groupby('source').agg({
            'states_before': 'mean',
            'states_after': 'mean',
            'equivalent_pairs': 'mean',
            'marks': 'mean',
            'total_time': 'mean',
            'reduction': 'mean',
        }).round(3)
        summary.columns = [
            'Avg States Before',
            'Avg States After',
            'Avg Equivalent Pairs',
            'Avg Marks',
            'Avg Time (s)',
            'Avg Reduction',
        ]
        return summary

    def export_to_csv(self, path: Path):
        """Export results to CSV file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self.to_dataframe().to_csv(path, index=False)

    def save_to_json(self, path: Path):
        """Save raw results to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        serializable_results = {
            source: [asdict(m) for m in metrics_list]
            for source, metrics_list in self.results.items()
        }
        with open(path, 'w') as f:
            json.dump(serializable_results, f, indent=2)

    def print_summary(self):
        """Print a clear summary of benchmark results."""
        print("\n" + "=" * 80)
        print("MINIMIZATION RESULTS SUMMARY")
        print("=" * 80)
        summary = self.summary()
        if summary.empty:
            print("No results recorded")
            return
        print(summary.to_string())

        df = self.to_dataframe()
        broken = df[df['language_preserved'] == False]  # noqa: E712
        if not broken.empty:
            print(f"\nWARNING: {len(broken)} runs changed the recognized language")
