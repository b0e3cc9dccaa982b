"""
Batch minimization runs over random machines and the Tomita grammars.

Every minimized machine is checked against its original with the product
BFS, so the benchmark doubles as a correctness sweep.
"""

import time
from typing import Iterable, Optional

from ..config import MinimizationConfig
from ..core.dfa import DFA
from ..core.equivalence import EquivalenceAnalyzer
from ..core.minimizer import Minimizer
from ..grammars.tomita import TOMITA_GRAMMARS, build_tomita_dfa
from ..validation.language_check import languages_equal
from ..validation.random_dfas import RandomDFAGenerator
from .metrics import BenchmarkResults, MetricsCollector, MinimizationMetrics


def measure_minimization(dfa: DFA, config: Optional[MinimizationConfig] = None,
                         check_language: bool = True) -> MinimizationMetrics:
    """
    Minimize one machine and collect its metrics.

    Args:
        dfa: Complete DFA to minimize
        config: Minimization configuration
        check_language: Compare original and minimized machines afterwards
    """
    config = config or MinimizationConfig()
    collector = MetricsCollector()
    collector.start(dfa)

    analysis_start = time.perf_counter()
    table = EquivalenceAnalyzer(dfa, verbose=config.verbose).run()
    collector.record_analysis(table, time.perf_counter() - analysis_start)

    minimized = Minimizer(dfa, config=config).minimize(table)
    preserved = languages_equal(dfa, minimized) if check_language else None
    collector.end(minimized, preserved)

    return collector.get_metrics()


def run_benchmark(sizes: Iterable[int] = (5, 10, 20),
                  count: int = 3,
                  alphabet_size: int = 2,
                  seed: int = 42,
                  redundancy: int = 2,
                  accepting_ratio: float = 0.3,
                  include_tomita: bool = True,
                  config: Optional[MinimizationConfig] = None,
                  verbose: bool = False) -> BenchmarkResults:
    """
    Minimize random machines of each size (and optionally the Tomita DFAs).

    Returns:
        BenchmarkResults keyed by source ('random_states<N>' or 'tomita<N>')
    """
    results = BenchmarkResults()
    generator = RandomDFAGenerator(alphabet_size=alphabet_size)

    for size in sizes:
        for i in range(count):
            dfa = generator.generate_random_dfa(
                num_states=size,
                accepting_ratio=accepting_ratio,
                seed=seed + size * 1000 + i,
                redundancy=redundancy,
            )
            metrics = measure_minimization(dfa, config=config)
            results.add_result(f"random_states{size}", metrics)
            if verbose:
                print(f"  random_states{size} v{i+1}: {metrics.states_before} -> "
                      f"{metrics.states_after} states ({metrics.total_time:.4f}s)")

    if include_tomita:
        for grammar_id in TOMITA_GRAMMARS:
            metrics = measure_minimization(build_tomita_dfa(grammar_id), config=config)
            results.add_result(f"tomita{grammar_id}", metrics)
            if verbose:
                print(f"  tomita{grammar_id}: {metrics.states_before} -> "
                      f"{metrics.states_after} states")

    return results
