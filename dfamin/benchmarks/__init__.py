"""
Benchmarking framework for measuring DFA minimization runs.
"""

from .metrics import MinimizationMetrics, MetricsCollector, BenchmarkResults
from .runner import measure_minimization, run_benchmark

__all__ = [
    "MinimizationMetrics",
    "MetricsCollector",
    "BenchmarkResults",
    "measure_minimization",
    "run_benchmark",
]
