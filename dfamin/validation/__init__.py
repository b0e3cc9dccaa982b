"""Validation helpers: language comparison and random machine generation."""

from .language_check import find_counterexample, languages_equal
from .random_dfas import RandomDFAGenerator, save_dfa, generate_dataset

__all__ = [
    'find_counterexample',
    'languages_equal',
    'RandomDFAGenerator',
    'save_dfa',
    'generate_dataset',
]
