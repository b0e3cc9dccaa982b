"""
Configuration for minimization runs.

Controls how merged equivalence classes are labelled and whether progress
is printed.
"""

from dataclasses import dataclass
from typing import Dict, Any
from enum import Enum


class MergeLabelStyle(Enum):
    """Member ordering used when building a merged state's label."""
    SORTED = "sorted"        # Lexicographic by label, independent of discovery order
    INSERTION = "insertion"  # By state index in the original machine


@dataclass
class MinimizationConfig:
    """Configuration for a minimization run."""

    label_style: MergeLabelStyle = MergeLabelStyle.SORTED
    separator: str = "_"
    verbose: bool = False

    def __post_init__(self):
        if isinstance(self.label_style, str):
            self.label_style = MergeLabelStyle(self.label_style)
        if not self.separator:
            raise ValueError("separator must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary for serialization."""
        return {
            'label_style': self.label_style.value,
            'separator': self.separator,
            'verbose': self.verbose,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MinimizationConfig':
        return cls(
            label_style=MergeLabelStyle(data.get('label_style', MergeLabelStyle.SORTED.value)),
            separator=data.get('separator', '_'),
            verbose=bool(data.get('verbose', False)),
        )


def get_default_config() -> MinimizationConfig:
    """Get the default minimization configuration."""
    return MinimizationConfig()
