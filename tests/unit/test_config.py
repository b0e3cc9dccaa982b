"""
Test minimization configuration.
"""

import pytest

from dfamin.config import MinimizationConfig, MergeLabelStyle, get_default_config


class TestMinimizationConfig:

    def test_defaults(self):
        config = get_default_config()
        assert config.label_style == MergeLabelStyle.SORTED
        assert config.separator == "_"
        assert config.verbose is False

    def test_to_dict(self):
        config = MinimizationConfig(label_style=MergeLabelStyle.INSERTION, separator="|")
        assert config.to_dict() == {
            'label_style': 'insertion',
            'separator': '|',
            'verbose': False,
        }

    def test_from_dict_round_trip(self):
        config = MinimizationConfig(label_style=MergeLabelStyle.INSERTION, separator="+",
                                    verbose=True)
        assert MinimizationConfig.from_dict(config.to_dict()) == config

    def test_from_dict_defaults(self):
        assert MinimizationConfig.from_dict({}) == MinimizationConfig()

    def test_label_style_from_string(self):
        assert MinimizationConfig(label_style="insertion").label_style == MergeLabelStyle.INSERTION

    def test_unknown_label_style(self):
        with pytest.raises(ValueError):
            MinimizationConfig(label_style="random")

    def test_empty_separator(self):
        with pytest.raises(ValueError):
            MinimizationConfig(separator="")
