"""
Tests for building spaces from YAML configuration.
"""

from pathlib import Path

import numpy as np
import pytest
import yaml
from motion_geometry.src.config.space_config import build_sampler, build_space, load_space, load_space_config
from motion_geometry.src.spaces.state_space import SpaceConfigurationError

DEFAULT_CONFIG = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"


def write_config(tmp_path, config):
    path = tmp_path / "space.yaml"
    path.write_text(yaml.safe_dump(config))
    return str(path)


class TestSpaceConfig:

    def test_default_config_builds_cart_pole(self):
        space = load_space(str(DEFAULT_CONFIG))
        assert space.name == "CartPoleStateSpace"
        assert space.get_dimension() == 4
        assert space.get_dimension_index("theta") == 2
        bounds = space.get_bounds()
        assert bounds.low[0] == -2.4
        assert bounds.high[3] == 10.0
        assert space.has_default_projection()

    def test_sampler_seed_from_config(self):
        config = load_space_config(str(DEFAULT_CONFIG))
        space = build_space(config)
        first, second = build_sampler(space, config), build_sampler(space, config)
        a, b = space.alloc_state(), space.alloc_state()
        first.sample_uniform(a)
        second.sample_uniform(b)
        np.testing.assert_array_equal(a.values, b.values)
        assert space.satisfies_bounds(a)

    def test_missing_sampler_section(self, tmp_path):
        config = {"space": {"dimensions": [{"low": 0, "high": 1}]}}
        space = load_space(write_config(tmp_path, config))
        sampler = build_sampler(space, config)
        state = space.alloc_state()
        sampler.sample_uniform(state)
        assert space.satisfies_bounds(state)

    def test_unnamed_dimensions_default_bounds(self, tmp_path):
        path = write_config(tmp_path, {"space": {"dimensions": [{}, {"name": "y", "high": 2}]}})
        space = load_space(path)
        assert space.get_dimension_name(0) == ""
        assert space.get_dimension_index("y") == 1
        assert space.get_maximum_extent() == pytest.approx(2.0)

    def test_missing_dimensions(self, tmp_path):
        with pytest.raises(ValueError, match="space.dimensions"):
            load_space(write_config(tmp_path, {"space": {"name": "Empty"}}))

    def test_inverted_bounds(self, tmp_path):
        config = {"space": {"dimensions": [{"name": "x", "low": 1, "high": 0}]}}
        with pytest.raises(SpaceConfigurationError):
            load_space(write_config(tmp_path, config))

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_space_config(str(path))
