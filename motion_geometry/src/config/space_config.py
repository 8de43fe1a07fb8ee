"""
Build state spaces from YAML configuration files.

Expected layout::

    space:
      name: CartPoleStateSpace
      dimensions:
        - {name: x, low: -2.4, high: 2.4}
        - {name: theta, low: -3.14159, high: 3.14159}
    sampler:
      seed: 0
"""
import logging
from typing import Any, Dict, Optional

import yaml

from motion_geometry.src.spaces.real_vector_space import RealVectorStateSampler, RealVectorStateSpace

logger = logging.getLogger(__name__)


def load_space_config(path: str) -> Dict[str, Any]:
    """Read a YAML configuration file."""
    with open(path, 'r') as f:
        config = yaml.safe_load(f)
    if not isinstance(config, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping, got {type(config).__name__}")
    return config


def build_space(config: Dict[str, Any]) -> RealVectorStateSpace:
    """
    Create and set up a real vector space from a configuration mapping.

    Parameters
    ----------
    config : Dict[str, Any]
        Parsed configuration with a ``space.dimensions`` list. Each entry
        may carry ``name``, ``low`` and ``high`` (all optional).

    Returns
    -------
    RealVectorStateSpace
        Space after ``setup()``.
    """
    space_config = config.get("space") or {}
    dimensions = space_config.get("dimensions")
    if not dimensions:
        raise ValueError("Configuration must define a non-empty 'space.dimensions' list")

    space = RealVectorStateSpace()
    if space_config.get("name"):
        space.name = space_config["name"]
    for entry in dimensions:
        space.add_dimension(float(entry.get("low", 0.0)),
                            float(entry.get("high", 0.0)),
                            name=entry.get("name", ""))
    space.setup()
    logger.info("Built space %s with %d dimension(s)", space.name, space.get_dimension())
    return space


def build_sampler(space: RealVectorStateSpace, config: Dict[str, Any]) -> RealVectorStateSampler:
    seed: Optional[int] = (config.get("sampler") or {}).get("seed")
    return space.alloc_state_sampler(seed)


def load_space(path: str) -> RealVectorStateSpace:
    return build_space(load_space_config(path))
