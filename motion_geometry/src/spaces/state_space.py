"""
Abstract state space S and its sampler, as consumed by sampling-based planners.

A planner only ever holds a ``StateSpace`` reference; concrete spaces
(ℝⁿ, rotations, compound spaces) implement the geometric operations below.
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

import numpy as np

from motion_geometry.src.spaces.projections import ProjectionEvaluator

logger = logging.getLogger(__name__)

DEFAULT_PROJECTION_NAME = ""


class SpaceConfigurationError(ValueError):
    """Raised when a space is configured with inconsistent bounds or dimensions."""


class StateSpace(ABC):
    """
    Capability set shared by every kind of state space.

    Configuration (adding dimensions, setting bounds) happens on a single
    thread before ``setup()``. After ``setup()`` the space is a read-only
    descriptor that any number of planner threads may query concurrently,
    provided nobody mutates it at the same time.
    """
    _instance_count = 0

    def __init__(self):
        self._name = f"Space{StateSpace._instance_count}"
        StateSpace._instance_count += 1
        self._projections: Dict[str, ProjectionEvaluator] = {}
        self._projections_registered = False

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str):
        self._name = value

    @abstractmethod
    def get_dimension(self) -> int:
        """Number of coordinates of a state in this space."""

    @abstractmethod
    def get_maximum_extent(self) -> float:
        """Largest distance that can be reported between two states."""

    @abstractmethod
    def enforce_bounds(self, state) -> None:
        """Bring ``state`` back inside the space bounds, in place."""

    @abstractmethod
    def satisfies_bounds(self, state) -> bool:
        """Check whether ``state`` lies inside the space bounds."""

    @abstractmethod
    def copy_state(self, destination, source) -> None:
        """Copy the coordinates of ``source`` into ``destination``."""

    @abstractmethod
    def distance(self, state1, state2) -> float:
        """Metric distance between two states."""

    @abstractmethod
    def equal_states(self, state1, state2) -> bool:
        """Check whether two states are the same point."""

    @abstractmethod
    def interpolate(self, from_state, to_state, t: float, state) -> None:
        """Write the point at fraction ``t`` from ``from_state`` to ``to_state`` into ``state``."""

    @abstractmethod
    def alloc_state_sampler(self, seed: Optional[int] = None) -> "StateSampler":
        """Create a sampler bound to this space."""

    @abstractmethod
    def alloc_state(self):
        """Create a state of this space."""

    @abstractmethod
    def free_state(self, state) -> None:
        """Release a state created by ``alloc_state``."""

    @abstractmethod
    def print_state(self, state, out=None) -> None:
        """Write a human readable form of ``state``."""

    @abstractmethod
    def print_settings(self, out=None) -> None:
        """Write a human readable description of the space."""

    def clone_state(self, source):
        """Allocate a new state holding the same coordinates as ``source``."""
        state = self.alloc_state()
        self.copy_state(state, source)
        return state

    # Projections

    def register_projections(self) -> None:
        """Register the projections a space offers by default. None for the base space."""

    def register_projection(self, name: str, projection: ProjectionEvaluator) -> None:
        """
        Register a projection under ``name``.

        Parameters
        ----------
        name : str
            Key of the projection. The empty string is the default projection.
        projection : ProjectionEvaluator
            Evaluator mapping states of this space to a lower dimensional view.
        """
        self._projections[name] = projection

    def register_default_projection(self, projection: ProjectionEvaluator) -> None:
        self.register_projection(DEFAULT_PROJECTION_NAME, projection)

    def get_projection(self, name: str) -> ProjectionEvaluator:
        if name not in self._projections:
            label = "default projection" if name == DEFAULT_PROJECTION_NAME else f"projection '{name}'"
            raise KeyError(f"No {label} registered for space {self.name}")
        return self._projections[name]

    def get_default_projection(self) -> ProjectionEvaluator:
        return self.get_projection(DEFAULT_PROJECTION_NAME)

    def has_projection(self, name: str) -> bool:
        return name in self._projections

    def has_default_projection(self) -> bool:
        return self.has_projection(DEFAULT_PROJECTION_NAME)

    def get_registered_projections(self) -> Dict[str, ProjectionEvaluator]:
        return dict(self._projections)

    def setup(self) -> None:
        """
        Finish configuration. Registers the default projections the first
        time it is called; projections registered by hand are kept.
        Later calls do not re-register, so projections created before a
        dimension was added keep their original coordinates.
        """
        if not self._projections_registered:
            self.register_projections()
            self._projections_registered = True
        logger.debug("Space %s set up with %d projection(s)", self.name, len(self._projections))


class StateSampler(ABC):
    """
    Random state generator bound to one space.

    The sampler does not own the space. It owns its random generator, so
    a sampler must not be shared between threads: allocate one per thread,
    all bound to the same space.

    Parameters
    ----------
    space : StateSpace
        Space whose bounds constrain the samples.
    seed : Optional[int]
        Seed for the sampler's generator. ``None`` draws fresh entropy.
    """
    def __init__(self, space: StateSpace, seed: Optional[int] = None):
        self.space = space
        self.rng = np.random.default_rng(seed)

    @abstractmethod
    def sample_uniform(self, state) -> None:
        """Sample ``state`` uniformly from the space."""

    @abstractmethod
    def sample_uniform_near(self, state, near, distance: float) -> None:
        """Sample ``state`` uniformly from a neighborhood of ``near``."""

    @abstractmethod
    def sample_gaussian(self, state, mean, std_dev: float) -> None:
        """Sample ``state`` from a normal distribution centered at ``mean``."""
