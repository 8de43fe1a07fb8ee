"""
The Euclidean state space ℝⁿ with optional per-dimension bounds and names.

The distance is the L2 norm. Sampling is constrained to the bounding box.
"""
import logging
import math
import sys
import threading
from typing import Dict, List, Optional

import numpy as np

from motion_geometry.src.spaces.projections import IdentityProjection, SubsetProjection
from motion_geometry.src.spaces.real_vector_bounds import RealVectorBounds
from motion_geometry.src.spaces.state_space import (
    SpaceConfigurationError,
    StateSampler,
    StateSpace,
)

logger = logging.getLogger(__name__)

# Relative tolerance for equal_states, scaled by max(1, |a|, |b|) per coordinate.
EQUALITY_TOLERANCE = 1e-9


class RealVectorState:
    """
    A point of ℝⁿ.

    ``state[i]`` reads and writes ``values[i]`` directly and is meant for
    inner loops: the caller guarantees ``0 <= i < len(state)``. Use
    ``get`` when the index is not known to be valid.
    """
    __slots__ = ("values",)

    def __init__(self, dimension: int):
        self.values = np.zeros(dimension, dtype=np.float64)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __setitem__(self, index: int, value: float):
        self.values[index] = value

    def __len__(self) -> int:
        return len(self.values)

    def get(self, index: int, default: Optional[float] = None) -> Optional[float]:
        """Coordinate ``index``, or ``default`` when the index is out of range."""
        if 0 <= index < len(self.values):
            return float(self.values[index])
        return default

    def as_array(self) -> np.ndarray:
        return self.values.copy()

    def __repr__(self) -> str:
        return f"RealVectorState({self.values.tolist()})"


class RealVectorStateSpace(StateSpace):
    """
    State space S = ℝⁿ bounded by an axis-aligned box.

    Typical use is to add dimensions (or pass ``dim``), set bounds, call
    ``setup()``, then allocate states and samplers. The dimension and
    bounds must not change once states have been allocated: states keep
    the length they were created with, and mixing lengths is not
    detected. Changing them after ``setup()`` is logged as a warning
    but still performed.

    ``alloc_state`` and ``free_state`` may be called from several planner
    threads at once; the count of live states is kept under a lock.

    Parameters
    ----------
    dim : int
        Initial number of dimensions, all unnamed with [0, 0] bounds.
    """
    def __init__(self, dim: int = 0):
        super().__init__()
        self.name = "RealVector" + self.name
        self._dimension = dim
        self._bounds = RealVectorBounds(dim)
        self._dimension_names: List[str] = [""] * dim
        self._dimension_index: Dict[str, int] = {}
        self._maximum_extent: Optional[float] = None
        self._is_setup = False
        self._live_states = 0
        self._live_states_lock = threading.Lock()
        self._update_bound_arrays()

    def _update_bound_arrays(self):
        self._low = np.array(self._bounds.low, dtype=np.float64)
        self._high = np.array(self._bounds.high, dtype=np.float64)
        self._low.flags.writeable = False
        self._high.flags.writeable = False

    def _warn_if_setup(self, operation: str):
        if self._is_setup:
            logger.warning("%s called on space %s after setup(); existing states and samplers "
                           "may become inconsistent", operation, self.name)

    # Configuration

    def add_dimension(self, min_bound: float = 0.0, max_bound: float = 0.0, name: str = ""):
        """
        Increase the dimension by one.

        Parameters
        ----------
        min_bound, max_bound : float
            Bounds of the new dimension.
        name : str
            Optional name of the new dimension.
        """
        self._warn_if_setup("add_dimension")
        self._dimension += 1
        self._bounds.low.append(float(min_bound))
        self._bounds.high.append(float(max_bound))
        self._dimension_names.append("")
        self._update_bound_arrays()
        self._maximum_extent = None
        if name:
            self.set_dimension_name(self._dimension - 1, name)

    def add_named_dimension(self, name: str, min_bound: float = 0.0, max_bound: float = 0.0):
        """Increase the dimension by one and name the new dimension."""
        self.add_dimension(min_bound, max_bound, name=name)

    def set_bounds(self, bounds: RealVectorBounds):
        """
        Replace the bounds of the space. These define the region sampled by
        the space's samplers.

        Parameters
        ----------
        bounds : RealVectorBounds
            New bounds, one interval per dimension. A copy is stored.

        Raises
        ------
        SpaceConfigurationError
            If the bounds have the wrong dimension or some low exceeds its
            high. The current bounds are left unchanged.
        """
        if len(bounds) != self._dimension:
            raise SpaceConfigurationError(
                f"Bounds have dimension {len(bounds)} but space {self.name} "
                f"has dimension {self._dimension}")
        bounds.check()
        self._warn_if_setup("set_bounds")
        self._bounds = bounds.copy()
        self._update_bound_arrays()
        self._maximum_extent = None

    def get_bounds(self) -> RealVectorBounds:
        return self._bounds.copy()

    @property
    def lower_bounds(self) -> np.ndarray:
        """Read-only array of lower bounds."""
        return self._low

    @property
    def upper_bounds(self) -> np.ndarray:
        """Read-only array of upper bounds."""
        return self._high

    def get_dimension(self) -> int:
        return self._dimension

    @property
    def dimension(self) -> int:
        return self._dimension

    def get_dimension_name(self, index: int) -> str:
        """
        Name of dimension ``index``, or the empty string if it has none or
        the index is past the last dimension.

        Raises
        ------
        IndexError
            If ``index`` is negative.
        """
        if index < 0:
            raise IndexError(f"Dimension index must be non-negative, got {index}")
        if index < self._dimension:
            return self._dimension_names[index]
        return ""

    def get_dimension_index(self, name: str) -> int:
        """Index of the dimension called ``name``, or -1 if there is none."""
        return self._dimension_index.get(name, -1)

    def set_dimension_name(self, index: int, name: str):
        """
        Name dimension ``index``. The name now resolves to ``index`` even if
        another dimension used it before. When the dimension's previous name
        is still held by other dimensions, it resolves to the last of them.

        Raises
        ------
        IndexError
            If ``index`` is not in [0, dimension).
        """
        if not 0 <= index < self._dimension:
            raise IndexError(
                f"Cannot set name for dimension {index}: space {self.name} "
                f"has dimension {self._dimension}")
        previous = self._dimension_names[index]
        self._dimension_names[index] = name
        if previous and self._dimension_index.get(previous) == index:
            holders = [i for i, n in enumerate(self._dimension_names) if n == previous]
            if holders:
                self._dimension_index[previous] = holders[-1]
            else:
                del self._dimension_index[previous]
        if name:
            self._dimension_index[name] = index

    # Geometry

    def _compute_maximum_extent(self) -> float:
        return float(np.sqrt(np.sum((self._high - self._low) ** 2)))

    def get_maximum_extent(self) -> float:
        """
        Length of the diagonal of the bounding box. Cached; recomputed by
        ``setup()`` or on the first read after the bounds or dimension change.
        """
        if self._maximum_extent is None:
            self._maximum_extent = self._compute_maximum_extent()
        return self._maximum_extent

    def enforce_bounds(self, state: RealVectorState):
        np.clip(state.values, self._low, self._high, out=state.values)

    def satisfies_bounds(self, state: RealVectorState) -> bool:
        values = state.values
        return bool(np.all((values >= self._low) & (values <= self._high)))

    def copy_state(self, destination: RealVectorState, source: RealVectorState):
        destination.values[:] = source.values

    def distance(self, state1: RealVectorState, state2: RealVectorState) -> float:
        """
        Euclidean distance between two states.

        Parameters
        ----------
        state1, state2 : RealVectorState
            States of this space.

        Returns
        -------
        float
            L2 norm of the difference.
        """
        return float(np.linalg.norm(state1.values - state2.values))

    def equal_states(self, state1: RealVectorState, state2: RealVectorState) -> bool:
        a = state1.values
        b = state2.values
        scale = np.maximum(1.0, np.maximum(np.abs(a), np.abs(b)))
        return bool(np.all(np.abs(a - b) <= EQUALITY_TOLERANCE * scale))

    def interpolate(self, from_state: RealVectorState, to_state: RealVectorState,
                    t: float, state: RealVectorState):
        """
        Linear interpolation ``from + t * (to - from)``, written into ``state``.
        Values of ``t`` outside [0, 1] extrapolate along the same line.
        """
        state.values[:] = from_state.values + t * (to_state.values - from_state.values)

    # Allocation

    def alloc_state_sampler(self, seed: Optional[int] = None) -> "RealVectorStateSampler":
        return RealVectorStateSampler(self, seed)

    def alloc_state(self) -> RealVectorState:
        """Allocate a zero state with the current dimension."""
        with self._live_states_lock:
            self._live_states += 1
        return RealVectorState(self._dimension)

    def free_state(self, state: RealVectorState):
        """
        Release a state obtained from ``alloc_state``.

        Raises
        ------
        ValueError
            If the state was already freed.
        """
        if state.values is None:
            raise ValueError("State has already been freed")
        state.values = None
        with self._live_states_lock:
            self._live_states -= 1

    @property
    def live_states(self) -> int:
        """Number of states allocated and not yet freed."""
        return self._live_states

    # Diagnostics

    def print_state(self, state: RealVectorState, out=None):
        out = sys.stdout if out is None else out
        if state is None or state.values is None:
            print("RealVectorState [NULL]", file=out)
            return
        print("RealVectorState [" + " ".join(f"{v:g}" for v in state.values) + "]", file=out)

    def print_settings(self, out=None):
        out = sys.stdout if out is None else out
        print(f"Real vector state space '{self.name}' of dimension {self._dimension}", file=out)
        for i in range(self._dimension):
            label = self._dimension_names[i] or f"dim{i}"
            print(f"  - {label}: [{self._bounds.low[i]:g}, {self._bounds.high[i]:g}]", file=out)

    # Lifecycle

    def register_projections(self):
        """
        Register the default projection (identity up to two dimensions,
        otherwise the first max(2, ceil(log n)) coordinates) and one
        single-coordinate projection per named dimension. Projections
        already registered under the same names are left in place.
        """
        if self._dimension == 0:
            return
        if not self.has_default_projection():
            if self._dimension <= 2:
                self.register_default_projection(IdentityProjection(self))
            else:
                size = max(2, int(math.ceil(math.log(self._dimension))))
                self.register_default_projection(SubsetProjection(self, range(size)))
        for name, index in self._dimension_index.items():
            if not self.has_projection(name):
                self.register_projection(name, SubsetProjection(self, [index]))

    def setup(self):
        """
        Finish configuration: cache the maximum extent and register the
        default projections. The space is read-only from here on.

        Raises
        ------
        SpaceConfigurationError
            If some dimension has a lower bound above its upper bound.
        """
        self._bounds.check()
        self._maximum_extent = self._compute_maximum_extent()
        super().setup()
        self._is_setup = True
        logger.debug("Space %s: dimension=%d, maximum extent=%.6g",
                     self.name, self._dimension, self._maximum_extent)


class RealVectorStateSampler(StateSampler):
    """
    Sampler for ℝⁿ.

    Neighborhood and Gaussian samples are clamped into the bounds after
    drawing. For the Gaussian policy this piles probability mass on the
    boundary instead of truncating the distribution; planners accept
    this approximation.
    """

    def sample_uniform(self, state: RealVectorState):
        """Draw each coordinate uniformly from [low[i], high[i]]."""
        state.values[:] = self.rng.uniform(self.space.lower_bounds, self.space.upper_bounds)

    def sample_uniform_near(self, state: RealVectorState, near: RealVectorState, distance: float):
        """
        Draw each coordinate uniformly from [near[i] - distance, near[i] + distance],
        then clamp into the bounds. The neighborhood is a box, not an L2 ball.
        """
        draws = self.rng.uniform(near.values - distance, near.values + distance)
        np.clip(draws, self.space.lower_bounds, self.space.upper_bounds, out=state.values)

    def sample_gaussian(self, state: RealVectorState, mean: RealVectorState, std_dev: float):
        """Draw each coordinate from N(mean[i], std_dev²), then clamp into the bounds."""
        draws = self.rng.normal(mean.values, std_dev)
        np.clip(draws, self.space.lower_bounds, self.space.upper_bounds, out=state.values)
