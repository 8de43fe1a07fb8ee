"""
Projections of states onto low dimensional views, used to visualize
the states a planner explores.
"""
from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence

import numpy as np


class ProjectionEvaluator(ABC):
    """
    Map from states of a space to points of ℝᵏ.

    Parameters
    ----------
    space : StateSpace
        Space whose states are projected.
    """
    def __init__(self, space):
        self.space = space

    @abstractmethod
    def get_dimension(self) -> int:
        """Dimension k of the projection."""

    @abstractmethod
    def project(self, state) -> np.ndarray:
        """Project a single state to an array of shape (k,)."""

    def project_states(self, states: Iterable) -> np.ndarray:
        """
        Project several states at once.

        Parameters
        ----------
        states : Iterable
            States of the space.

        Returns
        -------
        np.ndarray
            Array of shape (n_states, k).
        """
        projected = [self.project(state) for state in states]
        if not projected:
            return np.zeros((0, self.get_dimension()))
        return np.vstack(projected)


class SubsetProjection(ProjectionEvaluator):
    """
    Keep a subset of the coordinates of a state.

    Parameters
    ----------
    space : StateSpace
        Space whose states are projected.
    indices : Sequence[int]
        Coordinates to keep, in output order.
    """
    def __init__(self, space, indices: Sequence[int]):
        super().__init__(space)
        dimension = space.get_dimension()
        for index in indices:
            if not 0 <= index < dimension:
                raise IndexError(
                    f"Projection index {index} out of range for space of dimension {dimension}")
        self.indices: List[int] = list(indices)

    def get_dimension(self) -> int:
        return len(self.indices)

    def project(self, state) -> np.ndarray:
        return state.values[self.indices].copy()


class IdentityProjection(SubsetProjection):
    """Keep every coordinate."""
    def __init__(self, space):
        super().__init__(space, range(space.get_dimension()))
