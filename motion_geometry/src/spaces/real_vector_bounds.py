"""
Axis-aligned box bounds for ℝⁿ: one inclusive interval [low, high] per dimension.
"""
from typing import List, Optional, Sequence, Tuple

import numpy as np

from motion_geometry.src.spaces.state_space import SpaceConfigurationError


class RealVectorBounds:
    """
    Lower and upper bounds of a real vector space.

    Parameters
    ----------
    dim : int
        Number of dimensions. All bounds start at 0.0.
    """
    def __init__(self, dim: int = 0):
        self.low: List[float] = [0.0] * dim
        self.high: List[float] = [0.0] * dim

    @classmethod
    def from_pairs(cls, pairs: Sequence[Tuple[float, float]]) -> "RealVectorBounds":
        """
        Build bounds from ``[(low, high), ...]``, one pair per dimension.
        """
        bounds = cls(len(pairs))
        for i, (lower, upper) in enumerate(pairs):
            bounds.low[i] = float(lower)
            bounds.high[i] = float(upper)
        return bounds

    def set_low(self, value: float, index: Optional[int] = None):
        """Set the lower bound of dimension ``index``, or of every dimension when omitted."""
        if index is None:
            self.low = [float(value)] * len(self.low)
        else:
            self.low[index] = float(value)

    def set_high(self, value: float, index: Optional[int] = None):
        """Set the upper bound of dimension ``index``, or of every dimension when omitted."""
        if index is None:
            self.high = [float(value)] * len(self.high)
        else:
            self.high[index] = float(value)

    def resize(self, size: int):
        """Grow (with 0.0 bounds) or truncate to ``size`` dimensions."""
        self.low = (self.low + [0.0] * size)[:size]
        self.high = (self.high + [0.0] * size)[:size]

    def get_difference(self) -> List[float]:
        return [upper - lower for lower, upper in zip(self.low, self.high)]

    def get_volume(self) -> float:
        """Volume of the box (1.0 for zero dimensions)."""
        return float(np.prod(self.get_difference()))

    def check(self):
        """
        Validate the bounds.

        Raises
        ------
        SpaceConfigurationError
            If low and high have different lengths or some low exceeds its high.
        """
        if len(self.low) != len(self.high):
            raise SpaceConfigurationError(
                f"Lower bounds have length {len(self.low)} but upper bounds have length {len(self.high)}")
        for i, (lower, upper) in enumerate(zip(self.low, self.high)):
            if lower > upper:
                raise SpaceConfigurationError(
                    f"Bounds for dimension {i} are not valid: low={lower} > high={upper}")

    def copy(self) -> "RealVectorBounds":
        bounds = RealVectorBounds()
        bounds.low = list(self.low)
        bounds.high = list(self.high)
        return bounds

    def __len__(self) -> int:
        return len(self.low)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RealVectorBounds):
            return NotImplemented
        return self.low == other.low and self.high == other.high

    def __repr__(self) -> str:
        return f"RealVectorBounds(low={self.low}, high={self.high})"
