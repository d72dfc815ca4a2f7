"""
Spatial partitioning for proximity queries against committed branches.
Uses scipy's KDTree over segment midpoints as a conservative broad phase:
two segments closer than d have midpoints closer than d plus their half lengths.
"""

import numpy as np
from scipy.spatial import cKDTree
from typing import List, Optional, Sequence

from .branch import Branch


class SegmentSpatialIndex:
    """KD-Tree over branch midpoints, rebuilt lazily after the segment list changes."""

    def __init__(self):
        self._tree: Optional[cKDTree] = None
        self._coords: np.ndarray = np.empty((0, 4))
        self._widths: np.ndarray = np.empty(0)
        self._max_half_length: float = 0.0
        self._max_width: float = 0.0
        self._dirty = True

    def invalidate(self):
        self._dirty = True

    def rebuild(self, segments: Sequence[Branch]):
        self._coords = np.array(
            [[b.x1, b.y1, b.x2, b.y2] for b in segments], dtype=np.float64
        ).reshape(-1, 4)
        self._widths = np.array([b.width for b in segments], dtype=np.float64)
        self._dirty = False

        if len(self._coords) == 0:
            self._tree = None
            self._max_half_length = 0.0
            self._max_width = 0.0
            return

        starts, ends = self._coords[:, 0:2], self._coords[:, 2:4]
        self._max_half_length = float(np.max(np.linalg.norm(ends - starts, axis=1))) / 2
        self._max_width = float(np.max(self._widths))
        self._tree = cKDTree((starts + ends) / 2)

    def ensure_current(self, segments: Sequence[Branch]):
        if self._dirty or len(self._coords) != len(segments):
            self.rebuild(segments)

    def candidates(self, branch: Branch, clearance: float) -> List[int]:
        """
        Indices of every indexed segment that could lie within
        clearance + half widths of the given branch. May over-report, never under-reports.
        """
        if self._tree is None:
            return []

        half_length = np.hypot(branch.x2 - branch.x1, branch.y2 - branch.y1) / 2
        radius = (clearance + 0.5 * (branch.width + self._max_width)
                  + half_length + self._max_half_length + 1e-6)
        midpoint = [(branch.x1 + branch.x2) / 2, (branch.y1 + branch.y2) / 2]
        return sorted(self._tree.query_ball_point(midpoint, radius))

    @property
    def coords(self) -> np.ndarray:
        return self._coords

    @property
    def widths(self) -> np.ndarray:
        return self._widths
