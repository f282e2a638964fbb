"""Curve - polyline element defined by two coordinate arrays.

A curve is drawn through the points (data_x[i], data_y[i]). A NaN in
either coordinate is a break marker: the renderer lifts the pen there and
starts a new path with the next point. Subclasses generate their data by
overriding update_data_array().
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, List, Mapping, Optional, Sequence

import numpy as np

from ..core.errors import InvalidParametersError
from ..options import CurveOptions, copy_attributes
from ..utils.type import is_array, type_name

if TYPE_CHECKING:
    from ..board import Board


class Curve:
    """
    Polyline element.

    Attributes:
        board: Board the element lives on
        elem_type: Type identifier ('curve' or a subclass type)
        vis_prop: Merged visual attributes
        data_x, data_y: Point coordinates, NaN marks a break
    """

    def __init__(
        self,
        board: 'Board',
        data_x: Optional[Sequence[float]] = None,
        data_y: Optional[Sequence[float]] = None,
        vis_prop: Optional[CurveOptions] = None,
    ):
        self.board = board
        self.elem_type = 'curve'
        self.vis_prop = vis_prop if vis_prop is not None else CurveOptions()
        self.data_x: List[float] = [float(v) for v in (data_x if data_x is not None else [])]
        self.data_y: List[float] = [float(v) for v in (data_y if data_y is not None else [])]

    def update_data_array(self) -> None:
        """Hook for subclasses that compute their points; plain curves keep their data."""

    def update(self) -> 'Curve':
        self.update_data_array()
        return self

    @property
    def number_points(self) -> int:
        return len(self.data_x)

    def points(self) -> np.ndarray:
        """Points as an (n, 2) float array, break markers included."""
        if not self.data_x:
            return np.empty((0, 2))
        return np.column_stack((self.data_x, self.data_y)).astype(float)

    def segments(self) -> List[np.ndarray]:
        """
        Split the curve at break markers.

        Returns:
            One (k, 2) array per connected path, in drawing order; empty
            paths between consecutive breaks are dropped
        """
        points = self.points()
        if len(points) == 0:
            return []
        breaks = np.isnan(points).any(axis=1)
        segments = []
        start = 0
        for index in np.flatnonzero(breaks):
            if index > start:
                segments.append(points[start:index])
            start = index + 1
        if start < len(points):
            segments.append(points[start:])
        return segments

    # camelCase aliases used by board-level scripts

    @property
    def dataX(self) -> List[float]:
        return self.data_x

    @property
    def dataY(self) -> List[float]:
        return self.data_y

    def updateDataArray(self) -> None:
        self.update_data_array()

    def __repr__(self) -> str:
        breaks = sum(1 for x, y in zip(self.data_x, self.data_y) if math.isnan(x) or math.isnan(y))
        return f"{type(self).__name__}(points={self.number_points}, breaks={breaks})"


def create_curve(
    board: 'Board',
    parents: Sequence[Any],
    attributes: Optional[Mapping[str, Any]] = None,
) -> Curve:
    """
    Factory for 'curve' elements.

    Args:
        board: Owning board
        parents: [data_x, data_y], two arrays of equal length
        attributes: Visual attributes

    Raises:
        InvalidParametersError: If parents are not two equal-length arrays
    """
    if not (
        len(parents) >= 2
        and is_array(parents[0])
        and is_array(parents[1])
        and len(parents[0]) == len(parents[1])
    ):
        raise InvalidParametersError('curve', [type_name(p) for p in parents[:2]])

    vis_prop = copy_attributes(attributes, board.options, 'curve')
    return Curve(board, parents[0], parents[1], vis_prop)


__all__ = ['Curve', 'create_curve']
