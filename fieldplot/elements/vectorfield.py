"""Vectorfield - arrow plot of a 2D vector field.

Samples a vector-valued function F(x, y) -> (dx, dy) on a regular mesh and
draws every sampled vector as a short polyline starting at its grid point,
optionally finished with a two-stroke arrow head. The glyph of each grid
point is closed by a NaN break, so no two glyphs are ever connected.

The field is given either by two scalar functions f1(x, y) and f2(x, y),
or by one function returning a pair. Components may also be written as
expressions in x and y:

    board.create('vectorfield', [
        [lambda x, y: math.sin(y), lambda x, y: math.cos(x)],   # or ['sin(y)', 'cos(x)']
        [-6, 25, 6],   # horizontal mesh: start, steps, end
        [-5, 20, 5],   # vertical mesh
    ])

Mesh entries, ``scale`` and the arrow head attributes may be zero-argument
callables (e.g. bound to sliders); they are re-read on every update:

    field = board.create('vectorfield', [
        [lambda x, y: 0.2 * y, lambda x, y: 0.2 * (math.cos(x) - 2) * math.sin(x)],
        [-6, lambda: steps.value(), 6],
        [-5, lambda: steps.value(), 5],
    ], {
        'scale': lambda: length.value(),
        'arrowHead': {'enabled': True, 'size': 8, 'angle': math.pi / 16},
    })
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Callable, List, Mapping, Optional, Sequence, Tuple

from ..core.config import get_settings
from ..core.errors import InvalidMeshError, InvalidParametersError
from ..core.logging import get_context_logger
from ..formula import as_component
from ..options import VectorFieldOptions, copy_attributes
from ..utils.type import evaluate, is_array, is_function, is_number, type_name
from .curve import Curve

if TYPE_CHECKING:
    from ..board import Board

logger = get_context_logger(__name__, element='vectorfield')

FieldFunction = Callable[[float, float], Sequence[float]]
MeshTriple = Sequence[Any]


class VectorField(Curve):
    """
    Vector field element.

    Attributes:
        F: Canonical field function (x, y) -> (dx, dy)
        x_data: Horizontal mesh (start, steps, end); entries may be lazy
        y_data: Vertical mesh (start, steps, end); entries may be lazy
        data_x, data_y: Emitted polyline, NaN between glyphs
    """

    def __init__(
        self,
        board: 'Board',
        func: Any,
        x_data: MeshTriple,
        y_data: MeshTriple,
        vis_prop: Optional[VectorFieldOptions] = None,
    ):
        super().__init__(board, [], [], vis_prop if vis_prop is not None else VectorFieldOptions())
        self.elem_type = 'vectorfield'
        self.F: FieldFunction
        self.set_f(func)
        self.x_data = x_data
        self.y_data = y_data

    def set_f(self, func: Any) -> 'VectorField':
        """
        Set the defining function of the field.

        Args:
            func: Either a pair [f1, f2] of functions f(x, y) (or
                expressions in x and y), or a function f(x, y) returning
                a pair

        Returns:
            The element, for chaining (call board.update() to redraw)
        """
        if is_array(func):
            f1 = as_component(func[0])
            f2 = as_component(func[1])
            self.F = lambda x, y: (f1(x, y), f2(x, y))
        else:
            self.F = func
        return self

    def update_data_array(self) -> None:
        """Sample the field and rebuild data_x / data_y."""
        scale = evaluate(self.vis_prop.scale)
        start_x, steps_x, end_x = self._resolve_mesh(self.x_data, 'x')
        start_y, steps_y, end_y = self._resolve_mesh(self.y_data, 'y')

        # Zero steps: one sample at start
        delta_x = (end_x - start_x) / steps_x if steps_x else 0.0
        delta_y = (end_y - start_y) / steps_y if steps_y else 0.0

        grid_points = (steps_x + 1) * (steps_y + 1)
        max_points = get_settings().MAX_GRID_POINTS
        if max_points is not None and grid_points > max_points:
            raise InvalidMeshError(
                f"Vector field grid has {grid_points} points, limit is {max_points}",
                value=grid_points,
            )

        arrowhead = self.vis_prop.arrowhead
        show_arrow = bool(evaluate(arrowhead.enabled))
        leg_x = leg_y = alpha = 0.0
        if show_arrow:
            leg = evaluate(arrowhead.size)
            leg_x = leg / self.board.unit_x
            leg_y = leg / self.board.unit_y
            alpha = evaluate(arrowhead.angle)

        data_x: List[float] = []
        data_y: List[float] = []

        for i in range(steps_x + 1):
            x = start_x + i * delta_x
            for j in range(steps_y + 1):
                y = start_y + j * delta_y
                dx, dy = self.F(x, y)
                dx = dx * scale
                dy = dy * scale
                tip_x = x + dx
                tip_y = y + dy

                data_x.extend((x, tip_x))
                data_y.extend((y, tip_y))

                if show_arrow and abs(dx) + abs(dy) > 0.0:
                    theta = math.atan2(dy, dx)
                    phi = theta + alpha
                    data_x.append(tip_x - math.cos(phi) * leg_x)
                    data_y.append(tip_y - math.sin(phi) * leg_y)
                    data_x.append(tip_x)
                    data_y.append(tip_y)
                    phi = theta - alpha
                    data_x.append(tip_x - math.cos(phi) * leg_x)
                    data_y.append(tip_y - math.sin(phi) * leg_y)

                data_x.append(math.nan)
                data_y.append(math.nan)

        self.data_x = data_x
        self.data_y = data_y

        logger.debug(
            "Sampled vector field",
            extra_data={
                "grid_points": grid_points,
                "points": len(data_x),
                "arrowheads": show_arrow,
            },
        )

    @staticmethod
    def _resolve_mesh(mesh: MeshTriple, axis: str) -> Tuple[float, int, float]:
        """Evaluate a (start, steps, end) triple; steps must be a whole number >= 0."""
        start = float(evaluate(mesh[0]))
        steps = evaluate(mesh[1])
        end = float(evaluate(mesh[2]))

        if not (is_number(steps) and steps >= 0 and float(steps).is_integer()):
            raise InvalidMeshError(
                f"Number of steps in {axis} must be a non-negative integer, got {steps!r}",
                axis=axis,
                value=steps,
            )
        return start, int(steps), end

    # camelCase aliases used by board-level scripts

    def setF(self, func: Any) -> 'VectorField':
        return self.set_f(func)

    @property
    def xData(self) -> MeshTriple:
        return self.x_data

    @property
    def yData(self) -> MeshTriple:
        return self.y_data


def create_vector_field(
    board: 'Board',
    parents: Sequence[Any],
    attributes: Optional[Mapping[str, Any]] = None,
) -> VectorField:
    """
    Factory for 'vectorfield' elements.

    Args:
        board: Owning board
        parents: [F, x_data, y_data] where F is a pair [f1, f2] or a
            function returning a pair, and x_data / y_data are
            (start, steps, end) triples. The field holds steps + 1
            vectors along each axis.
        attributes: Visual attributes (scale, arrowhead, styling)

    Returns:
        The vector field element (not yet sampled)

    Raises:
        InvalidParametersError: If the parents have the wrong shape
    """
    if (
        len(parents) >= 3
        and ((is_array(parents[0]) and len(parents[0]) == 2) or is_function(parents[0]))
        and (is_array(parents[1]) and len(parents[1]) == 3)
        and (is_array(parents[2]) and len(parents[2]) == 3)
    ):
        vis_prop = copy_attributes(attributes, board.options, 'vectorfield')
        element = VectorField(board, parents[0], parents[1], parents[2], vis_prop)
        logger.debug("Created vector field", extra_data={"x_data": repr(parents[1]), "y_data": repr(parents[2])})
        return element

    parent_types = [type_name(p) for p in parents[:3]]
    parent_types += ['missing'] * (3 - len(parent_types))
    raise InvalidParametersError('vector field', parent_types)


__all__ = ['VectorField', 'create_vector_field', 'FieldFunction']
